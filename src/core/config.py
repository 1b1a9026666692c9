"""RuntimeConfig — параметры численных доменов и политики переполнения."""

from dataclasses import dataclass

from src.core.domain.types import BALANCE_MAX, BLOCK_NUMBER_MAX, NONCE_MAX


@dataclass(frozen=True)
class RuntimeConfig:
    """Конфигурация runtime.

    - balance_max: верхняя граница Balance (default u128)
    - nonce_max: верхняя граница Nonce (default u32)
    - block_number_max: верхняя граница BlockNumber (default u32)
    - strict_overflow: True → переполнение nonce фатально (CounterOverflowError),
      False → насыщение nonce на границе с warning в лог. Номер блока не
      насыщается ни в одном режиме
    """

    balance_max: int = BALANCE_MAX
    nonce_max: int = NONCE_MAX
    block_number_max: int = BLOCK_NUMBER_MAX
    strict_overflow: bool = True

    def __post_init__(self):
        for name in ("balance_max", "nonce_max", "block_number_max"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive int, got {value!r}")
