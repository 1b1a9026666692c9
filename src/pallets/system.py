"""System — паллета учёта номера блока и nonce аккаунтов.

- block_number стартует с 0 и растёт ровно на 1 за каждый принятый блок
- nonce аккаунта растёт ровно на 1 за каждый отправленный extrinsic,
  независимо от результата dispatch

Переполнение счётчиков:
- block_number: всегда CounterOverflowError, номер блока не насыщается
- nonce, strict_overflow=True (default): CounterOverflowError
- nonce, strict_overflow=False: насыщение на границе диапазона, warning в лог
"""

import logging
from typing import Iterable, Mapping, Optional

from src.core.config import RuntimeConfig
from src.core.domain.errors import CounterOverflowError
from src.core.domain.types import (
    AccountId,
    BlockNumber,
    Nonce,
    validate_account_id,
    validate_unsigned,
)
from src.core.math.checked import checked_add

logger = logging.getLogger(__name__)


class SystemPallet:
    """Паллета System. Не имеет dispatchable вызовов."""

    def __init__(self, config: Optional[RuntimeConfig] = None):
        self.config = config or RuntimeConfig()
        self._block_number: BlockNumber = 0
        self._nonces: dict[AccountId, Nonce] = {}

    @classmethod
    def from_genesis(
        cls,
        block_number: BlockNumber = 0,
        nonces: Iterable[tuple[AccountId, Nonce]] = (),
        config: Optional[RuntimeConfig] = None,
    ) -> "SystemPallet":
        """Паллета со стартовым номером блока и nonce."""
        pallet = cls(config)
        validate_unsigned(block_number, "block_number", pallet.config.block_number_max)
        pallet._block_number = block_number

        for account, nonce in nonces:
            validate_account_id(account)
            validate_unsigned(nonce, "nonce", pallet.config.nonce_max)
            pallet._nonces[account] = nonce

        return pallet

    # -------------------------------------------------------------------------
    # Block number
    # -------------------------------------------------------------------------

    def block_number(self) -> BlockNumber:
        return self._block_number

    def increment_block_number(self) -> BlockNumber:
        """Увеличить номер блока на 1 и вернуть новое значение.

        Номер блока никогда не насыщается, блок с номером на границе отклоняется.

        Raises:
            CounterOverflowError: при достижении block_number_max в любом режиме
        """
        self._block_number = self._increment(
            "block_number", self._block_number, self.config.block_number_max, saturate=False
        )
        return self._block_number

    # -------------------------------------------------------------------------
    # Nonce
    # -------------------------------------------------------------------------

    def nonce_of(self, account: AccountId) -> Nonce:
        """Nonce аккаунта, 0 если аккаунт не встречался."""
        return self._nonces.get(account, 0)

    def increment_nonce(self, account: AccountId) -> None:
        """Увеличить nonce аккаунта на 1, создав запись при отсутствии.

        Raises:
            CounterOverflowError: в strict режиме при достижении nonce_max
        """
        self._nonces[account] = self._increment(
            f"nonce of {account}",
            self.nonce_of(account),
            self.config.nonce_max,
            saturate=not self.config.strict_overflow,
        )

    def nonces(self) -> dict[AccountId, Nonce]:
        """Копия nonce, отсортированная по аккаунту."""
        return dict(sorted(self._nonces.items()))

    # -------------------------------------------------------------------------
    # Block capacity
    # -------------------------------------------------------------------------

    def check_block_capacity(self, extrinsic_counts: Mapping[AccountId, int]) -> None:
        """Проверить, что блок можно выполнить целиком без переполнения счётчиков.

        Вызывается до применения первого extrinsic: блок, который упал бы на
        переполнении посреди выполнения, отклоняется без изменения состояния.

        Args:
            extrinsic_counts: число extrinsic каждого caller в блоке

        Raises:
            CounterOverflowError: block_number уже на границе, либо в strict
                режиме nonce какого-то caller не вмещает его extrinsic
        """
        if self._block_number >= self.config.block_number_max:
            raise CounterOverflowError(
                "block_number", self._block_number, self.config.block_number_max
            )

        if not self.config.strict_overflow:
            return

        for account, count in sorted(extrinsic_counts.items()):
            nonce = self.nonce_of(account)
            if checked_add(nonce, count, self.config.nonce_max) is None:
                raise CounterOverflowError(
                    f"nonce of {account}", nonce + count - 1, self.config.nonce_max
                )

    def _increment(self, counter: str, value: int, max_value: int, saturate: bool) -> int:
        new_value = checked_add(value, 1, max_value)
        if new_value is not None:
            return new_value

        if not saturate:
            raise CounterOverflowError(counter, value, max_value)

        logger.warning("%s saturated at %d", counter, max_value)
        return max_value
