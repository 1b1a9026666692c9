"""
GenesisConfig — Начальное состояние до первого блока

Immutable Pydantic модель. Задаёт стартовый номер блока, балансы и nonce
аккаунтов. Пустой GenesisConfig соответствует нулевому состоянию runtime.
"""

from pydantic import BaseModel, Field, StrictInt, field_validator

from .types import BALANCE_MAX, BLOCK_NUMBER_MAX, NONCE_MAX


class GenesisConfig(BaseModel):
    """Конфигурация genesis."""

    block_number: StrictInt = Field(
        default=0, ge=0, le=BLOCK_NUMBER_MAX, description="Стартовый номер блока"
    )
    balances: dict[str, StrictInt] = Field(
        default_factory=dict, description="Начальные балансы аккаунтов"
    )
    nonces: dict[str, StrictInt] = Field(
        default_factory=dict, description="Начальные nonce аккаунтов"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @field_validator("balances")
    @classmethod
    def validate_balances(cls, v: dict[str, int]) -> dict[str, int]:
        for account, amount in v.items():
            if not account:
                raise ValueError("balance account must be non-empty")
            if not 0 <= amount <= BALANCE_MAX:
                raise ValueError(f"balance of {account} out of range: {amount}")
        return v

    @field_validator("nonces")
    @classmethod
    def validate_nonces(cls, v: dict[str, int]) -> dict[str, int]:
        for account, nonce in v.items():
            if not account:
                raise ValueError("nonce account must be non-empty")
            if not 0 <= nonce <= NONCE_MAX:
                raise ValueError(f"nonce of {account} out of range: {nonce}")
        return v
