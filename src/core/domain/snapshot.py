"""
RuntimeSnapshot — Снапшот состояния runtime

Immutable Pydantic модель, представляющая состояние всех паллет между
блоками. Словари отсортированы по ключу, поэтому два снапшота одного
состояния совпадают побайтово после model_dump_json().
"""

from pydantic import BaseModel, Field


class RuntimeSnapshot(BaseModel):
    """
    Снапшот состояния runtime.

    - block_number: текущий номер блока (System)
    - nonces: nonce аккаунтов (System)
    - balances: балансы аккаунтов (Balances)
    - claims: владельцы claim (Claims)
    """

    block_number: int = Field(..., ge=0, description="Текущий номер блока")
    nonces: dict[str, int] = Field(default_factory=dict, description="Nonce аккаунтов")
    balances: dict[str, int] = Field(default_factory=dict, description="Балансы аккаунтов")
    claims: dict[str, str] = Field(default_factory=dict, description="content → owner")

    model_config = {"frozen": True}

    @property
    def total_issuance(self) -> int:
        """Сумма всех балансов."""
        return sum(self.balances.values())
