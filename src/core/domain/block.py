"""
Block — Модель блока и extrinsic

Immutable Pydantic модели:
- Header: целевой номер блока
- Extrinsic: пара (caller, call)
- Block: header + упорядоченная последовательность extrinsic

Порядок extrinsic семантически значим: это порядок выполнения.
"""

from pydantic import BaseModel, Field, StrictInt

from .calls import RuntimeCall
from .types import BLOCK_NUMBER_MAX


class Header(BaseModel):
    """Заголовок блока."""

    block_number: StrictInt = Field(
        ..., ge=0, le=BLOCK_NUMBER_MAX, description="Номер блока, который ожидает System"
    )

    model_config = {"frozen": True, "extra": "forbid"}


class Extrinsic(BaseModel):
    """Внешне отправленная инструкция (caller, call)."""

    caller: str = Field(..., min_length=1, description="Аккаунт-отправитель")
    call: RuntimeCall = Field(..., description="Вызов паллеты")

    model_config = {"frozen": True, "extra": "forbid"}


class Block(BaseModel):
    """Блок: header и extrinsic в порядке выполнения."""

    header: Header
    extrinsics: tuple[Extrinsic, ...] = Field(
        default_factory=tuple, description="Extrinsic в порядке выполнения"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @classmethod
    def build(cls, block_number: int, *extrinsics: Extrinsic) -> "Block":
        """Сборка блока из номера и списка extrinsic."""
        return cls(header=Header(block_number=block_number), extrinsics=extrinsics)
