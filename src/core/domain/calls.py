"""
Calls — Закрытое перечисление вызовов паллет

Immutable Pydantic модели. Каждая паллета имеет собственное перечисление
вызовов, RuntimeCall объединяет их (union-of-unions), тег `pallet`
определяет паллету-владельца, тег `call` определяет вызов внутри паллеты.

Добавление новой паллеты = новый вариант RuntimeCall, алгоритм выполнения
блока при этом не меняется.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, StrictInt

from .types import BALANCE_MAX


# =============================================================================
# BALANCES CALLS
# =============================================================================


class Transfer(BaseModel):
    """Перевод `amount` от caller к `to`."""

    call: Literal["transfer"] = "transfer"
    to: str = Field(..., min_length=1, description="Аккаунт получателя")
    amount: StrictInt = Field(..., ge=0, le=BALANCE_MAX, description="Сумма перевода")

    model_config = {"frozen": True, "extra": "forbid"}


# =============================================================================
# CLAIMS CALLS
# =============================================================================


class CreateClaim(BaseModel):
    """Заявить владение содержимым `claim`."""

    call: Literal["create_claim"] = "create_claim"
    claim: str = Field(..., min_length=1, description="Содержимое claim")

    model_config = {"frozen": True, "extra": "forbid"}


class RevokeClaim(BaseModel):
    """Отозвать собственный claim."""

    call: Literal["revoke_claim"] = "revoke_claim"
    claim: str = Field(..., min_length=1, description="Содержимое claim")

    model_config = {"frozen": True, "extra": "forbid"}


ClaimsCallKind = Annotated[Union[CreateClaim, RevokeClaim], Field(discriminator="call")]


# =============================================================================
# RUNTIME CALL
# =============================================================================


class BalancesCall(BaseModel):
    """Вариант RuntimeCall для паллеты Balances."""

    pallet: Literal["balances"] = "balances"
    call: Transfer

    model_config = {"frozen": True, "extra": "forbid"}


class ClaimsCall(BaseModel):
    """Вариант RuntimeCall для паллеты Claims."""

    pallet: Literal["claims"] = "claims"
    call: ClaimsCallKind

    model_config = {"frozen": True, "extra": "forbid"}


RuntimeCall = Annotated[Union[BalancesCall, ClaimsCall], Field(discriminator="pallet")]


# =============================================================================
# CONVENIENCE CONSTRUCTORS
# =============================================================================


def transfer(to: str, amount: int) -> BalancesCall:
    return BalancesCall(call=Transfer(to=to, amount=amount))


def create_claim(claim: str) -> ClaimsCall:
    return ClaimsCall(call=CreateClaim(claim=claim))


def revoke_claim(claim: str) -> ClaimsCall:
    return ClaimsCall(call=RevokeClaim(claim=claim))
