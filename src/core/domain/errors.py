"""
Errors — Именованные ошибки runtime

Два уровня ошибок:
- Block-level: BlockNumberMismatchError, блок отклоняется целиком до применения
  любого extrinsic
- Extrinsic-level: наследники DispatchError, перехватываются executor'ом,
  выполнение блока продолжается

CounterOverflowError не является DispatchError: переполнение счётчиков
System в strict режиме фатально и executor его не перехватывает.
"""

from enum import Enum

from .types import AccountId, BlockNumber, Content


class ErrorKind(str, Enum):
    """Машиночитаемый код ошибки."""

    BLOCK_NUMBER_MISMATCH = "BlockNumberMismatch"
    INSUFFICIENT_BALANCE = "InsufficientBalance"
    OVERFLOW = "Overflow"
    CLAIM_ALREADY_EXISTS = "ClaimAlreadyExists"
    CLAIM_NOT_FOUND = "ClaimNotFound"
    NOT_CLAIM_OWNER = "NotClaimOwner"
    COUNTER_OVERFLOW = "CounterOverflow"
    RUNTIME_BUSY = "RuntimeBusy"


class LedgerRuntimeError(Exception):
    """Базовое исключение runtime. Каждый наследник задаёт свой kind."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# =============================================================================
# EXTRINSIC-LEVEL (recoverable)
# =============================================================================


class DispatchError(LedgerRuntimeError):
    """Ошибка выполнения одного call внутри паллеты."""


class InsufficientBalanceError(DispatchError):
    kind = ErrorKind.INSUFFICIENT_BALANCE

    def __init__(self, account: AccountId, balance: int, amount: int):
        super().__init__(
            f"Insufficient balance: {account} has {balance}, needs {amount}"
        )
        self.account = account
        self.balance = balance
        self.amount = amount


class BalanceOverflowError(DispatchError):
    kind = ErrorKind.OVERFLOW

    def __init__(self, account: AccountId, balance: int, amount: int):
        super().__init__(
            f"Overflow: crediting {amount} to {account} (balance {balance}) exceeds Balance range"
        )
        self.account = account
        self.balance = balance
        self.amount = amount


class ClaimAlreadyExistsError(DispatchError):
    kind = ErrorKind.CLAIM_ALREADY_EXISTS

    def __init__(self, content: Content, owner: AccountId):
        super().__init__(f"Claim already exists: {content!r} is owned by {owner}")
        self.content = content
        self.owner = owner


class ClaimNotFoundError(DispatchError):
    kind = ErrorKind.CLAIM_NOT_FOUND

    def __init__(self, content: Content):
        super().__init__(f"Claim not found: {content!r}")
        self.content = content


class NotClaimOwnerError(DispatchError):
    kind = ErrorKind.NOT_CLAIM_OWNER

    def __init__(self, content: Content, caller: AccountId, owner: AccountId):
        super().__init__(
            f"Not claim owner: {content!r} is owned by {owner}, not {caller}"
        )
        self.content = content
        self.caller = caller
        self.owner = owner


# =============================================================================
# BLOCK-LEVEL / FATAL
# =============================================================================


class BlockNumberMismatchError(LedgerRuntimeError):
    """Номер блока в header не совпадает с текущим номером System."""

    kind = ErrorKind.BLOCK_NUMBER_MISMATCH

    def __init__(self, expected: BlockNumber, got: BlockNumber):
        super().__init__(f"Block number mismatch: expected {expected}, got {got}")
        self.expected = expected
        self.got = got


class CounterOverflowError(LedgerRuntimeError):
    """Переполнение nonce или block number в strict режиме."""

    kind = ErrorKind.COUNTER_OVERFLOW

    def __init__(self, counter: str, value: int, max_value: int):
        super().__init__(f"{counter} overflow: {value} + 1 exceeds {max_value}")
        self.counter = counter
        self.value = value
        self.max_value = max_value


class RuntimeBusyError(LedgerRuntimeError):
    """Повторный вход в execute_block во время выполнения блока."""

    kind = ErrorKind.RUNTIME_BUSY

    def __init__(self):
        super().__init__("Runtime is already executing a block")
