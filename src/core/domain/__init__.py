"""
Domain models and value objects.

Contains fundamental domain entities: semantic types, calls, blocks,
genesis configuration, state snapshots and named errors.
"""

from src.core.domain.block import Block, Extrinsic, Header
from src.core.domain.calls import (
    BalancesCall,
    ClaimsCall,
    CreateClaim,
    RevokeClaim,
    RuntimeCall,
    Transfer,
    create_claim,
    revoke_claim,
    transfer,
)
from src.core.domain.errors import (
    BalanceOverflowError,
    BlockNumberMismatchError,
    ClaimAlreadyExistsError,
    ClaimNotFoundError,
    CounterOverflowError,
    DispatchError,
    ErrorKind,
    InsufficientBalanceError,
    LedgerRuntimeError,
    NotClaimOwnerError,
    RuntimeBusyError,
)
from src.core.domain.genesis import GenesisConfig
from src.core.domain.snapshot import RuntimeSnapshot
from src.core.domain.types import (
    BALANCE_MAX,
    BLOCK_NUMBER_MAX,
    NONCE_MAX,
    AccountId,
    Balance,
    BlockNumber,
    Content,
    Nonce,
    validate_account_id,
    validate_content,
    validate_unsigned,
)

__all__ = [
    # Types
    "AccountId",
    "Balance",
    "BlockNumber",
    "Content",
    "Nonce",
    "BALANCE_MAX",
    "BLOCK_NUMBER_MAX",
    "NONCE_MAX",
    "validate_account_id",
    "validate_content",
    "validate_unsigned",
    # Calls
    "Transfer",
    "CreateClaim",
    "RevokeClaim",
    "BalancesCall",
    "ClaimsCall",
    "RuntimeCall",
    "transfer",
    "create_claim",
    "revoke_claim",
    # Block
    "Block",
    "Extrinsic",
    "Header",
    # Genesis / snapshot
    "GenesisConfig",
    "RuntimeSnapshot",
    # Errors
    "ErrorKind",
    "LedgerRuntimeError",
    "DispatchError",
    "InsufficientBalanceError",
    "BalanceOverflowError",
    "ClaimAlreadyExistsError",
    "ClaimNotFoundError",
    "NotClaimOwnerError",
    "BlockNumberMismatchError",
    "CounterOverflowError",
    "RuntimeBusyError",
]
