"""
Contract Validation Module

Модуль для валидации JSON контрактов runtime (block, genesis).
"""

from .validators import (
    BlockValidator,
    ContractValidator,
    GenesisValidator,
    SchemaLoader,
    parse_block,
    parse_genesis,
    validate_block,
    validate_genesis,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BlockValidator",
    "GenesisValidator",
    # Functions
    "validate_block",
    "validate_genesis",
    "parse_block",
    "parse_genesis",
]
