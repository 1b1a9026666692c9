"""Runtime — dispatch вызовов и выполнение блоков.

- Dispatchable: единый контракт паллет
- Runtime: композиция System/Balances/Claims, execute_block
"""

from .dispatch import Dispatchable
from .executor import (
    BlockExecutionResult,
    ExecutorPhase,
    ExtrinsicOutcome,
    Runtime,
)

__all__ = [
    "Dispatchable",
    "Runtime",
    "ExecutorPhase",
    "ExtrinsicOutcome",
    "BlockExecutionResult",
]
