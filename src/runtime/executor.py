"""Runtime — композиция паллет и выполнение блоков.

Состояния executor:
- IDLE: блок не выполняется
- EXECUTING: идёт перебор extrinsic текущего блока

Алгоритм выполнения блока:
1. header.block_number != System.block_number → BlockNumberMismatchError,
   ни один extrinsic не применяется
2. Переполнение block_number или (strict) nonce любого caller →
   CounterOverflowError до применения первого extrinsic
3. Для каждого extrinsic по порядку:
   - nonce caller увеличивается ДО dispatch и независимо от результата
   - dispatch в паллету-владельца
   - DispatchError логируется и записывается в outcome, блок продолжается,
     предыдущие extrinsic не откатываются
4. block_number увеличивается ровно на 1
"""

import logging
from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.config import RuntimeConfig
from src.core.domain.block import Block
from src.core.domain.calls import BalancesCall, ClaimsCall, RuntimeCall
from src.core.domain.errors import (
    BlockNumberMismatchError,
    CounterOverflowError,
    DispatchError,
    ErrorKind,
    RuntimeBusyError,
)
from src.core.domain.genesis import GenesisConfig
from src.core.domain.snapshot import RuntimeSnapshot
from src.core.domain.types import AccountId, Balance, BlockNumber, Content, Nonce
from src.pallets.balances import BalancesPallet
from src.pallets.claims import ClaimsPallet
from src.pallets.system import SystemPallet

logger = logging.getLogger(__name__)


class ExecutorPhase(str, Enum):
    """Фаза executor."""

    IDLE = "IDLE"
    EXECUTING = "EXECUTING"


@dataclass(frozen=True)
class ExtrinsicOutcome:
    """Результат одного extrinsic."""

    index: int
    caller: AccountId
    pallet: str
    success: bool
    error: Optional[ErrorKind] = None
    details: str = ""


@dataclass(frozen=True)
class BlockExecutionResult:
    """Результат выполнения принятого блока."""

    block_number: BlockNumber
    outcomes: tuple[ExtrinsicOutcome, ...]

    @property
    def succeeded(self) -> tuple[ExtrinsicOutcome, ...]:
        return tuple(o for o in self.outcomes if o.success)

    @property
    def failed(self) -> tuple[ExtrinsicOutcome, ...]:
        return tuple(o for o in self.outcomes if not o.success)


class Runtime:
    """Runtime: System + Balances + Claims.

    Все состояние паллет принадлежит экземпляру Runtime и изменяется только
    через execute_block (и genesis-запись балансов до первого блока).
    """

    def __init__(self, config: Optional[RuntimeConfig] = None):
        self.config = config or RuntimeConfig()
        self.system = SystemPallet(self.config)
        self.balances = BalancesPallet(self.config)
        self.claims = ClaimsPallet()
        self._phase = ExecutorPhase.IDLE

    @classmethod
    def from_genesis(
        cls, genesis: GenesisConfig, config: Optional[RuntimeConfig] = None
    ) -> "Runtime":
        """Runtime с начальным состоянием из GenesisConfig."""
        runtime = cls(config)
        runtime.system = SystemPallet.from_genesis(
            genesis.block_number, genesis.nonces.items(), runtime.config
        )
        runtime.balances = BalancesPallet.from_genesis(
            genesis.balances.items(), runtime.config
        )
        logger.info(
            "Genesis: block_number=%d, accounts=%d, issuance=%d",
            genesis.block_number,
            len(genesis.balances),
            runtime.balances.total_issuance(),
        )
        return runtime

    @property
    def phase(self) -> ExecutorPhase:
        return self._phase

    # -------------------------------------------------------------------------
    # Read-only queries
    # -------------------------------------------------------------------------

    def balance_of(self, account: AccountId) -> Balance:
        return self.balances.balance_of(account)

    def block_number(self) -> BlockNumber:
        return self.system.block_number()

    def nonce_of(self, account: AccountId) -> Nonce:
        return self.system.nonce_of(account)

    def get_claim(self, content: Content) -> Optional[AccountId]:
        return self.claims.get_claim(content)

    def snapshot(self) -> RuntimeSnapshot:
        """Снапшот состояния всех паллет."""
        return RuntimeSnapshot(
            block_number=self.system.block_number(),
            nonces=self.system.nonces(),
            balances=self.balances.accounts(),
            claims=self.claims.claims(),
        )

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, caller: AccountId, runtime_call: RuntimeCall) -> None:
        """Развернуть вариант RuntimeCall и передать вызов паллете-владельцу."""
        if isinstance(runtime_call, BalancesCall):
            self.balances.dispatch(caller, runtime_call.call)
        elif isinstance(runtime_call, ClaimsCall):
            self.claims.dispatch(caller, runtime_call.call)
        else:
            raise TypeError(f"Unknown runtime call: {type(runtime_call).__name__}")

    # -------------------------------------------------------------------------
    # Block execution
    # -------------------------------------------------------------------------

    def execute_block(self, block: Block) -> BlockExecutionResult:
        """Выполнить блок.

        Args:
            block: блок с header.block_number == текущему номеру System

        Returns:
            BlockExecutionResult с outcome каждого extrinsic

        Raises:
            BlockNumberMismatchError: номер блока не совпадает, состояние не изменено
            CounterOverflowError: блок переполнил бы nonce или block_number,
                состояние не изменено
            RuntimeBusyError: блок уже выполняется
        """
        if self._phase != ExecutorPhase.IDLE:
            raise RuntimeBusyError()

        expected = self.system.block_number()
        if block.header.block_number != expected:
            logger.warning(
                "Block rejected: expected block_number=%d, got %d",
                expected,
                block.header.block_number,
            )
            raise BlockNumberMismatchError(expected, block.header.block_number)

        try:
            self.system.check_block_capacity(Counter(x.caller for x in block.extrinsics))
        except CounterOverflowError as e:
            logger.warning("Block rejected: block_number=%d: %s", expected, e.message)
            raise

        self._phase = ExecutorPhase.EXECUTING
        try:
            outcomes = tuple(
                self._apply_extrinsic(
                    block.header.block_number, index, extrinsic.caller, extrinsic.call
                )
                for index, extrinsic in enumerate(block.extrinsics)
            )
            self.system.increment_block_number()
        finally:
            self._phase = ExecutorPhase.IDLE

        result = BlockExecutionResult(block_number=block.header.block_number, outcomes=outcomes)
        logger.info(
            "Block %d executed: %d extrinsics, %d failed",
            result.block_number,
            len(outcomes),
            len(result.failed),
        )
        return result

    def _apply_extrinsic(
        self,
        block_number: BlockNumber,
        index: int,
        caller: AccountId,
        call: RuntimeCall,
    ) -> ExtrinsicOutcome:
        # TODO: revisit whether nonce should only advance on successful dispatch
        self.system.increment_nonce(caller)

        try:
            self.dispatch(caller, call)
        except DispatchError as e:
            logger.warning(
                "Extrinsic failed: block=%d index=%d caller=%s error=%s: %s",
                block_number,
                index,
                caller,
                e.kind.value,
                e.message,
            )
            return ExtrinsicOutcome(
                index=index,
                caller=caller,
                pallet=call.pallet,
                success=False,
                error=e.kind,
                details=e.message,
            )

        logger.debug("Extrinsic applied: block=%d index=%d caller=%s", block_number, index, caller)
        return ExtrinsicOutcome(index=index, caller=caller, pallet=call.pallet, success=True)
