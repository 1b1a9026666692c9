"""Balances — паллета учёта балансов аккаунтов.

Владеет mapping AccountId → Balance. Аккаунт без записи имеет нулевой баланс.

Инварианты:
- Баланс никогда не отрицательный и не превышает balance_max
- Успешный перевод сохраняет сумму балансов отправителя и получателя
- Неуспешный перевод не меняет ни одного баланса (all-or-nothing):
  checked-арифметика вычисляется до любой записи
"""

import logging
from typing import Iterable, Optional

from src.core.config import RuntimeConfig
from src.core.domain.calls import Transfer
from src.core.domain.errors import BalanceOverflowError, InsufficientBalanceError
from src.core.domain.types import AccountId, Balance, validate_account_id, validate_unsigned
from src.core.math.checked import checked_add, checked_sub

logger = logging.getLogger(__name__)


class BalancesPallet:
    """Паллета Balances."""

    def __init__(self, config: Optional[RuntimeConfig] = None):
        self.config = config or RuntimeConfig()
        self._balances: dict[AccountId, Balance] = {}

    @classmethod
    def from_genesis(
        cls,
        data: Iterable[tuple[AccountId, Balance]],
        config: Optional[RuntimeConfig] = None,
    ) -> "BalancesPallet":
        """Паллета с предзаполненными балансами."""
        pallet = cls(config)
        for account, amount in data:
            pallet.set_balance(account, amount)
        return pallet

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def balance_of(self, account: AccountId) -> Balance:
        """Баланс аккаунта, 0 если запись отсутствует."""
        return self._balances.get(account, 0)

    def get_balance(self, account: AccountId) -> Optional[Balance]:
        """Баланс аккаунта, None если запись никогда не создавалась."""
        return self._balances.get(account)

    def total_issuance(self) -> int:
        return sum(self._balances.values())

    def accounts(self) -> dict[AccountId, Balance]:
        """Копия балансов, отсортированная по аккаунту."""
        return dict(sorted(self._balances.items()))

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def set_balance(self, account: AccountId, amount: Balance) -> None:
        """Безусловная запись баланса. Только для genesis, не dispatchable.

        Raises:
            ValueError: Если account пустой или amount вне [0, balance_max]
        """
        validate_account_id(account)
        validate_unsigned(amount, "amount", self.config.balance_max)
        self._balances[account] = amount
        logger.debug("set_balance %s=%d", account, amount)

    def transfer(self, sender: AccountId, receiver: AccountId, amount: Balance) -> None:
        """Перевод amount от sender к receiver.

        sender == receiver допустим и не меняет баланс. Нулевой перевод
        успешен и ничего не меняет.

        Raises:
            InsufficientBalanceError: amount больше баланса sender
            BalanceOverflowError: баланс receiver превысит balance_max
            ValueError: sender или receiver пустой
        """
        validate_account_id(sender, "sender")
        validate_account_id(receiver, "receiver")

        sender_balance = self.balance_of(sender)
        new_sender_balance = checked_sub(sender_balance, amount)
        if new_sender_balance is None:
            raise InsufficientBalanceError(sender, sender_balance, amount)

        # Вычитание и сложение взаимно сокращаются
        if amount == 0 or receiver == sender:
            return

        receiver_balance = self.balance_of(receiver)
        new_receiver_balance = checked_add(receiver_balance, amount, self.config.balance_max)
        if new_receiver_balance is None:
            raise BalanceOverflowError(receiver, receiver_balance, amount)

        self._balances[sender] = new_sender_balance
        self._balances[receiver] = new_receiver_balance
        logger.debug("transfer %s -> %s: %d", sender, receiver, amount)

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, caller: AccountId, call: Transfer) -> None:
        if isinstance(call, Transfer):
            self.transfer(caller, call.to, call.amount)
        else:
            raise TypeError(f"Unknown balances call: {type(call).__name__}")
