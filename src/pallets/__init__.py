"""Pallets — независимые модули состояния runtime.

Каждая паллета владеет одним срезом состояния и одним семейством вызовов:
- System: номер блока и nonce аккаунтов
- Balances: балансы аккаунтов, переводы
- Claims: владение содержимым (proof of existence)
"""

from .balances import BalancesPallet
from .claims import ClaimsPallet
from .system import SystemPallet

__all__ = [
    "BalancesPallet",
    "ClaimsPallet",
    "SystemPallet",
]
