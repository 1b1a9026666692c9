"""
Types — Базовые семантические типы runtime

Единые типы для всех паллет:
- AccountId (идентичность аккаунта, ключ во всех mapping)
- Balance (беззнаковая сумма, 128 бит)
- Nonce (счётчик отправленных extrinsic, 32 бита)
- BlockNumber (номер блока, 32 бита)
- Content (содержимое claim)

ЗАПРЕЩЕНО записывать в состояние значение вне диапазона типа:
все проверки проходят через валидаторы этого модуля.
"""

from typing import Final, TypeAlias


# =============================================================================
# ТИПЫ
# =============================================================================

# Непрозрачная идентичность. Единственная семантика: равенство и порядок.
AccountId: TypeAlias = str

Balance: TypeAlias = int
Nonce: TypeAlias = int
BlockNumber: TypeAlias = int

# Содержимое claim: упорядочиваемое и сравнимое значение
Content: TypeAlias = str


# =============================================================================
# ГРАНИЦЫ ДИАПАЗОНОВ
# =============================================================================

# u128
BALANCE_MAX: Final[int] = 2**128 - 1

# u32
NONCE_MAX: Final[int] = 2**32 - 1

# u32
BLOCK_NUMBER_MAX: Final[int] = 2**32 - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_unsigned(value: int, name: str, max_value: int) -> None:
    """
    Валидация беззнакового целого в диапазоне [0, max_value].

    bool формально является int в Python, но как сумма/счётчик не допускается.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        max_value: Верхняя граница (включительно)

    Raises:
        ValueError: Если value не int, отрицательное или больше max_value
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")

    if value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")


def validate_account_id(account: AccountId, name: str = "account") -> None:
    """
    Валидация идентификатора аккаунта.

    Raises:
        ValueError: Если account не строка или пустая строка
    """
    if not isinstance(account, str):
        raise ValueError(f"{name} must be a str, got {type(account).__name__}")

    if not account:
        raise ValueError(f"{name} must be non-empty")


def validate_content(content: Content) -> None:
    """Валидация содержимого claim (непустая строка)."""
    if not isinstance(content, str):
        raise ValueError(f"content must be a str, got {type(content).__name__}")

    if not content:
        raise ValueError("content must be non-empty")
