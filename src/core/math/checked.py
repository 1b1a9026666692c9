"""
Checked Arithmetic — Безопасная целочисленная арифметика

Модуль обеспечивает арифметику беззнаковых счётчиков и сумм без
переполнения и ухода в минус:
- checked_add / checked_sub: возвращают None вместо результата вне диапазона
- saturating_add: ограничивает результат верхней границей

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат никогда не выходит за пределы [0, max_value]
2. Ошибка определяется ДО записи в состояние (caller решает, что делать с None)
3. Все операции детерминированы
"""

from typing import Optional


def _validate_operand(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def checked_add(a: int, b: int, max_value: int) -> Optional[int]:
    """
    Сложение с проверкой переполнения.

    Args:
        a: Первое слагаемое (>= 0)
        b: Второе слагаемое (>= 0)
        max_value: Верхняя граница типа (включительно)

    Returns:
        a + b, или None если сумма больше max_value

    Raises:
        ValueError: Если операнды не неотрицательные int

    Examples:
        >>> checked_add(1, 2, 10)
        3
        >>> checked_add(9, 2, 10) is None
        True
    """
    _validate_operand(a, "a")
    _validate_operand(b, "b")

    result = a + b
    if result > max_value:
        return None
    return result


def checked_sub(a: int, b: int) -> Optional[int]:
    """
    Вычитание с проверкой ухода в минус.

    Args:
        a: Уменьшаемое (>= 0)
        b: Вычитаемое (>= 0)

    Returns:
        a - b, или None если b > a

    Examples:
        >>> checked_sub(10, 3)
        7
        >>> checked_sub(3, 10) is None
        True
    """
    _validate_operand(a, "a")
    _validate_operand(b, "b")

    if b > a:
        return None
    return a - b


def saturating_add(a: int, b: int, max_value: int) -> int:
    """
    Сложение с насыщением: min(a + b, max_value).

    Examples:
        >>> saturating_add(9, 2, 10)
        10
    """
    result = checked_add(a, b, max_value)
    if result is None:
        return max_value
    return result
