"""
Core math modules

Целочисленные примитивы с гарантией отсутствия переполнения.
"""

from src.core.math.checked import checked_add, checked_sub, saturating_add

__all__ = [
    "checked_add",
    "checked_sub",
    "saturating_add",
]
