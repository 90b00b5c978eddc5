"""
Exception types for the fatal conditions of the engine.

Each error also derives from the matching built-in exception, so callers
may catch `ValueError`, `OverflowError` or `ZeroDivisionError` directly.
Theoretically impossible outcomes are not errors; they are pruned silently.
"""

from __future__ import annotations


class DiceError(Exception):
    """Base class for errors raised by cdice."""


class ConstraintIdMismatchError(DiceError, ValueError):
    """Two constraints with different ids were combined."""

    def __init__(self, left_id: int, right_id: int) -> None:
        self.left_id = int(left_id)
        self.right_id = int(right_id)
        super().__init__(
            f"Cannot combine constraints with different ids: {self.left_id} != {self.right_id}"
        )


class DiceArithmeticError(DiceError, ArithmeticError):
    """Base class for arithmetic faults on values or counts."""


class ValueOverflowError(DiceArithmeticError, OverflowError):
    """A value operation left the signed 32-bit range."""


class CountOverflowError(DiceArithmeticError, OverflowError):
    """An outcome count left the unsigned 64-bit range."""


class DivisionByZeroError(DiceArithmeticError, ZeroDivisionError):
    """Division or remainder by a zero value."""
