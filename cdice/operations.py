"""
Checked binary and unary operations on values.

Every operator of outcomes and distributions reduces to one of these
functions. They behave like fixed-width signed 32-bit integer arithmetic
with trapping: a result outside the value range raises
`ValueOverflowError`, and a zero divisor raises `DivisionByZeroError`.
Division truncates toward zero and the remainder takes the sign of the
dividend.
"""

from __future__ import annotations

from numbers import Integral

from cdice.errors import DivisionByZeroError, ValueOverflowError
from cdice.types import VALUE_MAX, VALUE_MIN, BinaryOperation, ValueType


def check_integer(value: object, *, name: str = "value") -> int:
    """
    Return `value` as a plain int, rejecting floats, bools and other non-integers.

    Raises:
        TypeError: If `value` is not an integer.
    """
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise TypeError(f"{name} must be an integer, got {value!r}")
    return int(value)


def check_value(value: int, *, operation: str = "value") -> ValueType:
    """
    Return `value` as a plain int if it fits the value range.

    Raises:
        TypeError: If `value` is not an integer.
        ValueOverflowError: If `value` lies outside [VALUE_MIN, VALUE_MAX].
    """
    v = check_integer(value, name=operation)
    if v < VALUE_MIN or v > VALUE_MAX:
        raise ValueOverflowError(
            f"{operation} overflow: {v} outside range [{VALUE_MIN}, {VALUE_MAX}]"
        )
    return v


def add(lhs: ValueType, rhs: ValueType) -> ValueType:
    return check_value(lhs + rhs, operation="add")


def sub(lhs: ValueType, rhs: ValueType) -> ValueType:
    return check_value(lhs - rhs, operation="sub")


def mul(lhs: ValueType, rhs: ValueType) -> ValueType:
    return check_value(lhs * rhs, operation="mul")


def div(lhs: ValueType, rhs: ValueType) -> ValueType:
    """Integer division truncating toward zero."""
    if rhs == 0:
        raise DivisionByZeroError(f"div by zero: {lhs} / 0")
    quotient = abs(lhs) // abs(rhs)
    if (lhs < 0) != (rhs < 0):
        quotient = -quotient
    return check_value(quotient, operation="div")


def rem(lhs: ValueType, rhs: ValueType) -> ValueType:
    """Remainder with the sign of the dividend, so that lhs == div(lhs, rhs) * rhs + rem(lhs, rhs)."""
    if rhs == 0:
        raise DivisionByZeroError(f"rem by zero: {lhs} % 0")
    if lhs == VALUE_MIN and rhs == -1:
        # Traps like MIN / -1 does.
        raise ValueOverflowError(f"rem overflow: {lhs} % {rhs}")
    remainder = abs(lhs) % abs(rhs)
    return -remainder if lhs < 0 else remainder


def bitand(lhs: ValueType, rhs: ValueType) -> ValueType:
    return lhs & rhs


def bitor(lhs: ValueType, rhs: ValueType) -> ValueType:
    return lhs | rhs


def bitxor(lhs: ValueType, rhs: ValueType) -> ValueType:
    return lhs ^ rhs


def neg(value: ValueType) -> ValueType:
    return mul(value, -1)


def invert(value: ValueType) -> ValueType:
    # Two's complement keeps ~x inside the range for every in-range x.
    return ~value


def flip(operation: BinaryOperation) -> BinaryOperation:
    """Return `operation` with its operands swapped."""

    def flipped(lhs: ValueType, rhs: ValueType) -> ValueType:
        return operation(rhs, lhs)

    flipped.__name__ = f"flipped_{getattr(operation, '__name__', 'operation')}"
    return flipped
