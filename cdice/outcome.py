"""
Probability outcomes: one concrete value plus the constraints it carries.

Two outcomes are equal only when both the value and the full constraint map
match. The same value reached through different provenance is a different
outcome, because later combinations may prune one and keep the other.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from numbers import Integral
from typing import Iterable, Optional, Tuple

from cdice import operations as ops
from cdice.constraint import Constraint
from cdice.constraint_map import ConstraintMap
from cdice.operations import check_value
from cdice.types import BinaryOperation, UnaryOperation, ValueType


@total_ordering
@dataclass(frozen=True, eq=True)
class ProbabilityOutcome:
    """
    Immutable `(value, constraint_map)` pair, ordered value first.
    """

    value: ValueType
    constraint_map: ConstraintMap

    def __init__(self, value: ValueType, constraint_map: Optional[ConstraintMap] = None) -> None:
        if constraint_map is None:
            constraint_map = ConstraintMap.new_empty()
        if not isinstance(constraint_map, ConstraintMap):
            raise TypeError(
                f"constraint_map must be a ConstraintMap, got {type(constraint_map).__name__}"
            )
        object.__setattr__(self, "value", check_value(value))
        object.__setattr__(self, "constraint_map", constraint_map)

    @classmethod
    def new_with_empty_constraint_map(cls, value: ValueType) -> "ProbabilityOutcome":
        return cls(value, ConstraintMap.new_empty())

    @classmethod
    def new_with_constraint_map(
        cls, value: ValueType, constraint_map: ConstraintMap
    ) -> "ProbabilityOutcome":
        return cls(value, constraint_map)

    @classmethod
    def new_with_constraints(
        cls, value: ValueType, constraints: Iterable[Constraint]
    ) -> "ProbabilityOutcome":
        return cls(value, ConstraintMap.new_many(constraints))

    def combine(self, other: "ProbabilityOutcome", binary_operation: BinaryOperation) -> "ProbabilityOutcome":
        """
        Combine two outcomes as `binary_operation(self.value, other.value)`.

        The constraint maps are combined by intersection; the result may be
        theoretically impossible and it is up to the caller to check.
        """
        return ProbabilityOutcome(
            binary_operation(self.value, other.value),
            self.constraint_map.combine(other.constraint_map),
        )

    def combine_value_type(self, other: ValueType, binary_operation: BinaryOperation) -> "ProbabilityOutcome":
        """`binary_operation(self.value, other)`; the constraint map is kept unchanged."""
        return ProbabilityOutcome(binary_operation(self.value, other), self.constraint_map)

    def value_type_combine(self, other: ValueType, binary_operation: BinaryOperation) -> "ProbabilityOutcome":
        """`binary_operation(other, self.value)`; the constraint map is kept unchanged."""
        return ProbabilityOutcome(binary_operation(other, self.value), self.constraint_map)

    def apply(self, unary_operation: UnaryOperation) -> "ProbabilityOutcome":
        return ProbabilityOutcome(unary_operation(self.value), self.constraint_map)

    def add_constraint(self, constraint: Constraint) -> "ProbabilityOutcome":
        return ProbabilityOutcome(self.value, self.constraint_map.add_constraint(constraint))

    def is_theoretically_possible(self) -> bool:
        return self.constraint_map.is_theoretically_possible()

    def sort_key(self) -> Tuple[ValueType, tuple]:
        return (self.value, self.constraint_map.sort_key())

    def _dispatch(self, other: object, operation: BinaryOperation):
        if isinstance(other, ProbabilityOutcome):
            return self.combine(other, operation)
        if isinstance(other, Integral):
            return self.combine_value_type(int(other), operation)
        return NotImplemented

    def _dispatch_reflected(self, other: object, operation: BinaryOperation):
        if isinstance(other, Integral):
            return self.value_type_combine(int(other), operation)
        return NotImplemented

    def __add__(self, other: object):
        if isinstance(other, Constraint):
            return self.add_constraint(other)
        return self._dispatch(other, ops.add)

    def __radd__(self, other: object):
        if isinstance(other, Constraint):
            return self.add_constraint(other)
        return self._dispatch_reflected(other, ops.add)

    def __sub__(self, other: object):
        return self._dispatch(other, ops.sub)

    def __rsub__(self, other: object):
        return self._dispatch_reflected(other, ops.sub)

    def __mul__(self, other: object):
        return self._dispatch(other, ops.mul)

    def __rmul__(self, other: object):
        return self._dispatch_reflected(other, ops.mul)

    def __truediv__(self, other: object):
        return self._dispatch(other, ops.div)

    def __rtruediv__(self, other: object):
        return self._dispatch_reflected(other, ops.div)

    __floordiv__ = __truediv__
    __rfloordiv__ = __rtruediv__

    def __mod__(self, other: object):
        return self._dispatch(other, ops.rem)

    def __rmod__(self, other: object):
        return self._dispatch_reflected(other, ops.rem)

    def __and__(self, other: object):
        return self._dispatch(other, ops.bitand)

    def __rand__(self, other: object):
        return self._dispatch_reflected(other, ops.bitand)

    def __or__(self, other: object):
        return self._dispatch(other, ops.bitor)

    def __ror__(self, other: object):
        return self._dispatch_reflected(other, ops.bitor)

    def __xor__(self, other: object):
        return self._dispatch(other, ops.bitxor)

    def __rxor__(self, other: object):
        return self._dispatch_reflected(other, ops.bitxor)

    def __neg__(self) -> "ProbabilityOutcome":
        return self.apply(ops.neg)

    def __invert__(self) -> "ProbabilityOutcome":
        return self.apply(ops.invert)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ProbabilityOutcome):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"ProbabilityOutcome(value={self.value}, constraint_map={self.constraint_map!r})"
