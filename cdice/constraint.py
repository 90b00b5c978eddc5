"""
Constraints: the still-admissible values of one source of randomness.

A constraint ties an outcome to a source id (for example "die #3") and
lists the values that source may still show. Combining two constraints on
the same source keeps only the values both allow; an empty result means the
joint realization cannot happen.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Tuple

from cdice.errors import ConstraintIdMismatchError
from cdice.operations import check_value
from cdice.types import ConstraintIdType, ValueType, ValueTypeSet, check_constraint_id


@total_ordering
@dataclass(frozen=True, eq=True)
class Constraint:
    """
    Immutable pair of a source id and its set of valid values.

    Ordering is by `id`, then by the sorted sequence of valid values.
    """

    id: ConstraintIdType
    valid_values: ValueTypeSet

    def __init__(self, id: ConstraintIdType, valid_values: Iterable[ValueType] = ()) -> None:
        cid = check_constraint_id(id)
        values = frozenset(check_value(v) for v in valid_values)
        object.__setattr__(self, "id", cid)
        object.__setattr__(self, "valid_values", values)

    @classmethod
    def new_empty(cls, id: ConstraintIdType) -> "Constraint":
        return cls(id, ())

    @classmethod
    def new_single(cls, id: ConstraintIdType, value: ValueType) -> "Constraint":
        return cls(id, (value,))

    @classmethod
    def new_many(cls, id: ConstraintIdType, values: Iterable[ValueType]) -> "Constraint":
        return cls(id, values)

    def sorted_values(self) -> Tuple[ValueType, ...]:
        return tuple(sorted(self.valid_values))

    def is_compliant_with(self, value: ValueType) -> bool:
        return value in self.valid_values

    def is_theoretically_possible(self) -> bool:
        return bool(self.valid_values)

    def combine(self, other: "Constraint") -> "Constraint":
        """
        Intersect the valid values of two constraints on the same source.

        Raises:
            ConstraintIdMismatchError: If the ids differ.
        """
        if self.id != other.id:
            raise ConstraintIdMismatchError(self.id, other.id)
        return Constraint(self.id, self.valid_values & other.valid_values)

    def sort_key(self) -> Tuple[ConstraintIdType, Tuple[ValueType, ...]]:
        return (self.id, self.sorted_values())

    def __add__(self, other: object):
        if isinstance(other, Constraint):
            return self.combine(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Constraint):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"Constraint(id={self.id}, valid_values={list(self.sorted_values())})"
