"""
Constraint maps: the full provenance attached to one outcome.

A map holds at most one `Constraint` per source id. Combining maps takes
the union of their ids and intersects the constraints of shared ids, so
the empty map is the identity and combination is commutative and
associative.
"""

from __future__ import annotations

from functools import total_ordering
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from cdice.constraint import Constraint
from cdice.types import ConstraintIdType, IdToValueMap, ValueType


def _add_constraint_to_dict(
    constraints: Dict[ConstraintIdType, Constraint], constraint: Constraint
) -> None:
    existing = constraints.get(constraint.id)
    if existing is None:
        constraints[constraint.id] = constraint
    else:
        constraints[constraint.id] = existing.combine(constraint)


@total_ordering
class ConstraintMap:
    """
    Immutable mapping of source id to `Constraint`.

    Instances hash and compare by content, so they can be part of the key of
    an outcome in a distribution.
    """

    __slots__ = ("_map", "_hash")

    def __init__(self, constraints: Optional[Mapping[ConstraintIdType, Constraint]] = None) -> None:
        data: Dict[ConstraintIdType, Constraint] = {}
        for key, constraint in (constraints or {}).items():
            if not isinstance(constraint, Constraint):
                raise TypeError(f"Expected Constraint for id {key!r}, got {type(constraint).__name__}")
            if int(key) != constraint.id:
                raise ValueError(f"Key {key!r} does not match constraint id {constraint.id}")
            data[constraint.id] = constraint
        self._map: Dict[ConstraintIdType, Constraint] = {k: data[k] for k in sorted(data)}
        self._hash: Optional[int] = None

    @classmethod
    def new_empty(cls) -> "ConstraintMap":
        return cls()

    @classmethod
    def new_single(cls, constraint: Constraint) -> "ConstraintMap":
        return cls({constraint.id: constraint})

    @classmethod
    def new_many(cls, constraints: Iterable[Constraint]) -> "ConstraintMap":
        """Fold constraints in input order, intersecting those that share an id."""
        data: Dict[ConstraintIdType, Constraint] = {}
        for constraint in constraints:
            _add_constraint_to_dict(data, constraint)
        return cls(data)

    @property
    def map(self) -> Mapping[ConstraintIdType, Constraint]:
        return MappingProxyType(self._map)

    def ids(self) -> Tuple[ConstraintIdType, ...]:
        return tuple(self._map)

    def get(self, constraint_id: ConstraintIdType) -> Optional[Constraint]:
        return self._map.get(constraint_id)

    def is_theoretically_possible(self) -> bool:
        return all(c.is_theoretically_possible() for c in self._map.values())

    def is_compliant_with(self, id_value_map: IdToValueMap) -> bool:
        """
        Check concrete source values against the map.

        Ids without a constraint in this map impose no restriction.
        """
        for constraint_id, value in id_value_map.items():
            constraint = self._map.get(constraint_id)
            if constraint is not None and not constraint.is_compliant_with(value):
                return False
        return True

    def add_constraint(self, constraint: Constraint) -> "ConstraintMap":
        data = dict(self._map)
        _add_constraint_to_dict(data, constraint)
        return ConstraintMap(data)

    def combine(self, other: "ConstraintMap") -> "ConstraintMap":
        if not other._map:
            return self
        if not self._map:
            return other
        data = dict(self._map)
        for constraint in other._map.values():
            _add_constraint_to_dict(data, constraint)
        return ConstraintMap(data)

    def sort_key(self) -> Tuple[Tuple[ConstraintIdType, Tuple[ValueType, ...]], ...]:
        # Element-wise comparison of the sorted constraints, shorter first on a tie.
        return tuple(c.sort_key() for c in sorted(self._map.values()))

    def __add__(self, other: object):
        if isinstance(other, ConstraintMap):
            return self.combine(other)
        if isinstance(other, Constraint):
            return self.add_constraint(other)
        return NotImplemented

    def __radd__(self, other: object):
        if isinstance(other, Constraint):
            return self.add_constraint(other)
        return NotImplemented

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[Constraint]:
        return iter(self._map.values())

    def __contains__(self, constraint_id: object) -> bool:
        return constraint_id in self._map

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintMap):
            return NotImplemented
        return self._map == other._map

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ConstraintMap):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._map.values()))
        return self._hash

    def __repr__(self) -> str:
        return f"ConstraintMap({list(self._map.values())!r})"
