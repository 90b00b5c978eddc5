"""
Exact probability distributions over constrained outcomes.

A distribution is a multiset of `ProbabilityOutcome`s with integer counts
(the number of ways to realize each outcome). Every arithmetic operator
reduces to one of three primitives:

  - `combine`: cross product of two distributions, pruning pairs whose
    combined constraint map is theoretically impossible
  - `combine_value_type`: single pass applying `op(value, scalar)`
  - `value_type_combine`: single pass applying `op(scalar, value)`

Correlation between repeated uses of the same source is expressed by
tagging outcomes with constraints (`add_constraint`,
`add_self_value_constraint`) before combining.
"""

from __future__ import annotations

from numbers import Integral
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from cdice import operations as ops
from cdice.constraint import Constraint
from cdice.errors import CountOverflowError
from cdice.logging import get_logger
from cdice.outcome import ProbabilityOutcome
from cdice.types import (
    COUNT_MAX,
    BinaryOperation,
    ConstraintIdType,
    CountType,
    UnaryOperation,
    ValueType,
)

logger = get_logger(__name__)

OutcomeToCountMap = Dict[ProbabilityOutcome, CountType]


def _check_count(count: int) -> CountType:
    if count < 0 or count > COUNT_MAX:
        raise CountOverflowError(f"count overflow: {count} outside range [0, {COUNT_MAX}]")
    return count


def add_outcome_to_map(
    outcome_counts: OutcomeToCountMap, outcome: ProbabilityOutcome, count: CountType
) -> None:
    """Add `count` to the entry for `outcome`, inserting it if absent."""
    outcome_counts[outcome] = _check_count(outcome_counts.get(outcome, 0) + count)


class ProbabilityDistribution:
    """
    Immutable mapping of `ProbabilityOutcome` to count, sorted by outcome.

    Instances are never mutated after construction; every operation returns
    a new distribution.
    """

    __slots__ = ("_outcome_counts",)

    def __init__(self, outcome_counts: Optional[Mapping[ProbabilityOutcome, CountType]] = None) -> None:
        accumulated: OutcomeToCountMap = {}
        for outcome, count in (outcome_counts or {}).items():
            if not isinstance(outcome, ProbabilityOutcome):
                raise TypeError(f"Expected ProbabilityOutcome key, got {type(outcome).__name__}")
            if isinstance(count, bool) or not isinstance(count, Integral):
                raise TypeError(f"Count for {outcome!r} must be an integer, got {count!r}")
            add_outcome_to_map(accumulated, outcome, int(count))
        # Sorted insertion order gives deterministic iteration.
        self._outcome_counts: OutcomeToCountMap = {
            outcome: accumulated[outcome] for outcome in sorted(accumulated)
        }

    @classmethod
    def new_empty(cls) -> "ProbabilityDistribution":
        return cls()

    @classmethod
    def new_from_single(cls, outcome: ProbabilityOutcome, count: CountType = 1) -> "ProbabilityDistribution":
        return cls({outcome: count})

    @classmethod
    def new_from_many(cls, outcomes: Iterable[ProbabilityOutcome]) -> "ProbabilityDistribution":
        """Each outcome counts once; repeated outcomes accumulate."""
        counts: OutcomeToCountMap = {}
        for outcome in outcomes:
            add_outcome_to_map(counts, outcome, 1)
        return cls(counts)

    @classmethod
    def new_dice(cls, number_of_sides: ValueType) -> "ProbabilityDistribution":
        """
        Uniform distribution over 1..|n|, negated when `number_of_sides` is negative.

        A zero-sided die gives the empty distribution.

        Raises:
            TypeError: If `number_of_sides` is not an integer.
            ValueOverflowError: If `number_of_sides` is VALUE_MIN, whose
                magnitude does not fit the value range.
        """
        n = ops.check_value(number_of_sides, operation="number_of_sides")
        sides = ops.neg(n) if n < 0 else n
        sign = -1 if n < 0 else 1
        return cls.new_from_many(
            ProbabilityOutcome.new_with_empty_constraint_map(sign * face)
            for face in range(1, sides + 1)
        )

    @classmethod
    def new_multiple_dice(
        cls, number_of_dice: int, number_of_sides: ValueType
    ) -> "ProbabilityDistribution":
        """
        Sum of `number_of_dice` independent dice with `number_of_sides` sides.

        Raises:
            TypeError: If either argument is not an integer.
            ValueError: If `number_of_dice` is negative.
        """
        m = ops.check_integer(number_of_dice, name="number_of_dice")
        ops.check_value(number_of_sides, operation="number_of_sides")
        if m < 0:
            raise ValueError(f"number_of_dice must be non-negative, got {m}")
        if m == 0 or number_of_sides == 0:
            return cls.new_empty()

        single = cls.new_dice(number_of_sides)
        result = single
        for i in range(1, m):
            result = result.combine(single, ops.add)
            logger.debug("Summed %d of %d dice: %d distinct outcomes", i + 1, m, len(result))
        return result

    @property
    def outcome_counts(self) -> Mapping[ProbabilityOutcome, CountType]:
        return MappingProxyType(self._outcome_counts)

    def items(self) -> Iterable[Tuple[ProbabilityOutcome, CountType]]:
        return self._outcome_counts.items()

    def outcomes(self) -> Tuple[ProbabilityOutcome, ...]:
        return tuple(self._outcome_counts)

    def count_of(self, outcome: ProbabilityOutcome) -> CountType:
        return self._outcome_counts.get(outcome, 0)

    def total_outcome_count(self) -> CountType:
        return _check_count(sum(self._outcome_counts.values()))

    def combine(self, other: "ProbabilityDistribution", binary_operation: BinaryOperation) -> "ProbabilityDistribution":
        """
        Combine every outcome of `self` with every outcome of `other`.

        For each pair the values are combined with `binary_operation`
        (self's value on the left) and the constraint maps are intersected.
        Pairs whose combined map is theoretically impossible are dropped;
        the rest contribute `count_a * count_b` to the resulting outcome.

        Args:
            other: Right-hand distribution.
            binary_operation: Function applied as `op(value_a, value_b)`.

        Returns:
            New distribution; empty when either side is empty.

        Raises:
            ValueOverflowError: If `binary_operation` overflows for any pair.
            DivisionByZeroError: If a pair divides by zero.
            CountOverflowError: If a count exceeds the count range.
        """
        new_outcome_counts: OutcomeToCountMap = {}
        pruned = 0
        for outcome_a, count_a in self._outcome_counts.items():
            for outcome_b, count_b in other._outcome_counts.items():
                new_outcome = outcome_a.combine(outcome_b, binary_operation)
                if not new_outcome.constraint_map.is_theoretically_possible():
                    pruned += 1
                    continue
                add_outcome_to_map(new_outcome_counts, new_outcome, _check_count(count_a * count_b))

        logger.debug(
            "Combined %d x %d outcomes with %s: %d kept, %d pairs pruned",
            len(self),
            len(other),
            getattr(binary_operation, "__name__", "operation"),
            len(new_outcome_counts),
            pruned,
        )
        return ProbabilityDistribution(new_outcome_counts)

    def combine_value_type(self, other: ValueType, binary_operation: BinaryOperation) -> "ProbabilityDistribution":
        """Apply `binary_operation(value, other)` to every outcome."""
        new_outcome_counts: OutcomeToCountMap = {}
        for outcome, count in self._outcome_counts.items():
            add_outcome_to_map(new_outcome_counts, outcome.combine_value_type(other, binary_operation), count)
        return ProbabilityDistribution(new_outcome_counts)

    def value_type_combine(self, other: ValueType, binary_operation: BinaryOperation) -> "ProbabilityDistribution":
        """Apply `binary_operation(other, value)` to every outcome."""
        new_outcome_counts: OutcomeToCountMap = {}
        for outcome, count in self._outcome_counts.items():
            add_outcome_to_map(new_outcome_counts, outcome.value_type_combine(other, binary_operation), count)
        return ProbabilityDistribution(new_outcome_counts)

    def apply(self, unary_operation: UnaryOperation) -> "ProbabilityDistribution":
        new_outcome_counts: OutcomeToCountMap = {}
        for outcome, count in self._outcome_counts.items():
            add_outcome_to_map(new_outcome_counts, outcome.apply(unary_operation), count)
        return ProbabilityDistribution(new_outcome_counts)

    def add_constraint(self, constraint: Constraint) -> "ProbabilityDistribution":
        """
        Tag every outcome with `constraint`.

        Outcomes that become identical have their counts added. Outcomes made
        impossible are kept here and dropped by the next `combine`.
        """
        new_outcome_counts: OutcomeToCountMap = {}
        for outcome, count in self._outcome_counts.items():
            add_outcome_to_map(new_outcome_counts, outcome.add_constraint(constraint), count)
        return ProbabilityDistribution(new_outcome_counts)

    def add_self_value_constraint(self, constraint_id: ConstraintIdType) -> "ProbabilityDistribution":
        """
        Tag every outcome with a constraint `{constraint_id: {outcome.value}}`.

        This marks the distribution as the source `constraint_id`, so a later
        combination with another branch carrying the same tag only pairs
        matching rolls.
        """
        new_outcome_counts: OutcomeToCountMap = {}
        for outcome, count in self._outcome_counts.items():
            tagged = outcome.add_constraint(Constraint.new_single(constraint_id, outcome.value))
            add_outcome_to_map(new_outcome_counts, tagged, count)
        return ProbabilityDistribution(new_outcome_counts)

    def _dispatch(self, other: object, operation: BinaryOperation):
        if isinstance(other, ProbabilityDistribution):
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

    def __neg__(self) -> "ProbabilityDistribution":
        return self.combine_value_type(-1, ops.mul)

    def __invert__(self) -> "ProbabilityDistribution":
        return self.apply(ops.invert)

    def __len__(self) -> int:
        return len(self._outcome_counts)

    def __iter__(self) -> Iterator[ProbabilityOutcome]:
        return iter(self._outcome_counts)

    def __contains__(self, outcome: object) -> bool:
        return outcome in self._outcome_counts

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProbabilityDistribution):
            return NotImplemented
        return self._outcome_counts == other._outcome_counts

    def __hash__(self) -> int:
        return hash(frozenset(self._outcome_counts.items()))

    def __repr__(self) -> str:
        inner = ", ".join(f"{o!r}: {c}" for o, c in self._outcome_counts.items())
        return f"ProbabilityDistribution({{{inner}}})"
