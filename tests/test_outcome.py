"""
Unit tests for ProbabilityOutcome.

Tests factories, operator dispatch against outcomes and plain integers,
constraint propagation and identity semantics.
"""

import pytest

from cdice import operations as ops
from cdice.constraint import Constraint
from cdice.constraint_map import ConstraintMap
from cdice.errors import DivisionByZeroError, ValueOverflowError
from cdice.outcome import ProbabilityOutcome
from cdice.types import VALUE_MAX


def _tagged(value: int, constraint_id: int, valid) -> ProbabilityOutcome:
    return ProbabilityOutcome.new_with_constraints(value, [Constraint.new_many(constraint_id, valid)])


class TestOutcomeFactory:
    """Test suite for ProbabilityOutcome factories."""

    def test_empty_constraint_map(self) -> None:
        outcome = ProbabilityOutcome.new_with_empty_constraint_map(123)
        assert outcome.value == 123
        assert outcome.constraint_map == ConstraintMap.new_empty()

    def test_with_constraint_map(self) -> None:
        cmap = ConstraintMap.new_single(Constraint.new_single(1, 5))
        outcome = ProbabilityOutcome.new_with_constraint_map(5, cmap)
        assert outcome.constraint_map is cmap

    def test_with_constraints_folds(self) -> None:
        outcome = ProbabilityOutcome.new_with_constraints(
            1, [Constraint.new_many(1, [1, 2]), Constraint.new_many(1, [2, 3])]
        )
        assert outcome.constraint_map.get(1) == Constraint.new_single(1, 2)

    def test_value_range_checked(self) -> None:
        with pytest.raises(ValueOverflowError):
            ProbabilityOutcome.new_with_empty_constraint_map(VALUE_MAX + 1)

    def test_float_value_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be an integer"):
            ProbabilityOutcome(2.7)
        with pytest.raises(TypeError):
            ProbabilityOutcome(False)

    def test_constraint_map_type_checked(self) -> None:
        with pytest.raises(TypeError):
            ProbabilityOutcome(1, {1: Constraint.new_single(1, 1)})


class TestOutcomeCombine:
    """Test suite for outcome-outcome combination."""

    def test_values_and_maps_combined(self) -> None:
        a = _tagged(3, 1, [1, 2, 3])
        b = _tagged(4, 1, [3, 4])
        result = a.combine(b, ops.mul)
        assert result.value == 12
        assert result.constraint_map.get(1) == Constraint.new_single(1, 3)

    def test_operand_order(self) -> None:
        a = ProbabilityOutcome(10)
        b = ProbabilityOutcome(3)
        assert (a - b).value == 7
        assert (b - a).value == -7
        assert (a / b).value == 3
        assert (a // b).value == 3
        assert (a % b).value == 1

    def test_bitwise(self) -> None:
        a = ProbabilityOutcome(6)
        b = ProbabilityOutcome(3)
        assert (a & b).value == 2
        assert (a | b).value == 7
        assert (a ^ b).value == 5

    def test_impossible_result_is_returned(self) -> None:
        """Outcome combination does not prune; the caller checks."""
        result = _tagged(1, 1, [1]) + _tagged(2, 1, [2])
        assert result.value == 3
        assert result.is_theoretically_possible() is False

    def test_division_by_zero(self) -> None:
        with pytest.raises(DivisionByZeroError):
            ProbabilityOutcome(1) / ProbabilityOutcome(0)


class TestOutcomeScalar:
    """Test suite for outcome-scalar combination."""

    def test_scalar_keeps_constraint_map(self) -> None:
        outcome = _tagged(5, 2, [5])
        for result in (outcome + 1, 1 + outcome, outcome * 3, 3 * outcome):
            assert result.constraint_map == outcome.constraint_map
        assert (outcome + 1).value == 6
        assert (outcome * 3).value == 15

    def test_scalar_operand_order(self) -> None:
        outcome = ProbabilityOutcome(4)
        assert (outcome - 10).value == -6
        assert (10 - outcome).value == 6
        assert (outcome / 2).value == 2
        assert (10 / outcome).value == 2
        assert (10 % outcome).value == 2
        assert outcome.combine_value_type(1, ops.sub).value == 3
        assert outcome.value_type_combine(1, ops.sub).value == -3

    def test_bitwise_scalar(self) -> None:
        outcome = ProbabilityOutcome(6)
        assert (outcome & 3).value == 2
        assert (3 | outcome).value == 7
        assert (3 ^ outcome).value == 5

    def test_scalar_overflow(self) -> None:
        with pytest.raises(ValueOverflowError):
            ProbabilityOutcome(VALUE_MAX) + 1

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            ProbabilityOutcome(1) + 1.5


class TestOutcomeUnary:
    """Test suite for negation and bitwise not."""

    def test_neg(self) -> None:
        outcome = _tagged(5, 1, [5])
        negated = -outcome
        assert negated.value == -5
        assert negated.constraint_map == outcome.constraint_map

    def test_invert(self) -> None:
        assert (~ProbabilityOutcome(0)).value == -1
        assert (~ProbabilityOutcome(5)).value == -6


class TestOutcomeConstraints:
    """Test suite for add_constraint and identity."""

    def test_add_constraint(self) -> None:
        outcome = ProbabilityOutcome(5)
        tagged = outcome.add_constraint(Constraint.new_single(3, 5))
        assert tagged.constraint_map.get(3) == Constraint.new_single(3, 5)
        assert outcome.constraint_map == ConstraintMap.new_empty()
        assert outcome + Constraint.new_single(3, 5) == tagged
        assert Constraint.new_single(3, 5) + outcome == tagged

    def test_equality_requires_constraint_map(self) -> None:
        plain = ProbabilityOutcome(5)
        tagged = _tagged(5, 1, [5])
        assert plain != tagged
        assert len({plain, tagged, ProbabilityOutcome(5)}) == 2

    def test_ordering_value_first(self) -> None:
        low_tagged = _tagged(1, 1, [1])
        high_plain = ProbabilityOutcome(2)
        plain_one = ProbabilityOutcome(1)
        assert low_tagged < high_plain
        assert plain_one < low_tagged
        assert sorted([high_plain, low_tagged, plain_one]) == [plain_one, low_tagged, high_plain]
