"""
Unit tests for Constraint.

Tests construction, possibility and compliance checks, intersection-based
combination and canonical ordering.
"""

import pytest

from cdice.constraint import Constraint
from cdice.errors import ConstraintIdMismatchError


class TestConstraintFactory:
    """Test suite for Constraint factories."""

    def test_new_empty(self) -> None:
        """An empty constraint has no valid values."""
        constraint = Constraint.new_empty(7)
        assert constraint.id == 7
        assert constraint.valid_values == frozenset()

    def test_new_single(self) -> None:
        """A single-value constraint holds exactly that value."""
        constraint = Constraint.new_single(1, 20)
        assert constraint.valid_values == frozenset({20})

    def test_new_many_deduplicates(self) -> None:
        """Repeated values collapse into one."""
        constraint = Constraint.new_many(1, [3, 1, 3, 2, 1])
        assert constraint.valid_values == frozenset({1, 2, 3})
        assert constraint.sorted_values() == (1, 2, 3)

    def test_invalid_id(self) -> None:
        """Ids outside the unsigned 16-bit range are rejected."""
        with pytest.raises(ValueError, match="outside range"):
            Constraint.new_empty(-1)
        with pytest.raises(ValueError, match="outside range"):
            Constraint.new_empty(65536)
        with pytest.raises(TypeError):
            Constraint.new_empty("3")

    def test_float_values_rejected(self) -> None:
        """Valid values must be integers; floats are not truncated."""
        with pytest.raises(TypeError, match="must be an integer"):
            Constraint.new_many(1, [2.5, 3.9])
        with pytest.raises(TypeError):
            Constraint.new_single(1, True)

    def test_immutable(self) -> None:
        """Constraints cannot be mutated."""
        constraint = Constraint.new_single(1, 1)
        with pytest.raises(AttributeError):
            constraint.id = 2


class TestConstraintChecks:
    """Test suite for possibility and compliance."""

    def test_possibility(self) -> None:
        assert Constraint.new_empty(1).is_theoretically_possible() is False
        assert Constraint.new_single(1, 0).is_theoretically_possible() is True

    def test_compliance(self) -> None:
        constraint = Constraint.new_many(1, [2, 4, 6])
        assert constraint.is_compliant_with(4) is True
        assert constraint.is_compliant_with(5) is False
        assert Constraint.new_empty(1).is_compliant_with(0) is False


class TestConstraintCombine:
    """Test suite for Constraint.combine."""

    def test_intersection(self) -> None:
        """Combination keeps the common values."""
        left = Constraint.new_many(24, range(10, 70, 10))
        right = Constraint.new_many(24, [40, 50, 60, 70, 80, 90])
        assert left.combine(right) == Constraint.new_many(24, [40, 50, 60])
        assert left + right == right + left

    def test_disjoint_is_impossible(self) -> None:
        """Disjoint value sets give an impossible constraint."""
        combined = Constraint.new_many(1, [1, 2]) + Constraint.new_many(1, [3, 4])
        assert combined.is_theoretically_possible() is False

    def test_id_mismatch(self) -> None:
        """Combining different ids fails."""
        with pytest.raises(ConstraintIdMismatchError, match="1 != 2"):
            Constraint.new_single(1, 1).combine(Constraint.new_single(2, 1))

    def test_id_mismatch_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Constraint.new_single(1, 1) + Constraint.new_single(2, 1)


class TestConstraintOrdering:
    """Test suite for equality, hashing and ordering."""

    def test_equality_and_hash(self) -> None:
        a = Constraint.new_many(2, [2, 4, 6])
        b = Constraint.new_many(2, [6, 4, 2])
        assert a == b
        assert hash(a) == hash(b)
        assert a != Constraint.new_many(3, [2, 4, 6])
        assert a != Constraint.new_many(2, [2, 5, 6])

    def test_order_by_id_first(self) -> None:
        assert Constraint.new_single(1, 100) < Constraint.new_single(2, 0)

    def test_order_by_sorted_values(self) -> None:
        assert Constraint.new_many(1, [1, 5]) < Constraint.new_many(1, [2])
        assert Constraint.new_many(1, [1]) < Constraint.new_many(1, [1, 2])
        assert sorted([Constraint.new_single(1, 3), Constraint.new_single(1, 1)])[0].valid_values == {1}

    def test_repr_sorted(self) -> None:
        assert repr(Constraint.new_many(4, [3, 1, 2])) == "Constraint(id=4, valid_values=[1, 2, 3])"
