"""
Exact dice probability distributions with constraint tracking.

Outcomes carry constraints naming the sources of randomness they came from,
so an expression that uses the same die twice only pairs rolls that agree.
"""

from cdice.constraint import Constraint
from cdice.constraint_map import ConstraintMap
from cdice.distribution import ProbabilityDistribution
from cdice.errors import (
    ConstraintIdMismatchError,
    CountOverflowError,
    DiceArithmeticError,
    DiceError,
    DivisionByZeroError,
    ValueOverflowError,
)
from cdice.outcome import ProbabilityOutcome
from cdice.summary import DistributionSummary, to_arrays, value_counts, value_probabilities
from cdice.table import to_columns, to_dataframe, to_table

__version__ = "0.1.0"

__all__ = [
    "Constraint",
    "ConstraintMap",
    "ProbabilityOutcome",
    "ProbabilityDistribution",
    "DistributionSummary",
    "to_arrays",
    "value_counts",
    "value_probabilities",
    "to_columns",
    "to_table",
    "to_dataframe",
    "DiceError",
    "ConstraintIdMismatchError",
    "DiceArithmeticError",
    "ValueOverflowError",
    "CountOverflowError",
    "DivisionByZeroError",
]
