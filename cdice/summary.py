from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

import numpy as np

from cdice.distribution import ProbabilityDistribution
from cdice.types import COUNT_DTYPE, VALUE_DTYPE, CountType, ValueType


def to_arrays(distribution: ProbabilityDistribution) -> Tuple[np.ndarray, np.ndarray]:
    """
    Return `(values, counts)` arrays in outcome order.

    Values with different constraint maps appear once per outcome.
    """
    values = np.fromiter((o.value for o in distribution), dtype=VALUE_DTYPE, count=len(distribution))
    counts = np.fromiter(
        (c for _, c in distribution.items()), dtype=COUNT_DTYPE, count=len(distribution)
    )
    return values, counts


def value_counts(distribution: ProbabilityDistribution) -> Dict[ValueType, CountType]:
    """
    Marginalize constraint maps away: value -> total count, ascending by value.
    """
    out: Dict[ValueType, CountType] = {}
    for outcome, count in distribution.items():
        out[outcome.value] = out.get(outcome.value, 0) + int(count)
    return {v: out[v] for v in sorted(out)}


def value_probabilities(distribution: ProbabilityDistribution) -> Dict[ValueType, float]:
    """
    Normalize `value_counts` by the total outcome count.

    An empty distribution gives an empty mapping.
    """
    total = distribution.total_outcome_count()
    if total == 0:
        return {}
    return {v: float(c) / float(total) for v, c in value_counts(distribution).items()}


@dataclass(frozen=True)
class DistributionSummary:
    total_outcome_count: CountType
    distinct_outcomes: int
    distinct_values: int
    min_value: float
    max_value: float
    mean: float
    variance: float

    @staticmethod
    def from_distribution(distribution: ProbabilityDistribution) -> "DistributionSummary":
        total = distribution.total_outcome_count()
        marginal = value_counts(distribution)
        if total == 0:
            # Statistics of an empty distribution are undefined.
            return DistributionSummary(
                total_outcome_count=0,
                distinct_outcomes=len(distribution),
                distinct_values=len(marginal),
                min_value=float("nan"),
                max_value=float("nan"),
                mean=float("nan"),
                variance=float("nan"),
            )

        values = np.array(list(marginal.keys()), dtype=float)
        weights = np.array([float(c) for c in marginal.values()], dtype=float)
        mean = float(np.average(values, weights=weights))
        variance = float(np.average((values - mean) ** 2, weights=weights))
        present = values[weights > 0]
        return DistributionSummary(
            total_outcome_count=int(total),
            distinct_outcomes=len(distribution),
            distinct_values=len(marginal),
            min_value=float(np.min(present)) if present.size else float("nan"),
            max_value=float(np.max(present)) if present.size else float("nan"),
            mean=mean,
            variance=variance,
        )
