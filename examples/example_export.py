#!/usr/bin/env python3
"""
Example 3: Tables, DataFrames and summary statistics
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cdice import DistributionSummary, ProbabilityDistribution, to_dataframe, to_table

print("=" * 60)
print("Example 3: Tables, DataFrames and summary statistics")
print("=" * 60)

left = ProbabilityDistribution.new_dice(4).add_self_value_constraint(10)
right = ProbabilityDistribution.new_dice(4).add_self_value_constraint(20)
diff = left - right

print("\nText table:")
print(to_table(diff, absent="-"))

print("\nDataFrame:")
df = to_dataframe(diff)
print(df.to_string(index=False))

summary = DistributionSummary.from_distribution(diff)
print("\nSummary:")
print(f"  total outcome count: {summary.total_outcome_count}")
print(f"  distinct outcomes:   {summary.distinct_outcomes}")
print(f"  range:               [{summary.min_value:g}, {summary.max_value:g}]")
print(f"  mean:                {summary.mean:.4f}")
print(f"  variance:            {summary.variance:.4f}")
