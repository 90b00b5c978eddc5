#!/usr/bin/env python3
"""
Example 1: Standard dice and arithmetic

This example demonstrates the core distribution operations:
- Building single dice and dice pools
- Combining independent dice with arithmetic and bitwise operators
- Mixing distributions with plain integers
"""

import sys
import os

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cdice import ProbabilityDistribution, to_table, value_probabilities

print("=" * 60)
print("Example 1: Standard dice and arithmetic")
print("=" * 60)

# A pair of three-sided dice is summed.
d3 = ProbabilityDistribution.new_dice(3)
print("\nd3 + d3:")
print(to_table(d3 + d3))

# The same pool is built with the multi-dice factory.
pool = ProbabilityDistribution.new_multiple_dice(3, 6)
print(f"\n3d6 has {len(pool)} outcomes and {pool.total_outcome_count()} realizations")
for value, p in value_probabilities(pool).items():
    print(f"  {value:3d}: {p:.4f}")

# Bitwise and truncating division.
print("\nd3 & d3:")
print(to_table(d3 & d3))
print("\nd9 / d3:")
print(to_table(ProbabilityDistribution.new_dice(9) / d3))

# Scalars can appear on either side.
print("\n10 - 2 * d4:")
print(to_table(10 - 2 * ProbabilityDistribution.new_dice(4)))
