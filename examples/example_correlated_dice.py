#!/usr/bin/env python3
"""
Example 2: Reusing the same die across an expression

When one roll appears twice in an expression, both references must show
the same face. Tagging the distribution with a constraint makes the
combination drop pairings that disagree.
"""

import sys
import os
import logging

# The parent directory is added to the import path.
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from cdice import Constraint, ProbabilityDistribution, to_table, value_counts
from cdice.logging import setup_root_logger

setup_root_logger(level=logging.DEBUG)

print("=" * 60)
print("Example 2: Reusing the same die across an expression")
print("=" * 60)

d6 = ProbabilityDistribution.new_dice(6)

# Treated as two independent dice.
print("\nIndependent d6 - d6:")
print(value_counts(d6 - d6))

# Treated as one die referenced twice.
x = d6.add_self_value_constraint(1)
print("\nShared X - X:")
print(to_table(x - x))

# (X + Y) - X recovers Y when X is shared.
y = ProbabilityDistribution.new_dice(4)
print("\n(X + Y) - X:")
print(value_counts((x + y) - x))

# A constraint can also restrict a source up front.
low_x = x + Constraint.new_many(1, [1, 2, 3])
print("\nX restricted to {1, 2, 3}, then X + X:")
print(to_table(low_x + x))
