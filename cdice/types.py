"""
Fixed-width integer types used throughout the engine.

Values are 32-bit signed integers, constraint ids are 16-bit unsigned
integers and counts are 64-bit unsigned integers. The bounds are taken from
the matching numpy dtypes so exported arrays can hold every value exactly.
"""

from __future__ import annotations

from typing import Callable, Dict, FrozenSet

import numpy as np

VALUE_DTYPE = np.int32
ID_DTYPE = np.uint16
COUNT_DTYPE = np.uint64

VALUE_MIN: int = int(np.iinfo(VALUE_DTYPE).min)
VALUE_MAX: int = int(np.iinfo(VALUE_DTYPE).max)
ID_MIN: int = int(np.iinfo(ID_DTYPE).min)
ID_MAX: int = int(np.iinfo(ID_DTYPE).max)
COUNT_MAX: int = int(np.iinfo(COUNT_DTYPE).max)

ValueType = int
ConstraintIdType = int
CountType = int

ValueTypeSet = FrozenSet[ValueType]
IdToValueMap = Dict[ConstraintIdType, ValueType]

# A binary operation on two values: op(lhs, rhs) -> value.
BinaryOperation = Callable[[ValueType, ValueType], ValueType]
UnaryOperation = Callable[[ValueType], ValueType]


def check_constraint_id(constraint_id: int) -> ConstraintIdType:
    """
    Validate a constraint id against the 16-bit unsigned range.

    Raises:
        TypeError: If `constraint_id` is not an integer.
        ValueError: If `constraint_id` lies outside [ID_MIN, ID_MAX].
    """
    if isinstance(constraint_id, bool) or not isinstance(constraint_id, (int, np.integer)):
        raise TypeError(f"Constraint id must be an integer, got {constraint_id!r}")
    cid = int(constraint_id)
    if cid < ID_MIN or cid > ID_MAX:
        raise ValueError(f"Constraint id {cid} outside range [{ID_MIN}, {ID_MAX}]")
    return cid
