"""
Tabular views of a distribution.

Each view has one row per outcome with a `value` column, a `count` column
and one column per constraint id seen in any outcome. A constraint cell
holds the sorted valid values joined into one string, or an absent marker
when the outcome has no constraint for that id.
"""

from __future__ import annotations

from typing import Dict, List, Optional

import pandas as pd
from prettytable import PrettyTable

from cdice.distribution import ProbabilityDistribution
from cdice.types import ConstraintIdType

DEFAULT_SEPARATOR = ", "


def constraint_ids(distribution: ProbabilityDistribution) -> List[ConstraintIdType]:
    """Return every constraint id used by the distribution, ascending."""
    ids = set()
    for outcome in distribution:
        ids.update(outcome.constraint_map.ids())
    return sorted(ids)


def to_columns(
    distribution: ProbabilityDistribution,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> Dict[str, List[Optional[str]]]:
    """
    Build string columns for the distribution, in outcome order.

    Args:
        distribution: Distribution to export.
        separator: String placed between valid values in constraint cells.

    Returns:
        Ordered mapping: "value", "count", then one entry per constraint id
        (as a string, ascending by id). Absent constraint cells are None.
    """
    if not isinstance(separator, str):
        raise TypeError("separator must be a string")
    ids = constraint_ids(distribution)
    columns: Dict[str, List[Optional[str]]] = {"value": [], "count": []}
    for cid in ids:
        columns[str(cid)] = []

    for outcome, count in distribution.items():
        columns["value"].append(str(outcome.value))
        columns["count"].append(str(count))
        for cid in ids:
            constraint = outcome.constraint_map.get(cid)
            if constraint is None:
                columns[str(cid)].append(None)
            else:
                columns[str(cid)].append(separator.join(str(v) for v in constraint.sorted_values()))
    return columns


def to_table(
    distribution: ProbabilityDistribution,
    *,
    separator: str = DEFAULT_SEPARATOR,
    absent: str = "",
) -> str:
    """
    Render the distribution as a bordered text table, one row per outcome.

    Absent constraint cells are rendered as `absent`.
    """
    columns = to_columns(distribution, separator=separator)
    names = list(columns)
    table = PrettyTable()
    table.field_names = names
    table.align = "l"
    for i in range(len(distribution)):
        table.add_row([absent if columns[name][i] is None else columns[name][i] for name in names])
    return table.get_string()


def to_dataframe(
    distribution: ProbabilityDistribution,
    *,
    separator: str = DEFAULT_SEPARATOR,
) -> pd.DataFrame:
    """
    Export the distribution as a DataFrame sorted by value.

    `value` is int32, `count` is uint64 and constraint columns are objects
    holding strings or None.
    """
    columns = to_columns(distribution, separator=separator)
    data: Dict[str, object] = {
        "value": pd.Series([int(v) for v in columns.pop("value")], dtype="int32"),
        "count": pd.Series([int(c) for c in columns.pop("count")], dtype="uint64"),
    }
    for name, cells in columns.items():
        data[name] = pd.Series(cells, dtype=object)
    df = pd.DataFrame(data)
    return df.sort_values("value", kind="stable").reset_index(drop=True)
