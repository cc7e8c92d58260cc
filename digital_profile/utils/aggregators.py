"""
Data aggregation utility functions.
"""
import pandas as pd
from typing import Any, Iterable, List, Optional, Tuple


def _value(row: Any, field: str):
    if isinstance(row, dict):
        return row.get(field)
    return getattr(row, field, None)


def calculate_percentage(part: float, total: float, decimals: int = 2) -> float:
    """Share of ``part`` in ``total``; 0.0 when total is zero."""
    if not total:
        return 0.0
    return round((part / total) * 100, decimals)


def sum_field(rows: Iterable[Any], field: str) -> int:
    """Sum a numeric attribute or key, treating missing values as 0."""
    return sum((_value(row, field) or 0) for row in rows)


def find_extremes(rows: List[Any], key) -> Tuple[Optional[Any], Optional[Any]]:
    """
    Return (max_row, min_row) of ``rows`` by ``key``.

    ``key`` is either a field name or a callable. Ties keep the first row
    encountered. Empty input gives (None, None).
    """
    if not rows:
        return None, None

    getter = key if callable(key) else (lambda row: _value(row, key) or 0)

    highest = lowest = rows[0]
    for row in rows[1:]:
        value = getter(row)
        if value > getter(highest):
            highest = row
        if value < getter(lowest):
            lowest = row
    return highest, lowest


def aggregate_by_group(
    df: pd.DataFrame,
    group_columns: List[str],
    value_columns: List[str] = None
) -> pd.DataFrame:
    """
    Sum ``value_columns`` for each combination of ``group_columns``.

    Args:
        df: Input DataFrame
        group_columns: Columns to group by
        value_columns: Columns to sum. If None, sums all numeric columns.

    Returns:
        Aggregated DataFrame ordered by the group columns
    """
    if df.empty:
        return df

    if value_columns is None:
        value_columns = [
            col for col in df.select_dtypes(include=['number']).columns
            if col not in group_columns
        ]

    agg_df = df.groupby(group_columns)[value_columns].sum().reset_index()
    return agg_df.sort_values(group_columns).reset_index(drop=True)


def add_percentage_column(
    df: pd.DataFrame,
    value_column: str,
    percentage_column: str = 'percentage',
    decimals: int = 2
) -> pd.DataFrame:
    """Add each row's share of the column total as a percentage."""
    if df.empty:
        return df

    df = df.copy()
    total = df[value_column].sum()
    if total == 0:
        df[percentage_column] = 0.0
    else:
        df[percentage_column] = (df[value_column] / total * 100).round(decimals)
    return df


def records(df: pd.DataFrame) -> List[dict]:
    """DataFrame rows as plain python dicts (numpy scalars converted)."""
    if df.empty:
        return []
    return [
        {key: (value.item() if hasattr(value, 'item') else value) for key, value in row.items()}
        for row in df.to_dict('records')
    ]
