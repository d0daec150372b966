"""Apply operators to pandas columns and move records in and out of DataFrames.
"""

__docformat__ = 'google'

__all__ = [
    'transform_series',
    'transform_frame',
    'records_to_frame',
    'frame_to_records'
]

import pandas as pd
from typing import Any, List, Mapping
from texttransforms.fields import TransformField
from texttransforms.operators import Operator
from texttransforms.serialization import TransformRecord

def transform_series(series: pd.Series, operator: Any) -> pd.Series:
    """
    Apply an operator to every value of a Series.

    Missing values (`None`, `NaN`) are left as they are. Every other value goes
    through a `TransformField`, so it must be a string.

    Args:
        series: Column of strings
        operator: An `Operator`, a kind name or an operator mapping

    Returns:
        A new Series with the same index and name

    Raises:
        TypeError: If a value is neither missing nor a string.

    Example:
        >>> transform_series(pd.Series(['john doe', None], dtype=object), 'pascal').tolist()
        ['JohnDoe', None]
    """
    operator = Operator.parse(operator)
    return series.map(lambda value: TransformField(value, operator).get(), na_action='ignore')

def transform_frame(frame: pd.DataFrame, schema: Mapping[str, Any]) -> pd.DataFrame:
    """
    Apply a schema of operators to the matching columns of a DataFrame.

    Columns that are not in the schema are copied unchanged.

    Raises:
        KeyError: If a schema column is missing from the frame.
    """
    missing = [column for column in schema if column not in frame.columns]
    if missing:
        raise KeyError(f"Columns not found in frame: {missing}")

    transformed = frame.copy()
    for column, operator in schema.items():
        transformed[column] = transform_series(frame[column], operator)
    return transformed

def records_to_frame(records: List[TransformRecord]) -> pd.DataFrame:
    """Encode records as DataFrame rows, one column per field."""
    return pd.DataFrame([record.to_dict() for record in records])

def frame_to_records(frame: pd.DataFrame, schema: Mapping[str, Any]) -> List[TransformRecord]:
    """
    Decode every row of a DataFrame into a `TransformRecord`.

    Rows go through the same decode path as JSON and YAML documents, so
    operators use their decoding defaults and non-string cells raise
    `texttransforms.serialization.DecodeError`.
    """
    return [
        TransformRecord.from_dict(row, schema)
        for row in frame.to_dict(orient='records')
    ]
