# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Internal pandas helpers"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping

import pandas as pd


def dataframe_to_records(df: pd.DataFrame, na_as_null: bool = False) -> List[Dict[str, Any]]:
    """Convert a DataFrame to a list of dicts, converting Timestamps to ISO strings.

    :param df: Input DataFrame.
    :param na_as_null: When False (default), missing values are omitted from each dict.
        When True, missing values are included as None (sends null to AppSheet, clearing the field).
    """
    return [_clean_row(row, na_as_null) for row in df.to_dict(orient="records")]


def series_to_record(series: pd.Series, na_as_null: bool = False) -> Dict[str, Any]:
    """Convert a Series keyed by column name to a single record dict."""
    return _clean_row(series.to_dict(), na_as_null)


def records_to_dataframe(records: List[Dict[str, Any]]) -> pd.DataFrame:
    """Build a DataFrame from rows; columns are the union of all keys, missing cells are NaN."""
    if not records:
        return pd.DataFrame()
    return pd.DataFrame.from_records(records)


def _clean_row(row: Mapping[Any, Any], na_as_null: bool) -> Dict[str, Any]:
    clean: Dict[str, Any] = {}
    for k, v in row.items():
        if not pd.api.types.is_scalar(v):
            clean[k] = v
        elif pd.notna(v):
            clean[k] = v.isoformat() if isinstance(v, pd.Timestamp) else v
        elif na_as_null:
            clean[k] = None
    return clean
