# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Record type aliases and input normalization."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List

import pandas as pd

from ..utils._pandas import dataframe_to_records, series_to_record

# Type aliases for semantic clarity
Record = Dict[str, Any]  # column name -> value
RecordSet = List[Record]
TableName = str  # table or slice name, e.g. "People"


def normalize_records(records: Any) -> RecordSet:
    """
    Coerce a single record or a collection of records into a list.

    - ``None`` or any other falsy value gives ``[]``.
    - A list is returned unchanged (same object, order preserved).
    - A single mapping gives a one-element list.
    - A tuple or other iterable of records is copied into a list.
    - A :class:`pandas.DataFrame` gives one record per row; a
      :class:`pandas.Series` gives a single record.

    Record contents are passed through without validation.

    :param records: Record, records, DataFrame or ``None``.
    :return: Records in input order.
    :rtype: list[dict]

    Example::

        normalize_records({"Name": "Jane"})       # [{"Name": "Jane"}]
        normalize_records([{"a": 1}, {"a": 2}])   # same list
        normalize_records(None)                   # []
    """
    # DataFrame/Series truthiness is ambiguous, so handle them before the falsy check.
    if isinstance(records, pd.DataFrame):
        return dataframe_to_records(records)
    if isinstance(records, pd.Series):
        return [series_to_record(records)]
    if not records:
        return []
    if isinstance(records, list):
        return records
    if isinstance(records, (Mapping, str, bytes)) or not isinstance(records, Iterable):
        return [records]
    return list(records)


__all__ = ["Record", "RecordSet", "TableName", "normalize_records"]
