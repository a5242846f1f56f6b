# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import warnings
from typing import Any, Callable, Dict, List, Optional, Union

import pandas as pd
import requests

from .core.config import AppSheetConfig
from .core.errors import HttpError
from .core.results import ApiResponse, SingleRecord
from .data._action import _ActionClient, ACTION_ADD, ACTION_DELETE, ACTION_EDIT, ACTION_FIND
from .models.record import normalize_records
from .models.selector import SelectorBuilder, build_selector, key_condition
from .utils._pandas import records_to_dataframe

Records = Union[Dict[str, Any], List[Dict[str, Any]], pd.DataFrame, None]


class AppSheetClient:
    """
    High-level client for one AppSheet app.

    Every operation sends a single ``Action`` request (retrying transport failures
    up to ``config.max_retries`` attempts in total) and returns an
    :class:`~appsheet_sdk.core.results.ApiResponse`. HTTP error statuses are
    returned, not raised; only
    :class:`~appsheet_sdk.core.errors.TransportExhaustionError` aborts a call.

    **Context Manager Support**:
        Inside a ``with`` block every call reuses one ``requests.Session``::

            with AppSheetClient(config) as client:
                client.add("People", {"Name": "Jane Doe"})
                client.find("People", '[Name] = "Jane Doe"')
            # Session closed

    **Without Context Manager**:
        Each call is a standalone request. ``close()`` is still safe to call.

    :param config: Validated app configuration.
    :type config: ~appsheet_sdk.core.config.AppSheetConfig
    :param session: Optional caller-owned ``requests.Session``. The client never closes it.
    :type session: :class:`requests.Session` | None
    :param sleep: Pause function used between retries (defaults to :func:`time.sleep`).
    :type sleep: Callable[[float], None] | None

    Example::

        from appsheet_sdk import AppSheetClient, AppSheetConfig

        client = AppSheetClient(AppSheetConfig("APP_ID", "ACCESS_KEY"))
        result = client.find("People", '[Status] = "Active"', order_by="Name", limit=10)
        print(result.code, result.rows_returned)
    """

    def __init__(
        self,
        config: AppSheetConfig,
        *,
        session: Optional[requests.Session] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        if not isinstance(config, AppSheetConfig):
            raise TypeError("config must be an AppSheetConfig instance")
        self._config = config
        self._sleep = sleep
        self._actions: Optional[_ActionClient] = None
        self._session: Optional[requests.Session] = session
        self._owns_session: bool = False

    @property
    def config(self) -> AppSheetConfig:
        return self._config

    def __enter__(self) -> "AppSheetClient":
        """
        Enter the context manager.

        Creates an HTTP session shared by all operations within the block.

        :return: The client instance.
        :rtype: AppSheetClient
        """
        if self._session is None:
            self._session = requests.Session()
            self._owns_session = True
            # Drop any client built before the session existed
            self._actions = None
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """
        Release the session opened by the context manager, if any.

        Safe to call multiple times. A session passed to the constructor is left open.
        """
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None
            self._owns_session = False
        self._actions = None

    def _get_actions(self) -> _ActionClient:
        """
        Get or create the internal Action client.

        :rtype: ~appsheet_sdk.data._action._ActionClient
        """
        if self._actions is None:
            self._actions = _ActionClient(self._config, session=self._session, sleep=self._sleep)
        return self._actions

    # ------------------------------------------------------------------ read

    def find(
        self,
        table: str,
        filter_condition: Optional[str] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> ApiResponse:
        """
        Find rows with an optional filter, sort order and row limit.

        The selector is evaluated by AppSheet; see
        :func:`~appsheet_sdk.models.selector.build_selector`.

        :param table: Table or slice name.
        :type table: str
        :param filter_condition: AppSheet condition, e.g. ``[last_name] = "Smith"``. Defaults to ``TRUE``.
        :type filter_condition: str or None
        :param order_by: Column name to order by.
        :type order_by: str or None
        :param descending: Order descending if True.
        :type descending: bool
        :param limit: Maximum number of rows.
        :type limit: int or None
        :return: ``content`` is the list of rows on success.
        :rtype: ~appsheet_sdk.core.results.ApiResponse

        Example::

            result = client.find("People", '[Age] > 30', order_by="Name", descending=True, limit=5)
            for row in result.content:
                print(row["Name"])
        """
        selector = build_selector(table, filter_condition, order_by, descending, limit)
        return self._get_actions()._execute(table, ACTION_FIND, selector=selector)

    def find_by_key(self, table: str, key_column: str, key_value: Any) -> ApiResponse:
        """
        Fetch a single row by key.

        Runs :meth:`find` with ``[key_column] = "key_value"``. A non-200 result is
        returned unchanged. Otherwise ``content`` is the first matching row, or
        ``None``, and ``rows_returned`` is 1 or 0.

        :param table: Table or slice name.
        :type table: str
        :param key_column: Key column name.
        :type key_column: str
        :param key_value: Key value to match.
        :rtype: ~appsheet_sdk.core.results.ApiResponse

        Example::

            result = client.find_by_key("People", "ID", "7")
            if result.rows_returned:
                print(result.content["Name"])
        """
        response = self.find(table, key_condition(key_column, key_value))
        if response.code != 200:
            return response
        rows = response.content if isinstance(response.content, list) else []
        first = rows[0] if rows else None
        return ApiResponse.from_body(response.code, SingleRecord(first))

    def query(self, table: str) -> SelectorBuilder:
        """
        Start a fluent query bound to this client.

        :param table: Table or slice name.
        :type table: str
        :rtype: ~appsheet_sdk.models.selector.SelectorBuilder

        Example::

            result = client.query("People").filter_eq("Status", "Active").top(10).execute()
        """
        return SelectorBuilder(table, _client=self)

    def find_dataframe(
        self,
        table: str,
        filter_condition: Optional[str] = None,
        order_by: Optional[str] = None,
        descending: bool = False,
        limit: Optional[int] = None,
    ) -> pd.DataFrame:
        """
        Same as :meth:`find`, returning the rows as a :class:`pandas.DataFrame`.

        :return: One row per record; an empty DataFrame when nothing matched.
        :rtype: ~pandas.DataFrame
        :raises ~appsheet_sdk.core.errors.HttpError: If AppSheet answered with a non-2xx status.

        Example::

            df = client.find_dataframe("Orders", '[Total] > 100', order_by="Date")
            print(df["Total"].sum())
        """
        response = self.find(table, filter_condition, order_by, descending, limit)
        if not response.ok:
            excerpt = response.content if isinstance(response.content, str) else None
            raise HttpError(
                f"Find on {table} failed with HTTP {response.code}",
                response.code,
                body_excerpt=excerpt[:200] if excerpt else None,
            )
        rows = response.content if isinstance(response.content, list) else []
        return records_to_dataframe(rows)

    # ----------------------------------------------------------------- write

    def add(self, table: str, records: Records) -> ApiResponse:
        """
        Add rows. Each record should contain every required column.

        :param table: Table or slice name.
        :type table: str
        :param records: Record dict, list of dicts, or DataFrame.
        :rtype: ~appsheet_sdk.core.results.ApiResponse

        Example::

            client.add("People", [{"Name": "Jane"}, {"Name": "John"}])
        """
        return self._get_actions()._execute(table, ACTION_ADD, rows=normalize_records(records))

    def update(self, table: str, records: Records) -> ApiResponse:
        """
        Update rows. Each record must contain the key column.

        :param table: Table or slice name.
        :type table: str
        :param records: Record dict, list of dicts, or DataFrame.
        :rtype: ~appsheet_sdk.core.results.ApiResponse
        """
        return self._get_actions()._execute(table, ACTION_EDIT, rows=normalize_records(records))

    def delete_rows(self, table: str, records: Records) -> ApiResponse:
        """
        Delete rows. Only the key column is required in each record.

        :param table: Table or slice name.
        :type table: str
        :param records: Record dict, list of dicts, or DataFrame.
        :rtype: ~appsheet_sdk.core.results.ApiResponse
        """
        return self._get_actions()._execute(table, ACTION_DELETE, rows=normalize_records(records))

    # ------------------------------------------------------- camelCase names

    def deleteRows(self, table: str, records: Records) -> ApiResponse:
        """
        .. deprecated::
            Use :meth:`delete_rows` instead.
        """
        warnings.warn(
            "AppSheetClient.deleteRows() is deprecated. Use client.delete_rows() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.delete_rows(table, records)

    def findByKey(self, table: str, key_column: str, key_value: Any) -> ApiResponse:
        """
        .. deprecated::
            Use :meth:`find_by_key` instead.
        """
        warnings.warn(
            "AppSheetClient.findByKey() is deprecated. Use client.find_by_key() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.find_by_key(table, key_column, key_value)


__all__ = ["AppSheetClient"]
