# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Selector expressions evaluated by AppSheet on the server.

A selector is built by nesting, always in this order::

    Filter(<table>, <condition>)
    OrderBy(<filter>, [<column>], TRUE|FALSE)
    Top(<orderby or filter>, <limit>)

AppSheet reads the third ``OrderBy`` argument as "ascending", so a descending
sort is sent as ``FALSE``.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..client import AppSheetClient
    from ..core.results import ApiResponse

TRUE_LITERAL = "TRUE"
FALSE_LITERAL = "FALSE"


def bracket_column(column: str) -> str:
    """Wrap a column name in brackets unless the caller already did."""
    return column if column.startswith("[") else f"[{column}]"


def format_value(value: Any) -> str:
    """
    Format a Python value as an AppSheet expression literal.

    :param value: Value to format.
    :return: ``TRUE``/``FALSE`` for booleans, bare numbers, double-quoted text,
        and ``""`` (blank) for ``None``.
    :rtype: str
    """
    if value is None:
        return '""'
    if isinstance(value, bool):
        return TRUE_LITERAL if value else FALSE_LITERAL
    if isinstance(value, numbers.Real):
        return _format_number(value)
    return f'"{value}"'


def _format_number(value: numbers.Real) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _is_positive_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value) and value > 0


def build_selector(
    table: str,
    filter_condition: Optional[str] = None,
    order_by: Optional[str] = None,
    descending: bool = False,
    limit: Optional[int] = None,
) -> str:
    """
    Compose a ``Filter``/``OrderBy``/``Top`` selector expression.

    :param table: Table or slice name.
    :type table: str
    :param filter_condition: AppSheet condition, e.g. ``[Status] = "Active"``. Defaults to ``TRUE``.
    :type filter_condition: str or None
    :param order_by: Column to sort by; bracketed automatically.
    :type order_by: str or None
    :param descending: Sort descending when True.
    :type descending: bool
    :param limit: Maximum rows; ignored unless a positive finite number.
    :type limit: int or None
    :return: Selector expression.
    :rtype: str

    Example::

        build_selector("T")
        # 'Filter(T, TRUE)'
        build_selector("T", "X=1", "name", False, 5)
        # 'Top(OrderBy(Filter(T, X=1), [name], TRUE), 5)'
    """
    selector = f"Filter({table}, {filter_condition or TRUE_LITERAL})"

    if order_by:
        ascending = FALSE_LITERAL if descending else TRUE_LITERAL
        selector = f"OrderBy({selector}, {bracket_column(order_by)}, {ascending})"

    if _is_positive_number(limit):
        selector = f"Top({selector}, {_format_number(limit)})"

    return selector


def key_condition(key_column: str, key_value: Any) -> str:
    """Equality condition used for key lookups: ``[column] = "value"``."""
    return f'{bracket_column(key_column)} = "{key_value}"'


@dataclass
class SelectorBuilder:
    """
    Fluent interface for building selector expressions.

    Several conditions are combined with ``AND(...)``. ``build()`` delegates to
    :func:`build_selector`, so the nesting order is always filter, then order,
    then limit.

    :param table: Table or slice name to query.
    :type table: str

    Example:
        Build and execute a query (via client)::

            response = (client.query("People")
                        .filter_eq("Status", "Active")
                        .filter_gt("Age", 30)
                        .order_by("Name", descending=True)
                        .top(10)
                        .execute())

        Build a standalone selector::

            selector = SelectorBuilder("People").where('[Age] > 30').top(5).build()
            # 'Top(Filter(People, [Age] > 30), 5)'
    """

    table: str
    _conditions: List[str] = field(default_factory=list)
    _order_by: Optional[str] = None
    _descending: bool = False
    _limit: Optional[int] = None
    _client: Any = field(default=None, compare=False, repr=False)

    def where(self, condition: str) -> "SelectorBuilder":
        """
        Add a raw AppSheet condition.

        :param condition: Condition expression, e.g. ``ISNOTBLANK([Email])``.
        :type condition: str
        :return: Self for method chaining.
        :rtype: SelectorBuilder
        """
        self._conditions.append(condition)
        return self

    def _compare(self, column: str, operator: str, value: Any) -> "SelectorBuilder":
        self._conditions.append(f"{bracket_column(column)} {operator} {format_value(value)}")
        return self

    def filter_eq(self, column: str, value: Any) -> "SelectorBuilder":
        """
        Add equality condition (``[column] = value``).

        Example::

            SelectorBuilder("People").filter_eq("Status", "Active")
        """
        return self._compare(column, "=", value)

    def filter_ne(self, column: str, value: Any) -> "SelectorBuilder":
        """Add not-equal condition (``[column] <> value``)."""
        return self._compare(column, "<>", value)

    def filter_gt(self, column: str, value: Any) -> "SelectorBuilder":
        return self._compare(column, ">", value)

    def filter_ge(self, column: str, value: Any) -> "SelectorBuilder":
        return self._compare(column, ">=", value)

    def filter_lt(self, column: str, value: Any) -> "SelectorBuilder":
        return self._compare(column, "<", value)

    def filter_le(self, column: str, value: Any) -> "SelectorBuilder":
        return self._compare(column, "<=", value)

    def order_by(self, column: str, descending: bool = False) -> "SelectorBuilder":
        """
        Set the sort column. A later call replaces an earlier one.

        :param column: Column name.
        :type column: str
        :param descending: Sort in descending order.
        :type descending: bool
        :return: Self for method chaining.
        :rtype: SelectorBuilder
        """
        self._order_by = column
        self._descending = descending
        return self

    def top(self, count: int) -> "SelectorBuilder":
        """
        Limit the number of rows returned.

        :param count: Maximum number of rows.
        :type count: int
        :return: Self for method chaining.
        :rtype: SelectorBuilder
        :raises ValueError: If ``count`` is not a finite number of at least 1.
        """
        if not _is_positive_number(count) or count < 1:
            raise ValueError("top count must be a finite number of at least 1")
        self._limit = count
        return self

    def condition(self) -> Optional[str]:
        """
        Combined filter condition, or ``None`` when no condition was added.

        :rtype: str or None
        """
        if not self._conditions:
            return None
        if len(self._conditions) == 1:
            return self._conditions[0]
        return f"AND({', '.join(self._conditions)})"

    def build(self) -> str:
        """
        Build the selector expression.

        :rtype: str
        """
        return build_selector(self.table, self.condition(), self._order_by, self._descending, self._limit)

    def execute(self) -> "ApiResponse":
        """
        Run the query through the client that created this builder.

        :raises RuntimeError: If the builder was not created via ``client.query()``.
        """
        if self._client is None:
            raise RuntimeError(
                "Cannot execute: selector was not created via client.query(). "
                "Use client.find() instead."
            )
        client: "AppSheetClient" = self._client
        return client.find(self.table, self.condition(), self._order_by, self._descending, self._limit)


__all__ = ["build_selector", "bracket_column", "format_value", "key_condition", "SelectorBuilder"]
