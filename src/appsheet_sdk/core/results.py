# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Result types for AppSheet SDK operations.

Every operation returns an :class:`ApiResponse`. Its ``content`` takes one of
three shapes depending on what AppSheet sent back, each modeled as a variant of
:data:`ResponseBody` with its own row-count rule:

- :class:`RecordList`: a JSON array of rows, as returned by ``Find``.
- :class:`ActionResult`: a JSON object with a ``rows`` array, as returned by
  ``Add``, ``Edit`` and ``Delete``.
- :class:`RawBody`: anything else, such as an HTML error page, an empty body
  (``None``) or a bare JSON scalar.

Key lookups narrow a :class:`RecordList` down to a :class:`SingleRecord`.

Example::

    response = client.find("People", '[Status] = "Active"')
    if response.ok:
        for row in response.content:
            print(row["Name"])
    print(response.to_dict())  # {'code': 200, 'content': [...], 'rowsReturned': 3}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass(frozen=True)
class RecordList:
    """
    JSON array body.

    :param rows: Rows in the order AppSheet returned them.
    :type rows: :class:`list` of :class:`dict`
    """

    rows: List[Any] = field(default_factory=list)

    @property
    def value(self) -> List[Any]:
        return self.rows

    @property
    def rows_returned(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class ActionResult:
    """
    JSON object body. Row count comes from its ``rows`` array when present.

    :param value: The decoded object.
    :type value: :class:`dict`
    """

    value: Dict[str, Any] = field(default_factory=dict)

    @property
    def rows_returned(self) -> int:
        rows = self.value.get("rows")
        return len(rows) if isinstance(rows, list) else 0


@dataclass(frozen=True)
class RawBody:
    """
    Body that is not a JSON array or object: raw text, ``None`` or a JSON scalar.

    :param value: The raw text, ``None`` for an empty body, or the decoded scalar.
    :type value: :class:`str` | None | Any
    """

    value: Any = None

    @property
    def rows_returned(self) -> int:
        return 0


@dataclass(frozen=True)
class SingleRecord:
    """
    At most one row, as returned by a key lookup.

    :param value: The matching row, or ``None`` when nothing matched.
    :type value: :class:`dict` | None
    """

    value: Any = None

    @property
    def rows_returned(self) -> int:
        return 0 if self.value is None else 1


ResponseBody = Union[RecordList, ActionResult, RawBody, SingleRecord]


def classify_content(content: Any) -> ResponseBody:
    """Wrap decoded response content in its :data:`ResponseBody` variant."""
    if isinstance(content, list):
        return RecordList(content)
    if isinstance(content, dict):
        return ActionResult(content)
    return RawBody(content)


@dataclass(frozen=True)
class ApiResponse:
    """
    Outcome of a single AppSheet API call.

    Non-2xx statuses are reported here rather than raised; check :attr:`ok` or
    :attr:`code` before trusting :attr:`content`.

    :param code: HTTP status code.
    :type code: :class:`int`
    :param content: Decoded JSON, the raw body text when it is not JSON, or ``None`` when empty.
    :type content: Any
    :param rows_returned: Number of rows returned or affected.
    :type rows_returned: :class:`int`
    """

    code: int
    content: Any = None
    rows_returned: int = 0
    _body: Optional[ResponseBody] = field(default=None, compare=False, repr=False)

    @classmethod
    def from_body(cls, code: int, body: ResponseBody) -> "ApiResponse":
        """Build a response whose row count follows the body variant's rule."""
        return cls(code=code, content=body.value, rows_returned=body.rows_returned, _body=body)

    @property
    def body(self) -> ResponseBody:
        """
        The tagged variant of :attr:`content`.

        Responses built with :meth:`from_body` keep the variant they were built
        from; otherwise it is derived from :attr:`content`.
        """
        if self._body is not None:
            return self._body
        return classify_content(self.content)

    @property
    def ok(self) -> bool:
        """Whether the status code is 2xx."""
        return 200 <= self.code < 300

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain dictionary form ``{"code", "content", "rowsReturned"}``.

        :rtype: :class:`dict`
        """
        return {"code": self.code, "content": self.content, "rowsReturned": self.rows_returned}


__all__ = [
    "RecordList",
    "ActionResult",
    "RawBody",
    "SingleRecord",
    "ResponseBody",
    "classify_content",
    "ApiResponse",
]
