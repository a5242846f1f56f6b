# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Structured exceptions raised by the AppSheet SDK.

Only two conditions abort an operation: invalid configuration, detected when the
client is built, and exhaustion of the transport retry budget. HTTP error statuses
returned by AppSheet are *not* raised; they come back as an
:class:`~appsheet_sdk.core.results.ApiResponse` carrying the status code.
"""

from __future__ import annotations

import datetime as _dt
from typing import Any, Dict, Optional

from .error_codes import TRANSPORT_RETRY_EXHAUSTED, http_subcode


class AppSheetError(Exception):
    """Base structured error for the AppSheet SDK."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        subcode: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
        source: Optional[str] = None,
        is_transient: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.subcode = subcode
        self.status_code = status_code
        self.details = details or {}
        self.source = source or "client"
        self.is_transient = is_transient
        self.timestamp = _dt.datetime.now(_dt.timezone.utc).isoformat().replace("+00:00", "Z")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "code": self.code,
            "subcode": self.subcode,
            "status_code": self.status_code,
            "details": self.details,
            "source": self.source,
            "is_transient": self.is_transient,
            "timestamp": self.timestamp,
        }

    def __repr__(self) -> str:  # pragma: no cover
        return f"{self.__class__.__name__}(code={self.code!r}, subcode={self.subcode!r}, message={self.message!r})"


class ConfigurationError(AppSheetError):
    """Invalid client configuration. Raised at construction, never retried."""

    def __init__(self, message: str, *, subcode: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="configuration_error", subcode=subcode, details=details, source="client")


class TransportExhaustionError(AppSheetError):
    """
    Every attempt allowed by the retry ceiling failed at the transport level.

    :param attempts: Number of attempts made before giving up.
    :type attempts: :class:`int`
    :param last_cause: The transport exception raised by the final attempt.
    :type last_cause: :class:`Exception`
    """

    def __init__(self, attempts: int, last_cause: BaseException) -> None:
        super().__init__(
            f"AppSheet API failed after {attempts} attempts: {last_cause}",
            code="transport_error",
            subcode=TRANSPORT_RETRY_EXHAUSTED,
            details={"attempts": attempts, "last_cause": repr(last_cause)},
            source="client",
            is_transient=True,
        )
        self.attempts = attempts
        self.last_cause = last_cause


class HttpError(AppSheetError):
    def __init__(
        self,
        message: str,
        status_code: int,
        body_excerpt: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        d = details or {}
        if body_excerpt is not None:
            d["body_excerpt"] = body_excerpt
        super().__init__(
            message,
            code="http_error",
            subcode=http_subcode(status_code),
            status_code=status_code,
            details=d,
            source="server",
            is_transient=status_code in (429, 502, 503, 504),
        )


__all__ = ["AppSheetError", "ConfigurationError", "TransportExhaustionError", "HttpError"]
