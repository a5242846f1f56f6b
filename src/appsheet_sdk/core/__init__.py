# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Core infrastructure components for the AppSheet SDK.

This module contains the foundational components including configuration,
HTTP client, result types, and error handling.
"""

from .config import AppSheetConfig
from .errors import (
    AppSheetError,
    ConfigurationError,
    TransportExhaustionError,
    HttpError,
)
from .results import (
    ApiResponse,
    ResponseBody,
    RecordList,
    ActionResult,
    RawBody,
    SingleRecord,
)

__all__ = [
    "AppSheetConfig",
    "AppSheetError",
    "ConfigurationError",
    "TransportExhaustionError",
    "HttpError",
    "ApiResponse",
    "ResponseBody",
    "RecordList",
    "ActionResult",
    "RawBody",
    "SingleRecord",
]
