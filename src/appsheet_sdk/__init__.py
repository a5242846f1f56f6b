# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Python client for the AppSheet REST API.

Example::

    import appsheet_sdk

    app = appsheet_sdk.app("YOUR_APP_ID", "YOUR_ACCESS_KEY")
    result = app.find("MyTable", '[Status] = "Active"')
    print(result.code, result.rows_returned)
"""

from __future__ import annotations

__version__ = "1.0.0"

from .client import AppSheetClient
from .core.config import AppSheetConfig, DEFAULT_MAX_RETRIES, REGION_GLOBAL
from .core.errors import AppSheetError, ConfigurationError, HttpError, TransportExhaustionError
from .core.results import ApiResponse
from .models.record import normalize_records
from .models.selector import SelectorBuilder, build_selector


def app(
    app_id: str,
    access_key: str,
    region: str = REGION_GLOBAL,
    max_retries: int = DEFAULT_MAX_RETRIES,
) -> AppSheetClient:
    """
    Create a client for one AppSheet app.

    :param app_id: The AppSheet app ID.
    :type app_id: str
    :param access_key: The AppSheet application access key.
    :type access_key: str
    :param region: ``"www.appsheet.com"`` (default) or ``"eu.appsheet.com"``.
    :type region: str
    :param max_retries: Total attempts per request when the transport fails (default 2).
    :type max_retries: int
    :return: A client ready to use.
    :rtype: ~appsheet_sdk.client.AppSheetClient
    :raises ~appsheet_sdk.core.errors.ConfigurationError: If any argument is missing or invalid.
    """
    return AppSheetClient(AppSheetConfig(app_id, access_key, region=region, max_retries=max_retries))


__all__ = [
    "__version__",
    "app",
    "AppSheetClient",
    "AppSheetConfig",
    "ApiResponse",
    "AppSheetError",
    "ConfigurationError",
    "HttpError",
    "TransportExhaustionError",
    "SelectorBuilder",
    "build_selector",
    "normalize_records",
]
