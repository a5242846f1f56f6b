# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

from __future__ import annotations

import math
import numbers
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from . import error_codes as ec
from .errors import ConfigurationError

#: Hosts accepted by the AppSheet REST API.
REGION_GLOBAL = "www.appsheet.com"
REGION_EU = "eu.appsheet.com"
SUPPORTED_REGIONS = (REGION_GLOBAL, REGION_EU)

DEFAULT_MAX_RETRIES = 2
DEFAULT_BACKOFF = 0.5


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


@dataclass(frozen=True)
class AppSheetConfig:
    """
    Immutable settings for one AppSheet app.

    Validation happens when the instance is created so that a misconfigured
    client fails immediately rather than on its first request.

    :param app_id: AppSheet app ID.
    :type app_id: str
    :param access_key: Application access key, sent in the ``ApplicationAccessKey`` header.
    :type access_key: str
    :param region: AppSheet host, ``"www.appsheet.com"`` (default) or ``"eu.appsheet.com"``.
    :type region: str
    :param max_retries: Total number of attempts per request, including the first (default: 2).
    :type max_retries: int
    :param backoff: Fixed pause in seconds between attempts (default: 0.5).
    :type backoff: float
    :param timeout: Request timeout in seconds. ``None`` uses the per-method default.
    :type timeout: float or None

    :raises ~appsheet_sdk.core.errors.ConfigurationError: If any setting is invalid.
    """

    app_id: str
    access_key: str
    region: str = REGION_GLOBAL
    max_retries: int = DEFAULT_MAX_RETRIES

    # HTTP tuning
    backoff: float = DEFAULT_BACKOFF
    timeout: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.app_id, str) or not self.app_id:
            raise ConfigurationError(
                f'"app_id" must be a valid string. Received "{type(self.app_id).__name__}"',
                subcode=ec.CONFIG_APP_ID_INVALID,
            )
        if not isinstance(self.access_key, str) or not self.access_key:
            # The key itself is a secret; report only its type.
            raise ConfigurationError(
                f'"access_key" must be a valid, non-empty string. Received "{type(self.access_key).__name__}"',
                subcode=ec.CONFIG_ACCESS_KEY_INVALID,
            )
        if self.region not in SUPPORTED_REGIONS:
            raise ConfigurationError(
                f'"region" must be either "{REGION_GLOBAL}" or "{REGION_EU}". Received "{self.region}"',
                subcode=ec.CONFIG_REGION_INVALID,
                details={"supported": list(SUPPORTED_REGIONS)},
            )
        if not _is_number(self.max_retries) or not self.max_retries >= 1:
            raise ConfigurationError(
                f'"max_retries" must be a number greater than or equal to 1. Received "{self.max_retries}"',
                subcode=ec.CONFIG_MAX_RETRIES_INVALID,
            )
        if not _is_number(self.backoff) or not self.backoff >= 0:
            raise ConfigurationError(
                f'"backoff" must be a non-negative number of seconds. Received "{self.backoff}"',
                subcode=ec.CONFIG_BACKOFF_INVALID,
            )
        if self.timeout is not None and (not _is_number(self.timeout) or not self.timeout > 0):
            raise ConfigurationError(
                f'"timeout" must be a positive number of seconds or None. Received "{self.timeout}"',
                subcode=ec.CONFIG_TIMEOUT_INVALID,
            )

    @property
    def base_url(self) -> str:
        """Tables endpoint of the app, without a trailing slash."""
        return f"https://{self.region}/api/v2/apps/{self.app_id}/tables"

    def __repr__(self) -> str:
        return (
            f"AppSheetConfig(app_id={self.app_id!r}, access_key='***', region={self.region!r}, "
            f"max_retries={self.max_retries!r}, backoff={self.backoff!r}, timeout={self.timeout!r})"
        )

    @classmethod
    def from_env(cls, prefix: str = "APPSHEET_", environ: Optional[Mapping[str, str]] = None) -> "AppSheetConfig":
        """
        Create a configuration from environment variables.

        Reads ``<prefix>APP_ID``, ``<prefix>ACCESS_KEY``, ``<prefix>REGION``,
        ``<prefix>MAX_RETRIES``, ``<prefix>BACKOFF`` and ``<prefix>TIMEOUT``.
        Unset optional variables fall back to the dataclass defaults.

        :param prefix: Variable name prefix (default ``"APPSHEET_"``).
        :type prefix: str
        :param environ: Mapping to read instead of :data:`os.environ`.
        :type environ: Mapping[str, str] or None
        :return: Validated configuration.
        :rtype: ~appsheet_sdk.core.config.AppSheetConfig
        :raises ~appsheet_sdk.core.errors.ConfigurationError: On missing or malformed values.
        """
        env = os.environ if environ is None else environ

        def _number(name: str, default: Any, cast: Any) -> Any:
            raw = env.get(prefix + name)
            if raw is None or raw.strip() == "":
                return default
            try:
                return cast(raw)
            except ValueError:
                raise ConfigurationError(
                    f'"{prefix + name}" must be numeric. Received "{raw}"',
                    details={"variable": prefix + name},
                ) from None

        return cls(
            app_id=env.get(prefix + "APP_ID", ""),
            access_key=env.get(prefix + "ACCESS_KEY", ""),
            region=env.get(prefix + "REGION") or REGION_GLOBAL,
            max_retries=_number("MAX_RETRIES", DEFAULT_MAX_RETRIES, int),
            backoff=_number("BACKOFF", DEFAULT_BACKOFF, float),
            timeout=_number("TIMEOUT", None, float),
        )


__all__ = [
    "AppSheetConfig",
    "REGION_GLOBAL",
    "REGION_EU",
    "SUPPORTED_REGIONS",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_BACKOFF",
]
