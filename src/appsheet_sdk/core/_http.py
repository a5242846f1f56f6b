# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
HTTP client with bounded retry, timeout handling, and optional session support.

This module provides :class:`~appsheet_sdk.core._http._HttpClient`, a wrapper
around the requests library that retries transport failures (connection
errors, timeouts) a bounded number of times with a fixed pause between
attempts. HTTP error statuses are returned to the caller untouched.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

import requests

from .config import DEFAULT_BACKOFF
from .errors import TransportExhaustionError

logger = logging.getLogger(__name__)


class _HttpClient:
    """
    HTTP client with a bounded retry ceiling and a fixed backoff.

    :param retries: Maximum total number of attempts per request, including the first. Default is 2.
    :type retries: :class:`int` | None
    :param backoff: Delay in seconds between attempts. Default is 0.5.
    :type backoff: :class:`float` | None
    :param timeout: Default request timeout in seconds. If None, uses per-method defaults.
    :type timeout: :class:`float` | None
    :param session: Optional requests.Session. If provided, all requests use it.
    :type session: :class:`requests.Session` | None
    :param sleep: Callable used to pause between attempts. Defaults to :func:`time.sleep`.
    :type sleep: Callable[[float], None] | None
    """

    def __init__(
        self,
        retries: Optional[int] = None,
        backoff: Optional[float] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.max_attempts = int(retries) if retries is not None else 2
        self.backoff = backoff if backoff is not None else DEFAULT_BACKOFF
        self.default_timeout: Optional[float] = timeout
        self._session = session
        self._sleep = sleep if sleep is not None else time.sleep

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Execute an HTTP request, retrying transport failures.

        Only :class:`requests.exceptions.RequestException` raised by the transport
        counts as a failed attempt. Any response that arrives, whatever its status,
        ends the loop.

        :param method: HTTP method (GET, POST, ...).
        :type method: :class:`str`
        :param url: Target URL for the request.
        :type url: :class:`str`
        :param kwargs: Additional arguments passed to ``requests.request()`` or
            ``session.request()``, including headers, json, etc.
        :return: HTTP response object.
        :rtype: :class:`requests.Response`
        :raises ~appsheet_sdk.core.errors.TransportExhaustionError: If every attempt failed.
        """
        # If no timeout is provided, use the user-specified default timeout if set;
        # otherwise, apply per-method defaults (120s for POST/DELETE, 10s for others).
        if "timeout" not in kwargs:
            if self.default_timeout is not None:
                kwargs["timeout"] = self.default_timeout
            else:
                m = (method or "").lower()
                kwargs["timeout"] = 120 if m in ("post", "delete") else 10

        attempts = 0
        while True:
            try:
                if self._session is not None:
                    return self._session.request(method, url, **kwargs)
                return requests.request(method, url, **kwargs)
            except requests.exceptions.RequestException as exc:
                attempts += 1
                if attempts >= self.max_attempts:
                    logger.error("%s %s failed after %d attempts: %s", method, url, attempts, exc)
                    raise TransportExhaustionError(attempts, exc) from exc
                logger.warning(
                    "%s %s attempt %d of %s failed (%s); retrying in %.2fs",
                    method,
                    url,
                    attempts,
                    self.max_attempts,
                    exc,
                    self.backoff,
                )
                self._sleep(self.backoff)
