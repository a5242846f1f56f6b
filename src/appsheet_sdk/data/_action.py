# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Low-level client for the AppSheet table ``Action`` endpoint."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional
from urllib.parse import quote

import requests

from ..core._http import _HttpClient
from ..core.config import AppSheetConfig
from ..core.results import ApiResponse
from ._response import interpret_response

logger = logging.getLogger(__name__)

# Action verbs accepted by the endpoint
ACTION_FIND = "Find"
ACTION_ADD = "Add"
ACTION_EDIT = "Edit"
ACTION_DELETE = "Delete"


class _ActionClient:
    """
    Issues ``POST <base_url>/<table>/Action`` calls for one AppSheet app.

    :param config: Validated app configuration.
    :type config: ~appsheet_sdk.core.config.AppSheetConfig
    :param session: Optional requests.Session shared by every call.
    :type session: :class:`requests.Session` | None
    :param sleep: Pause function used between retries.
    :type sleep: Callable[[float], None] | None
    """

    def __init__(
        self,
        config: AppSheetConfig,
        session: Optional[requests.Session] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.config = config
        self.base_url = config.base_url
        self._http = _HttpClient(
            retries=config.max_retries,
            backoff=config.backoff,
            timeout=config.timeout,
            session=session,
            sleep=sleep,
        )

    def _headers(self) -> Dict[str, str]:
        """Static credential header; ``Content-Type`` is set by ``requests`` from ``json=``."""
        return {
            "ApplicationAccessKey": self.config.access_key,
            "Accept": "application/json",
        }

    def _url(self, table: str) -> str:
        return f"{self.base_url}/{quote(table, safe='')}/Action"

    @staticmethod
    def _payload(action: str, rows: Optional[List[Dict[str, Any]]], selector: Optional[str]) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "Action": action,
            "Rows": rows if rows is not None else [],
        }
        # Properties must be absent, not null, when there is no selector
        if selector:
            payload["Properties"] = {"Selector": selector}
        return payload

    def _execute(
        self,
        table: str,
        action: str,
        rows: Optional[List[Dict[str, Any]]] = None,
        selector: Optional[str] = None,
        method: str = "post",
    ) -> ApiResponse:
        """
        Send one Action request and interpret the reply.

        :param table: Table or slice name.
        :type table: str
        :param action: ``Find``, ``Add``, ``Edit`` or ``Delete``.
        :type action: str
        :param rows: Rows for Add/Edit/Delete. Defaults to ``[]``.
        :type rows: list[dict] or None
        :param selector: Selector expression for Find.
        :type selector: str or None
        :param method: HTTP method (default ``"post"``).
        :type method: str
        :return: Response with status code, content and row count. Non-2xx statuses
            are returned, not raised.
        :rtype: ~appsheet_sdk.core.results.ApiResponse
        :raises ~appsheet_sdk.core.errors.TransportExhaustionError: If every attempt failed.
        """
        url = self._url(table)
        payload = self._payload(action, rows, selector)
        logger.debug("%s %s on %s (%d rows)", action, url, table, len(payload["Rows"]))

        r = self._http._request(method, url, headers=self._headers(), json=payload)
        response = interpret_response(r.status_code, r.text)

        if response.ok:
            logger.debug("%s on %s returned %s (%d rows)", action, table, response.code, response.rows_returned)
        else:
            logger.warning("%s on %s returned HTTP %s", action, table, response.code)
        return response


__all__ = ["ACTION_FIND", "ACTION_ADD", "ACTION_EDIT", "ACTION_DELETE"]
