# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""Decoding of AppSheet response bodies into :class:`~appsheet_sdk.core.results.ApiResponse`."""

from __future__ import annotations

import json
from typing import Any, Optional, Union

from ..core.results import ApiResponse, classify_content


def parse_content(body: Optional[Union[str, bytes]]) -> Any:
    """
    Decode a response body.

    Returns the decoded JSON when the body parses, the raw text when it does not,
    and ``None`` for an empty body. Never raises.
    """
    if isinstance(body, (bytes, bytearray)):
        body = body.decode("utf-8", errors="replace")
    if not body:
        return None
    try:
        return json.loads(body)
    except ValueError:
        return body


def interpret_response(status: int, body: Optional[Union[str, bytes]]) -> ApiResponse:
    """
    Build an :class:`ApiResponse` from a status code and a raw body.

    Row count comes from the body shape: the length of a JSON array, the length
    of the ``rows`` array of a JSON object, otherwise 0.

    :param status: HTTP status code.
    :type status: int
    :param body: Raw response body.
    :type body: str or bytes or None
    :rtype: ~appsheet_sdk.core.results.ApiResponse

    Example::

        interpret_response(200, '[{"a": 1}, {"a": 2}]').rows_returned  # 2
        interpret_response(200, '{"rows": [{"a": 1}]}').rows_returned  # 1
        interpret_response(500, "not json").content                    # 'not json'
    """
    return ApiResponse.from_body(int(status), classify_content(parse_content(body)))


__all__ = ["parse_content", "interpret_response"]
