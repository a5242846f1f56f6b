# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared test utilities for unit tests.

Provides a fake HTTP session that replays canned responses and records calls.
"""

import json


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, status_code=200, body=""):
        self.status_code = status_code
        self.text = body if isinstance(body, str) else json.dumps(body)


class FakeSession:
    """Mock session that returns pre-configured responses or raises pre-configured errors.

    Args:
        responses: Items returned in sequence; an Exception instance is raised instead.

    Attributes:
        calls: List of (method, url, kwargs) tuples recording all requests made.
        closed: Whether close() was called.
    """

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if not self._responses:
            raise AssertionError("FakeSession ran out of responses")
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True

    def last_payload(self):
        return self.calls[-1][2]["json"]
