# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Shared pytest fixtures and configuration for AppSheet SDK tests.

This module provides common test fixtures, mock objects, and configuration
that can be used across all test modules.
"""

import pytest
from unittest.mock import Mock

from appsheet_sdk.core.config import AppSheetConfig


@pytest.fixture
def test_config():
    """Test configuration with safe defaults."""
    return AppSheetConfig(
        app_id="app-123",
        access_key="key-abc",
        region="www.appsheet.com",
        max_retries=3,
        backoff=0.5,
    )


@pytest.fixture
def fake_sleep():
    """Sleep replacement that records requested delays."""
    return Mock()


@pytest.fixture
def sample_rows():
    """Sample rows as returned by a Find action."""
    return [
        {"ID": "1", "Name": "Jane Doe", "Status": "Active"},
        {"ID": "2", "Name": "John Roe", "Status": "Inactive"},
    ]
