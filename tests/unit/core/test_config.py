# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import dataclasses

import pytest

from appsheet_sdk.core.config import AppSheetConfig
from appsheet_sdk.core.errors import ConfigurationError
from appsheet_sdk.core import error_codes as ec


class TestAppSheetConfig:
    """Construction-time validation of AppSheetConfig."""

    def test_defaults(self):
        config = AppSheetConfig("app-1", "key-1")
        assert config.region == "www.appsheet.com"
        assert config.max_retries == 2
        assert config.backoff == 0.5
        assert config.timeout is None

    def test_base_url(self):
        config = AppSheetConfig("app-1", "key-1", region="eu.appsheet.com")
        assert config.base_url == "https://eu.appsheet.com/api/v2/apps/app-1/tables"

    def test_is_immutable(self):
        config = AppSheetConfig("app-1", "key-1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.max_retries = 5

    @pytest.mark.parametrize("app_id", ["", None, 123])
    def test_invalid_app_id(self, app_id):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig(app_id, "key-1")
        assert exc_info.value.subcode == ec.CONFIG_APP_ID_INVALID
        assert exc_info.value.code == "configuration_error"

    @pytest.mark.parametrize("access_key", ["", None, ["key"]])
    def test_invalid_access_key(self, access_key):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig("app-1", access_key)
        assert exc_info.value.subcode == ec.CONFIG_ACCESS_KEY_INVALID

    def test_access_key_not_echoed_in_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig("app-1", "key-1", region="us.appsheet.com")
        assert "key-1" not in str(exc_info.value)

    @pytest.mark.parametrize("region", ["us.appsheet.com", "", "WWW.APPSHEET.COM", None])
    def test_invalid_region(self, region):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig("app-1", "key-1", region=region)
        assert exc_info.value.subcode == ec.CONFIG_REGION_INVALID
        assert exc_info.value.details["supported"] == ["www.appsheet.com", "eu.appsheet.com"]

    @pytest.mark.parametrize("max_retries", [0, -1, 0.5, "3", None, True, float("nan"), float("inf")])
    def test_invalid_max_retries(self, max_retries):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig("app-1", "key-1", max_retries=max_retries)
        assert exc_info.value.subcode == ec.CONFIG_MAX_RETRIES_INVALID

    def test_max_retries_of_one_is_accepted(self):
        assert AppSheetConfig("app-1", "key-1", max_retries=1).max_retries == 1

    @pytest.mark.parametrize("backoff", [-1, float("nan"), float("inf")])
    def test_invalid_backoff(self, backoff):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig("app-1", "key-1", backoff=backoff)
        assert exc_info.value.subcode == ec.CONFIG_BACKOFF_INVALID

    @pytest.mark.parametrize("timeout", [0, -5, "10", float("nan"), float("inf")])
    def test_invalid_timeout(self, timeout):
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig("app-1", "key-1", timeout=timeout)
        assert exc_info.value.subcode == ec.CONFIG_TIMEOUT_INVALID

    def test_repr_masks_access_key(self):
        assert "key-1" not in repr(AppSheetConfig("app-1", "key-1"))


class TestAppSheetConfigFromEnv:
    """Tests for AppSheetConfig.from_env."""

    def test_reads_all_variables(self):
        env = {
            "APPSHEET_APP_ID": "app-9",
            "APPSHEET_ACCESS_KEY": "key-9",
            "APPSHEET_REGION": "eu.appsheet.com",
            "APPSHEET_MAX_RETRIES": "4",
            "APPSHEET_BACKOFF": "0.25",
            "APPSHEET_TIMEOUT": "30",
        }
        config = AppSheetConfig.from_env(environ=env)
        assert config == AppSheetConfig("app-9", "key-9", "eu.appsheet.com", 4, 0.25, 30.0)

    def test_optional_variables_default(self):
        config = AppSheetConfig.from_env(environ={"APPSHEET_APP_ID": "a", "APPSHEET_ACCESS_KEY": "k"})
        assert config.region == "www.appsheet.com"
        assert config.max_retries == 2
        assert config.backoff == 0.5
        assert config.timeout is None

    def test_custom_prefix(self):
        config = AppSheetConfig.from_env(prefix="MYAPP_", environ={"MYAPP_APP_ID": "a", "MYAPP_ACCESS_KEY": "k"})
        assert config.app_id == "a"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("APPSHEET_APP_ID", "env-app")
        monkeypatch.setenv("APPSHEET_ACCESS_KEY", "env-key")
        monkeypatch.delenv("APPSHEET_REGION", raising=False)
        monkeypatch.delenv("APPSHEET_MAX_RETRIES", raising=False)
        monkeypatch.delenv("APPSHEET_BACKOFF", raising=False)
        monkeypatch.delenv("APPSHEET_TIMEOUT", raising=False)
        assert AppSheetConfig.from_env().app_id == "env-app"

    def test_missing_credentials_fail(self):
        with pytest.raises(ConfigurationError):
            AppSheetConfig.from_env(environ={})

    def test_non_numeric_retries_fail(self):
        env = {"APPSHEET_APP_ID": "a", "APPSHEET_ACCESS_KEY": "k", "APPSHEET_MAX_RETRIES": "many"}
        with pytest.raises(ConfigurationError) as exc_info:
            AppSheetConfig.from_env(environ=env)
        assert exc_info.value.details == {"variable": "APPSHEET_MAX_RETRIES"}
