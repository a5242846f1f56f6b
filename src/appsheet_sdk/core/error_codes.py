# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

# Configuration subcodes
CONFIG_APP_ID_INVALID = "config_app_id_invalid"
CONFIG_ACCESS_KEY_INVALID = "config_access_key_invalid"
CONFIG_REGION_INVALID = "config_region_invalid"
CONFIG_MAX_RETRIES_INVALID = "config_max_retries_invalid"
CONFIG_BACKOFF_INVALID = "config_backoff_invalid"
CONFIG_TIMEOUT_INVALID = "config_timeout_invalid"

# Transport subcodes
TRANSPORT_RETRY_EXHAUSTED = "transport_retry_exhausted"


def http_subcode(status_code: int) -> str:
    """Map an HTTP status to its subcode constant (``http_<status>``)."""
    return f"http_{status_code}"
