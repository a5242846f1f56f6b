# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data models and expression helpers for the AppSheet SDK.

- :mod:`~appsheet_sdk.models.record`: record type aliases and :func:`normalize_records`.
- :mod:`~appsheet_sdk.models.selector`: :func:`build_selector` and the fluent
  :class:`~appsheet_sdk.models.selector.SelectorBuilder`.

Note:
    This ``__init__.py`` does NOT import/export models.
    Import directly from the specific module files.
"""

__all__ = []
