# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

"""
Data access layer for the AppSheet SDK.

Internal modules that build Action requests and interpret their responses.
"""

__all__ = []
