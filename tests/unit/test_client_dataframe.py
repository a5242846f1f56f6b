# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import unittest
from unittest.mock import MagicMock

import pandas as pd

from appsheet_sdk.client import AppSheetClient
from appsheet_sdk.core.config import AppSheetConfig
from appsheet_sdk.core.errors import HttpError
from appsheet_sdk.core.results import ApiResponse


class TestFindDataFrame(unittest.TestCase):
    """Tests for find_dataframe."""

    def setUp(self):
        self.client = AppSheetClient(AppSheetConfig("app-123", "key-abc"))
        self.client._actions = MagicMock()

    def test_rows_become_dataframe(self):
        rows = [{"ID": "1", "Name": "A"}, {"ID": "2", "Name": "B"}]
        self.client._actions._execute.return_value = ApiResponse(200, rows, 2)

        df = self.client.find_dataframe("People", order_by="Name", limit=2)

        self.assertIsInstance(df, pd.DataFrame)
        self.assertEqual(len(df), 2)
        self.assertListEqual(df["Name"].tolist(), ["A", "B"])
        self.client._actions._execute.assert_called_once_with(
            "People", "Find", selector="Top(OrderBy(Filter(People, TRUE), [Name], TRUE), 2)"
        )

    def test_ragged_rows_union_columns(self):
        rows = [{"ID": "1", "Name": "A"}, {"ID": "2", "Email": "b@example.com"}]
        self.client._actions._execute.return_value = ApiResponse(200, rows, 2)

        df = self.client.find_dataframe("People")

        self.assertEqual(set(df.columns), {"ID", "Name", "Email"})
        self.assertTrue(pd.isna(df.iloc[1]["Name"]))

    def test_no_rows_gives_empty_dataframe(self):
        self.client._actions._execute.return_value = ApiResponse(200, [], 0)

        df = self.client.find_dataframe("People")

        self.assertIsInstance(df, pd.DataFrame)
        self.assertTrue(df.empty)

    def test_error_status_raises_http_error(self):
        self.client._actions._execute.return_value = ApiResponse(403, "Forbidden", 0)

        with self.assertRaises(HttpError) as ctx:
            self.client.find_dataframe("People")

        self.assertEqual(ctx.exception.status_code, 403)
        self.assertEqual(ctx.exception.details["body_excerpt"], "Forbidden")


class TestDataFrameWrites(unittest.TestCase):
    """DataFrames passed to write operations are sent one record per row."""

    def setUp(self):
        self.client = AppSheetClient(AppSheetConfig("app-123", "key-abc"))
        self.client._actions = MagicMock()
        self.client._actions._execute.return_value = ApiResponse(200, {"rows": []}, 0)

    def test_add_dataframe(self):
        df = pd.DataFrame([{"Name": "A", "Age": 30}, {"Name": "B", "Age": 40}])

        self.client.add("People", df)

        self.client._actions._execute.assert_called_once_with(
            "People", "Add", rows=[{"Name": "A", "Age": 30}, {"Name": "B", "Age": 40}]
        )

    def test_update_dataframe_skips_missing_values(self):
        df = pd.DataFrame([{"ID": "1", "Name": "A"}, {"ID": "2", "Name": None}])

        self.client.update("People", df)

        self.client._actions._execute.assert_called_once_with(
            "People", "Edit", rows=[{"ID": "1", "Name": "A"}, {"ID": "2"}]
        )

    def test_delete_empty_dataframe(self):
        self.client.delete_rows("People", pd.DataFrame())

        self.client._actions._execute.assert_called_once_with("People", "Delete", rows=[])
