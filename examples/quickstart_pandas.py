# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import sys
from pathlib import Path

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

import pandas as pd

from appsheet_sdk import AppSheetClient, AppSheetConfig, HttpError

# Reads APPSHEET_APP_ID, APPSHEET_ACCESS_KEY and optional APPSHEET_REGION / APPSHEET_MAX_RETRIES
config = AppSheetConfig.from_env()
table = sys.argv[1] if len(sys.argv) > 1 else "People"

with AppSheetClient(config) as client:
	new_rows = pd.DataFrame([
		{"Name": "Pandas Row A", "Score": 10},
		{"Name": "Pandas Row B", "Score": 20},
	])
	print(client.add(table, new_rows).to_dict())

	try:
		df = client.find_dataframe(table, 'STARTSWITH([Name], "Pandas Row")', order_by="Score", descending=True)
	except HttpError as ex:
		print(f"Find failed: HTTP {ex.status_code}")
		sys.exit(1)
	print(df)

	if not df.empty:
		print(client.delete_rows(table, df).to_dict())
