# Copyright (c) Microsoft Corporation.
# Licensed under the MIT license.

import sys
from pathlib import Path
import logging

# Add src to PYTHONPATH for local runs
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from appsheet_sdk import AppSheetClient, AppSheetConfig, ConfigurationError, TransportExhaustionError


logging.basicConfig(level=logging.INFO)

app_id = input("Enter AppSheet app ID: ").strip()
access_key = input("Enter application access key: ").strip()
region = input("Region (www.appsheet.com / eu.appsheet.com) [www.appsheet.com]: ").strip() or "www.appsheet.com"
table = input("Table name [People]: ").strip() or "People"
key_column = input("Key column [ID]: ").strip() or "ID"
pause_choice = input("Pause between steps? (y/N): ").strip() or "n"
pause_between_steps = (str(pause_choice).lower() in ("y", "yes", "true", "1"))

try:
	config = AppSheetConfig(app_id, access_key, region=region, max_retries=3)
except ConfigurationError as ex:
	print(f"Invalid configuration: {ex}")
	sys.exit(1)


def log_call(call: str) -> None:
	print({"call": call})

def pause(next_step: str) -> None:
	if pause_between_steps:
		try:
			input(f"\nNext: {next_step} - press Enter to continue...")
		except EOFError:
			pass

def show(result) -> None:
	print(result.to_dict())


with AppSheetClient(config) as client:
	try:
		pause("add a row")
		log_call(f"client.add({table!r}, {{'Name': 'Quickstart Row'}})")
		added = client.add(table, {"Name": "Quickstart Row"})
		show(added)
		if not added.ok or not added.rows_returned:
			print("Add failed; stopping.")
			sys.exit(1)
		new_key = added.content["rows"][0].get(key_column)

		pause("find the new row by key")
		log_call(f"client.find_by_key({table!r}, {key_column!r}, {new_key!r})")
		show(client.find_by_key(table, key_column, new_key))

		pause("update the row")
		log_call(f"client.update({table!r}, ...)")
		show(client.update(table, {key_column: new_key, "Name": "Quickstart Row (edited)"}))

		pause("list the five most recent rows")
		log_call(f"client.query({table!r}).order_by({key_column!r}, descending=True).top(5).execute()")
		show(client.query(table).order_by(key_column, descending=True).top(5).execute())

		pause("delete the row")
		log_call(f"client.delete_rows({table!r}, ...)")
		show(client.delete_rows(table, {key_column: new_key}))
	except TransportExhaustionError as ex:
		print(f"Could not reach AppSheet after {ex.attempts} attempts: {ex.last_cause}")
		sys.exit(1)
