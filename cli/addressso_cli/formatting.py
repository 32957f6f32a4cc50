from __future__ import annotations

import json
from typing import Any

from rich.table import Table

MAX_COLUMNS = 8


def format_cell(value: Any) -> str:
    if value is None or value == "":
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def unwrap_items(data: Any) -> Any:
    """Return the record list of a list-style response, else the data itself."""
    if isinstance(data, dict):
        for key in ("data", "items"):
            inner = data.get(key)
            if isinstance(inner, list):
                return inner
    return data


def build_table(data: Any, *, title: str | None = None) -> Table | None:
    data = unwrap_items(data)
    if isinstance(data, dict):
        if isinstance(data.get("data"), dict):
            data = data["data"]
        table = Table(title=title)
        table.add_column("field", style="bold")
        table.add_column("value")
        for key, value in data.items():
            table.add_row(str(key), format_cell(value))
        return table

    if isinstance(data, list) and all(isinstance(row, dict) for row in data):
        columns: list[str] = []
        for row in data:
            for key in row:
                if key not in columns and len(columns) < MAX_COLUMNS:
                    columns.append(str(key))
        table = Table(title=title)
        for idx, col in enumerate(columns):
            table.add_column(col, style="bold" if idx == 0 else None)
        for row in data:
            table.add_row(*(format_cell(row.get(col)) for col in columns))
        return table
    return None
