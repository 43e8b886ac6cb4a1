"""
CLI-specific formatting functions for human-readable output.

This module handles presentation formatting for the CLI, including:
- JSON and YAML dumps
- Rich tables for result dictionaries
- Plain list and text views
"""

import json
from typing import Any, List

import yaml
from rich.console import Console
from rich.table import Table

OUTPUT_FORMATS = ["json", "yaml", "table", "list", "text"]


def format_output(data: Any, format_type: str) -> str:
    """Format data according to the specified format type."""
    if format_type == "yaml":
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    elif format_type == "table":
        return format_table_output(data)
    elif format_type == "list":
        return format_list_output(data)
    elif format_type == "text":
        return format_text_output(data)
    else:
        # Default to JSON
        return json.dumps(data, indent=2, default=str)


def _display_value(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(str(item) for item in value)
    if isinstance(value, dict):
        return json.dumps(value, default=str)
    return str(value)


def _rows(data: Any) -> List[List[str]]:
    """Flatten a result dictionary into (field, value) rows."""
    if not isinstance(data, dict):
        return [["value", _display_value(data)]]

    rows = []
    for key, value in data.items():
        if isinstance(value, dict):
            # Nested results, e.g. one entry per strategy
            for sub_key, sub_value in value.items():
                rows.append([f"{key}.{sub_key}", _display_value(sub_value)])
        else:
            rows.append([str(key), _display_value(value)])
    return rows


def format_table_output(data: Any) -> str:
    """Format data as a table using Rich."""
    table = Table(show_header=True, header_style="bold magenta", show_lines=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    for field, value in _rows(data):
        table.add_row(field, value)

    # Capture Rich output as string
    console = Console(width=120, legacy_windows=False, force_terminal=False)
    with console.capture() as capture:
        console.print(table)

    return capture.get()


def format_list_output(data: Any) -> str:
    """Format data as ``field: value`` lines."""
    return "\n".join(f"{field}: {value}" for field, value in _rows(data))


def format_text_output(data: Any) -> str:
    """Print the bare ``result`` of a pattern run, falling back to the list view."""
    if isinstance(data, dict) and "result" in data:
        result = data["result"]
        if isinstance(result, list):
            return ",".join(str(item) for item in result)
        return str(result)
    if isinstance(data, dict) and len(data) == 1:
        (values,) = data.values()
        if isinstance(values, list):
            return "\n".join(str(item) for item in values)
    return format_list_output(data)

