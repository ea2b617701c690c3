"""
Output printing for the command-line interface.

Records are printed as JSON, YAML or a rich table depending on the
selected output format. JSON and YAML output carry the same keys the API
uses, so they can be piped into other tools.
"""

import json
from typing import Any, Callable, List, Optional, Sequence, Tuple

import yaml
from rich import box
from rich.console import Console
from rich.table import Table

from ..models import Record
from ..utils import format_cell

Column = Tuple[str, Callable[[Any], Any]]


def to_data(item: Any) -> Any:
    """Convert records (or lists of them) into plain JSON-ready data."""
    if isinstance(item, Record):
        return item.to_dict()
    if isinstance(item, (list, tuple)):
        return [to_data(i) for i in item]
    return item


class Printer:
    """Prints records in the configured output format."""

    def __init__(self, output_format: str = "table", console: Optional[Console] = None):
        self.output_format = output_format
        self.console = console or Console(soft_wrap=True, emoji=False)

    def print_json(self, data: Any) -> None:
        self.console.print(
            json.dumps(to_data(data), indent=2), markup=False, highlight=False
        )

    def print_yaml(self, data: Any) -> None:
        text = yaml.safe_dump(
            to_data(data), default_flow_style=False, sort_keys=False
        )
        self.console.print(text.rstrip("\n"), markup=False, highlight=False)

    def print_table(self, headers: Sequence[str], rows: List[List[str]]) -> None:
        table = Table(box=box.SIMPLE_HEAD, show_edge=False)
        for header in headers:
            table.add_column(header, overflow="fold")
        for row in rows:
            table.add_row(*row)
        self.console.print(table)

    def print_records(self, records: Sequence[Any], columns: Sequence[Column]) -> None:
        """Print a list of records; ``columns`` picks the table columns."""
        if self.output_format == "json":
            self.print_json(list(records))
        elif self.output_format == "yaml":
            self.print_yaml(list(records))
        else:
            rows = [
                [format_cell(getter(record)) for _, getter in columns]
                for record in records
            ]
            self.print_table([header for header, _ in columns], rows)

    def print_record(self, record: Any, columns: Sequence[Column]) -> None:
        """Print a single record."""
        if self.output_format == "json":
            self.print_json(record)
        elif self.output_format == "yaml":
            self.print_yaml(record)
        else:
            self.print_records([record], columns)

    def print_message(self, message: str) -> None:
        """Print a confirmation; silent in machine-readable formats."""
        if self.output_format == "table":
            self.console.print(message, markup=False, highlight=False)

    def print_values(self, values: Sequence[Any], header: str) -> None:
        """Print a list of plain values, one table row per value."""
        if self.output_format == "json":
            self.print_json(list(values))
        elif self.output_format == "yaml":
            self.print_yaml(list(values))
        else:
            self.print_table([header], [[format_cell(value)] for value in values])
