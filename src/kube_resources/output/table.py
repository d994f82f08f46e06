"""Rich rendering of resource tables.

Columns fold long values instead of truncating them, so names and images
stay readable on narrow terminals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.table import Table as RichTable

if TYPE_CHECKING:
    from kube_resources.resource.base import Properties
    from kube_resources.resource.list import TableData

_KEY_COLUMNS = ("NAME", "NAMESPACE")


class Table(RichTable):
    """Rich Table whose columns default to ``overflow="fold"``."""

    def add_column(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("overflow", "fold")
        super().add_column(*args, **kwargs)


def build_table(data: TableData, title: str = "") -> Table:
    """Turn a list's rendered rows into a rich table."""
    table = Table(title=title or None, show_header=True)
    for column in data.header:
        table.add_column(column, style="cyan" if column in _KEY_COLUMNS else None)
    for row in data.rows.values():
        table.add_row(*row)
    return table


def render_table(data: TableData, console: Console | None = None, title: str = "") -> None:
    """Print a list's rows followed by a total line."""
    console = console or Console()
    console.print(build_table(data, title))
    console.print(f"\n[dim]Total: {len(data)} resources[/dim]")


def render_properties(
    properties: Properties, console: Console | None = None, title: str = ""
) -> None:
    """Print extension properties as a two-column key/value table."""
    console = console or Console()
    table = Table(title=title or None, show_header=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="green")
    for key, value in properties.items():
        table.add_row(key, value)
    console.print(table)
