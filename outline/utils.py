"""Shared utility functions for outline.

Provides Rich-based console reporting, anchor sanitising for rendered
headings, and small async file helpers. Diagnostics go to stderr so that
stdout can carry rendered output.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def sanitize_anchor(value: str) -> str:
    """Convert a heading to a markdown anchor.

    * Letters and digits are kept and lowercased, as is ``_``.
    * Spaces and hyphens each become a hyphen.
    * Everything else is dropped.

    Examples::

        sanitize_anchor("sum(a,b int) int") -> "sumab-int-int"
        sanitize_anchor("Time Zone") -> "time-zone"
    """
    out: list[str] = []
    for char in value:
        if char in "- ":
            out.append("-")
        elif char == "_" or char.isalnum():
            out.append(char.lower())
    return "".join(out)


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


async def write_text(content: str, path: str | Path) -> Path:
    """Write *content* to *path* in a worker thread.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    await asyncio.to_thread(_write_file, file_path, content)
    return file_path


def dump_json(data: Any) -> str:
    """Serialise *data* as pretty-printed JSON."""
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def _write_file(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write content."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
