"""Rendering of CLI result rows."""

from __future__ import annotations

import json
from typing import Mapping, Sequence, TextIO

import typer
from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table

FORMATS = ("table", "jsonl")


def render_rows(
    rows: Sequence[Mapping[str, object]],
    columns: Sequence[str],
    *,
    stream: TextIO,
    output_format: str = "table",
    no_color: bool = False,
) -> None:
    """Write ``rows`` as a rich table or as JSON lines."""

    if output_format == "jsonl":
        for row in rows:
            json.dump({column: row.get(column) for column in columns}, stream, ensure_ascii=False, default=str)
            stream.write("\n")
        stream.flush()
        return

    console = Console(file=stream, color_system=None if no_color else "auto", no_color=no_color)
    table = Table(box=SIMPLE, show_lines=False)
    for column in columns:
        table.add_column(column, header_style="" if no_color else "bold")
    for row in rows:
        table.add_row(*("-" if row.get(column) is None else str(row.get(column)) for column in columns))
    console.print(table)


def emit_error(message: str, code: str, *, details: Mapping[str, object] | None = None) -> None:
    """Print a structured error payload to stderr."""

    payload: dict[str, object] = {"code": code, "message": message}
    if details:
        payload["details"] = {key: str(value) for key, value in details.items()}
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


__all__ = ["FORMATS", "emit_error", "render_rows"]
