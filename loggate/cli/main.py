"""Main entry point for the loggate command line interface."""

from __future__ import annotations

import typer

from .output import FORMATS
from .policy import register as register_policy_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for loggate."""

    app = typer.Typer(add_completion=False, help="Inspect loggate warning policies")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        if normalized_format not in FORMATS:
            raise typer.BadParameter(
                f"Unsupported format '{format}'. Available formats: {', '.join(FORMATS)}.",
                param_hint="--format",
            )
        ctx.obj.update({"format": normalized_format, "no_color": no_color})

    register_policy_commands(app)
    return app


app = create_app()
