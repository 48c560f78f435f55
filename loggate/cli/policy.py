"""Commands inspecting the effective warning policy."""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from loggate.core.config import LoggateConfig, load_config
from loggate.core.exceptions import ConfigurationError
from loggate.core.warnings import WarningsConfiguration

from .constants import CONFIG_EXIT_CODE
from .output import emit_error, render_rows

POLICY_COLUMNS = ["event", "behavior"]

ConfigOption = typer.Option(None, "--config", "-c", help="Path to a loggate TOML config file.")


def register(app: typer.Typer) -> None:
    """Register policy commands on the root CLI application."""

    app.command("policy")(policy_command)
    app.command("check")(check_command)


def _load(config_path: Path | None) -> LoggateConfig:
    try:
        return load_config(config_path)
    except ConfigurationError as error:
        emit_error(error.message, error.error_code, details=error.details)
        raise typer.Exit(code=CONFIG_EXIT_CODE) from error


def _policy_rows(configuration: WarningsConfiguration) -> list[dict[str, object]]:
    rows: list[dict[str, object]] = [
        {"event": key, "behavior": behavior.value}
        for key, behavior in sorted(configuration.explicit_behaviors.items())
    ]
    rows.append({"event": "*", "behavior": configuration.default_behavior.value})
    return rows


def policy_command(
    ctx: typer.Context,
    config: Path | None = ConfigOption,
) -> None:
    """Show the warning behavior for every configured event."""

    configuration = _load(config).to_warnings_configuration()
    options = ctx.obj or {}
    render_rows(
        _policy_rows(configuration),
        POLICY_COLUMNS,
        stream=sys.stdout,
        output_format=options.get("format", "table"),
        no_color=options.get("no_color", False),
    )


def check_command(
    ctx: typer.Context,
    event: str = typer.Argument(..., help="Event discriminator, e.g. CoreEventId.EXECUTION_RETRYING."),
    config: Path | None = ConfigOption,
) -> None:
    """Show the warning behavior applied to one event."""

    configuration = _load(config).to_warnings_configuration()
    behavior = configuration.explicit_behaviors.get(event, configuration.default_behavior)
    options = ctx.obj or {}
    render_rows(
        [{"event": event, "behavior": behavior.value}],
        POLICY_COLUMNS,
        stream=sys.stdout,
        output_format=options.get("format", "table"),
        no_color=options.get("no_color", False),
    )
