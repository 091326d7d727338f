"""CLI entrypoint for winspector."""

from __future__ import annotations

from pathlib import Path

import typer

from ui.cli import commands

app = typer.Typer(
    help=(
        "Get information about the currently active window. By default only the "
        "window class is printed, for use in scripts.\n\n"
        "Supported platforms: Hyprland, Sway, GNOME Shell (Linux), macOS"
    ),
    add_completion=False,
)


@app.callback(invoke_without_command=True)
def root_cmd(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", help="Log diagnostics to stderr"),
    config: Path | None = typer.Option(None, "--config", help="Override YAML config file"),
    short_version: bool = typer.Option(False, "-v", hidden=True),
) -> None:
    """Print the active window's class."""
    if short_version:
        commands.fail("unknown command '-v'\nDid you mean 'winspector version'?")
    commands.configure_logging(verbose)
    ctx.obj = commands.CliState(config_path=config)
    if ctx.invoked_subcommand is None:
        commands.show_class(ctx.obj)


@app.command("info")
def info_cmd(ctx: typer.Context) -> None:
    """Show full window information as JSON."""
    commands.show_info(ctx.obj)


@app.command("show")
def show_cmd(ctx: typer.Context) -> None:
    """Show a one-line human readable summary."""
    commands.show_summary(ctx.obj)


@app.command("compositor")
def compositor_cmd(ctx: typer.Context) -> None:
    """Show which compositor is detected."""
    commands.show_compositor(ctx.obj)


@app.command("version")
def version_cmd() -> None:
    """Show winspector version."""
    commands.show_version()


@app.command("full", hidden=True)
@app.command("json", hidden=True)
def misspelled_info_cmd(ctx: typer.Context) -> None:
    commands.fail(f"unknown command '{ctx.info_name}'\nDid you mean 'winspector info'?")


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
