"""Typer command handlers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import NoReturn

import typer

from core.errors import WindowInspectorError
from core.orchestrator import Orchestrator
from window_model.window_info import WindowInfo

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass
class CliState:
    """Options shared by every subcommand."""

    config_path: Path | None = None


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr so stdout stays script-friendly."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format=LOG_FORMAT)


def fail(message: str) -> NoReturn:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _query(state: CliState) -> WindowInfo:
    try:
        return Orchestrator(config_path=state.config_path).active_window()
    except WindowInspectorError as exc:
        fail(f"failed to get active window: {exc}")


def _emit(state: CliState, render: Callable[[WindowInfo], str]) -> None:
    typer.echo(render(_query(state)))


def show_class(state: CliState) -> None:
    """Print only the window class, for use in scripts."""
    _emit(state, lambda info: info.window_class)


def show_info(state: CliState) -> None:
    """Print the full record as indented JSON."""
    _emit(state, lambda info: info.to_json())


def show_summary(state: CliState) -> None:
    """Print the one-line human summary."""
    _emit(state, str)


def show_compositor(state: CliState) -> None:
    try:
        bundle = Orchestrator(config_path=state.config_path).build()
    except WindowInspectorError as exc:
        fail(str(exc))
    typer.echo(f"Current compositor: {bundle.platform}")


def show_version() -> None:
    try:
        current = version("winspector")
    except PackageNotFoundError:
        current = "dev"
    typer.echo(f"winspector version {current}")
