from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from findroot import __version__
from findroot.configuration import ConfigurationError, FindRootConfig, get_config, parse_mode
from findroot.finder import SelectionMode
from findroot.logging import console, err_console, markup_path

HELP_OPTION_NAMES = ["-h", "--help"]
COMMAND_CONTEXT = {"help_option_names": HELP_OPTION_NAMES}

EXIT_NOT_FOUND = 1
EXIT_FAILURE = 2


def fail(message: str, code: int = EXIT_FAILURE) -> typer.Exit:
    """Print ``message`` to stderr and return the Exit to raise."""
    err_console.print(f"[error]{markup_path(message)}[/]", soft_wrap=True)
    return typer.Exit(code=code)


def load_cli_config() -> FindRootConfig:
    """Load configuration, turning errors into a clean exit."""
    try:
        return get_config()
    except ConfigurationError as exc:
        raise fail(str(exc)) from exc


def resolve_mode(value: Optional[str], config: FindRootConfig) -> SelectionMode:
    """Pick the mode from the command line, falling back to configuration."""
    if value is None:
        return config.search.mode
    try:
        return parse_mode(value)
    except ValueError as exc:  # noqa: B904
        raise typer.BadParameter(str(exc), param_hint="'--mode'") from exc


def resolve_start(workdir: Optional[Path]) -> Path:
    """Canonicalize the start directory (default: the working directory)."""
    try:
        start = workdir if workdir is not None else Path.cwd()
        return start.resolve(strict=True)
    except OSError as exc:
        target = workdir if workdir is not None else "the working directory"
        raise fail(f"could not canonicalize {target}: {exc}") from exc


def trace_candidate(path: Path, matched: bool) -> None:
    if matched:
        err_console.print(f"[ok]marker[/]    {markup_path(path)}", soft_wrap=True)
    else:
        err_console.print(f"[muted]no marker {markup_path(path)}[/]", soft_wrap=True)


def print_version() -> None:
    console.print(f"[bold]findroot[/bold] [accent]v{__version__}[/]")


def resolve_spanning(span: bool, one_file_system: bool, config: FindRootConfig) -> bool:
    """Decide whether the walk may cross filesystems."""
    if span and one_file_system:
        raise typer.BadParameter(
            "--span-file-systems and --one-file-system are mutually exclusive"
        )
    if span:
        return True
    if one_file_system:
        return False
    return config.search.span_file_systems
