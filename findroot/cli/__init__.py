"""Command line entry point for findroot."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from findroot import __description__
from findroot.errors import QueryFailure, RootNotFoundError
from findroot.finder import find_root
from findroot.logging import err_console, markup_path

from .common import (
    COMMAND_CONTEXT,
    EXIT_NOT_FOUND,
    fail,
    load_cli_config,
    print_version,
    resolve_mode,
    resolve_spanning,
    resolve_start,
    trace_candidate,
)

app = typer.Typer(
    help=__description__,
    context_settings=COMMAND_CONTEXT,
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        print_version()
        raise typer.Exit()


@app.command(context_settings=COMMAND_CONTEXT)
def search(
    workdir: Optional[Path] = typer.Option(
        None,
        "--workdir",
        "-w",
        exists=True,
        file_okay=False,
        dir_okay=True,
        help="Start the search in the given directory (defaults to the cwd).",
    ),
    mode: Optional[str] = typer.Option(
        None,
        "--mode",
        "-m",
        metavar="nearest|farthest",
        help="Stop at the nearest marked ancestor or keep going to the farthest one.",
    ),
    span_file_systems: bool = typer.Option(
        False,
        "--span-file-systems",
        "-s",
        help="Allow the search to traverse filesystems (otherwise, stops at FS boundary).",
    ),
    one_file_system: bool = typer.Option(
        False,
        "--one-file-system",
        help="Stop at the filesystem boundary even if configuration allows crossing.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Trace every directory checked on stderr."
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Print the root directory of the enclosing version-controlled project."""
    config = load_cli_config()
    selection = resolve_mode(mode, config)
    spanning = resolve_spanning(span_file_systems, one_file_system, config)
    verbose = verbose or config.cli.verbose

    start = resolve_start(workdir)
    if verbose:
        err_console.print(
            f"[info]searching from {markup_path(start)} ({selection.value})[/]",
            soft_wrap=True,
        )

    try:
        root = find_root(
            start,
            selection,
            stay_on_one_filesystem=not spanning,
            on_candidate=trace_candidate if verbose else None,
        )
    except RootNotFoundError as exc:
        raise fail(str(exc), code=EXIT_NOT_FOUND) from exc
    except QueryFailure as exc:
        raise fail(str(exc)) from exc

    typer.echo(str(root))


def main() -> None:
    app()


__all__ = ["app", "main"]
