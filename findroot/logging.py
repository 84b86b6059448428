from __future__ import annotations

from pathlib import Path
from typing import Union

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


# One Dark-inspired palette tuned for Rich output
PALETTE = {
    "fg": "#abb2bf",
    "fg_muted": "#5c6370",
    "green": "#98c379",
    "yellow": "#e5c07b",
    "orange": "#d19a66",
    "blue": "#61afef",
    "red": "#e06c75",
}

_theme = Theme(
    {
        "muted": PALETTE["fg_muted"],
        "accent": PALETTE["orange"],
        "ok": PALETTE["green"],
        "warn": PALETTE["yellow"],
        "error": f"bold {PALETTE['red']}",
        "info": PALETTE["blue"],
    }
)

console = Console(theme=_theme, highlight=False)
# Diagnostics stay off stdout so `cd "$(findroot)"` only ever sees a path.
err_console = Console(theme=_theme, stderr=True, highlight=False)


def markup_path(path: Union[str, Path]) -> str:
    """Escape a filesystem path for interpolation into Rich markup."""
    return escape(str(path))
