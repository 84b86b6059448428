"""Built-in default configuration for findroot."""

from __future__ import annotations

DEFAULT_CONFIG_DICT = {
    "search": {
        "mode": "nearest",
        # Matches the command line default: stay on the start's filesystem.
        "span_file_systems": False,
    },
    "cli": {
        "verbose": False,
    },
}
