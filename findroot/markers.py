"""Version-control markers and the existence test applied to each ancestor."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from findroot.errors import QueryFailure

# Fixed marker set: git, darcs, mercurial, bazaar, subversion.
MARKERS: Tuple[str, ...] = (".git", "_darcs", ".hg", ".bzr", ".svn")


def _entry_exists(path: Path) -> bool:
    # lstat, not stat: a dangling symlink is still an entry.
    try:
        os.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        return False
    return True


def find_marker(directory: Path) -> Optional[str]:
    """Return the first marker present directly inside ``directory``, if any.

    Entries of any type qualify. Failures other than absence (for example
    permission denied) raise :class:`QueryFailure`.
    """
    for name in MARKERS:
        candidate = directory / name
        try:
            if _entry_exists(candidate):
                return name
        except OSError as exc:
            raise QueryFailure(directory, "marker", exc) from exc
    return None


def has_marker(directory: Path) -> bool:
    """Return True when ``directory`` contains any version-control marker."""
    return find_marker(directory) is not None


__all__ = ["MARKERS", "find_marker", "has_marker"]
