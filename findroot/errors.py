"""Exceptions raised while searching for a project root."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:  # pragma: no cover
    from findroot.finder import SelectionMode


class FindRootError(Exception):
    """Base class for findroot errors."""


class RootNotFoundError(FindRootError, LookupError):
    """Raised when no ancestor of the start directory carries a marker.

    This is an expected outcome rather than a defect; callers report it
    without a traceback.
    """

    def __init__(
        self,
        start: Path,
        mode: "SelectionMode",
        boundary: Optional[Path] = None,
    ):
        self.start = start
        self.mode = mode
        self.boundary = boundary
        message = f"found no project root in ancestors of {start}"
        if boundary is not None:
            message += f" (stopped before crossing into another filesystem at {boundary})"
        super().__init__(message)


class QueryFailure(FindRootError, OSError):
    """Raised when a filesystem query fails for a reason other than absence.

    ``query`` names what was being asked of ``path``: ``"marker"``,
    ``"device"`` or ``"directory"``. The underlying ``OSError`` is chained
    as ``__cause__``.
    """

    def __init__(self, path: Path, query: str, error: OSError):
        self.path = path
        self.query = query
        self.error = error
        detail = error.strerror or str(error)
        super().__init__(error.errno, f"could not query {query} for {path}: {detail}")

    def __str__(self) -> str:
        return self.args[1] if len(self.args) > 1 else super().__str__()


__all__ = ["FindRootError", "QueryFailure", "RootNotFoundError"]
