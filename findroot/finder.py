"""Locate a project root by walking up from a start directory."""

from __future__ import annotations

import errno
import os
import stat
from enum import Enum
from pathlib import Path
from typing import Callable, Iterator, Optional, Union

from findroot.devices import DeviceProbe, default_device_probe
from findroot.errors import QueryFailure, RootNotFoundError
from findroot.markers import has_marker

PathLike = Union[str, "os.PathLike[str]"]
CandidateObserver = Callable[[Path, bool], None]


class SelectionMode(str, Enum):
    """Which marked ancestor wins when several carry a marker."""

    NEAREST = "nearest"
    FARTHEST = "farthest"


def _normalize(start: PathLike) -> Path:
    return Path(os.path.abspath(os.fspath(start)))


class AncestorWalk:
    """Iterate ``start`` and each successive parent.

    With ``stay_on_one_filesystem`` the walk ends before entering an
    ancestor on another device; that ancestor is kept in ``boundary``.
    """

    def __init__(
        self,
        start: PathLike,
        *,
        stay_on_one_filesystem: bool = False,
        probe: Optional[DeviceProbe] = None,
    ):
        self.start = _normalize(start)
        self.stay_on_one_filesystem = stay_on_one_filesystem
        self.probe = probe if probe is not None else default_device_probe()
        self.boundary: Optional[Path] = None

    @property
    def checks_boundary(self) -> bool:
        return self.stay_on_one_filesystem and self.probe.supported

    def __iter__(self) -> Iterator[Path]:
        self.boundary = None
        _require_directory(self.start)
        checks_boundary = self.checks_boundary
        device = None
        if checks_boundary:
            try:
                device = self.probe.device_of(self.start)
            except OSError as exc:
                raise QueryFailure(self.start, "device", exc) from exc

        candidate = self.start
        while True:
            yield candidate
            parent = candidate.parent
            if parent == candidate:
                return
            if checks_boundary and not self._on_device(device, parent):
                self.boundary = parent
                return
            candidate = parent

    def _on_device(self, device, path: Path) -> bool:
        try:
            return self.probe.same_device(device, path)
        except OSError as exc:
            raise QueryFailure(path, "device", exc) from exc


def _require_directory(path: Path) -> None:
    try:
        info = os.stat(path)
    except OSError as exc:
        raise QueryFailure(path, "directory", exc) from exc
    if not stat.S_ISDIR(info.st_mode):
        error = NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), str(path))
        raise QueryFailure(path, "directory", error)


def find_root(
    start: PathLike,
    mode: SelectionMode = SelectionMode.NEAREST,
    *,
    stay_on_one_filesystem: bool = False,
    probe: Optional[DeviceProbe] = None,
    on_candidate: Optional[CandidateObserver] = None,
) -> Path:
    """Return the ancestor of ``start`` that marks the project root.

    ``start`` must be an existing directory; it is made absolute but
    symlinks are left alone. In nearest mode the first marked ancestor wins;
    in farthest mode the walk continues to the filesystem root (or boundary)
    and the outermost marked ancestor wins.

    Raises :class:`RootNotFoundError` when no marked ancestor is found and
    :class:`QueryFailure` when a filesystem query fails.
    """
    mode = SelectionMode(mode)
    walk = AncestorWalk(start, stay_on_one_filesystem=stay_on_one_filesystem, probe=probe)
    best: Optional[Path] = None

    for candidate in walk:
        matched = has_marker(candidate)
        if on_candidate is not None:
            on_candidate(candidate, matched)
        if not matched:
            continue
        if mode is SelectionMode.NEAREST:
            return candidate
        best = candidate

    if best is not None:
        return best
    raise RootNotFoundError(walk.start, mode, boundary=walk.boundary)


def detect_root(
    start: Optional[PathLike] = None,
    mode: SelectionMode = SelectionMode.NEAREST,
    *,
    stay_on_one_filesystem: bool = False,
) -> Optional[Path]:
    """Walk upward from ``start`` (default: cwd) and return the root, or None."""
    current = Path(start).resolve() if start is not None else Path.cwd().resolve()
    try:
        return find_root(current, mode, stay_on_one_filesystem=stay_on_one_filesystem)
    except RootNotFoundError:
        return None


__all__ = [
    "AncestorWalk",
    "SelectionMode",
    "detect_root",
    "find_root",
]
