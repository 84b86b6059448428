"""Filesystem device identity, used to keep a walk on one filesystem.

Device identity is a platform capability. :class:`DeviceProbe` is the
no-op default that never reports a boundary; :class:`StatDeviceProbe`
answers from ``st_dev`` on POSIX systems.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Hashable, Optional


class DeviceProbe:
    """Device-identity capability for platforms that cannot query it."""

    supported = False

    def device_of(self, path: Path) -> Optional[Hashable]:
        return None

    def same_device(self, device: Optional[Hashable], path: Path) -> bool:
        """Return True when ``path`` lives on ``device``.

        The default implementation always allows crossing.
        """
        return True


class StatDeviceProbe(DeviceProbe):
    """Answer device identity from ``os.stat``.

    ``OSError`` propagates to the caller.
    """

    supported = True

    def device_of(self, path: Path) -> Optional[Hashable]:
        return os.stat(path).st_dev

    def same_device(self, device: Optional[Hashable], path: Path) -> bool:
        return self.device_of(path) == device


def default_device_probe() -> DeviceProbe:
    """Return the device probe for the running platform."""
    if os.name == "posix":
        return StatDeviceProbe()
    return DeviceProbe()


__all__ = ["DeviceProbe", "StatDeviceProbe", "default_device_probe"]
