from __future__ import annotations

from pathlib import Path
from typing import Iterable

import pytest
from typer.testing import CliRunner

from findroot.configuration import clear_config_cache
from findroot.devices import DeviceProbe


class FencedProbe(DeviceProbe):
    """Pretend everything below ``fence`` is one device and the rest another."""

    supported = True

    def __init__(self, fence: Path):
        self.fence = fence

    def device_of(self, path: Path):
        path = Path(path)
        if path == self.fence or self.fence in path.parents:
            return "inside"
        return "outside"

    def same_device(self, device, path: Path) -> bool:
        return self.device_of(path) == device


@pytest.fixture(autouse=True)
def isolate_config(tmp_path, monkeypatch):
    """Keep user configuration out of every test."""

    monkeypatch.delenv("FINDROOT_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    clear_config_cache()
    yield
    clear_config_cache()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """Directory the test hierarchies are built under, symlinks resolved."""
    root = (tmp_path / "ws").resolve()
    root.mkdir()
    return root.resolve()


@pytest.fixture
def tree(workspace: Path):
    """Create ``workspace/<relative>`` with the given marker directories."""

    def make(relative: str, markers: Iterable[str] = ()) -> Path:
        path = workspace / relative if relative else workspace
        path.mkdir(parents=True, exist_ok=True)
        for marker in markers:
            (path / marker).mkdir()
        return path

    return make


@pytest.fixture
def fenced(workspace: Path) -> FencedProbe:
    """Probe that puts a filesystem boundary just above the workspace."""
    return FencedProbe(workspace)


@pytest.fixture
def fence():
    return FencedProbe


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()
