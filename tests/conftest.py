"""Shared fixtures: a two-package workspace on disk and fake collaborators."""

import os
import sys
import pytest
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from jump.errors import SourceUnavailable, RefreshFailed
from jump.workspace.metadata import Package, Workspace


MANIFEST_A = """\
[package]
name = "a"
version = "0.1.0"
edition = "2021"

[dependencies]
serde = { version = "1.0", features = ["derive"] }
"""

MANIFEST_B = """\
[package]
name = "b"
version = "0.1.0"
edition = "2021"
"""


def write_package(root: Path, name: str, manifest: str) -> Package:
    pkg_dir = root / name
    (pkg_dir / "src").mkdir(parents=True, exist_ok=True)
    (pkg_dir / "src" / "lib.rs").write_text("")
    manifest_path = pkg_dir / "Cargo.toml"
    manifest_path.write_text(manifest)
    return Package(name=name, manifest_path=manifest_path, version="0.1.0")


class FakeChangeSource:
    def __init__(self, toplevel, changed=None, tracked=None, fail=False):
        self._toplevel = Path(toplevel)
        self.changed = list(changed or [])
        self.tracked = list(tracked or [])
        self.fail = fail
        self.calls = []

    def toplevel(self):
        self.calls.append("toplevel")
        if self.fail:
            raise SourceUnavailable("Failed to get git toplevel directory")
        return self._toplevel

    def changed_files(self, toplevel, old_tag):
        self.calls.append(("changed_files", old_tag))
        return self.changed

    def all_files(self, toplevel):
        self.calls.append("all_files")
        return self.tracked


class FakeInventory:
    def __init__(self, workspace):
        self.workspace = workspace
        self.loads = 0

    def load(self):
        self.loads += 1
        return self.workspace


class FakeRefresher:
    def __init__(self, fail=False):
        self.fail = fail
        self.calls = 0

    def refresh(self):
        self.calls += 1
        if self.fail:
            raise RefreshFailed("cargo fetch failed (exit 101)")


@pytest.fixture
def ws(tmp_path):
    """Workspace with packages a and b under tmp_path/ws."""
    root = tmp_path / "ws"
    root.mkdir()
    (root / "Cargo.toml").write_text('[workspace]\nmembers = ["a", "b"]\n')
    a = write_package(root, "a", MANIFEST_A)
    b = write_package(root, "b", MANIFEST_B)
    return Workspace(root=root, packages=[a, b])
