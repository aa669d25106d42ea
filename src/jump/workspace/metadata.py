"""
jump.workspace.metadata — Workspace inventory via cargo metadata.

    cargo metadata --no-deps --format-version 1

Only the fields we need are read:

    {
      "packages": [{"id": ..., "name": ..., "version": ..., "manifest_path": ...}],
      "workspace_members": [<package id>, ...],
      "workspace_root": "/path/to/ws"
    }
"""

from __future__ import annotations

import json
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jump.errors import MetadataUnavailable


@dataclass(frozen=True)
class Package:
    """A workspace member."""
    name: str
    manifest_path: Path
    version: str | None = None

    @property
    def directory(self) -> Path:
        """Directory that owns the package's files."""
        return self.manifest_path.parent


@dataclass
class Workspace:
    """Workspace root and its members, in cargo's order."""
    root: Path
    packages: list[Package] = field(default_factory=list)


class CargoWorkspaceInventory:
    """Workspace inventory backed by `cargo metadata`."""

    def __init__(self, cwd: str | Path | None = None, cargo: str = "cargo"):
        self.cwd = Path(cwd or ".").resolve()
        self.cargo = cargo

    def load(self) -> Workspace:
        """Query cargo and return the workspace members.

        Raises:
            MetadataUnavailable: cargo failed or its output is unusable
        """
        cmd = [self.cargo, "metadata", "--no-deps", "--format-version", "1"]
        try:
            result = subprocess.run(
                cmd, cwd=self.cwd, capture_output=True, text=True,
            )
        except FileNotFoundError as e:
            raise MetadataUnavailable(
                f"Cannot get cargo metadata: '{self.cargo}' not found"
            ) from e

        if result.returncode != 0:
            detail = result.stderr.strip()
            msg = f"Cannot get cargo metadata (exit {result.returncode})"
            if detail:
                msg += f": {detail}"
            raise MetadataUnavailable(msg)

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise MetadataUnavailable(f"Invalid cargo metadata output: {e}") from e

        return parse_metadata(data)


def parse_metadata(data: Any) -> Workspace:
    """Build a Workspace from decoded `cargo metadata` JSON.

    Member order follows the "packages" list.
    """
    if not isinstance(data, dict):
        raise MetadataUnavailable("cargo metadata must be a JSON object")

    try:
        root = Path(data["workspace_root"])
        member_ids = set(data["workspace_members"])
        packages = [
            Package(
                name=p["name"],
                manifest_path=Path(p["manifest_path"]),
                version=p.get("version"),
            )
            for p in data["packages"]
            if p["id"] in member_ids
        ]
    except KeyError as e:
        raise MetadataUnavailable(f"Incomplete cargo metadata: missing {e}") from e
    except TypeError as e:
        raise MetadataUnavailable(f"Unexpected cargo metadata layout: {e}") from e

    return Workspace(root=root, packages=packages)
