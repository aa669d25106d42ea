"""jump.workspace — Cargo workspace inventory, resolution and rewrites."""

from jump.workspace.metadata import (
    Package, Workspace, CargoWorkspaceInventory, parse_metadata,
)
from jump.workspace.resolver import resolve_affected, is_within
from jump.workspace.manifest import (
    WriteResult, set_version, read_manifest, write_manifest,
)
from jump.workspace.lock import CargoLockRefresher

__all__ = [
    "Package", "Workspace", "CargoWorkspaceInventory", "parse_metadata",
    "resolve_affected", "is_within",
    "WriteResult", "set_version", "read_manifest", "write_manifest",
    "CargoLockRefresher",
]
