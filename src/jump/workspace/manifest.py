"""
jump.workspace.manifest — Cargo.toml version rewrite.

Only the value of [package].version changes. Comments, key order,
whitespace and line endings survive untouched because the document
goes through tomlkit, which keeps the original formatting.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

import tomlkit
from tomlkit.container import OutOfOrderTableProxy
from tomlkit.exceptions import TOMLKitError
from tomlkit.items import Table

from jump.errors import ManifestError, MalformedManifest


PACKAGE_TABLE = "package"
VERSION_KEY = "version"


@dataclass
class WriteResult:
    """Outcome of one set_version call."""
    manifest_path: Path
    previous_version: str
    new_version: str
    has_change: bool = False
    inherited: bool = False    # version came from [workspace.package]


def read_manifest(path: str | Path) -> tomlkit.TOMLDocument:
    """Parse a manifest, keeping its formatting.

    Raises:
        MalformedManifest: File unreadable or not valid TOML
    """
    p = Path(path)
    try:
        # newline="" keeps CRLF files byte-identical on write-back
        with open(p, encoding="utf-8", newline="") as f:
            text = f.read()
    except OSError as e:
        raise MalformedManifest(f"Cannot read manifest {p}: {e}") from e

    try:
        return tomlkit.parse(text)
    except TOMLKitError as e:
        raise MalformedManifest(f"Cannot parse manifest {p} as TOML: {e}") from e


def write_manifest(doc: tomlkit.TOMLDocument, path: str | Path) -> None:
    """Write a manifest document back to disk."""
    p = Path(path)
    try:
        with open(p, "w", encoding="utf-8", newline="") as f:
            f.write(tomlkit.dumps(doc))
    except OSError as e:
        raise ManifestError(f"Cannot write manifest {p}: {e}") from e


def set_version(
    manifest_path: str | Path,
    new_version: str,
    dry_run: bool = False,
) -> WriteResult:
    """Set [package].version in a Cargo.toml.

    The version is written verbatim; no validation happens here.

    Args:
        manifest_path: Path to Cargo.toml
        new_version: Value for package.version
        dry_run: Parse and update in memory only

    Returns:
        WriteResult; has_change is True only if the file was written

    Raises:
        MalformedManifest: No [package] table or no package.version
        ManifestError: Write failed
    """
    p = Path(manifest_path)
    doc = read_manifest(p)

    # [package] split by other tables (e.g. [package.metadata.docs.rs]
    # after [dependencies]) comes back as an out-of-order proxy
    package = doc.get(PACKAGE_TABLE)
    if not isinstance(package, (Table, OutOfOrderTableProxy)):
        raise MalformedManifest(f"Missing [{PACKAGE_TABLE}] in {p}")
    if VERSION_KEY not in package:
        raise MalformedManifest(f"Missing {PACKAGE_TABLE}.{VERSION_KEY} in {p}")

    # version.workspace = true is replaced by a literal version
    current = package[VERSION_KEY]
    inherited = isinstance(current, Mapping)
    previous = "workspace" if inherited else str(current)
    package[VERSION_KEY] = new_version

    result = WriteResult(
        manifest_path=p,
        previous_version=previous,
        new_version=new_version,
        inherited=inherited,
    )

    if dry_run:
        return result

    write_manifest(doc, p)
    result.has_change = True
    return result
