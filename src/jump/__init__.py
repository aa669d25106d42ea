"""
jump — Version bumps for Cargo workspaces.

Sets a new version on every workspace member touched since a git
tag, then refreshes Cargo.lock.
"""

from jump.engine import run_jump, RunOutcome
from jump.errors import (
    JumpError,
    ConfigError,
    SourceUnavailable,
    MetadataUnavailable,
    PreconditionViolated,
    ManifestError,
    MalformedManifest,
    RefreshFailed,
)
from jump.workspace import (
    Package,
    Workspace,
    WriteResult,
    resolve_affected,
    set_version,
)

__version__ = "0.1.0"

__all__ = [
    "run_jump",
    "RunOutcome",
    # errors
    "JumpError",
    "ConfigError",
    "SourceUnavailable",
    "MetadataUnavailable",
    "PreconditionViolated",
    "ManifestError",
    "MalformedManifest",
    "RefreshFailed",
    # workspace
    "Package",
    "Workspace",
    "WriteResult",
    "resolve_affected",
    "set_version",
]
