"""
jump.errors — Error types.

Every failure in a run is one of these. Nothing below the CLI
recovers from them; the command prints the message and exits 1.
"""


class JumpError(Exception):
    """Base class for cargo-jump errors."""
    pass


class ConfigError(JumpError):
    """Config file could not be read."""
    pass


class SourceUnavailable(JumpError):
    """git query failed."""
    pass


class MetadataUnavailable(JumpError):
    """cargo metadata failed or returned something unusable."""
    pass


class PreconditionViolated(JumpError):
    """Workspace root is outside the git top level."""
    pass


class ManifestError(JumpError):
    """Manifest could not be read or written."""
    pass


class MalformedManifest(ManifestError):
    """Manifest is not valid TOML or has no [package].version."""
    pass


class RefreshFailed(JumpError):
    """Lock refresh (cargo fetch) failed."""
    pass
