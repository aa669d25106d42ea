"""jump.vcs — Version control queries."""

from jump.vcs.git import GitChangeSource

__all__ = ["GitChangeSource"]
