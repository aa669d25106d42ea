"""
jump.workspace.resolver — Affected package resolution.

A package is affected when at least one changed file lies inside
its directory. Containment is decided on path components, so
/ws/foo does not contain /ws/foo-bar/x.txt.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import PurePath

from jump.workspace.metadata import Package


def is_within(path: PurePath, directory: PurePath) -> bool:
    """True if path equals directory or is nested under it."""
    return path.is_relative_to(directory)


def resolve_affected(
    changed_files: Iterable[PurePath],
    packages: Iterable[Package],
    logger: logging.Logger | None = None,
) -> list[Package]:
    """Select the packages touched by changed_files.

    Args:
        changed_files: Absolute paths; order and duplicates don't matter
        packages: Workspace members
        logger: Receives one debug line per package (optional)

    Returns:
        Affected packages, in the order they were given
    """
    changed = frozenset(changed_files)
    affected: list[Package] = []
    seen: set[Package] = set()

    for package in packages:
        if package in seen:
            continue
        seen.add(package)

        directory = package.directory
        hit = any(is_within(f, directory) for f in changed)
        if hit:
            affected.append(package)

        if logger is not None:
            state = "affected" if hit else "not affected"
            logger.debug("Package '%s' is %s", package.name, state)

    return affected
