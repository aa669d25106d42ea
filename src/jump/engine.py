"""
jump.engine — Version bump run.

Discovers the workspace and the changed files, picks the affected
packages, rewrites their versions in order, and refreshes Cargo.lock
once if anything was written.

    Discover → Resolve → Write (per package) → MaybeRefresh → Done

Any JumpError aborts the run where it happens. Manifests written
before the failure stay written.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from jump.errors import PreconditionViolated
from jump.log import get_logger
from jump.workspace.manifest import WriteResult, set_version
from jump.workspace.metadata import Package, Workspace
from jump.workspace.resolver import is_within, resolve_affected


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# COLLABORATORS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
class ChangeSource(Protocol):
    def toplevel(self) -> Path: ...
    def changed_files(self, toplevel: Path, old_tag: str) -> list[Path]: ...
    def all_files(self, toplevel: Path) -> list[Path]: ...


class WorkspaceInventory(Protocol):
    def load(self) -> Workspace: ...


class LockRefresher(Protocol):
    def refresh(self) -> None: ...


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# RUN
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
@dataclass
class RunOutcome:
    """What a run did."""
    workspace_root: Path
    affected: list[Package] = field(default_factory=list)
    results: list[WriteResult] = field(default_factory=list)
    refreshed: bool = False

    @property
    def has_change(self) -> bool:
        return any(r.has_change for r in self.results)


def run_jump(
    new_version: str,
    old_tag: str | None = None,
    dry_run: bool = False,
    *,
    change_source: ChangeSource,
    inventory: WorkspaceInventory,
    lock_refresher: LockRefresher,
    logger: logging.Logger | None = None,
) -> RunOutcome:
    """Bump the version of every package changed since old_tag.

    Args:
        new_version: Version string written as-is
        old_tag: Baseline git ref (None = every tracked file counts as changed)
        dry_run: Log intended changes, write nothing, skip the lock refresh
        change_source: git queries
        inventory: Workspace members
        lock_refresher: Cargo.lock refresh
        logger: Destination for progress messages

    Returns:
        RunOutcome

    Raises:
        JumpError: Any failing step; nothing is retried
    """
    log = logger or get_logger()

    # 1. Discover
    workspace = inventory.load()
    toplevel = change_source.toplevel()

    if not is_within(workspace.root, toplevel):
        raise PreconditionViolated(
            f"Workspace root {workspace.root} is not inside "
            f"git toplevel {toplevel}"
        )

    if old_tag is not None:
        changed = change_source.changed_files(toplevel, old_tag)
    else:
        log.warning("old_tag not provided, considering all files as changed")
        changed = change_source.all_files(toplevel)

    outcome = RunOutcome(workspace_root=workspace.root)

    # 2. Resolve
    outcome.affected = resolve_affected(changed, workspace.packages, logger=log)
    if not outcome.affected:
        log.info("No affected packages found.")
        return outcome

    # 3. Write, in inventory order; first failure propagates
    for package in outcome.affected:
        log.info(
            "Setting version of package '%s' to '%s'",
            package.name, new_version,
        )
        result = set_version(package.manifest_path, new_version, dry_run=dry_run)
        outcome.results.append(result)
        if result.inherited:
            log.warning(
                "Package '%s' inherits its version from the workspace; "
                "replacing it with '%s'",
                package.name, new_version,
            )
        if dry_run:
            log.info("Dry run: not updating %s", package.manifest_path)
        else:
            log.debug(
                "%s: %s -> %s",
                package.manifest_path, result.previous_version, new_version,
            )

    # 4. Refresh lock
    if outcome.has_change:
        log.info("Updating Cargo.lock...")
        lock_refresher.refresh()
        outcome.refreshed = True

    return outcome
