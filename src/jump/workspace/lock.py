"""
jump.workspace.lock — Cargo.lock refresh.

After manifests change, `cargo fetch` rewrites Cargo.lock with the
new member versions. The lock file format belongs to cargo; we only
run the command.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from jump.errors import RefreshFailed


class CargoLockRefresher:
    """Runs `cargo fetch` in the workspace."""

    def __init__(self, cwd: str | Path | None = None, cargo: str = "cargo"):
        self.cwd = Path(cwd or ".").resolve()
        self.cargo = cargo

    @property
    def command(self) -> list[str]:
        return [self.cargo, "fetch"]

    def refresh(self) -> None:
        """Refresh Cargo.lock.

        Raises:
            RefreshFailed: cargo missing or exited non-zero
        """
        try:
            result = subprocess.run(
                self.command, cwd=self.cwd, capture_output=True, text=True,
            )
        except FileNotFoundError as e:
            raise RefreshFailed(
                f"Failed to execute cargo fetch: '{self.cargo}' not found"
            ) from e

        if result.returncode != 0:
            detail = result.stderr.strip()
            msg = f"cargo fetch failed (exit {result.returncode})"
            if detail:
                msg += f": {detail}"
            raise RefreshFailed(msg)
