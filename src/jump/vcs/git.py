"""
jump.vcs.git — Changed-file listing via git.

    git rev-parse --show-toplevel
    git -C <top> diff --name-only -z <old_tag> HEAD
    git -C <top> ls-files -z

Paths come back relative to the top level and are joined onto it,
so callers always get absolute paths.
"""

from __future__ import annotations

import subprocess
from pathlib import Path

from jump.errors import SourceUnavailable


class GitChangeSource:
    """Change source backed by the git CLI."""

    def __init__(self, cwd: str | Path | None = None, git: str = "git"):
        self.cwd = Path(cwd or ".").resolve()
        self.git = git

    def toplevel(self) -> Path:
        """Top level directory of the repository containing cwd."""
        out = self._run(
            ["rev-parse", "--show-toplevel"],
            "Failed to get git toplevel directory",
        )
        return Path(out.strip())

    def changed_files(self, toplevel: Path, old_tag: str) -> list[Path]:
        """Files changed between old_tag and HEAD."""
        out = self._run(
            ["-C", str(toplevel), "diff", "--name-only", "-z", old_tag, "HEAD"],
            "Failed to get changed files from git",
        )
        return _join_all(toplevel, out)

    def all_files(self, toplevel: Path) -> list[Path]:
        """Every file tracked by git."""
        out = self._run(
            ["-C", str(toplevel), "ls-files", "-z"],
            "Failed to get all files from git",
        )
        return _join_all(toplevel, out)

    def _run(self, args: list[str], what: str) -> str:
        cmd = [self.git, *args]
        try:
            result = subprocess.run(
                cmd, cwd=self.cwd, capture_output=True, text=True,
            )
        except FileNotFoundError as e:
            raise SourceUnavailable(f"{what}: '{self.git}' not found") from e

        if result.returncode != 0:
            detail = result.stderr.strip()
            msg = f"{what} (exit {result.returncode})"
            if detail:
                msg += f": {detail}"
            raise SourceUnavailable(msg)

        return result.stdout


def _join_all(toplevel: Path, output: str) -> list[Path]:
    # -z output: NUL separated, trailing NUL
    return [toplevel / name for name in output.split("\0") if name]
