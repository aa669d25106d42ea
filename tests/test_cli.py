"""
tests/test_cli.py — CLI tests.

Runs `cargo-jump jump ...` through Click's CliRunner with git and
cargo swapped for fakes.
"""

import importlib

import pytest
from click.testing import CliRunner

from jump.cli import main
from jump.workspace.manifest import read_manifest
from conftest import FakeChangeSource, FakeInventory, FakeRefresher


# jump.cli re-exports the command under the same name as its module
jump_cmd = importlib.import_module("jump.cli.jump_cmd")

runner = CliRunner()


@pytest.fixture
def fakes(ws, monkeypatch):
    """Patch the command's collaborators; returns them for inspection."""
    state = {
        "source": FakeChangeSource(ws.root, changed=[ws.root / "a" / "src" / "lib.rs"]),
        "inventory": FakeInventory(ws),
        "refresher": FakeRefresher(),
        "cwds": [],
    }

    def _source(cwd, git="git"):
        state["cwds"].append(cwd)
        return state["source"]

    monkeypatch.setattr(jump_cmd, "GitChangeSource", _source)
    monkeypatch.setattr(jump_cmd, "CargoWorkspaceInventory",
                        lambda cwd, cargo="cargo": state["inventory"])
    monkeypatch.setattr(jump_cmd, "CargoLockRefresher",
                        lambda cwd, cargo="cargo": state["refresher"])
    return state


def _invoke(tmp_path, *args):
    return runner.invoke(main, ["jump", *args, "--config", str(tmp_path / "none.yaml")])


def _version(package):
    return str(read_manifest(package.manifest_path)["package"]["version"])


class TestJump:
    def test_bump_changed(self, ws, fakes, tmp_path):
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1.0.0")
        assert result.exit_code == 0, result.output
        a, b = ws.packages
        assert _version(a) == "1.2.3"
        assert _version(b) == "0.1.0"
        assert fakes["refresher"].calls == 1
        assert "Setting version of package 'a' to '1.2.3'" in result.output
        assert "Updating Cargo.lock..." in result.output

    def test_without_tag_warns(self, ws, fakes, tmp_path):
        fakes["source"].tracked = [ws.root / "a" / "x", ws.root / "b" / "y"]
        result = _invoke(tmp_path, "1.2.3")
        assert result.exit_code == 0, result.output
        assert "Warning: old_tag not provided" in result.output
        assert all(_version(p) == "1.2.3" for p in ws.packages)

    def test_dry_run(self, ws, fakes, tmp_path):
        before = [p.manifest_path.read_bytes() for p in ws.packages]
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1", "--dry-run")
        assert result.exit_code == 0, result.output
        assert [p.manifest_path.read_bytes() for p in ws.packages] == before
        assert fakes["refresher"].calls == 0
        assert "Dry run: not updating" in result.output

    def test_no_affected_packages(self, ws, fakes, tmp_path):
        fakes["source"].changed = [ws.root / "README.md"]
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1")
        assert result.exit_code == 0
        assert "No affected packages found." in result.output
        assert fakes["refresher"].calls == 0

    def test_verbose_shows_debug(self, ws, fakes, tmp_path):
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1", "-v")
        assert result.exit_code == 0
        assert "Debug: Package 'b' is not affected" in result.output

    def test_debug_from_config(self, ws, fakes, tmp_path):
        cfg = tmp_path / "c.yaml"
        cfg.write_text("log_level: debug\n")
        result = runner.invoke(main, ["jump", "1.2.3", "--old-tag", "v1",
                                      "--config", str(cfg)])
        assert result.exit_code == 0
        assert "Debug: Package 'a' is affected" in result.output

    def test_workspace_dir_passed_through(self, ws, fakes, tmp_path):
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1", "-C", str(ws.root))
        assert result.exit_code == 0
        assert fakes["cwds"] == [str(ws.root)]

    def test_new_version_required(self, fakes, tmp_path):
        result = _invoke(tmp_path)
        assert result.exit_code != 0
        assert "NEW_VERSION" in result.output


class TestErrors:
    def test_malformed_manifest_exits_1(self, ws, fakes, tmp_path):
        ws.packages[0].manifest_path.write_text('[package]\nname = "a"\n')
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1")
        assert result.exit_code == 1
        assert "Error: Missing package.version" in result.output
        assert fakes["refresher"].calls == 0

    def test_outside_git_exits_1(self, ws, fakes, tmp_path):
        fakes["source"] = FakeChangeSource(tmp_path / "other")
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1")
        assert result.exit_code == 1
        assert "not inside git toplevel" in result.output

    def test_git_failure_exits_1(self, ws, fakes, tmp_path):
        fakes["source"].fail = True
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1")
        assert result.exit_code == 1
        assert "Error: Failed to get git toplevel directory" in result.output

    def test_refresh_failure_exits_1(self, ws, fakes, tmp_path):
        fakes["refresher"].fail = True
        result = _invoke(tmp_path, "1.2.3", "--old-tag", "v1")
        assert result.exit_code == 1
        assert "Error: cargo fetch failed" in result.output

    def test_bad_config_exits_1(self, fakes, tmp_path):
        cfg = tmp_path / "c.yaml"
        cfg.write_text("log_level: loud\n")
        result = runner.invoke(main, ["jump", "1.2.3", "--config", str(cfg)])
        assert result.exit_code == 1
        assert "Error: Unknown log_level" in result.output


class TestVersion:
    def test_version_option(self, monkeypatch):
        import importlib.metadata
        monkeypatch.setattr(importlib.metadata, "version", lambda name: "0.1.0")
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
