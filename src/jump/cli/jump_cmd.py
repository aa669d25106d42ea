"""
jump.cli.jump_cmd — cargo jump command.

  cargo jump 1.2.3                       — Bump every member (no baseline)
  cargo jump 1.2.3 --old-tag v1.2.2      — Bump members changed since v1.2.2
  cargo jump 1.2.3 --old-tag v1.2.2 --dry-run
"""

import sys
import click

from jump.config import load_config
from jump.engine import run_jump
from jump.errors import JumpError
from jump.log import setup_logging
from jump.vcs.git import GitChangeSource
from jump.workspace.lock import CargoLockRefresher
from jump.workspace.metadata import CargoWorkspaceInventory


@click.command("jump")
@click.argument("new_version")
@click.option("--old-tag", default=None,
              help="Old git tag for comparison")
@click.option("--dry-run", is_flag=True, default=False,
              help="Don't modify anything")
@click.option("-C", "--dir", "workspace_dir", default=None,
              help="Workspace directory (default: pwd)")
@click.option("--config", "config_file", default=None,
              help="Config file (default: ~/.cargo-jump/config.yaml)")
@click.option("-v", "--verbose", is_flag=True, default=False,
              help="Show debug output")
def jump_cmd(new_version, old_tag, dry_run, workspace_dir, config_file, verbose):
    """Set NEW_VERSION on workspace packages changed since --old-tag."""
    try:
        cfg = load_config(config_file)
    except JumpError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    logger = setup_logging(debug=verbose or cfg.debug)

    try:
        run_jump(
            new_version,
            old_tag=old_tag,
            dry_run=dry_run,
            change_source=GitChangeSource(workspace_dir, git=cfg.git),
            inventory=CargoWorkspaceInventory(workspace_dir, cargo=cfg.cargo),
            lock_refresher=CargoLockRefresher(workspace_dir, cargo=cfg.cargo),
            logger=logger,
        )
    except JumpError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
