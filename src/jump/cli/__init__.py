"""
jump.cli — CLI entry point.

Installed as `cargo-jump`, so cargo runs it as a subcommand:
  cargo jump <new_version> [--old-tag TAG] [--dry-run]
"""

import click

from jump.cli.jump_cmd import jump_cmd


@click.group()
@click.version_option(package_name="cargo-jump")
def main():
    """cargo-jump — Bump versions of changed workspace packages."""
    pass


main.add_command(jump_cmd, "jump")
