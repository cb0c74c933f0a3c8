"""Uninstall command - remove the statusLine entry from Claude settings.json."""

from __future__ import annotations

import click

from cc_minimal_statusline.environment import Environment
from cc_minimal_statusline.settings import remove_statusline
from cc_minimal_statusline.utils import format_home_relative


@click.command()
def uninstall() -> None:
    """Remove the status line from ~/.claude/settings.json."""
    env = Environment.from_process()
    where = format_home_relative(env.settings_path, env.home)
    if remove_statusline(env.settings_path):
        click.echo(f"Removed statusLine from {where}")
    else:
        click.echo(f"No statusLine configured in {where}")
