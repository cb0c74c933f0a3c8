"""Show command - print the statusLine fragment without touching any file."""

from __future__ import annotations

import click

from cc_minimal_statusline.commands._helpers import build_entry, command_option, padding_option
from cc_minimal_statusline.settings import render_fragment


@click.command()
@command_option
@padding_option
def show(command: str | None, padding: int) -> None:
    """Print the settings.json fragment for manual setup."""
    click.echo(render_fragment(build_entry(command, padding)))
