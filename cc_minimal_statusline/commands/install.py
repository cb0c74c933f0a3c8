"""Install command - add the statusLine entry to Claude settings.json."""

from __future__ import annotations

import click

from cc_minimal_statusline.commands._helpers import build_entry, command_option, padding_option
from cc_minimal_statusline.environment import Environment
from cc_minimal_statusline.installer import install as run_install
from cc_minimal_statusline.models import InstallPolicy


@click.command()
@click.option(
    "--mode",
    type=click.Choice([p.value for p in InstallPolicy], case_sensitive=False),
    default=InstallPolicy.AUTO.value,
    show_default=True,
    help="auto: write settings; manual: print instructions; prompt: ask first",
)
@command_option
@padding_option
def install(mode: str, command: str | None, padding: int) -> None:
    """Configure the status line in ~/.claude/settings.json."""
    entry = build_entry(command, padding)
    run_install(Environment.from_process(), InstallPolicy(mode.lower()), entry)
