"""Shared option handling for install and show."""
from __future__ import annotations

import click

from cc_minimal_statusline.constants import DEFAULT_PADDING
from cc_minimal_statusline.errors import ValidationError
from cc_minimal_statusline.installer import resolve_command
from cc_minimal_statusline.models import StatusLineEntry

command_option = click.option(
    "--command",
    "command",
    default=None,
    metavar="TEXT",
    help="Command name or script path for the status line (default: cc-minimal-statusline)",
)
padding_option = click.option(
    "--padding",
    type=click.IntRange(min=0),
    default=DEFAULT_PADDING,
    show_default=True,
    help="Padding around the status line",
)


def build_entry(command: str | None, padding: int) -> StatusLineEntry:
    """Turn CLI options into a StatusLineEntry, reporting bad input as a usage error."""
    try:
        resolved = resolve_command(command)
    except ValidationError as exc:
        raise click.BadParameter(str(exc), param_hint="'--command'") from exc
    return StatusLineEntry(command=resolved, padding=padding)
