"""Install policies for the status line entry.

``auto`` merges silently, ``manual`` only prints instructions, and
``prompt`` asks first when attached to a terminal. All output goes to
``env.stdout`` so the caller decides where it lands.
"""

from __future__ import annotations

import json
import os
import re
import shlex
from pathlib import Path

from cc_minimal_statusline.constants import DEFAULT_COMMAND, NERD_FONT_TIP
from cc_minimal_statusline.environment import Environment
from cc_minimal_statusline.errors import ValidationError
from cc_minimal_statusline.models import InstallOutcome, InstallPolicy, StatusLineEntry
from cc_minimal_statusline.settings import merge_statusline, render_fragment
from cc_minimal_statusline.utils import BOLD, GREEN, RESET, format_home_relative, format_step, log_debug

_YES_ANSWERS = {"", "y", "yes"}


# Leading word of a shell command line, honouring quotes and backslashes.
_HEAD_RE = re.compile(r"""((?:[^\s'"\\]|\\.|'[^']*'|"(?:[^"\\]|\\.)*")+)(\s.*)?""", re.DOTALL)


def _looks_like_path(word: str) -> bool:
    return os.sep in word or (os.altsep is not None and os.altsep in word) or word.startswith((".", "~"))


def resolve_command(value: str | None, *, cwd: Path | None = None) -> str:
    """Resolve the ``command`` field of the status line entry.

    ``None`` selects the packaged command name. The value is read as a
    shell command line: when its first word looks like a path (contains a
    separator, or starts with ``.`` or ``~``) that word becomes an absolute
    script path. Arguments after it, such as ``bash ~/.claude/statusline.sh``,
    are kept exactly as given.

    Raises:
        ValidationError: If *value* is empty, whitespace, or has unbalanced quotes.
    """
    if value is None:
        return DEFAULT_COMMAND

    value = value.strip()
    if not value:
        raise ValidationError("Status line command must not be empty")

    try:
        shlex.split(value)
    except ValueError as exc:
        raise ValidationError(f"Status line command is not a valid command line: {exc}") from exc
    match = _HEAD_RE.fullmatch(value)
    if match is None:
        raise ValidationError(f"Status line command is not a valid command line: {value}")

    head_raw, rest = match.group(1), match.group(2) or ""
    head = shlex.split(head_raw)[0]
    if not _looks_like_path(head):
        return value

    script = Path(head).expanduser()
    if not script.is_absolute():
        script = (cwd or Path.cwd()) / script
    return shlex.quote(os.path.normpath(script)) + rest


def _echo(env: Environment, msg: str = "") -> None:
    env.stdout.write(msg + "\n")
    env.stdout.flush()


def print_manual_instructions(env: Environment, entry: StatusLineEntry) -> None:
    """Tell the user how to add the entry to settings.json by hand."""
    where = format_home_relative(env.settings_path, env.home)
    _echo(env, f"To enable the status line, add the following to {where}:")
    _echo(env)
    _echo(env, render_fragment(entry))
    _echo(env)


def ask_confirmation(env: Environment, question: str) -> bool:
    """Ask a default-yes question on ``env.stdin``.

    Empty input, ``y`` or ``yes`` (any case) confirm. End of input before
    an answer counts as a no. Blocks until a line arrives.
    """
    env.stdout.write(f"{question} [Y/n] ")
    env.stdout.flush()
    line = env.stdin.readline()
    if not line:
        _echo(env)
        return False
    return line.strip().lower() in _YES_ANSWERS


def install(env: Environment, policy: InstallPolicy, entry: StatusLineEntry) -> InstallOutcome:
    """Configure the status line according to *policy*.

    Args:
        env: Home directory and streams to use.
        policy: auto, manual or prompt.
        entry: Status line entry to write.

    Returns:
        What happened: CONFIGURED, MANUAL, or DECLINED.
    """
    log_debug(f"Install policy={policy.value} interactive={env.interactive}")

    if policy is InstallPolicy.MANUAL:
        print_manual_instructions(env, entry)
        return InstallOutcome.MANUAL

    if policy is InstallPolicy.PROMPT:
        if not env.interactive:
            print_manual_instructions(env, entry)
            return InstallOutcome.MANUAL
        where = format_home_relative(env.settings_path, env.home)
        if not ask_confirmation(env, f"Configure the status line in {where}?"):
            _echo(env, "Skipped automatic configuration.")
            print_manual_instructions(env, entry)
            return InstallOutcome.DECLINED

    result = merge_statusline(env.settings_path, entry)

    _echo(env)
    _echo(env, f"{BOLD}Status line installed and configured!{RESET}")
    _echo(env)
    where = format_home_relative(result.settings_path, env.home)
    verb = "Added to" if result.existed else "Created"
    _echo(env, format_step(f"{GREEN}{verb} {where}{RESET}"))
    if result.previous is not None and result.previous != entry.model_dump():
        _echo(env, format_step(f"Replaced previous statusLine: {json.dumps(result.previous)}"))
    if result.backup_path is not None:
        _echo(env, format_step(
            f"Previous settings were not valid JSON and were saved to "
            f"{format_home_relative(result.backup_path, env.home)}"
        ))
    _echo(env)
    _echo(env, NERD_FONT_TIP)
    _echo(env)
    return InstallOutcome.CONFIGURED
