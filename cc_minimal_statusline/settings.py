"""Read-merge-write of the ``statusLine`` key in Claude settings.json.

Only the ``statusLine`` key is ever changed; every other top-level key
is written back with the value it was read with. A settings file that
cannot be parsed is never merged: it is copied to ``settings.json.backup``
and replaced.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

from cc_minimal_statusline.atomic_io import atomic_write
from cc_minimal_statusline.constants import STATUSLINE_KEY, get_backup_path
from cc_minimal_statusline.models import MergeResult, StatusLineEntry
from cc_minimal_statusline.utils import log_debug, log_warn


class _Unreadable(Exception):
    """Settings file exists but does not hold a JSON object."""


def _parse(path: Path) -> dict[str, Any] | None:
    """Parse settings.json, returning ``None`` when it does not exist.

    Raises:
        _Unreadable: Malformed JSON, bad UTF-8, or a non-object document.
        OSError: Any other read failure (permissions, path is a directory).
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except UnicodeDecodeError as exc:
        raise _Unreadable(str(exc)) from exc
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise _Unreadable(str(exc)) from exc
    if not isinstance(data, dict):
        raise _Unreadable(f"expected a JSON object, got {type(data).__name__}")
    return data


def _dumps(data: dict[str, Any]) -> str:
    # ASCII escapes keep lone surrogates from valid JSON input encodable
    return json.dumps(data, indent=2, ensure_ascii=True)


def dump_settings(data: dict[str, Any]) -> str:
    """Serialize settings the way Claude Code writes them (2-space indent, trailing newline)."""
    return _dumps(data) + "\n"


def render_fragment(entry: StatusLineEntry) -> str:
    """JSON snippet a user can paste into settings.json by hand."""
    return _dumps({STATUSLINE_KEY: entry.model_dump()})


def load_settings(path: Path) -> tuple[dict[str, Any], Path | None]:
    """Load settings for merging, backing up an unreadable file.

    Returns:
        Tuple of (settings dict, backup path or None). The dict is empty when
        the file is missing or had to be backed up.
    """
    try:
        data = _parse(path)
    except _Unreadable as exc:
        backup = get_backup_path(path)
        log_warn(f"Could not parse existing {path.name} ({exc}), creating backup at {backup}")
        shutil.copyfile(path, backup)
        return {}, backup
    if data is None:
        log_debug(f"No settings file at {path}, starting fresh")
        return {}, None
    return data, None


def merge_statusline(path: Path, entry: StatusLineEntry) -> MergeResult:
    """Upsert ``statusLine`` into the settings file at *path*.

    Args:
        path: Path to settings.json; parent directories are created.
        entry: Status line entry to store (replaces any previous value).

    Returns:
        MergeResult describing the write.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    existed = path.exists()
    settings, backup = load_settings(path)
    previous = settings.get(STATUSLINE_KEY)

    settings[STATUSLINE_KEY] = entry.model_dump()
    atomic_write(path, dump_settings(settings))
    log_debug(f"Wrote {STATUSLINE_KEY} to {path}")

    return MergeResult(
        settings_path=path,
        backup_path=backup,
        existed=existed,
        previous=previous,
    )


def remove_statusline(path: Path) -> bool:
    """Delete ``statusLine`` from the settings file, keeping all other keys.

    An unreadable file is left untouched.

    Returns:
        True if the file was rewritten, False if there was nothing to remove.
    """
    try:
        data = _parse(path)
    except _Unreadable as exc:
        log_warn(f"Could not parse {path} ({exc}), leaving it unchanged")
        return False

    if data is None or STATUSLINE_KEY not in data:
        return False

    del data[STATUSLINE_KEY]
    atomic_write(path, dump_settings(data))
    return True
