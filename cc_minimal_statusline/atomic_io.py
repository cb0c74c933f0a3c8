"""Atomic write-via-rename for the settings file.

A crash or failed write never leaves a truncated ``settings.json``
behind: content goes to a temp file in the same directory and is then
moved over the target with ``os.replace()``.

Symlinks are followed, so a settings file linked from a dotfiles
checkout is updated in place and the link survives.

No locking is done. Two installers racing on the same file is accepted:
the last writer wins.
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path


def atomic_write(path: Path, content: str) -> None:
    """Write content to a file atomically.

    Uses write-to-temp + os.replace() to avoid corrupted files on crash.
    An existing file keeps its permission bits; a new file gets 600
    (from mkstemp). The temp file is removed if anything goes wrong
    before the rename.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    target = path.resolve()
    target.parent.mkdir(parents=True, exist_ok=True)

    try:
        mode: int | None = stat.S_IMODE(target.stat().st_mode)
    except FileNotFoundError:
        mode = None

    fd, tmp_path = tempfile.mkstemp(dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        if mode is not None:
            os.chmod(tmp_path, mode)
        os.replace(tmp_path, target)
    except BaseException:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
