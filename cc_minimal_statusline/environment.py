"""Process-global inputs bundled as an explicit dependency.

Installer logic takes an ``Environment`` instead of reaching for
``Path.home()``, ``sys.stdin`` or ``sys.stdout`` directly, so tests can
substitute a temp home directory and in-memory streams.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from cc_minimal_statusline.constants import get_settings_path


@dataclass(frozen=True)
class Environment:
    home: Path
    stdin: TextIO
    stdout: TextIO
    interactive: bool

    @classmethod
    def from_process(cls) -> "Environment":
        """Build an environment from the running process.

        Streams are looked up at call time so Click's test runner (which
        swaps ``sys.stdin``/``sys.stdout``) is honoured.
        """
        stdin = sys.stdin
        return cls(
            home=Path.home(),
            stdin=stdin,
            stdout=sys.stdout,
            interactive=_isatty(stdin),
        )

    @property
    def settings_path(self) -> Path:
        return get_settings_path(self.home)


def _isatty(stream: TextIO | None) -> bool:
    if stream is None:
        return False
    try:
        return stream.isatty()
    except ValueError:
        # closed stream
        return False
