"""Logging and formatting utilities for the statusline installer.

Progress goes to stdout, warnings and errors to stderr, mirroring the
plain-text output a post-install hook is expected to produce.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path


# Color codes - respect TERM environment variable
def _should_use_colors() -> bool:
    """Check if colors should be used based on TERM environment variable."""
    term = os.environ.get("TERM", "")
    if not term or term == "dumb":
        return False
    return True


_USE_COLORS = _should_use_colors()

# ANSI color codes
BOLD = "\033[1m" if _USE_COLORS else ""
RESET = "\033[0m" if _USE_COLORS else ""
GREEN = "\033[92m" if _USE_COLORS else ""

_debug_enabled = False


def set_debug(enabled: bool) -> None:
    """Turn debug output on or off (wired to the CLI ``--debug`` flag)."""
    global _debug_enabled
    _debug_enabled = enabled


def log_debug(msg: str) -> None:
    """Log a debug message (only when debug output is enabled).

    Args:
        msg: The message to log.
    """
    if _debug_enabled:
        print(f"DEBUG: {msg}", file=sys.stderr)


def log_warn(msg: str) -> None:
    """Log a warning message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"Warning: {msg}", file=sys.stderr)


# Formatting helper functions (pure functions, not logging)


def format_step(msg: str) -> str:
    """Indent a step line by 2 spaces."""
    return f"  {msg}"


def format_home_relative(path: Path, home: Path) -> str:
    """Render *path* as ``~/...`` when it lives under *home*.

    Args:
        path: Path to display.
        home: The user's home directory.

    Returns:
        ``~``-prefixed path, or the path unchanged if it is outside *home*.
    """
    try:
        return str(Path("~") / path.relative_to(home))
    except ValueError:
        return str(path)
