"""Exception hierarchy for cc-minimal-statusline.

Filesystem failures are not wrapped: they propagate as ``OSError`` and
terminate the command.

This module is a base-layer module: it must NOT import from any
other ``cc_minimal_statusline`` submodule.
"""

from __future__ import annotations


class StatuslineError(Exception):
    """Base exception for all cc-minimal-statusline errors."""


class ValidationError(StatuslineError):
    """Input validation failures (empty command, bad padding, etc.)."""
