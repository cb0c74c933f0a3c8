"""Configuration defaults for cc-minimal-statusline."""

from __future__ import annotations

from pathlib import Path

# ============================================================================
# Status line entry
# ============================================================================

# Resolved on PATH by Claude Code when it renders the status line.
DEFAULT_COMMAND = "cc-minimal-statusline"
DEFAULT_PADDING = 0
STATUSLINE_KEY = "statusLine"

# ============================================================================
# Directory & Path Constants
# ============================================================================

CLAUDE_DIR_NAME = ".claude"
SETTINGS_FILE_NAME = "settings.json"
BACKUP_SUFFIX = ".backup"


def get_claude_dir(home: Path) -> Path:
    """Get the Claude configuration directory.

    Returns:
        Path to ``<home>/.claude``
    """
    return home / CLAUDE_DIR_NAME


def get_settings_path(home: Path) -> Path:
    """Get the Claude settings file.

    Returns:
        Path to ``<home>/.claude/settings.json``
    """
    return get_claude_dir(home) / SETTINGS_FILE_NAME


def get_backup_path(settings_path: Path) -> Path:
    """Sibling path that receives a copy of an unreadable settings file."""
    return settings_path.with_name(settings_path.name + BACKUP_SUFFIX)


# ============================================================================
# Messages
# ============================================================================

NERD_FONT_TIP = (
    "Tip: Make sure you have a Nerd Font installed for icons to display correctly.\n"
    "   brew install --cask font-meslo-lg-nerd-font"
)
