from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cc_minimal_statusline.constants import DEFAULT_COMMAND, DEFAULT_PADDING


class StatusLineEntry(BaseModel):
    """Pydantic model for the ``statusLine`` value in Claude settings.json.

    Serializes to ``{"type": "command", "command": ..., "padding": ...}``.
    """

    model_config = ConfigDict(frozen=True)

    type: Literal["command"] = "command"
    """Entry kind; Claude Code runs ``command`` and shows its stdout."""

    command: str = DEFAULT_COMMAND
    """Command name on PATH, or absolute path to a script."""

    padding: int = Field(default=DEFAULT_PADDING, ge=0)
    """Horizontal padding around the rendered status line."""

    @field_validator("command")
    @classmethod
    def _command_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("command must not be empty")
        return value


class InstallPolicy(str, enum.Enum):
    """How ``install`` treats the settings file."""

    AUTO = "auto"
    MANUAL = "manual"
    PROMPT = "prompt"


class InstallOutcome(str, enum.Enum):
    CONFIGURED = "configured"
    MANUAL = "manual"
    DECLINED = "declined"


@dataclass(frozen=True)
class MergeResult:
    """What a merge did to settings.json."""

    settings_path: Path
    backup_path: Path | None
    existed: bool
    previous: Any = None
