"""
Console Settings - Tunables for the text front end.

Settings are a pydantic model so a settings file is validated on load:

    {
        "max_line_length": 64,
        "log_level": "INFO"
    }

CLI flags override values read from the file.
"""

from __future__ import annotations
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConsoleSettings(BaseModel):
    """Settings for prompts and logging."""
    max_line_length: int = Field(64, ge=1, description="Longest accepted input line")
    option_hint: str = Field(
        "(number to choose, 'i' + number for info, 'l' to list, '?' for help, 'q' to quit)",
        description="Shown after every prompt",
    )
    log_level: str = Field("WARNING", description="Level for the package logger")

    model_config = {"extra": "forbid"}

    @field_validator("log_level")
    @classmethod
    def _check_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def with_overrides(self, **overrides: Any) -> ConsoleSettings:
        """Return new settings with non-None overrides applied and validated."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ConsoleSettings.model_validate(values)


def load_settings(path: str | Path | None = None) -> ConsoleSettings:
    """
    Load settings from a JSON file.

    Returns defaults when no path is given. Raises pydantic's
    ValidationError for bad values and FileNotFoundError for a missing file.
    """
    if path is None:
        return ConsoleSettings()
    text = Path(path).read_text(encoding="utf-8")
    return ConsoleSettings.model_validate_json(text)
