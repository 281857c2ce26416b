"""
Errors and control signals.

Control signals are not failures: they carry a CommandOutcome from the
prompt that saw it up to whoever runs the game loop.
"""

from __future__ import annotations

from .core.outcome import CommandOutcome


class RftgTuiError(Exception):
    """Base exception for the rftg-tui package."""


class InputReadError(RftgTuiError):
    """Raised by the console when a line could not be read or decoded."""


class ControlSignal(RftgTuiError):
    """Raised when the user asks the engine to undo, redo, save, load or restart."""

    def __init__(self, outcome: CommandOutcome, who: int | None = None):
        self.outcome = outcome
        self.who = who
        super().__init__(f"Control signal: {outcome.value}")


class UserQuit(ControlSignal):
    """Raised when the user quits from any prompt."""

    def __init__(self, who: int | None = None):
        super().__init__(CommandOutcome.QUIT, who)
