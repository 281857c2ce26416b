"""
Console - Line I/O, meta-command routing and the choice prompt.
"""

from .io import Console
from .router import CommandRouter, HELP_LINES
from .prompt import ChoicePrompt, SignalHook

__all__ = [
    "Console",
    "CommandRouter",
    "HELP_LINES",
    "ChoicePrompt",
    "SignalHook",
]
