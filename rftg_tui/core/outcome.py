"""
Command Outcomes - The result of routing one input line.

Every line typed at any prompt is first offered to the command router,
which answers with exactly one CommandOutcome:
- CONTINUE: not a meta-command, the prompt applies its own grammar
- HANDLED: an info display already happened, prompt again
- QUIT: the user wants to leave
- everything else: a game-control signal for the engine (undo, redo,
  new game, save, load)
"""

from __future__ import annotations
from enum import Enum


class CommandOutcome(Enum):
    """Outcome of routing a single input line."""
    CONTINUE = "continue"
    HANDLED = "handled"
    QUIT = "quit"

    # Undo / redo
    UNDO = "undo"
    UNDO_ROUND = "undo_round"
    UNDO_GAME = "undo_game"
    REDO = "redo"
    REDO_ROUND = "redo_round"
    REDO_GAME = "redo_game"

    # Game lifecycle
    NEW_GAME = "new_game"
    SAVE_GAME = "save_game"
    LOAD_GAME = "load_game"

    @property
    def is_signal(self) -> bool:
        """True for outcomes the engine has to act on."""
        return self not in (CommandOutcome.CONTINUE, CommandOutcome.HANDLED)
