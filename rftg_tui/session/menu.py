"""
New Game Menu - Choose options before the first decision of a game.

The menu asks, in order:
1. Expansion level (which also limits the player count)
2. Number of players
3. Advanced two-player game (two players only)
4. Disable goals (expansions with goals only)
5. Disable takeovers (expansions with takeovers only)
"""

from __future__ import annotations
from dataclasses import dataclass, replace
import logging

from ..console.io import Console
from ..console.prompt import ChoicePrompt
from ..core.pool import Pool
from ..display.listings import pool_lines

logger = logging.getLogger(__name__)


EXPANSION_NAMES = [
    "Base game only",
    "The Gathering Storm",
    "Rebel vs Imperium",
    "The Brink of War",
]

# Largest player count per expansion level
MAX_PLAYERS = [4, 5, 6, 6]
MIN_PLAYERS = 2

GOALS_FROM_EXPANSION = 1
TAKEOVERS_FROM_EXPANSION = 2

NO, YES = 0, 1


@dataclass(frozen=True)
class GameOptions:
    """Options for a new game."""
    num_players: int = 2
    expansion: int = 0
    advanced: bool = False
    disable_goals: bool = False
    disable_takeovers: bool = False


class NewGameMenu:
    """Prompts for GameOptions through the choice prompt."""

    def __init__(self, console: Console, prompt: ChoicePrompt):
        self.console = console
        self.prompt = prompt

    def run(self, options: GameOptions | None = None, who: int = 0) -> GameOptions:
        """Ask for every option; returns new options."""
        options = options or GameOptions()

        expansion = self._pick(
            Pool.of(range(len(EXPANSION_NAMES)), label=lambda i: EXPANSION_NAMES[i]),
            "Choose expansion level:",
            who,
        )

        players = range(MIN_PLAYERS, MAX_PLAYERS[expansion] + 1)
        num_players = self._pick(Pool.of(players), "Choose number of players:", who)

        advanced = False
        if num_players == 2:
            advanced = self._yes_no("Play the advanced two-player game?", who)

        disable_goals = False
        if expansion >= GOALS_FROM_EXPANSION:
            disable_goals = self._yes_no("Disable goals?", who)

        disable_takeovers = False
        if expansion >= TAKEOVERS_FROM_EXPANSION:
            disable_takeovers = self._yes_no("Disable takeovers?", who)

        chosen = replace(
            options,
            num_players=num_players,
            expansion=expansion,
            advanced=advanced,
            disable_goals=disable_goals,
            disable_takeovers=disable_takeovers,
        )
        logger.info("New game options: %s", chosen)
        return chosen

    def _pick(self, pool: Pool, header: str, who: int) -> int:
        self.console.write_lines(pool_lines(pool, header))
        position = self.prompt.choose(pool, "Enter option number", who)
        return pool.item_at(position)

    def _yes_no(self, question: str, who: int) -> bool:
        pool = Pool.of([NO, YES], label=lambda v: "Yes" if v == YES else "No")
        return self._pick(pool, question, who) == YES
