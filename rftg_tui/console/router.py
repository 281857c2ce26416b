"""
Command Router - Meta-commands available at every prompt.

The router looks at one trimmed input line and either performs an info
display, reports a game-control signal, or hands the line back with
CONTINUE so the prompt can apply its own grammar.

Vocabulary:
    q            quit
    ?            help
    h / h N      hand / detail of hand card N
    v            victory point breakdown
    m            military breakdown
    t / t P / t P C
                 own tableau / tableau of player P / card C of player P
    u / ur / ug  undo / undo round / undo game
    r / rr / rg  redo / redo round / redo game
    n            new game
    save / load  save / load game
"""

from __future__ import annotations
import logging

from ..core.outcome import CommandOutcome
from ..display.cards import card_detail_lines
from ..display.listings import hand_lines, military_lines, tableau_lines, vp_lines
from ..interfaces.cards import CardLookup
from ..interfaces.engine import GameView
from .io import Console

logger = logging.getLogger(__name__)


HELP_LINES = [
    "Commands:",
    "  <number>   choose the numbered option",
    "  i<number>  show details of an option (e.g. i2)",
    "  l          list the options again",
    "  h [N]      show your hand, or details of hand card N",
    "  t [P [C]]  show your tableau, player P's tableau, or card C of player P",
    "  v          show victory points",
    "  m          show military strength",
    "  u, ur, ug  undo choice, round, game",
    "  r, rr, rg  redo choice, round, game",
    "  n          start a new game",
    "  save, load save or load the game",
    "  ?          show this help",
    "  q          quit",
]

SIGNALS = {
    "q": CommandOutcome.QUIT,
    "quit": CommandOutcome.QUIT,
    "u": CommandOutcome.UNDO,
    "ur": CommandOutcome.UNDO_ROUND,
    "ug": CommandOutcome.UNDO_GAME,
    "r": CommandOutcome.REDO,
    "rr": CommandOutcome.REDO_ROUND,
    "rg": CommandOutcome.REDO_GAME,
    "n": CommandOutcome.NEW_GAME,
    "save": CommandOutcome.SAVE_GAME,
    "load": CommandOutcome.LOAD_GAME,
}


class CommandRouter:
    """
    Routes meta-commands.

    `cards` and `game` may be None before a game exists (new-game menu);
    info commands then only print a notice.
    """

    def __init__(
        self,
        console: Console,
        cards: CardLookup | None = None,
        game: GameView | None = None,
    ):
        self.console = console
        self.cards = cards
        self.game = game

    def route(self, raw_line: str, who: int) -> CommandOutcome:
        """Route one input line for player `who`."""
        line = raw_line.strip()

        outcome = SIGNALS.get(line)
        if outcome is not None:
            logger.debug("Player %s requested %s", who, outcome.value)
            return outcome

        if line in ("?", "help"):
            self.console.write_lines(HELP_LINES)
            return CommandOutcome.HANDLED

        tokens = line.split()
        if not tokens:
            return CommandOutcome.CONTINUE

        command, args = tokens[0], tokens[1:]
        if command == "h" and len(args) <= 1:
            self._show_hand(who, args)
        elif command == "t" and len(args) <= 2:
            self._show_tableau(who, args)
        elif line == "v":
            self._show_vp()
        elif line == "m":
            self._show_military()
        else:
            return CommandOutcome.CONTINUE

        return CommandOutcome.HANDLED

    # =========================================================================
    # Info displays
    # =========================================================================

    def _has_game(self) -> bool:
        if self.cards is None or self.game is None:
            self.console.write("No game in progress.")
            return False
        return True

    def _show_hand(self, who: int, args: list[str]) -> None:
        if not self._has_game():
            return
        if not args:
            self.console.write_lines(hand_lines(self.cards, self.game, who))
            return

        hand = self.game.hand(who)
        position = _parse_position(args[0], len(hand))
        if position is None:
            self.console.write(f"Invalid hand card number. Choose 1 to {len(hand)}.")
            return
        self.console.write_lines(card_detail_lines(self.cards, hand[position - 1]))

    def _show_tableau(self, who: int, args: list[str]) -> None:
        if not self._has_game():
            return
        if not args:
            self.console.write_lines(tableau_lines(self.cards, self.game, who, who))
            return

        player = _parse_position(args[0], self.game.num_players)
        if player is None:
            self.console.write(
                f"Invalid player number. Choose 1 to {self.game.num_players}."
            )
            return
        target = player - 1

        if len(args) == 1:
            self.console.write_lines(tableau_lines(self.cards, self.game, target, who))
            return

        tableau = self.game.tableau(target)
        position = _parse_position(args[1], len(tableau))
        if position is None:
            self.console.write(f"Invalid tableau card number. Choose 1 to {len(tableau)}.")
            return
        self.console.write_lines(card_detail_lines(self.cards, tableau[position - 1]))

    def _show_vp(self) -> None:
        if self._has_game():
            self.console.write_lines(vp_lines(self.game))

    def _show_military(self) -> None:
        if self._has_game():
            self.console.write_lines(military_lines(self.game))


def _parse_position(text: str, upper: int) -> int | None:
    """Parse a 1-based position, None if not a number in 1..upper."""
    if not (text.isascii() and text.isdigit()):
        return None
    value = int(text)
    if 1 <= value <= upper:
        return value
    return None
