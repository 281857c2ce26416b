"""
Choice Prompt - The single-selection primitive.

One call asks the user for one position in a pool. Each input line is:
1. Checked (not empty, not too long, no control characters)
2. Offered to the command router (meta-commands work everywhere)
3. Parsed with the local grammar:
   - N       choose position N (0 only when the caller allows passing)
   - iN      show details of item N ("i N" and "info N" also work)
   - l       list the current pool again under the original prompt

The prompt only returns a valid position. Quit and game-control signals
leave it as exceptions.
"""

from __future__ import annotations
import logging
from typing import Callable

from ..config import ConsoleSettings
from ..core.outcome import CommandOutcome
from ..core.pool import Pool
from ..display.listings import pool_lines
from ..errors import ControlSignal, InputReadError, UserQuit
from .io import Console
from .router import CommandRouter

logger = logging.getLogger(__name__)


# Called with (outcome, who); returns True when it fully handled the signal
SignalHook = Callable[[CommandOutcome, int], bool]

LIST_COMMANDS = ("l", "list")


class ChoicePrompt:
    """
    Enumerated choice prompt.

    Usage:
        prompt = ChoicePrompt(console, router)
        position = prompt.choose(pool, "Enter card number to discard", who=0)
        card_id = pool.item_at(position)
    """

    def __init__(
        self,
        console: Console,
        router: CommandRouter,
        settings: ConsoleSettings | None = None,
        signal_hook: SignalHook | None = None,
    ):
        self.console = console
        self.router = router
        self.settings = settings or ConsoleSettings()
        self.signal_hook = signal_hook

    def choose(self, pool: Pool, prompt: str, who: int, allow_zero: bool = False) -> int:
        """
        Ask for a 1-based position in `pool`.

        Returns 0 only when `allow_zero` is set and the user passes.
        Raises UserQuit on quit and ControlSignal for unhandled
        game-control commands.
        """
        while True:
            try:
                raw = self.console.ask(f"{prompt} {self.settings.option_hint}: ")
            except InputReadError as e:
                logger.warning("Failed to read input: %s", e)
                self.console.write("Could not read input. Please try again.")
                continue

            line = raw.strip()
            problem = self._check_line(line)
            if problem:
                self.console.write(problem)
                continue

            outcome = self.router.route(line, who)
            if outcome == CommandOutcome.QUIT:
                raise UserQuit(who)
            if outcome == CommandOutcome.HANDLED:
                continue
            if outcome.is_signal:
                self._signal(outcome, who)
                continue

            choice = self._apply_local(pool, prompt, line, allow_zero)
            if choice is not None:
                logger.debug("Player %s chose position %d of %d", who, choice, len(pool))
                return choice

    def _check_line(self, line: str) -> str | None:
        """Return a rejection message for unusable input, else None."""
        if not line:
            return "Please enter a choice."
        if len(line) > self.settings.max_line_length:
            return f"Input too long (at most {self.settings.max_line_length} characters)."
        if any(ord(ch) < 32 or ord(ch) == 127 for ch in line):
            return "Input contains control characters. Please try again."
        return None

    def _signal(self, outcome: CommandOutcome, who: int) -> None:
        if self.signal_hook is not None and self.signal_hook(outcome, who):
            logger.debug("Signal %s handled in place", outcome.value)
            return
        raise ControlSignal(outcome, who)

    def _apply_local(
        self, pool: Pool, prompt: str, line: str, allow_zero: bool
    ) -> int | None:
        """Apply the prompt grammar. Returns a position or None to ask again."""
        lowered = line.lower()

        if lowered in LIST_COMMANDS:
            self.console.write_lines(pool_lines(pool, prompt))
            return None

        if lowered.startswith("i"):
            self._show_info(pool, lowered)
            return None

        if line.isascii() and line.isdigit():
            value = int(line)
            if 1 <= value <= len(pool) or (value == 0 and allow_zero):
                return value
            if allow_zero:
                self.console.write(f"Invalid selection. Choose 0 to {len(pool)}.")
            else:
                self.console.write(f"Invalid selection. Choose 1 to {len(pool)}.")
            return None

        self.console.write("Invalid input. Please try again or enter '?' for help.")
        return None

    def _show_info(self, pool: Pool, lowered: str) -> None:
        arg = lowered[4:] if lowered.startswith("info") else lowered[1:]
        arg = arg.strip()

        if not arg:
            if len(pool) == 1:
                arg = "1"
            else:
                self.console.write("Give the option number, e.g. i2.")
                return

        if not (arg.isascii() and arg.isdigit()):
            self.console.write("Invalid format. Please try again.")
            return

        position = int(arg)
        if not 1 <= position <= len(pool):
            self.console.write("Invalid option number. Please try again.")
            return

        item_id = pool.item_at(position)
        if pool.inspect is None:
            self.console.write(f"No details available for {pool.display_name(item_id)}.")
            return
        self.console.write_lines(pool.inspect(item_id))
