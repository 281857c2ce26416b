"""
List-Pool Selector - Repeated selection with removal.

Used for discard, keep and hand-consumption decisions. Each pick:
1. Asks the prompt for a position in the current pool
2. Removes that position (later items move up one place)
3. Appends the removed id to the result
4. Lists the shrunken pool again if more picks remain

The loop ends when the maximum is reached, the pool runs out, or the user
passes with 0 (only when the caller allows stopping and the stop check
passes; by default that means the minimum is met).
"""

from __future__ import annotations
import logging
from typing import Callable

from ..console.io import Console
from ..console.prompt import ChoicePrompt
from ..core.pool import Pool
from ..core.selection import SelectionBounds, SelectionResult
from ..display.listings import pool_lines

logger = logging.getLogger(__name__)


class ListPoolSelector:
    """Selects several items from a pool, one prompt per item."""

    def __init__(self, console: Console, prompt: ChoicePrompt):
        self.console = console
        self.prompt = prompt

    def select(
        self,
        pool: Pool,
        bounds: SelectionBounds,
        who: int,
        header: str,
        prompt: str,
        stop_allowed: bool = False,
        can_stop: Callable[[list[int]], bool] | None = None,
        on_pick: Callable[[int], None] | None = None,
    ) -> SelectionResult:
        """
        Run the selection loop.

        Args:
            pool: Items to choose from; mutated in place
            bounds: Minimum and maximum number of picks
            who: Player making the choice
            header: Shown above the first listing
            prompt: Prompt text for each pick
            stop_allowed: Whether 0 ends the selection early
            can_stop: Overrides the "minimum reached" stop check
            on_pick: Called with each picked id

        Returns:
            SelectionResult with picks in order and the pool size left
        """
        if bounds.minimum > len(pool):
            logger.debug(
                "Selection needs %d items but pool has %d", bounds.minimum, len(pool)
            )

        chosen: list[int] = []
        if can_stop is None:
            def can_stop(picked: list[int]) -> bool:
                return len(picked) >= bounds.minimum

        if bounds.maximum > 0 and not pool.is_empty:
            self.console.write_lines(pool_lines(pool, header))

        while len(chosen) < bounds.maximum and not pool.is_empty:
            position = self.prompt.choose(pool, prompt, who, allow_zero=stop_allowed)

            if position == 0:
                if can_stop(chosen):
                    logger.debug("Player %s stopped after %d picks", who, len(chosen))
                    break
                self.console.write(
                    f"You must choose at least {bounds.minimum} "
                    f"(chosen {len(chosen)} so far)."
                )
                continue

            item_id = pool.remove_at(position)
            chosen.append(item_id)
            if on_pick is not None:
                on_pick(item_id)

            if len(chosen) < bounds.maximum and not pool.is_empty:
                self.console.write_lines(pool_lines(pool, "Remaining options:"))

        return SelectionResult(chosen=chosen, remaining=len(pool))
