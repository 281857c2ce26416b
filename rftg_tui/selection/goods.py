"""
Goods Selector - Bounded multi-select for consuming goods.

Goods sit on worlds. A world holding more than one good can cover several
units on its own, so if the player stops short of the minimum after
picking such a world, the remaining units are taken from it again without
further prompting.
"""

from __future__ import annotations
import logging
from typing import Callable

from ..core.pool import Pool
from ..core.selection import SelectionBounds, SelectionResult
from .selector import ListPoolSelector

logger = logging.getLogger(__name__)


class GoodsSelector:
    """Chooses between minimum and maximum goods, padding from multi-unit worlds."""

    def __init__(self, selector: ListPoolSelector):
        self.selector = selector

    def select(
        self,
        pool: Pool,
        minimum: int,
        maximum: int,
        who: int,
        is_multi: Callable[[int], bool],
        header: str = "Choose goods to consume:",
    ) -> SelectionResult:
        """
        Select goods.

        Passing with 0 is allowed once the minimum is met, or earlier when
        a picked world holds several goods (it pads the rest).
        """
        bounds = SelectionBounds(minimum=minimum, maximum=maximum)
        multi_marker: int | None = None

        def track(item_id: int) -> None:
            nonlocal multi_marker
            if is_multi(item_id):
                multi_marker = item_id

        def can_stop(picked: list[int]) -> bool:
            return len(picked) >= minimum or multi_marker is not None

        result = self.selector.select(
            pool,
            bounds,
            who,
            header=header,
            prompt="Enter good number (0 to stop)",
            stop_allowed=True,
            can_stop=can_stop,
            on_pick=track,
        )

        if result.count < minimum and multi_marker is not None:
            result.padded = minimum - result.count
            result.chosen.extend([multi_marker] * result.padded)
            logger.debug(
                "Padded goods selection with %d units from %s", result.padded, multi_marker
            )

        return result
