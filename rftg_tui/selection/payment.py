"""
Payment Resolver - Paying a card's cost from two pools.

Regular cards pay the cost one card each. Special cards (an alternate
currency the engine tracks separately) are chosen from the same listing
but do not count toward the amount paid.

Resolution:
1. Ask the engine for the cost (development, military world or peaceful
   world computation)
2. Ask the engine for the forced choice; when only one allocation works
   the pools are assigned without prompting
3. Otherwise list regular cards then special cards as one pool and let
   the player pick until the cost is paid

Paying with no special cards is the plain single-pool payment.
"""

from __future__ import annotations
import logging

from ..console.io import Console
from ..console.prompt import ChoicePrompt
from ..core.pool import Pool
from ..core.selection import PaymentResult
from ..display.cards import card_detail_lines
from ..display.listings import pool_lines
from ..interfaces.cards import CardLookup, CardType
from ..interfaces.engine import FORCED_REGULAR, FORCED_SPECIAL, CostEngine

logger = logging.getLogger(__name__)


class PaymentResolver:
    """Resolves payment for placing a card."""

    def __init__(
        self,
        console: Console,
        prompt: ChoicePrompt,
        cards: CardLookup,
        costs: CostEngine,
    ):
        self.console = console
        self.prompt = prompt
        self.cards = cards
        self.costs = costs

    def compute_cost(self, who: int, card_id: int, mil_only: bool, mil_bonus: int) -> int:
        """Cost in cards, using the computation for the card's category."""
        design = self.cards.design(card_id)
        if design.card_type == CardType.DEVELOPMENT:
            return self.costs.development_cost(who, card_id)
        if design.is_military or mil_only:
            return self.costs.military_world_payment(who, card_id, mil_only, mil_bonus)
        return self.costs.peaceful_world_payment(who, card_id, mil_only)

    def resolve(
        self,
        who: int,
        card_id: int,
        regular: list[int],
        special: list[int] | None = None,
        mil_only: bool = False,
        mil_bonus: int = 0,
    ) -> PaymentResult:
        """
        Choose cards to pay for `card_id`.

        Returns the regular and special cards chosen. Raises ValueError if
        every card is used and the cost is still not paid (the engine must
        only ask for payable costs).
        """
        special = list(special or [])
        regular = list(regular)

        cost = self.compute_cost(who, card_id, mil_only, mil_bonus)
        forced = self.costs.compute_forced_choice(
            who, card_id, len(regular), len(special), mil_only, mil_bonus
        )

        if forced:
            logger.debug(
                "Forced payment for %s: bits=%d regular=%d special=%d",
                self.cards.name(card_id), forced, len(regular), len(special),
            )
            return PaymentResult(
                regular=regular if forced & FORCED_REGULAR else [],
                special=special if forced & FORCED_SPECIAL else [],
                forced=True,
            )

        result = PaymentResult()
        if cost <= 0:
            return result

        special_ids = set(special)
        pool = Pool.of(
            regular + special,
            label=self.cards.name,
            inspect=lambda cid: card_detail_lines(self.cards, cid),
            annotate=lambda cid: "(special)" if cid in special_ids else "",
        )
        boundary = len(regular)
        name = self.cards.name(card_id)

        self.console.write_lines(
            pool_lines(pool, f"Choose cards to pay {cost} for {name}:")
        )

        while result.paid < cost:
            if pool.is_empty:
                raise ValueError(
                    f"Cannot pay {cost} for {name}: only {result.paid} regular cards"
                )

            position = self.prompt.choose(pool, "Enter card number to pay with", who)
            item_id = pool.remove_at(position)

            # Classify by position before removal
            if position <= boundary:
                result.regular.append(item_id)
                boundary -= 1
            else:
                result.special.append(item_id)

            if result.paid < cost:
                self.console.write_lines(
                    pool_lines(pool, f"Paid {result.paid} of {cost}. Remaining options:")
                )

        logger.debug(
            "Paid for %s with %d regular and %d special cards",
            name, len(result.regular), len(result.special),
        )
        return result
