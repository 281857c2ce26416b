"""
Decision Points - Every choice the engine can ask a human player to make.

ChoiceInterface is what the engine calls; ConsoleInterface answers through
the text console. Each decision is a thin call site over one of the shared
primitives:

    discard / keep / consume from hand  -> ListPoolSelector
    pay for a card                      -> PaymentResolver
    consume goods                       -> GoodsSelector
    action, place, windfall, trade ...  -> ChoicePrompt (single pick)
"""

from __future__ import annotations
from abc import ABC, abstractmethod
import logging
from typing import Callable

from ..config import ConsoleSettings
from ..console.io import Console
from ..console.prompt import ChoicePrompt, SignalHook
from ..console.router import CommandRouter
from ..core.pool import Pool
from ..core.selection import PaymentResult, SelectionBounds, SelectionResult
from ..display.cards import card_detail_lines
from ..display.listings import pool_lines
from ..interfaces.cards import CardLookup
from ..interfaces.engine import Action, CostEngine, GameView
from ..selection.goods import GoodsSelector
from ..selection.payment import PaymentResolver
from ..selection.selector import ListPoolSelector

logger = logging.getLogger(__name__)


LUCKY_NUMBERS = range(1, 8)


class ChoiceInterface(ABC):
    """
    Abstract decision interface.

    The engine calls these when a player has to decide something. Card
    arguments are card ids; results are returned, never written back into
    the arguments.
    """

    @abstractmethod
    def choose_discard(self, who: int, hand: list[int], count: int) -> SelectionResult:
        """Discard exactly `count` cards from `hand`."""
        pass

    @abstractmethod
    def choose_keep(self, who: int, drawn: list[int], count: int) -> SelectionResult:
        """Keep exactly `count` of the cards drawn while exploring."""
        pass

    @abstractmethod
    def choose_action(self, who: int, available: list[Action], count: int) -> list[Action]:
        """Select `count` different phase actions."""
        pass

    @abstractmethod
    def choose_lucky(self, who: int) -> int:
        """Guess a number from 1 to 7."""
        pass

    @abstractmethod
    def choose_place(self, who: int, candidates: list[int], phase: Action) -> int | None:
        """Choose a card to place this phase, None to pass."""
        pass

    @abstractmethod
    def choose_pay(
        self,
        who: int,
        card_id: int,
        regular: list[int],
        special: list[int],
        mil_only: bool = False,
        mil_bonus: int = 0,
    ) -> PaymentResult:
        """Choose cards to pay for placing `card_id`."""
        pass

    @abstractmethod
    def choose_consume_hand(
        self, who: int, power_text: str, hand: list[int], limit: int
    ) -> SelectionResult:
        """Choose up to `limit` hand cards to consume for a power."""
        pass

    @abstractmethod
    def choose_consume(self, who: int, powers: list[str], optional: bool) -> int | None:
        """Choose which consume power to use next (index), None to stop."""
        pass

    @abstractmethod
    def choose_good(
        self,
        who: int,
        power_text: str,
        goods: list[int],
        minimum: int,
        maximum: int,
        is_multi: Callable[[int], bool],
    ) -> SelectionResult:
        """Choose goods (by world card id) to consume for a power."""
        pass

    @abstractmethod
    def choose_windfall(self, who: int, worlds: list[int]) -> int:
        """Choose a windfall world to receive a good."""
        pass

    @abstractmethod
    def choose_trade(self, who: int, goods: list[int], no_bonus: bool) -> int:
        """Choose a good to trade."""
        pass


class ConsoleInterface(ChoiceInterface):
    """
    Decision interface for a human at the text console.

    Usage:
        ui = ConsoleInterface(Console(), cards, costs, game=view)
        result = ui.choose_discard(0, view.hand(0), 2)
    """

    def __init__(
        self,
        console: Console,
        cards: CardLookup,
        costs: CostEngine,
        game: GameView | None = None,
        settings: ConsoleSettings | None = None,
        signal_hook: SignalHook | None = None,
    ):
        self.console = console
        self.cards = cards
        self.router = CommandRouter(console, cards, game)
        self.prompt = ChoicePrompt(console, self.router, settings, signal_hook)
        self.selector = ListPoolSelector(console, self.prompt)
        self.payment = PaymentResolver(console, self.prompt, cards, costs)
        self.goods = GoodsSelector(self.selector)

    def card_pool(self, card_ids: list[int]) -> Pool:
        """Pool of cards labelled with names and inspectable with i<N>."""
        return Pool.of(
            card_ids,
            label=self.cards.name,
            inspect=lambda card_id: card_detail_lines(self.cards, card_id),
        )

    def _choose_one(
        self, pool: Pool, header: str, prompt: str, who: int, allow_zero: bool = False
    ) -> int | None:
        """List a pool, ask once, return the chosen id (None on pass)."""
        self.console.write_lines(pool_lines(pool, header))
        position = self.prompt.choose(pool, prompt, who, allow_zero=allow_zero)
        if position == 0:
            logger.debug("Player %s passed: %s", who, header)
            return None
        return pool.item_at(position)

    # =========================================================================
    # Hand selections
    # =========================================================================

    def choose_discard(self, who: int, hand: list[int], count: int) -> SelectionResult:
        return self.selector.select(
            self.card_pool(hand),
            SelectionBounds.exactly(count),
            who,
            header=f"You need to discard {count}. Here are your options:",
            prompt="Enter card number to discard",
        )

    def choose_keep(self, who: int, drawn: list[int], count: int) -> SelectionResult:
        return self.selector.select(
            self.card_pool(drawn),
            SelectionBounds.exactly(count),
            who,
            header=f"Choose {count} to keep:",
            prompt="Enter card number to keep",
        )

    def choose_consume_hand(
        self, who: int, power_text: str, hand: list[int], limit: int
    ) -> SelectionResult:
        return self.selector.select(
            self.card_pool(hand),
            SelectionBounds.up_to(limit),
            who,
            header=f"{power_text}: choose up to {limit} cards to consume:",
            prompt="Enter card number to consume (0 to stop)",
            stop_allowed=True,
        )

    # =========================================================================
    # Single choices
    # =========================================================================

    def choose_action(self, who: int, available: list[Action], count: int) -> list[Action]:
        pool = Pool.of(
            [action.code for action in available],
            label=lambda code: Action.from_code(code).value,
        )
        header = "Choose an action:" if count == 1 else f"Choose {count} actions:"
        result = self.selector.select(
            pool,
            SelectionBounds.exactly(count),
            who,
            header=header,
            prompt="Enter action number",
        )
        return [Action.from_code(code) for code in result.chosen]

    def choose_lucky(self, who: int) -> int:
        pool = Pool.of(LUCKY_NUMBERS)
        return self._choose_one(pool, "Choose a number:", "Enter your guess", who)

    def choose_place(self, who: int, candidates: list[int], phase: Action) -> int | None:
        return self._choose_one(
            self.card_pool(candidates),
            f"{phase.value}: choose a card to place:",
            "Enter card number to place (0 to pass)",
            who,
            allow_zero=True,
        )

    def choose_consume(self, who: int, powers: list[str], optional: bool) -> int | None:
        pool = Pool.of(range(len(powers)), label=lambda i: powers[i])
        prompt = "Enter power number (0 to stop)" if optional else "Enter power number"
        return self._choose_one(
            pool, "Choose a consume power to use:", prompt, who, allow_zero=optional
        )

    def choose_windfall(self, who: int, worlds: list[int]) -> int:
        return self._choose_one(
            self.card_pool(worlds),
            "Choose a windfall world to receive a good:",
            "Enter world number",
            who,
        )

    def choose_trade(self, who: int, goods: list[int], no_bonus: bool) -> int:
        header = "Choose a good to trade:"
        if no_bonus:
            header = "Choose a good to trade (no trade bonuses):"
        return self._choose_one(self.card_pool(goods), header, "Enter good number", who)

    # =========================================================================
    # Payment and goods
    # =========================================================================

    def choose_pay(
        self,
        who: int,
        card_id: int,
        regular: list[int],
        special: list[int],
        mil_only: bool = False,
        mil_bonus: int = 0,
    ) -> PaymentResult:
        return self.payment.resolve(who, card_id, regular, special, mil_only, mil_bonus)

    def choose_good(
        self,
        who: int,
        power_text: str,
        goods: list[int],
        minimum: int,
        maximum: int,
        is_multi: Callable[[int], bool],
    ) -> SelectionResult:
        return self.goods.select(
            self.card_pool(goods),
            minimum,
            maximum,
            who,
            is_multi,
            header=f"{power_text}: choose {minimum} to {maximum} goods:",
        )
