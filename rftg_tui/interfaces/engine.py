"""
Engine Queries - What the console asks of the rules engine.

- CostEngine: costs, discounts and the forced-choice shortcut for payment
- GameView: hands, tableaus and score breakdowns for the info commands
- Action: the phase actions a player can select

Nothing here is mutated by the console.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from .cards import GoodType


# Forced-choice bits
FORCED_REGULAR = 1 << 0  # Pay with every regular card
FORCED_SPECIAL = 1 << 1  # Pay with every special card


class Action(Enum):
    """Phase actions, in selection card order."""
    EXPLORE_5_0 = "Explore: +5"
    EXPLORE_1_1 = "Explore: +1,+1"
    DEVELOP = "Develop"
    DEVELOP2 = "Develop (2nd)"
    SETTLE = "Settle"
    SETTLE2 = "Settle (2nd)"
    CONSUME_TRADE = "Consume: Trade"
    CONSUME_X2 = "Consume: x2"
    PRODUCE = "Produce"
    SEARCH = "Search"

    @property
    def code(self) -> int:
        """Stable integer id used in pools."""
        return list(Action).index(self)

    @classmethod
    def from_code(cls, code: int) -> Action:
        return list(cls)[code]


@dataclass
class VpBreakdown:
    """Victory points of one player, by source."""
    player_name: str
    chips: int = 0
    goals: int = 0
    prestige: int = 0
    worlds: int = 0
    developments: int = 0
    # (card name, points) for each card with a VP bonus
    bonuses: list[tuple[str, int]] = field(default_factory=list)

    @property
    def total(self) -> int:
        return (
            self.chips
            + self.goals
            + self.prestige
            + self.worlds
            + self.developments
            + sum(points for _, points in self.bonuses)
        )


@dataclass
class MilitaryBreakdown:
    """Military strength of one player, by source."""
    player_name: str
    base: int = 0
    temporary: int = 0
    rebel: int = 0  # Extra strength against rebel worlds
    specific: dict[GoodType, int] = field(default_factory=dict)
    defense: int = 0  # Takeover defense
    attack_imperium: int = 0  # Takeover attack bonus

    @property
    def military(self) -> int:
        return self.base + self.temporary


class CostEngine(ABC):
    """Cost and payment computations owned by the rules engine."""

    @abstractmethod
    def development_cost(self, who: int, card_id: int) -> int:
        """Cards needed to place a development."""
        pass

    @abstractmethod
    def discount(self, who: int, card_id: int) -> int:
        """Discount available to the player for this card."""
        pass

    @abstractmethod
    def military_world_payment(
        self, who: int, card_id: int, mil_only: bool, mil_bonus: int
    ) -> int:
        """Cards needed to place a military world by paying for it."""
        pass

    @abstractmethod
    def peaceful_world_payment(self, who: int, card_id: int, mil_only: bool) -> int:
        """Cards needed to place a non-military world."""
        pass

    @abstractmethod
    def compute_forced_choice(
        self,
        who: int,
        card_id: int,
        num_regular: int,
        num_special: int,
        mil_only: bool,
        mil_bonus: int,
    ) -> int:
        """
        Classify a payment.

        Returns a bitmask of FORCED_REGULAR / FORCED_SPECIAL when only one
        allocation of the two pools pays the cost, else 0.
        """
        pass


class GameView(ABC):
    """Read-only view of the game for the info commands."""

    @property
    @abstractmethod
    def num_players(self) -> int:
        pass

    @abstractmethod
    def player_name(self, who: int) -> str:
        pass

    @abstractmethod
    def hand(self, who: int) -> list[int]:
        """Card ids in the player's hand, in display order."""
        pass

    @abstractmethod
    def tableau(self, who: int) -> list[int]:
        """Card ids in the player's tableau, in play order."""
        pass

    @abstractmethod
    def vp_breakdown(self, who: int) -> VpBreakdown:
        pass

    @abstractmethod
    def military_breakdown(self, who: int) -> MilitaryBreakdown:
        pass
