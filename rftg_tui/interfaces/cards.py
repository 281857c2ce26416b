"""
Card Data - Read-only card attributes consumed by the console.

The card table itself belongs to the engine. The console only ever asks:
- What kind of card is this, what does it cost, what is it worth?
- Which flags and powers does it have?
- How many goods does it hold right now?

CardLookup is the abstract query surface; games.sample provides an
in-memory implementation.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntFlag


class CardType(Enum):
    """Card categories."""
    WORLD = "world"
    DEVELOPMENT = "development"
    UNKNOWN = "unknown"


class GoodType(Enum):
    """Kinds of goods a world produces."""
    NOVELTY = "novelty"
    RARE = "rare"
    GENE = "gene"
    ALIEN = "alien"


class CardFlag(IntFlag):
    """Card flag bitmask. Rendered as the subset present on a card."""
    NONE = 0
    MILITARY = 1 << 0
    WINDFALL = 1 << 1
    START = 1 << 2
    START_RED = 1 << 3
    START_BLUE = 1 << 4
    PROMO = 1 << 5
    REBEL = 1 << 6
    UPLIFT = 1 << 7
    ALIEN = 1 << 8
    TERRAFORMING = 1 << 9
    IMPERIUM = 1 << 10
    CHROMO = 1 << 11
    PRESTIGE = 1 << 12
    STARTHAND_3 = 1 << 13
    START_SAVE = 1 << 14
    DISCARD_TO_12 = 1 << 15
    GAME_END_14 = 1 << 16
    TAKE_DISCARDS = 1 << 17
    SELECT_LAST = 1 << 18
    EXTRA_SURVEY = 1 << 19
    NO_PRODUCE = 1 << 20
    DISCARD_PRODUCE = 1 << 21
    XENO = 1 << 22
    ANTI_XENO = 1 << 23


class VpCondition(Enum):
    """What a VP bonus clause counts."""
    NOVELTY_PRODUCTION = "novelty_production"
    RARE_PRODUCTION = "rare_production"
    GENE_PRODUCTION = "gene_production"
    ALIEN_PRODUCTION = "alien_production"
    NOVELTY_WINDFALL = "novelty_windfall"
    RARE_WINDFALL = "rare_windfall"
    GENE_WINDFALL = "gene_windfall"
    ALIEN_WINDFALL = "alien_windfall"
    DEVEL_EXPLORE = "devel_explore"
    WORLD_EXPLORE = "world_explore"
    DEVEL_TRADE = "devel_trade"
    WORLD_TRADE = "world_trade"
    DEVEL_CONSUME = "devel_consume"
    WORLD_CONSUME = "world_consume"
    SIX_DEVEL = "six_devel"
    DEVEL = "devel"
    WORLD = "world"
    NONMILITARY_WORLD = "nonmilitary_world"
    REBEL_FLAG = "rebel_flag"
    ALIEN_FLAG = "alien_flag"
    TERRAFORMING_FLAG = "terraforming_flag"
    UPLIFT_FLAG = "uplift_flag"
    IMPERIUM_FLAG = "imperium_flag"
    CHROMO_FLAG = "chromo_flag"
    MILITARY = "military"
    TOTAL_MILITARY = "total_military"
    NEGATIVE_MILITARY = "negative_military"
    REBEL_MILITARY = "rebel_military"
    THREE_VP = "three_vp"
    KIND_GOOD = "kind_good"
    PRESTIGE = "prestige"
    NAME = "name"


@dataclass(frozen=True)
class VpBonus:
    """One VP bonus clause on a card."""
    points: int
    condition: VpCondition
    name: str | None = None  # Card name for VpCondition.NAME


@dataclass
class CardDesign:
    """Static design of a card (shared by every copy)."""
    name: str
    card_type: CardType
    cost: int = 0
    vp: int = 0
    good_type: GoodType | None = None
    flags: CardFlag = CardFlag.NONE
    vp_bonuses: list[VpBonus] = field(default_factory=list)

    @property
    def is_world(self) -> bool:
        return self.card_type == CardType.WORLD

    @property
    def is_military(self) -> bool:
        return bool(self.flags & CardFlag.MILITARY)


class CardLookup(ABC):
    """
    Abstract card table.

    Card ids are indices into the engine's deck; several ids may share
    one design.
    """

    @abstractmethod
    def design(self, card_id: int) -> CardDesign:
        """Get the design of a card."""
        pass

    @abstractmethod
    def held_goods(self, card_id: int) -> int:
        """Number of goods currently placed on the card."""
        pass

    @abstractmethod
    def power_descriptions(self, card_id: int) -> list[str]:
        """Text of each power on the card, in card order."""
        pass

    def name(self, card_id: int) -> str:
        """Display name of a card."""
        return self.design(card_id).name
