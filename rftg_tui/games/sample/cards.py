"""
Sample Cards - A small card table for demos and tests.

Card records are pydantic models so a card file can be validated when
loaded from JSON:

    {"cards": [{"name": "Gem World", "card_type": "world", "cost": 2,
                "vp": 1, "good_type": "rare", "flags": ["windfall"]}]}

Each record may appear several times in the deck (`copies`); card ids are
positions in the expanded deck.
"""

from __future__ import annotations
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...interfaces.cards import (
    CardDesign,
    CardFlag,
    CardLookup,
    CardType,
    GoodType,
    VpBonus,
    VpCondition,
)


class VpBonusRecord(BaseModel):
    """A VP bonus clause as written in a card file."""
    points: int = Field(ge=1)
    condition: VpCondition
    name: Optional[str] = None


class CardRecord(BaseModel):
    """One card design as written in a card file."""
    name: str
    card_type: CardType
    cost: int = Field(0, ge=0)
    vp: int = Field(0, ge=0)
    good_type: Optional[GoodType] = None
    flags: list[str] = Field(default_factory=list)
    powers: list[str] = Field(default_factory=list)
    vp_bonuses: list[VpBonusRecord] = Field(default_factory=list)
    military: int = 0  # Military strength granted in a tableau
    discount: int = 0  # Placement discount granted in a tableau
    copies: int = Field(1, ge=1)

    @field_validator("flags")
    @classmethod
    def _check_flags(cls, flags: list[str]) -> list[str]:
        for flag in flags:
            if flag.upper() not in CardFlag.__members__:
                raise ValueError(f"Unknown card flag: {flag}")
        return flags

    def to_design(self) -> CardDesign:
        """Convert to the engine-facing CardDesign."""
        flags = CardFlag.NONE
        for flag in self.flags:
            flags |= CardFlag[flag.upper()]
        return CardDesign(
            name=self.name,
            card_type=self.card_type,
            cost=self.cost,
            vp=self.vp,
            good_type=self.good_type,
            flags=flags,
            vp_bonuses=[
                VpBonus(points=b.points, condition=b.condition, name=b.name)
                for b in self.vp_bonuses
            ],
        )


class CardTableFile(BaseModel):
    """Top level of a card file."""
    cards: list[CardRecord]


class CardTable(CardLookup):
    """
    In-memory card table.

    Goods held on each card are tracked here; the sample game changes
    them, the console only reads them.
    """

    def __init__(self, records: list[CardRecord]):
        self.records: list[CardRecord] = []
        self._designs: list[CardDesign] = []
        for record in records:
            design = record.to_design()
            for _ in range(record.copies):
                self.records.append(record)
                self._designs.append(design)
        self.goods: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self.records)

    def design(self, card_id: int) -> CardDesign:
        return self._designs[card_id]

    def record(self, card_id: int) -> CardRecord:
        return self.records[card_id]

    def held_goods(self, card_id: int) -> int:
        return self.goods.get(card_id, 0)

    def power_descriptions(self, card_id: int) -> list[str]:
        return list(self.records[card_id].powers)

    def find(self, name: str) -> int:
        """First card id whose name matches (case-insensitive)."""
        lowered = name.lower()
        for card_id, record in enumerate(self.records):
            if record.name.lower() == lowered:
                return card_id
        raise KeyError(f"No card named {name!r}")


def load_card_table(path: str | Path) -> CardTable:
    """Load and validate a JSON card file."""
    text = Path(path).read_text(encoding="utf-8")
    return CardTable(CardTableFile.model_validate_json(text).cards)


# ============================================================================
# Sample card set
# ============================================================================

SAMPLE_CARDS: list[CardRecord] = [
    CardRecord(
        name="Old Earth", card_type=CardType.WORLD, cost=0, vp=2,
        flags=["start"],
        powers=["Consume: trade a good for +1 card", "Consume: 1 good for 1 VP"],
    ),
    CardRecord(
        name="Gem World", card_type=CardType.WORLD, cost=2, vp=1,
        good_type=GoodType.RARE, flags=["windfall"], copies=2,
    ),
    CardRecord(
        name="Spice World", card_type=CardType.WORLD, cost=2, vp=2,
        good_type=GoodType.NOVELTY,
        powers=["Produce: novelty good"], copies=2,
    ),
    CardRecord(
        name="Rebel Outpost", card_type=CardType.WORLD, cost=5, vp=5,
        flags=["military", "rebel"], copies=2,
    ),
    CardRecord(
        name="Alien Robot Sentry", card_type=CardType.WORLD, cost=2, vp=2,
        good_type=GoodType.ALIEN, flags=["military", "alien", "windfall"],
    ),
    CardRecord(
        name="Genetics Lab", card_type=CardType.WORLD, cost=2, vp=1,
        good_type=GoodType.GENE,
        powers=["Develop: -1 cost", "Produce: genes good"], discount=1,
    ),
    CardRecord(
        name="Space Marines", card_type=CardType.DEVELOPMENT, cost=2, vp=1,
        powers=["Settle: +2 military"], military=2, copies=2,
    ),
    CardRecord(
        name="Investment Credits", card_type=CardType.DEVELOPMENT, cost=1, vp=1,
        powers=["Develop: -1 cost"], discount=1, copies=2,
    ),
    CardRecord(
        name="Contact Specialist", card_type=CardType.DEVELOPMENT, cost=1, vp=1,
        powers=["Settle: -1 military, pay for military worlds"], military=-1,
    ),
    CardRecord(
        name="Free Trade Association", card_type=CardType.DEVELOPMENT, cost=6, vp=0,
        powers=["Consume: trade Novelty goods for +2 cards"],
        vp_bonuses=[
            VpBonusRecord(points=2, condition=VpCondition.NOVELTY_PRODUCTION),
            VpBonusRecord(points=1, condition=VpCondition.NOVELTY_WINDFALL),
        ],
    ),
    CardRecord(
        name="Galactic Federation", card_type=CardType.DEVELOPMENT, cost=6, vp=0,
        powers=["Develop: -2 cost"], discount=2,
        vp_bonuses=[
            VpBonusRecord(points=2, condition=VpCondition.SIX_DEVEL),
            VpBonusRecord(points=1, condition=VpCondition.DEVEL),
        ],
    ),
    CardRecord(
        name="Imperium Lords", card_type=CardType.DEVELOPMENT, cost=6, vp=0,
        flags=["imperium"], military=1,
        vp_bonuses=[
            VpBonusRecord(points=2, condition=VpCondition.IMPERIUM_FLAG),
            VpBonusRecord(points=1, condition=VpCondition.MILITARY),
        ],
    ),
]


def sample_card_table() -> CardTable:
    """Fresh card table built from the sample card set."""
    return CardTable(SAMPLE_CARDS)
