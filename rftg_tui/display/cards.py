"""
Card Detail - The full inspection view of one card.

Shown by the prompt's info command and by "h N" / "t P C". The renderer
only reads from a CardLookup and returns new lines each call.
"""

from __future__ import annotations

from ..interfaces.cards import CardFlag, CardLookup, CardType, GoodType
from .vp_text import vp_bonus_text


CARD_TYPE_NAMES = {
    CardType.WORLD: "World",
    CardType.DEVELOPMENT: "Development",
    CardType.UNKNOWN: "Unknown",
}

GOOD_TYPE_NAMES = {
    GoodType.NOVELTY: "Novelty",
    GoodType.RARE: "Rare",
    GoodType.GENE: "Genes",
    GoodType.ALIEN: "Alien",
}

FLAG_NAMES = {
    CardFlag.MILITARY: "Military",
    CardFlag.WINDFALL: "Windfall",
    CardFlag.START: "Start world",
    CardFlag.START_RED: "Red start",
    CardFlag.START_BLUE: "Blue start",
    CardFlag.PROMO: "Promo",
    CardFlag.REBEL: "Rebel",
    CardFlag.UPLIFT: "Uplift",
    CardFlag.ALIEN: "Alien",
    CardFlag.TERRAFORMING: "Terraforming",
    CardFlag.IMPERIUM: "Imperium",
    CardFlag.CHROMO: "Chromosome",
    CardFlag.PRESTIGE: "Prestige",
    CardFlag.STARTHAND_3: "Start hand of 3",
    CardFlag.START_SAVE: "Save a start card",
    CardFlag.DISCARD_TO_12: "Discard to 12",
    CardFlag.GAME_END_14: "Game ends at 14",
    CardFlag.TAKE_DISCARDS: "Takes discards",
    CardFlag.SELECT_LAST: "Selects last",
    CardFlag.EXTRA_SURVEY: "Extra survey",
    CardFlag.NO_PRODUCE: "No production",
    CardFlag.DISCARD_PRODUCE: "Produces on discard",
    CardFlag.XENO: "Xeno",
    CardFlag.ANTI_XENO: "Anti-Xeno",
}


def flag_names(flags: CardFlag) -> list[str]:
    """Names of the flags set in a bitmask, in vocabulary order."""
    return [name for flag, name in FLAG_NAMES.items() if flags & flag]


def card_detail_lines(cards: CardLookup, card_id: int) -> list[str]:
    """Render the full detail view of a card."""
    design = cards.design(card_id)
    lines = [f"---- Details about {design.name} ----"]

    lines.append(f"Type: {CARD_TYPE_NAMES[design.card_type]}")
    lines.append(f"Cost: {design.cost}")

    # Cards worth nothing by themselves but scoring bonuses show "special"
    if design.vp == 0 and design.vp_bonuses:
        lines.append("VP: special")
    else:
        lines.append(f"VP: {design.vp}")

    if design.good_type is None:
        lines.append("Good type: none")
    else:
        lines.append(f"Good type: {GOOD_TYPE_NAMES[design.good_type]}")
    lines.append(f"Goods held: {cards.held_goods(card_id)}")

    names = flag_names(design.flags)
    lines.append(f"Flags: {', '.join(names) if names else 'none'}")

    for i, text in enumerate(cards.power_descriptions(card_id)):
        lines.append(f"Power {i + 1}: {text}")

    for bonus in design.vp_bonuses:
        lines.append(f"VP bonus: {vp_bonus_text(bonus)}")

    lines.append("-" * 28)
    lines.append("")
    return lines
