"""
VP bonus text - Fixed phrases for each VP bonus condition.
"""

from __future__ import annotations

from ..interfaces.cards import VpBonus, VpCondition


VP_CONDITION_TEXT: dict[VpCondition, str] = {
    VpCondition.NOVELTY_PRODUCTION: "Novelty production world",
    VpCondition.RARE_PRODUCTION: "Rare production world",
    VpCondition.GENE_PRODUCTION: "Genes production world",
    VpCondition.ALIEN_PRODUCTION: "Alien production world",
    VpCondition.NOVELTY_WINDFALL: "Novelty windfall world",
    VpCondition.RARE_WINDFALL: "Rare windfall world",
    VpCondition.GENE_WINDFALL: "Genes windfall world",
    VpCondition.ALIEN_WINDFALL: "Alien windfall world",
    VpCondition.DEVEL_EXPLORE: "development with an Explore power",
    VpCondition.WORLD_EXPLORE: "world with an Explore power",
    VpCondition.DEVEL_TRADE: "development with a Trade power",
    VpCondition.WORLD_TRADE: "world with a Trade power",
    VpCondition.DEVEL_CONSUME: "development with a Consume power",
    VpCondition.WORLD_CONSUME: "world with a Consume power",
    VpCondition.SIX_DEVEL: "other 6-cost development",
    VpCondition.DEVEL: "development",
    VpCondition.WORLD: "world",
    VpCondition.NONMILITARY_WORLD: "non-military world",
    VpCondition.REBEL_FLAG: "Rebel card",
    VpCondition.ALIEN_FLAG: "Alien card",
    VpCondition.TERRAFORMING_FLAG: "Terraforming card",
    VpCondition.UPLIFT_FLAG: "Uplift card",
    VpCondition.IMPERIUM_FLAG: "Imperium card",
    VpCondition.CHROMO_FLAG: "Chromosome symbol",
    VpCondition.MILITARY: "military world",
    VpCondition.TOTAL_MILITARY: "point of total military",
    VpCondition.NEGATIVE_MILITARY: "negative military power",
    VpCondition.REBEL_MILITARY: "Rebel military world",
    VpCondition.THREE_VP: "3 VP chips",
    VpCondition.KIND_GOOD: "kind of good produced",
    VpCondition.PRESTIGE: "prestige",
}


def vp_bonus_text(bonus: VpBonus) -> str:
    """Render one bonus clause, e.g. "+2 VP per Rebel card"."""
    if bonus.condition == VpCondition.NAME:
        phrase = bonus.name or "named card"
    else:
        phrase = VP_CONDITION_TEXT[bonus.condition]
    return f"+{bonus.points} VP per {phrase}"
