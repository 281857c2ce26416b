"""
Listings - Numbered pools, hands, tableaus and score breakdowns.

All functions return fresh lists of lines; nothing is printed here.
"""

from __future__ import annotations

from ..core.pool import Pool
from ..interfaces.cards import CardLookup
from ..interfaces.engine import GameView
from .cards import GOOD_TYPE_NAMES


def pool_lines(pool: Pool, header: str) -> list[str]:
    """Header followed by "N. name" for every pool item."""
    lines = [header]
    for i, item_id in enumerate(pool):
        lines.append(f"{i + 1}. {pool.display_name(item_id)}")
    return lines


def numbered_names(cards: CardLookup, card_ids: list[int]) -> list[str]:
    return [f"{i + 1}. {cards.name(card_id)}" for i, card_id in enumerate(card_ids)]


def hand_lines(cards: CardLookup, game: GameView, who: int) -> list[str]:
    """The player's own hand."""
    hand = game.hand(who)
    if not hand:
        return ["Your hand is empty."]
    return [f"Your hand ({len(hand)} cards):"] + numbered_names(cards, hand)


def tableau_lines(cards: CardLookup, game: GameView, who: int, viewer: int) -> list[str]:
    """
    A player's tableau.

    Other players' hands are summarized as a count only.
    """
    tableau = game.tableau(who)
    if who == viewer:
        lines = [f"Your tableau ({len(tableau)} cards):"]
    else:
        lines = [f"Tableau of {game.player_name(who)} ({len(tableau)} cards):"]
    lines.extend(numbered_names(cards, tableau))
    if who != viewer:
        lines.append(f"{game.player_name(who)} has {len(game.hand(who))} cards in hand.")
    return lines


def vp_lines(game: GameView) -> list[str]:
    """Per-player victory point breakdown."""
    lines: list[str] = []
    for who in range(game.num_players):
        vp = game.vp_breakdown(who)
        lines.append(f"---- Victory points: {vp.player_name} ----")
        lines.append(f"VP chips: {vp.chips}")
        lines.append(f"Goals: {vp.goals}")
        lines.append(f"Prestige: {vp.prestige}")
        lines.append(f"Worlds: {vp.worlds}")
        lines.append(f"Developments: {vp.developments}")
        for name, points in vp.bonuses:
            lines.append(f"  {name}: {points}")
        lines.append(f"Total: {vp.total}")
        lines.append("")
    return lines


def military_lines(game: GameView) -> list[str]:
    """Per-player military strength breakdown."""
    lines: list[str] = []
    for who in range(game.num_players):
        mil = game.military_breakdown(who)
        lines.append(f"---- Military: {mil.player_name} ----")
        lines.append(f"Military: {mil.military}")
        lines.append(f"Base: {mil.base}")
        lines.append(f"Temporary: {mil.temporary}")
        if mil.rebel:
            lines.append(f"Against Rebel worlds: +{mil.rebel}")
        for good, bonus in mil.specific.items():
            lines.append(f"Against {GOOD_TYPE_NAMES[good]} worlds: +{bonus}")
        if mil.defense:
            lines.append(f"Takeover defense: +{mil.defense}")
        if mil.attack_imperium:
            lines.append(f"Takeover attack: +{mil.attack_imperium}")
        lines.append("")
    return lines
