"""
Sample Game - A small card set, game view and cost rules.

Used by the CLI demo and the tests. This module contains:
- Card records (pydantic) and an in-memory card table
- A read-only game view with hands, tableaus and score breakdowns
- Simplified cost rules with the forced-choice shortcut
"""

from .cards import (
    CardRecord,
    CardTableFile,
    CardTable,
    SAMPLE_CARDS,
    load_card_table,
    sample_card_table,
)
from .game import SamplePlayer, SampleGame, SampleCostEngine, setup_sample_game

__all__ = [
    "CardRecord",
    "CardTableFile",
    "CardTable",
    "SAMPLE_CARDS",
    "load_card_table",
    "sample_card_table",
    "SamplePlayer",
    "SampleGame",
    "SampleCostEngine",
    "setup_sample_game",
]
