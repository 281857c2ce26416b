"""
Display - Read-only text renderers.

Renderers take external query objects and return new lists of lines.
"""

from .cards import card_detail_lines, flag_names
from .vp_text import VP_CONDITION_TEXT, vp_bonus_text
from .listings import (
    pool_lines,
    hand_lines,
    tableau_lines,
    vp_lines,
    military_lines,
)

__all__ = [
    "card_detail_lines",
    "flag_names",
    "VP_CONDITION_TEXT",
    "vp_bonus_text",
    "pool_lines",
    "hand_lines",
    "tableau_lines",
    "vp_lines",
    "military_lines",
]
