"""External collaborator interfaces - card data, cost rules and game state queries."""

from .cards import (
    CardType,
    GoodType,
    CardFlag,
    VpCondition,
    VpBonus,
    CardDesign,
    CardLookup,
)
from .engine import (
    FORCED_REGULAR,
    FORCED_SPECIAL,
    Action,
    VpBreakdown,
    MilitaryBreakdown,
    CostEngine,
    GameView,
)

__all__ = [
    "CardType",
    "GoodType",
    "CardFlag",
    "VpCondition",
    "VpBonus",
    "CardDesign",
    "CardLookup",
    "FORCED_REGULAR",
    "FORCED_SPECIAL",
    "Action",
    "VpBreakdown",
    "MilitaryBreakdown",
    "CostEngine",
    "GameView",
]
