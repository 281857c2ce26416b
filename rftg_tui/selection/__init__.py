"""
Selection - The shared selection algorithms behind every decision point.

- ListPoolSelector: repeated pick-and-remove from one pool
- PaymentResolver: regular/special dual-pool payment
- GoodsSelector: bounded goods selection with multi-unit padding
"""

from .selector import ListPoolSelector
from .payment import PaymentResolver
from .goods import GoodsSelector

__all__ = [
    "ListPoolSelector",
    "PaymentResolver",
    "GoodsSelector",
]
