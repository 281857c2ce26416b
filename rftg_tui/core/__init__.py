"""
Core - Plain data shared by every decision point.

- CommandOutcome: what a routed input line means
- Pool: ordered, shrinking set of selectable ids
- SelectionBounds / SelectionResult / PaymentResult: decision contracts
"""

from .outcome import CommandOutcome
from .pool import Pool
from .selection import SelectionBounds, SelectionResult, PaymentResult

__all__ = [
    "CommandOutcome",
    "Pool",
    "SelectionBounds",
    "SelectionResult",
    "PaymentResult",
]
