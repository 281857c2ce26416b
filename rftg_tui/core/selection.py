"""
Selection Types - Bounds and results of decision points.

Results are plain data handed back to the engine:
- SelectionResult: ids chosen from a pool plus the pool size left over
- PaymentResult: the regular and special cards used to pay a cost
"""

from __future__ import annotations
from dataclasses import dataclass, field


@dataclass(frozen=True)
class SelectionBounds:
    """How many items a decision takes: between minimum and maximum."""
    minimum: int
    maximum: int

    def __post_init__(self):
        if self.minimum < 0:
            raise ValueError("minimum must be >= 0")
        if self.maximum < self.minimum:
            raise ValueError("maximum must be >= minimum")

    @classmethod
    def exactly(cls, count: int) -> SelectionBounds:
        """Factory for an exact-count selection."""
        return cls(minimum=count, maximum=count)

    @classmethod
    def up_to(cls, count: int) -> SelectionBounds:
        """Factory for an optional selection of at most count items."""
        return cls(minimum=0, maximum=count)


@dataclass
class SelectionResult:
    """
    Result of a pool selection.

    `padded` counts ids appended without prompting (multi-unit goods), so
    initial pool size == remaining + len(chosen) - padded.
    """
    chosen: list[int] = field(default_factory=list)
    remaining: int = 0
    padded: int = 0

    @property
    def count(self) -> int:
        return len(self.chosen)

    @property
    def picked(self) -> list[int]:
        """Ids the user actually picked (without padding)."""
        if not self.padded:
            return list(self.chosen)
        return self.chosen[:-self.padded]


@dataclass
class PaymentResult:
    """Cards chosen to pay a cost, split by the pool they came from."""
    regular: list[int] = field(default_factory=list)
    special: list[int] = field(default_factory=list)
    forced: bool = False  # True when no prompt was needed

    @property
    def paid(self) -> int:
        """Amount paid: only regular cards count toward the cost."""
        return len(self.regular)
