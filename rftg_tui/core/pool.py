"""
Pool - The ordered, shrinking set of items for one decision point.

Design:
- Item ids are opaque integers (card indices, action codes, numbers)
- Ids live in an arena that never changes during a resolution
- Display order is a separate list of arena slots; removing a position
  splices that list and keeps the survivors in their relative order
- All positions seen by the user are 1-based

A pool is built at the start of a decision from caller-owned data and is
thrown away when the decision returns.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator


def _default_label(item_id: int) -> str:
    return str(item_id)


@dataclass
class Pool:
    """
    An ordered pool of selectable item ids.

    `label` names an item for listings, `inspect` (optional) gives the
    detail lines shown by the prompt's info command, and `annotate`
    (optional) returns a suffix such as "(special)" for listings.
    """
    arena: tuple[int, ...]
    label: Callable[[int], str] = _default_label
    inspect: Callable[[int], list[str]] | None = None
    annotate: Callable[[int], str] | None = None
    order: list[int] | None = None

    def __post_init__(self):
        if self.order is None:
            self.order = list(range(len(self.arena)))

    @classmethod
    def of(
        cls,
        items: Iterable[int],
        label: Callable[[int], str] = _default_label,
        inspect: Callable[[int], list[str]] | None = None,
        annotate: Callable[[int], str] | None = None,
    ) -> Pool:
        """Build a pool from items in display order."""
        return cls(arena=tuple(items), label=label, inspect=inspect, annotate=annotate)

    def __len__(self) -> int:
        return len(self.order)

    def __iter__(self) -> Iterator[int]:
        return (self.arena[slot] for slot in self.order)

    def __contains__(self, item_id: object) -> bool:
        return any(item_id == self.arena[slot] for slot in self.order)

    @property
    def is_empty(self) -> bool:
        return len(self.order) == 0

    @property
    def ids(self) -> list[int]:
        """Current ids in display order (a copy)."""
        return list(self)

    def item_at(self, position: int) -> int:
        """Get the id shown at a 1-based position."""
        if not 1 <= position <= len(self.order):
            raise IndexError(f"Position {position} out of range 1..{len(self.order)}")
        return self.arena[self.order[position - 1]]

    def remove_at(self, position: int) -> int:
        """Remove the item at a 1-based position and return its id."""
        item_id = self.item_at(position)
        del self.order[position - 1]
        return item_id

    def display_name(self, item_id: int) -> str:
        """Label plus annotation, as shown in listings."""
        name = self.label(item_id)
        if self.annotate:
            suffix = self.annotate(item_id)
            if suffix:
                name = f"{name} {suffix}"
        return name
