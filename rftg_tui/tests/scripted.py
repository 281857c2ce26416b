"""
Scripted console helpers and sample card ids shared by the tests.
"""

import io

from ..console import Console
from ..interfaces import CostEngine


# Sample card ids (positions in the expanded sample deck)
OLD_EARTH = 0
GEM_WORLD = 1
GEM_WORLD_2 = 2
SPICE_WORLD = 3
SPICE_WORLD_2 = 4
REBEL_OUTPOST = 5
ALIEN_SENTRY = 7
GENETICS_LAB = 8
SPACE_MARINES = 9
SPACE_MARINES_2 = 10
INVESTMENT_CREDITS = 11
INVESTMENT_CREDITS_2 = 12
CONTACT_SPECIALIST = 13
FREE_TRADE = 14
GALACTIC_FEDERATION = 15
IMPERIUM_LORDS = 16


class FakeCostEngine(CostEngine):
    """Cost engine with a fixed cost and forced-choice answer that records calls."""

    def __init__(self, cost: int = 2, forced: int = 0):
        self.cost = cost
        self.forced = forced
        self.calls: list[str] = []

    def development_cost(self, who, card_id):
        self.calls.append("development")
        return self.cost

    def discount(self, who, card_id):
        self.calls.append("discount")
        return 0

    def military_world_payment(self, who, card_id, mil_only, mil_bonus):
        self.calls.append("military")
        return self.cost

    def peaceful_world_payment(self, who, card_id, mil_only):
        self.calls.append("peaceful")
        return self.cost

    def compute_forced_choice(self, who, card_id, num_regular, num_special, mil_only, mil_bonus):
        self.calls.append("forced")
        return self.forced


def make_console(*answers: str) -> Console:
    """Console that reads the given answers and writes to a buffer."""
    text = "".join(f"{answer}\n" for answer in answers)
    return Console(stdin=io.StringIO(text), stdout=io.StringIO())


def output_of(console: Console) -> str:
    return console.stdout.getvalue()
