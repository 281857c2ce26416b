"""
Tests for the dual-pool payment resolver.

Tests:
- Pool membership decides regular vs special, not the card itself
- Forced choices are applied without prompting
- The cost computation matches the card's category
"""

import pytest

from ..games.sample import SampleCostEngine
from ..selection import PaymentResolver
from .scripted import (
    FakeCostEngine,
    GEM_WORLD,
    GEM_WORLD_2,
    INVESTMENT_CREDITS,
    REBEL_OUTPOST,
    SPACE_MARINES,
    SPICE_WORLD,
    SPICE_WORLD_2,
    output_of,
)


@pytest.fixture
def resolver_for(prompt_for, cards):
    def factory(*answers, costs=None):
        prompt = prompt_for(*answers)
        return PaymentResolver(prompt.console, prompt, cards, costs or FakeCostEngine())
    return factory


class TestPrompted:
    """Tests for payment chosen by the player."""

    def test_special_then_regular(self, resolver_for):
        """Special picks do not count; regular picks shift the boundary."""
        resolver = resolver_for("3", "1", "1")
        result = resolver.resolve(
            0, SPACE_MARINES, [GEM_WORLD, SPICE_WORLD], [GEM_WORLD_2]
        )
        assert result.special == [GEM_WORLD_2]
        assert result.regular == [GEM_WORLD, SPICE_WORLD]
        assert result.paid == 2
        assert not result.forced

    def test_listing_marks_special(self, resolver_for):
        resolver = resolver_for("1", "1")
        resolver.resolve(0, SPACE_MARINES, [GEM_WORLD, SPICE_WORLD], [GEM_WORLD_2])
        out = output_of(resolver.console)
        assert "Choose cards to pay 2 for Space Marines:" in out
        assert "3. Gem World (special)" in out
        assert "Paid 1 of 2. Remaining options:" in out

    def test_single_pool(self, resolver_for):
        """No special cards is the plain payment."""
        resolver = resolver_for("2", "1")
        result = resolver.resolve(0, SPACE_MARINES, [GEM_WORLD, SPICE_WORLD, SPICE_WORLD_2])
        assert result.regular == [SPICE_WORLD, GEM_WORLD]
        assert result.special == []

    def test_zero_cost(self, resolver_for):
        resolver = resolver_for(costs=FakeCostEngine(cost=0))
        result = resolver.resolve(0, SPACE_MARINES, [GEM_WORLD])
        assert result.paid == 0
        assert resolver.console.prompts_issued == 0

    def test_exhausted_pool(self, resolver_for):
        """Running out of cards before the cost is paid is an error."""
        resolver = resolver_for("1", "1", costs=FakeCostEngine(cost=3))
        with pytest.raises(ValueError):
            resolver.resolve(0, SPACE_MARINES, [GEM_WORLD], [GEM_WORLD_2])


class TestForced:
    """Tests for payments the engine decides alone."""

    def test_regular_bit(self, resolver_for):
        resolver = resolver_for(costs=FakeCostEngine(forced=1))
        regular = [GEM_WORLD, SPICE_WORLD, SPICE_WORLD_2]
        result = resolver.resolve(0, SPACE_MARINES, regular, [GEM_WORLD_2, REBEL_OUTPOST])
        assert result.forced
        assert result.regular == regular
        assert result.special == []
        assert resolver.console.prompts_issued == 0

    def test_special_bit(self, resolver_for):
        resolver = resolver_for(costs=FakeCostEngine(forced=2))
        result = resolver.resolve(0, SPACE_MARINES, [GEM_WORLD], [GEM_WORLD_2])
        assert result.regular == []
        assert result.special == [GEM_WORLD_2]

    def test_both_bits(self, resolver_for):
        resolver = resolver_for(costs=FakeCostEngine(forced=3))
        result = resolver.resolve(0, SPACE_MARINES, [GEM_WORLD], [GEM_WORLD_2])
        assert result.regular == [GEM_WORLD]
        assert result.special == [GEM_WORLD_2]

    def test_caller_lists_untouched(self, resolver_for):
        resolver = resolver_for(costs=FakeCostEngine(forced=1))
        regular = [GEM_WORLD, SPICE_WORLD]
        result = resolver.resolve(0, SPACE_MARINES, regular)
        result.regular.append(SPICE_WORLD_2)
        assert regular == [GEM_WORLD, SPICE_WORLD]


class TestCostCategory:
    """Tests for which cost computation is used."""

    def test_development(self, resolver_for):
        costs = FakeCostEngine(forced=1)
        resolver_for(costs=costs).resolve(0, INVESTMENT_CREDITS, [GEM_WORLD])
        assert costs.calls == ["development", "forced"]

    def test_military_world(self, resolver_for):
        costs = FakeCostEngine(forced=1)
        resolver_for(costs=costs).resolve(0, REBEL_OUTPOST, [GEM_WORLD])
        assert costs.calls == ["military", "forced"]

    def test_peaceful_world(self, resolver_for):
        costs = FakeCostEngine(forced=1)
        resolver_for(costs=costs).resolve(0, GEM_WORLD, [SPICE_WORLD])
        assert costs.calls == ["peaceful", "forced"]

    def test_military_only_payment(self, resolver_for):
        """A peaceful world paid for militarily uses the military cost."""
        costs = FakeCostEngine(forced=1)
        resolver_for(costs=costs).resolve(0, GEM_WORLD, [SPICE_WORLD], mil_only=True)
        assert costs.calls == ["military", "forced"]


class TestSampleCosts:
    """Payment against the sample cost engine."""

    def test_discounted_development(self, prompt_for, cards, game):
        # Alice has Investment Credits (discount 1): Space Marines costs 1
        prompt = prompt_for("2")
        resolver = PaymentResolver(prompt.console, prompt, cards, SampleCostEngine(game))
        assert resolver.compute_cost(0, SPACE_MARINES, False, 0) == 1
        result = resolver.resolve(0, SPACE_MARINES, [GEM_WORLD, SPICE_WORLD])
        assert result.regular == [SPICE_WORLD]
