"""
Pytest fixtures for rftg-tui tests.

Input is scripted with io.StringIO, one answer per line; running out of
answers raises UserQuit, so a test never hangs waiting for input.
"""

import pytest

from ..config import ConsoleSettings
from ..console import ChoicePrompt, CommandRouter
from ..games.sample import SampleCostEngine, SamplePlayer, SampleGame, sample_card_table
from ..session import ConsoleInterface
from .scripted import (
    CONTACT_SPECIALIST,
    FREE_TRADE,
    GEM_WORLD,
    GEM_WORLD_2,
    IMPERIUM_LORDS,
    INVESTMENT_CREDITS,
    OLD_EARTH,
    REBEL_OUTPOST,
    SPACE_MARINES,
    SPICE_WORLD,
    SPICE_WORLD_2,
    make_console,
)


@pytest.fixture
def cards():
    """Fresh sample card table."""
    return sample_card_table()


@pytest.fixture
def game(cards):
    """Two-player game with known hands and tableaus."""
    players = [
        SamplePlayer(
            name="Alice",
            hand=[SPACE_MARINES, GEM_WORLD_2, FREE_TRADE],
            tableau=[OLD_EARTH, GEM_WORLD, INVESTMENT_CREDITS],
            chips=3,
        ),
        SamplePlayer(
            name="Bob",
            hand=[SPICE_WORLD_2, CONTACT_SPECIALIST],
            tableau=[SPICE_WORLD, IMPERIUM_LORDS, REBEL_OUTPOST],
            temp_military=1,
        ),
    ]
    return SampleGame(cards, players)


@pytest.fixture
def settings():
    return ConsoleSettings()


@pytest.fixture
def prompt_for(cards, game, settings):
    """Factory: ChoicePrompt reading the given answers."""
    def factory(*answers, signal_hook=None):
        console = make_console(*answers)
        router = CommandRouter(console, cards, game)
        return ChoicePrompt(console, router, settings, signal_hook)
    return factory


@pytest.fixture
def ui_for(cards, game, settings):
    """Factory: ConsoleInterface reading the given answers."""
    def factory(*answers, costs=None):
        console = make_console(*answers)
        return ConsoleInterface(
            console,
            cards,
            costs or SampleCostEngine(game),
            game=game,
            settings=settings,
        )
    return factory
