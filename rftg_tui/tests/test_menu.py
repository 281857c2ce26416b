"""
Tests for the new game menu.
"""

import pytest

from ..session import GameOptions, NewGameMenu
from .scripted import output_of


@pytest.fixture
def menu_for(prompt_for):
    def factory(*answers):
        prompt = prompt_for(*answers)
        return NewGameMenu(prompt.console, prompt)
    return factory


class TestNewGameMenu:
    """Tests for NewGameMenu.run()."""

    def test_base_two_players(self, menu_for):
        """Base game, 2 players, advanced: no goal or takeover questions."""
        menu = menu_for("1", "1", "2")
        options = menu.run()
        assert options == GameOptions(num_players=2, expansion=0, advanced=True)
        out = output_of(menu.console)
        assert "Disable goals?" not in out
        assert "Disable takeovers?" not in out

    def test_player_count_limited_by_expansion(self, menu_for):
        """The base game allows at most 4 players."""
        menu = menu_for("1", "3")
        options = menu.run()
        assert options.num_players == 4
        out = output_of(menu.console)
        assert "3. 4" in out
        assert "4. 5" not in out

    def test_takeover_expansion(self, menu_for):
        """Expansion 2 asks about goals and takeovers, not advanced for 5 players."""
        menu = menu_for("3", "4", "2", "1")
        options = menu.run()
        assert options.expansion == 2
        assert options.num_players == 5
        assert not options.advanced
        assert options.disable_goals
        assert not options.disable_takeovers
        assert "Play the advanced two-player game?" not in output_of(menu.console)

    def test_goals_only_expansion(self, menu_for):
        menu = menu_for("2", "2", "1")
        options = menu.run()
        assert options.expansion == 1
        assert options.num_players == 3
        assert not options.disable_goals
        assert "Disable takeovers?" not in output_of(menu.console)

    def test_existing_options_not_modified(self, menu_for):
        start = GameOptions(num_players=4)
        menu = menu_for("1", "1", "1")
        options = menu.run(start)
        assert start.num_players == 4
        assert options.num_players == 2
