"""
Tests for the enumerated choice prompt.

Tests:
- Valid positions are returned, invalid input is re-prompted
- Info and list commands do not end the prompt
- Meta-commands are routed before the local grammar
- Quit and signals leave the prompt as exceptions
"""

import io

import pytest

from ..console import ChoicePrompt, CommandRouter, Console
from ..core import CommandOutcome, Pool
from ..display import card_detail_lines
from ..errors import ControlSignal, UserQuit
from .scripted import GEM_WORLD, SPACE_MARINES, SPICE_WORLD, make_console, output_of


@pytest.fixture
def pool(cards):
    return Pool.of(
        [GEM_WORLD, SPICE_WORLD, SPACE_MARINES],
        label=cards.name,
        inspect=lambda card_id: card_detail_lines(cards, card_id),
    )


class TestSelection:
    """Tests for choosing a position."""

    def test_returns_position(self, prompt_for, pool):
        """A number in range is returned as is."""
        prompt = prompt_for("2")
        assert prompt.choose(pool, "Pick", 0) == 2

    def test_out_of_range_reprompts(self, prompt_for, pool):
        """Out of range numbers are rejected with a message."""
        prompt = prompt_for("4", "3")
        assert prompt.choose(pool, "Pick", 0) == 3
        assert "Invalid selection. Choose 1 to 3." in output_of(prompt.console)
        assert prompt.console.prompts_issued == 2

    def test_zero_needs_permission(self, prompt_for, pool):
        """0 is only accepted where the caller allows passing."""
        prompt = prompt_for("0", "1")
        assert prompt.choose(pool, "Pick", 0) == 1

        prompt = prompt_for("0")
        assert prompt.choose(pool, "Pick", 0, allow_zero=True) == 0

    def test_surrounding_whitespace(self, prompt_for, pool):
        """Input is trimmed before parsing."""
        prompt = prompt_for("  1  ")
        assert prompt.choose(pool, "Pick", 0) == 1

    def test_returned_positions_in_range(self, prompt_for, pool):
        """Every returned position is within the current pool."""
        prompt = prompt_for("-1", "99", "abc", "3")
        position = prompt.choose(pool, "Pick", 0)
        assert 1 <= position <= len(pool)


class TestRejectedInput:
    """Tests for input that never reaches the grammar."""

    def test_empty_line(self, prompt_for, pool):
        prompt = prompt_for("", "   ", "1")
        assert prompt.choose(pool, "Pick", 0) == 1
        assert output_of(prompt.console).count("Please enter a choice.") == 2

    def test_overlong_line(self, prompt_for, pool):
        prompt = prompt_for("1" * 100, "1")
        assert prompt.choose(pool, "Pick", 0) == 1
        assert "Input too long" in output_of(prompt.console)

    def test_control_characters(self, prompt_for, pool):
        prompt = prompt_for("1\x1b[A", "2")
        assert prompt.choose(pool, "Pick", 0) == 2
        assert "control characters" in output_of(prompt.console)

    def test_unknown_text(self, prompt_for, pool):
        prompt = prompt_for("abc", "1")
        assert prompt.choose(pool, "Pick", 0) == 1
        assert "Invalid input" in output_of(prompt.console)

    def test_read_failure_recovers(self, cards, pool):
        """A failed read is reported and the prompt asks again."""
        class FlakyInput(io.StringIO):
            failed = False

            def readline(self, *args):
                if not self.failed:
                    self.failed = True
                    raise OSError("device not ready")
                return super().readline(*args)

        console = Console(stdin=FlakyInput("2\n"), stdout=io.StringIO())
        prompt = ChoicePrompt(console, CommandRouter(console, cards))
        assert prompt.choose(pool, "Pick", 0) == 2
        assert "Could not read input" in output_of(console)

    def test_max_line_length_setting(self, cards, pool, settings):
        """The length limit comes from the settings."""
        console = make_console("123", "1")
        short = settings.with_overrides(max_line_length=2)
        prompt = ChoicePrompt(console, CommandRouter(console, cards), short)
        assert prompt.choose(pool, "Pick", 0) == 1
        assert "at most 2 characters" in output_of(console)


class TestLocalCommands:
    """Tests for info and list commands."""

    @pytest.mark.parametrize("line", ["i2", "i 2", "info 2", "I2"])
    def test_info(self, prompt_for, pool, line):
        """Info shows the item's details and keeps prompting."""
        prompt = prompt_for(line, "1")
        assert prompt.choose(pool, "Pick", 0) == 1
        assert "---- Details about Spice World ----" in output_of(prompt.console)
        assert len(pool) == 3

    def test_info_out_of_range(self, prompt_for, pool):
        prompt = prompt_for("i7", "1")
        prompt.choose(pool, "Pick", 0)
        assert "Invalid option number" in output_of(prompt.console)

    def test_info_without_inspector(self, prompt_for):
        """Pools without details say so."""
        pool = Pool.of([1, 2, 3])
        prompt = prompt_for("i1", "1")
        prompt.choose(pool, "Pick", 0)
        assert "No details available for 1." in output_of(prompt.console)

    def test_bare_info_single_item(self, prompt_for, cards):
        """'i' alone inspects the only item."""
        pool = Pool.of(
            [GEM_WORLD], label=cards.name,
            inspect=lambda card_id: card_detail_lines(cards, card_id),
        )
        prompt = prompt_for("i", "1")
        prompt.choose(pool, "Pick", 0)
        assert "Details about Gem World" in output_of(prompt.console)

    def test_list_redisplays_pool(self, prompt_for, pool):
        """'l' lists the current pool under the original prompt text."""
        pool.remove_at(1)
        prompt = prompt_for("l", "1")
        prompt.choose(pool, "Enter card number", 0)
        out = output_of(prompt.console)
        assert "Enter card number\n1. Spice World\n2. Space Marines\n" in out

    def test_router_runs_first(self, prompt_for, pool):
        """Meta-commands work inside the prompt and do not use up the choice."""
        prompt = prompt_for("h", "?", "3")
        assert prompt.choose(pool, "Pick", 0) == 3
        out = output_of(prompt.console)
        assert "Your hand" in out
        assert "Commands:" in out


class TestSignals:
    """Tests for quit and game-control signals."""

    def test_quit(self, prompt_for, pool):
        prompt = prompt_for("q")
        with pytest.raises(UserQuit) as exc_info:
            prompt.choose(pool, "Pick", 1)
        assert exc_info.value.who == 1
        assert exc_info.value.outcome == CommandOutcome.QUIT

    def test_end_of_input_quits(self, prompt_for, pool):
        prompt = prompt_for()
        with pytest.raises(UserQuit):
            prompt.choose(pool, "Pick", 0)

    def test_signal_propagates(self, prompt_for, pool):
        """Without a hook, undo leaves the prompt."""
        prompt = prompt_for("u")
        with pytest.raises(ControlSignal) as exc_info:
            prompt.choose(pool, "Pick", 0)
        assert exc_info.value.outcome == CommandOutcome.UNDO

    def test_r_is_redo(self, prompt_for, pool):
        """'r' is redo; listing uses 'l'."""
        prompt = prompt_for("r")
        with pytest.raises(ControlSignal) as exc_info:
            prompt.choose(pool, "Pick", 0)
        assert exc_info.value.outcome == CommandOutcome.REDO

    def test_hook_handles_signal(self, prompt_for, pool):
        """A hook that handles the signal keeps the prompt going."""
        seen = []

        def hook(outcome, who):
            seen.append((outcome, who))
            return outcome == CommandOutcome.SAVE_GAME

        prompt = prompt_for("save", "2", signal_hook=hook)
        assert prompt.choose(pool, "Pick", 0) == 2
        assert seen == [(CommandOutcome.SAVE_GAME, 0)]

    def test_hook_declines_signal(self, prompt_for, pool):
        """A hook returning False lets the signal propagate."""
        prompt = prompt_for("load", signal_hook=lambda outcome, who: False)
        with pytest.raises(ControlSignal) as exc_info:
            prompt.choose(pool, "Pick", 0)
        assert exc_info.value.outcome == CommandOutcome.LOAD_GAME

    @pytest.mark.parametrize("line", ["u", "ur", "ug", "r", "rr", "rg", "n", "save", "load"])
    def test_every_signal_reaches_hook(self, prompt_for, pool, line):
        """Every game-control outcome is offered to the hook; none is parsed locally."""
        seen = []

        def hook(outcome, who):
            seen.append(outcome)
            return True

        prompt = prompt_for(line, "1", signal_hook=hook)
        assert prompt.choose(pool, "Pick", 0) == 1
        assert len(seen) == 1
        assert seen[0].is_signal
        assert "Invalid input" not in output_of(prompt.console)
