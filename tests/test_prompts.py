# Area: Console Tests
"""Tests for the console wrapper and re-prompting input loops."""

from unittest.mock import Mock

import pytest
from console_games._console.console import CLEAR_SEQUENCE, Console
from console_games._console.prompts import ask_cell, ask_choice, ask_name, ask_yes_no, joinor


def scripted(*answers, **kwargs):
    """Console fed by `answers`; everything printed lands in console.lines."""
    replies = iter(answers)
    lines = []
    console = Console(
        input_fn=lambda prompt="": next(replies),
        output_fn=lines.append,
        sleep_fn=kwargs.pop("sleep_fn", Mock()),
        **kwargs,
    )
    console.lines = lines
    return console


class TestConsole:
    """Tests for the Console wrapper."""

    def test_clear_emits_sequence(self):
        """Test that clear() writes the ANSI sequence."""
        console = scripted()
        console.clear()
        assert console.lines == [CLEAR_SEQUENCE]

    def test_clear_disabled(self):
        """Test that clear() is silent when disabled."""
        console = scripted(clear_enabled=False)
        console.clear()
        assert console.lines == []

    def test_pause_uses_default(self):
        """Test that pause() sleeps for the configured length."""
        sleep = Mock()
        console = scripted(sleep_fn=sleep, pause_seconds=0.5)
        console.pause()
        sleep.assert_called_once_with(0.5)

    def test_zero_pause_skips_sleep(self):
        """Test that a zero pause never sleeps."""
        sleep = Mock()
        console = scripted(sleep_fn=sleep, pause_seconds=0)
        console.pause()
        console.pause(0)
        sleep.assert_not_called()

    def test_explicit_pause(self):
        """Test that an explicit length overrides the default."""
        sleep = Mock()
        scripted(sleep_fn=sleep, pause_seconds=0).pause(2)
        sleep.assert_called_once_with(2)


class TestAskName:
    """Tests for ask_name()."""

    def test_capitalizes(self):
        """Test that names are stripped and capitalized."""
        assert ask_name(scripted("  alice ")) == "Alice"

    def test_reasks_on_blank(self):
        """Test that blank names are re-asked."""
        console = scripted("", "   ", "bob")
        assert ask_name(console) == "Bob"
        assert console.lines.count("Sorry, must enter a value.") == 2


class TestAskChoice:
    """Tests for ask_choice() and ask_yes_no()."""

    def test_maps_answer(self):
        """Test that the answer is mapped case-insensitively."""
        console = scripted("H")
        assert ask_choice(console, "Hit or stay?", {"h": "hit", "s": "stay"}, "bad") == "hit"

    def test_upper(self):
        """Test upper-case matching for marker keys."""
        console = scripted("o")
        assert ask_choice(console, "X or O?", {"X": 1, "O": 2}, "bad", upper=True) == 2

    def test_reasks_with_error(self):
        """Test that an invalid answer prints the error and re-asks."""
        console = scripted("maybe", "n")
        assert ask_yes_no(console) is False
        assert "Sorry, must be y or n." in console.lines

    def test_yes(self):
        """Test that a padded Y means yes."""
        assert ask_yes_no(scripted(" Y ")) is True


class TestAskCell:
    """Tests for ask_cell()."""

    def test_accepts_available_cell(self):
        """Test that a free cell is accepted."""
        assert ask_cell(scripted("7"), [1, 7, 9]) == 7

    def test_rejects_taken_and_garbage(self):
        """Test that taken cells and non-numbers are re-asked."""
        console = scripted("5", "abc", "", "9")
        assert ask_cell(console, [1, 7, 9]) == 9
        assert console.lines.count("Sorry, that's not a valid choice.") == 3
        assert console.lines[0] == "Choose a square between (1, 7 or 9): "

    def test_end_of_input_propagates(self):
        """Test that running out of input is not swallowed."""
        with pytest.raises(StopIteration):
            ask_cell(scripted(), [1])


class TestJoinor:
    """Tests for joinor()."""

    @pytest.mark.parametrize("items,expected", [
        ([], ""),
        ([1], "1"),
        ([1, 2], "1 or 2"),
        ([1, 2, 3], "1, 2 or 3"),
    ])
    def test_joinor(self, items, expected):
        """Test joinor() for zero to three items."""
        assert joinor(items) == expected

    def test_custom_word(self):
        """Test joinor() with custom punctuation and word."""
        assert joinor(["a", "b", "c"], "; ", "and") == "a; b and c"
