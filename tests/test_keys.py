"""Tests for hinter.keys -- decoding raw key sequences."""

from __future__ import annotations

import pytest

from hinter.keys import Key, matches_key, parse_key, parse_key_id, printable_char


# ---------------------------------------------------------------------------
# parse_key
# ---------------------------------------------------------------------------


class TestParseKey:
    """Raw terminal input -> key identifier."""

    @pytest.mark.parametrize(
        ("data", "expected"),
        [
            ("\r", "enter"),
            ("\n", "enter"),
            ("\t", "tab"),
            ("\x7f", "backspace"),
            ("\x08", "backspace"),
            ("\x1b", "escape"),
            (" ", "space"),
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1bOA", "up"),
            ("\x1bOB", "down"),
            ("\x1b[C", "right"),
            ("\x1b[3~", "delete"),
            ("\x1b[Z", "shift+tab"),
            ("\x1b[1;5B", "ctrl+down"),
            ("\x03", "ctrl+c"),
            ("\x1bx", "alt+x"),
            ("a", "a"),
            ("Z", "Z"),
            ("é", "é"),
        ],
    )
    def test_known_sequences(self, data: str, expected: str) -> None:
        assert parse_key(data) == expected

    def test_empty_input(self) -> None:
        assert parse_key("") is None

    def test_unknown_escape_sequence(self) -> None:
        assert parse_key("\x1b[99~") is None


# ---------------------------------------------------------------------------
# matches_key / parse_key_id
# ---------------------------------------------------------------------------


class TestMatchesKey:
    """Key identifiers are normalised before comparison."""

    def test_named_keys(self) -> None:
        assert matches_key("\x1b[B", Key.down)
        assert matches_key("\t", Key.tab)
        assert not matches_key("\t", Key.enter)

    def test_aliases(self) -> None:
        assert matches_key("\x1b", "esc")
        assert matches_key("\r", "return")

    def test_modifier_order_is_irrelevant(self) -> None:
        assert parse_key_id("alt+ctrl+x") == "ctrl+alt+x"

    def test_named_key_case_is_irrelevant(self) -> None:
        assert matches_key("\t", "Tab")
        assert matches_key("\x1b[6~", "PageDown")

    def test_ctrl_combinator(self) -> None:
        assert matches_key("\x03", Key.ctrl("c"))

    def test_unknown_modifier(self) -> None:
        assert parse_key_id("hyper+x") is None
        assert matches_key("x", "hyper+x") is False

    def test_plus_key(self) -> None:
        assert parse_key_id("+") == "+"
        assert matches_key("+", "+")


class TestPrintableChar:
    def test_letters_and_space(self) -> None:
        assert printable_char("q") == "q"
        assert printable_char(" ") == " "

    def test_control_and_sequences(self) -> None:
        assert printable_char("\x01") is None
        assert printable_char("\x1b[A") is None
