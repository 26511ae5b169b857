"""Tests for hinter.matcher -- splitting a candidate around the typed input."""

from __future__ import annotations

import pytest

from hinter.matcher import MatchDescriptor, match

CANDIDATES = ["apple", "Apricot", "banana", "", "a.b", "pineapple", "İstanbul"]
INPUTS = ["", "a", "ap", "AP", "an", "apple", "applesauce", ".", "a.b", "i"]


# ---------------------------------------------------------------------------
# Matching properties
# ---------------------------------------------------------------------------


class TestMatchProperties:
    """is_match agrees with startswith / in, and matches reconstruct."""

    @pytest.mark.parametrize("candidate", CANDIDATES)
    @pytest.mark.parametrize("typed", INPUTS)
    def test_prefix_mode_is_startswith(self, candidate: str, typed: str) -> None:
        result = match(candidate, typed, ignore_case=False, find_anywhere=False)
        assert result.is_match == candidate.startswith(typed)

    @pytest.mark.parametrize("candidate", CANDIDATES)
    @pytest.mark.parametrize("typed", INPUTS)
    def test_anywhere_mode_is_contains(self, candidate: str, typed: str) -> None:
        result = match(candidate, typed, ignore_case=False, find_anywhere=True)
        assert result.is_match == (typed in candidate)

    @pytest.mark.parametrize("candidate", CANDIDATES)
    @pytest.mark.parametrize("typed", INPUTS)
    @pytest.mark.parametrize("ignore_case", [False, True])
    @pytest.mark.parametrize("find_anywhere", [False, True])
    def test_match_reconstructs_candidate(
        self, candidate: str, typed: str, ignore_case: bool, find_anywhere: bool
    ) -> None:
        result = match(candidate, typed, ignore_case, find_anywhere)
        if result.is_match:
            assert result.full_text == candidate

    def test_ignore_case_prefix(self) -> None:
        assert match("Apricot", "apr", ignore_case=True).is_match is True
        assert match("Apricot", "apr", ignore_case=False).is_match is False

    def test_ignore_case_anywhere(self) -> None:
        assert match("pineApple", "APP", ignore_case=True, find_anywhere=True).is_match


# ---------------------------------------------------------------------------
# Descriptor contents
# ---------------------------------------------------------------------------


class TestMatchDescriptor:
    """Before / matched / after split for hits and misses."""

    def test_prefix_split(self) -> None:
        result = match("apple", "ap")
        assert result == MatchDescriptor(
            is_match=True, before_text="", matched_text="ap", after_text="ple"
        )

    def test_anywhere_split_uses_first_occurrence(self) -> None:
        result = match("banana", "an", find_anywhere=True)
        assert result.before_text == "b"
        assert result.matched_text == "an"
        assert result.after_text == "ana"

    def test_prefix_mode_rejects_later_occurrence(self) -> None:
        result = match("banana", "an")
        assert result.is_match is False

    def test_empty_input_matches_at_start(self) -> None:
        result = match("banana", "")
        assert result.is_match is True
        assert result.before_text == ""
        assert result.matched_text == ""
        assert result.full_text == "banana"

    def test_empty_input_matches_empty_candidate(self) -> None:
        assert match("", "").is_match is True

    def test_miss_records_typed_input(self) -> None:
        result = match("banana", "xyz")
        assert result == MatchDescriptor(is_match=False, matched_text="xyz")
        assert result.full_text == "xyz"

    def test_input_longer_than_candidate(self) -> None:
        result = match("ap", "apple", ignore_case=True, find_anywhere=True)
        assert result.is_match is False
        assert result.matched_text == "apple"

    def test_matched_span_keeps_candidate_casing(self) -> None:
        result = match("apple", "App", ignore_case=True)
        assert result.is_match is True
        assert result.matched_text == "app"
        assert result.after_text == "le"

    def test_regex_metacharacters_are_literal(self) -> None:
        assert match("axb", "a.b", ignore_case=True).is_match is False
        assert match("a.b", "a.b", ignore_case=True).is_match is True

    def test_echo_descriptor(self) -> None:
        echo = MatchDescriptor.echo("zz")
        assert echo.is_match is False
        assert echo.full_text == "zz"
