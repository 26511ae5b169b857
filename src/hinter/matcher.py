"""Substring matching of typed input against a single candidate.

A match splits the candidate into the text before the typed span, the span
itself and the text after it, which is exactly what the renderer needs to
draw the hint in two colors.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class MatchDescriptor:
    is_match: bool
    before_text: str = ""
    matched_text: str = ""
    after_text: str = ""

    @property
    def full_text(self) -> str:
        return self.before_text + self.matched_text + self.after_text

    @classmethod
    def echo(cls, typed_input: str) -> MatchDescriptor:
        """Synthetic entry that shows the typed input verbatim."""
        return cls(is_match=False, matched_text=typed_input)


def _find(text: str, typed_input: str, ignore_case: bool) -> tuple[int, int] | None:
    if not ignore_case:
        index = text.find(typed_input)
        return None if index == -1 else (index, index + len(typed_input))

    # Case-insensitive search must report a span into *text* itself;
    # lowering both strings can change their lengths (e.g. "İ").
    found = re.search(re.escape(typed_input), text, re.IGNORECASE)
    return None if found is None else found.span()


def match(
    candidate_text: str,
    typed_input: str,
    ignore_case: bool = False,
    find_anywhere: bool = False,
) -> MatchDescriptor:
    """Match *typed_input* against *candidate_text*.

    With ``find_anywhere`` the first occurrence anywhere in the candidate
    counts, otherwise only a prefix does.  Empty input matches every
    candidate at index 0.  The matched span is copied from the candidate,
    so with ``ignore_case`` it keeps the candidate's casing.
    """
    if not typed_input:
        return MatchDescriptor(is_match=True, after_text=candidate_text)

    span = _find(candidate_text, typed_input, ignore_case)
    if span is None or (not find_anywhere and span[0] != 0):
        return MatchDescriptor.echo(typed_input)

    start, end = span
    return MatchDescriptor(
        is_match=True,
        before_text=candidate_text[:start],
        matched_text=candidate_text[start:end],
        after_text=candidate_text[end:],
    )
