"""Ranking of match descriptors into the visible hint set."""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from hinter.matcher import MatchDescriptor, match

T = TypeVar("T")

DEFAULT_LIMIT = 5


def rank(
    candidates: Sequence[T],
    projection: Callable[[T], object],
    typed_input: str,
    ignore_case: bool = False,
    find_anywhere: bool = False,
    limit: int = DEFAULT_LIMIT,
) -> list[MatchDescriptor]:
    """Return the visible match set for *typed_input*.

    Descriptors are ordered by where the match starts (earlier is better);
    the sort is stable, so equal positions keep the candidates' order.
    Before anything is typed the first *limit* candidates are shown.  When
    nothing matches, the result is a single entry echoing the input, so the
    set is never empty.
    """
    if not candidates:
        raise ValueError("candidates must not be empty")

    descriptors = sorted(
        (
            match(str(projection(item)), typed_input, ignore_case, find_anywhere)
            for item in candidates
        ),
        key=lambda d: len(d.before_text),
    )

    if not typed_input:
        return descriptors[:limit]

    matched = [d for d in descriptors if d.is_match]
    if matched:
        return matched[:limit]

    return [MatchDescriptor.echo(typed_input)]
