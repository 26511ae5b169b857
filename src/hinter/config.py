"""Options for a hinted line editing session."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from hinter.colors import parse_color
from hinter.keybindings import HintKeybindingsManager, get_hint_keybindings
from hinter.ranker import DEFAULT_LIMIT

DEFAULT_INPUT_PATTERN = r"^([A-Za-z0-9_])*$"


@dataclass
class HintOptions:
    """Session options.

    ``input_pattern`` is tested against each typed character on its own;
    characters it rejects are dropped.  ``limit`` caps the number of hint
    rows drawn below the input.
    """

    input_pattern: str = DEFAULT_INPUT_PATTERN
    hint_color: str = "darkGray"
    ignore_case: bool = False
    find_anywhere: bool = False
    limit: int = DEFAULT_LIMIT
    newline: bool = False
    keybindings: HintKeybindingsManager = field(default_factory=get_hint_keybindings)
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(f"limit must be at least 1, got {self.limit}")
        self.hint_color = parse_color(self.hint_color)
        self._compiled = re.compile(self.input_pattern)

    def accepts(self, char: str) -> bool:
        """Whether *char* may be appended to the typed input."""
        return self._compiled.search(char) is not None
