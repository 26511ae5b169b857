"""Drawing of the visible hint rows on a terminal."""

from __future__ import annotations

from hinter.matcher import MatchDescriptor
from hinter.terminal import Terminal
from hinter.utils import visible_width


class HintRenderer:
    """Owns every screen side effect of a hinted line session."""

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal

    def clear_rows(self, from_row: int, to_row: int) -> None:
        """Blank every row in ``[from_row, to_row]``, leaving the cursor at column 0."""
        width = self._terminal.columns
        for row in range(to_row, from_row - 1, -1):
            self._terminal.set_cursor_position(row, 0)
            self._terminal.write(" " * width)
            self._terminal.set_cursor_position(row, 0)

    def write_segment(self, text: str, color: str) -> None:
        self._terminal.set_foreground(color)
        self._terminal.write(text)

    def draw_match_line(
        self, descriptor: MatchDescriptor, hint_color: str, normal_color: str
    ) -> None:
        """Draw one hint: the typed span in *normal_color*, the rest dimmed."""
        self.write_segment(descriptor.before_text, hint_color)
        self.write_segment(descriptor.matched_text, normal_color)
        self.write_segment(descriptor.after_text, hint_color)
        self._terminal.write("\r\n")

    def draw(
        self,
        visible: list[MatchDescriptor],
        hint_color: str,
        normal_color: str,
    ) -> None:
        for descriptor in visible:
            self.draw_match_line(descriptor, hint_color, normal_color)

    def position_cursor_at(self, descriptor: MatchDescriptor, row: int) -> None:
        """Put the cursor just after the matched span on *row*."""
        column = visible_width(descriptor.before_text + descriptor.matched_text)
        self._terminal.set_cursor_position(row, column)
