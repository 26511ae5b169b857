"""Interactive line editing with live hints.

``read_hinted_line`` reads keys one at a time, keeps the typed input and the
active hint in a :class:`HintState`, and redraws the visible hints below the
anchor row after every key until Enter or Tab accepts a hint.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, Sequence, TypeVar

from hinter.config import DEFAULT_INPUT_PATTERN, HintOptions
from hinter.keys import printable_char
from hinter.matcher import MatchDescriptor
from hinter.ranker import rank
from hinter.render import HintRenderer
from hinter.terminal import ProcessTerminal, Terminal

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HintState(Generic[T]):
    """Typed input, visible hints and the active hint of one session.

    The visible set is recomputed from scratch whenever the input changes
    and is never empty, so ``selection_index`` always points at a hint.
    """

    def __init__(
        self,
        candidates: Sequence[T],
        projection: Callable[[T], object],
        options: HintOptions,
    ) -> None:
        self._candidates = candidates
        self._projection = projection
        self._options = options
        self.typed_input = ""
        self.selection_index = 0
        self.visible: list[MatchDescriptor] = self._rank()

    def _rank(self) -> list[MatchDescriptor]:
        return rank(
            self._candidates,
            self._projection,
            self.typed_input,
            ignore_case=self._options.ignore_case,
            find_anywhere=self._options.find_anywhere,
            limit=self._options.limit,
        )

    @property
    def selected(self) -> MatchDescriptor:
        return self.visible[self.selection_index]

    def type_char(self, char: str) -> bool:
        """Append *char* if the input pattern accepts it.

        Returns whether the character was kept.
        """
        if not self._options.accepts(char):
            return False
        self.typed_input += char
        self.selection_index = 0
        self.visible = self._rank()
        return True

    def backspace(self) -> None:
        self.typed_input = self.typed_input[:-1]
        self.selection_index = 0
        self.visible = self._rank()

    def select_next(self) -> None:
        if self.selection_index + 1 < len(self.visible):
            self.selection_index += 1

    def select_previous(self) -> None:
        if self.selection_index > 0:
            self.selection_index -= 1


class HintedLineEditor(Generic[T]):
    """Runs one editing session against a terminal.

    The terminal must already be in raw mode; :func:`read_hinted_line`
    takes care of that.
    """

    def __init__(
        self,
        candidates: Sequence[T],
        projection: Callable[[T], object],
        terminal: Terminal,
        options: HintOptions,
    ) -> None:
        if not candidates:
            raise ValueError("candidates must not be empty")

        self._terminal = terminal
        self._renderer = HintRenderer(terminal)
        self._options = options
        self._keybindings = options.keybindings
        self.state = HintState(candidates, projection, options)

        self._original_color = terminal.foreground
        self._anchor_row = 0
        self._drawn_rows = 0

    @property
    def anchor_row(self) -> int:
        return self._anchor_row

    def run(self) -> str:
        """Edit until Enter or Tab and return the accepted text."""
        self._anchor_row = self._reserve_rows()
        logger.debug("hinted line session started at row %d", self._anchor_row)

        finished = False
        try:
            self._redraw()
            while not self.handle_key(self._terminal.read_key()):
                self._redraw()
            result = self._finish()
            finished = True
        finally:
            if not finished:
                self._clear()
                self._terminal.set_foreground(self._original_color)

        logger.debug("hinted line session accepted %r", result)
        return result

    def handle_key(self, data: str) -> bool:
        """Apply one key to the session state.

        Returns ``True`` when the key ends the session.  Ctrl+C raises
        ``KeyboardInterrupt``; raw mode stops the terminal from doing so.
        """
        kb = self._keybindings
        action = kb.action_for(data)
        logger.debug("key %r -> %s", data, action)

        if action == "submit" or action == "acceptHint":
            return True
        if action == "interrupt":
            raise KeyboardInterrupt
        if action == "deleteCharBackward":
            self.state.backspace()
        elif action == "selectDown":
            self.state.select_next()
        elif action == "selectUp":
            self.state.select_previous()
        else:
            char = printable_char(data)
            if char is not None:
                self.state.type_char(char)
        return False

    # -- drawing ------------------------------------------------------------

    def _reserve_rows(self) -> int:
        """Return the anchor row, scrolling so every hint row fits below it.

        Each drawn hint ends with a line break, so the rows
        ``anchor .. anchor + limit`` must all be on screen.
        """
        row, _ = self._terminal.get_cursor_position()
        bottom = self._terminal.rows - 1
        needed = min(self._options.limit, bottom)
        overflow = row + needed - bottom
        if overflow <= 0:
            return row

        self._terminal.set_cursor_position(bottom, 0)
        self._terminal.write("\n" * overflow)
        return row - overflow

    def _clear(self) -> None:
        if self._drawn_rows:
            self._renderer.clear_rows(
                self._anchor_row, self._anchor_row + self._drawn_rows - 1
            )
        self._terminal.set_cursor_position(self._anchor_row, 0)
        self._drawn_rows = 0

    def _redraw(self) -> None:
        state = self.state
        self._clear()
        self._renderer.draw(
            state.visible, self._options.hint_color, self._original_color
        )
        self._drawn_rows = len(state.visible)
        self._renderer.position_cursor_at(
            state.selected, self._anchor_row + state.selection_index
        )

    def _finish(self) -> str:
        result = self.state.selected.full_text
        self._clear()
        self._renderer.write_segment(result, self._original_color)
        self._terminal.set_foreground(self._original_color)
        if self._options.newline:
            self._terminal.write("\r\n")
        return result


def read_hinted_line(
    candidates: Sequence[T],
    projection: Callable[[T], object] = str,
    input_pattern: str = DEFAULT_INPUT_PATTERN,
    hint_color: str = "darkGray",
    ignore_case: bool = False,
    find_anywhere: bool = False,
    *,
    terminal: Terminal | None = None,
    options: HintOptions | None = None,
) -> str:
    """Read one line from the terminal, offering *candidates* as hints.

    *projection* turns a candidate into the text that is matched and shown.
    Up/Down move between the visible hints, Enter or Tab accepts the active
    one and its full text is returned.  When nothing matches, the typed
    input itself is returned.

    *options*, when given, replaces the individual option arguments.
    Raises ``ValueError`` for an empty candidate list before the terminal
    is touched.
    """
    if not candidates:
        raise ValueError("candidates must not be empty")

    if options is None:
        options = HintOptions(
            input_pattern=input_pattern,
            hint_color=hint_color,
            ignore_case=ignore_case,
            find_anywhere=find_anywhere,
        )
    if terminal is None:
        terminal = ProcessTerminal()

    terminal.start()
    try:
        return HintedLineEditor(candidates, projection, terminal, options).run()
    finally:
        terminal.stop()
