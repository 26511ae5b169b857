"""Terminal abstraction for raw-mode, key-at-a-time interaction.

Provides a ``Terminal`` protocol describing the primitives the hinted line
editor needs, and a concrete ``ProcessTerminal`` backed by the process's
stdin/stdout that manages raw mode, cursor addressing and foreground color
via ANSI escape sequences.
"""

from __future__ import annotations

import codecs
import logging
import os
import re
import select
import sys
import termios
import time
import tty
from typing import Protocol

from hinter.colors import foreground_sgr
from hinter.stdin_buffer import StdinBuffer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CURSOR_POSITION_QUERY = "\x1b[6n"
_CURSOR_POSITION_RE = re.compile(r"\x1b\[(\d+);(\d+)R")
_SET_CURSOR_FMT = "\x1b[{};{}H"

# Seconds to wait for the terminal to answer a cursor position query
_REPORT_TIMEOUT = 0.5


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for terminal I/O operations.

    Rows and columns are zero-based.
    """

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def read_key(self) -> str: ...

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    @property
    def rows(self) -> int: ...

    @property
    def foreground(self) -> str: ...

    def set_foreground(self, color: str) -> None: ...

    def get_cursor_position(self) -> tuple[int, int]: ...

    def set_cursor_position(self, row: int, column: int) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal implementation backed by ``sys.stdin``/``sys.stdout``.

    Manages raw mode via :mod:`tty` and :mod:`termios`.  Input bytes are
    decoded incrementally as UTF-8 and split into key sequences by a
    :class:`StdinBuffer`, so ``read_key`` always returns one whole key.
    """

    def __init__(self) -> None:
        self._original_termios: list | None = None
        self._stdin_buffer = StdinBuffer(timeout=0.01)
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._foreground: str = "default"
        self._write_log_path: str = os.environ.get("HINTER_WRITE_LOG", "")

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).columns
        except (ValueError, OSError):
            return 80

    @property
    def rows(self) -> int:
        try:
            return os.get_terminal_size(sys.stdout.fileno()).lines
        except (ValueError, OSError):
            return 24

    @property
    def foreground(self) -> str:
        """Last foreground color selected through this terminal.

        Terminals cannot report their current color, so this starts as
        ``"default"`` and tracks every :meth:`set_foreground` call.
        """
        return self._foreground

    # -- start / stop -------------------------------------------------------

    def start(self) -> None:
        """Save the terminal attributes and switch stdin to raw mode."""
        fd = sys.stdin.fileno()
        self._original_termios = termios.tcgetattr(fd)
        tty.setraw(fd)
        logger.debug("terminal switched to raw mode")

    def stop(self) -> None:
        """Restore the terminal attributes saved by :meth:`start`."""
        if self._original_termios is not None:
            termios.tcsetattr(
                sys.stdin.fileno(), termios.TCSADRAIN, self._original_termios
            )
            self._original_termios = None
            logger.debug("terminal attributes restored")
        self._stdin_buffer.clear()

    # -- input --------------------------------------------------------------

    def read_key(self) -> str:
        """Block until one complete key sequence is available and return it."""
        while True:
            key = self._stdin_buffer.pop()
            if key is not None:
                return key

            if self._stdin_buffer.has_pending():
                # A lone ESC: give the rest of the sequence a moment to arrive
                if not self._wait_readable(self._stdin_buffer.timeout):
                    self._stdin_buffer.flush()
                    continue

            self._stdin_buffer.process(self._read_available())

    # -- output -------------------------------------------------------------

    def write(self, data: str) -> None:
        """Write data to stdout and optionally to the write log."""
        self._raw_write(data)

        if self._write_log_path:
            try:
                with open(self._write_log_path, "a") as f:
                    f.write(data)
            except OSError:
                pass

    def set_foreground(self, color: str) -> None:
        self.write(foreground_sgr(color))
        self._foreground = color

    # -- cursor -------------------------------------------------------------

    def get_cursor_position(self) -> tuple[int, int]:
        """Ask the terminal where the cursor is (device status report).

        Keys typed while waiting for the answer are kept for ``read_key``.
        Falls back to ``(0, 0)`` when the terminal does not answer.
        """
        self._raw_write(_CURSOR_POSITION_QUERY)

        received = ""
        deadline = time.monotonic() + _REPORT_TIMEOUT
        while True:
            report = _CURSOR_POSITION_RE.search(received)
            if report is not None:
                self._stdin_buffer.process(
                    received[: report.start()] + received[report.end() :]
                )
                return int(report.group(1)) - 1, int(report.group(2)) - 1

            remaining = deadline - time.monotonic()
            if remaining <= 0 or not self._wait_readable(remaining):
                break
            received += self._read_available()

        logger.warning("terminal did not report the cursor position")
        self._stdin_buffer.process(received)
        return 0, 0

    def set_cursor_position(self, row: int, column: int) -> None:
        self.write(_SET_CURSOR_FMT.format(row + 1, column + 1))

    # -- private ------------------------------------------------------------

    def _wait_readable(self, timeout: float) -> bool:
        ready, _, _ = select.select([sys.stdin.fileno()], [], [], timeout)
        return bool(ready)

    def _read_available(self) -> str:
        """Read whatever bytes are available (blocking for at least one)."""
        raw = os.read(sys.stdin.fileno(), 1024)
        if not raw:
            raise EOFError("stdin closed")
        return self._decoder.decode(raw)

    def _raw_write(self, data: str) -> None:
        """Write directly to stdout, bypassing buffering."""
        try:
            sys.stdout.write(data)
            sys.stdout.flush()
        except OSError:
            pass
