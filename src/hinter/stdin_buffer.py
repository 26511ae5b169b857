"""StdinBuffer buffers input and hands out complete key sequences.

Terminal reads can return partial chunks, especially for escape sequences
such as arrow keys.  Without buffering, ``ESC`` followed later by ``[B``
would be misread as an Escape press plus two printable characters.
"""

from __future__ import annotations

from collections import deque

ESC = "\x1b"


def _is_complete_sequence(data: str) -> str:
    """Check if a string is a complete escape sequence or needs more data.

    Returns 'complete', 'incomplete', or 'not-escape'.
    """
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [
    if after_esc.startswith("["):
        return _is_complete_csi_sequence(data)

    # OSC sequences: ESC ]
    if after_esc.startswith("]"):
        if data.endswith(f"{ESC}\\") or data.endswith("\x07"):
            return "complete"
        return "incomplete"

    # SS3 sequences: ESC O
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key sequences: ESC followed by a single character
    return "complete"


def _is_complete_csi_sequence(data: str) -> str:
    if len(data) < 3:
        return "incomplete"

    # Final byte in 0x40-0x7E terminates the sequence
    if 0x40 <= ord(data[-1]) <= 0x7E:
        return "complete"

    return "incomplete"


def extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """Split accumulated buffer into complete sequences.

    Returns (sequences, remainder).  The remainder is a trailing escape
    sequence that may still be waiting for more bytes.
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if remaining.startswith(ESC):
            seq_end = 1
            while seq_end <= len(remaining):
                candidate = remaining[:seq_end]
                if _is_complete_sequence(candidate) == "complete":
                    sequences.append(candidate)
                    pos += seq_end
                    break
                seq_end += 1
            else:
                return sequences, remaining
        else:
            sequences.append(remaining[0])
            pos += 1

    return sequences, ""


class StdinBuffer:
    """Buffers raw input and queues complete sequences.

    Callers feed decoded text with :meth:`process` and take keys one at a
    time with :meth:`pop`.  A lone ``ESC`` stays pending until more data
    arrives or :meth:`flush` is called after the read timeout.
    """

    def __init__(self, *, timeout: float = 0.01) -> None:
        self._buffer: str = ""
        self._ready: deque[str] = deque()
        self.timeout: float = timeout

    def process(self, data: str) -> None:
        """Feed input data into the buffer."""
        self._buffer += data
        sequences, self._buffer = extract_complete_sequences(self._buffer)
        self._ready.extend(sequences)

    def pop(self) -> str | None:
        """Return the next complete sequence, or ``None`` if none is queued."""
        if self._ready:
            return self._ready.popleft()
        return None

    def flush(self) -> list[str]:
        """Queue whatever partial sequence is pending as-is."""
        if not self._buffer:
            return []

        sequences = [self._buffer]
        self._ready.extend(sequences)
        self._buffer = ""
        return sequences

    def has_pending(self) -> bool:
        """Whether a partial escape sequence is waiting for more bytes."""
        return bool(self._buffer)

    def __len__(self) -> int:
        return len(self._ready)

    def clear(self) -> None:
        self._buffer = ""
        self._ready.clear()

    def get_buffer(self) -> str:
        return self._buffer
