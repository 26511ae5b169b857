"""Keyboard input decoding for the hinted line editor.

Turns one raw terminal key sequence (as returned by
``Terminal.read_key``) into a key identifier such as ``"enter"``,
``"down"`` or ``"a"``, and checks raw input against a named key with
``matches_key``.  Only the legacy (non-Kitty) encodings are understood;
the editor never enables extended keyboard protocols.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Type alias
# ---------------------------------------------------------------------------

KeyId = str


# ---------------------------------------------------------------------------
# Key helper object
# ---------------------------------------------------------------------------


class Key:
    """Named key constants and modifier combinators."""

    escape = "escape"
    enter = "enter"
    tab = "tab"
    space = "space"
    backspace = "backspace"
    delete = "delete"
    insert = "insert"
    home = "home"
    end = "end"
    page_up = "pageUp"
    page_down = "pageDown"
    up = "up"
    down = "down"
    left = "left"
    right = "right"

    @staticmethod
    def ctrl(key: str) -> str:
        return f"ctrl+{key}"

    @staticmethod
    def shift(key: str) -> str:
        return f"shift+{key}"

    @staticmethod
    def alt(key: str) -> str:
        return f"alt+{key}"


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Legacy escape sequences -> key names
LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
}

LEGACY_SHIFT_SEQUENCES: dict[str, str] = {
    "\x1b[1;2A": "up",
    "\x1b[1;2B": "down",
    "\x1b[1;2C": "right",
    "\x1b[1;2D": "left",
    "\x1b[Z": "tab",
}

LEGACY_ALT_SEQUENCES: dict[str, str] = {
    "\x1b[1;3A": "up",
    "\x1b[1;3B": "down",
    "\x1b[1;3C": "right",
    "\x1b[1;3D": "left",
}

LEGACY_CTRL_SEQUENCES: dict[str, str] = {
    "\x1b[1;5A": "up",
    "\x1b[1;5B": "down",
    "\x1b[1;5C": "right",
    "\x1b[1;5D": "left",
}

_MODIFIER_ORDER = ("ctrl", "shift", "alt")

_KEY_ALIASES: dict[str, str] = {
    "esc": "escape",
    "return": "enter",
    "pageup": "pageUp",
    "pagedown": "pageDown",
}


# ---------------------------------------------------------------------------
# parse_key_id -- normalise a key identifier
# ---------------------------------------------------------------------------


def parse_key_id(key_id: str) -> str | None:
    """Normalise *key_id* so it compares equal to ``parse_key`` output.

    Modifiers are reordered to ``ctrl+shift+alt+`` and aliases such as
    ``"esc"`` are resolved.  Returns ``None`` for an empty identifier.
    """
    if not key_id:
        return None

    # A bare "+" is the plus key, not a separator
    if key_id == "+" or key_id.endswith("++"):
        parts = key_id[:-2].split("+") if key_id != "+" else []
        key = "+"
    else:
        *parts, key = key_id.split("+")

    modifiers = {p.lower() for p in parts if p}
    if not modifiers <= set(_MODIFIER_ORDER):
        return None

    if len(key) > 1:
        key = _KEY_ALIASES.get(key.lower(), key.lower())

    prefix = "".join(f"{m}+" for m in _MODIFIER_ORDER if m in modifiers)
    return prefix + key


# ---------------------------------------------------------------------------
# parse_key -- determine what key was pressed from raw input
# ---------------------------------------------------------------------------


def parse_key(data: str) -> str | None:
    """Parse raw terminal input and return the key identifier, or ``None``.

    The returned string uses the same format as ``matches_key`` expects:
    e.g. ``"a"``, ``"ctrl+a"``, ``"shift+tab"``, ``"down"``.
    """
    if not data:
        return None

    # --- Legacy escape sequences ---
    for seq_dict, mod_prefix in [
        (LEGACY_CTRL_SEQUENCES, "ctrl+"),
        (LEGACY_SHIFT_SEQUENCES, "shift+"),
        (LEGACY_ALT_SEQUENCES, "alt+"),
        (LEGACY_KEY_SEQUENCES, ""),
    ]:
        if data in seq_dict:
            return mod_prefix + seq_dict[data]

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return "escape"
    if data == "\r" or data == "\n":
        return "enter"
    if data == "\t":
        return "tab"
    if data == " ":
        return "space"
    if data == "\x7f" or data == "\x08":
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Alt + key (ESC prefix) ---
    if len(data) == 2 and data[0] == "\x1b":
        ch = data[1]
        if ch == "\r" or ch == "\n":
            return "alt+enter"
        if ch == "\x7f" or ch == "\x08":
            return "alt+backspace"
        if ch.isprintable():
            return "alt+" + ch.lower()

    # --- Plain printable character ---
    if len(data) == 1 and data.isprintable():
        return data

    return None


def matches_key(data: str, key_id: str) -> bool:
    """Return ``True`` if *data* (raw terminal input) matches *key_id*.

    *key_id* examples: ``"a"``, ``"ctrl+a"``, ``"shift+tab"``, ``"esc"``.
    """
    expected = parse_key_id(key_id)
    if expected is None:
        return False
    return parse_key(data) == expected


def printable_char(data: str) -> str | None:
    """Return *data* when it is a single printable character, else ``None``.

    Space is included even though ``parse_key`` names it ``"space"``.
    """
    if len(data) == 1 and data.isprintable():
        return data
    return None
