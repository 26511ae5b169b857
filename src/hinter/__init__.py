"""hinter: terminal line input with live autocomplete hints."""

# Colors
from hinter.colors import Color, ColorName, parse_color

# Options
from hinter.config import DEFAULT_INPUT_PATTERN, HintOptions

# Editing session
from hinter.editor import HintedLineEditor, HintState, read_hinted_line

# Keybindings
from hinter.keybindings import (
    DEFAULT_HINT_KEYBINDINGS,
    HintAction,
    HintKeybindingsManager,
    get_hint_keybindings,
    set_hint_keybindings,
)

# Keyboard input handling
from hinter.keys import Key, KeyId, matches_key, parse_key

# Matching and ranking
from hinter.matcher import MatchDescriptor, match
from hinter.ranker import DEFAULT_LIMIT, rank

# Rendering
from hinter.render import HintRenderer

# Input buffering
from hinter.stdin_buffer import StdinBuffer

# Terminal interface and implementations
from hinter.terminal import ProcessTerminal, Terminal

# Utilities
from hinter.utils import visible_width

__all__ = [
    # Colors
    "Color",
    "ColorName",
    "parse_color",
    # Options
    "DEFAULT_INPUT_PATTERN",
    "HintOptions",
    # Editing session
    "HintState",
    "HintedLineEditor",
    "read_hinted_line",
    # Keybindings
    "DEFAULT_HINT_KEYBINDINGS",
    "HintAction",
    "HintKeybindingsManager",
    "get_hint_keybindings",
    "set_hint_keybindings",
    # Keys
    "Key",
    "KeyId",
    "matches_key",
    "parse_key",
    # Matching and ranking
    "DEFAULT_LIMIT",
    "MatchDescriptor",
    "match",
    "rank",
    # Rendering
    "HintRenderer",
    # Stdin buffer
    "StdinBuffer",
    # Terminal
    "ProcessTerminal",
    "Terminal",
    # Utilities
    "visible_width",
]
