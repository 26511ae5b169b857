"""Hinted line editor keybindings manager."""

from __future__ import annotations

from typing import Literal

from hinter.keys import KeyId, matches_key

HintAction = Literal[
    # Selection
    "selectUp",
    "selectDown",
    # Deletion
    "deleteCharBackward",
    # Acceptance
    "submit",
    "acceptHint",
    # Abort
    "interrupt",
]

HintKeybindingsConfig = dict[HintAction, KeyId | list[KeyId]]

DEFAULT_HINT_KEYBINDINGS: dict[HintAction, KeyId | list[KeyId]] = {
    "selectUp": "up",
    "selectDown": "down",
    "deleteCharBackward": "backspace",
    "submit": "enter",
    "acceptHint": "tab",
    "interrupt": "ctrl+c",
}


class HintKeybindingsManager:
    """Maps editor actions to the keys that trigger them."""

    def __init__(self, config: HintKeybindingsConfig | None = None) -> None:
        self._action_to_keys: dict[HintAction, list[KeyId]] = {}
        self._build_maps(config or {})

    def _build_maps(self, config: HintKeybindingsConfig) -> None:
        self._action_to_keys.clear()

        # Start with defaults
        for action, keys in DEFAULT_HINT_KEYBINDINGS.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

        # Override with user config
        for action, keys in config.items():
            key_array = keys if isinstance(keys, list) else [keys]
            self._action_to_keys[action] = list(key_array)

    def matches(self, data: str, action: HintAction) -> bool:
        """Check if input matches a specific action."""
        keys = self._action_to_keys.get(action)
        if not keys:
            return False
        return any(matches_key(data, key) for key in keys)

    def action_for(self, data: str) -> HintAction | None:
        """Return the first action bound to *data*, or ``None``."""
        for action in self._action_to_keys:
            if self.matches(data, action):
                return action
        return None

    def get_keys(self, action: HintAction) -> list[KeyId]:
        """Get keys bound to an action."""
        return self._action_to_keys.get(action, [])

    def set_config(self, config: HintKeybindingsConfig) -> None:
        """Update configuration."""
        self._build_maps(config)


_global_hint_keybindings: HintKeybindingsManager | None = None


def get_hint_keybindings() -> HintKeybindingsManager:
    global _global_hint_keybindings
    if _global_hint_keybindings is None:
        _global_hint_keybindings = HintKeybindingsManager()
    return _global_hint_keybindings


def set_hint_keybindings(manager: HintKeybindingsManager) -> None:
    global _global_hint_keybindings
    _global_hint_keybindings = manager
