"""Keyboard input handling using curtsies-style key names."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    ALT = "alt"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'g', 'left', 'page_down')
    raw: str  # The key string as delivered by the terminal


# Curtsies spells some keys differently from the names commands use
_SPECIAL_ALIASES = {
    'pageup': 'page_up',
    'page_up': 'page_up',
    'pagedown': 'page_down',
    'page_down': 'page_down',
    'esc': 'escape',
    'escape': 'escape',
    'return': 'enter',
}

_SPECIALS = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert', 'escape',
}


class KeyboardHandler:
    """Turns raw key strings from the terminal into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Read the next key from the terminal and parse it."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name (or a bare character) into a KeyEvent.

        Args:
            key: Key string such as '<PAGEDOWN>', '<Ctrl-o>', 'q' or '\\x0f'.
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o in (10, 13):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if o == 27:
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)
            if o in (8, 127):
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            if o == 9:
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if 1 <= o <= 26:
                return KeyEvent(KeyType.CTRL, chr(ord('a') + o - 1), key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1]
        # Keep the case of single-character bases such as '<Ctrl-o>'
        parts = name.replace('+', '-').split('-')
        mods = {p.lower() for p in parts[:-1]}
        base = parts[-1] if len(parts[-1]) == 1 else parts[-1].lower()
        if not base:
            # '<Ctrl-->' style tokens end with the separator itself
            base = '-'

        if base in ('space', 'spacebar', 'spc') and not mods:
            return KeyEvent(KeyType.REGULAR, ' ', key_str)
        if base == 'tab' and not mods:
            return KeyEvent(KeyType.REGULAR, '\t', key_str)

        base = _SPECIAL_ALIASES.get(base, base)

        if 'ctrl' in mods and len(base) == 1:
            if base.lower() in ('j', 'm'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if base.lower() == 'h':
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            return KeyEvent(KeyType.CTRL, base.lower(), key_str)
        if mods & {'alt', 'meta', 'esc'}:
            return KeyEvent(KeyType.ALT, base, key_str)
        if base in _SPECIALS:
            return KeyEvent(KeyType.SPECIAL, base, key_str)
        # Function keys and anything unrecognised keep their lowercased name
        return KeyEvent(KeyType.SPECIAL, base.lower(), key_str)
