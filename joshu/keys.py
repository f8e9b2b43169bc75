"""Key and mouse events, and their textual names in key maps."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum


class KeyKind(Enum):
    """Kinds of keyboard key."""

    CHAR = "Char"
    CTRL = "Ctrl"
    ALT = "Alt"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    BACKSPACE = "Backspace"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    BACKTAB = "BackTab"
    INSERT = "Insert"
    DELETE = "Delete"
    ESC = "Esc"
    F = "F"
    NULL = "Null"


_CHAR_KINDS = frozenset({KeyKind.CHAR, KeyKind.CTRL, KeyKind.ALT})


@dataclass(frozen=True)
class Key:
    """A key press: ``value`` is the character for CHAR/CTRL/ALT, the number for F."""

    kind: KeyKind
    value: str | int | None = None

    def __post_init__(self) -> None:
        if self.kind in _CHAR_KINDS:
            if not isinstance(self.value, str) or len(self.value) != 1:
                raise ValueError(f"{self.kind.value} key needs a single character")
        elif self.kind is KeyKind.F:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValueError("function key needs an integer number")
        elif self.value is not None:
            raise ValueError(f"{self.kind.value} key takes no value")


class MouseButton(Enum):
    """Mouse buttons and wheel directions."""

    LEFT = "Left"
    RIGHT = "Right"
    MIDDLE = "Middle"
    WHEEL_UP = "WheelUp"
    WHEEL_DOWN = "WheelDown"


_MOUSE_ACTIONS = {"press": "Press", "release": "Release", "hold": "Hold"}


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event; ``action`` is ``press``, ``release`` or ``hold``."""

    action: str
    x: int
    y: int
    button: MouseButton | None = None

    def __post_init__(self) -> None:
        if self.action not in _MOUSE_ACTIONS:
            raise ValueError(f"unknown mouse action: {self.action!r}")
        if (self.action == "press") != (self.button is not None):
            raise ValueError("a button is given for, and only for, a press")


@dataclass(frozen=True)
class UnsupportedEvent:
    """A raw input sequence that is neither a known key nor a mouse event."""

    data: bytes


_NAMED_KEYS = {
    "backspace": KeyKind.BACKSPACE,
    "backtab": KeyKind.BACKTAB,
    "arrow_left": KeyKind.LEFT,
    "arrow_right": KeyKind.RIGHT,
    "arrow_up": KeyKind.UP,
    "arrow_down": KeyKind.DOWN,
    "home": KeyKind.HOME,
    "end": KeyKind.END,
    "page_up": KeyKind.PAGE_UP,
    "page_down": KeyKind.PAGE_DOWN,
    "delete": KeyKind.DELETE,
    "insert": KeyKind.INSERT,
    "escape": KeyKind.ESC,
}
_KEY_NAMES = {kind: name for name, kind in _NAMED_KEYS.items()}
_FUNCTION_KEYS = {f"f{n}": n for n in range(1, 13)}

_MOUSE_NAMES = {
    "scroll_up": MouseButton.WHEEL_UP,
    "scroll_down": MouseButton.WHEEL_DOWN,
}

_CHAR_ESCAPES = {"\t": "\\t", "\r": "\\r", "\n": "\\n", "'": "\\'", "\\": "\\\\", "\0": "\\0"}


def str_to_event(s: str) -> Key | MouseEvent | None:
    """Parse a key-map name into a key or mouse event, or None if unknown."""
    key = str_to_key(s)
    if key is not None:
        return key
    return str_to_mouse(s)


def str_to_key(s: str) -> Key | None:
    """Parse a key name such as ``ctrl+a``, ``f5`` or ``q``; None if unknown."""
    if not s:
        return None
    if s in _NAMED_KEYS:
        return Key(_NAMED_KEYS[s])
    if s in _FUNCTION_KEYS:
        return Key(KeyKind.F, _FUNCTION_KEYS[s])
    for prefix, kind in (("ctrl+", KeyKind.CTRL), ("alt+", KeyKind.ALT)):
        if s.startswith(prefix):
            rest = s[len(prefix):]
            return Key(kind, rest[0]) if rest else None
    if len(s.encode("utf-8")) == 1:
        return Key(KeyKind.CHAR, s)
    return None


def str_to_mouse(s: str) -> MouseEvent | None:
    """Parse ``scroll_up`` or ``scroll_down``; None for anything else."""
    button = _MOUSE_NAMES.get(s)
    return MouseEvent("press", 0, 0, button) if button is not None else None


def _char_debug(ch: str) -> str:
    if ch in _CHAR_ESCAPES:
        body = _CHAR_ESCAPES[ch]
    elif not ch.isprintable() or unicodedata.combining(ch):
        body = f"\\u{{{ord(ch):x}}}"
    else:
        body = ch
    return f"'{body}'"


def key_to_string(key: Key) -> str:
    """Return the key-map name of ``key``."""
    kind = key.kind
    if kind is KeyKind.CHAR:
        return str(key.value)
    if kind is KeyKind.CTRL:
        return f"ctrl+{key.value}"
    if kind is KeyKind.F:
        return f"f{key.value}"
    if kind in _KEY_NAMES:
        return _KEY_NAMES[kind]
    if kind is KeyKind.ALT:
        return f"Alt({_char_debug(str(key.value))})"
    return kind.value


def mouse_to_string(event: MouseEvent) -> str:
    """Return a debug-style description of a mouse event."""
    action = _MOUSE_ACTIONS[event.action]
    if event.button is not None:
        return f"{action}({event.button.value}, {event.x}, {event.y})"
    return f"{action}({event.x}, {event.y})"


def event_to_string(event: Key | MouseEvent | UnsupportedEvent) -> str:
    """Return the textual form of any input event."""
    if isinstance(event, Key):
        return key_to_string(event)
    if isinstance(event, MouseEvent):
        return mouse_to_string(event)
    if isinstance(event, UnsupportedEvent):
        return str(list(event.data))
    raise TypeError(f"not an input event: {event!r}")