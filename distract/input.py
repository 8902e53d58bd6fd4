"""Keyboard state tracking across frames."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Callable

KEY_COUNT = 101
UNKNOWN_KEY = -1


class KeyEventKind(enum.Enum):
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass
class KeyState:
    """State of one key: held now, held last frame, and edge flags."""

    is_being_pressed: bool = False
    is_pressed: bool = False
    is_being_released: bool = False
    was_pressed: bool = False


class Input:
    """Per-key state for every key code."""

    def __init__(self, key_count: int = KEY_COUNT) -> None:
        self.keys = [KeyState() for _ in range(key_count)]

    def on_key_event(self, kind: KeyEventKind, code: int) -> None:
        """Record a key press or release event."""
        if code == UNKNOWN_KEY:
            return
        key = self.keys[code]
        if kind is KeyEventKind.PRESSED and not key.was_pressed:
            key.is_being_pressed = True
            key.is_being_released = False
            key.is_pressed = True
            key.was_pressed = False
        if kind is KeyEventKind.RELEASED and key.was_pressed:
            key.is_being_pressed = False
            key.is_being_released = True
            key.is_pressed = False
            key.was_pressed = True

    def update(self, is_pressed: Callable[[int], bool]) -> None:
        """Advance one frame, polling each key with ``is_pressed(code)``."""
        for code, key in enumerate(self.keys):
            key.is_pressed = bool(is_pressed(code))
            if not key.was_pressed and key.is_pressed:
                key.is_being_pressed = False
                key.was_pressed = True
            if key.was_pressed and not key.is_pressed:
                key.is_being_released = False
                key.was_pressed = False

    def reset(self, is_pressed: Callable[[int], bool]) -> None:
        """Forget edges and history, keeping only what is held right now."""
        for code, key in enumerate(self.keys):
            key.is_being_pressed = False
            key.is_being_released = False
            key.is_pressed = bool(is_pressed(code))
            key.was_pressed = False

    def key(self, code: int) -> KeyState:
        """A copy of the state of a key; the unknown key is never pressed."""
        if code == UNKNOWN_KEY:
            return KeyState()
        return dataclasses.replace(self.keys[code])