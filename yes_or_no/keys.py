"""
Key events and the key-to-action mapping behind the prompt.

The resolver is a pure function so it can be exercised with synthetic keys,
independently of any real terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag, auto


class Selection(Enum):
    """The currently highlighted answer."""

    YES = "yes"
    NO = "no"

    @classmethod
    def from_bool(cls, value: bool) -> Selection:
        return cls.YES if value else cls.NO

    def as_bool(self) -> bool:
        return self is Selection.YES


class KeyCode(Enum):
    """Named (non-character) keys reported by the terminal layer."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"
    ENTER = "enter"
    ESCAPE = "escape"
    BACKSPACE = "backspace"
    TAB = "tab"
    OTHER = "other"


class KeyModifiers(Flag):
    """Modifier keys held during a key press."""

    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


class KeyEventKind(Enum):
    PRESS = "press"
    RELEASE = "release"


# A key is either a named key or the single character that was typed.
Key = KeyCode | str

INTERRUPT_MODIFIER = KeyModifiers.CONTROL
INTERRUPT_CHAR = "c"


@dataclass(frozen=True)
class InputEvent:
    """Base class for all input events; ``raw`` is the text read from the terminal."""

    raw: str = ""


@dataclass(frozen=True)
class KeyEvent(InputEvent):
    """A keyboard event."""

    key: Key = KeyCode.OTHER
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS


@dataclass(frozen=True)
class KeyAction:
    """Base class for what the prompt loop must do after a key press."""


@dataclass(frozen=True)
class Confirm(KeyAction):
    """Finish the prompt with ``selection``."""

    selection: Selection


@dataclass(frozen=True)
class Cancel(KeyAction):
    """Abandon the prompt without an answer."""


@dataclass(frozen=True)
class Continue(KeyAction):
    """Keep prompting with ``selection`` highlighted."""

    selection: Selection


def resolve(key: Key, modifiers: KeyModifiers, current: Selection) -> KeyAction:
    """
    Map a key press to the next prompt action.

    Args:
        key: Named key or typed character
        modifiers: Modifiers held with the key
        current: Selection highlighted before the key press

    Returns:
        Confirm, Cancel or Continue. Never raises.
    """
    if key == INTERRUPT_CHAR and INTERRUPT_MODIFIER in modifiers:
        return Cancel()
    if key is KeyCode.LEFT:
        return Continue(Selection.YES)
    if key is KeyCode.RIGHT:
        return Continue(Selection.NO)
    if key is KeyCode.ENTER:
        return Confirm(current)
    if key is KeyCode.ESCAPE:
        # Escape always answers "No", whatever is highlighted.
        return Confirm(Selection.NO)
    return Continue(current)
