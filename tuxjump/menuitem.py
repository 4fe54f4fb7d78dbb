"""Menu entries and the key codes the menus react to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum, auto
from typing import Any, List, Optional

__all__ = ["Key", "MenuItemKind", "MenuItem", "key_name", "FLICK_CURSOR_TIME"]

FLICK_CURSOR_TIME = 500
"""Milliseconds between blinks of the text-input cursor."""


class Key(IntEnum):
    """Keyboard codes handled by the menus."""

    BACKSPACE = 8
    RETURN = 13
    ESCAPE = 27
    SPACE = 32
    SLASH = 47
    K_0 = 48
    K_9 = 57
    A = 97
    Z = 122
    DELETE = 127
    UP = 273
    DOWN = 274
    RIGHT = 275
    LEFT = 276
    RSHIFT = 303
    LSHIFT = 304
    RCTRL = 305
    LCTRL = 306
    RALT = 307
    LALT = 308


class MenuItemKind(Enum):
    """Kinds of menu entries."""

    ACTION = auto()
    GOTO = auto()
    TOGGLE = auto()
    BACK = auto()
    DEACTIVE = auto()
    TEXTFIELD = auto()
    NUMFIELD = auto()
    CONTROLFIELD = auto()
    STRINGSELECT = auto()
    LABEL = auto()
    HL = auto()


_KEY_NAMES = {
    Key.UP: "Up cursor",
    Key.DOWN: "Down cursor",
    Key.LEFT: "Left cursor",
    Key.RIGHT: "Right cursor",
    Key.RETURN: "Return",
    Key.SPACE: "Space",
    Key.RSHIFT: "Right Shift",
    Key.LSHIFT: "Left Shift",
    Key.RCTRL: "Right Control",
    Key.LCTRL: "Left Control",
    Key.RALT: "Right Alt",
    Key.LALT: "Left Alt",
}


def key_name(key: int) -> str:
    """Return the label shown for ``key`` in a key-binding field."""
    try:
        return _KEY_NAMES[Key(key)]
    except (ValueError, KeyError):
        return "%d" % int(key)


@dataclass
class MenuItem:
    """One entry of a menu.

    ``int_ref`` is an object with a mutable ``value`` attribute; a
    control field stores the chosen key code there. ``choices`` and
    ``choice_index`` hold the options of a string-select entry.
    """

    kind: MenuItemKind
    text: str
    toggled: bool = False
    target_menu: Any = None
    id: int = -1
    int_ref: Any = None
    input: str = ""
    choices: List[str] = field(default_factory=list)
    choice_index: int = 0
    input_flickering: bool = False
    flicker_deadline: float = float(FLICK_CURSOR_TIME)

    def __post_init__(self) -> None:
        self.toggled = bool(self.toggled) if self.kind is MenuItemKind.TOGGLE else False

    @property
    def active_choice(self) -> str:
        """The selected option of a string-select entry, or an empty string."""
        if not self.choices:
            return ""
        return self.choices[self.choice_index]

    def change_text(self, text: Optional[str]) -> None:
        """Replace the label; ``None`` leaves it unchanged."""
        if text is not None:
            self.text = text

    def change_input(self, text: str) -> None:
        """Replace the input text."""
        self.input = text

    def input_with_symbol(self, active: bool, now: float) -> str:
        """Return the input followed by a blinking cursor.

        ``now`` is the current time in milliseconds. An inactive entry
        always shows the cursor; an active one toggles it every
        ``FLICK_CURSOR_TIME`` milliseconds.
        """
        if not active:
            self.input_flickering = True
        elif self.flicker_deadline - now < 0:
            self.input_flickering = not self.input_flickering
            self.flicker_deadline = now + FLICK_CURSOR_TIME
        return self.input + ("_" if self.input_flickering else " ")