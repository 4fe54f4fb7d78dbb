"""Menus: a list of entries, keyboard handling and a stack of open menus."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Any, List, Optional

from tuxjump.menuitem import Key, MenuItem, MenuItemKind

__all__ = ["MenuAction", "Menu", "MenuStack"]

logger = logging.getLogger(__name__)

ITEM_HEIGHT = 24
FONT_WIDTH = 16

_SKIPPED_KINDS = (MenuItemKind.DEACTIVE, MenuItemKind.LABEL, MenuItemKind.HL)
_FIELD_KINDS = (MenuItemKind.TEXTFIELD, MenuItemKind.NUMFIELD)


class MenuAction(IntEnum):
    """Pending action of a menu, set by key handling and run by ``action``."""

    NONE = -1
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    HIT = 4
    INPUT = 5
    REMOVE = 6


class MenuStack:
    """The currently shown menu and the menus to return to."""

    def __init__(self) -> None:
        self.current: Optional["Menu"] = None
        self.history: List["Menu"] = []

    def set_current(self, menu: Optional["Menu"]) -> None:
        """Show ``menu`` and forget the history; ``None`` hides all menus."""
        self.history.clear()
        self.current = menu

    def push(self, menu: "Menu") -> None:
        """Show ``menu``, remembering the current one."""
        if self.current is not None:
            self.history.append(self.current)
        self.current = menu

    def pop(self) -> None:
        """Return to the previous menu, or hide menus if there is none."""
        self.current = self.history.pop() if self.history else None


class Menu:
    """A vertical list of menu entries with a cursor."""

    def __init__(
        self,
        screen_width: int = 320,
        screen_height: int = 240,
        stack: Optional[MenuStack] = None,
    ) -> None:
        self.items: List[MenuItem] = []
        self.stack = stack
        self.hit_item = -1
        self.active_item = 0
        self.arrange_left = False
        self.pos_x = screen_width // 2
        self.pos_y = screen_height // 2
        self._menuaction = MenuAction.NONE
        self._delete_character = 0
        self._input_char = ""

    def additem(
        self,
        kind: MenuItemKind,
        text: str,
        toggled: Any = False,
        target_menu: Optional["Menu"] = None,
        id: int = -1,
        int_ref: Any = None,
    ) -> MenuItem:
        """Append a new entry and return it."""
        item = MenuItem(
            kind=kind,
            text=text,
            toggled=bool(toggled),
            target_menu=target_menu,
            id=id,
            int_ref=int_ref,
        )
        self.items.append(item)
        return item

    def clear(self) -> None:
        """Remove all entries."""
        self.items.clear()

    def _has_selectable(self) -> bool:
        return any(item.kind not in _SKIPPED_KINDS for item in self.items)

    def _move(self, step: int) -> None:
        last = len(self.items) - 1
        if step < 0:
            self.active_item = self.active_item - 1 if self.active_item > 0 else last
        else:
            self.active_item = self.active_item + 1 if self.active_item < last else 0

    def _hit(self) -> None:
        self.hit_item = self.active_item
        item = self.items[self.active_item]
        if item.kind is MenuItemKind.GOTO:
            if item.target_menu is not None:
                if self.stack is not None:
                    self.stack.push(item.target_menu)
            else:
                logger.warning("menu entry %r has no target menu", item.text)
        elif item.kind is MenuItemKind.TOGGLE:
            item.toggled = not item.toggled
        elif item.kind is MenuItemKind.ACTION:
            if self.stack is not None:
                self.stack.set_current(None)
            item.toggled = True
        elif item.kind in _FIELD_KINDS:
            self._menuaction = MenuAction.DOWN
            self.action()
        elif item.kind is MenuItemKind.BACK:
            if self.stack is not None:
                self.stack.pop()

    def action(self) -> None:
        """Carry out the pending action and skip entries that cannot be selected."""
        self.hit_item = -1
        if not self.items:
            self._menuaction = MenuAction.NONE
            return

        act = self._menuaction
        item = self.items[self.active_item]
        if act is MenuAction.UP:
            self._move(-1)
        elif act is MenuAction.DOWN:
            self._move(1)
        elif act is MenuAction.LEFT:
            if item.kind is MenuItemKind.STRINGSELECT and item.choices:
                count = len(item.choices)
                item.choice_index = item.choice_index - 1 if item.choice_index > 0 else count - 1
        elif act is MenuAction.RIGHT:
            if item.kind is MenuItemKind.STRINGSELECT and item.choices:
                count = len(item.choices)
                item.choice_index = item.choice_index + 1 if item.choice_index < count - 1 else 0
        elif act is MenuAction.HIT:
            self._hit()
        elif act is MenuAction.REMOVE:
            if item.kind in _FIELD_KINDS:
                # Pending deletions collapse into removing a single character.
                if self._delete_character > 0 and item.input:
                    item.input = item.input[:-1]
                self._delete_character = 0
        elif act is MenuAction.INPUT:
            if item.kind is MenuItemKind.TEXTFIELD or (
                item.kind is MenuItemKind.NUMFIELD and "0" <= self._input_char <= "9"
            ):
                item.input += self._input_char

        new_item = self.items[self.active_item]
        if new_item.kind in _SKIPPED_KINDS:
            if self._menuaction not in (MenuAction.UP, MenuAction.DOWN):
                self._menuaction = MenuAction.DOWN
            if len(self.items) > 1 and self._has_selectable():
                self.action()

        self._menuaction = MenuAction.NONE

    def check(self) -> int:
        """Return the id of the entry hit by the last ``action``, or -1."""
        if self.hit_item != -1:
            return self.items[self.hit_item].id
        return -1

    def get_item_by_id(self, id: int) -> MenuItem:
        """Return the first entry with ``id``; raise ``KeyError`` if none."""
        for item in self.items:
            if item.id == id:
                return item
        raise KeyError(id)

    def active_item_id(self) -> int:
        """Return the id of the entry under the cursor."""
        return self.items[self.active_item].id

    def is_toggled(self, id: int) -> bool:
        """Return whether the entry with ``id`` is toggled on."""
        return bool(self.get_item_by_id(id).toggled)

    def width(self) -> int:
        """Return the pixel width needed by the widest entry."""
        menu_width = 0
        for item in self.items:
            w = len(item.text) + len(item.input) + 1 + len(item.active_choice)
            if w > menu_width:
                menu_width = w
                if item.kind is MenuItemKind.TOGGLE:
                    menu_width += 2
        return menu_width * FONT_WIDTH + ITEM_HEIGHT

    def height(self) -> int:
        """Return the pixel height of all entries."""
        return len(self.items) * ITEM_HEIGHT

    def set_pos(self, x: int, y: int, rw: float = 0.0, rh: float = 0.0) -> None:
        """Place the menu centre at ``(x, y)`` shifted by fractions of its size."""
        self.pos_x = x + int(float(self.width()) * rw)
        self.pos_y = y + int(float(self.height()) * rh)

    def handle_key(self, key: int, char: str = "") -> None:
        """Translate a key press, with the character it types, into an action."""
        if char and ord(char[0]) >= 0x80:
            char = ""
        char = char[:1]

        if self.items:
            item = self.items[self.active_item]
            if item.kind is MenuItemKind.CONTROLFIELD:
                if key == Key.ESCAPE:
                    if self.stack is not None:
                        self.stack.pop()
                    return
                if item.int_ref is not None:
                    item.int_ref.value = key
                self._menuaction = MenuAction.DOWN
                return
        else:
            item = None

        if key == Key.UP:
            self._menuaction = MenuAction.UP
        elif key == Key.DOWN:
            self._menuaction = MenuAction.DOWN
        elif key == Key.LEFT:
            self._menuaction = MenuAction.LEFT
        elif key == Key.RIGHT:
            self._menuaction = MenuAction.RIGHT
        elif key == Key.SPACE and item is not None and item.kind is MenuItemKind.TEXTFIELD:
            self._menuaction = MenuAction.INPUT
            self._input_char = " "
        elif key in (Key.SPACE, Key.RETURN):
            self._menuaction = MenuAction.HIT
        elif key in (Key.DELETE, Key.BACKSPACE):
            self._menuaction = MenuAction.REMOVE
            self._delete_character += 1
        elif key == Key.ESCAPE:
            if self.stack is not None:
                self.stack.pop()
        elif (
            Key.K_0 <= key <= Key.K_9
            or Key.A <= key <= Key.Z
            or Key.SPACE <= key <= Key.SLASH
        ):
            self._menuaction = MenuAction.INPUT
            self._input_char = char
        else:
            self._input_char = ""