"""The game's standard set of menus."""

from __future__ import annotations

from dataclasses import dataclass

from tuxjump.menu import Menu, MenuStack
from tuxjump.menuitem import MenuItemKind

__all__ = [
    "GameMenus",
    "build_menus",
    "MNID_STARTGAME",
    "MNID_CONTRIB",
    "MNID_OPTIONMENU",
    "MNID_LEVELEDITOR",
    "MNID_CREDITS",
    "MNID_QUITMAINMENU",
    "MNID_SHOWFPS",
    "MNID_CONTINUE",
    "MNID_ABORTLEVEL",
    "MNID_RETURNWORLDMAP",
    "MNID_QUITWORLDMAP",
]

MNID_STARTGAME = 0
MNID_CONTRIB = 1
MNID_OPTIONMENU = 2
MNID_LEVELEDITOR = 3
MNID_CREDITS = 4
MNID_QUITMAINMENU = 5

MNID_OPENGL = 0
MNID_FULLSCREEN = 1
MNID_SHOWFPS = 2

MNID_CONTINUE = 0
MNID_ABORTLEVEL = 1

MNID_RETURNWORLDMAP = 0
MNID_QUITWORLDMAP = 1

SAVE_SLOTS = 5


@dataclass
class GameMenus:
    """All menus of the game, sharing one menu stack."""

    stack: MenuStack
    main: Menu
    options: Menu
    options_keys: Menu
    options_joystick: Menu
    load_game: Menu
    save_game: Menu
    game: Menu
    highscore: Menu
    contrib: Menu
    contrib_subset: Menu
    worldmap: Menu


def _slot_menu(menu: Menu, title: str) -> None:
    menu.additem(MenuItemKind.LABEL, title)
    menu.additem(MenuItemKind.HL, "")
    for slot in range(1, SAVE_SLOTS + 1):
        menu.additem(MenuItemKind.DEACTIVE, f"Slot {slot}", 0, None, slot)
    menu.additem(MenuItemKind.HL, "")
    menu.additem(MenuItemKind.BACK, "Back")


def _pause_menu(menu: Menu, options: Menu, continue_id: int, quit_text: str, quit_id: int) -> None:
    menu.additem(MenuItemKind.LABEL, "Pause")
    menu.additem(MenuItemKind.HL, "")
    menu.additem(MenuItemKind.ACTION, "Continue", 0, None, continue_id)
    menu.additem(MenuItemKind.GOTO, "Options", 0, options)
    menu.additem(MenuItemKind.HL, "")
    menu.additem(MenuItemKind.ACTION, quit_text, 0, None, quit_id)


def build_menus(show_fps: bool, screen_width: int = 320, screen_height: int = 240) -> GameMenus:
    """Create and fill the game's menus."""
    stack = MenuStack()

    def new() -> Menu:
        return Menu(screen_width, screen_height, stack)

    menus = GameMenus(
        stack=stack,
        main=new(),
        options=new(),
        options_keys=new(),
        options_joystick=new(),
        load_game=new(),
        save_game=new(),
        game=new(),
        highscore=new(),
        contrib=new(),
        contrib_subset=new(),
        worldmap=new(),
    )

    main = menus.main
    main.set_pos(screen_width // 2, 150)
    main.additem(MenuItemKind.GOTO, "Start Game", 0, menus.load_game, MNID_STARTGAME)
    main.additem(MenuItemKind.GOTO, "Bonus Levels", 0, menus.contrib, MNID_CONTRIB)
    main.additem(MenuItemKind.GOTO, "Options", 0, menus.options, MNID_OPTIONMENU)
    main.additem(MenuItemKind.ACTION, "Credits", 0, None, MNID_CREDITS)
    main.additem(MenuItemKind.ACTION, "Quit", 0, None, MNID_QUITMAINMENU)

    options = menus.options
    options.additem(MenuItemKind.LABEL, "Options")
    options.additem(MenuItemKind.HL, "")
    options.additem(MenuItemKind.TOGGLE, "Show FPS  ", show_fps, None, MNID_SHOWFPS)
    options.additem(MenuItemKind.GOTO, "Keyboard Setup", 0, menus.options_keys)
    options.additem(MenuItemKind.HL, "")
    options.additem(MenuItemKind.BACK, "Back")

    menus.options_keys.additem(MenuItemKind.LABEL, "Key Setup")
    menus.options_keys.additem(MenuItemKind.HL, "")

    _slot_menu(menus.load_game, "Start Game")
    _slot_menu(menus.save_game, "Save Game")

    _pause_menu(menus.game, options, MNID_CONTINUE, "Abort Level", MNID_ABORTLEVEL)
    _pause_menu(menus.worldmap, options, MNID_RETURNWORLDMAP, "Quit Game", MNID_QUITWORLDMAP)

    menus.highscore.additem(MenuItemKind.TEXTFIELD, "Enter your name:")

    return menus