"""The slide-out side menu with its actions and theme."""

from __future__ import annotations

import enum
from collections import defaultdict
from dataclasses import dataclass
from typing import Callable

MENU_HEIGHT = 800
OPEN_WIDTH = 300
SLIDE_DURATION_MS = 500
CLOSE_ICON_SIZE = 30

DEFAULT_BACKGROUND = (219, 211, 233)
LIGHT_CLOSE_ICON = "icons/cancel_wh.png"
DARK_CLOSE_ICON = "icons/cancel_bl.png"

_CLOSE_STYLE = f"border-radius: {CLOSE_ICON_SIZE // 2}px; border: none;"
_DEFAULT_STYLES = {
    "calendar": (
        "QPushButton {background: transparent;border: none;color: black;"
        "font-size: 16px;}QPushButton:hover {color: #EAE2F9;"
        "text-decoration: underline;}"
    ),
    "history": (
        "QPushButton {background: transparent;border: none;color: black;"
        "font-size: 16px;}QPushButton:hover {color: blue;"
        "text-decoration: underline;}"
    ),
    "icon": (
        "QPushButton {background: transparent;border: none;color: black;"
        "font-size: 16px;}"
    ),
    "logout": (
        "QPushButton {background: transparent;border: none;color: red;"
        "font-size: 16px;}"
    ),
}


class MenuAction(enum.Enum):
    """An entry of the side menu, valued by its label."""

    CALENDAR = "Visiting calendar"
    HISTORY = "Show tasks of the past days"
    CHANGE_ICON = "Change profile icon"
    LOGOUT = "log out"


_STYLE_KEYS = {
    MenuAction.CALENDAR: "calendar",
    MenuAction.HISTORY: "history",
    MenuAction.CHANGE_ICON: "icon",
    MenuAction.LOGOUT: "logout",
}


@dataclass(frozen=True)
class Animation:
    """A size change of the menu from ``start`` to ``end`` (width, height)."""

    start: tuple[int, int]
    end: tuple[int, int]
    duration_ms: int = SLIDE_DURATION_MS


class SideMenu:
    """A menu panel that slides in over its parent window."""

    def __init__(self, background: tuple[int, int, int] = DEFAULT_BACKGROUND) -> None:
        self.background = background
        self.width = 0
        self.height = MENU_HEIGHT
        self.position = (0, 0)
        self.visible = False
        self.close_icon = LIGHT_CLOSE_ICON
        self.close_style = "QPushButton {" + _CLOSE_STYLE + "}"
        self.styles = {action: _DEFAULT_STYLES[key] for action, key in _STYLE_KEYS.items()}
        self._handlers: dict[MenuAction, list[Callable[[], None]]] = defaultdict(list)

    def connect(self, action: MenuAction, handler: Callable[[], None]) -> None:
        """Call ``handler`` whenever ``action`` is selected."""
        self._handlers[action].append(handler)

    def select(self, action: MenuAction) -> None:
        """Announce that ``action`` was chosen to every connected handler."""
        for handler in self._handlers[action]:
            handler()

    def apply_theme(self, dark: bool, color: str) -> None:
        """Restyle the close button and the navigation entries."""
        text_color = "#fff" if dark else "#000"
        self.close_icon = DARK_CLOSE_ICON if dark else LIGHT_CLOSE_ICON
        base = f"background-color: transparent; border: none; font-size: 16px; color: {text_color};"
        self.styles[MenuAction.CALENDAR] = base + color
        self.styles[MenuAction.HISTORY] = base[:-1] + "; margin-top: 30px;" + color
        self.close_style = _CLOSE_STYLE + color

    def slide_in(self, x: int, y: int) -> Animation:
        """Show the menu at the parent's position and widen it to full width."""
        self.position = (x, y)
        self.visible = True
        animation = Animation(start=(0, self.height), end=(OPEN_WIDTH, self.height))
        self.width = OPEN_WIDTH
        return animation

    def slide_out(self) -> Animation:
        """Narrow the menu to nothing and close it."""
        animation = Animation(start=(self.width, self.height), end=(0, self.height))
        self.width = 0
        self.visible = False
        return animation