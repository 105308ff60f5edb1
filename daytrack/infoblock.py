"""A summary block of one day's tasks with completion counts."""

from __future__ import annotations

from dataclasses import dataclass

COMPLETE_MARK = " - complete"
COMPLETE_COLOR = "#077e2d"
PENDING_COLOR = "#e00018"

_ITEM_STYLE = "font-size: 14px; font-weight: 400; max-height: 20px; color: "
_HEADER_STYLE = "font-size: 18px; font-weight: bold; max-height: 20px"
_FRAME_STYLE = (
    "QFrame {"
    "border: 2px solid black;"
    "border-radius: 10px;"
    "background-color: #f0f0f0;"
    "padding: 10px;"
    "}"
)
_FRAME_STYLE_PREFIX = (
    "border: 2px solid black; border-radius: 10px; "
    "background-color: #f0f0f0; padding: 10px; background-color: "
)


@dataclass
class SubItem:
    """One task line shown in a block."""

    text: str
    complete: bool
    style: str

    @classmethod
    def from_line(cls, line: str) -> SubItem:
        complete = COMPLETE_MARK in line
        color = COMPLETE_COLOR if complete else PENDING_COLOR
        dash = line.find("-")
        text = line if dash == -1 else line[:dash]
        return cls(text=text, complete=complete, style=_ITEM_STYLE + color)


class InfoBlock:
    """A titled list of tasks for one day."""

    def __init__(self, header: str, items: list[str]) -> None:
        self.header = header
        self.header_style = _HEADER_STYLE
        self.frame_style = _FRAME_STYLE
        self.sub_items = [SubItem.from_line(item) for item in items]

    @property
    def task_count(self) -> int:
        return len(self.sub_items)

    @property
    def complete_count(self) -> int:
        return sum(item.complete for item in self.sub_items)

    def rename(self, header: str) -> None:
        """Replace the block's title."""
        self.header = header

    def set_colors(self, background: str, color: str) -> None:
        """Set the frame background and the title text colour."""
        self.frame_style = _FRAME_STYLE_PREFIX + background
        self.header_style = f"{_HEADER_STYLE}; color: {color}"