"""A single task entry of today's list."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Callable, Optional

_ids = itertools.count()

DEFAULT_LABEL_STYLE = "color: #000; font-size: 19px; font-weight: 600; max-width: 250px"
DEFAULT_FRAME_STYLE = (
    "QFrame {"
    "border: 2px solid black;"
    "border-radius: 10px;"
    "background-color: #EAE2F9;"
    "padding: 10px;"
    "}"
)
_INPUT_STYLE = "font-size: 19px; font-weight: 600;"
_LABEL_STYLE_PREFIX = "font-size: 19px; font-weight: 600; max-width: 250px;"
_COMPLETE_LABEL_STYLE = "font-size: 19px; font-weight: 600; color: #077e2d"
_PLAIN_LABEL_STYLE = "font-size: 19px; font-weight: 600;"
_FRAME_STYLE_PREFIX = (
    "border: 2px solid black; border-radius: 10px; "
    "background-color: #f0f0f0; padding: 10px; background-color: "
)


@dataclass
class Task:
    """A task with editable text, a completion flag and change callbacks."""

    text: str
    on_change: Optional[Callable[[str], None]] = None
    on_delete: Optional[Callable[[str], None]] = None
    on_complete: Optional[Callable[[str, bool], None]] = None
    completed: bool = False
    deleted: bool = False
    id: str = field(default_factory=lambda: str(next(_ids)))
    label_style: str = DEFAULT_LABEL_STYLE
    frame_style: str = DEFAULT_FRAME_STYLE
    input_style: str = _INPUT_STYLE

    def edit(self, text: str) -> str:
        """Replace the text; blank text deletes the task instead.

        The text is cleared before the deletion is announced, so the
        delete callback then receives an empty string.
        """
        new_text = text.strip()
        if not new_text:
            self.text = ""
            self.deleted = True
            if self.on_delete is not None:
                self.on_delete(self.text)
            return self.text
        self.text = new_text
        if self.on_change is not None:
            self.on_change(new_text)
        return new_text

    def toggle_complete(self) -> bool:
        """Flip the completion flag, restyle the label and report the change."""
        self.label_style = _PLAIN_LABEL_STYLE if self.completed else _COMPLETE_LABEL_STYLE
        self.completed = not self.completed
        if self.on_complete is not None:
            self.on_complete(self.text, self.completed)
        return self.completed

    def set_colors(self, background: str, color: str) -> None:
        """Apply theme colours; a completed task keeps its label style."""
        self.frame_style = _FRAME_STYLE_PREFIX + background
        if not self.completed:
            self.label_style = _LABEL_STYLE_PREFIX + color
        self.input_style = _INPUT_STYLE + color

    def set_label_color(self, color: str) -> None:
        """Set the label's colour declaration."""
        self.label_style = _LABEL_STYLE_PREFIX + color