"""Planner of tasks with subtasks and a free-text comment view."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

TASK_WIDTH = 500
SUBTASK_WIDTH = 400
SUBTASK_HEIGHT = 60

TASK_STYLE = (
    "background-color: #fff; border-radius: 5px; "
    "border: 1px solid #ccc; padding: 15px"
)
SUBTASK_LABEL_STYLE = (
    "font-size: 14px; border: none; max-height: 40px; min-height: 10px; "
    "max-width: 300px; min-width: 300px; margin-right: 5px; "
    "margin-top: 5px; margin-bottom: 5px;"
)
CHECKED_STYLE = (
    "font-size: 14px; max-height: 20px; margin-right: 10px; padding-left: 5px; "
    "border: none; max-width: 300px; min-width: 300px; "
    "text-decoration: line-through; color: #aaa;"
)
UNCHECKED_STYLE = (
    "font-size: 14px; max-height: 20px; margin-right: 10px; padding-left: 5px; "
    "border: none; max-width: 300px; min-width: 300px; "
    "text-decoration: none; color: #000;"
)

EMPTY_TITLE_MESSAGE = "Area must not be empty!"
EMPTY_SUBTASK_MESSAGE = "Subtask must not be empty!"


class View(enum.Enum):
    """The page shown by the planner."""

    TASKS = "tasks"
    COMMENTS = "comments"


@dataclass
class SubTask:
    """A checklist line; it can be ticked only once its text is entered."""

    text: str = ""
    checked: bool = False
    editing: bool = True
    style: str = SUBTASK_LABEL_STYLE

    @property
    def checkable(self) -> bool:
        return not self.editing

    def set_text(self, text: str) -> None:
        """Accept the entered text; empty text is refused."""
        if not text:
            raise ValueError(EMPTY_SUBTASK_MESSAGE)
        self.text = text
        self.editing = False

    def set_checked(self, checked: bool) -> None:
        """Tick or untick the subtask and restyle its label."""
        if self.editing:
            raise RuntimeError("a subtask cannot be checked before its text is entered")
        self.checked = checked
        self.style = CHECKED_STYLE if checked else UNCHECKED_STYLE


@dataclass
class ScheduleTask:
    """A task card with a title and a list of subtasks."""

    title: str = ""
    editing: bool = True
    subtasks: list[SubTask] = field(default_factory=list)
    style: str = TASK_STYLE

    def set_title(self, text: str) -> None:
        """Accept the entered title; empty text is refused."""
        if not text:
            raise ValueError(EMPTY_TITLE_MESSAGE)
        self.title = text
        self.editing = False

    def add_subtask(self) -> SubTask:
        """Append a new, empty subtask awaiting its text and return it."""
        subtask = SubTask()
        self.subtasks.append(subtask)
        return subtask


@dataclass
class Schedule:
    """The planner: task cards plus a comment page."""

    tasks: list[ScheduleTask] = field(default_factory=list)
    view: View = View.TASKS
    comment: str = ""

    def new_task(self) -> ScheduleTask:
        """Create a new task card and return it."""
        task = ScheduleTask()
        self.tasks.append(task)
        return task

    def delete_task(self, task: ScheduleTask) -> None:
        """Remove ``task`` from the planner."""
        for index, existing in enumerate(self.tasks):
            if existing is task:
                del self.tasks[index]
                return
        raise ValueError("task is not part of this schedule")

    def show_tasks(self) -> None:
        self.view = View.TASKS

    def show_comments(self) -> None:
        self.view = View.COMMENTS

    def set_comment(self, text: str) -> None:
        self.comment = text