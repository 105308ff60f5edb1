"""Storage of the week's tasks in a plain-text file of day sections."""

from __future__ import annotations

import datetime
import logging
import re
from typing import Iterable, Optional

from daytrack.dayofweek import current_day_of_week

logger = logging.getLogger(__name__)

TASKS_FILE = "other_data.txt"
DAY_PREFIX = "day: "
COMPLETE_MARK = " - complete"

_WEEK_PATTERN = re.compile(r"week: (\d+)")


def _current_week() -> int:
    return datetime.date.today().isocalendar()[1]


class TaskStore:
    """Reads and rewrites the task file for the current day of the week.

    The file holds sections introduced by ``day: <Weekday>`` lines, each
    followed by one task per line. Tasks marked done carry a trailing
    `` - complete``.
    """

    def __init__(self, path: str = TASKS_FILE, today: Optional[str] = None) -> None:
        self.path = path
        self.today = today if today is not None else current_day_of_week()
        self.complete_tasks: list[str] = []

    def _read_text(self) -> Optional[str]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                return handle.read()
        except OSError:
            logger.warning("could not open %s for reading", self.path)
            return None

    def _read_lines(self) -> Optional[list[str]]:
        try:
            with open(self.path, encoding="utf-8") as handle:
                return [line.rstrip("\n").strip() for line in handle]
        except OSError:
            logger.warning("could not open %s for reading", self.path)
            return None

    def _write_text(self, content: str) -> None:
        with open(self.path, "w", encoding="utf-8") as handle:
            handle.write(content)

    def _write_lines(self, lines: Iterable[str]) -> None:
        self._write_text("".join(line + "\n" for line in lines))

    def _is_today_marker(self, line: str) -> bool:
        return line.startswith(DAY_PREFIX) and line[4:].strip() == self.today

    def add_task(self, text: str, week: Optional[int] = None) -> str:
        """Append ``text`` to today's section and return the new file content.

        When the file does not name ``week`` (the ISO week number, the
        current one by default) in a ``week: N`` line, its previous
        content is discarded first.
        """
        if week is None:
            week = _current_week()
        content = self._read_text() or ""

        last_week = -1
        if "week:" in content:
            match = _WEEK_PATTERN.search(content)
            if match:
                last_week = int(match.group(1))
        if last_week != week:
            logger.debug("new week, discarding stored tasks")
            content = ""

        marker = DAY_PREFIX + self.today
        if marker in content:
            start = content.index(marker)
            end = content.find("\nday:", start + 1)
            if end == -1:
                end = len(content)
            section = content[start:end]
            lines = [line for line in section.split("\n") if line][1:]
            lines.append(text)
            content = content.replace(section, marker + "\n" + "\n".join(lines))
        else:
            content += "\n" + marker + "\n" + text

        self._write_text(content)
        return content

    def delete_task(self, text: str) -> int:
        """Drop every line equal to ``text`` from today's section onwards.

        Returns the number of lines removed; 0 when the file is unreadable.
        """
        lines = self._read_lines()
        if lines is None:
            return 0
        kept: list[str] = []
        in_today = False
        removed = 0
        for line in lines:
            if self._is_today_marker(line):
                in_today = True
            if in_today and line == text:
                removed += 1
                continue
            kept.append(line)
        self._write_lines(kept)
        return removed

    def rewrite_today(self, texts: Iterable[str]) -> None:
        """Replace today's section, and everything after it, by ``texts``.

        Nothing is written when the file cannot be read.
        """
        lines = self._read_lines()
        if lines is None:
            return
        kept: list[str] = []
        for line in lines:
            if self._is_today_marker(line):
                break
            kept.append(line)
        kept.append(DAY_PREFIX + self.today)
        kept.extend(texts)
        self._write_lines(kept)

    def set_complete(self, text: str, done: bool) -> list[str]:
        """Record or unrecord ``text`` as done if it is listed for today.

        Returns the tasks currently recorded as done.
        """
        lines = self._read_lines()
        if lines is None:
            return list(self.complete_tasks)
        in_today = False
        for line in lines:
            if self._is_today_marker(line):
                in_today = True
            if in_today and line == text:
                if done:
                    self.complete_tasks.append(text)
                elif text in self.complete_tasks:
                    self.complete_tasks.remove(text)
        logger.debug("complete tasks: %s", self.complete_tasks)
        return list(self.complete_tasks)

    def finalize(self) -> None:
        """Mark the recorded done tasks of today's section in the file."""
        lines = self._read_lines()
        if lines is None:
            return
        result: list[str] = []
        in_today = False
        for line in lines:
            if self._is_today_marker(line):
                in_today = True
            if in_today and line in self.complete_tasks:
                if COMPLETE_MARK not in line:
                    result.append(line + COMPLETE_MARK)
            else:
                result.append(line)
        self._write_lines(result)

    def remove_from_day_block(self, text: str) -> str:
        """Remove ``text`` from today's ``Day: `` block and return the new content.

        A block left without tasks is removed entirely.
        """
        content = self._read_text() or ""
        marker = "Day: " + self.today
        if marker in content:
            start = content.index(marker)
            end = content.find("\nDay:", start + 1)
            if end == -1:
                end = len(content)
            section = content[start:end]
            target = text.strip()
            lines = [line for line in section.split("\n") if line][1:]
            lines = [line for line in lines if line != target]
            if lines:
                content = content.replace(section, marker + "\n" + "\n".join(lines))
            else:
                content = content.replace(section, "")
        self._write_text(content)
        return content

    def read(self) -> str:
        """Return the whole file content, or "" when it cannot be read."""
        content = self._read_text()
        return "" if content is None else content