"""Record of which days of the month have been visited, and the month grid."""

from __future__ import annotations

import calendar
import datetime
import logging
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

VISITED_FILE = "visited_days.txt"
DAYS_TRACKED = 31

PLAIN_STYLE = "border: 2px solid black; border-radius: 20px;"
VISITED_STYLE = (
    "background-color: green; color: white; "
    "border: 2px solid black; border-radius: 20px;"
)

_VISITED = "1"
_NOT_VISITED = "0"


def _blank_entries() -> list[str]:
    return [_NOT_VISITED] * DAYS_TRACKED


@dataclass
class VisitedDays:
    """One flag per day of the month, stored as "0"/"1" strings."""

    entries: list[str] = field(default_factory=_blank_entries)

    @classmethod
    def load(cls, path: str = VISITED_FILE) -> VisitedDays:
        """Read the flags from the first line of ``path``.

        A missing or unreadable file, or an empty first line, gives a
        record in which no day is visited.
        """
        try:
            with open(path, encoding="utf-8") as handle:
                line = handle.readline().rstrip("\r\n")
        except OSError:
            logger.warning("could not open %s for reading", path)
            return cls()
        if not line:
            return cls()
        return cls(line.split(","))

    def save(self, path: str = VISITED_FILE) -> None:
        """Write the flags to ``path`` as one comma-separated line."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(",".join(self.entries))

    def _index(self, day: int) -> int:
        if not 1 <= day <= len(self.entries):
            raise IndexError(f"no entry for day {day}")
        return day - 1

    def mark(self, day: int) -> None:
        """Mark ``day`` (1-based) as visited."""
        self.entries[self._index(day)] = _VISITED

    def is_visited(self, day: int) -> bool:
        """Return whether ``day`` (1-based) has been visited."""
        return self.entries[self._index(day)] == _VISITED


@dataclass(frozen=True)
class DayCell:
    """One day placed in the month grid."""

    day: int
    row: int
    column: int
    visited: bool
    style: str


def month_grid(year: int, month: int, visited: VisitedDays) -> list[DayCell]:
    """Lay out every day of the month in week rows, Monday in column 0."""
    first = datetime.date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]
    row, column = 0, first.isoweekday() - 1
    cells: list[DayCell] = []
    for day in range(1, days_in_month + 1):
        is_visited = visited.is_visited(day)
        cells.append(
            DayCell(
                day=day,
                row=row,
                column=column,
                visited=is_visited,
                style=VISITED_STYLE if is_visited else PLAIN_STYLE,
            )
        )
        column += 1
        if column == 7:
            column = 0
            row += 1
    return cells