# daytrack

Building blocks for a daily task planner that keeps its data in plain
text files in the working directory:

- `other_data.txt` holds tasks, grouped under `day: <Weekday>` lines.
  A finished task carries the suffix ` - complete`.
- `login_data.txt` holds the `Username: ` and `Remember: ` lines that
  decide which window a planner opens with.
- `visited_days.txt` records, as one comma-separated line of `0`/`1`
  flags, which days of the month were visited.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `daytrack.dayofweek`: `day_name(day)` turns an ISO weekday (1 to 7) into
  its English name and raises `ValueError` outside that range;
  `current_day_of_week(today)` gives the name for a date, or for the current
  date when `today` is `None`.
- `daytrack.taskstore`: `TaskStore(path, today)` edits the section of the
  task file for one weekday.
  - `add_task(text, week)` appends a task to today's section. The previous
    file content is kept only when it holds a `week: N` line naming `week`
    (the current ISO week by default); otherwise it is discarded first.
  - `delete_task(text)` drops matching lines from today's section onwards and
    returns how many were removed.
  - `rewrite_today(texts)` replaces today's section, and all that follows it,
    with `texts`.
  - `set_complete(text, done)` records or unrecords a task of today as done;
    `finalize()` writes the ` - complete` suffix onto the recorded tasks.
  - `remove_from_day_block(text)` removes a task from a `Day: <Weekday>`
    block, dropping the block when it becomes empty.
  - `read()` returns the file content, or `""` if it cannot be read.
- `daytrack.task`: `Task`, one entry of today's list with `edit`,
  `toggle_complete`, `set_colors` and `set_label_color`, and optional
  `on_change`, `on_delete` and `on_complete` callbacks. Editing to blank text
  deletes the task.
- `daytrack.infoblock`: `InfoBlock(header, items)` summarises one day's task
  lines as `SubItem`s, with `task_count` and `complete_count`.
- `daytrack.visited`: `VisitedDays` (`load`, `save`, `mark`, `is_visited`) and
  `month_grid(year, month, visited)`, which places each day of the month as a
  `DayCell` in week rows starting on Monday.
- `daytrack.schedule`: `Schedule` of `ScheduleTask` cards, each with
  `SubTask` checklist lines, plus a comment page chosen through `View`.
  Empty titles and subtask texts raise `ValueError`.
- `daytrack.accounts`: reads and updates the login record with
  `read_remember`, `account_state`, `read_username`, `reset_remember`,
  `choose_start_window` (returning a `StartWindow`) and `welcome_text`.
  A missing or unreadable record raises `LoginFileError`.
- `daytrack.menu`: `SideMenu`, a slide-out menu whose `MenuAction` entries
  call handlers registered with `connect`, with `apply_theme`, `slide_in`
  and `slide_out`.
- `daytrack.wraplayout`: `WrapLayout`, which flows item sizes left to right
  into rows that fit a `Rect`.

## Example

```python
from daytrack.taskstore import TaskStore

store = TaskStore("other_data.txt", today="Monday")
store.add_task("write report", week=12)
store.set_complete("write report", True)
store.finalize()  # the line becomes "write report - complete"
print(store.read())
```

## What it does not do

The package has no command to run and draws no windows: it holds the
data handling and state of a planner, not the screens around it. It also
does not summarise the week's history into a completion percentage;
`InfoBlock` gives per-day counts, and combining them is left to the caller.