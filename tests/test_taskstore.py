import pytest

from daytrack.taskstore import TaskStore


@pytest.fixture
def store(tmp_path):
    return TaskStore(str(tmp_path / "tasks.txt"), today="Monday")


def write(store, text):
    with open(store.path, "w", encoding="utf-8") as handle:
        handle.write(text)


def test_add_task_to_empty_file_creates_section(store):
    content = store.add_task("Buy milk", week=5)
    assert content == "\nday: Monday\nBuy milk"
    assert store.read() == content


def test_add_task_without_week_line_discards_old_content(store):
    store.add_task("First", week=5)
    assert store.add_task("Second", week=5) == "\nday: Monday\nSecond"


def test_add_task_same_week_appends_to_today(store):
    write(store, "week: 5\nday: Monday\nA\nday: Tuesday\nC")
    content = store.add_task("B", week=5)
    assert content == "week: 5\nday: Monday\nA\nB\nday: Tuesday\nC"


def test_add_task_other_week_clears(store):
    write(store, "week: 4\nday: Monday\nA")
    assert store.add_task("B", week=5) == "\nday: Monday\nB"


def test_add_task_same_week_new_day_appends_section(store):
    write(store, "week: 5\nday: Sunday\nA")
    content = store.add_task("B", week=5)
    assert content == "week: 5\nday: Sunday\nA\nday: Monday\nB"


def test_delete_task_only_from_today_onwards(store):
    write(store, "day: Sunday\nX\nday: Monday\nX\nY\n")
    assert store.delete_task("X") == 1
    assert store.read() == "day: Sunday\nX\nday: Monday\nY\n"


def test_delete_task_missing_file(store):
    assert store.delete_task("X") == 0
    assert store.read() == ""


def test_rewrite_today_replaces_rest(store):
    write(store, "day: Sunday\nA\nday: Monday\nB\nday: Tuesday\nC\n")
    store.rewrite_today(["B2", "D"])
    assert store.read() == "day: Sunday\nA\nday: Monday\nB2\nD\n"


def test_rewrite_today_missing_file_writes_nothing(tmp_path):
    path = tmp_path / "absent.txt"
    TaskStore(str(path), today="Monday").rewrite_today(["A"])
    assert not path.exists()


def test_set_complete_round_trip(store):
    write(store, "day: Monday\nA\nB\n")
    assert store.set_complete("A", True) == ["A"]
    assert store.set_complete("A", False) == []


def test_set_complete_ignores_other_days(store):
    write(store, "day: Sunday\nZ\nday: Monday\n")
    assert store.set_complete("Z", True) == []


def test_finalize_marks_completed(store):
    write(store, "day: Monday\nA\nB\n")
    store.set_complete("A", True)
    store.finalize()
    assert store.read() == "day: Monday\nA - complete\nB\n"


def test_finalize_is_idempotent(store):
    write(store, "day: Monday\nA\nB\n")
    store.set_complete("A", True)
    store.finalize()
    first = store.read()
    store.finalize()
    assert store.read() == first


def test_remove_from_day_block_keeps_others(store):
    write(store, "Day: Monday\nA\nB")
    assert store.remove_from_day_block(" A ") == "Day: Monday\nB"


def test_remove_from_day_block_drops_empty_block(store):
    write(store, "Day: Sunday\nX\nDay: Monday\nA")
    assert store.remove_from_day_block("A") == "Day: Sunday\nX\n"
    assert store.read() == "Day: Sunday\nX\n"


def test_remove_from_day_block_without_marker_unchanged(store):
    write(store, "day: Monday\nA")
    assert store.remove_from_day_block("A") == "day: Monday\nA"


def test_read_missing_file_is_empty(store):
    assert store.read() == ""