import pytest

from daytrack.wraplayout import Rect, WrapLayout


def make_layout(sizes):
    layout = WrapLayout()
    for width, height in sizes:
        layout.add(width, height)
    return layout


def test_rect_right_is_last_column():
    rect = Rect(10, 5, 30, 20)
    assert rect.right == 10 + 30 - 1
    assert rect.bottom == 5 + 20 - 1


def test_items_fitting_stay_on_one_row():
    layout = make_layout([(20, 10), (20, 15), (20, 5)])
    placed = layout.arrange(Rect(0, 0, 200, 100))
    assert [r.y for r in placed] == [0, 0, 0]
    assert [r.x for r in placed] == [0, 20, 40]


def test_overflow_wraps_below_tallest_of_row():
    layout = make_layout([(40, 10), (40, 20), (40, 15)])
    placed = layout.arrange(Rect(5, 7, 100, 50))
    assert placed[2].x == 5
    assert placed[2].y == 7 + 20
    assert (placed[2].width, placed[2].height) == (40, 15)


def test_item_reaching_exact_edge_wraps():
    layout = make_layout([(40, 10), (40, 10)])
    placed = layout.arrange(Rect(0, 0, 80, 50))
    assert placed[1].x == 0
    assert placed[1].y == 10


def test_arrange_keeps_sizes_and_count():
    sizes = [(30, 12), (50, 8), (70, 25), (10, 3)]
    layout = make_layout(sizes)
    placed = layout.arrange(Rect(0, 0, 90, 300))
    assert [(r.width, r.height) for r in placed] == sizes


def test_size_hint_is_maximum_of_each_dimension():
    layout = make_layout([(30, 12), (50, 8), (20, 25)])
    assert layout.size_hint() == (50, 25)


def test_empty_size_hint():
    assert WrapLayout().size_hint() == (0, 0)
    assert WrapLayout().arrange(Rect(0, 0, 10, 10)) == []


def test_take_removes_item():
    layout = make_layout([(1, 2), (3, 4), (5, 6)])
    assert layout.take(1) == (3, 4)
    assert list(layout) == [(1, 2), (5, 6)]
    assert len(layout) == 2


@pytest.mark.parametrize("index", [-1, 3])
def test_take_out_of_range_raises(index):
    layout = make_layout([(1, 2), (3, 4), (5, 6)])
    with pytest.raises(IndexError):
        layout.take(index)