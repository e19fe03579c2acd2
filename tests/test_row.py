import pytest
from drunken_diver.minutiae import Direction, Style, Note
from drunken_diver.row import Row, margin_for

R = Note(Direction.RIGHT, Style.STYLE0)
L = Note(Direction.LEFT, Style.STYLE0)


def make_row(width, cursor, filled):
    row = Row(width, cursor)
    for c in filled:
        row.cells[c] = R
    return row


def test_margin():
    assert margin_for(1) == 0
    assert margin_for(7) == 0
    assert margin_for(8) == 1
    assert margin_for(16) == 2
    assert margin_for(32) == 4


@pytest.mark.parametrize("width, cursor", [(0, 0), (-3, 0), (4, 4), (4, -1)])
def test_row_rejects_bad_geometry(width, cursor):
    with pytest.raises(ValueError):
        Row(width, cursor)


def test_new_row_is_empty():
    row = Row(16, 8)
    assert row.is_empty()
    assert row.render() == " " * 16
    assert row.cursor == 8


def test_put_is_write_once():
    row = Row(4, 1)
    row.put(R)
    assert not row.is_empty()
    with pytest.raises(ValueError):
        row.put(L)


def test_journey_settles_next_to_mark():
    row = Row(16, 8)
    row.put(L)
    assert row.journey(Direction.LEFT) is False
    assert row.cursor == 7


def test_journey_forced_hops_skip_written_cells():
    # 7 and 8 written, diver at 7 going right: both forced hops are taken
    row = make_row(16, 7, [7, 8])
    assert row.journey(Direction.RIGHT) is False
    assert row.cursor == 9


def test_journey_forced_hop_wraps():
    row = make_row(16, 15, [15])
    assert row.journey(Direction.RIGHT) is False
    assert row.cursor == 0

    row = make_row(16, 0, [0])
    assert row.journey(Direction.LEFT) is False
    assert row.cursor == 15


def test_journey_descends_at_edge():
    row = make_row(16, 7, range(7, 16))
    assert row.journey(Direction.RIGHT) is True
    assert row.cursor == 15


def test_journey_free_phase_does_not_wrap():
    # everything right of 3 written; col 0 empty but must not be reached by wrapping
    row = make_row(8, 3, range(3, 8))
    assert row.journey(Direction.RIGHT) is True
    assert row.cursor == 7


def test_journey_width_one():
    row = Row(1, 0)
    row.put(R)
    assert row.journey(Direction.RIGHT) is True
    assert row.cursor == 0
    row = Row(1, 0)
    row.put(L)
    assert row.journey(Direction.LEFT) is True
    assert row.cursor == 0


def test_journey_small_width_no_margin():
    row = Row(4, 2)
    row.put(R)
    assert row.journey(Direction.RIGHT) is False
    assert row.cursor == 3
    row.put(R)
    assert row.journey(Direction.RIGHT) is True
    assert row.cursor == 3


def test_row_equality_and_render():
    a = make_row(4, 1, [1])
    b = make_row(4, 1, [1])
    assert a == b
    assert str(a) == " >  "
    b.cursor = 2
    assert a != b
