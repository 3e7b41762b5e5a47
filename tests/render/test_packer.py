#!filepath: tests/render/test_packer.py
from itertools import combinations

import pytest

from termline.render.coordinate import CoordinateMapper
from termline.render.packer import (
    EventPacker,
    Marker,
    PackedRow,
    marker_text,
    sort_events,
)
from termline.render.types import Event, RenderWindow


@pytest.fixture
def packer(at):
    # 100 列 / 120 分钟
    return EventPacker(CoordinateMapper(RenderWindow(at(8), at(10)), 100), "%H:%M")


def test_marker_text(at):
    assert marker_text(Event("Standup", at(9)), "%H:%M") == "^ Standup (09:00)"


def test_marker_geometry(packer, at):
    m = packer.make_marker(Event("A", at(9)))

    assert m.column == 50
    assert m.text == "^ A (09:00)"
    assert m.width == 11
    assert m.end == 61


def test_collision_requires_one_column_gap(at):
    ev = Event("A", at(8))
    left = Marker(ev, 0, "^ A (08:00)")        # 占 0..10

    assert left.collides(Marker(ev, 11, "x"))      # 紧贴，无间隔
    assert not left.collides(Marker(ev, 12, "x"))  # 留 1 列
    assert left.collides(Marker(ev, 5, "x"))
    assert Marker(ev, 11, "x").collides(left)


def test_sort_events_returns_copy(at):
    events = [Event("b", at(9), 1), Event("a", at(9, 30), 0), Event("c", at(8), 0)]
    original = list(events)

    ordered = sort_events(events)

    assert [e.label for e in ordered] == ["c", "a", "b"]
    assert events == original


def test_sort_ties_keep_input_order(at):
    events = [Event("first", at(9)), Event("second", at(9)), Event("third", at(9))]
    assert [e.label for e in sort_events(events)] == ["first", "second", "third"]


def test_first_fit_reuses_earlier_rows(packer, at):
    rows = packer.pack([
        Event("A", at(8)),        # col 0
        Event("B", at(8, 6)),     # col 5，与 A 冲突
        Event("C", at(9)),        # col 50，回到 row 0
    ])

    assert [[m.event.label for m in r.markers] for r in rows] == [["A", "C"], ["B"]]


def test_same_instant_same_depth_split_rows(packer, at):
    rows = packer.pack([Event("A", at(9)), Event("B", at(9))])

    assert len(rows) == 2
    assert rows[0].markers[0].event.label == "A"
    assert rows[1].markers[0].event.label == "B"


def test_duplicate_events_get_separate_rows(packer, at):
    ev = Event("dup", at(9))
    rows = packer.pack([ev, ev, ev])
    assert [len(r) for r in rows] == [1, 1, 1]


def test_depth_orders_placement(packer, at):
    rows = packer.pack([Event("deep", at(8), depth=1), Event("top", at(8), depth=0)])

    assert rows[0].markers[0].event.label == "top"
    assert rows[1].markers[0].event.label == "deep"


def test_place_returns_row_index(packer, at):
    rows = []
    assert packer.place(rows, packer.make_marker(Event("A", at(8)))) == 0
    assert packer.place(rows, packer.make_marker(Event("B", at(8)))) == 1
    assert packer.place(rows, packer.make_marker(Event("C", at(9)))) == 0


def test_no_overlap_within_rows(packer, at):
    events = [Event(f"e{i}", at(8 + (i * 7) // 60, (i * 7) % 60), depth=i % 3) for i in range(17)]
    rows = packer.pack(events)

    assert sum(len(r) for r in rows) == len(events)
    for row in rows:
        for a, b in combinations(row.markers, 2):
            assert not a.collides(b)


def test_row_render_pads_between_markers(at):
    ev_a, ev_c = Event("A", at(8)), Event("C", at(9))
    row = PackedRow([Marker(ev_c, 50, "^ C (09:00)"), Marker(ev_a, 0, "^ A (08:00)")])

    assert row.render() == "^ A (08:00)" + " " * 39 + "^ C (09:00)"
    assert row.render("  ") == "  ^ A (08:00)" + " " * 39 + "^ C (09:00)"


def test_row_render_no_trailing_padding(at):
    row = PackedRow([Marker(Event("A", at(9)), 7, "^ A (09:00)")])
    assert row.render() == "       ^ A (09:00)"


def test_pack_empty(packer):
    assert packer.pack([]) == []
