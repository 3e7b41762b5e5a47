#!filepath: tests/render/test_coordinate.py
import pytest

from termline.render.coordinate import CoordinateMapper, round_half_away, to_column
from termline.render.types import RenderWindow


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, 0),
        (0.4999, 0),
        (0.5, 1),
        (1.5, 2),
        (2.5, 3),   # round() 会给 2
        (2.51, 3),
        (-0.5, -1),
        (-2.5, -3),
    ],
)
def test_round_half_away_from_zero(value, expected):
    assert round_half_away(value) == expected


@pytest.fixture
def window(at):
    return RenderWindow(at(8), at(10))


def test_endpoints_map_to_edges(window, at):
    assert to_column(at(8), window, 20) == 0
    assert to_column(at(10), window, 20) == 20


def test_linear_mapping(window, at):
    assert to_column(at(9), window, 20) == 10
    assert to_column(at(8, 30), window, 20) == 5
    assert to_column(at(9, 30), window, 20) == 15


def test_outside_window_is_clamped(window, at):
    assert to_column(at(7), window, 20) == 0
    assert to_column(at(11), window, 20) == 20
    assert to_column(at(9, day=11), window, 20) == 20


def test_half_column_rounds_away_from_zero(at):
    # ratio = 0.5，0.5 * 5 = 2.5 -> 3
    w = RenderWindow(at(8), at(8, 2))
    assert to_column(at(8, 1), w, 5) == 3
    # 0.5 * 1 = 0.5 -> 1
    assert to_column(at(8, 1), w, 1) == 1


def test_zero_width_canvas(window, at):
    assert to_column(at(9), window, 0) == 0


def test_mapper_matches_function(window, at):
    mapper = CoordinateMapper(window, 37)
    for minute in range(0, 120, 7):
        t = at(8 + minute // 60, minute % 60)
        col = mapper.to_column(t)
        assert col == to_column(t, window, 37)
        assert 0 <= col <= 37
