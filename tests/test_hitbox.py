import pytest

from zeldo.hitbox import hits_button, is_hovered
from zeldo.model import FloatRect

BOUNDS = FloatRect(100.0, 200.0, 50.0, 40.0)


@pytest.mark.parametrize(
    "mouse, expected",
    [
        ((100, 200), True),
        ((150, 240), True),
        ((125, 220), True),
        ((99, 220), False),
        ((151, 220), False),
        ((125, 199), False),
        ((125, 241), False),
    ],
)
def test_is_hovered_edges_are_inclusive(mouse, expected):
    assert is_hovered(BOUNDS, mouse) is expected


@pytest.mark.parametrize(
    "mouse, expected",
    [
        ((118, 235), True),
        ((168, 275), True),
        ((117, 235), False),
        ((118, 234), False),
        ((169, 275), False),
        ((168, 276), False),
        ((100, 200), False),
    ],
)
def test_hits_button_with_offset(mouse, expected):
    assert hits_button(BOUNDS, mouse, 18, 35) is expected


def test_is_hovered_matches_zero_offset():
    for x in range(90, 161, 5):
        for y in range(190, 251, 5):
            assert is_hovered(BOUNDS, (x, y)) == hits_button(BOUNDS, (x, y), 0, 0)


def test_empty_rect_only_hits_its_corner():
    point = FloatRect(10.0, 10.0, 0.0, 0.0)
    assert is_hovered(point, (10, 10)) is True
    assert is_hovered(point, (11, 10)) is False