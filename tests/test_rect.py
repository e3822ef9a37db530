import math

import pytest

from lightgame.rect import Rect


def test_rect_scaling():
    r1 = Rect(0.0, 0.0, 128.0, 128.0)
    assert Rect.fraction(0.0, 0.0, 32.0, 32.0, r1) == Rect(0.0, 0.0, 0.25, 0.25)
    assert Rect.fraction(32.0, 32.0, 32.0, 32.0, r1) == Rect(0.25, 0.25, 0.25, 0.25)


def test_rect_contains():
    r = Rect(0.0, 0.0, 128.0, 128.0)
    assert r.contains((1.0, 1.0))
    assert not r.contains((500.0, 0.0))


def test_rect_overlaps():
    r1 = Rect(0.0, 0.0, 128.0, 128.0)
    assert r1.overlaps(Rect(0.0, 0.0, 64.0, 64.0))
    assert r1.overlaps(Rect(100.0, 0.0, 128.0, 128.0))
    assert not r1.overlaps(Rect(500.0, 0.0, 64.0, 64.0))


def test_rect_overlaps_circle():
    r1 = Rect(0.0, 0.0, 128.0, 128.0)
    assert r1.overlaps_circle((133.5, 133.5), 8.0)
    assert not r1.overlaps_circle((134.0, 134.0), 8.0)
    assert r1.overlaps_circle((64.0, 64.0), 2.0)


def test_rect_translate():
    r1 = Rect(0.0, 0.0, 64.0, 64.0)
    r1.translate((64.0, 64.0))
    assert r1 == Rect(64.0, 64.0, 64.0, 64.0)


def test_rect_scale():
    r1 = Rect(0.0, 0.0, 64.0, 64.0)
    r1.scale(2.0, 2.0)
    assert r1 == Rect(0.0, 0.0, 128.0, 128.0)


def test_rect_move_to():
    r1 = Rect(32.0, 32.0, 64.0, 64.0)
    r1.move_to((64.0, 64.0))
    assert r1 == Rect(64.0, 64.0, 64.0, 64.0)


def test_combine_identical():
    a = Rect(0.0, 0.0, 1.0, 1.0)
    b = Rect(0.0, 0.0, 1.0, 1.0)
    c = a.combine_with(b)
    assert a.isclose(b)
    assert a.isclose(c)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (Rect(0.0, 0.0, 1.0, 2.0), Rect(0.0, 0.0, 2.0, 1.0), Rect(0.0, 0.0, 2.0, 2.0)),
        (Rect(-1.0, 0.0, 2.0, 2.0), Rect(0.0, -1.0, 1.0, 1.0), Rect(-1.0, -1.0, 2.0, 3.0)),
    ],
)
def test_combine_with(a, b, expected):
    assert a.combine_with(b).isclose(expected)


def test_combine_with_is_symmetric():
    a = Rect(-1.0, 0.0, 2.0, 2.0)
    b = Rect(0.0, -1.0, 1.0, 1.0)
    assert a.combine_with(b) == b.combine_with(a)


@pytest.mark.parametrize(
    "start, angle, expected",
    [
        (Rect(-0.5, -0.5, 1.0, 1.0), math.pi * 2.0, Rect(-0.5, -0.5, 1.0, 1.0)),
        (Rect(0.0, 0.0, 1.0, 2.0), math.pi * 0.5, Rect(-2.0, 0.0, 2.0, 1.0)),
        (Rect(0.0, 0.0, 1.0, 2.0), math.pi, Rect(-1.0, -2.0, 1.0, 2.0)),
        (Rect(-0.5, -0.5, 1.0, 1.0), math.pi * 0.5, Rect(-0.5, -0.5, 1.0, 1.0)),
        (Rect(1.0, 1.0, 0.5, 2.0), math.pi * 0.5, Rect(-3.0, 1.0, 2.0, 0.5)),
    ],
)
def test_rect_rotate(start, angle, expected):
    start.rotate(angle)
    assert start.isclose(expected)


def test_edges_and_points():
    r = Rect(1.0, 2.0, 4.0, 6.0)
    assert r.left() == 1.0
    assert r.right() == 5.0
    assert r.top() == 2.0
    assert r.bottom() == 8.0
    assert r.point() == (1.0, 2.0)
    assert r.size() == (4.0, 6.0)
    assert r.center() == (3.0, 5.0)


def test_constructors():
    assert Rect.zero() == Rect(0.0, 0.0, 0.0, 0.0)
    assert Rect.one() == Rect(0.0, 0.0, 1.0, 1.0)
    assert Rect.from_ints(1, 2, 3, 4) == Rect(1.0, 2.0, 3.0, 4.0)


def test_iter_round_trip():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    assert list(r) == [1.0, 2.0, 3.0, 4.0]
    assert Rect(*r) == r


def test_isclose_detects_difference():
    assert not Rect(0.0, 0.0, 1.0, 1.0).isclose(Rect(0.0, 0.0, 1.0, 1.1))