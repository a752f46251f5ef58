import math

import pytest

from onionplot.config import EnvelopeConfig
from onionplot.model.converters import gauss_to_view, percentage_to_view
from onionplot.model.points import Point


@pytest.mark.parametrize("y", [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
def test_percentage_centerline(y):
    assert percentage_to_view(Point(0.5, y)).x == pytest.approx(50.0)


def test_percentage_vertical_is_decreasing():
    ys = [percentage_to_view(Point(0.3, i / 10)).y for i in range(11)]
    assert ys[0] == pytest.approx(100.0)
    assert ys[-1] == pytest.approx(0.0)
    assert all(a > b for a, b in zip(ys, ys[1:]))


def test_percentage_corner_uses_envelope_width():
    p = percentage_to_view(Point(0.0, 0.0))
    assert p.x == pytest.approx(50.0 + 50.0 * math.exp(-3.5 ** 2 / 2))
    assert p.y == pytest.approx(100.0)


def test_percentage_widest_point():
    assert percentage_to_view(Point(1.0, 0.5)).x == pytest.approx(0.0)
    assert percentage_to_view(Point(0.0, 0.5)).x == pytest.approx(100.0)


def test_percentage_stays_in_view_square():
    for i in range(11):
        for j in range(11):
            p = percentage_to_view(Point(i / 10, j / 10))
            assert 0.0 <= p.x <= 100.0
            assert 0.0 <= p.y <= 100.0


def test_percentage_passes_tooltip():
    assert percentage_to_view(Point(0.2, 0.4, "label")).tooltip == "label"


def test_percentage_with_custom_half_width():
    config = EnvelopeConfig(half_width=1.0)
    p = percentage_to_view(Point(0.0, 0.0), config)
    assert p.x == pytest.approx(50.0 + 50.0 * math.exp(-0.5))


@pytest.mark.parametrize("point, expected", [
    (Point(0.0, -3.5), (50.0, 100.0)),
    (Point(1.0, 0.0), (0.0, 50.0)),
    (Point(-1.0, 3.5), (100.0, 0.0)),
])
def test_gauss_to_view(point, expected):
    p = gauss_to_view(point)
    assert (p.x, p.y) == pytest.approx(expected)
    assert p.tooltip is None


def test_gauss_to_view_custom_half_width(small_config):
    assert gauss_to_view(Point(0.5, 1.0), small_config).y == pytest.approx(25.0)


@pytest.mark.parametrize("func", [gauss_to_view, percentage_to_view])
def test_non_finite_input_raises(func):
    with pytest.raises(ValueError):
        func(Point(float("nan"), 0.5))


@pytest.mark.parametrize("point", [
    Point(0.5, 1.5),
    Point(0.5, -0.1),
    Point(1.01, 0.5),
    Point(-0.5, 0.5),
])
def test_percentage_outside_unit_square_raises(point):
    with pytest.raises(ValueError, match=r"\[0, 1\]"):
        percentage_to_view(point)
