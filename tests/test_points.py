import numpy as np

from onionplot.model.points import Point


def test_to_dict_omits_missing_tooltip():
    assert Point(1.0, 2.0).to_dict() == {"x": 1.0, "y": 2.0}
    assert Point(1.0, 2.0, "a").to_dict() == {"x": 1.0, "y": 2.0, "tooltip": "a"}


def test_from_dict():
    assert Point.from_dict({"x": 1, "y": 2, "tooltip": "t"}) == Point(1.0, 2.0, "t")


def test_with_tooltip_returns_new_point():
    p = Point(0.5, 0.5)
    labelled = p.with_tooltip("x")
    assert p.tooltip is None
    assert labelled == Point(0.5, 0.5, "x")


def test_to_array():
    np.testing.assert_array_equal(Point(3.0, 4.0, "t").to_array(), [3.0, 4.0])
