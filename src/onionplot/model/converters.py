"""
Space Converters
================
Pure mappings between the three coordinate spaces of an onion plot:

- gaussian domain: x in [-D, D], y = density in [0, 1]
- percentage space: [0, 1] x [0, 1], independent of the drawing size
- view space: [0, 100] x [0, 100], y = 0 at the top
"""
from __future__ import annotations

import math

from onionplot.config import DEFAULT_CONFIG, VIEW_SIZE, EnvelopeConfig
from onionplot.model.envelope import gaussian
from onionplot.model.points import Point

CENTER = VIEW_SIZE / 2.0


def _check_finite(p: Point) -> None:
    if not (math.isfinite(p.x) and math.isfinite(p.y)):
        raise ValueError(f"Point coordinates must be finite, got ({p.x}, {p.y}).")


def _check_unit(p: Point) -> None:
    if not (0.0 <= p.x <= 1.0 and 0.0 <= p.y <= 1.0):
        raise ValueError(f"Percentage point must lie in [0, 1] x [0, 1], got ({p.x}, {p.y}).")


def gauss_to_view(p: Point, config: EnvelopeConfig = DEFAULT_CONFIG) -> Point:
    """
    Map a rotated envelope sample to view space.

    The envelope is drawn as a vertical spindle, so the sample arrives with
    its axes swapped: `p.x` is the density (the half-width fraction, negated
    for the mirrored half) and `p.y` is the position in the gaussian domain.

    Args:
        p: Rotated sample, p.x in [-1, 1] and p.y in [-D, D].
        config: Envelope geometry.

    Returns:
        The point in view space.
    """
    _check_finite(p)
    d = config.half_width

    # Half-width fraction -> distance from the vertical centerline
    x = CENTER - p.x * CENTER
    # [-D; D] -> [0; 2D] -> [0; 1] -> [0; 100], flipped so -D is at the bottom
    y = VIEW_SIZE - ((p.y + d) / (2.0 * d)) * VIEW_SIZE
    return Point(x, y)


def percentage_to_view(p: Point, config: EnvelopeConfig = DEFAULT_CONFIG) -> Point:
    """
    Place a percentage-space point inside the onion.

    The vertical percentage selects a height along the envelope; the local
    envelope width at that height scales the horizontal offset, so x = 0 and
    x = 1 touch the outline and x = 0.5 lies on the centerline.

    Args:
        p: Point in percentage space, both coordinates in [0, 1].
        config: Envelope geometry.

    Raises:
        ValueError: If a coordinate is not finite or lies outside [0, 1].

    Returns:
        The point in view space, carrying the tooltip of `p`.
    """
    _check_finite(p)
    _check_unit(p)
    d = config.half_width

    gauss_x = -d + 2.0 * d * p.y
    gauss_y = gaussian(gauss_x)

    py = VIEW_SIZE - p.y * VIEW_SIZE

    # Signed distance from the centerline, in units of the full envelope width
    x_distance = (p.x - 0.5) * gauss_y
    px = CENTER - VIEW_SIZE * x_distance

    return Point(px, py, p.tooltip)
