"""
Gaussian Envelope
=================
The onion outline is a standard normal density curve (mu=0, sigma=1, not
normalized) drawn rotated by 90 degrees and mirrored, so that it forms a
vertical spindle. This module evaluates the density and samples it into the
polyline used for the outline.
"""
from __future__ import annotations

from functools import lru_cache
import logging
from typing import TYPE_CHECKING

import numpy as np

from onionplot.config import DEFAULT_CONFIG, EnvelopeConfig
from onionplot.model.points import Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def gaussian(x: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    """
    Evaluate e^(-x^2 / 2).

    Args:
        x: Position in the gaussian domain, scalar or array.

    Returns:
        The density, with peak value 1 at x = 0. Same kind as the input.
    """
    if np.ndim(x) == 0:
        return float(np.exp(-(float(x) ** 2) / 2.0))
    return np.exp(-np.square(x) / 2.0)


@lru_cache(maxsize=None)
def generate_gauss_points(config: EnvelopeConfig = DEFAULT_CONFIG) -> tuple[Point, ...]:
    """
    Sample the envelope across [-D, D].

    The result holds `config.resolution + 1` evenly spaced samples, framed by
    the boundary points (-D, 0) and (D, 0) so that the outline closes to zero
    width at both ends. The tuple is cached per configuration and must be
    treated as read-only.

    Args:
        config: Envelope half-width and resolution.

    Returns:
        `config.resolution + 3` points ordered by increasing x.
    """
    d = config.half_width
    xs = np.linspace(-d, d, config.resolution + 1)
    ys = gaussian(xs)

    points = [Point(-d, 0.0)]
    points.extend(Point(float(x), float(y)) for x, y in zip(xs, ys))
    points.append(Point(d, 0.0))

    logger.debug(f"Sampled gaussian envelope: {len(points)} points for {config}.")
    return tuple(points)
