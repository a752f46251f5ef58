"""
Path Builder
============
Turns envelope samples into the outline path string handed to the
rendering surface, and parses such strings back into polylines.

The path uses `M x y` / `L x y` tokens separated by spaces: one sub-path for
the left half of the onion followed by one for the mirrored right half.
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence, TYPE_CHECKING

import numpy as np

from onionplot.config import DEFAULT_CONFIG, EnvelopeConfig
from onionplot.model.converters import gauss_to_view
from onionplot.model.points import Point

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def _half_path(points: Iterable[Point]) -> str:
    return " ".join(
        f"{'M' if i == 0 else 'L'} {p.x} {p.y}" for i, p in enumerate(points)
    )


def generate_gauss_path(points: Sequence[Point], config: EnvelopeConfig = DEFAULT_CONFIG) -> str:
    """
    Build the two-sided outline path from envelope samples.

    The halves are not joined into a closed loop.

    Args:
        points: Envelope samples in the gaussian domain, see
            `generate_gauss_points`.
        config: Envelope geometry.

    Raises:
        ValueError: If `points` is empty.

    Returns:
        The left half-path followed by the right half-path.
    """
    if not points:
        raise ValueError("Cannot build an envelope path from zero samples.")

    left = _half_path(gauss_to_view(Point(p.y, p.x), config) for p in points)
    right = _half_path(gauss_to_view(Point(-p.y, p.x), config) for p in points)
    return left + " " + right


def parse_path(path: str) -> list[npt.NDArray[np.float64]]:
    """
    Split a path string into polylines.

    Args:
        path: Tokens `M x y` and `L x y`, space separated.

    Raises:
        ValueError: On an unknown command, a missing coordinate, or a path
            not starting with `M`.

    Returns:
        One (k, 2) array per `M` command.
    """
    tokens = path.split()
    polylines: list[list[tuple[float, float]]] = []

    i = 0
    while i < len(tokens):
        command = tokens[i]
        if command not in ("M", "L"):
            raise ValueError(f"Unknown path command '{command}' at token {i}.")
        if i + 2 >= len(tokens):
            raise ValueError(f"Path command '{command}' at token {i} is missing coordinates.")
        try:
            x, y = float(tokens[i + 1]), float(tokens[i + 2])
        except ValueError as e:
            raise ValueError(f"Invalid coordinates for '{command}' at token {i}: {e}") from e

        if command == "M":
            polylines.append([])
        elif not polylines:
            raise ValueError("Path must start with a move-to command.")
        polylines[-1].append((x, y))
        i += 3

    logger.debug(f"Parsed path into {len(polylines)} polylines.")
    return [np.array(line, dtype=np.float64) for line in polylines]
