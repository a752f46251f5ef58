"""
Configuration & Constants
=========================
This module serves as the central registry for the onion plot geometry.

Why is this file needed?
------------------------
1. Abstraction: The envelope half-width and sampling resolution would
   otherwise be scattered through the converters as magic numbers.
2. Testability: Every function that depends on the envelope receives an
   `EnvelopeConfig` explicitly, so alternate resolutions can be used
   without touching global state.

Exports:
    DEFAULT_HALF_WIDTH (float): Half-width D of the gaussian domain [-D, D].
    DEFAULT_RESOLUTION (int): Number of intervals the envelope is sampled with.
    VIEW_SIZE (float): Side length of the square view space.
    EnvelopeConfig: Immutable configuration object.
    DEFAULT_CONFIG (EnvelopeConfig): Configuration built from the defaults.
"""
from __future__ import annotations

import math
from dataclasses import dataclass

# Global Constants
DEFAULT_HALF_WIDTH: float = 3.5  # density is ~0.002 at the boundary
DEFAULT_RESOLUTION: int = 100
VIEW_SIZE: float = 100.0


@dataclass(frozen=True)
class EnvelopeConfig:
    """
    Geometry of the onion envelope.

    Frozen (and therefore hashable) so it can key the envelope cache.

    Args:
        half_width: Half-width D of the gaussian domain. Must be positive.
        resolution: Number of intervals between -D and D. Must be at least 1.

    Raises:
        ValueError: If one of the values is out of range.
    """
    half_width: float = DEFAULT_HALF_WIDTH
    resolution: int = DEFAULT_RESOLUTION

    def __post_init__(self) -> None:
        if not math.isfinite(self.half_width) or self.half_width <= 0.0:
            raise ValueError(f"Invalid envelope half-width: {self.half_width}. "
                             f"'half_width' must be a positive finite number.")
        if isinstance(self.resolution, bool) or not isinstance(self.resolution, int) or self.resolution < 1:
            raise ValueError(f"Invalid envelope resolution: {self.resolution}. "
                             f"'resolution' must be an integer >= 1.")

    @property
    def domain(self) -> tuple[float, float]:
        """The gaussian domain as a (min, max) tuple."""
        return -self.half_width, self.half_width


DEFAULT_CONFIG = EnvelopeConfig()
