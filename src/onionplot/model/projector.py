"""
Bitstring Projector
===================
Assigns every bitstring a position in percentage space.

Vertical position is the fraction of set bits. Horizontal position orders
bitstrings with the same number of ones by where those ones sit: each one
at index i weighs its distance to the right end (n - 1 - i), and the summed
weight is normalized against the lightest (ones packed right) and heaviest
(ones packed left) arrangement. Ones packed at the left end give x = 1.
"""
from __future__ import annotations

import logging
from numbers import Integral
from typing import Optional, Sequence, Union

from onionplot.config import DEFAULT_CONFIG, EnvelopeConfig
from onionplot.model.converters import percentage_to_view
from onionplot.model.points import Point

logger = logging.getLogger(__name__)

Bitstring = Union[str, Sequence[int], Sequence[bool]]


def _to_bits(bitstring: Bitstring) -> list[bool]:
    if len(bitstring) == 0:
        raise ValueError("Cannot project an empty bitstring.")

    bits = []
    for i, symbol in enumerate(bitstring):
        # Characters of a str, or bools and ints (numpy integers included)
        if isinstance(symbol, str):
            valid = symbol in ("0", "1")
        else:
            valid = isinstance(symbol, Integral) and symbol in (0, 1)
        if not valid:
            raise ValueError(f"Invalid symbol {symbol!r} at index {i}. "
                             f"A bitstring may only contain 0 and 1.")
        bits.append(symbol == "1" if isinstance(symbol, str) else bool(symbol == 1))
    return bits


def bitstring_to_onion_coords(bitstring: Bitstring, tooltip: Optional[str] = None) -> Point:
    """
    Project a bitstring into percentage space.

    Args:
        bitstring: A '0'/'1' string, or a sequence of bools or 0/1 ints.
            Index 0 is the leftmost position.
        tooltip: Label carried along to the plotted point.

    Raises:
        ValueError: If the bitstring is empty or contains other symbols.

    Returns:
        The point (horizontal, vertical) with both coordinates in [0, 1].
    """
    bits = _to_bits(bitstring)
    n = len(bits)
    k = sum(bits)

    # Fixed corners, the normalization below would be 0/0
    if k == n:
        return Point(1.0, 1.0, tooltip)
    if k == 0:
        return Point(0.0, 0.0, tooltip)

    vertical = k / n

    weight = sum(n - 1 - i for i, bit in enumerate(bits) if bit)
    # sum(0..k-1) and sum(n-1-i for i in 0..k-1)
    min_weight = k * (k - 1) // 2
    max_weight = k * (n - 1) - min_weight

    horizontal = (weight - min_weight) / (max_weight - min_weight)

    return Point(horizontal, vertical, tooltip)


def project_to_view(
    bitstring: Bitstring,
    tooltip: Optional[str] = None,
    config: EnvelopeConfig = DEFAULT_CONFIG
) -> Point:
    """Project a bitstring straight into view space."""
    return percentage_to_view(bitstring_to_onion_coords(bitstring, tooltip), config)
