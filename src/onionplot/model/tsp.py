"""
TSP Instances and Tours
Parses TSPLIB EUC_2D instances and permutation strings into drawable geometry.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

SECTION_MARKER = "NODE_COORD_SECTION"
EOF_MARKER = "EOF"


@dataclass(frozen=True)
class Node:
    """A city of a TSP instance."""
    x: float
    y: float


@dataclass(frozen=True)
class Edge:
    """A directed tour edge between two node indices."""
    source: int
    target: int


def parse_euc2d(text: str) -> list[Node]:
    """
    Parse the node coordinates of a TSPLIB EUC_2D instance.

    Only the lines between `NODE_COORD_SECTION` and `EOF` are read. Each
    line holds `id x y`; the id is checked but the nodes are returned in
    file order.

    Args:
        text: Content of the instance file.

    Raises:
        ValueError: If a marker is missing or a line is malformed.

    Returns:
        The nodes of the instance.
    """
    lines = [line.strip() for line in text.splitlines()]

    try:
        start = lines.index(SECTION_MARKER) + 1
    except ValueError:
        raise ValueError(f"TSP instance has no '{SECTION_MARKER}' line.") from None
    try:
        end = lines.index(EOF_MARKER, start)
    except ValueError:
        raise ValueError(f"TSP instance has no '{EOF_MARKER}' line after the coordinates.") from None

    nodes = []
    for line_no, line in enumerate(lines[start:end], start=start + 1):
        if not line:
            continue
        parts = line.split()
        if len(parts) != 3:
            raise ValueError(f"Line {line_no}: expected 'id x y', got '{line}'.")
        try:
            int(parts[0])
            nodes.append(Node(x=float(parts[1]), y=float(parts[2])))
        except ValueError:
            raise ValueError(f"Line {line_no}: invalid node '{line}'.") from None

    if not nodes:
        raise ValueError("TSP instance contains no nodes.")

    logger.debug(f"Parsed TSP instance with {len(nodes)} nodes.")
    return nodes


def parse_permutation(text: str) -> list[Edge]:
    """
    Convert a comma-separated permutation into a closed tour.

    Example:
        "0,3,1,2" -> (0,3), (3,1), (1,2), (2,0)

    Raises:
        ValueError: If the string is empty or holds a non-integer entry.
    """
    if not text.strip():
        raise ValueError("Cannot build a tour from an empty permutation.")
    try:
        permutation = [int(part) for part in text.split(",")]
    except ValueError:
        raise ValueError(f"Invalid permutation '{text}'. Expected comma-separated integers.") from None

    edges = [Edge(a, b) for a, b in zip(permutation[:-1], permutation[1:])]
    edges.append(Edge(permutation[-1], permutation[0]))
    return edges


def tour_segments(nodes: Sequence[Node], edges: Sequence[Edge]) -> npt.NDArray[np.float64]:
    """
    Endpoint coordinates of every tour edge.

    Raises:
        IndexError: If an edge refers to a node that does not exist.

    Returns:
        Array of shape (len(edges), 2, 2): [[x_source, y_source], [x_target, y_target]].
    """
    segments = np.zeros((len(edges), 2, 2), dtype=np.float64)
    for i, edge in enumerate(edges):
        for j, index in enumerate((edge.source, edge.target)):
            if not 0 <= index < len(nodes):
                raise IndexError(f"Edge {edge.source}->{edge.target} refers to unknown node {index}.")
            segments[i, j] = (nodes[index].x, nodes[index].y)
    return segments
