"""
Onion Figure
============
Matplotlib rendering of onion plots, TSP tours and fitness curves.

Onion plots are drawn in view space: [0, 100] x [0, 100] with y = 0 at the
top, so the y-axis is inverted.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, TYPE_CHECKING

import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection

from onionplot.config import DEFAULT_CONFIG, VIEW_SIZE, EnvelopeConfig
from onionplot.model.envelope import generate_gauss_points
from onionplot.model.path import generate_gauss_path, parse_path
from onionplot.model.points import Point
from onionplot.model.task import StatusUpdate
from onionplot.model.tsp import Edge, Node, tour_segments

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

logger = logging.getLogger(__name__)


def _get_axes(ax: Optional[Axes]) -> tuple[Figure, Axes]:
    if ax is not None:
        return ax.figure, ax
    plt.rcParams["figure.constrained_layout.use"] = True
    fig, ax = plt.subplots(figsize=(5, 7))
    return fig, ax


def save_figure(fig: Figure, filepath: str) -> None:
    """Write a figure to disk (format from the extension) and release it."""
    try:
        fig.savefig(filepath)
    finally:
        plt.close(fig)
    logger.info(f"Saved figure to: {filepath}")


def plot_onion(
    points: Sequence[Point],
    config: EnvelopeConfig = DEFAULT_CONFIG,
    ax: Optional[Axes] = None,
    path: Optional[str] = None,
    annotate: bool = False
) -> Figure:
    """
    Draw the onion outline and the given genotypes.

    Args:
        points: Genotype positions in view space (see `project_to_view`).
        config: Envelope geometry used for the outline.
        ax: Axes to draw into. A new figure is created when omitted.
        path: Precomputed outline path. Built from `config` when omitted.
        annotate: Write each point's tooltip next to it.

    Returns:
        The figure holding the plot.
    """
    fig, ax = _get_axes(ax)

    if path is None:
        path = generate_gauss_path(generate_gauss_points(config), config)
    for polyline in parse_path(path):
        ax.plot(polyline[:, 0], polyline[:, 1], color="k", lw=1)

    if points:
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        ax.scatter(xs, ys, s=12, color="tab:red", zorder=3)
        if annotate:
            for p in points:
                if p.tooltip:
                    ax.annotate(p.tooltip, (p.x, p.y), fontsize=6,
                                xytext=(3, 3), textcoords="offset points")

    ax.set_xlim(0, VIEW_SIZE)
    ax.set_ylim(VIEW_SIZE, 0)
    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])

    logger.debug(f"Plotted onion with {len(points)} points.")
    return fig


def plot_tour(nodes: Sequence[Node], edges: Sequence[Edge], ax: Optional[Axes] = None) -> Figure:
    """
    Draw a TSP tour over its nodes.

    Raises:
        IndexError: If an edge refers to an unknown node.
    """
    fig, ax = _get_axes(ax)

    segments = tour_segments(nodes, edges)
    ax.add_collection(LineCollection(segments, colors="tab:blue", linewidths=1))
    ax.scatter([n.x for n in nodes], [n.y for n in nodes], s=8, color="k", zorder=3)
    ax.autoscale_view()
    ax.set_aspect("equal")

    logger.debug(f"Plotted tour with {len(edges)} edges over {len(nodes)} nodes.")
    return fig


def plot_fitness(updates: Sequence[StatusUpdate], ax: Optional[Axes] = None) -> Figure:
    """
    Draw fitness over iterations for a sequence of status updates.

    Updates reporting a `temperature` (Simulated Annealing) get a second
    y-axis with the temperature curve.

    Returns:
        The figure holding the plot.
    """
    fig, ax = _get_axes(ax)

    iterations = [u.iterations for u in updates]
    ax.plot(iterations, [u.current_fitness for u in updates], color="tab:blue", lw=1.5, label="Fitness")
    ax.set_xlabel("Iteration")
    ax.set_ylabel("Fitness")
    ax.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)

    temperatures = [(u.iterations, u.extra["temperature"]) for u in updates
                    if u.extra.get("temperature") is not None]
    if temperatures:
        ax_temp = ax.twinx()
        ax_temp.plot(*zip(*temperatures), color="tab:red", lw=1, label="Temperature")
        ax_temp.set_ylabel("Temperature")

    logger.debug(f"Plotted fitness of {len(updates)} updates.")
    return fig
