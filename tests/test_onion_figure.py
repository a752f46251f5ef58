import matplotlib.pyplot as plt
import pytest

from onionplot.model.projector import project_to_view
from onionplot.model.task import StatusUpdate
from onionplot.model.tsp import Edge, Node
from onionplot.view.onion_figure import plot_fitness, plot_onion, plot_tour, save_figure


def test_plot_onion(tmp_path):
    points = [project_to_view(b, b) for b in ["0000", "1100", "0101", "1111"]]
    fig = plot_onion(points, annotate=True)
    ax = fig.axes[0]

    assert len(ax.lines) == 2
    assert ax.get_ylim() == (100.0, 0.0)
    assert len(ax.texts) == 4

    fig.savefig(tmp_path / "onion.png")
    assert (tmp_path / "onion.png").exists()


def test_plot_onion_into_existing_axes(small_config):
    fig, ax = plt.subplots()
    assert plot_onion([], small_config, ax=ax) is fig
    assert len(ax.lines) == 2
    assert len(ax.collections) == 0


def test_plot_tour():
    nodes = [Node(0.0, 0.0), Node(1.0, 0.0), Node(1.0, 1.0)]
    edges = [Edge(0, 1), Edge(1, 2), Edge(2, 0)]
    fig = plot_tour(nodes, edges)
    assert len(fig.axes[0].collections) == 2


def test_plot_tour_unknown_node_raises():
    with pytest.raises(IndexError):
        plot_tour([Node(0.0, 0.0)], [Edge(0, 3)])


def test_save_figure_closes_figure(tmp_path):
    fig = plot_onion([])
    save_figure(fig, str(tmp_path / "onion.png"))
    assert (tmp_path / "onion.png").exists()
    assert not plt.fignum_exists(fig.number)


def test_save_figure_closes_figure_on_error(tmp_path):
    fig = plot_onion([])
    with pytest.raises(OSError):
        save_figure(fig, str(tmp_path / "missing" / "onion.png"))
    assert not plt.fignum_exists(fig.number)


def test_plot_fitness():
    updates = [StatusUpdate(iterations=i * 100, current_fitness=float(i), current_solution="0") for i in range(5)]
    fig = plot_fitness(updates)
    assert len(fig.axes) == 1
    line = fig.axes[0].lines[0]
    assert list(line.get_xdata()) == [0, 100, 200, 300, 400]
    assert list(line.get_ydata()) == [0.0, 1.0, 2.0, 3.0, 4.0]


def test_plot_fitness_with_temperature():
    updates = [
        StatusUpdate.from_dict({"iterations": i, "current_fitness": 10.0 - i,
                                "current_solution": "1", "temperature": 2.0 ** -i})
        for i in range(3)
    ]
    fig = plot_fitness(updates)
    assert len(fig.axes) == 2
    assert list(fig.axes[1].lines[0].get_ydata()) == [1.0, 0.5, 0.25]
