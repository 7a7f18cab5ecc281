import networkx as nx
import pytest

from chromatic.algorithms.backtracking import backtracking_coloring
from chromatic.algorithms.greedy import greedy_coloring
from chromatic.errors import NotEnoughColorsError
from chromatic.models import Coloring
from chromatic.solver import coloring, color_graph, make_palette


def test_none_graph():
    with pytest.raises(ValueError):
        coloring(None).with_colors(None).applying_greedy_algorithm()


def test_none_colors():
    with pytest.raises(ValueError):
        coloring(nx.Graph()).with_colors(None).applying_backtracking_algorithm()


def test_directed_graph_rejected():
    with pytest.raises(ValueError):
        coloring(nx.DiGraph())


def test_builder_greedy(triangle, check_coloring):
    result = coloring(triangle).with_colors(make_palette(3)).applying_greedy_algorithm()
    check_coloring(triangle, result)


def test_builder_backtracking_with_partial(triangle, check_coloring):
    partial = Coloring.from_mapping({"3": 0})
    result = coloring(triangle).with_colors(make_palette(3)).applying_backtracking_algorithm(partial)
    assert result.get_color("3") == 0
    check_coloring(triangle, result)


def test_duplicate_palette_entries_collapse():
    selector = coloring(nx.Graph()).with_colors(["red", "red", "blue"])
    assert selector.colors == ("red", "blue")


def test_color_graph_dispatch(triangle):
    assert color_graph(triangle, make_palette(3), algo='greedy').required_colors() == 3
    assert color_graph(triangle, make_palette(3), algo='backtracking').required_colors() == 3
    with pytest.raises(NotEnoughColorsError):
        color_graph(triangle, make_palette(2), algo='backtracking')


def test_color_graph_rejects_unknown_algo(triangle):
    with pytest.raises(ValueError):
        color_graph(triangle, make_palette(3), algo='dsatur')


def test_color_graph_greedy_refuses_partial(triangle):
    with pytest.raises(ValueError):
        color_graph(triangle, make_palette(3), algo='greedy', partial=Coloring())


def test_make_palette():
    assert make_palette(0) == ()
    assert make_palette(3) == (0, 1, 2)
    with pytest.raises(ValueError):
        make_palette(-1)


@pytest.mark.parametrize("palette", [[None], [0, None], (None, 1, 2)])
def test_none_is_not_a_palette_color(triangle, palette):
    with pytest.raises(ValueError):
        coloring(triangle).with_colors(palette).applying_backtracking_algorithm()
    with pytest.raises(ValueError):
        color_graph(triangle, palette, algo='greedy')


def test_algorithms_reject_none_color_when_called_directly(triangle):
    with pytest.raises(ValueError):
        backtracking_coloring(triangle, [None])
    with pytest.raises(ValueError):
        greedy_coloring(triangle, [None, 1, 2])
