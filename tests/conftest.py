from typing import Callable

import networkx as nx
import pytest

from chromatic.models import Coloring
from chromatic.solver import make_palette


def _check_coloring(G: nx.Graph, coloring: Coloring) -> None:
    assert coloring is not None
    for u, v in G.edges():
        cu, cv = coloring.get_color(u), coloring.get_color(v)
        assert cu is not None, u
        assert cv is not None, v
        assert cu != cv, (u, v)
    for u in G.nodes():
        assert coloring.contains_colored_node(u), u


@pytest.fixture()
def check_coloring() -> Callable[[nx.Graph, Coloring], None]:
    """Asserts every edge joins two differently colored nodes and nothing is left uncolored."""
    return _check_coloring


@pytest.fixture()
def colors():
    return make_palette(11)


@pytest.fixture()
def triangle() -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(["1", "2", "3"])
    G.add_edges_from([("1", "2"), ("2", "3"), ("3", "1")])
    return G
