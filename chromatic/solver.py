from typing import Iterable, Optional, Tuple

import networkx as nx

from .models import Coloring, normalize_palette
from .algorithms.greedy import greedy_coloring
from .algorithms.backtracking import backtracking_coloring

ALGORITHMS = ('greedy', 'backtracking')


def make_palette(k: int) -> Tuple[int, ...]:
    if k < 0:
        raise ValueError("palette size must be >= 0")
    return tuple(range(k))


def _check_graph(G: nx.Graph) -> nx.Graph:
    if G is None:
        raise ValueError("Coloring can not be calculated on a None graph")
    if G.is_directed():
        raise ValueError("Graph coloring algorithms do not work with directed graphs")
    return G


class ColoringAlgorithmsSelector:
    def __init__(self, G: nx.Graph, colors: Tuple):
        self.G = G
        self.colors = colors

    def applying_greedy_algorithm(self) -> Coloring:
        return greedy_coloring(self.G, self.colors)

    def applying_backtracking_algorithm(self, partial: Optional[Coloring] = None) -> Coloring:
        return backtracking_coloring(self.G, self.colors, partial)


class ColorsBuilder:
    def __init__(self, G: nx.Graph):
        self.G = G

    def with_colors(self, colors: Iterable) -> ColoringAlgorithmsSelector:
        return ColoringAlgorithmsSelector(self.G, normalize_palette(colors))


def coloring(G: nx.Graph) -> ColorsBuilder:
    """Entry point: ``coloring(G).with_colors(palette).applying_greedy_algorithm()``."""
    return ColorsBuilder(_check_graph(G))


def color_graph(G: nx.Graph, colors: Iterable, algo: str = 'greedy',
                partial: Optional[Coloring] = None) -> Coloring:
    selector = coloring(G).with_colors(colors)
    if algo == 'greedy':
        if partial is not None:
            raise ValueError("a partial coloring is only supported by 'backtracking'")
        return selector.applying_greedy_algorithm()
    elif algo == 'backtracking':
        return selector.applying_backtracking_algorithm(partial)
    raise ValueError("algo must be 'greedy' or 'backtracking'")
