from typing import Iterable
import networkx as nx

from .models import Coloring


def coloring_ok(G: nx.Graph, coloring: Coloring) -> bool:
    """No edge joins two nodes holding the same color."""
    for u, v in G.edges():
        if u == v:
            continue
        cu, cv = coloring.get_color(u), coloring.get_color(v)
        if cu is not None and cu == cv:
            return False
    return True


def coloring_complete(G: nx.Graph, coloring: Coloring) -> bool:
    return all(coloring.contains_colored_node(u) for u in G.nodes())


def palette_ok(coloring: Coloring, colors: Iterable) -> bool:
    allowed = list(colors)
    return all(c in allowed for c in coloring.used_colors())


def partial_preserved(partial: Coloring, coloring: Coloring) -> bool:
    for u, c in partial.items():
        if coloring.get_color(u) != c:
            return False
    return True
