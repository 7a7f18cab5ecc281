from typing import Iterable, Optional

import networkx as nx
import pandas as pd

from .models import Coloring
from .validation import coloring_ok, coloring_complete, palette_ok


def clique_lower_bound(G: nx.Graph) -> int:
    """Size of a greedily grown clique, a lower bound on the chromatic number.

    Starts from the highest-degree node and keeps adding the highest-degree
    candidate adjacent to every clique member.
    """
    if G.number_of_nodes() == 0:
        return 0
    seed = max(G.nodes(), key=lambda u: G.degree(u))
    clique = {seed}
    candidates = set(G.neighbors(seed)) - {seed}
    while candidates:
        u = max(candidates, key=lambda v: G.degree(v))
        clique.add(u)
        candidates = {v for v in candidates if v != u and G.has_edge(u, v)}
    return len(clique)


def coloring_frame(coloring: Coloring) -> pd.DataFrame:
    rows = [{'node': str(u), 'color': c} for u, c in coloring.items()]
    df = pd.DataFrame(rows, columns=['node', 'color'])
    return df.sort_values('node', kind='stable').reset_index(drop=True)


def summary(G: nx.Graph, colors: Iterable, coloring: Optional[Coloring], algo: str) -> str:
    palette = list(colors)
    n = G.number_of_nodes()
    m = G.number_of_edges()
    lb = clique_lower_bound(G)
    max_deg = max((d for _, d in G.degree()), default=-1)
    warning = ""
    if len(palette) < lb:
        warning = f"Warning: palette={len(palette)} < clique LB={lb}; no valid coloring exists.\n"
    if coloring is None:
        result = "Result: not enough colors\n"
    else:
        result = (
            f"Required colors: {coloring.required_colors()}\n"
            f"Valid (conflicts): {coloring_ok(G, coloring)}  "
            f"Complete: {coloring_complete(G, coloring)}  "
            f"Palette only: {palette_ok(coloring, palette)}\n"
        )
    return (
        f"Nodes: {n}  Edges: {m}  Max degree: {max(max_deg, 0)}\n"
        f"Algorithm: {algo}  Palette size: {len(palette)}\n"
        f"Clique lower bound: {lb}  Greedy bound (max degree + 1): {max_deg + 1}\n"
        f"{result}"
        f"{warning}"
    )
