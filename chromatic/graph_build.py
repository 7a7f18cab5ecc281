from typing import Hashable, Iterable, List, Optional, Tuple
import networkx as nx


def graph_from_edges(edges: Iterable[Tuple[Hashable, Hashable]], nodes: Iterable[Hashable] = ()) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(nodes)
    for u, v in edges:
        if u != v:
            G.add_edge(u, v)
    return G


def isolated_nodes(n: int) -> nx.Graph:
    G = nx.Graph()
    G.add_nodes_from(str(i) for i in range(n))
    return G


def complete_graph(n: int) -> nx.Graph:
    G = isolated_nodes(n)
    nodes = list(G.nodes())
    for i in range(len(nodes)):
        for j in range(i + 1, len(nodes)):
            G.add_edge(nodes[i], nodes[j])
    return G


def bipartite_graph(n: int) -> nx.Graph:
    """First n//2 nodes on one side, the rest on the other, fully cross-connected."""
    G = isolated_nodes(n)
    nodes = list(G.nodes())
    left, right = nodes[:n // 2], nodes[n // 2:]
    for u in left:
        for v in right:
            G.add_edge(u, v)
    return G


def crown_graph(n: int) -> nx.Graph:
    """n nodes joined in a ring."""
    G = isolated_nodes(n)
    nodes = list(G.nodes())
    for i in range(n):
        u, v = nodes[i], nodes[(i + 1) % n]
        if u != v:
            G.add_edge(u, v)
    return G


def sudoku_graph() -> Tuple[nx.Graph, List[List[str]]]:
    """Classic 9x9 constraint graph: cells sharing a row, column or box are adjacent.

    Returns the graph and the grid of cell labels, ``grid[row][col]``.
    """
    G = nx.Graph()
    grid = [[f"[{row}, {col}]" for col in range(9)] for row in range(9)]
    for row in grid:
        G.add_nodes_from(row)

    def clique(cells):
        for i in range(len(cells)):
            for j in range(i + 1, len(cells)):
                G.add_edge(cells[i], cells[j])

    for r0 in (0, 3, 6):
        for c0 in (0, 3, 6):
            clique([grid[r][c] for r in range(r0, r0 + 3) for c in range(c0, c0 + 3)])
    for i in range(9):
        clique(grid[i])
        clique([grid[r][i] for r in range(9)])
    return G, grid


def random_graph(n: int, p: float, seed: Optional[int] = None) -> nx.Graph:
    G = nx.gnp_random_graph(n, p, seed=seed)
    return nx.relabel_nodes(G, lambda x: f"N{x}")
