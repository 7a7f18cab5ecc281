import logging
from typing import Hashable, Iterable, List, Optional

import networkx as nx

from ..errors import NotEnoughColorsError
from ..models import Coloring, normalize_palette

logger = logging.getLogger(__name__)

_UNSET = object()


def is_conflicting(G: nx.Graph, coloring: Coloring, u: Hashable) -> bool:
    """True if some neighbor of ``u`` already holds ``u``'s color.

    An uncolored ``u`` never conflicts, and neither do uncolored neighbors.
    """
    color = coloring.get_color(u)
    if color is None:
        return False
    for v in G.neighbors(u):
        if v != u and coloring.colors.get(v, _UNSET) == color:
            return True
    return False


def _check_partial(G: nx.Graph, partial: Coloring) -> Optional[Hashable]:
    """Reject foreign nodes, return the first pre-colored node in conflict."""
    foreign = [u for u in partial if not G.has_node(u)]
    if foreign:
        raise ValueError(f"Partial coloring holds nodes not in the graph: {foreign!r}")
    for u in partial:
        if is_conflicting(G, partial, u):
            return u
    return None


def backtracking_coloring(G: nx.Graph, colors: Iterable, partial: Optional[Coloring] = None) -> Coloring:
    """Exhaustive m-coloring search with a fixed palette.

    Extends ``partial`` in place (a fresh ledger if omitted) until every node
    holds a palette color with no two neighbors sharing one. Pre-colored
    nodes keep their color. Raises NotEnoughColorsError when no such
    extension exists, leaving ``partial`` as it was passed in.

    The search walks an explicit stack, one palette index per position,
    trying colors in palette order and undoing a position's assignment
    before stepping back from it.
    """
    palette = normalize_palette(colors)
    coloring = Coloring() if partial is None else partial

    clash = _check_partial(G, coloring)
    if clash is not None:
        logger.debug("backtracking: pre-colored node %r conflicts with a neighbor", clash)
        raise NotEnoughColorsError(palette, algorithm='backtracking')

    nodes: List[Hashable] = [u for u in G.nodes() if not coloring.contains_colored_node(u)]
    if not nodes:
        return coloring
    if not palette:
        raise NotEnoughColorsError(palette, algorithm='backtracking')

    try:
        found = _search(G, palette, nodes, coloring)
    except BaseException:
        # aborted mid-branch: drop everything this run assigned
        for u in nodes:
            coloring.remove_color(u)
        raise

    if not found:
        raise NotEnoughColorsError(palette, algorithm='backtracking')
    return coloring


def _search(G: nx.Graph, palette: tuple, nodes: List[Hashable], coloring: Coloring) -> bool:
    n = len(nodes)
    # next_choice[i] is the palette index to try next at position i
    next_choice = [0] * n
    i = 0
    steps = 0
    while i < n:
        u = nodes[i]
        k = next_choice[i]
        if k == len(palette):
            coloring.remove_color(u)
            next_choice[i] = 0
            i -= 1
            if i < 0:
                logger.debug("backtracking: search space exhausted after %d step(s)", steps)
                return False
            continue
        next_choice[i] = k + 1
        coloring.add_color(u, palette[k])
        steps += 1
        if not is_conflicting(G, coloring, u):
            i += 1
    logger.debug("backtracking: colored %d node(s) in %d step(s)", n, steps)
    return True

