import logging
from typing import Hashable, Iterable, List

import networkx as nx

from ..errors import NotEnoughColorsError
from ..models import Coloring, normalize_palette
from .ordering import DegreeOrderedNodes

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


def greedy_coloring(G: nx.Graph, colors: Iterable) -> Coloring:
    """First-fit coloring by descending degree, one color class per pass.

    For each palette color, scan the still-uncolored nodes highest degree
    first and give the color to every node not adjacent to a node already
    in this color's class. Raises NotEnoughColorsError if nodes are left
    once the palette is used up; that says nothing about whether another
    algorithm could do it with the same palette.
    """
    palette = normalize_palette(colors)
    coloring = Coloring()
    uncolored = DegreeOrderedNodes.from_graph(G)

    palette_it = iter(palette)
    while uncolored:
        color = next(palette_it, _EXHAUSTED)
        if color is _EXHAUSTED:
            logger.debug("greedy: %d node(s) left uncolored after %d color(s)", len(uncolored), len(palette))
            raise NotEnoughColorsError(palette, algorithm='greedy')

        color_class: List[Hashable] = []
        cursor = uncolored.cursor()
        for u in cursor:
            if any(G.has_edge(v, u) for v in color_class):
                continue
            cursor.remove()
            coloring.add_color(u, color)
            color_class.append(u)
        logger.debug("greedy: color %r assigned to %d node(s)", color, len(color_class))

    return coloring
