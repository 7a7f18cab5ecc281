import argparse
import logging
import sys
from typing import List, Optional

import networkx as nx

from chromatic.errors import NotEnoughColorsError
from chromatic.evaluation import summary, coloring_frame
from chromatic.graph_build import (
    graph_from_edges, random_graph, complete_graph, bipartite_graph, crown_graph, sudoku_graph
)
from chromatic.io_utils import load_edge_list_csv, load_palette, parse_assignments
from chromatic.solver import ALGORITHMS, color_graph, make_palette


def build_graph(args) -> nx.Graph:
    if args.edges:
        return graph_from_edges(load_edge_list_csv(args.edges))
    if args.generate is not None:
        return random_graph(args.generate, args.density, seed=args.seed)
    if args.complete is not None:
        return complete_graph(args.complete)
    if args.bipartite is not None:
        return bipartite_graph(args.bipartite)
    if args.crown is not None:
        return crown_graph(args.crown)
    if args.sudoku:
        G, _ = sudoku_graph()
        return G
    raise SystemExit("Provide --edges, --generate N, --complete N, --bipartite N, --crown N or --sudoku")


def main(argv: Optional[List[str]] = None):
    p = argparse.ArgumentParser(description="Chromatic – greedy and backtracking graph coloring")
    # Input modes
    p.add_argument('--edges', type=str, help='Edge list CSV u,v')
    p.add_argument('--generate', type=int, default=None, help='Random G(n, p) graph with N nodes')
    p.add_argument('--density', type=float, default=0.15)
    p.add_argument('--seed', type=int, default=None)
    p.add_argument('--complete', type=int, default=None, help='Complete graph on N nodes')
    p.add_argument('--bipartite', type=int, default=None, help='Complete bipartite graph on N nodes')
    p.add_argument('--crown', type=int, default=None, help='Ring of N nodes')
    p.add_argument('--sudoku', action='store_true', help='9x9 Sudoku constraint graph')

    # Palette
    p.add_argument('--colors', type=int, default=None, help='Integer palette 0..K-1')
    p.add_argument('--palette', type=str, default=None, help='File with one color per line')

    # Algo
    p.add_argument('--algo', type=str, default='greedy', choices=ALGORITHMS)
    p.add_argument('--fix', action='append', default=[], metavar='NODE=COLOR',
                   help='Pre-color a node (backtracking only); repeatable')

    # Output
    p.add_argument('--show', action='store_true', help='Print the node/color table')
    p.add_argument('-v', '--verbose', action='store_true')
    args = p.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    G = build_graph(args)

    if args.palette:
        palette = load_palette(args.palette)
    elif args.colors is not None:
        palette = make_palette(args.colors)
    else:
        # enough for greedy on any graph
        palette = make_palette(max((d for _, d in G.degree()), default=0) + 1)

    try:
        partial = parse_assignments(args.fix, palette) if args.fix else None
        result = color_graph(G, palette, algo=args.algo, partial=partial)
    except NotEnoughColorsError as e:
        print(summary(G, palette, None, args.algo))
        raise SystemExit(f"Error: {e}")
    except ValueError as e:
        raise SystemExit(f"Error: {e}")

    print(summary(G, palette, result, args.algo))
    if args.show:
        print(coloring_frame(result).to_string(index=False))
    return result


if __name__ == '__main__':
    main(sys.argv[1:])
