from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Optional, Set, Tuple

Node = Hashable
Color = Any


@dataclass
class Coloring:
    """Node -> color assignment plus the multiset of colors in use.

    Both algorithms work on one of these in place and hand it back to the
    caller once every node is colored.
    """
    # node -> assigned color
    colors: Dict[Node, Color] = field(default_factory=dict)
    # color -> number of nodes currently holding it
    _in_use: Counter = field(default_factory=Counter, init=False, repr=False, compare=False)

    def __post_init__(self):
        # own copy, so add_color never writes through to the caller's dict
        self.colors = dict(self.colors)
        for node, color in self.colors.items():
            if color is None:
                raise ValueError(f"None is not a color (node {node!r})")
            self._in_use[color] += 1

    @classmethod
    def from_mapping(cls, mapping: Mapping[Node, Color]) -> 'Coloring':
        if mapping is None:
            raise ValueError("Partial coloring must be not None")
        return cls(colors=dict(mapping))

    def add_color(self, node: Node, color: Color) -> None:
        if node is None:
            raise ValueError("Impossible to color a None node")
        if color is None:
            raise ValueError("None is not a color; use remove_color to uncolor a node")
        if node in self.colors:
            self._release(self.colors[node])
        self.colors[node] = color
        self._in_use[color] += 1

    def remove_color(self, node: Node) -> None:
        if node not in self.colors:
            return
        self._release(self.colors.pop(node))

    def _release(self, color: Color) -> None:
        self._in_use[color] -= 1
        if self._in_use[color] <= 0:
            del self._in_use[color]

    def get_color(self, node: Node) -> Optional[Color]:
        if node is None:
            raise ValueError("Impossible to get the color for a None node")
        return self.colors.get(node)

    def required_colors(self) -> int:
        """Number of distinct colors actually used, not the palette size."""
        return len(self._in_use)

    def contains_colored_node(self, node: Node) -> bool:
        return node in self.colors

    def used_colors(self) -> Set[Color]:
        return set(self._in_use)

    def color_classes(self) -> Dict[Color, List[Node]]:
        groups: Dict[Color, List[Node]] = {}
        for node, color in self.colors.items():
            groups.setdefault(color, []).append(node)
        return groups

    def items(self) -> Iterator[Tuple[Node, Color]]:
        return iter(self.colors.items())

    def copy(self) -> 'Coloring':
        return Coloring(colors=dict(self.colors))

    def __contains__(self, node: Node) -> bool:
        return node in self.colors

    def __iter__(self) -> Iterator[Node]:
        return iter(self.colors)

    def __len__(self) -> int:
        return len(self.colors)


def normalize_palette(colors) -> Tuple[Color, ...]:
    """Palette as a tuple in the caller's order, duplicates dropped.

    None is refused since a None color reads as "unassigned".
    """
    if colors is None:
        raise ValueError("Colors set must be not None")
    palette = tuple(dict.fromkeys(colors))
    if any(c is None for c in palette):
        raise ValueError("None is not a valid palette color")
    return palette
