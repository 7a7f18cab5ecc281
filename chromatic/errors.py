from typing import Any, Iterable, Optional


class ColoringError(Exception):
    """Base class for coloring failures."""


class NotEnoughColorsError(ColoringError):
    """The palette cannot color the graph under the chosen algorithm.

    For backtracking this is exact: no assignment from the palette exists.
    For greedy it only means the heuristic ran out of colors.
    """

    def __init__(self, colors: Iterable[Any], algorithm: Optional[str] = None):
        self.colors = tuple(colors)
        self.algorithm = algorithm
        where = f" ({algorithm})" if algorithm else ""
        super().__init__(
            f"Not enough colors{where}: palette of {len(self.colors)} "
            f"color(s) {list(self.colors)!r} cannot color the graph"
        )
