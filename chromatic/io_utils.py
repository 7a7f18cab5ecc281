import csv
import io
import os
from typing import IO, Iterable, List, Tuple, Union

from .models import Coloring

TextOrPath = Union[str, os.PathLike, IO]


def _open_text(src: TextOrPath):
    """Return a text-mode handle for ``src`` and whether the caller must close it.

    ``src`` may be a path, a text stream, or a bytes buffer (as handed over
    by an upload widget).
    """
    if isinstance(src, (str, os.PathLike)):
        return open(src, 'r', newline=''), True
    if isinstance(src, (io.BytesIO, io.BufferedIOBase)):
        src.seek(0)
        return io.TextIOWrapper(src, encoding='utf-8', newline=''), True
    if hasattr(src, 'read'):
        if hasattr(src, 'seek'):
            src.seek(0)
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def load_edge_list_csv(src: TextOrPath) -> List[Tuple[str, str]]:
    """Rows of ``u,v``; blank rows, ``#`` comments and self-loops are skipped."""
    edges: List[Tuple[str, str]] = []
    f, should_close = _open_text(src)
    try:
        for row in csv.reader(f):
            if not row or row[0].lstrip().startswith('#'):
                continue
            if len(row) >= 2:
                u, v = row[0].strip(), row[1].strip()
                if u and v and u != v:
                    edges.append((u, v))
    finally:
        if should_close:
            f.close()
    return edges


def load_palette(src: TextOrPath) -> List[str]:
    """One color per line, order kept, duplicates dropped."""
    colors: List[str] = []
    f, should_close = _open_text(src)
    try:
        for line in f:
            line = line.strip()
            if not line or line.startswith('#'):
                continue
            if line not in colors:
                colors.append(line)
    finally:
        if should_close:
            f.close()
    return colors


def parse_assignments(pairs: Iterable[str], palette: Iterable = ()) -> Coloring:
    """Build a partial coloring from ``NODE=COLOR`` strings.

    A color that reads as an integer matches an integer palette entry.
    """
    allowed = list(palette)
    partial = Coloring()
    for pair in pairs:
        node, sep, color = pair.partition('=')
        node, value = node.strip(), color.strip()
        if not sep or not node or not value:
            raise ValueError(f"expected NODE=COLOR, got {pair!r}")
        if value.lstrip('-').isdigit() and int(value) in allowed:
            value = int(value)
        partial.add_color(node, value)
    return partial
