from typing import Dict, Hashable, Iterator, List, Optional

import networkx as nx

Node = Hashable


class DegreeOrderedNodes:
    """Uncolored nodes bucketed by degree, iterated highest degree first.

    Buckets keep insertion order, so nodes sharing a degree always come out
    in the order they were added. Removing a node through a cursor takes it
    out of the bucket itself: a fresh iteration no longer sees it.
    """

    def __init__(self):
        # degree -> insertion-ordered set of nodes (dict values unused)
        self._buckets: Dict[int, Dict[Node, None]] = {}
        self._size = 0

    @classmethod
    def from_graph(cls, G: nx.Graph) -> 'DegreeOrderedNodes':
        ordered = cls()
        for u in G.nodes():
            ordered.add_node_degree(u, G.degree(u))
        return ordered

    def add_node_degree(self, node: Node, degree: int) -> None:
        bucket = self._buckets.setdefault(degree, {})
        if node not in bucket:
            bucket[node] = None
            self._size += 1

    def remove(self, node: Node, degree: Optional[int] = None) -> bool:
        degrees = [degree] if degree is not None else list(self._buckets)
        for d in degrees:
            bucket = self._buckets.get(d)
            if bucket is not None and node in bucket:
                del bucket[node]
                if not bucket:
                    del self._buckets[d]
                self._size -= 1
                return True
        return False

    def degrees(self) -> List[int]:
        return sorted(self._buckets, reverse=True)

    def degree_count(self) -> int:
        """Number of distinct degrees still holding nodes."""
        return len(self._buckets)

    def cursor(self) -> 'DegreeCursor':
        return DegreeCursor(self)

    def __iter__(self) -> Iterator[Node]:
        return self.cursor()

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, node: Node) -> bool:
        return any(node in bucket for bucket in self._buckets.values())


class DegreeCursor:
    """Forward-only cursor over a DegreeOrderedNodes.

    Only the node most recently produced may be removed, via ``remove()``.
    """

    def __init__(self, ordered: DegreeOrderedNodes):
        self._ordered = ordered
        self._degrees = iter(ordered.degrees())
        self._pending: Iterator[Node] = iter(())
        self._degree: Optional[int] = None
        self._last: Optional[Node] = None
        self._has_last = False

    def __iter__(self) -> 'DegreeCursor':
        return self

    def __next__(self) -> Node:
        self._has_last = False
        while True:
            for node in self._pending:
                # skip anything removed since this bucket was snapshotted
                bucket = self._ordered._buckets.get(self._degree)
                if bucket is not None and node in bucket:
                    self._last = node
                    self._has_last = True
                    return node
            self._degree = next(self._degrees)
            bucket = self._ordered._buckets.get(self._degree, {})
            self._pending = iter(list(bucket))

    def remove(self) -> None:
        if not self._has_last:
            raise RuntimeError("remove() called before next() or twice for the same node")
        self._ordered.remove(self._last, self._degree)
        self._has_last = False
