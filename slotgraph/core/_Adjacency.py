import numbers

from ._Edge import Edge
from ._Errors import InvalidEndpointError, SelfLoopError
from ._Iteration import GraphIterable


class Adjacency:
    # Per-slot outgoing edge lists

    def add_edge(self, source, target, weight: int):
        """Add an edge, or replace the weight of an existing one.

        Parameters
        --
        source, target : int | str
            Slots or names of existing vertices.
        weight : int

        Returns
        ---
        Edge
            The stored edge.

        Raises
        --
        InvalidEndpointError
            If either end is not a valid vertex.
        SelfLoopError
            If ``source`` and ``target`` are the same vertex.

        """
        s = self._resolve(source)
        t = self._resolve(target)
        if not self._valid(s) or not self._valid(t):
            raise InvalidEndpointError(source, target)
        if s == t:
            raise SelfLoopError(source)
        if isinstance(weight, bool) or not isinstance(weight, numbers.Integral):
            raise TypeError(f"edge weights must be int, not {type(weight).__name__}")

        self._touch()
        edge = Edge(s, t, int(weight))
        edges = self._adjacency[s]
        for i, e in enumerate(edges):
            if e.target == t:
                edges[i] = edge
                return edge
        edges.append(edge)
        self._num_edges += 1
        return edge

    def remove_edge(self, source, target):
        """Remove the edge ``source -> target`` if present; otherwise do nothing."""
        s = self._resolve(source)
        t = self._resolve(target)
        if not self._valid(s):
            return
        edges = self._adjacency[s]
        # full scan, even after a hit
        kept = [e for e in edges if e.target != t]
        removed = len(edges) - len(kept)
        if removed:
            edges[:] = kept
            self._num_edges -= removed
            self._touch()

    def _remove_all_edges_to(self, target):
        """INTERNAL: Drop every edge entering ``target``. Does not bump the version."""
        for edges in self._adjacency:
            if not edges:
                continue
            kept = [e for e in edges if e.target != target]
            self._num_edges -= len(edges) - len(kept)
            edges[:] = kept

    def has_edge(self, source, target) -> bool:
        return self.edge_weight(source, target) is not None

    def edge_weight(self, source, target):
        """Weight of ``source -> target``, or ``None`` when there is no such edge."""
        s = self._resolve(source)
        t = self._resolve(target)
        if not self._valid(s):
            return None
        for e in self._adjacency[s]:
            if e.target == t:
                return e.weight
        return None

    def out_degree(self, vertex) -> int:
        slot = self._resolve(vertex)
        return len(self._adjacency[slot]) if self._valid(slot) else 0

    def in_degree(self, vertex) -> int:
        slot = self._resolve(vertex)
        if not self._valid(slot):
            return 0
        return sum(1 for edges in self._adjacency for e in edges if e.target == slot)

    def edges_from(self, vertex):
        """Fail-fast view of the edges leaving ``vertex`` (empty if it is invalid)."""
        slot = self._resolve(vertex)
        if not self._valid(slot):
            return GraphIterable(self, lambda: iter(()), lambda: 0, "edges")
        edges = self._adjacency[slot]
        return GraphIterable(self, lambda: iter(edges), lambda: len(edges), "edges")

    def edges(self):
        """Fail-fast view of every edge, grouped by source in ascending slot order."""

        def _walk():
            for edges in self._adjacency:
                yield from edges

        return GraphIterable(self, _walk, lambda: self._num_edges, "edges")
