import heapq
from collections import deque

from ..core._Edge import Edge
from ..core._Marks import Mark

# Flag used by the weighted searches for "distance is final".
_FINALIZED = int(Mark.MARK07)


# Traversal (neighbors, reachability, paths)
class Traversal:
    def successors(self, vertex):
        """Targets of the edges leaving ``vertex``.

        Parameters
        --
        vertex : int | str

        Returns
        ---
        list[int]
            Slots in adjacency order; empty for an invalid vertex.

        """
        slot = self._resolve(vertex)
        if not self._valid(slot):
            return []
        return [e.target for e in self._adjacency[slot]]

    def predecessors(self, vertex):
        """Sources of the edges entering ``vertex``.

        Parameters
        --
        vertex : int | str

        Returns
        ---
        list[int]
            Slots in ascending order; empty for an invalid vertex.

        """
        slot = self._resolve(vertex)
        if not self._valid(slot):
            return []
        return [
            s
            for s, edges in enumerate(self._adjacency)
            if any(e.target == slot for e in edges)
        ]

    def reachable_from(self, origin, visit=None):
        """Depth-first walk from ``origin``, marking each vertex as it is entered.

        Parameters
        --
        origin : int | str
        visit : callable, optional
            Called with each slot when the walk enters it.

        Returns
        ---
        list[int]
            Slots in visiting order.

        Notes
        -
        - A vertex gets the general mark before its edges are explored, and an
          edge is followed only if its target carries no mark at that moment.
        - Marks are left in place; call ``clear_marks()`` before walking again.

        """
        slot = self._resolve(origin)
        if not self._valid(slot):
            return []

        adjacency = self._adjacency
        order = []

        # self._marks is looked up each time; visit() may grow the graph
        def _enter(v):
            order.append(v)
            self._marks[v] |= int(Mark.MARK)
            if visit is not None:
                visit(v)

        _enter(slot)
        stack = [iter(adjacency[slot])]
        while stack:
            for e in stack[-1]:
                if not self._marks[e.target]:
                    _enter(e.target)
                    stack.append(iter(adjacency[e.target]))
                    break
            else:
                stack.pop()
        return order

    def path(self, start, finish):
        """Fewest-hops path from ``start`` to ``finish`` (breadth-first).

        Parameters
        --
        start, finish : int | str

        Returns
        ---
        list[Edge] | None
            Edges from ``start`` to ``finish`` in order; ``[]`` when both are
            the same vertex; ``None`` if ``finish`` is unreachable or either
            end is invalid.

        """
        s = self._resolve(start)
        f = self._resolve(finish)
        if not self._valid(s) or not self._valid(f):
            return None
        if s == f:
            return []

        # incoming[v] is the edge that first reached v
        incoming = [None] * len(self._adjacency)
        remaining = deque([s])
        while incoming[f] is None and remaining:
            v = remaining.popleft()
            for e in self._adjacency[v]:
                if incoming[e.target] is None:
                    remaining.append(e.target)
                    incoming[e.target] = e

        if incoming[f] is None:
            return None
        path = deque()
        current = f
        while current != s:
            e = incoming[current]
            path.appendleft(e)
            current = e.source
        return list(path)

    def shortest_path(self, source, sink):
        """Minimum-weight path tree from ``source``, grown until ``sink`` is final.

        Each round relaxes the edges of the vertex finalized last, then
        finalizes the unfinalized vertex with the smallest known distance
        (lowest slot on ties). Runs in O(V^2).

        Parameters
        --
        source, sink : int | str

        Returns
        ---
        list[int | None] | None
            Predecessor slot for every slot (``None`` where unknown). Follow
            it back from ``sink`` with :meth:`path_from_predecessors`.
            ``None`` if ``sink`` is unreachable or either end is invalid.

        Notes
        -
        Uses ``Mark.MARK07`` as the finalized flag; the caller's ``MARK07``
        bits are restored afterwards. Weights are assumed non-negative.

        """
        s = self._resolve(source)
        t = self._resolve(sink)
        if not self._valid(s) or not self._valid(t):
            return None

        marks = self._marks
        saved = marks & _FINALIZED
        marks &= ~_FINALIZED & 0xFF
        try:
            n = len(self._adjacency)
            distances = [None] * n
            prev_nodes = [None] * n
            distances[s] = 0
            marks[s] |= _FINALIZED
            current = s

            while not marks[t] & _FINALIZED:
                for e in self._adjacency[current]:
                    tar = e.target
                    if not marks[tar] & _FINALIZED:
                        d = distances[current] + e.weight
                        if distances[tar] is None or d < distances[tar]:
                            distances[tar] = d
                            prev_nodes[tar] = current

                best = None
                for i in range(n):
                    if distances[i] is not None and not marks[i] & _FINALIZED:
                        if best is None or distances[i] < distances[best]:
                            best = i
                if best is None:
                    return None

                marks[best] |= _FINALIZED
                current = best
            return prev_nodes
        finally:
            marks &= ~_FINALIZED & 0xFF
            marks |= saved

    def shortest_path_heap(self, source, sink):
        """Same contract as :meth:`shortest_path`, backed by a binary heap.

        Ties are broken the same way (distance, then lowest slot) and the
        search stops as soon as ``sink`` is final. Marks are not touched.
        """
        s = self._resolve(source)
        t = self._resolve(sink)
        if not self._valid(s) or not self._valid(t):
            return None

        n = len(self._adjacency)
        distances = [None] * n
        prev_nodes = [None] * n
        final = [False] * n
        distances[s] = 0
        heap = [(0, s)]
        while heap:
            d, v = heapq.heappop(heap)
            if final[v] or d != distances[v]:
                continue
            final[v] = True
            if v == t:
                return prev_nodes
            for e in self._adjacency[v]:
                tar = e.target
                if final[tar]:
                    continue
                nd = d + e.weight
                if distances[tar] is None or nd < distances[tar]:
                    distances[tar] = nd
                    prev_nodes[tar] = v
                    heapq.heappush(heap, (nd, tar))
        return None

    def path_from_predecessors(self, predecessors, source, sink):
        """Rebuild the edge path ``source -> sink`` from a predecessor array.

        Returns
        ---
        list[Edge] | None
            ``None`` if the chain from ``sink`` does not lead back to ``source``.

        """
        if predecessors is None:
            return None
        s = self._resolve(source)
        t = self._resolve(sink)
        if not self._valid(s) or not self._valid(t):
            return None
        path = deque()
        current = t
        for _ in range(len(predecessors)):
            if current == s:
                return list(path)
            prev = predecessors[current]
            if prev is None:
                return None
            weight = self.edge_weight(prev, current)
            if weight is None:
                return None
            path.appendleft(Edge(prev, current, weight))
            current = prev
        return list(path) if current == s else None

    @staticmethod
    def path_weight(edges) -> int:
        """Total weight of a sequence of edges."""
        return sum(e.weight for e in edges)
