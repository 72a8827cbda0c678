from ._Errors import ConcurrentStructuralChange

_MISSING = object()


class FailFastIterator:
    """Iterator over a live graph structure that refuses to run stale.

    The graph version is captured at creation. Both ``has_next()`` and
    ``__next__()`` compare it with the graph's current version and raise
    :class:`ConcurrentStructuralChange` on mismatch.

    Parameters
    --
    graph : Graph
        Owning graph (read for its ``_version``).
    items : iterator
        Lazy iterator over the live structure.

    """

    __slots__ = ("_graph", "_version", "_items", "_pending")

    def __init__(self, graph, items):
        self._graph = graph
        self._version = graph._version
        self._items = items
        self._pending = _MISSING

    def _check(self):
        if self._graph._version != self._version:
            raise ConcurrentStructuralChange(self._version, self._graph._version)

    def has_next(self) -> bool:
        self._check()
        if self._pending is _MISSING:
            self._pending = next(self._items, _MISSING)
        return self._pending is not _MISSING

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        item, self._pending = self._pending, _MISSING
        return item


class GraphIterable:
    """Restartable, sized view; each ``iter()`` takes a fresh version snapshot.

    Parameters
    --
    graph : Graph
    factory : callable
        Zero-argument callable returning a new lazy iterator over the items.
    size : callable
        Zero-argument callable returning the current number of items.
    label : str
        Used by ``repr``.

    """

    __slots__ = ("_graph", "_factory", "_size", "_label")

    def __init__(self, graph, factory, size, label="items"):
        self._graph = graph
        self._factory = factory
        self._size = size
        self._label = label

    def __iter__(self):
        return FailFastIterator(self._graph, self._factory())

    def __len__(self):
        return self._size()

    def __repr__(self):
        return f"<{self._label}: {self._size()}>"
