import copy

import numpy as np

from ..algorithms.traversal import Traversal
from ._Adjacency import Adjacency
from ._CacheManager import CacheManager
from ._History import History
from ._Index import IndexManager, IndexMapping
from ._Marks import MarkSet
from ._Slots import INITIAL_CAPACITY, SlotAllocator
from ._Views import ViewsClass

# ===================================


class Graph(IndexMapping, Adjacency, MarkSet, Traversal, ViewsClass, History):
    """Weighted directed graph over recyclable integer slots.

    Vertices are addressed by a dense slot (stable while the vertex lives)
    or by their unique name. Each slot owns a list of outgoing edges, so
    there is at most one edge per ordered pair of vertices and self-loops
    are rejected.

    Parameters
    --
    capacity : int, optional
        Initial number of slots. Storage doubles when it runs out.
    history : bool, optional
        Record structural mutations in the in-memory history log.

    Notes
    -
    - Every structural change (vertex add/remove, edge add/replace/remove)
      bumps ``version``; iterators created before the change fail fast.
    - Marks are per-slot flags (see :class:`~slotgraph.core._Marks.Mark`)
      and never change the version.

    See Also

    add_vertex, add_edge, path, shortest_path, reachable_from

    """

    def __init__(self, capacity: int = INITIAL_CAPACITY, history: bool = True):
        self._slots = SlotAllocator(capacity, grow=self._grow_to)
        n = self._slots.capacity

        # Parallel per-slot storage
        self._adjacency = [[] for _ in range(n)]  # slot -> [Edge, ...]
        self._names = [None] * n  # slot -> name (None = free)
        self._marks = np.zeros(n, dtype=np.uint8)  # slot -> mark bits

        # name -> slot
        self._vertex_numbers = {}

        self._num_vertices = 0
        self._num_edges = 0

        self._init_history(history)

    def _grow_to(self, old: int, new: int):
        """INTERNAL: extend every parallel array from ``old`` to ``new`` slots."""
        self._adjacency.extend([] for _ in range(new - old))
        self._names.extend([None] * (new - old))
        self._marks = np.concatenate([self._marks, np.zeros(new - old, dtype=np.uint8)])

    # Counts

    def number_of_vertices(self) -> int:
        return self._num_vertices

    def number_of_edges(self) -> int:
        return self._num_edges

    def __len__(self):
        return self._num_vertices

    @property
    def capacity(self) -> int:
        """Current number of slots (used + free)."""
        return self._slots.capacity

    def __repr__(self):
        return f"Graph(vertices={self._num_vertices}, edges={self._num_edges}, version={self._version})"

    # Copies

    def copy(self, history: bool = False):
        """Independent copy with the same slots, names, edges and marks.

        Parameters
        --
        history : bool, default False
            Carry over the mutation history, version and snapshots. Otherwise
            the copy starts at version 0 with an empty log.

        Notes
        -
        The copy gets its own history wrappers, so mutating it never
        touches ``self``.

        """
        new = type(self)(capacity=0, history=self._history_enabled)
        new._slots = self._slots.clone(grow=new._grow_to)
        new._adjacency = [list(edges) for edges in self._adjacency]
        new._names = list(self._names)
        new._marks = self._marks.copy()
        new._vertex_numbers = dict(self._vertex_numbers)
        new._num_vertices = self._num_vertices
        new._num_edges = self._num_edges

        if history:
            new._history = [dict(evt) for evt in self._history]
            new._version = self._version
            new._snapshots = copy.deepcopy(self._snapshots)
            # same origin, so mono_ns keeps increasing across copied events
            new._history_clock0 = self._history_clock0
        return new

    def __copy__(self):
        return self.copy(history=True)

    def __deepcopy__(self, memo):
        new = self.copy(history=True)
        memo[id(self)] = new
        return new

    # Managers

    @property
    def idx(self):
        """Index lookups (name <-> slot) that raise instead of returning None."""
        if not hasattr(self, "_index_manager"):
            self._index_manager = IndexManager(self)
        return self._index_manager

    @property
    def cache(self):
        """Cache management (CSR/CSC sparse adjacency)."""
        if not hasattr(self, "_cache_manager"):
            self._cache_manager = CacheManager(self)
        return self._cache_manager

    # I/O

    def write(self, path, **kwargs):
        """Save as an edge list (``SOURCE TARGET WEIGHT`` per line)."""
        from ..io.edgelist_io import write_edge_list

        write_edge_list(self, path, **kwargs)

    @classmethod
    def read(cls, path, **kwargs):
        """Load an edge list into a new graph."""
        from ..io.edgelist_io import read_edge_list

        return read_edge_list(path, graph=cls(), **kwargs)
