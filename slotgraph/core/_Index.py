import numpy as np

from ._Errors import DuplicateNameError
from ._Iteration import GraphIterable


class IndexManager:
    """Namespace for index operations.
    Strict (raising) lookups over the name <-> slot directory.
    """

    def __init__(self, graph):
        self._G = graph

    # ==================== Vertex Indexes ====================

    def name_to_slot(self, name):
        """Map vertex name to slot."""
        if name not in self._G._vertex_numbers:
            raise KeyError(f"Vertex '{name}' not found")
        return self._G._vertex_numbers[name]

    def slot_to_name(self, slot):
        """Map slot to vertex name."""
        name = self._G.name_of(slot)
        if name is None:
            raise KeyError(f"Slot {slot} not in use")
        return name

    def names_to_slots(self, names):
        """Batch convert vertex names to slots."""
        return [self.name_to_slot(n) for n in names]

    def slots_to_names(self, slots):
        """Batch convert slots to vertex names."""
        return [self.slot_to_name(s) for s in slots]

    # ==================== Utilities ====================

    def has_name(self, name: str) -> bool:
        return name in self._G._vertex_numbers

    def has_slot(self, slot: int) -> bool:
        return self._G.is_valid(slot)

    def vertex_count(self) -> int:
        return self._G._num_vertices

    def edge_count(self) -> int:
        return self._G._num_edges

    def stats(self):
        """Get index statistics."""
        G = self._G
        return {
            "n_vertices": G._num_vertices,
            "n_edges": G._num_edges,
            "capacity": G._slots.capacity,
            "free_slots": G._slots.free_count,
            "max_slot": max(G._vertex_numbers.values()) if G._vertex_numbers else -1,
        }


class IndexMapping:
    # Name <-> slot directory

    def _resolve(self, vertex):
        """INTERNAL: Turn a slot or a name into a slot (``None`` if unknown)."""
        if isinstance(vertex, str):
            return self._vertex_numbers.get(vertex)
        if isinstance(vertex, (int, np.integer)) and not isinstance(vertex, bool):
            return int(vertex)
        return None

    def _valid(self, slot) -> bool:
        return slot is not None and 0 <= slot < len(self._names) and self._names[slot] is not None

    def is_valid(self, vertex) -> bool:
        """True if ``vertex`` (slot or name) refers to a vertex currently in use."""
        return self._valid(self._resolve(vertex))

    def has_vertex(self, vertex) -> bool:
        return self.is_valid(vertex)

    def __contains__(self, vertex):
        return self.is_valid(vertex)

    def index_of(self, name):
        """Slot of the vertex called ``name``, or ``None`` if there is none."""
        return self._vertex_numbers.get(name)

    def name_of(self, index):
        """Name of the vertex in slot ``index``, or ``None`` for free/out-of-range slots."""
        index = self._resolve(index)
        if not self._valid(index):
            return None
        return self._names[index]

    def add_vertex(self, name=None):
        """Add a vertex and return its slot.

        Parameters
        --
        name : str, optional
            Unique vertex name. When omitted, a name of the form ``v<slot>`` is
            synthesised (prefixed with more ``v`` until it is unused).

        Returns
        ---
        int
            The slot assigned to the new vertex.

        Raises
        --
        DuplicateNameError
            If ``name`` is already in use.

        Notes
        -
        Released slots are reused before the storage grows.

        """
        if name is None:
            slot = self._slots.allocate()
            name = f"v{slot}"
            while name in self._vertex_numbers:
                name = "v" + name
            return self._add_vertex_at(name, slot)
        if not isinstance(name, str):
            raise TypeError(f"vertex names must be str, not {type(name).__name__}")
        if name in self._vertex_numbers:
            raise DuplicateNameError(name)
        return self._add_vertex_at(name, self._slots.allocate())

    def _add_vertex_at(self, name, slot):
        """INTERNAL: Record ``name`` in ``slot``. Assumes both are unused."""
        self._touch()
        self._num_vertices += 1
        self._vertex_numbers[name] = slot
        self._names[slot] = name
        return slot

    def _ensure_vertex(self, name):
        """INTERNAL: Slot for ``name``, creating the vertex when it is unknown."""
        slot = self._vertex_numbers.get(name)
        if slot is None:
            slot = self.add_vertex(name)
        return slot

    def remove_vertex(self, vertex):
        """Remove a vertex and every edge touching it. Unknown vertices are ignored.

        Parameters
        --
        vertex : int | str
            Slot or name.

        """
        slot = self._resolve(vertex)
        if not self._valid(slot):
            return

        self._touch()
        self._num_vertices -= 1

        # outgoing first; the count relies on the list still being populated
        self._num_edges -= len(self._adjacency[slot])
        self._adjacency[slot].clear()
        self._remove_all_edges_to(slot)

        del self._vertex_numbers[self._names[slot]]
        self._names[slot] = None
        self._marks[slot] = 0
        self._slots.release(slot)

    def vertices(self):
        """Fail-fast view of the slots in use, in ascending order."""

        def _walk():
            names = self._names
            for slot in range(len(names)):
                if names[slot] is not None:
                    yield slot

        return GraphIterable(self, _walk, lambda: self._num_vertices, "vertices")

    def vertex_names(self):
        """Names of all vertices, in slot order."""
        return [n for n in self._names if n is not None]
