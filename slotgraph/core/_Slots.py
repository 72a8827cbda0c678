from collections import deque

INITIAL_CAPACITY = 16


class SlotAllocator:
    """Free-slot pool for vertex storage.

    Slots are handed out in FIFO order: released slots go to the back of the
    queue, and fresh slots created by growth are queued in ascending order.

    Parameters
    --
    capacity : int
        Number of slots to create up front (all free).
    grow : callable, optional
        ``grow(old_capacity, new_capacity)`` is called before new slots are
        queued so the owner can extend its parallel storage.

    """

    def __init__(self, capacity=INITIAL_CAPACITY, grow=None):
        capacity = int(capacity) if capacity and capacity > 0 else 0
        self._grow = grow
        self._capacity = capacity
        self._free = deque(range(capacity))

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def free_count(self) -> int:
        return len(self._free)

    def allocate(self) -> int:
        """Take a free slot, doubling capacity if none remain."""
        if not self._free:
            self.expand()
        return self._free.popleft()

    def release(self, index: int) -> None:
        """Return ``index`` to the pool."""
        self._free.append(index)

    def expand(self, new_capacity=None) -> int:
        """Grow to ``new_capacity`` (default: double, minimum 1).

        Returns
        ---
        int
            The new capacity.

        """
        old = self._capacity
        if new_capacity is None:
            new_capacity = max(1, old * 2)
        if new_capacity <= old:
            return old
        if self._grow is not None:
            self._grow(old, new_capacity)
        self._capacity = new_capacity
        self._free.extend(range(old, new_capacity))
        return new_capacity

    def clone(self, grow=None):
        """Independent allocator with the same capacity and free-queue order."""
        other = SlotAllocator(0, grow=grow)
        other._capacity = self._capacity
        other._free = deque(self._free)
        return other

    def __contains__(self, index):
        return index in self._free

    def __repr__(self):
        return f"SlotAllocator(capacity={self._capacity}, free={len(self._free)})"
