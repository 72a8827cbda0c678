from enum import IntFlag


class Mark(IntFlag):
    """Per-vertex mark bits.

    ``MARK`` is the general-purpose mark; ``MARK01``..``MARK07`` are seven
    distinguishable bits for algorithms that need several marks at once.
    ``MARK`` and ``MARK01`` are the same bit.
    """

    MARK = 1
    MARK01 = 1
    MARK02 = 2
    MARK03 = 4
    MARK04 = 8
    MARK05 = 16
    MARK06 = 32
    MARK07 = 64


class MarkSet:
    # Marks live in self._marks (numpy uint8, one byte per slot)

    def mark(self, vertex, bit=Mark.MARK):
        """Set ``bit`` on ``vertex``. Invalid vertices are ignored."""
        slot = self._resolve(vertex)
        if self._valid(slot):
            self._marks[slot] |= int(bit)

    def unmark(self, vertex, bit=None):
        """Clear ``bit`` on ``vertex``, or every bit when ``bit`` is None."""
        if bit is None:
            return self.unmark_all(vertex)
        slot = self._resolve(vertex)
        if self._valid(slot):
            bit = int(bit)
            self._marks[slot] = (int(self._marks[slot]) | bit) - bit

    def unmark_all(self, vertex):
        slot = self._resolve(vertex)
        if self._valid(slot):
            self._marks[slot] = 0

    def is_marked(self, vertex, bit=None) -> bool:
        """True if ``vertex`` carries ``bit`` (any bit when ``bit`` is None).

        Invalid vertices are never marked.
        """
        slot = self._resolve(vertex)
        if not self._valid(slot):
            return False
        if bit is None:
            return bool(self._marks[slot])
        return bool(int(self._marks[slot]) & int(bit))

    def marks_of(self, vertex) -> Mark:
        slot = self._resolve(vertex)
        return Mark(int(self._marks[slot])) if self._valid(slot) else Mark(0)

    def marked_vertices(self, bit=None):
        """Slots (ascending) carrying ``bit``, or any mark when ``bit`` is None."""
        marks = self._marks
        if bit is not None:
            marks = marks & int(bit)
        return [int(s) for s in marks.nonzero()[0] if self._names[s] is not None]

    def clear_marks(self):
        """Reset every mark on every vertex."""
        self._marks[:] = 0
