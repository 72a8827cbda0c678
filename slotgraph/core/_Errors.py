class GraphError(Exception):
    """Base class for graph errors."""


class InvalidEndpointError(GraphError, KeyError):
    """An edge endpoint does not name a valid vertex."""

    def __init__(self, source, target):
        self.source = source
        self.target = target
        super().__init__(f"Invalid ends: {source!r} -> {target!r}")

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class SelfLoopError(GraphError, ValueError):
    """Edges from a vertex to itself are not allowed."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Cannot add an edge from a vertex to itself ({vertex!r})")


class DuplicateNameError(GraphError, ValueError):
    """A vertex with the requested name already exists."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Already have a vertex named {name!r}")


class ConcurrentStructuralChange(GraphError, RuntimeError):
    """The graph was structurally modified while an iterator was in use."""

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Graph changed during iteration (version {expected} -> {actual})"
        )
