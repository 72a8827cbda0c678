from typing import NamedTuple


class Edge(NamedTuple):
    """A weighted directed edge between two vertex slots.

    Parameters
    --
    source : int
        Slot of the vertex the edge leaves.
    target : int
        Slot of the vertex the edge enters.
    weight : int
        Integer weight.

    Notes
    -
    Edges are values: replacing the weight of an existing edge stores a new
    ``Edge`` in the source's adjacency list.

    """

    source: int
    target: int
    weight: int

    def __str__(self):
        return f"{self.source} --{self.weight}-> {self.target}"
