def _split(a, b):
    """(only in b, only in a) for two set-like collections."""
    a, b = set(a), set(b)
    return b - a, a - b


class GraphDiff:
    """Changes needed to turn snapshot ``a`` into snapshot ``b``.

    Snapshots are the dicts produced by ``Graph.snapshot()``; vertices are
    compared by name and edges by ``(source_name, target_name)``.

    Attributes
    --
    vertices_added, vertices_removed : set[str]
    edges_added, edges_removed : set[tuple[str, str]]
    edges_reweighted : dict
        ``(source_name, target_name) -> (weight_in_a, weight_in_b)`` for
        pairs present on both sides with different weights.

    """

    def __init__(self, snapshot_a, snapshot_b):
        self.snapshot_a = snapshot_a
        self.snapshot_b = snapshot_b

        w_a, w_b = snapshot_a["edges"], snapshot_b["edges"]
        self.vertices_added, self.vertices_removed = _split(
            snapshot_a["vertex_names"], snapshot_b["vertex_names"]
        )
        self.edges_added, self.edges_removed = _split(w_a, w_b)
        self.edges_reweighted = {}
        for pair in w_a.keys() & w_b.keys():
            if w_a[pair] != w_b[pair]:
                self.edges_reweighted[pair] = (w_a[pair], w_b[pair])

    def summary(self):
        head = f"{self.snapshot_a['label']} -> {self.snapshot_b['label']}"
        return "\n".join(
            [
                head,
                f"  vertices: +{len(self.vertices_added)} -{len(self.vertices_removed)}",
                f"  edges: +{len(self.edges_added)} -{len(self.edges_removed)}, "
                f"{len(self.edges_reweighted)} reweighted",
            ]
        )

    def is_empty(self):
        return not any(
            (
                self.vertices_added,
                self.vertices_removed,
                self.edges_added,
                self.edges_removed,
                self.edges_reweighted,
            )
        )

    def __repr__(self):
        return f"<GraphDiff {self.summary()}>"

    def to_dict(self):
        """Plain, JSON-ready form (sorted lists instead of sets)."""
        return {
            "snapshot_a": self.snapshot_a["label"],
            "snapshot_b": self.snapshot_b["label"],
            "vertices_added": sorted(self.vertices_added),
            "vertices_removed": sorted(self.vertices_removed),
            "edges_added": sorted(map(list, self.edges_added)),
            "edges_removed": sorted(map(list, self.edges_removed)),
            "edges_reweighted": [
                [s, t, wa, wb] for (s, t), (wa, wb) in sorted(self.edges_reweighted.items())
            ],
        }
