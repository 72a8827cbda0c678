import numpy as np
import scipy.sparse as sp

FORMATS = ("csr", "csc", "adjacency")


class CacheManager:
    """Slot-indexed sparse adjacency matrices, rebuilt when the graph changes.

    Matrices are ``capacity x capacity``; free slots are empty rows and
    columns. Each format is stored with the graph version it was built at and
    served again only while that version is current.
    """

    def __init__(self, graph):
        self._G = graph
        self._store = {}  # fmt -> (version, matrix)

    def _edge_arrays(self):
        G = self._G
        n_edges = G._num_edges
        rows = np.empty(n_edges, dtype=np.int64)
        cols = np.empty(n_edges, dtype=np.int64)
        weights = np.empty(n_edges, dtype=np.int64)
        k = 0
        for edges in G._adjacency:
            for e in edges:
                rows[k], cols[k], weights[k] = e.source, e.target, e.weight
                k += 1
        return rows, cols, weights

    def _build(self, fmt):
        n = self._G._slots.capacity
        if fmt == "csc":
            return self.csr.tocsc()
        rows, cols, weights = self._edge_arrays()
        if fmt == "adjacency":
            # zero weights stay structural entries
            weights = np.ones(len(rows), dtype=bool)
        return sp.csr_matrix((weights, (rows, cols)), shape=(n, n))

    def _get(self, fmt):
        version = self._G._version
        hit = self._store.get(fmt)
        if hit is None or hit[0] != version:
            hit = (version, self._build(fmt))
            self._store[fmt] = hit
        return hit[1]

    def _fresh(self, fmt) -> bool:
        hit = self._store.get(fmt)
        return hit is not None and hit[0] == self._G._version

    # Matrices

    @property
    def csr(self):
        """Weighted adjacency, CSR; row = source slot, column = target slot."""
        return self._get("csr")

    @property
    def csc(self):
        """Weighted adjacency, CSC (fast column = in-edge access)."""
        return self._get("csc")

    @property
    def adjacency(self):
        """Boolean adjacency in CSR format."""
        return self._get("adjacency")

    def has_csr(self) -> bool:
        """True if a CSR matrix for the current version is cached."""
        return self._fresh("csr")

    def has_csc(self) -> bool:
        return self._fresh("csc")

    def has_adjacency(self) -> bool:
        return self._fresh("adjacency")

    # Management

    def invalidate(self, formats=None):
        """Drop cached formats (any of ``FORMATS``); all of them when None."""
        for fmt in FORMATS if formats is None else formats:
            self._store.pop(fmt, None)

    def build(self, formats=None):
        """Build the given formats now instead of on first access."""
        for fmt in FORMATS if formats is None else formats:
            if fmt in FORMATS:
                self._get(fmt)

    def clear(self):
        self._store.clear()

    def info(self):
        """Per-format cache status.

        Returns
        ---
        dict
            ``{fmt: {"cached": False}}`` for missing formats, otherwise
            cached/stale flags, build version, size in MB, nnz and shape.

        """
        out = {}
        for fmt in FORMATS:
            hit = self._store.get(fmt)
            if hit is None:
                out[fmt] = {"cached": False}
                continue
            version, m = hit
            nbytes = m.data.nbytes + m.indices.nbytes + m.indptr.nbytes
            out[fmt] = {
                "cached": True,
                "stale": version != self._G._version,
                "version": version,
                "size_mb": nbytes / (1024**2),
                "nnz": m.nnz,
                "shape": m.shape,
            }
        return out
