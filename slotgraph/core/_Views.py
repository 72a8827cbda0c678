import sys

import polars as pl


class ViewsClass:
    # Materialized views

    def edges_view(self, names=True):
        """Build a Polars DF [DataFrame] of all edges in slot order.

        Parameters
        --
        names : bool, default True
            Add ``source_name`` / ``target_name`` columns.

        Returns
        ---
        polars.DataFrame
            Columns ``source``, ``target``, ``weight`` (+ name columns).

        """
        src, tgt, w = [], [], []
        for edges in self._adjacency:
            for e in edges:
                src.append(e.source)
                tgt.append(e.target)
                w.append(e.weight)

        cols = {
            "source": pl.Series("source", src, dtype=pl.Int64),
            "target": pl.Series("target", tgt, dtype=pl.Int64),
            "weight": pl.Series("weight", w, dtype=pl.Int64),
        }
        if names:
            cols["source_name"] = pl.Series(
                "source_name", [self._names[s] for s in src], dtype=pl.Utf8
            )
            cols["target_name"] = pl.Series(
                "target_name", [self._names[t] for t in tgt], dtype=pl.Utf8
            )
        return pl.DataFrame(cols)

    def vertices_view(self):
        """Polars DF with one row per vertex: ``slot``, ``name``, ``marks``, ``out_degree``."""
        slots = [s for s, n in enumerate(self._names) if n is not None]
        return pl.DataFrame(
            {
                "slot": pl.Series("slot", slots, dtype=pl.Int64),
                "name": pl.Series("name", [self._names[s] for s in slots], dtype=pl.Utf8),
                "marks": pl.Series("marks", [int(self._marks[s]) for s in slots], dtype=pl.UInt8),
                "out_degree": pl.Series(
                    "out_degree", [len(self._adjacency[s]) for s in slots], dtype=pl.Int64
                ),
            }
        )

    # Diagnostic dumps

    def dump(self, file=None):
        """Print vertex/edge counts and each slot's outgoing edges."""
        out = file if file is not None else sys.stdout
        print("A Graph", file=out)
        print(f"  with {self._num_vertices} vertices", file=out)
        print(f"  and {self._num_edges} edges", file=out)
        for slot, name in enumerate(self._names):
            if name is not None:
                edges = " ".join(str(e) for e in self._adjacency[slot])
                print(f"{slot}: {edges}".rstrip(), file=out)
        print(file=out)

    def dump_with_names(self, file=None):
        """Print vertex names, then every edge as ``SOURCE --W-> TARGET``."""
        out = file if file is not None else sys.stdout
        names = self._names
        print("Vertices: ", file=out)
        print(" " + "".join(f" {n}" for n in names if n is not None), file=out)
        print("Edges: ", file=out)
        for edges in self._adjacency:
            for e in edges:
                print(f"  {names[e.source]} --{e.weight}-> {names[e.target]}", file=out)
        print(file=out)
