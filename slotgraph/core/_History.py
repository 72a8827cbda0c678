import inspect
import json
import time
from datetime import UTC, datetime
from functools import wraps
from pathlib import Path

import numpy as np
import polars as pl

from ._GraphDiff import GraphDiff

# Columns that keep their native dtype in the history frame
_TYPED_COLS = {"version", "ts_utc", "mono_ns", "op"}


def _plain(x):
    """JSON-safe copy of a logged argument or return value."""
    if x is None or isinstance(x, (bool, int, float, str)):
        return x
    if isinstance(x, np.generic):
        return x.item()
    if isinstance(x, dict):
        return {str(k): _plain(v) for k, v in x.items()}
    if isinstance(x, (set, frozenset)):
        return sorted(_plain(v) for v in x)
    if isinstance(x, (list, tuple)):
        return [_plain(v) for v in x]
    return f"<<{type(x).__name__}>>"


def _as_text(v):
    return None if v is None else str(v)


def _write_ndjson(df, path):
    with open(path, "w", encoding="utf-8") as fh:
        for row in df.iter_rows(named=True):
            fh.write(json.dumps(row, ensure_ascii=False) + "\n")


def _write_json(df, path):
    with open(path, "w", encoding="utf-8") as fh:
        json.dump(df.to_dicts(), fh, ensure_ascii=False)


_WRITERS = {
    ".parquet": lambda df, path: df.write_parquet(path),
    ".csv": lambda df, path: df.write_csv(path),
    ".json": _write_json,
    ".ndjson": _write_ndjson,
    ".jsonl": _write_ndjson,
}


class History:
    # Version counter, mutation log and snapshots

    # Wrapped on every instance; new mutators must be listed here.
    _HISTORY_OPS = ("add_vertex", "remove_vertex", "add_edge", "remove_edge")

    def _init_history(self, enabled=True):
        self._version = 0
        self._history_enabled = bool(enabled)
        self._history = []  # list[dict]
        self._history_clock0 = time.perf_counter_ns()
        self._snapshots = []
        self._install_history_hooks()

    @property
    def version(self) -> int:
        """Structural version; bumped by every vertex/edge change, never by marks."""
        return self._version

    def _touch(self):
        self._version += 1

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        now = datetime.now(UTC).isoformat(timespec="microseconds")
        evt = {
            "version": self._version,
            "ts_utc": now.replace("+00:00", "Z"),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
        }
        evt.update((k, _plain(v)) for k, v in fields.items())
        self._history.append(evt)

    def _log_mutation(self, op, fn):
        sig = inspect.signature(fn)

        @wraps(fn)
        def wrapper(*args, **kwargs):
            before = self._version
            result = fn(*args, **kwargs)
            # no-op removals leave the version alone and are not logged
            if self._version != before:
                bound = sig.bind(*args, **kwargs)
                bound.apply_defaults()
                self._log_event(op, **bound.arguments, result=result)
            return result

        return wrapper

    def _install_history_hooks(self):
        for op in self._HISTORY_OPS:
            fn = getattr(self, op, None)
            if fn is not None and not hasattr(fn, "__wrapped__"):
                setattr(self, op, self._log_mutation(op, fn))

    def history(self, as_df: bool = False):
        """Return the append-only mutation history.

        Parameters
        --
        as_df : bool, default False
            Return a polars DataFrame instead of a list of dicts.

        Returns
        ---
        list[dict] or polars.DataFrame
            One event per structural change: 'version', 'ts_utc' (UTC
            ISO-8601), 'mono_ns' (nanoseconds since the graph was created),
            'op', the call arguments and 'result'.

        Notes
        -
        Calls that changed nothing are not recorded, so versions are
        strictly increasing.

        """
        if as_df:
            return self._history_frame()
        return list(self._history)

    def export_history(self, path):
        """Write the mutation history to ``path``.

        The format follows the suffix: '.parquet', '.csv', '.json', '.ndjson'
        or '.jsonl'. Any other suffix gets '.parquet' appended.

        Returns
        ---
        int
            Number of events written (0, and no file, for an empty history).

        """
        if not self._history:
            return 0
        path = Path(path)
        writer = _WRITERS.get(path.suffix.lower())
        if writer is None:
            path = path.with_name(path.name + ".parquet")
            writer = _WRITERS[".parquet"]
        df = self._history_frame()
        writer(df, path)
        return df.height

    def _history_frame(self):
        # argument columns mix slots and names, so they are stored as text
        rows = [
            {k: (v if k in _TYPED_COLS else _as_text(v)) for k, v in evt.items()}
            for evt in self._history
        ]
        return pl.DataFrame(rows, infer_schema_length=None)

    def enable_history(self, flag: bool = True):
        """Enable or disable in-memory mutation logging.

        The version counter keeps running while logging is paused.
        """
        self._history_enabled = bool(flag)

    def clear_history(self):
        """Clear the in-memory mutation log (exported files are untouched)."""
        self._history.clear()

    def note(self, label: str):
        """Insert a manual marker event (``op='note'``) into the history."""
        self._log_event("note", label=label)

    # Audit

    def snapshot(self, label=None):
        """Record a named snapshot of vertex names and weighted edges.

        Parameters
        --
        label : str, optional
            Human-readable label (auto-generated if None).

        Returns
        ---
        dict
            Snapshot with 'label', 'version', 'timestamp', 'counts',
            'vertex_names' and 'edges' ({(source_name, target_name): weight}).

        """
        if label is None:
            label = f"snapshot_{len(self._snapshots)}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        snap = self._current_snapshot()
        snap["label"] = label
        snap["timestamp"] = datetime.now(UTC).isoformat()
        snap["counts"] = {
            "vertices": self.number_of_vertices(),
            "edges": self.number_of_edges(),
        }
        self._snapshots.append(snap)
        return snap

    def diff(self, a, b=None):
        """Compare two snapshots, or a snapshot with the current state.

        Parameters
        --
        a : str | dict | Graph
            Snapshot label, snapshot dict, or another graph.
        b : str | dict | Graph | None
            Second side; the current state when None.

        Returns
        ---
        GraphDiff

        """
        snap_a = self._resolve_snapshot(a)
        snap_b = self._resolve_snapshot(b) if b is not None else self._current_snapshot()
        return GraphDiff(snap_a, snap_b)

    def _resolve_snapshot(self, ref):
        if isinstance(ref, dict):
            return ref
        elif isinstance(ref, str):
            for snap in self._snapshots:
                if snap["label"] == ref:
                    return snap
            raise ValueError(f"Snapshot '{ref}' not found")
        elif isinstance(ref, History):
            snap = ref._current_snapshot()
            snap["label"] = "external"
            return snap
        else:
            raise TypeError(f"Invalid snapshot reference: {type(ref)}")

    def _current_snapshot(self):
        return {
            "label": "current",
            "version": self._version,
            "vertex_names": set(self.vertex_names()),
            "edges": {
                (self._names[e.source], self._names[e.target]): e.weight
                for adj in self._adjacency
                for e in adj
            },
        }

    def list_snapshots(self):
        """List snapshot metadata (label, timestamp, version, counts)."""
        return [
            {
                "label": snap["label"],
                "timestamp": snap["timestamp"],
                "version": snap["version"],
                "counts": snap["counts"],
            }
            for snap in self._snapshots
        ]
