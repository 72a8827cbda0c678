"""Edge tables <-> Graph.

Any eager frame narwhals understands (polars, pandas, pyarrow, ...) can be
loaded. Column names are auto-detected from common aliases unless given.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import narwhals as nw
import polars as pl

from ..core._Errors import SelfLoopError

if TYPE_CHECKING:
    from ..core.graph import Graph

SRC_COLS = ["source", "src", "from", "u", "source_name"]
DST_COLS = ["target", "dst", "to", "v", "target_name"]
WGT_COLS = ["weight", "w"]


def _pick(columns, explicit, candidates, role, required=True):
    if explicit is not None:
        if explicit not in columns:
            raise KeyError(f"{role} column {explicit!r} not in frame (columns: {columns})")
        return explicit
    lowered = {c.lower(): c for c in columns}
    for cand in candidates:
        if cand in lowered:
            return lowered[cand]
    if required:
        raise KeyError(f"could not find a {role} column among {columns}; pass {role}=...")
    return None


def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _as_weight(value: Any, default: int) -> int:
    if value is None:
        return default
    if isinstance(value, float):
        if math.isnan(value):
            return default
        if not value.is_integer():
            raise ValueError(f"edge weight {value!r} is not integral")
    return int(value)


def from_dataframe(
    df,
    graph: Graph | None = None,
    *,
    source: str | None = None,
    target: str | None = None,
    weight: str | None = None,
    default_weight: int = 1,
) -> Graph:
    """Add one edge per row of ``df`` to ``graph`` (a new one by default).

    Parameters
    --
    df : DataFrame
        Native eager frame with source/target name columns and an optional
        weight column.
    graph : Graph, optional
    source, target, weight : str, optional
        Column names; detected from ``SRC_COLS`` / ``DST_COLS`` / ``WGT_COLS``
        when omitted.
    default_weight : int, default 1
        Used when there is no weight column or the cell is null.

    Returns
    ---
    Graph

    Raises
    --
    KeyError
        If the source or target column cannot be found.
    ValueError
        On a row with a null source or target, or a non-integral weight
        (earlier rows stay applied).
    SelfLoopError
        On a row whose source equals its target (earlier rows stay applied).

    """
    if graph is None:
        from ..core.graph import Graph

        graph = Graph()

    ndf = nw.from_native(df, eager_only=True)
    columns = list(ndf.columns)
    src_col = _pick(columns, source, SRC_COLS, "source")
    dst_col = _pick(columns, target, DST_COLS, "target")
    w_col = _pick(columns, weight, WGT_COLS, "weight", required=False)

    for i, row in enumerate(ndf.iter_rows(named=True)):
        if _is_missing(row[src_col]) or _is_missing(row[dst_col]):
            raise ValueError(f"row {i}: missing source or target")
        s_name, t_name = str(row[src_col]), str(row[dst_col])
        if s_name == t_name:
            raise SelfLoopError(s_name)
        w = _as_weight(row[w_col], default_weight) if w_col is not None else default_weight
        s = graph._ensure_vertex(s_name)
        t = graph._ensure_vertex(t_name)
        graph.add_edge(s, t, w)
    return graph


def to_dataframe(graph: Graph) -> pl.DataFrame:
    """Edge table with vertex names: columns ``source``, ``target``, ``weight``."""
    return graph.edges_view(names=True).select(
        pl.col("source_name").alias("source"),
        pl.col("target_name").alias("target"),
        pl.col("weight"),
    )
