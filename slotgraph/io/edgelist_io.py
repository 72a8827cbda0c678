"""Plain-text edge lists: one ``SOURCE TARGET WEIGHT`` triple per line.

Reading is forgiving in the same way as the classic loader it replaces:
lines that do not split into exactly three fields are skipped, and the first
line that cannot become an edge (non-integer weight, self-loop) ends the
read. Everything before that line is kept. Pass ``strict=True`` to get a
``ValueError`` instead.
"""

from __future__ import annotations

import warnings
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.graph import Graph


def _split_line(line: str, delimiter: str | None) -> list[str]:
    if delimiter is not None:
        return [t for t in line.rstrip("\n\r").split(delimiter) if t != ""]
    return line.split()


def _stop(msg: str, strict: bool):
    if strict:
        raise ValueError(msg)
    warnings.warn(msg + "; remaining input ignored", stacklevel=3)


def _read_lines(lines, graph, delimiter, strict):
    for lineno, line in enumerate(lines, start=1):
        parts = _split_line(line, delimiter)
        if len(parts) != 3:
            continue
        source, target, weight = parts
        try:
            weight = int(weight)
        except ValueError:
            _stop(f"line {lineno}: weight {weight!r} is not an integer", strict)
            return
        if source == target:
            _stop(f"line {lineno}: self-loop on {source!r}", strict)
            return
        graph.add_edge(graph._ensure_vertex(source), graph._ensure_vertex(target), weight)


def read_edge_list(source, graph: Graph | None = None, *, delimiter: str | None = None, strict: bool = False) -> Graph:
    """Load edges into ``graph`` (a new one by default).

    Parameters
    --
    source : str | Path | file-like | Iterable[str]
        Path to read, an open text stream, or any iterable of lines.
    graph : Graph, optional
        Graph to extend. Existing edges named again get the new weight.
    delimiter : str, optional
        Field separator; any whitespace when None.
    strict : bool, default False
        Raise ``ValueError`` instead of warning and stopping early.

    Returns
    ---
    Graph

    Notes
    -
    Names that are not in the graph yet are created as new vertices.

    """
    if graph is None:
        from ..core.graph import Graph

        graph = Graph()

    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8") as fh:
            _read_lines(fh, graph, delimiter, strict)
    else:
        _read_lines(source, graph, delimiter, strict)
    return graph


def iter_edge_lines(graph: Graph, delimiter: str = " "):
    """Yield one formatted line (without newline) per edge, in slot order."""
    names = graph._names
    for edges in graph._adjacency:
        for e in edges:
            yield f"{names[e.source]}{delimiter}{names[e.target]}{delimiter}{e.weight}"


def write_edge_list(graph: Graph, target, *, delimiter: str = " ") -> int:
    """Write every edge of ``graph`` in the format read by :func:`read_edge_list`.

    Parameters
    --
    graph : Graph
    target : str | Path | file-like
        Output path (overwritten) or an open text stream.
    delimiter : str, default " "

    Returns
    ---
    int
        Number of edges written.

    Raises
    --
    ValueError
        If a vertex name contains the delimiter or whitespace, since it could
        not be read back.

    Notes
    -
    Isolated vertices have no line and are not saved.

    """
    for name in graph.vertex_names():
        if not name or name.split() != [name] or (delimiter.strip() and delimiter in name):
            raise ValueError(f"vertex name {name!r} cannot be written as an edge-list field")

    lines = list(iter_edge_lines(graph, delimiter))
    if isinstance(target, (str, Path)):
        with open(target, "w", encoding="utf-8") as fh:
            for line in lines:
                fh.write(line + "\n")
    else:
        for line in lines:
            target.write(line + "\n")
    return len(lines)
