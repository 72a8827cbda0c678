from __future__ import annotations

try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install slotgraph[networkx]"
    ) from e

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.graph import Graph


def to_nx(graph: Graph, *, weight: str = "weight", include_slots: bool = True) -> nx.DiGraph:
    """Export Graph -> networkx.DiGraph keyed by vertex name.

    Parameters
    ----------
    graph : Graph
    weight : str, default "weight"
        Edge attribute that receives the integer weight.
    include_slots : bool, default True
        Store each vertex's slot as the ``slot`` node attribute.

    Returns
    -------
    networkx.DiGraph
        Isolated vertices are kept. Nodes are added in slot order.

    """
    nxG = nx.DiGraph()
    names = graph._names
    for slot, name in enumerate(names):
        if name is None:
            continue
        if include_slots:
            nxG.add_node(name, slot=slot)
        else:
            nxG.add_node(name)
    for edges in graph._adjacency:
        for e in edges:
            nxG.add_edge(names[e.source], names[e.target], **{weight: e.weight})
    return nxG


def from_nx(nxG, *, weight: str = "weight", default_weight: int = 1, skip_self_loops: bool = True) -> Graph:
    """Build a Graph from a directed networkx graph.

    Nodes become vertices named ``str(node)`` in node order. For multigraphs
    the last parallel edge wins, matching ``add_edge`` replacement.

    Parameters
    ----------
    nxG : networkx.DiGraph | networkx.MultiDiGraph
    weight : str, default "weight"
    default_weight : int, default 1
        Used for edges without the weight attribute.
    skip_self_loops : bool, default True
        Drop ``u -> u`` edges; when False they raise ``SelfLoopError``.

    Raises
    ------
    ValueError
        If ``nxG`` is undirected, or two nodes share the same ``str()``.

    """
    from ..core.graph import Graph

    if not nxG.is_directed():
        raise ValueError("from_nx expects a directed networkx graph")

    H = Graph()
    seen = {}  # vertex name -> node
    for v in nxG.nodes():
        name = str(v)
        if name in seen:
            raise ValueError(f"nodes {seen[name]!r} and {v!r} both map to vertex name {name!r}")
        seen[name] = v
        H.add_vertex(name)
    for u, v, d in nxG.edges(data=True):
        if u == v and skip_self_loops:
            continue
        w = (d or {}).get(weight, default_weight)
        if isinstance(w, float) and w.is_integer():
            w = int(w)
        H.add_edge(str(u), str(v), w)
    return H
