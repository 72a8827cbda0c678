from slotgraph.core.graph import Graph

EXAMPLE_EDGES = [
    ("a", "b", 2),
    ("a", "c", 1),
    ("c", "d", 5),
    ("d", "e", 1),
    ("b", "e", 4),
]


def build_example_graph(**kwargs):
    """Vertices a..e in slots 0..4 and the five example edges."""
    G = Graph(**kwargs)
    for name in "abcde":
        G.add_vertex(name)
    for s, t, w in EXAMPLE_EDGES:
        G.add_edge(s, t, w)
    return G


def named_edges(G):
    """Set of (source_name, target_name, weight) triples."""
    return {(G.name_of(e.source), G.name_of(e.target), e.weight) for e in G.edges()}


def assert_graphs_equal(G1, G2):
    """Assert two graphs have the same vertex names and weighted edges."""
    assert set(G1.vertex_names()) == set(G2.vertex_names()), "Vertex sets differ"
    assert G1.number_of_edges() == G2.number_of_edges(), "Edge counts differ"
    assert named_edges(G1) == named_edges(G2), "Edges differ"
