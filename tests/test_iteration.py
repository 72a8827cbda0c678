import os
import sys
import unittest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from slotgraph.core._Edge import Edge
from slotgraph.core._Errors import ConcurrentStructuralChange
from slotgraph.core.graph import Graph

from .helpers import build_example_graph


class TestFailFastIteration(unittest.TestCase):
    def setUp(self):
        self.g = build_example_graph()

    def test_edges_in_slot_order(self):
        self.assertEqual(
            list(self.g.edges()),
            [Edge(0, 1, 2), Edge(0, 2, 1), Edge(1, 4, 4), Edge(2, 3, 5), Edge(3, 4, 1)],
        )
        self.assertEqual(len(self.g.edges()), 5)

    def test_vertices_in_slot_order(self):
        self.g.remove_vertex("b")
        self.assertEqual(list(self.g.vertices()), [0, 2, 3, 4])
        self.assertEqual(len(self.g.vertices()), 4)

    def test_views_are_restartable(self):
        view = self.g.edges_from("a")
        self.assertEqual(len(list(view)), 2)
        self.assertEqual(len(list(view)), 2)
        self.assertEqual(repr(view), "<edges: 2>")

    def test_edges_from_invalid_vertex_is_empty(self):
        self.assertEqual(list(self.g.edges_from("zz")), [])
        self.assertEqual(len(self.g.edges_from(42)), 0)

    def test_has_next(self):
        it = iter(self.g.edges_from("a"))
        self.assertTrue(it.has_next())
        self.assertTrue(it.has_next())  # lookahead does not consume
        self.assertEqual(next(it), Edge(0, 1, 2))
        self.assertEqual(next(it), Edge(0, 2, 1))
        self.assertFalse(it.has_next())
        with self.assertRaises(StopIteration):
            next(it)

    def test_adding_vertex_invalidates_edge_iterator(self):
        it = iter(self.g.edges())
        next(it)
        self.g.add_vertex("z")
        with self.assertRaises(ConcurrentStructuralChange):
            it.has_next()
        with self.assertRaises(ConcurrentStructuralChange):
            next(it)

    def test_removing_edge_invalidates_vertex_iterator(self):
        it = iter(self.g.vertices())
        self.g.remove_edge("a", "b")
        with self.assertRaises(ConcurrentStructuralChange) as cm:
            next(it)
        self.assertIsInstance(cm.exception, RuntimeError)

    def test_mutating_inside_loop_fails(self):
        with self.assertRaises(ConcurrentStructuralChange):
            for e in self.g.edges_from("a"):
                self.g.remove_edge(e.source, e.target)

    def test_marks_do_not_invalidate(self):
        it = iter(self.g.vertices())
        next(it)
        self.g.mark("c")
        self.assertEqual(list(it), [1, 2, 3, 4])

    def test_noop_removal_does_not_invalidate(self):
        it = iter(self.g.edges())
        self.g.remove_edge("e", "a")
        self.g.remove_vertex("zz")
        self.assertEqual(len(list(it)), 5)

    def test_fresh_iterator_after_change(self):
        it = iter(self.g.edges())
        self.g.add_edge("e", "a", 3)
        with self.assertRaises(ConcurrentStructuralChange):
            next(it)
        self.assertEqual(len(list(self.g.edges())), 6)


class TestEmptyGraphIteration(unittest.TestCase):
    def test_empty(self):
        g = Graph()
        it = iter(g.vertices())
        self.assertFalse(it.has_next())
        self.assertEqual(list(g.edges()), [])


if __name__ == "__main__":
    unittest.main()
