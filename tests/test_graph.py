# test_graph.py
import os
import sys
import unittest

import numpy as np

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from slotgraph.core._Edge import Edge
from slotgraph.core._Errors import (
    DuplicateNameError,
    GraphError,
    InvalidEndpointError,
    SelfLoopError,
)
from slotgraph.core._Slots import SlotAllocator
from slotgraph.core.graph import Graph


class TestGraphBasics(unittest.TestCase):
    def setUp(self):
        self.g = Graph()

    def test_fresh_graph_is_empty(self):
        self.assertEqual(self.g.number_of_vertices(), 0)
        self.assertEqual(self.g.number_of_edges(), 0)
        self.assertEqual(self.g.capacity, 16)
        self.assertEqual(self.g.version, 0)
        self.assertEqual(list(self.g.vertices()), [])

    def test_add_named_vertex_round_trips(self):
        a = self.g.add_vertex("a")
        b = self.g.add_vertex("b")
        self.assertEqual((a, b), (0, 1))
        self.assertEqual(self.g.index_of("b"), 1)
        self.assertEqual(self.g.name_of(0), "a")
        self.assertTrue(self.g.is_valid(a))
        self.assertTrue(self.g.is_valid("a"))
        self.assertIn("b", self.g)
        self.assertEqual(self.g.number_of_vertices(), 2)

    def test_unknown_lookups_return_none(self):
        self.g.add_vertex("a")
        self.assertIsNone(self.g.index_of("zz"))
        self.assertIsNone(self.g.name_of(5))
        self.assertIsNone(self.g.name_of(-1))
        self.assertIsNone(self.g.name_of(1000))
        self.assertFalse(self.g.is_valid(1000))
        self.assertFalse(self.g.is_valid(None))

    def test_duplicate_name_rejected(self):
        self.g.add_vertex("a")
        with self.assertRaises(DuplicateNameError):
            self.g.add_vertex("a")
        self.assertEqual(self.g.number_of_vertices(), 1)

    def test_non_string_name_rejected(self):
        with self.assertRaises(TypeError):
            self.g.add_vertex(3)

    def test_anonymous_vertex_names(self):
        v = self.g.add_vertex()
        self.assertEqual(self.g.name_of(v), f"v{v}")
        self.assertEqual(self.g.index_of("v0"), 0)

    def test_anonymous_name_avoids_collision(self):
        self.g.add_vertex("v1")  # slot 0
        v = self.g.add_vertex()  # slot 1 would be "v1"
        self.assertEqual(v, 1)
        self.assertEqual(self.g.name_of(v), "vv1")
        self.assertEqual(self.g.index_of("v1"), 0)

    def test_numpy_integer_slots_accepted(self):
        self.g.add_vertex("a")
        self.g.add_vertex("b")
        self.g.add_edge(np.int64(0), np.int32(1), 3)
        self.assertEqual(self.g.edge_weight(0, 1), 3)

    def test_bool_is_not_a_slot(self):
        self.g.add_vertex("a")
        self.assertFalse(self.g.is_valid(False))
        self.assertIsNone(self.g.name_of(True))

    def test_repr(self):
        self.g.add_vertex("a")
        self.assertEqual(repr(self.g), "Graph(vertices=1, edges=0, version=1)")


class TestSlots(unittest.TestCase):
    def test_growth_doubles_capacity(self):
        g = Graph(capacity=2)
        slots = [g.add_vertex(n) for n in ("a", "b", "c")]
        self.assertEqual(slots, [0, 1, 2])
        self.assertEqual(g.capacity, 4)
        # parallel storage kept in step
        self.assertEqual(len(g._adjacency), 4)
        self.assertEqual(len(g._names), 4)
        self.assertEqual(g._marks.shape, (4,))

    def test_zero_capacity_grows(self):
        g = Graph(capacity=0)
        self.assertEqual(g.add_vertex("a"), 0)
        self.assertEqual(g.add_vertex("b"), 1)
        self.assertEqual(g.capacity, 2)

    def test_released_slots_queue_behind_fresh_ones(self):
        g = Graph()
        for n in "abc":
            g.add_vertex(n)
        g.remove_vertex("b")
        # 3..15 were queued first
        self.assertEqual(g.add_vertex("x"), 3)

    def test_released_slot_reused_without_old_edges(self):
        g = Graph(capacity=3)
        for n in "abc":
            g.add_vertex(n)
        g.add_edge("a", "b", 1)
        g.add_edge("b", "c", 2)
        g.add_edge("c", "a", 3)
        g.remove_vertex("b")
        x = g.add_vertex("x")
        self.assertEqual(x, 1)
        self.assertEqual(g.capacity, 3)
        self.assertEqual(g.out_degree(x), 0)
        self.assertEqual(g.in_degree(x), 0)
        self.assertEqual(list(g.edges_from(x)), [])
        self.assertFalse(g.has_edge("a", "x"))
        self.assertEqual(g.number_of_edges(), 1)

    def test_allocator_fifo(self):
        grown = []
        alloc = SlotAllocator(2, grow=lambda old, new: grown.append((old, new)))
        self.assertEqual([alloc.allocate(), alloc.allocate()], [0, 1])
        alloc.release(0)
        self.assertEqual(alloc.allocate(), 0)
        self.assertEqual(alloc.allocate(), 2)
        self.assertEqual(grown, [(2, 4)])
        self.assertEqual(alloc.free_count, 1)
        self.assertIn(3, alloc)

    def test_allocator_expand_never_shrinks(self):
        alloc = SlotAllocator(8)
        self.assertEqual(alloc.expand(4), 8)
        self.assertEqual(alloc.expand(), 16)


class TestEdges(unittest.TestCase):
    def setUp(self):
        self.g = Graph()
        for n in "abcd":
            self.g.add_vertex(n)

    def test_add_edge_returns_edge(self):
        e = self.g.add_edge("a", "b", 7)
        self.assertEqual(e, Edge(0, 1, 7))
        self.assertEqual(str(e), "0 --7-> 1")
        self.assertEqual(self.g.number_of_edges(), 1)
        self.assertTrue(self.g.has_edge(0, 1))
        self.assertFalse(self.g.has_edge(1, 0))

    def test_duplicate_edge_replaces_weight(self):
        self.g.add_edge("a", "b", 1)
        self.g.add_edge("a", "c", 1)
        self.g.add_edge("a", "b", 9)
        self.assertEqual(self.g.number_of_edges(), 2)
        self.assertEqual(self.g.edge_weight("a", "b"), 9)
        # replaced in place, order kept
        self.assertEqual([e.target for e in self.g.edges_from("a")], [1, 2])

    def test_self_loop_rejected(self):
        with self.assertRaises(SelfLoopError):
            self.g.add_edge("a", "a", 1)
        self.assertEqual(self.g.number_of_edges(), 0)

    def test_invalid_endpoint_rejected(self):
        with self.assertRaises(InvalidEndpointError) as cm:
            self.g.add_edge("a", "zz", 1)
        self.assertIsInstance(cm.exception, KeyError)
        self.assertIsInstance(cm.exception, GraphError)
        self.assertEqual(str(cm.exception), "Invalid ends: 'a' -> 'zz'")
        with self.assertRaises(InvalidEndpointError):
            self.g.add_edge(10, 0, 1)

    def test_weight_must_be_integral(self):
        with self.assertRaises(TypeError):
            self.g.add_edge("a", "b", 1.5)
        with self.assertRaises(TypeError):
            self.g.add_edge("a", "b", True)
        self.g.add_edge("a", "b", np.int64(4))
        self.assertEqual(self.g.edge_weight("a", "b"), 4)

    def test_remove_edge_is_idempotent(self):
        self.g.add_edge("a", "b", 1)
        self.g.remove_edge("a", "b")
        self.assertEqual(self.g.number_of_edges(), 0)
        v = self.g.version
        self.g.remove_edge("a", "b")
        self.g.remove_edge("zz", "b")
        self.assertEqual(self.g.version, v)

    def test_remove_vertex_purges_incident_edges(self):
        self.g.add_edge("a", "b", 1)
        self.g.add_edge("b", "c", 2)
        self.g.add_edge("c", "b", 3)
        self.g.add_edge("c", "d", 4)
        self.g.remove_vertex("b")
        self.assertEqual(self.g.number_of_vertices(), 3)
        self.assertEqual(self.g.number_of_edges(), 1)
        self.assertFalse(self.g.is_valid(1))
        self.assertIsNone(self.g.index_of("b"))
        for e in self.g.edges():
            self.assertNotIn(1, (e.source, e.target))

    def test_remove_unknown_vertex_is_noop(self):
        v = self.g.version
        self.g.remove_vertex("zz")
        self.g.remove_vertex(99)
        self.assertEqual(self.g.version, v)
        self.assertEqual(self.g.number_of_vertices(), 4)

    def test_degrees(self):
        self.g.add_edge("a", "b", 1)
        self.g.add_edge("c", "b", 1)
        self.g.add_edge("b", "d", 1)
        self.assertEqual(self.g.out_degree("b"), 1)
        self.assertEqual(self.g.in_degree("b"), 2)
        self.assertEqual(self.g.out_degree("zz"), 0)
        self.assertEqual(self.g.successors("a"), [1])
        self.assertEqual(self.g.predecessors("b"), [0, 2])

    def test_edge_sum_matches_count(self):
        self.g.add_edge("a", "b", 1)
        self.g.add_edge("a", "c", 1)
        self.g.add_edge("d", "a", 1)
        self.assertEqual(
            sum(self.g.out_degree(v) for v in self.g.vertices()), self.g.number_of_edges()
        )


class TestVersion(unittest.TestCase):
    def test_structural_changes_bump_version(self):
        g = Graph()
        g.add_vertex("a")
        g.add_vertex("b")
        self.assertEqual(g.version, 2)
        g.add_edge("a", "b", 1)
        g.add_edge("a", "b", 2)  # replacement still counts
        self.assertEqual(g.version, 4)
        g.remove_edge("a", "b")
        g.remove_vertex("b")
        self.assertEqual(g.version, 6)

    def test_failed_mutation_keeps_version(self):
        g = Graph()
        g.add_vertex("a")
        with self.assertRaises(SelfLoopError):
            g.add_edge("a", "a", 1)
        with self.assertRaises(DuplicateNameError):
            g.add_vertex("a")
        self.assertEqual(g.version, 1)


class TestIndexManager(unittest.TestCase):
    def setUp(self):
        self.g = Graph()
        for n in "abc":
            self.g.add_vertex(n)
        self.g.add_edge("a", "b", 1)

    def test_strict_lookups(self):
        self.assertEqual(self.g.idx.name_to_slot("c"), 2)
        self.assertEqual(self.g.idx.slot_to_name(1), "b")
        self.assertEqual(self.g.idx.names_to_slots(["c", "a"]), [2, 0])
        self.assertEqual(self.g.idx.slots_to_names([1, 2]), ["b", "c"])
        with self.assertRaises(KeyError):
            self.g.idx.name_to_slot("zz")
        with self.assertRaises(KeyError):
            self.g.idx.slot_to_name(7)

    def test_stats(self):
        self.g.remove_vertex("c")
        stats = self.g.idx.stats()
        self.assertEqual(stats["n_vertices"], 2)
        self.assertEqual(stats["n_edges"], 1)
        self.assertEqual(stats["capacity"], 16)
        self.assertEqual(stats["free_slots"], 14)
        self.assertEqual(stats["max_slot"], 1)
        self.assertTrue(self.g.idx.has_name("a"))
        self.assertFalse(self.g.idx.has_slot(2))


if __name__ == "__main__":
    unittest.main()
