"""
Contains the unittest for the example sqlite map format."""

import os
import sqlite3
import tempfile
import unittest

from route_planner import plan_route
from route_planner.maps import Coordinates, shortest_path
from route_planner.example_sqlite_map import ExampleMapReader, ExampleMapError, Node

from .example_mapformat import populate, NODES, LINES


class SQLiteMapTest(unittest.TestCase):
    "A few unit tests for the example sqlite mapformat"

    def setUp(self):
        self.reader = ExampleMapReader(":memory:")
        populate(self.reader.connection, metric_scale=250.0)

    def tearDown(self):
        self.reader.close()

    def test_node_invalid_id_type(self):
        "Check if an invalid node id raises an error"
        with self.assertRaises(ExampleMapError):
            Node(self.reader, "Hello")

    def test_node_nonexistent_id(self):
        "Check if a nonexistent node ID leads to an exception"
        with self.assertRaises(ExampleMapError):
            self.reader.get_node(19)

    def test_counts(self):
        "Check node and line counts"
        self.assertEqual(self.reader.get_nodecount(), len(NODES))
        self.assertEqual(self.reader.get_linecount(), len(LINES))
        self.assertSetEqual({node.node_id for node in self.reader.get_nodes()}, set(NODES))

    def test_coordinates(self):
        "Check the coordinates of a node"
        self.assertEqual(self.reader.get_node(6).coordinates, Coordinates(0.4, 1.0))

    def test_neighbors(self):
        "Lines are used in both directions, and neighbors are read only once"
        node = self.reader.get_node(4)
        neighbors = node.neighbors()
        self.assertSequenceEqual([n.node_id for n in neighbors], [0, 1, 3, 5, 6])
        self.assertIs(node.neighbors(), neighbors)
        self.assertIs(self.reader.get_node(4), node)

    def test_closest_node(self):
        "Test find_closest_node with manually chosen locations"
        self.assertEqual(self.reader.find_closest_node(Coordinates(0.1, 0.05)).node_id, 0)
        self.assertEqual(self.reader.find_closest_node(Coordinates(0.6, 0.45)).node_id, 4)
        self.assertEqual(self.reader.find_closest_node(Coordinates(2.0, 2.0)).node_id, 8)

    def test_metric_scale(self):
        "The metric scale is read from the meta table"
        self.assertEqual(self.reader.metric_scale, 250.0)

    def test_route(self):
        "Plan a route on the sqlite map"
        route = plan_route(self.reader, 0, 0, 40, 100)
        self.assertSequenceEqual([node.node_id for node in route.path], [0, 3, 6])
        self.assertAlmostEqual(route.distance, (0.5 + (0.4 ** 2 + 0.5 ** 2) ** 0.5) * 250.0)

    def test_route_same_as_memory_map(self):
        "The sqlite map yields the same route as the in-memory map"
        from .example_mapformat import example_memory_map
        memory_reader = example_memory_map(metric_scale=250.0)
        for (start, end) in [(0, 5), (2, 6), (6, 2)]:
            sqlite_route = shortest_path(
                self.reader, self.reader.get_node(start), self.reader.get_node(end)
            )
            memory_route = shortest_path(
                memory_reader, memory_reader.get_node(start), memory_reader.get_node(end)
            )
            self.assertSequenceEqual(
                [node.node_id for node in sqlite_route.path],
                [node.node_id for node in memory_route.path],
            )
            self.assertAlmostEqual(sqlite_route.distance, memory_route.distance)


class SQLiteMapFileTest(unittest.TestCase):
    "Tests with a database file"

    def test_empty_map(self):
        "An empty map has no closest node and the default metric scale"
        with tempfile.TemporaryDirectory() as directory:
            db_file = os.path.join(directory, "empty.sqlite")
            conn = sqlite3.connect(db_file)
            populate(conn, nodes={}, lines=[])
            conn.close()
            reader = ExampleMapReader(db_file)
            self.assertEqual(reader.metric_scale, 1.0)
            with self.assertRaises(ExampleMapError):
                reader.find_closest_node(Coordinates(0.5, 0.5))
            reader.close()

    def test_existing_file(self):
        "A reader opens a database written before"
        with tempfile.TemporaryDirectory() as directory:
            db_file = os.path.join(directory, "map.sqlite")
            conn = sqlite3.connect(db_file)
            populate(conn)
            conn.close()
            reader = ExampleMapReader(db_file)
            self.assertEqual(reader.get_nodecount(), len(NODES))
            reader.close()

    def test_missing_file(self):
        "A mistyped path is an error and leaves no new file behind"
        with tempfile.TemporaryDirectory() as directory:
            db_file = os.path.join(directory, "missing.sqlite")
            with self.assertRaises(ExampleMapError):
                ExampleMapReader(db_file)
            self.assertFalse(os.path.exists(db_file))

    def test_reader_does_not_write(self):
        "Opening a map leaves the database unchanged"
        with tempfile.TemporaryDirectory() as directory:
            db_file = os.path.join(directory, "foreign.sqlite")
            conn = sqlite3.connect(db_file)
            conn.execute("CREATE TABLE nodes (id INTEGER PRIMARY KEY, x REAL, y REAL)")
            conn.commit()
            conn.close()
            reader = ExampleMapReader(db_file)
            self.assertEqual(reader.metric_scale, 1.0)
            reader.close()
            conn = sqlite3.connect(db_file)
            tables = [name for (name,) in conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            )]
            conn.close()
            self.assertSequenceEqual(tables, ["nodes"])
