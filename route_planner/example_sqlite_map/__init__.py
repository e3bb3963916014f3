"""The example sqlite map format, conforming to the interface in route_planner.maps

The database holds three tables:

* `nodes (id INTEGER PRIMARY KEY, x REAL, y REAL)` with normalized coordinates
* `lines (startnode INT, endnode INT)`, road segments walkable in both directions
* `meta (key TEXT PRIMARY KEY, value REAL)`, where the key `metric_scale` stores
  meters per map unit. Without it, the scale is 1.0.
"""

import os
import sqlite3
from typing import Dict, Iterable
from ..maps import MapReader, Coordinates
from .primitives import Node, ExampleMapError

SCHEMA_SQL = """CREATE TABLE IF NOT EXISTS nodes (id INTEGER PRIMARY KEY, x REAL, y REAL);
CREATE TABLE IF NOT EXISTS lines (startnode INT, endnode INT);
CREATE TABLE IF NOT EXISTS meta (key TEXT PRIMARY KEY, value REAL);
"""


class ExampleMapReader(MapReader):
    """
    This is a reader for the example sqlite map format.

    Create an instance with: `ExampleMapReader('example.sqlite')`.

    Nodes are cached by the reader, so every node reads its neighbors only once.
    The reader never writes to the database; create the tables with `SCHEMA_SQL`.
    """

    def __init__(self, map_db_file: str):
        if map_db_file != ":memory:" and not os.path.isfile(map_db_file):
            raise ExampleMapError(f"The map database {map_db_file} does not exist")
        self.connection = sqlite3.connect(map_db_file)
        self.node_cache: Dict[int, Node] = {}

    def get_node(self, node_id: int) -> Node:
        if node_id in self.node_cache:
            return self.node_cache[node_id]
        result = self.connection.execute("SELECT id FROM nodes WHERE id=?", (node_id,))
        if result.fetchone() is None:
            raise ExampleMapError(f"The node {node_id} does not exist")
        node = Node(self, node_id)
        self.node_cache[node_id] = node
        return node

    def get_nodes(self) -> Iterable[Node]:
        result = self.connection.execute("SELECT id FROM nodes")
        for (node_id,) in result.fetchall():
            yield self.get_node(node_id)

    def get_nodecount(self) -> int:
        (count,) = self.connection.execute("SELECT COUNT(*) FROM nodes").fetchone()
        return count

    def get_linecount(self) -> int:
        (count,) = self.connection.execute("SELECT COUNT(*) FROM lines").fetchone()
        return count

    def find_closest_node(self, coord: Coordinates) -> Node:
        "Returns the node with the smallest distance to `coord`, preferring lower ids on ties"
        stmt = """SELECT id FROM nodes
            ORDER BY (x - ?) * (x - ?) + (y - ?) * (y - ?), id LIMIT 1"""
        (x, y) = coord
        result = self.connection.execute(stmt, (x, x, y, y)).fetchone()
        if result is None:
            raise ExampleMapError("The map contains no nodes")
        return self.get_node(result[0])

    @property
    def metric_scale(self) -> float:
        stmt = "SELECT value FROM meta WHERE key = 'metric_scale'"
        try:
            result = self.connection.execute(stmt).fetchone()
        except sqlite3.OperationalError:
            # No meta table
            return 1.0
        if result is None:
            return 1.0
        return result[0]

    def close(self):
        self.connection.close()
