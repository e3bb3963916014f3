"Contains the Node class of the example format"

from typing import List, Optional
from ..maps import Coordinates, Node as AbstractNode


class Node(AbstractNode):
    "Node class implementation for example_sqlite_map"

    def __init__(self, map_reader, node_id: int):
        if not isinstance(node_id, int):
            raise ExampleMapError(f"Node id '{node_id}' has confusing type {type(node_id)}")
        self.map_reader = map_reader
        self.node_id_internal = node_id
        self.coordinates_internal: Optional[Coordinates] = None
        self.neighbors_internal: Optional[List["Node"]] = None

    @property
    def node_id(self) -> int:
        return self.node_id_internal

    @property
    def coordinates(self) -> Coordinates:
        if self.coordinates_internal is None:
            stmt = "SELECT x, y FROM nodes WHERE id = ?"
            (x, y) = self.map_reader.connection.execute(stmt, (self.node_id,)).fetchone()
            self.coordinates_internal = Coordinates(x, y)
        return self.coordinates_internal

    def neighbors(self) -> List["Node"]:
        "Returns the nodes sharing a line with this node, reading them on first use"
        if self.neighbors_internal is None:
            self.neighbors_internal = list(self.find_neighbors())
        return self.neighbors_internal

    def find_neighbors(self):
        "Queries the lines touching this node, in both directions"
        stmt = """SELECT endnode FROM lines WHERE startnode = ?
            UNION SELECT startnode FROM lines WHERE endnode = ?
            ORDER BY 1"""
        con = self.map_reader.connection
        for (node_id,) in con.execute(stmt, (self.node_id, self.node_id)).fetchall():
            if node_id != self.node_id:
                yield self.map_reader.get_node(node_id)


class ExampleMapError(Exception):
    "Some error reading the DB"
    pass
