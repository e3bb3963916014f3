"Contains the Node class of the in-memory map"

from typing import Hashable, List, Optional
from ..maps import Coordinates, Node as AbstractNode


class Node(AbstractNode):
    "Node class implementation for example_memory_map"

    def __init__(self, map_reader, node_id: Hashable, coordinates: Coordinates):
        self.map_reader = map_reader
        self.node_id_internal = node_id
        self.coordinates_internal = Coordinates(*coordinates)
        self.neighbors_internal: Optional[List["Node"]] = None

    @property
    def node_id(self) -> Hashable:
        return self.node_id_internal

    @property
    def coordinates(self) -> Coordinates:
        return self.coordinates_internal

    def neighbors(self) -> List["Node"]:
        "Returns the nodes sharing a line with this node, looking them up on first use"
        if self.neighbors_internal is None:
            self.neighbors_internal = [
                self.map_reader.get_node(node_id)
                for node_id in self.map_reader.adjacency.get(self.node_id, [])
                if node_id != self.node_id
            ]
        return self.neighbors_internal


class ExampleMapError(Exception):
    "Some error reading the in-memory map"
    pass
