"""An in-memory map conforming to the interface in route_planner.maps

Build it from node positions and the lines between them:

    >>> reader = MemoryMapReader({"a": (0.0, 0.0), "b": (1.0, 0.0)}, [("a", "b")])

Lines are walkable in both directions. Use `MemoryMapReader.from_wgs84` for nodes given as
WGS84 longitude/latitude; they get projected into the normalized map space.
"""

from typing import Dict, Hashable, Iterable, List, Mapping, Tuple
import numpy as np
from scipy.spatial import cKDTree
from ..maps import MapReader, Coordinates, wgs84
from .primitives import Node, ExampleMapError


class MemoryMapReader(MapReader):
    """
    Holds all nodes and lines in dictionaries. The nearest node lookup uses a k-d tree.
    """

    def __init__(
        self,
        nodes: Mapping[Hashable, Tuple[float, float]],
        lines: Iterable[Tuple[Hashable, Hashable]],
        metric_scale: float = 1.0,
    ):
        self.nodes: Dict[Hashable, Node] = {
            node_id: Node(self, node_id, coord) for (node_id, coord) in nodes.items()
        }
        self.adjacency: Dict[Hashable, List[Hashable]] = {}
        self.lines: List[Tuple[Hashable, Hashable]] = []
        for (start, end) in lines:
            if start not in self.nodes or end not in self.nodes:
                raise ExampleMapError(f"Line ({start!r}, {end!r}) references an unknown node")
            self.lines.append((start, end))
            self._connect(start, end)
            self._connect(end, start)
        self._metric_scale = metric_scale
        self._node_order = list(self.nodes)
        self._tree = None
        if self.nodes:
            self._tree = cKDTree(
                np.array([node.coordinates for node in self.nodes.values()], dtype=float)
            )

    @classmethod
    def from_wgs84(
        cls,
        nodes: Mapping[Hashable, Tuple[float, float]],
        lines: Iterable[Tuple[Hashable, Hashable]],
    ) -> "MemoryMapReader":
        "Creates a map from (lon, lat) node positions"
        projected, metric_scale = wgs84.normalize(nodes)
        return cls(projected, lines, metric_scale)

    def _connect(self, start: Hashable, end: Hashable):
        neighbors = self.adjacency.setdefault(start, [])
        if end not in neighbors:
            neighbors.append(end)

    def get_node(self, node_id: Hashable) -> Node:
        try:
            return self.nodes[node_id]
        except KeyError:
            raise ExampleMapError(f"The node {node_id!r} does not exist")

    def get_nodes(self) -> Iterable[Node]:
        yield from self.nodes.values()

    def get_nodecount(self) -> int:
        return len(self.nodes)

    def get_linecount(self) -> int:
        return len(self.lines)

    def find_closest_node(self, coord: Coordinates) -> Node:
        if self._tree is None:
            raise ExampleMapError("The map contains no nodes")
        _, index = self._tree.query([coord[0], coord[1]], k=1)
        return self.nodes[self._node_order[int(index)]]

    @property
    def metric_scale(self) -> float:
        return self._metric_scale
