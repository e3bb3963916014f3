"Defines the result types of a route search"

from typing import Hashable, List, NamedTuple, Optional
from shapely.geometry import LineString
from ..abstract import Coordinates
from .tools import SearchStatus


class PathNode(NamedTuple):
    "A copy of a map node as it was reached by the search"
    node_id: Hashable
    #: Normalized position of the node
    coordinates: Coordinates
    #: Accumulated cost from the start node, in normalized units
    g_value: float
    #: Straight-line estimate to the goal node, in normalized units
    h_value: float


class Route(NamedTuple):
    """The outcome of a route search.

    An empty `path` means that no path exists between start and end. `distance` is given
    in meters and is only meaningful for a non-empty path."""
    path: List[PathNode]
    distance: float
    status: SearchStatus

    @property
    def found(self) -> bool:
        return self.status is SearchStatus.FOUND

    def coordinates(self) -> List[Coordinates]:
        "Returns the positions of all path nodes, from start to end"
        return [node.coordinates for node in self.path]

    @property
    def geometry(self) -> Optional[LineString]:
        "Returns the path as linestring, or None if it consists of less than two nodes"
        if len(self.path) < 2:
            return None
        return LineString(self.coordinates())
