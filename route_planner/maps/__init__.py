"""
This module describes the handling of maps. It provides an interface
through which the route planner accesses the map.
"""

from .abstract import MapReader, Node, Coordinates, path_length
from .a_star import shortest_path, RoutePlanner, Route, PathNode, SearchStatus
