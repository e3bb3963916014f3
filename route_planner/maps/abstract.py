"""Contains an abstract `MapReader` base class, which must be implemented for each
map format to plan routes on.

A MapReader is an interface with which the planner can traverse the map. An implementation may
consist of a database connection, an in-memory graph or something similar. Its purpose is to
let the planner read map objects.

In order to implement a reader for a new map, the following interfaces have to be implemented:

* :py:attr:`~MapReader`
* :py:attr:`~Node`

The map model
-------------
Nodes
=====
A node is an object with a hashable ID and a position in the normalized map space.
The shorter side of the map spans the range [0, 1] on its axis. Distances between nodes are
measured in these normalized units; the map reader's `metric_scale` converts them into meters.

Neighbors
=========
Roads (ways) of the underlying map are walkable in both directions. A node's neighbors are
the nodes that follow or precede it on any way it is part of. Readers are free to discover
them lazily, but `Node.neighbors()` has to return the same nodes on every call.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Hashable, NamedTuple, Sequence
from shapely.geometry import Point
from shapely.geometry.base import BaseGeometry
from . import planar


class Coordinates(NamedTuple):
    "A position in the normalized map space"
    x: float
    y: float


class GeometricObject(ABC):
    @property
    @abstractmethod
    def geometry(self) -> BaseGeometry:
        "Returns the geometry of this object"


class Node(GeometricObject):
    "Abstract class modelling a node returned by a map reader"

    @property
    @abstractmethod
    def node_id(self) -> Hashable:
        """Returns the id of this node.

        A type is not specified here, but the ID has to be usable as key of a dictionary."""

    @property
    @abstractmethod
    def coordinates(self) -> Coordinates:
        "Returns the normalized x, y coordinates of this node"

    @property
    def geometry(self) -> Point:
        "Returns the position of this node as shapely point"
        return Point(*self.coordinates)

    @abstractmethod
    def neighbors(self) -> Sequence["Node"]:
        """Returns the adjacent nodes, discovering them on first use.

        Calling this more than once must not query the map again."""

    def distance(self, other: "Node") -> float:
        "Straight-line distance to `other`, in normalized map units"
        return planar.distance(self.coordinates, other.coordinates)

    def __repr__(self):
        return f"{type(self).__name__}(node_id={self.node_id!r}, coordinates={tuple(self.coordinates)})"


class MapReader(ABC):
    """Abstract base class for map readers.

    This is an adapter class that fulfills the map requirements of the route planner."""

    @abstractmethod
    def get_node(self, node_id: Hashable) -> Node:
        "Returns a node by its id."

    @abstractmethod
    def get_nodes(self) -> Iterable[Node]:
        "Yields all nodes contained in the map."

    @abstractmethod
    def get_nodecount(self) -> int:
        "Returns the number of nodes in the map."

    @abstractmethod
    def find_closest_node(self, coord: Coordinates) -> Node:
        """Returns the node nearest to `coord`.

        Must return a node for every map that contains at least one node."""

    @property
    @abstractmethod
    def metric_scale(self) -> float:
        "Factor converting normalized map units into meters"


def path_length(nodes: Sequence[Node]) -> float:
    "Length of a path of nodes, in normalized map units"
    return planar.path_length([node.coordinates for node in nodes])
