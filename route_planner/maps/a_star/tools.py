"Helper functions and types for A*"

from enum import Enum
from typing import Hashable, NamedTuple
from ..abstract import Node


class EmptyFrontierError(Exception):
    "A node was requested from a frontier that holds no nodes"


class SearchStatus(Enum):
    "The states a route search goes through"
    INIT = "init"
    EXPANDING = "expanding"
    #: Terminal: the goal was reached and a path was built
    FOUND = "found"
    #: Terminal: the frontier ran empty, the goal is not reachable
    EXHAUSTED = "exhausted"


class Score(NamedTuple):
    """The score of a single item in the search frontier"""
    f: float
    g: float


class _NoParent:
    "Type of the `NO_PARENT` marker"

    def __repr__(self):
        return "NO_PARENT"


#: Parent of the start node. Distinct from every node id, None included.
NO_PARENT = _NoParent()


class NodeRecord:
    """Search-scoped scratch data of one node.

    The map's nodes are never written to; every search keeps its own records keyed by node id.
    `parent` is the id of the node this one was reached from, or `NO_PARENT` for the start node."""

    __slots__ = ("g", "h", "parent", "visited")

    def __init__(self, g: float, h: float, parent: Hashable = NO_PARENT):
        self.g = g
        self.h = h
        self.parent = parent
        self.visited = True

    @property
    def f(self) -> float:
        return self.g + self.h

    @property
    def score(self) -> Score:
        return Score(self.f, self.g)

    def __repr__(self):
        return f"NodeRecord(g={self.g}, h={self.h}, parent={self.parent!r})"


def heuristic(current: Node, target: Node) -> float:
    """Estimated cost from current to target.

    We use the straight-line distance in the map space here, which never overestimates
    a path along the map's roads."""
    return current.distance(target)
