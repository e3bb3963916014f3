"Contains a simple SearchObserver implementation"
from typing import Hashable, NamedTuple
from .abstract import SearchObserver
from ..maps import Node, Route
from ..maps.a_star.tools import NodeRecord


class Expansion(NamedTuple):
    "A node expanded by the search, with the costs it had at that time"
    node_id: Hashable
    g: float
    h: float
    parent: Hashable


class SimpleObserver(SearchObserver):
    """A simple observer that collects the information and can be
    queried after the search is finished"""

    def __init__(self):
        self.start = None
        self.end = None
        self.expansions = []
        self.route = None
        self.exhausted = False
        self.expanded = None

    def on_endpoints_resolved(self, start: Node, end: Node):
        self.start = start
        self.end = end

    def on_node_expanded(self, node: Node, record: NodeRecord):
        self.expansions.append(Expansion(node.node_id, record.g, record.h, record.parent))

    def on_route_found(self, route: Route):
        self.route = route

    def on_search_exhausted(self, expanded: int):
        self.exhausted = True
        self.expanded = expanded
