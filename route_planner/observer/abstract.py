"Contains the abstract observer class for the route planner"
from abc import abstractmethod

from ..maps import Node, Route
from ..maps.a_star.tools import NodeRecord


class SearchObserver:
    "Abstract class representing an observer to the route search"

    def on_endpoints_resolved(self, start: Node, end: Node):
        "Called after the query points were resolved to the closest map nodes"

    @abstractmethod
    def on_node_expanded(self, node: Node, record: NodeRecord):
        "Called after the neighbors of `node` were added to the open list"

    @abstractmethod
    def on_route_found(self, route: Route):
        "Called when the goal is reached, with the reconstructed route"

    @abstractmethod
    def on_search_exhausted(self, expanded: int):
        """Called when the open list ran empty without reaching the goal.

        `expanded` is the number of nodes that were expanded until then."""
