"""
Provides the shortest_path(reader, start, end) -> Route function, which
finds a shortest path between two nodes, and the RoutePlanner class doing the work.
"""
from logging import debug
from typing import Dict, Hashable, List, Optional
from ..abstract import MapReader, Node
from .frontier import Frontier, SortedFrontier, HeapFrontier, make_frontier
from .route import PathNode, Route
from .tools import heuristic, NO_PARENT, NodeRecord, Score, SearchStatus, EmptyFrontierError


class RoutePlanner:
    """Finds a shortest path between two nodes of a map using the `A*`_ algorithm.

    .. _A*: https://en.wikipedia.org/wiki/A*_search_algorithm

    The search is a small state machine, see :py:class:`SearchStatus`. `search()` runs it
    from `INIT` until it reaches `FOUND` or `EXHAUSTED`; `step()` advances a running search
    by a single frontier extraction.

    All per-node scratch data (costs, parents, visited flags) lives in `records`, keyed by
    node id. The map's nodes are only read, so several planners may work on one map.

    Args:
        reader:
            The map on which the path is searched. Its `metric_scale` converts the path length
            into meters.
        start:
            The node from which the path shall start
        end:
            The destination node of the path
        frontier:
            Name of the frontier implementation, "sorted" or "heap"
        goal_tolerance:
            If None, only the `end` node itself is accepted as goal. Otherwise any node within
            this straight-line distance (in map units) of `end` terminates the search.
        relax_costs:
            If True, a discovered node that is not finalized yet gets a new parent when a
            cheaper route to it shows up. The default keeps the first route found to a node.
        observer:
            An optional :py:class:`~route_planner.observer.SearchObserver`
    """

    def __init__(
            self,
            reader: MapReader,
            start: Node,
            end: Node,
            frontier: str = "sorted",
            goal_tolerance: Optional[float] = None,
            relax_costs: bool = False,
            observer=None,
    ):
        self.reader = reader
        self.start_node = start
        self.end_node = end
        self.frontier_kind = frontier
        self.goal_tolerance = goal_tolerance
        self.relax_costs = relax_costs
        self.observer = observer
        self.open_list: Frontier = make_frontier(frontier)
        self.records: Dict[Hashable, NodeRecord] = {}
        self.discovered: Dict[Hashable, Node] = {}
        self.closed_set = set()
        self.status = SearchStatus.INIT
        self.path: List[PathNode] = []
        self.distance = 0.0
        self.expanded = 0

    @property
    def route(self) -> Route:
        "The current result. Empty unless the search has found the goal."
        return Route(self.path, self.distance, self.status)

    def calculate_h_value(self, node: Node) -> float:
        "Estimated remaining cost from `node` to the end node"
        return heuristic(node, self.end_node)

    def is_goal(self, node: Node) -> bool:
        if self.goal_tolerance is None:
            return node.node_id == self.end_node.node_id
        return node.distance(self.end_node) <= self.goal_tolerance

    def discover(self, node: Node, g: float, parent: Optional[Node]):
        "Records `node` as visited and adds it to the open list"
        record = NodeRecord(
            g, self.calculate_h_value(node), NO_PARENT if parent is None else parent.node_id
        )
        self.records[node.node_id] = record
        self.discovered[node.node_id] = node
        self.open_list.push(node, record.score)

    def add_neighbors(self, current_node: Node):
        """Adds all unvisited neighbors of `current_node` to the open list

        The map reader discovers the neighbors on demand."""
        current = self.records[current_node.node_id]
        for neighbor in current_node.neighbors():
            if neighbor.node_id == current_node.node_id:
                continue
            g = current.g + current_node.distance(neighbor)
            record = self.records.get(neighbor.node_id)
            if record is None:
                self.discover(neighbor, g, current_node)
            elif self.relax_costs and neighbor.node_id not in self.closed_set and g < record.g:
                debug(f"Cheaper route to {neighbor.node_id}: {record.g} -> {g}")
                record.g = g
                record.parent = current_node.node_id
                self.open_list.push(neighbor, record.score)

    def next_node(self) -> Node:
        "Removes the open node with the smallest sum of g and h value and returns it"
        return self.open_list.pop()

    def construct_final_path(self, current_node: Node) -> List[PathNode]:
        """Returns the path of nodes from the start node to `current_node`

        Follows the parent chain backwards and sets `distance` to the path length in meters."""
        distance = 0.0
        path_found = []
        node_id = current_node.node_id
        while node_id is not NO_PARENT:
            node = self.discovered[node_id]
            record = self.records[node_id]
            path_found.append(PathNode(node_id, node.coordinates, record.g, record.h))
            if record.parent is not NO_PARENT:
                distance += node.distance(self.discovered[record.parent])
            node_id = record.parent
        path_found.reverse()
        self.distance = distance * self.reader.metric_scale
        return path_found

    def start(self):
        "Resets the search and seeds the open list with the start node"
        self.open_list = make_frontier(self.frontier_kind)
        self.records.clear()
        self.discovered.clear()
        self.closed_set.clear()
        self.path = []
        self.distance = 0.0
        self.expanded = 0
        self.status = SearchStatus.INIT
        self.discover(self.start_node, 0.0, None)
        self.status = SearchStatus.EXPANDING

    def step(self) -> SearchStatus:
        "Takes the next node from the open list and either finishes the search or expands it"
        if self.status is not SearchStatus.EXPANDING:
            return self.status
        if self.open_list.is_empty():
            debug(f"Open list exhausted after {self.expanded} expansions, no path found")
            self.status = SearchStatus.EXHAUSTED
            if self.observer is not None:
                self.observer.on_search_exhausted(self.expanded)
            return self.status
        current_node = self.next_node()
        if current_node.node_id in self.closed_set:
            # An outdated entry, the node was reached more cheaply in the meantime
            return self.status
        if self.is_goal(current_node):
            self.path = self.construct_final_path(current_node)
            self.status = SearchStatus.FOUND
            debug(f"Reached {current_node.node_id}: {len(self.path)} nodes, {self.distance} m")
            if self.observer is not None:
                self.observer.on_route_found(self.route)
            return self.status
        self.closed_set.add(current_node.node_id)
        self.add_neighbors(current_node)
        self.expanded += 1
        if self.observer is not None:
            self.observer.on_node_expanded(current_node, self.records[current_node.node_id])
        return self.status

    def search(self) -> Route:
        """Runs the search until the goal is found or no open node is left.

        Returns:
            The found route. If there is no path between the nodes, the route is empty
            and has the status `EXHAUSTED`; no exception is raised."""
        self.start()
        while self.status is SearchStatus.EXPANDING:
            self.step()
        return self.route


def shortest_path(reader: MapReader, start: Node, end: Node, **options) -> Route:
    """
    Returns a shortest path on the map between two nodes.

    Uses the A* algorithm for this. The keyword `options` are passed on to
    :py:class:`RoutePlanner`.

    Returns:
        The route from `start` to `end`, with its length in meters.

        A single-node path indicates that start and end node are the same.
        An empty path indicates that no path exists.
    """
    return RoutePlanner(reader, start, end, **options).search()
