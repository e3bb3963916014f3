"""The module resolving query points on a map and planning the route between them"""

from logging import debug
from typing import Optional
from ..maps import MapReader, Coordinates, Route, RoutePlanner
from ..observer import SearchObserver
from .configuration import Config, DEFAULT_CONFIG, load_config, save_config


def resolve_point(reader: MapReader, x: float, y: float, config: Config = DEFAULT_CONFIG):
    "Returns the map node closest to the query point (x, y), scaled by `coordinate_scale`"
    coord = Coordinates(x * config.coordinate_scale, y * config.coordinate_scale)
    return reader.find_closest_node(coord)


def plan_route(
    reader: MapReader,
    start_x: float,
    start_y: float,
    end_x: float,
    end_y: float,
    observer: Optional[SearchObserver] = None,
    config: Config = DEFAULT_CONFIG,
) -> Route:
    """Plans the shortest walkable route between two query points.

    Args:
        reader:
            A reader for the map on which you want to plan
        start_x, start_y:
            The point where the route starts. With the default config, both values
            are percentages of the map extent (0 to 100).
        end_x, end_y:
            The point where the route ends, in the same units
        observer:
            An observer that collects information when events of interest happen at the planner
        config:
            A definition of the planning behaviour providing various settings

    Returns:
        The route between the nodes closest to both query points. Its distance is in meters.
        When the end is not reachable from the start, the route is empty.

    Raises:
        Whatever the map reader raises for points it cannot resolve, e.g. on an empty map.
    """
    start = resolve_point(reader, start_x, start_y, config)
    end = resolve_point(reader, end_x, end_y, config)
    debug(f"Planning from node {start.node_id} at {start.coordinates} "
          f"to node {end.node_id} at {end.coordinates}")
    if observer is not None:
        observer.on_endpoints_resolved(start, end)
    planner = RoutePlanner(
        reader,
        start,
        end,
        frontier=config.frontier,
        goal_tolerance=config.goal_tolerance,
        relax_costs=config.relax_costs,
        observer=observer,
    )
    return planner.search()
