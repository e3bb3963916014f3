"""Some geo coordinates related tools

Map data usually comes as WGS84 longitude/latitude. The planner works in a normalized, planar
space instead; `normalize` projects geographic points into it and computes the metric scale."""
from typing import Dict, Hashable, Mapping, Tuple
from geographiclib.geodesic import Geodesic
from shapely.geometry import LineString
from .abstract import Coordinates
from .planar import pairwise

LonLat = Tuple[float, float]


def distance(point_a: LonLat, point_b: LonLat) -> float:
    "Returns the distance of two WGS84 (lon, lat) coordinates on our planet, in meters"
    geod = Geodesic.WGS84
    (lon1, lat1) = point_a
    (lon2, lat2) = point_b
    line = geod.Inverse(lat1, lon1, lat2, lon2, Geodesic.DISTANCE)
    # According to https://geographiclib.sourceforge.io/1.50/python/, the distance between
    # point 1 and 2 is stored in the attribute `s12`.
    return line["s12"]


def line_string_length(line_string: LineString) -> float:
    """Returns the length of a lon/lat line string in meters"""
    length = 0.0
    for (coord_a, coord_b) in pairwise(line_string.coords):
        length += distance(coord_a, coord_b)
    return length


def normalize(points: Mapping[Hashable, LonLat]) -> Tuple[Dict[Hashable, Coordinates], float]:
    """Projects WGS84 points into the normalized map space.

    The bounding box of all points is measured along its edges on the ellipsoid. The shorter
    of both extents becomes the metric scale, so that the shorter side of the box spans [0, 1].
    A box that is flat along an axis maps all points onto 0 on that axis.

    Args:
        points:
            A mapping from node id to (lon, lat)
    Returns:
        The normalized coordinates per node id, and the metric scale (meters per unit).
        For empty or single point input, the metric scale is 1.0.
    """
    if not points:
        return {}, 1.0
    lons = [lon for (lon, _) in points.values()]
    lats = [lat for (_, lat) in points.values()]
    min_lon, max_lon = min(lons), max(lons)
    min_lat, max_lat = min(lats), max(lats)
    mid_lat = (min_lat + max_lat) / 2
    width = distance((min_lon, mid_lat), (max_lon, mid_lat))
    height = distance((min_lon, min_lat), (min_lon, max_lat))
    extents = [extent for extent in (width, height) if extent > 0.0]
    metric_scale = min(extents) if extents else 1.0

    def project(value: float, low: float, high: float, extent: float) -> float:
        if high == low:
            return 0.0
        return (value - low) / (high - low) * extent / metric_scale

    projected = {
        node_id: Coordinates(
            project(lon, min_lon, max_lon, width),
            project(lat, min_lat, max_lat, height),
        )
        for (node_id, (lon, lat)) in points.items()
    }
    return projected, metric_scale
