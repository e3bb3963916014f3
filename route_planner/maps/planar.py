"Distance tools for the normalized, planar map space"
from itertools import tee
from typing import Sequence, Tuple
import numpy as np


def distance(point_a: Tuple[float, float], point_b: Tuple[float, float]) -> float:
    "Returns the straight-line distance of two normalized coordinates"
    dist = np.hypot(point_b[0] - point_a[0], point_b[1] - point_a[1])
    return float(dist)


def pairwise(iterable):
    "s -> (s0,s1), (s1,s2), (s2, s3), ..."
    first, second = tee(iterable)
    next(second, None)
    return zip(first, second)


def path_length(coords: Sequence[Tuple[float, float]]) -> float:
    """Returns the length of a coordinate sequence

    Sequences with less than two points have length 0."""
    if len(coords) < 2:
        return 0.0
    points = np.asarray(coords, dtype=float)
    steps = np.diff(points, axis=0)
    return float(np.hypot(steps[:, 0], steps[:, 1]).sum())
