#!/usr/bin/env python3
"""
A* route planner package.
"""

from .planning import plan_route, Config, load_config, save_config, DEFAULT_CONFIG
from .maps import shortest_path, RoutePlanner, Route, PathNode, SearchStatus
from .observer import SearchObserver, SimpleObserver

from ._version import (
    __title__,
    __description__,
    __url__,
    __version__,
    __author__,
    __author_email__,
    __license__,
)
