__title__ = "route_planner"
__description__ = "A* route planning on normalized road map graphs"
__url__ = ""
__version__ = "0.1.0"
__author__ = "Route Planner Developers"
__author_email__ = ""
__license__ = "Apache License 2.0"
