"""example map data to test

Node positions in the normalized map space. Nodes 7 and 8 form a second component that is
not connected to the rest of the map.

    6 (0.4, 1.0)                  8 (1.0, 1.0)
    |  \\                     7 (0.9, 0.95)
    3 ---- 4 ---- 5
    |    / |      |
    0 ---- 1 ---- 2
"""
import sqlite3
from typing import Dict, Iterable, Tuple

from route_planner.example_sqlite_map import SCHEMA_SQL
from route_planner.example_memory_map import MemoryMapReader

NODES: Dict[int, Tuple[float, float]] = {
    0: (0.0, 0.0),
    1: (0.5, 0.0),
    2: (1.0, 0.0),
    3: (0.0, 0.5),
    4: (0.5, 0.5),
    5: (1.0, 0.5),
    6: (0.4, 1.0),
    7: (0.9, 0.95),
    8: (1.0, 1.0),
}

LINES = [
    (0, 1),
    (1, 2),
    (0, 3),
    (3, 4),
    (1, 4),
    (0, 4),
    (4, 5),
    (2, 5),
    (4, 6),
    (3, 6),
    (7, 8),
]

#: A map where the first route found to X is not the shortest one
DETOUR_NODES = {
    "S": (0.0, 0.0),
    "P": (0.6, 0.2),
    "Q": (0.3, -0.6),
    "X": (1.0, -0.8),
    "G": (2.0, 0.0),
}

DETOUR_LINES = [("S", "P"), ("S", "Q"), ("P", "X"), ("Q", "X"), ("X", "G")]


def populate(
    conn: sqlite3.Connection,
    nodes: Dict[int, Tuple[float, float]] = NODES,
    lines: Iterable[Tuple[int, int]] = LINES,
    metric_scale: float = None,
):
    "Writes nodes and lines into a database with the example schema"
    cur = conn.cursor()
    cur.executescript(SCHEMA_SQL)
    cur.executemany(
        "INSERT INTO nodes (id, x, y) VALUES (?, ?, ?)",
        [(node_id, x, y) for (node_id, (x, y)) in nodes.items()],
    )
    cur.executemany("INSERT INTO lines (startnode, endnode) VALUES (?, ?)", list(lines))
    if metric_scale is not None:
        cur.execute("INSERT INTO meta (key, value) VALUES ('metric_scale', ?)", (metric_scale,))
    conn.commit()


def example_memory_map(metric_scale: float = 1.0) -> MemoryMapReader:
    "Returns the example map as in-memory map"
    return MemoryMapReader(NODES, LINES, metric_scale)


def detour_map() -> MemoryMapReader:
    "Returns the detour map as in-memory map"
    return MemoryMapReader(DETOUR_NODES, DETOUR_LINES)
