"""The open set of the A* search.

A frontier holds discovered nodes that are not finalized yet, and hands out the one with the
smallest f score (g + h) first. Equal scores come out in insertion order.

Two implementations with the same observable behaviour are provided:

* :py:class:`SortedFrontier` keeps a plain list and sorts it before every pop
* :py:class:`HeapFrontier` keeps a binary heap
"""

from abc import ABC, abstractmethod
from functools import total_ordering
from heapq import heappush, heappop
from itertools import count
from typing import List, NamedTuple
from ..abstract import Node
from .tools import Score, EmptyFrontierError


@total_ordering
class PQItem(NamedTuple):
    """A single item in the search frontier"""
    score: Score
    order: int
    node: Node

    def __lt__(self, other):
        return (self.score.f, self.order) < (other.score.f, other.order)


class Frontier(ABC):
    "Abstract frontier (open set)"

    def __init__(self):
        self._counter = count()

    def push(self, node: Node, score: Score):
        "Adds a discovered node with its current score"
        self._add(PQItem(score, next(self._counter), node))

    def pop(self) -> Node:
        """Removes and returns the node with the smallest f score

        Raises:
            EmptyFrontierError:
                If there is no node left"""
        if self.is_empty():
            raise EmptyFrontierError("The frontier holds no nodes")
        return self._take().node

    def is_empty(self) -> bool:
        return len(self) == 0

    @abstractmethod
    def _add(self, item: PQItem):
        "Stores an item"

    @abstractmethod
    def _take(self) -> PQItem:
        "Removes and returns the best item of a non-empty frontier"

    @abstractmethod
    def __len__(self) -> int:
        "Number of items in the frontier"


class SortedFrontier(Frontier):
    "Frontier that re-sorts a list before each extraction"

    def __init__(self):
        super().__init__()
        self.open_list: List[PQItem] = []

    def _add(self, item: PQItem):
        self.open_list.append(item)

    def _take(self) -> PQItem:
        self.open_list.sort()
        return self.open_list.pop(0)

    def __len__(self) -> int:
        return len(self.open_list)


class HeapFrontier(Frontier):
    "Frontier backed by a binary heap"

    def __init__(self):
        super().__init__()
        self.open_set: List[PQItem] = []

    def _add(self, item: PQItem):
        heappush(self.open_set, item)

    def _take(self) -> PQItem:
        return heappop(self.open_set)

    def __len__(self) -> int:
        return len(self.open_set)


FRONTIERS = {
    "sorted": SortedFrontier,
    "heap": HeapFrontier,
}


def make_frontier(kind: str = "sorted") -> Frontier:
    """Creates an empty frontier by name, either "sorted" or "heap"

    Raises:
        ValueError:
            If `kind` names no known frontier"""
    try:
        return FRONTIERS[kind]()
    except KeyError:
        raise ValueError(f"Unknown frontier kind {kind!r}, expected one of {sorted(FRONTIERS)}")
