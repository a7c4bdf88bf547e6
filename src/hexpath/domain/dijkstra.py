"""Unweighted shortest paths over a :class:`HexMap`.

This module implements Dijkstra's algorithm with a uniform step cost of one.
That makes it equivalent to a breadth-first search, but the priority frontier
keeps the door open for weighted moves later on.
"""

from __future__ import annotations

import logging
from heapq import heappop, heappush
from itertools import count

from hexpath.domain.hex import Hex
from hexpath.domain.hex_map import HexMap

logger = logging.getLogger(__name__)

NO_PATH_FOUND = "No path found"

# Every move between adjacent hexes costs the same.
STEP_COST = 1


class NoPathError(Exception):
    """Raised when the target cannot be reached from the source."""

    def __init__(self, message: str = NO_PATH_FOUND) -> None:
        super().__init__(message)


def find_path(hex_map: HexMap, source: Hex, target: Hex) -> list[Hex]:
    """Find a shortest path from ``source`` to ``target`` using Dijkstra's algorithm.

    Obstacles and cells outside the map are never entered (see
    :meth:`HexMap.neighbors`).  The source itself does not need to be stored in
    the map; the search simply expands from its coordinates.

    Among frontier entries with equal distance the most recently pushed one is
    popped first, so the result is deterministic when several shortest paths
    exist.

    Args:
        hex_map: Grid to search; it is only read
        source: Starting hex
        target: Destination hex

    Returns:
        The hexes of the path in target-to-source order, both ends included

    Raises:
        NoPathError: If no path exists between the hexes
    """
    distances: dict[Hex, int] = {source: 0}
    parent: dict[Hex, Hex | None] = {source: None}
    visited: set[Hex] = set()

    # Priority queue: (distance, -push_sequence, hex)
    sequence = count()
    to_visit: list[tuple[int, int, Hex]] = [(0, -next(sequence), source)]

    while to_visit:
        distance, _, current = heappop(to_visit)

        # Stale entry superseded by a shorter one
        if current in visited:
            continue
        visited.add(current)

        for neighbor in hex_map.neighbors(current):
            new_distance = distance + STEP_COST
            if neighbor not in distances or new_distance < distances[neighbor]:
                distances[neighbor] = new_distance
                parent[neighbor] = current
                heappush(to_visit, (new_distance, -next(sequence), neighbor))

    logger.debug("search from %s finalized %d hexes", source, len(visited))

    if target not in distances:
        raise NoPathError()

    return _backtrack(parent, target)


def _backtrack(parent: dict[Hex, Hex | None], target: Hex) -> list[Hex]:
    """Walk parent links from ``target`` back to the source."""

    path = [target]
    current = parent[target]
    while current is not None:
        path.append(current)
        current = parent[current]
    return path
