"""Enumerations used by the hex-grid domain."""

from __future__ import annotations

from enum import StrEnum


class HexKind(StrEnum):
    """State of a single cell on the grid."""

    EMPTY = "empty"
    OBSTACLE = "obstacle"
    START = "start"
    END = "end"

    @property
    def is_passable(self) -> bool:
        return self is not HexKind.OBSTACLE


# Characters accepted in an incoming grid description.
GRID_CHARACTERS: dict[str, HexKind] = {
    "b": HexKind.EMPTY,
    "o": HexKind.OBSTACLE,
    "s": HexKind.START,
    "e": HexKind.END,
}
