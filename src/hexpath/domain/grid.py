"""Translate grid descriptions into searches and searches into path strings."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from hexpath.domain.dijkstra import NO_PATH_FOUND, NoPathError, find_path
from hexpath.domain.enums import GRID_CHARACTERS, HexKind
from hexpath.domain.hex import Hex
from hexpath.domain.hex_map import HexMap

logger = logging.getLogger(__name__)

DIJKSTRA = "dijkstra"
SUPPORTED_REQUESTS: tuple[str, ...] = (DIJKSTRA,)

INVALID_CHARACTER = "Invalid character in graph"
INVALID_REQUEST_TYPE = "Invalid request type"

__all__ = [
    "DIJKSTRA",
    "INVALID_CHARACTER",
    "INVALID_REQUEST_TYPE",
    "NO_PATH_FOUND",
    "SUPPORTED_REQUESTS",
    "GridDecodeError",
    "decode_grid",
    "dispatch",
]


class GridDecodeError(ValueError):
    """Raised when a grid description contains a character outside ``b/o/s/e``."""

    def __init__(self, character: str, row: int, column: int) -> None:
        super().__init__(INVALID_CHARACTER)
        self.character = character
        self.row = row
        self.column = column


def decode_grid(rows: Sequence[Sequence[str]]) -> HexMap:
    """Build a :class:`HexMap` from rows of single-character cells.

    Each ``(row, column)`` position is converted from odd-r offset coordinates
    to a cube hex before insertion.

    Raises:
        GridDecodeError: On the first unrecognised character.  No partial map
            is returned.
    """

    hex_map = HexMap()
    for row_index, row in enumerate(rows):
        for column_index, character in enumerate(row):
            kind = GRID_CHARACTERS.get(character)
            if kind is None:
                raise GridDecodeError(character, row_index, column_index)
            hex_map.add_hex(Hex.from_offset(row_index, column_index, kind))
    return hex_map


def dispatch(
    request_kind: str,
    source: tuple[int, int],
    target: tuple[int, int],
    rows: Sequence[Sequence[str]],
) -> list[str]:
    """Run the requested search and render its outcome.

    Args:
        request_kind: Search to run; only ``"dijkstra"`` is supported
        source: Offset ``(row, column)`` of the start cell
        target: Offset ``(row, column)`` of the end cell
        rows: Grid description

    Returns:
        The rendered path in target-to-source order, or a single diagnostic
        string when the grid is malformed, the request kind is unknown, or no
        path exists.
    """

    try:
        hex_map = decode_grid(rows)
    except GridDecodeError as exc:
        logger.info(
            "rejected grid: %r at row %d column %d", exc.character, exc.row, exc.column
        )
        return [str(exc)]

    logger.debug("decoded grid of %d hexes for %s request", hex_map.size(), request_kind)

    source_hex = Hex.from_offset(*source, kind=HexKind.START)
    target_hex = Hex.from_offset(*target, kind=HexKind.END)

    if request_kind != DIJKSTRA:
        logger.info("unsupported request type %r", request_kind)
        return [INVALID_REQUEST_TYPE]

    try:
        path = find_path(hex_map, source_hex, target_hex)
    except NoPathError as exc:
        logger.info("no path from %s to %s", source_hex, target_hex)
        return [str(exc)]

    return [hex_tile.render() for hex_tile in path]
