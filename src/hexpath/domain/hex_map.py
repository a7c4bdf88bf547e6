"""Sparse storage for a hexagonal grid.

Hexes are kept in a dict keyed by ``(q, r)`` so that irregular or
non-rectangular maps cost no more memory than the cells they actually have.
"""

from __future__ import annotations

from collections.abc import Iterator

from hexpath.domain.hex import HEX_DIRECTIONS, Hex


class HexMap:
    """Mapping of ``(q, r)`` to the hex stored at that position."""

    def __init__(self, hexes: list[Hex] | None = None) -> None:
        self._hexes: dict[tuple[int, int], Hex] = {}
        for hex_tile in hexes or []:
            self.add_hex(hex_tile)

    def add_hex(self, hex_tile: Hex) -> None:
        """Store ``hex_tile``, replacing any hex already at the same ``(q, r)``."""

        self._hexes[(hex_tile.q, hex_tile.r)] = hex_tile

    def get_hex(self, q: int, r: int) -> Hex | None:
        """Return the hex at ``(q, r)`` or ``None`` when it is outside the grid."""

        return self._hexes.get((q, r))

    def size(self) -> int:
        return len(self._hexes)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, hex_tile: object) -> bool:
        if not isinstance(hex_tile, Hex):
            return False
        return self.get_hex(hex_tile.q, hex_tile.r) == hex_tile

    def __iter__(self) -> Iterator[Hex]:
        return iter(self._hexes.values())

    def neighbors(self, hex_tile: Hex) -> list[Hex]:
        """Return the passable neighbours of ``hex_tile``.

        Candidates are evaluated in :data:`HEX_DIRECTIONS` order.  A candidate is
        kept only when a hex is stored at its ``(q, r)``, the stored ``s`` agrees
        with the computed one, and the stored hex is not an obstacle.  Cells off
        the grid and obstacles are skipped silently.
        """

        result: list[Hex] = []
        for direction in HEX_DIRECTIONS:
            candidate = hex_tile.neighbor(direction)
            stored = self.get_hex(candidate.q, candidate.r)
            if stored is None:
                continue
            if stored.s != candidate.s or not stored.kind.is_passable:
                continue
            result.append(stored)
        return result
