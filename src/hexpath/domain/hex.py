"""
Cube-coordinate hexes and their offset (row, column) form.

Cube Coordinates (q, r, s)
--------------------------
Three integers with the constraint q + r + s = 0.  The constraint is not
checked on construction; :meth:`Hex.is_valid` is available for callers that
want it.

Offset Coordinates (row, column)
--------------------------------
External grid descriptions are rectangular rows of characters laid out as
"odd-r" offset coordinates, where odd rows are shoved half a hex to the
right:

    row    = r
    column = q + (r - (r & 1)) / 2

and the inverse:

    q = column - (row - (row & 1)) / 2
    r = row
    s = -q - r

References:
-----------
https://www.redblobgames.com/grids/hexagons/#conversions-offset
"""

from __future__ import annotations

from dataclasses import dataclass, field

from hexpath.domain.enums import HexKind

# Cube direction vectors for the six neighbours.  Neighbour enumeration (and
# therefore tie-breaking during search) follows this order.
HEX_DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (1, 0, -1),  # East
    (1, -1, 0),  # Northeast
    (0, -1, 1),  # Northwest
    (-1, 0, 1),  # West
    (-1, 1, 0),  # Southwest
    (0, 1, -1),  # Southeast
)


@dataclass(frozen=True)
class Hex:
    """
    A hexagon on the grid in cube coordinates.

    Attributes:
        q: Cube coordinate q
        r: Cube coordinate r (also the offset row)
        s: Cube coordinate s
        kind: Cell state; not part of equality or hashing

    Example:
        >>> Hex(0, 1, -1, HexKind.START) == Hex(0, 1, -1)
        True
        >>> Hex(1, 2, -3).render()
        'Hex(1,2,-3)'
    """

    q: int
    r: int
    s: int
    kind: HexKind = field(default=HexKind.EMPTY, compare=False)

    def __hash__(self) -> int:
        return hash((self.q, self.r, self.s))

    def __str__(self) -> str:
        return self.render()

    @classmethod
    def from_offset(cls, row: int, column: int, kind: HexKind = HexKind.EMPTY) -> Hex:
        """
        Build a hex from odd-r offset coordinates.

        Args:
            row: Offset row
            column: Offset column
            kind: Cell state of the new hex

        Returns:
            The hex at that position

        Example:
            >>> Hex.from_offset(2, 2)
            Hex(q=1, r=2, s=-3, kind=<HexKind.EMPTY: 'empty'>)
        """
        q = column - (row - (row & 1)) // 2
        r = row
        return cls(q, r, -q - r, kind)

    def to_offset(self) -> tuple[int, int]:
        """Return the odd-r offset ``(row, column)`` of this hex."""
        row = self.r
        column = self.q + (self.r - (self.r & 1)) // 2
        return row, column

    def render(self) -> str:
        """Return the wire form ``Hex(q,r,s)`` used in path responses."""
        return f"Hex({self.q},{self.r},{self.s})"

    def neighbor(self, direction: tuple[int, int, int]) -> Hex:
        """Return the hex one step along ``direction``, with a default kind."""
        dq, dr, ds = direction
        return Hex(self.q + dq, self.r + dr, self.s + ds)

    def is_valid(self) -> bool:
        """Check the cube constraint ``q + r + s == 0``."""
        return self.q + self.r + self.s == 0
