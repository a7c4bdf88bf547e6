"""Hex-grid spatial model and shortest-path engine.

Everything in this package is pure and synchronous.  Each request builds its
own :class:`~hexpath.domain.hex_map.HexMap` and each call to
:func:`~hexpath.domain.dijkstra.find_path` allocates its own search state, so
nothing here is shared between concurrent requests.
"""

from . import dijkstra, enums, grid, hex, hex_map

__all__ = [
    "dijkstra",
    "enums",
    "grid",
    "hex",
    "hex_map",
]
