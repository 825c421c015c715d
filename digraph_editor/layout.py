"""
Display positions for vertices.

Positions are presentation metadata, so they live in this side-table keyed by
vertex id instead of inside GraphModel. A vertex gets a random position inside
the canvas when it is created and keeps it for its whole life.
"""

import random
from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Position:
    x: float
    y: float


class LayoutTable:
    """Random placement of vertices inside a width x height canvas."""

    def __init__(self, width: float = 600.0, height: float = 400.0, margin: float = 30.0,
                 rng: Optional[random.Random] = None):
        if width < 2 * margin or height < 2 * margin:
            raise ValueError(
                f"Canvas {width}x{height} is too small for a margin of {margin}"
            )
        self.width = width
        self.height = height
        self.margin = margin
        self._rng = rng or random.Random()
        self._positions: Dict[str, Position] = {}

    def place(self, vertex_id: str) -> Position:
        """Assign a position to vertex_id. An existing position is kept."""
        existing = self._positions.get(vertex_id)
        if existing is not None:
            return existing

        x = self._rng.random() * (self.width - 2 * self.margin) + self.margin
        y = self._rng.random() * (self.height - 2 * self.margin) + self.margin
        pos = Position(x, y)
        self._positions[vertex_id] = pos
        return pos

    def forget(self, vertex_id: str) -> None:
        self._positions.pop(vertex_id, None)

    def get(self, vertex_id: str) -> Optional[Position]:
        return self._positions.get(vertex_id)

    def __contains__(self, vertex_id: str) -> bool:
        return vertex_id in self._positions

    def __len__(self) -> int:
        return len(self._positions)
