from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple

Offset = Tuple[int, int]

KNIGHT_OFFSETS: Tuple[Offset, ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)
KING_OFFSETS: Tuple[Offset, ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


class MovementRule(Enum):
    """Jump pattern shared by both horses for the whole game."""

    KNIGHT = "knight"
    KING = "king"

    @property
    def offsets(self) -> Tuple[Offset, ...]:
        return KNIGHT_OFFSETS if self is MovementRule.KNIGHT else KING_OFFSETS

    def destinations(self, row: int, col: int, rows: int, cols: int) -> Iterator[Tuple[int, int]]:
        """Yield in-bounds squares reachable from ``(row, col)`` in offset order."""
        for dr, dc in self.offsets:
            nr, nc = row + dr, col + dc
            if 0 <= nr < rows and 0 <= nc < cols:
                yield nr, nc
