from __future__ import annotations

import logging
import operator
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, NamedTuple, Optional, Tuple

import numpy as np
from numpy.typing import NDArray

from ..validation import validate_state
from .movement import MovementRule

logger = logging.getLogger(__name__)

PointsArray = NDArray[np.int16]
BonusArray = NDArray[np.int8]


class Side(IntEnum):
    FIRST = 0
    SECOND = 1

    def other(self) -> "Side":
        return Side.SECOND if self is Side.FIRST else Side.FIRST

    @property
    def symbol(self) -> str:
        return "W" if self is Side.FIRST else "B"


class Coordinate(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class Move:
    origin: Coordinate
    target: Coordinate

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.origin.row, self.origin.col, self.target.row, self.target.col)


@dataclass(frozen=True)
class MoveRecord:
    move: Move
    side: Side
    points_gained: int = 0
    multiplier_applied: int = 1
    bonus_collected: int = 0


def as_coordinate(value: Iterable[int]) -> Optional[Coordinate]:
    try:
        row, col = value
        return Coordinate(operator.index(row), operator.index(col))
    except (TypeError, ValueError):
        return None


@dataclass(eq=False)
class GameState:
    points: PointsArray  # shape (rows, cols), values >= 0
    bonuses: BonusArray  # shape (rows, cols), 0 or multiplier factor
    positions: NDArray[np.int16]  # shape (2, 2), one (row, col) per side
    scores: NDArray[np.int32]  # shape (2,)
    multipliers: NDArray[np.int8]  # shape (2,), armed multiplier per side
    current_player: Side
    remaining_points: int
    movement: MovementRule = MovementRule.KNIGHT
    ply_count: int = 0
    last_move: Optional[MoveRecord] = None

    @property
    def shape(self) -> Tuple[int, int]:
        rows, cols = self.points.shape
        return int(rows), int(cols)

    def copy(self) -> "GameState":
        return GameState(
            points=self.points.copy(),
            bonuses=self.bonuses.copy(),
            positions=self.positions.copy(),
            scores=self.scores.copy(),
            multipliers=self.multipliers.copy(),
            current_player=self.current_player,
            remaining_points=self.remaining_points,
            movement=self.movement,
            ply_count=self.ply_count,
            last_move=self.last_move,
        )

    clone = copy

    def has_points_remaining(self) -> bool:
        return self.remaining_points > 0

    @property
    def is_terminal(self) -> bool:
        return not self.has_points_remaining()

    def piece_for(self, side: Side) -> Coordinate:
        row, col = self.positions[int(side)]
        return Coordinate(int(row), int(col))

    def score_for(self, side: Side) -> int:
        return int(self.scores[int(side)])

    def in_bounds(self, coordinate: Coordinate) -> bool:
        rows, cols = self.shape
        return 0 <= coordinate.row < rows and 0 <= coordinate.col < cols

    def legal_targets(self, side: Side) -> List[Coordinate]:
        origin = self.piece_for(side)
        blocked = self.piece_for(side.other())
        rows, cols = self.shape
        return [
            Coordinate(r, c)
            for r, c in self.movement.destinations(origin.row, origin.col, rows, cols)
            if (r, c) != blocked
        ]

    def legal_moves(self, side: Optional[Side] = None) -> List[Move]:
        if side is None:
            side = self.current_player
        origin = self.piece_for(side)
        return [Move(origin, target) for target in self.legal_targets(side)]

    def make_move(self, origin: Iterable[int], target: Iterable[int]) -> bool:
        """Apply ``origin -> target`` for the side to move.

        Returns ``False`` and leaves the state untouched when the move is not
        legal for the current player.
        """
        origin_coord = as_coordinate(origin)
        target_coord = as_coordinate(target)
        side = self.current_player
        if self.is_terminal:
            logger.debug("Rejected move %r -> %r: no points left on the board", origin, target)
            return False
        if origin_coord is None or target_coord is None:
            logger.debug("Rejected malformed move %r -> %r", origin, target)
            return False
        if origin_coord != self.piece_for(side):
            logger.debug("Rejected move from %s: %s horse is on %s", origin_coord, side.name, self.piece_for(side))
            return False
        if target_coord not in self.legal_targets(side):
            logger.debug("Rejected illegal target %s for %s", target_coord, side.name)
            return False
        self._apply(side, Move(origin_coord, target_coord))
        return True

    def skip_turn(self) -> bool:
        """Pass the turn when the side to move is boxed in on a live board."""
        if self.is_terminal or self.legal_targets(self.current_player):
            return False
        logger.debug("%s has no legal move, passing the turn", self.current_player.name)
        self.current_player = self.current_player.other()
        return True

    def _apply(self, side: Side, move: Move) -> None:
        idx = int(side)
        row, col = move.target
        self.positions[idx] = (row, col)

        bonus = int(self.bonuses[row, col])
        if bonus:
            self.bonuses[row, col] = 0
            self.multipliers[idx] = max(int(self.multipliers[idx]), bonus)

        value = int(self.points[row, col])
        gained = 0
        multiplier = 1
        if value:
            multiplier = int(self.multipliers[idx])
            gained = value * multiplier
            self.points[row, col] = 0
            self.remaining_points -= value
            self.scores[idx] += gained
            self.multipliers[idx] = 1

        self.current_player = side.other()
        self.ply_count += 1
        self.last_move = MoveRecord(
            move=move,
            side=side,
            points_gained=gained,
            multiplier_applied=multiplier,
            bonus_collected=bonus,
        )
        validate_state(self)

    def key(self) -> Tuple:
        """Hashable snapshot of every mutable field."""
        return (
            self.points.tobytes(),
            self.bonuses.tobytes(),
            self.positions.tobytes(),
            self.scores.tobytes(),
            self.multipliers.tobytes(),
            self.shape,
            int(self.current_player),
            self.remaining_points,
            self.movement,
            self.ply_count,
        )

    def board_string(self) -> str:
        rows, cols = self.shape
        first = self.piece_for(Side.FIRST)
        second = self.piece_for(Side.SECOND)
        lines = []
        for r in range(rows):
            cells = []
            for c in range(cols):
                if (r, c) == first:
                    cells.append(Side.FIRST.symbol)
                elif (r, c) == second:
                    cells.append(Side.SECOND.symbol)
                elif self.points[r, c]:
                    cells.append(str(int(self.points[r, c])))
                elif self.bonuses[r, c]:
                    cells.append(f"x{int(self.bonuses[r, c])}")
                else:
                    cells.append(".")
            lines.append(" ".join(cell.rjust(2) for cell in cells))
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"GameState(current={self.current_player.name}, remaining={self.remaining_points}, "
            f"scores={self.scores.tolist()}, ply={self.ply_count})\n"
            f"{self.board_string()}"
        )
