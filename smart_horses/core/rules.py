from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..validation import validate_state
from .movement import MovementRule
from .state import Coordinate, GameState, Move, Side, as_coordinate

BOARD_SIZE = 8
POINT_CELLS = 10
BONUS_CELLS = 4
BONUS_MULTIPLIER = 2


class IllegalMoveError(ValueError):
    pass


def generate_layout(
    rng: np.random.Generator,
    *,
    rows: int = BOARD_SIZE,
    cols: int = BOARD_SIZE,
    point_cells: int = POINT_CELLS,
    bonus_cells: int = BONUS_CELLS,
) -> Tuple[np.ndarray, np.ndarray, Coordinate, Coordinate]:
    """Draw points 1..point_cells, x2 bonuses and both horses on distinct cells."""
    needed = point_cells + bonus_cells + 2
    if needed > rows * cols:
        raise ValueError(f"A {rows}x{cols} board cannot hold {needed} distinct cells.")

    cells = rng.choice(rows * cols, size=needed, replace=False)
    points = np.zeros((rows, cols), dtype=np.int16)
    bonuses = np.zeros((rows, cols), dtype=np.int8)

    for value, cell in enumerate(cells[:point_cells], start=1):
        points[divmod(int(cell), cols)] = value
    for cell in cells[point_cells:point_cells + bonus_cells]:
        bonuses[divmod(int(cell), cols)] = BONUS_MULTIPLIER

    first = Coordinate(*divmod(int(cells[-2]), cols))
    second = Coordinate(*divmod(int(cells[-1]), cols))
    return points, bonuses, first, second


def state_from_layout(
    points: Sequence[Sequence[int]],
    first: Sequence[int],
    second: Sequence[int],
    *,
    bonuses: Optional[Sequence[Sequence[int]]] = None,
    movement: MovementRule = MovementRule.KNIGHT,
    current_player: Side = Side.FIRST,
) -> GameState:
    points_array = np.array(points, dtype=np.int16)
    if points_array.ndim != 2:
        raise ValueError("Point layout must be a 2D grid.")
    if bonuses is None:
        bonus_array = np.zeros_like(points_array, dtype=np.int8)
    else:
        bonus_array = np.array(bonuses, dtype=np.int8)

    first_coord = as_coordinate(first)
    second_coord = as_coordinate(second)
    if first_coord is None or second_coord is None:
        raise ValueError("Horse positions must be (row, col) pairs.")

    state = GameState(
        points=points_array,
        bonuses=bonus_array,
        positions=np.array([first_coord, second_coord], dtype=np.int16),
        scores=np.zeros(2, dtype=np.int32),
        multipliers=np.ones(2, dtype=np.int8),
        current_player=Side(current_player),
        remaining_points=int(points_array.sum()),
        movement=movement,
    )
    validate_state(state)
    return state


def create_initial_state(
    seed: Optional[int] = None,
    *,
    rng: Optional[np.random.Generator] = None,
    rows: int = BOARD_SIZE,
    cols: int = BOARD_SIZE,
    point_cells: int = POINT_CELLS,
    bonus_cells: int = BONUS_CELLS,
    movement: MovementRule = MovementRule.KNIGHT,
    starting_player: Side = Side.FIRST,
) -> GameState:
    rng = rng or np.random.default_rng(seed)
    points, bonuses, first, second = generate_layout(
        rng,
        rows=rows,
        cols=cols,
        point_cells=point_cells,
        bonus_cells=bonus_cells,
    )
    return state_from_layout(
        points,
        first,
        second,
        bonuses=bonuses,
        movement=movement,
        current_player=starting_player,
    )


def legal_moves(state: GameState, side: Optional[Side] = None) -> List[Move]:
    return state.legal_moves(side)


def apply_move(state: GameState, move: Move, *, in_place: bool = False) -> GameState:
    target_state = state if in_place else state.copy()
    if target_state.is_terminal:
        raise IllegalMoveError("Cannot move on a board without points.")
    if not target_state.make_move(move.origin, move.target):
        raise IllegalMoveError(
            f"{move.origin} -> {move.target} is not legal for {target_state.current_player.name}."
        )
    return target_state
