from __future__ import annotations

import logging
from typing import Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from smart_horses.agents import MinimaxPolicy, Policy
from smart_horses.core import (
    BOARD_SIZE,
    BONUS_CELLS,
    POINT_CELLS,
    GameState,
    MovementRule,
    Side,
    create_initial_state,
)
from smart_horses.difficulty import DifficultyTable, build_search
from smart_horses.features import (
    AUX_VECTOR_SIZE,
    BOARD_CHANNELS,
    build_aux_vector,
    build_board_tensor,
)

logger = logging.getLogger(__name__)


class SmartHorsesEnv(gym.Env):
    """Single-agent view of the game: the opponent answers inside ``step``.

    Actions index the destination square (``row * cols + col``) of the
    agent's horse. Rewards are the agent's score gain minus the opponent's
    over the agent move and the replies it triggered.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        *,
        difficulty: str = "beginner",
        opponent: Optional[Policy] = None,
        agent_side: Side = Side.FIRST,
        starting_player: Side = Side.FIRST,
        rows: int = BOARD_SIZE,
        cols: int = BOARD_SIZE,
        point_cells: int = POINT_CELLS,
        bonus_cells: int = BONUS_CELLS,
        movement: MovementRule = MovementRule.KNIGHT,
        max_ply: int = 200,
        enforce_legal_actions: bool = True,
        difficulties: Optional[DifficultyTable] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._agent_side = Side(agent_side)
        self._starting_player = Side(starting_player)
        self._rows = rows
        self._cols = cols
        self._point_cells = point_cells
        self._bonus_cells = bonus_cells
        self._movement = movement
        self._max_ply = max_ply
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        if opponent is None:
            opponent = MinimaxPolicy(build_search(difficulty, self._agent_side.other(), table=difficulties))
        self._opponent = opponent

        self.observation_space = spaces.Dict(
            {
                "board": spaces.Box(low=0.0, high=1.0, shape=(BOARD_CHANNELS, rows, cols), dtype=np.float32),
                "aux": spaces.Box(low=0.0, high=1.0, shape=(AUX_VECTOR_SIZE,), dtype=np.float32),
            }
        )
        self.action_space = spaces.Discrete(rows * cols)

        self._state = self._new_state(np.random.default_rng())
        self._stalled = False

    @property
    def state(self) -> GameState:
        return self._state.copy()

    @property
    def agent_side(self) -> Side:
        return self._agent_side

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self._state = self._new_state(self.np_random)
        self._stalled = False
        self._advance_opponent()
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")
        if not self._state.has_points_remaining() or self._stalled or self._state.ply_count >= self._max_ply:
            raise RuntimeError("Episode has ended; call reset().")

        legal_mask = self.legal_action_mask()
        if self._enforce_legal and not legal_mask[action_index]:
            raise ValueError("Illegal action provided and enforce_legal_actions=True.")

        before = self._state.scores.astype(np.int64)
        target = divmod(int(action_index), self._cols)
        moved = self._state.make_move(self._state.piece_for(self._agent_side), target)
        if moved:
            self._advance_opponent()

        gained = self._state.scores.astype(np.int64) - before
        agent = int(self._agent_side)
        reward = float(gained[agent] - gained[1 - agent])

        terminated = not self._state.has_points_remaining()
        truncated = not terminated and (self._stalled or self._state.ply_count >= self._max_ply)
        info = self._build_info()
        info["illegal_action"] = not moved
        return self._build_observation(), reward, terminated, truncated, info

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        if self._state.current_player != self._agent_side or self._state.is_terminal:
            return mask
        for row, col in self._state.legal_targets(self._agent_side):
            mask[row * self._cols + col] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return self._state.board_string()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _new_state(self, rng: np.random.Generator) -> GameState:
        return create_initial_state(
            rng=rng,
            rows=self._rows,
            cols=self._cols,
            point_cells=self._point_cells,
            bonus_cells=self._bonus_cells,
            movement=self._movement,
            starting_player=self._starting_player,
        )

    def _advance_opponent(self) -> None:
        """Let the opponent play until the agent can move or the game stops."""
        skips = 0
        state = self._state
        while state.has_points_remaining() and state.ply_count < self._max_ply:
            side = state.current_player
            if side == self._agent_side and state.legal_targets(side):
                return
            move = None if side == self._agent_side else self._opponent.select(state.copy())
            if move is None:
                if not state.skip_turn():
                    raise RuntimeError(f"Opponent returned no move while {side.name} can move.")
                skips += 1
                if skips >= 2:
                    logger.info("Both horses are boxed in at ply %d", state.ply_count)
                    self._stalled = True
                    return
                continue
            if not state.make_move(move.origin, move.target):
                raise RuntimeError(f"Opponent returned illegal move {move}.")
            skips = 0

    def _build_observation(self) -> Dict[str, np.ndarray]:
        return {"board": build_board_tensor(self._state), "aux": build_aux_vector(self._state)}

    def _build_info(self) -> Dict:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "scores": self._state.scores.copy(),
            "current_player": self._state.current_player,
        }
