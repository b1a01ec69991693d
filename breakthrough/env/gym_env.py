from __future__ import annotations

from typing import Callable, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from breakthrough.core import (
    BoardConfig,
    BoardEngine,
    Side,
    decode_move,
    default_engine,
    encode_move,
    render_board,
)


class BreakthroughEnv(gym.Env):
    """Two-player Breakthrough as a single-agent env with alternating sides.

    Rewards are given from side A's point of view. A side left without a
    legal move after its opponent plays loses by forfeit and the episode
    terminates.
    """

    metadata = {"render_modes": ["ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        *,
        engine_factory: Optional[Callable[[BoardConfig], BoardEngine]] = None,
        enforce_legal_actions: bool = True,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.config = config or BoardConfig()
        self._engine_factory = engine_factory or default_engine
        self._enforce_legal = enforce_legal_actions
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=0, high=2, shape=(self.config.rows, self.config.cols), dtype=np.int8
        )
        self.action_space = spaces.Discrete(self.config.action_space_size)

        self.engine = self._engine_factory(self.config)
        self.current_side = Side.A
        self.winner: Optional[Side] = None
        self.forfeit = False

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        self.engine = self._engine_factory(self.config)
        self.current_side = options.get("first", Side.A) if options else Side.A
        self.winner = self.engine.winner()
        self.forfeit = False
        if self.winner is None and not self.engine.all_moves(self.current_side):
            self.winner = self.current_side.other
            self.forfeit = True
        return self._build_observation(), self._build_info()

    def step(self, action_index: int):
        if self.winner is not None:
            raise ValueError("Cannot step a finished game; call reset().")
        if not self.action_space.contains(action_index):
            raise ValueError(f"Action index {action_index} out of bounds.")

        move = decode_move(int(action_index), self.current_side, self.config)
        legal_mask = self.legal_action_mask()
        if not legal_mask[action_index]:
            if self._enforce_legal:
                raise ValueError(f"Illegal action {action_index} ({move}) for side {self.current_side.name}.")
            # Illegal actions lose on the spot when legality is not enforced.
            self.winner = self.current_side.other
            return self._build_observation(), self._compute_reward(), True, False, self._build_info()

        self.engine.apply(move)
        self.winner = self.engine.winner()
        self.current_side = self.current_side.other
        if self.winner is None and not self.engine.all_moves(self.current_side):
            self.winner = self.current_side.other
            self.forfeit = True

        terminated = self.winner is not None
        return self._build_observation(), self._compute_reward(), terminated, False, self._build_info()

    def legal_action_mask(self) -> np.ndarray:
        mask = np.zeros(self.action_space.n, dtype=np.int8)
        for move in self.engine.all_moves(self.current_side):
            mask[encode_move(move, self.config)] = 1
        return mask

    def render(self):
        if self.render_mode != "ansi":
            raise NotImplementedError("Only 'ansi' render mode is supported.")
        return render_board(self.engine)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_observation(self) -> np.ndarray:
        return self.engine.board_array()

    def _build_info(self) -> Dict[str, object]:
        return {
            "legal_action_mask": self.legal_action_mask(),
            "side": self.current_side,
            "winner": self.winner,
            "forfeit": self.forfeit,
        }

    def _compute_reward(self) -> float:
        if self.winner == Side.A:
            return 1.0
        if self.winner == Side.B:
            return -1.0
        return 0.0
