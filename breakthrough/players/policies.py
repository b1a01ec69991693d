from __future__ import annotations

from typing import List, Optional

import numpy as np

from breakthrough.core import BoardEngine, Move, Position, Side
from breakthrough.search import SearchConfig, SearchEngine

from .base import Player
from .human import HumanPlayer

PLAYER_KINDS = ("human", "random", "greedy", "minimax")


class RandomPlayer(Player):
    def __init__(self, side: Side, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__(side)
        self.rng = rng or np.random.default_rng()

    def decide_move(self, engine: BoardEngine) -> Optional[Move]:
        moves = engine.all_moves(self.side)
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]

    def spawn(self, seed: Optional[int] = None) -> "RandomPlayer":
        return RandomPlayer(self.side, np.random.default_rng(seed))


class GreedyPlayer(Player):
    """Advance the movable piece nearest to the target row."""

    def __init__(self, side: Side, rng: Optional[np.random.Generator] = None) -> None:
        super().__init__(side)
        self.rng = rng or np.random.default_rng()

    def best_piece(self, engine: BoardEngine) -> Optional[Position]:
        target = engine.target_row(self.side)
        best: Optional[Position] = None
        best_distance = 0
        for pos in engine.pieces(self.side):
            if not engine.can_move_from(pos):
                continue
            distance = abs(pos.row - target)
            if best is None or distance < best_distance or (distance == best_distance and pos.col < best.col):
                best = pos
                best_distance = distance
        return best

    def decide_move(self, engine: BoardEngine) -> Optional[Move]:
        source = self.best_piece(engine)
        if source is None:
            return None
        moves: List[Move] = engine.moves_from(source, self.side)
        return moves[int(self.rng.integers(len(moves)))]

    def spawn(self, seed: Optional[int] = None) -> "GreedyPlayer":
        return GreedyPlayer(self.side, np.random.default_rng(seed))


class MinimaxPlayer(Player):
    def __init__(
        self,
        side: Side,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        super().__init__(side)
        self._config = config or SearchConfig()
        self.search = SearchEngine(self._config, rng=rng or np.random.default_rng())

    def decide_move(self, engine: BoardEngine) -> Optional[Move]:
        return self.search.choose_move(engine, self.side)

    def spawn(self, seed: Optional[int] = None) -> "MinimaxPlayer":
        return MinimaxPlayer(self.side, self._config, rng=np.random.default_rng(seed))


def make_player(
    kind: str,
    side: Side,
    *,
    search_config: Optional[SearchConfig] = None,
    seed: Optional[int] = None,
    **human_kwargs,
) -> Player:
    rng = np.random.default_rng(seed)
    if kind == "random":
        return RandomPlayer(side, rng)
    if kind == "greedy":
        return GreedyPlayer(side, rng)
    if kind == "minimax":
        return MinimaxPlayer(side, search_config, rng=rng)
    if kind == "human":
        return HumanPlayer(side, **human_kwargs)
    raise ValueError(f"Unknown player kind {kind!r}; expected one of {', '.join(PLAYER_KINDS)}.")
