from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from breakthrough.core import BoardEngine, Move, Side

LOGGER = logging.getLogger("breakthrough.search")

WIN_SCORE = 100
DRAW = 0
DEFAULT_DEPTH = 3


@dataclass(frozen=True)
class SearchConfig:
    depth: int = DEFAULT_DEPTH
    win_score: int = WIN_SCORE

    def __post_init__(self) -> None:
        if self.depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {self.depth}.")
        if self.win_score <= DRAW:
            raise ValueError(f"win_score must be positive, got {self.win_score}.")


@dataclass
class SearchResult:
    move: Optional[Move]
    score: int
    nodes: int


class SearchEngine:
    """Plain fixed-depth minimax over a live :class:`BoardEngine`.

    Every branch is explored by applying the move on the caller's engine and
    undoing it before the next sibling, so the engine is left exactly as it
    was found. Moves tying for the best score are chosen between at random
    with the injected generator.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        *,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or SearchConfig()
        self.rng = rng or np.random.default_rng()
        self._side = Side.A
        self._nodes = 0

    def choose_move(self, engine: BoardEngine, side: Side, depth: Optional[int] = None) -> Optional[Move]:
        return self.search(engine, side, depth).move

    def search(self, engine: BoardEngine, side: Side, depth: Optional[int] = None) -> SearchResult:
        depth = self.config.depth if depth is None else depth
        if depth < 1:
            raise ValueError(f"Search depth must be at least 1, got {depth}.")
        self._side = side
        self._nodes = 0
        move, score = self._minimax(engine, depth, True)
        LOGGER.debug("side %s depth %d: move=%s score=%d nodes=%d", side.name, depth, move, score, self._nodes)
        return SearchResult(move=move, score=score, nodes=self._nodes)

    # ------------------------------------------------------------------
    def _minimax(self, engine: BoardEngine, depth: int, maximizing: bool) -> Tuple[Optional[Move], int]:
        self._nodes += 1
        win_score = self.config.win_score

        winner = engine.winner()
        if winner is not None:
            return None, (win_score + depth) if winner == self._side else (-win_score - depth)
        if depth == 0:
            return None, DRAW

        current = self._side if maximizing else self._side.other
        candidates = engine.all_moves(current)
        if not candidates:
            # Forfeit: the side to move is stuck.
            return None, (-win_score - depth) if current == self._side else (win_score + depth)

        best_moves: List[Move] = []
        best_score: Optional[int] = None
        for move in candidates:
            engine.apply(move)
            try:
                _, score = self._minimax(engine, depth - 1, not maximizing)
            finally:
                engine.undo()
            if best_score is None or (score > best_score if maximizing else score < best_score):
                best_moves = [move]
                best_score = score
            elif score == best_score:
                best_moves.append(move)

        chosen = best_moves[int(self.rng.integers(len(best_moves)))]
        return chosen, best_score
