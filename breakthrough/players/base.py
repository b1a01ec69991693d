from __future__ import annotations

from typing import Optional

from breakthrough.core import BoardEngine, Move, Side


class Player:
    """Player interface: decide a move for ``side`` on the given engine.

    Returning ``None`` means the side has no legal move and forfeits.
    """

    def __init__(self, side: Side) -> None:
        self.side = side

    def decide_move(self, engine: BoardEngine) -> Optional[Move]:
        raise NotImplementedError

    def spawn(self, seed: Optional[int] = None) -> "Player":
        """Return a copy of this player with an independent random source."""
        return self

    def __repr__(self) -> str:
        return f"{type(self).__name__}(side={self.side.name})"
