from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple

import numpy as np
from numpy.typing import NDArray

from .errors import InvalidPositionError
from .state import EMPTY, Move, Position

CellArray = NDArray[np.int8]


class Grid:
    """Fixed-size board of cell values (EMPTY or a side)."""

    def __init__(self, rows: int, cols: int, fill: int = EMPTY) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Grid dimensions must be positive, got ({rows}, {cols}).")
        self.rows = rows
        self.cols = cols
        self._cells: CellArray = np.full((rows, cols), fill, dtype=np.int8)

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self.rows * self.cols

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.row < self.rows and 0 <= pos.col < self.cols

    def get(self, pos: Position) -> int:
        self._check(pos)
        return int(self._cells[pos.row, pos.col])

    def set(self, pos: Position, value: int) -> None:
        self._check(pos)
        self._cells[pos.row, pos.col] = value

    def count(self, value: int) -> int:
        return int(np.count_nonzero(self._cells == value))

    def to_array(self) -> CellArray:
        return self._cells.copy()

    def to_bytes(self) -> bytes:
        return self._cells.tobytes()

    def _check(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise InvalidPositionError(
                f"Invalid position for grid of shape ({self.rows}, {self.cols}): {pos}"
            )

    def __repr__(self) -> str:
        body = "\n".join(" ".join(str(int(cell)) for cell in row) for row in self._cells)
        return f"Grid({self.rows}x{self.cols})\n{body}"


class PieceSet:
    """Insertion-ordered positions held by one side."""

    def __init__(self, positions: Iterable[Position] = ()) -> None:
        self._positions: List[Position] = []
        for pos in positions:
            self.add(pos)

    def add(self, pos: Position) -> None:
        if pos in self._positions:
            raise ValueError(f"Position {pos} is already in the piece set.")
        self._positions.append(pos)

    def insert(self, index: int, pos: Position) -> None:
        if pos in self._positions:
            raise ValueError(f"Position {pos} is already in the piece set.")
        self._positions.insert(index, pos)

    def remove(self, pos: Position) -> int:
        """Remove ``pos`` and return the index it occupied."""
        try:
            index = self._positions.index(pos)
        except ValueError:
            raise ValueError(f"Position {pos} not found in the piece set.") from None
        del self._positions[index]
        return index

    def relocate(self, move: Move) -> None:
        try:
            index = self._positions.index(move.source)
        except ValueError:
            raise ValueError(f"Source position {move.source} not found among the side's pieces.") from None
        self._positions[index] = move.destination

    def intersects(self, other: "PieceSet") -> bool:
        return not set(self._positions).isdisjoint(other._positions)

    def as_tuple(self) -> Tuple[Position, ...]:
        return tuple(self._positions)

    def __contains__(self, pos: object) -> bool:
        return pos in self._positions

    def __iter__(self) -> Iterator[Position]:
        return iter(self._positions)

    def __len__(self) -> int:
        return len(self._positions)

    def __repr__(self) -> str:
        return f"PieceSet({self._positions!r})"
