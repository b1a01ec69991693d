from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

EMPTY = 0


class Side(IntEnum):
    A = 1
    B = 2

    @property
    def other(self) -> "Side":
        return _OTHER[self]


_OTHER = {Side.A: Side.B, Side.B: Side.A}


@dataclass(frozen=True, order=True)
class Position:
    row: int
    col: int

    def __add__(self, other: "Position") -> "Position":
        return Position(self.row + other.row, self.col + other.col)

    def __sub__(self, other: "Position") -> "Position":
        return Position(self.row - other.row, self.col - other.col)

    def as_tuple(self) -> Tuple[int, int]:
        return (self.row, self.col)


@dataclass(frozen=True)
class Move:
    source: Position
    destination: Position
    side: Side

    def __post_init__(self) -> None:
        if self.source == self.destination:
            raise ValueError(f"Move source and destination coincide at {self.source}.")

    @property
    def delta(self) -> Position:
        return self.destination - self.source

    def inverse(self) -> "Move":
        return Move(self.destination, self.source, self.side)

    def as_tuple(self) -> Tuple[int, int, int, int]:
        return (self.source.row, self.source.col, self.destination.row, self.destination.col)


@dataclass(frozen=True)
class HistoryEntry:
    move: Move
    captured: bool = False
    # Index the captured piece held in the opponent's PieceSet, restored on undo.
    captured_index: int = -1


@dataclass(frozen=True)
class BoardSnapshot:
    cells: bytes
    pieces_a: Tuple[Position, ...]
    pieces_b: Tuple[Position, ...]
    history_length: int
