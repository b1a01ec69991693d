from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

from .state import Move, Position, Side

DEFAULT_SIZE = 6
DEFAULT_START_ROWS = 2
MOVES_PER_PIECE = 3
MAX_COLUMNS = 26
COLUMN_LETTERS = "abcdefghijklmnopqrstuvwxyz"

DeltaTable = Mapping[Side, Tuple[Position, ...]]


def default_deltas() -> Dict[Side, Tuple[Position, ...]]:
    # Side A starts at the bottom and advances toward row 0; side B mirrors it.
    return {
        Side.A: (Position(-1, -1), Position(-1, 0), Position(-1, 1)),
        Side.B: (Position(1, -1), Position(1, 0), Position(1, 1)),
    }


def default_symbols() -> Tuple[str, str, str]:
    return (".", "W", "B")


@dataclass(frozen=True)
class BoardConfig:
    rows: int = DEFAULT_SIZE
    cols: int = DEFAULT_SIZE
    deltas: DeltaTable = field(default_factory=default_deltas)
    symbols: Tuple[str, str, str] = field(default_factory=default_symbols)
    start_rows: int = DEFAULT_START_ROWS

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got ({self.rows}, {self.cols}).")
        if self.cols > MAX_COLUMNS:
            raise ValueError(f"At most {MAX_COLUMNS} columns are supported, got {self.cols}.")
        if len(self.symbols) != 3:
            raise ValueError("Exactly three display symbols are required (empty, A, B).")
        if self.start_rows < 0 or 2 * self.start_rows > self.rows:
            raise ValueError(f"start_rows={self.start_rows} does not fit a board with {self.rows} rows.")

        directions = {}
        for side in Side:
            deltas = tuple(self.deltas.get(side, ()))
            if len(deltas) != MOVES_PER_PIECE:
                raise ValueError(f"Side {side.name} needs exactly {MOVES_PER_PIECE} deltas, got {len(deltas)}.")
            signs = {(delta.row > 0) - (delta.row < 0) for delta in deltas}
            if len(signs) != 1 or 0 in signs:
                raise ValueError(f"Deltas of side {side.name} must all advance in one row direction.")
            if any(abs(delta.row) != 1 for delta in deltas):
                raise ValueError(f"Deltas of side {side.name} must advance exactly one row.")
            if sorted(delta.col for delta in deltas) != [-1, 0, 1]:
                raise ValueError(f"Side {side.name} needs two diagonal deltas and one straight delta.")
            directions[side] = signs.pop()
        if directions[Side.A] == directions[Side.B]:
            raise ValueError("Both sides advance in the same direction.")
        # Normalise to an immutable table.
        object.__setattr__(self, "deltas", {side: tuple(self.deltas[side]) for side in Side})

    def deltas_for(self, side: Side) -> Tuple[Position, ...]:
        return self.deltas[side]

    def direction(self, side: Side) -> int:
        return 1 if self.deltas[side][0].row > 0 else -1

    def target_row(self, side: Side) -> int:
        return self.rows - 1 if self.direction(side) > 0 else 0

    def home_row(self, side: Side) -> int:
        return self.target_row(side.other)

    @property
    def action_space_size(self) -> int:
        return self.rows * self.cols * MOVES_PER_PIECE


def encode_move(move: Move, config: BoardConfig) -> int:
    deltas = config.deltas_for(move.side)
    try:
        delta_index = deltas.index(move.delta)
    except ValueError:
        raise ValueError(f"Move {move} does not use a delta of side {move.side.name}.") from None
    base = move.source.row * config.cols + move.source.col
    return base * MOVES_PER_PIECE + delta_index


def decode_move(index: int, side: Side, config: BoardConfig) -> Move:
    if not 0 <= index < config.action_space_size:
        raise ValueError("Action index out of range.")
    delta_index = index % MOVES_PER_PIECE
    cell = index // MOVES_PER_PIECE
    source = Position(cell // config.cols, cell % config.cols)
    return Move(source, source + config.deltas_for(side)[delta_index], side)
