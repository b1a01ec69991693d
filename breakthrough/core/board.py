from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from .errors import EmptyHistoryError, IllegalMoveError, IntegrityError, OccupiedCellError
from .grid import CellArray, Grid, PieceSet
from .rules import BoardConfig
from .state import EMPTY, BoardSnapshot, HistoryEntry, Move, Position, Side

LOGGER = logging.getLogger("breakthrough.core.board")


class BoardEngine:
    """Mutable Breakthrough position with exact undo.

    The engine is the only owner of its grid and piece sets. Callers place
    pieces with :meth:`add_piece` during setup, then change the position only
    through :meth:`apply` and :meth:`undo`, which are exact inverses.
    """

    def __init__(self, config: Optional[BoardConfig] = None) -> None:
        self.config = config or BoardConfig()
        self._grid = Grid(self.config.rows, self.config.cols)
        self._pieces: Dict[Side, PieceSet] = {Side.A: PieceSet(), Side.B: PieceSet()}
        self._history: List[HistoryEntry] = []

    @classmethod
    def empty(cls, rows: int, cols: int) -> "BoardEngine":
        return cls(BoardConfig(rows=rows, cols=cols, start_rows=0))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._grid.rows

    @property
    def cols(self) -> int:
        return self._grid.cols

    @property
    def history(self) -> Tuple[HistoryEntry, ...]:
        return tuple(self._history)

    @property
    def last_move(self) -> Optional[Move]:
        if not self._history:
            return None
        return self._history[-1].move

    def cell(self, pos: Position) -> int:
        return self._grid.get(pos)

    def in_bounds(self, pos: Position) -> bool:
        return self._grid.in_bounds(pos)

    def pieces(self, side: Side) -> Tuple[Position, ...]:
        return self._pieces[side].as_tuple()

    def piece_count(self, side: Side) -> int:
        return len(self._pieces[side])

    def total_pieces(self) -> int:
        return len(self._pieces[Side.A]) + len(self._pieces[Side.B])

    def target_row(self, side: Side) -> int:
        return self.config.target_row(side)

    def home_row(self, side: Side) -> int:
        return self.config.home_row(side)

    def board_array(self) -> CellArray:
        return self._grid.to_array()

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(
            cells=self._grid.to_bytes(),
            pieces_a=self._pieces[Side.A].as_tuple(),
            pieces_b=self._pieces[Side.B].as_tuple(),
            history_length=len(self._history),
        )

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def add_piece(self, side: Side, pos: Position) -> None:
        occupant = self._grid.get(pos)
        if occupant != EMPTY:
            raise OccupiedCellError(f"Cell {pos} already occupied by side {Side(occupant).name}.")
        self._grid.set(pos, side)
        self._pieces[side].add(pos)

    def check_integrity(self) -> bool:
        problem = self._integrity_problem()
        if problem is not None:
            LOGGER.warning("Integrity check failed: %s", problem)
            return False
        return True

    def ensure_integrity(self) -> None:
        problem = self._integrity_problem()
        if problem is not None:
            raise IntegrityError(problem)

    def _integrity_problem(self) -> Optional[str]:
        if self._pieces[Side.A].intersects(self._pieces[Side.B]):
            return "pieces of side A and side B overlap"
        for side in Side:
            for pos in self._pieces[side]:
                if self._grid.get(pos) != side:
                    return f"piece of side {side.name} at {pos} does not match the grid"
        expected_empty = self._grid.size - self.total_pieces()
        actual_empty = self._grid.count(EMPTY)
        if actual_empty != expected_empty:
            return f"empty cell count mismatch: expected {expected_empty}, got {actual_empty}"
        return None

    # ------------------------------------------------------------------
    # Move generation
    # ------------------------------------------------------------------
    def legal_deltas(self, side: Side) -> Tuple[Position, ...]:
        return self.config.deltas_for(side)

    def is_legal_direction(self, move: Move) -> bool:
        delta = move.delta
        if delta not in self.config.deltas_for(move.side):
            return False
        target = self._grid.get(move.destination)
        if delta.col == 0:
            return target == EMPTY
        return target != move.side

    def moves_from(self, pos: Position, side: Side) -> List[Move]:
        moves: List[Move] = []
        for delta in self.config.deltas_for(side):
            destination = pos + delta
            if not self._grid.in_bounds(destination):
                continue
            move = Move(pos, destination, side)
            if self.is_legal_direction(move):
                moves.append(move)
        return moves

    def all_moves(self, side: Side) -> List[Move]:
        moves: List[Move] = []
        for pos in self._pieces[side]:
            moves.extend(self.moves_from(pos, side))
        return moves

    def can_move_from(self, pos: Position) -> bool:
        occupant = self._grid.get(pos)
        if occupant == EMPTY:
            return False
        return bool(self.moves_from(pos, Side(occupant)))

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def apply(self, move: Move) -> HistoryEntry:
        side = move.side
        if not self._grid.in_bounds(move.source) or self._grid.get(move.source) != side:
            raise IllegalMoveError(f"Piece at source {move.source} is not side {side.name}'s piece.")
        if not self._grid.in_bounds(move.destination) or not self.is_legal_direction(move):
            raise IllegalMoveError(f"Move {move} is not a legal direction for side {side.name}.")

        opponent = side.other
        captured = self._grid.get(move.destination) == opponent
        captured_index = self._pieces[opponent].remove(move.destination) if captured else -1

        self._grid.set(move.source, EMPTY)
        self._grid.set(move.destination, side)
        self._pieces[side].relocate(move)

        entry = HistoryEntry(move, captured, captured_index)
        self._history.append(entry)
        return entry

    def undo(self) -> HistoryEntry:
        if not self._history:
            raise EmptyHistoryError("No moves to undo. History is empty.")
        entry = self._history.pop()
        move = entry.move
        side = move.side

        self._grid.set(move.source, side)
        self._pieces[side].relocate(move.inverse())
        if entry.captured:
            self._grid.set(move.destination, side.other)
            self._pieces[side.other].insert(entry.captured_index, move.destination)
        else:
            self._grid.set(move.destination, EMPTY)
        return entry

    # ------------------------------------------------------------------
    # Outcome
    # ------------------------------------------------------------------
    def winner(self) -> Optional[Side]:
        last = self.last_move
        if last is not None and last.destination.row == self.config.target_row(last.side):
            return last.side
        if not self._pieces[Side.A]:
            return Side.B
        if not self._pieces[Side.B]:
            return Side.A
        return None

    def __repr__(self) -> str:
        return f"BoardEngine({self.rows}x{self.cols}, history={len(self._history)})\n{self._grid!r}"
