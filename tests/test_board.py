import numpy as np
import pytest

from breakthrough.core import (
    BoardEngine,
    EmptyHistoryError,
    IllegalMoveError,
    IntegrityError,
    InvalidPositionError,
    Move,
    OccupiedCellError,
    Position,
    Side,
    default_engine,
)


def make_engine(rows, cols, a=(), b=()) -> BoardEngine:
    engine = BoardEngine.empty(rows, cols)
    for row, col in a:
        engine.add_piece(Side.A, Position(row, col))
    for row, col in b:
        engine.add_piece(Side.B, Position(row, col))
    return engine


def destinations(moves):
    return [move.destination.as_tuple() for move in moves]


def test_moves_from_include_diagonal_captures_and_empty_straight():
    engine = make_engine(4, 4, a=[(1, 1)], b=[(0, 0), (0, 2)])

    moves = engine.moves_from(Position(1, 1), Side.A)

    assert destinations(moves) == [(0, 0), (0, 1), (0, 2)]
    assert all(move.side == Side.A for move in moves)


def test_straight_move_blocked_by_any_piece():
    engine = make_engine(4, 4, a=[(1, 1)], b=[(0, 0), (0, 1), (0, 2)])
    assert destinations(engine.moves_from(Position(1, 1), Side.A)) == [(0, 0), (0, 2)]

    engine = make_engine(4, 4, a=[(1, 1), (0, 1)])
    assert destinations(engine.moves_from(Position(1, 1), Side.A)) == [(0, 0), (0, 2)]


def test_diagonal_move_blocked_by_own_piece():
    engine = make_engine(4, 4, a=[(1, 1), (0, 0)])
    assert destinations(engine.moves_from(Position(1, 1), Side.A)) == [(0, 1), (0, 2)]


def test_moves_stay_in_bounds_and_use_side_deltas():
    engine = default_engine()
    for side in Side:
        allowed = set(engine.legal_deltas(side))
        for pos in engine.pieces(side):
            for move in engine.moves_from(pos, side):
                assert move.delta in allowed
                assert engine.in_bounds(move.destination)

    edge = make_engine(4, 4, a=[(3, 0)], b=[(0, 3)])
    assert destinations(edge.moves_from(Position(3, 0), Side.A)) == [(2, 0), (2, 1)]
    assert destinations(edge.moves_from(Position(0, 3), Side.B)) == [(1, 2), (1, 3)]


def test_legal_deltas_are_mirrored():
    engine = BoardEngine.empty(4, 4)
    deltas_a = engine.legal_deltas(Side.A)
    deltas_b = engine.legal_deltas(Side.B)
    assert len(deltas_a) == len(deltas_b) == 3
    assert [Position(-d.row, d.col) for d in deltas_a] == list(deltas_b)


def test_all_moves_follow_insertion_order():
    engine = make_engine(5, 5, a=[(4, 4), (4, 0)])
    sources = [move.source.as_tuple() for move in engine.all_moves(Side.A)]
    assert sources == [(4, 4), (4, 4), (4, 0), (4, 0)]


def test_can_move_from():
    engine = make_engine(3, 2, a=[(1, 0), (0, 1)], b=[(0, 0)])

    assert not engine.can_move_from(Position(2, 1))
    assert not engine.can_move_from(Position(1, 0))
    assert engine.can_move_from(Position(0, 0))
    assert engine.all_moves(Side.A) == []


def test_add_piece_rejects_occupied_and_off_grid_cells():
    engine = make_engine(4, 4, a=[(3, 0)])

    with pytest.raises(OccupiedCellError):
        engine.add_piece(Side.B, Position(3, 0))
    with pytest.raises(InvalidPositionError):
        engine.add_piece(Side.B, Position(4, 0))
    assert engine.pieces(Side.B) == ()


def test_capture_removes_piece_and_undo_restores_order():
    engine = make_engine(4, 4, a=[(2, 1)], b=[(0, 3), (1, 0), (1, 2)])
    before = engine.snapshot()
    capture = Move(Position(2, 1), Position(1, 0), Side.A)

    entry = engine.apply(capture)

    assert entry.captured
    assert engine.pieces(Side.B) == (Position(0, 3), Position(1, 2))
    assert Position(1, 0) not in {move.source for move in engine.all_moves(Side.B)}
    assert engine.cell(Position(1, 0)) == Side.A
    assert engine.cell(Position(2, 1)) == 0
    assert engine.pieces(Side.A) == (Position(1, 0),)

    popped = engine.undo()

    assert popped == entry
    assert engine.pieces(Side.B) == (Position(0, 3), Position(1, 0), Position(1, 2))
    assert Position(1, 0) in {move.source for move in engine.all_moves(Side.B)}
    assert engine.snapshot() == before


def test_plain_move_and_undo():
    engine = make_engine(4, 4, a=[(3, 1), (3, 2)], b=[(0, 0)])
    before = engine.snapshot()

    entry = engine.apply(Move(Position(3, 1), Position(2, 1), Side.A))

    assert not entry.captured
    assert engine.pieces(Side.A) == (Position(2, 1), Position(3, 2))
    assert engine.last_move == Move(Position(3, 1), Position(2, 1), Side.A)
    assert len(engine.history) == 1

    engine.undo()
    assert engine.snapshot() == before
    assert engine.last_move is None


def test_apply_rejects_illegal_moves():
    engine = make_engine(4, 4, a=[(2, 1)], b=[(1, 1), (3, 3)])

    with pytest.raises(IllegalMoveError):
        # Source does not hold the mover's piece.
        engine.apply(Move(Position(2, 2), Position(1, 2), Side.A))
    with pytest.raises(IllegalMoveError):
        # Straight onto an occupied cell.
        engine.apply(Move(Position(2, 1), Position(1, 1), Side.A))
    with pytest.raises(IllegalMoveError):
        # Backwards.
        engine.apply(Move(Position(2, 1), Position(3, 1), Side.A))
    with pytest.raises(IllegalMoveError):
        # Two rows at once.
        engine.apply(Move(Position(2, 1), Position(0, 1), Side.A))
    with pytest.raises(ValueError):
        engine.apply(Move(Position(3, 3), Position(4, 3), Side.B))

    assert engine.history == ()
    assert engine.check_integrity()


def test_undo_on_empty_history_raises():
    engine = make_engine(4, 4, a=[(3, 0)], b=[(0, 0)])
    with pytest.raises(EmptyHistoryError):
        engine.undo()
    with pytest.raises(IndexError):
        engine.undo()


def test_winner_when_reaching_target_row():
    engine = make_engine(4, 4, a=[(1, 1)], b=[(2, 3)])
    assert engine.winner() is None

    engine.apply(Move(Position(1, 1), Position(0, 1), Side.A))
    assert engine.winner() == Side.A

    engine.undo()
    engine.apply(Move(Position(2, 3), Position(3, 3), Side.B))
    assert engine.winner() == Side.B


def test_winner_when_last_piece_captured_and_stable_until_undo():
    engine = make_engine(5, 5, a=[(3, 1), (4, 4)], b=[(2, 2)])
    engine.apply(Move(Position(3, 1), Position(2, 2), Side.A))
    assert engine.winner() == Side.A

    engine.apply(Move(Position(4, 4), Position(3, 4), Side.A))
    assert engine.winner() == Side.A

    engine.undo()
    engine.undo()
    assert engine.winner() is None


def test_winner_with_empty_side_at_setup():
    assert make_engine(4, 4, a=[(3, 0)]).winner() == Side.A
    assert make_engine(4, 4, b=[(0, 0)]).winner() == Side.B


def test_integrity_detects_corruption():
    engine = make_engine(4, 4, a=[(3, 0), (3, 1)], b=[(0, 0)])
    assert engine.check_integrity()
    engine.ensure_integrity()

    engine._grid.set(Position(2, 2), Side.B)
    assert not engine.check_integrity()
    with pytest.raises(IntegrityError, match="empty cell count"):
        engine.ensure_integrity()

    engine = make_engine(4, 4, a=[(3, 0)], b=[(0, 0)])
    engine._grid.set(Position(3, 0), Side.B)
    with pytest.raises(IntegrityError, match="does not match"):
        engine.ensure_integrity()


def test_random_games_round_trip_every_move():
    rng = np.random.default_rng(7)
    for _ in range(5):
        engine = default_engine()
        initial = engine.snapshot()
        side = Side.A
        while engine.winner() is None:
            moves = engine.all_moves(side)
            if not moves:
                break
            move = moves[int(rng.integers(len(moves)))]
            before = engine.snapshot()
            engine.apply(move)
            engine.undo()
            assert engine.snapshot() == before
            engine.apply(move)
            assert engine.check_integrity()
            side = side.other

        while engine.history:
            engine.undo()
        assert engine.snapshot() == initial


def test_check_integrity_logs_warning(caplog):
    engine = make_engine(4, 4, a=[(3, 0)], b=[(0, 0)])
    engine._grid.set(Position(1, 1), Side.A)

    with caplog.at_level("WARNING", logger="breakthrough.core.board"):
        assert not engine.check_integrity()

    assert "empty cell count mismatch" in caplog.text
