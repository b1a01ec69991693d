"""Core game logic for Breakthrough."""

from .board import BoardEngine
from .errors import (
    BreakthroughError,
    EmptyHistoryError,
    IllegalMoveError,
    IntegrityError,
    InvalidPositionError,
    LayoutFormatError,
    OccupiedCellError,
)
from .grid import Grid, PieceSet
from .layout import default_engine, dump_layout, format_square, load_layout, parse_layout, parse_square
from .render import render_board
from .rules import (
    DEFAULT_SIZE,
    MOVES_PER_PIECE,
    BoardConfig,
    decode_move,
    default_deltas,
    encode_move,
)
from .state import EMPTY, BoardSnapshot, HistoryEntry, Move, Position, Side

__all__ = [
    "BoardEngine",
    "BoardConfig",
    "BoardSnapshot",
    "BreakthroughError",
    "DEFAULT_SIZE",
    "EMPTY",
    "EmptyHistoryError",
    "Grid",
    "HistoryEntry",
    "IllegalMoveError",
    "IntegrityError",
    "InvalidPositionError",
    "LayoutFormatError",
    "MOVES_PER_PIECE",
    "Move",
    "OccupiedCellError",
    "PieceSet",
    "Position",
    "Side",
    "decode_move",
    "default_deltas",
    "default_engine",
    "dump_layout",
    "encode_move",
    "format_square",
    "load_layout",
    "parse_layout",
    "parse_square",
    "render_board",
]
