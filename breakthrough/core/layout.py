"""Board layouts: the default starting position and the text layout format.

A layout file has three lines::

    6 6
    a1,b1,c1
    a6,b6

The first line holds the row and column counts, the second the squares of
side A and the third those of side B (either may be empty). A square is a
column letter followed by a rank counted from the bottom row, so ``a1`` is
the bottom-left cell.
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import List, Optional, Union

from .board import BoardEngine
from .errors import LayoutFormatError
from .rules import COLUMN_LETTERS, BoardConfig
from .state import Position, Side


def default_engine(config: Optional[BoardConfig] = None) -> BoardEngine:
    config = config or BoardConfig()
    engine = BoardEngine(config)
    for side in Side:
        home = config.home_row(side)
        for offset in range(config.start_rows):
            row = home + config.direction(side) * offset
            for col in range(config.cols):
                engine.add_piece(side, Position(row, col))
    engine.ensure_integrity()
    return engine


def format_square(pos: Position, rows: int) -> str:
    return f"{COLUMN_LETTERS[pos.col]}{rows - pos.row}"


def parse_square(text: str, rows: int) -> Position:
    text = text.strip()
    if len(text) < 2:
        raise LayoutFormatError(f"Malformed square {text!r}: expected a form like 'a1'.")
    letter, rank = text[0].lower(), text[1:]
    if letter not in COLUMN_LETTERS:
        raise LayoutFormatError(f"Malformed square {text!r}: unknown column {text[0]!r}.")
    try:
        number = int(rank)
    except ValueError:
        raise LayoutFormatError(f"Malformed square {text!r}: invalid rank {rank!r}.") from None
    return Position(rows - number, COLUMN_LETTERS.index(letter))


def _parse_squares(line: str, rows: int) -> List[Position]:
    line = line.strip()
    if not line:
        return []
    return [parse_square(chunk, rows) for chunk in line.split(",")]


def parse_layout(text: str, config: Optional[BoardConfig] = None) -> BoardEngine:
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise LayoutFormatError("Layout is empty: missing dimensions.")
    dimensions = lines[0].split()
    if len(dimensions) != 2:
        raise LayoutFormatError("Invalid dimensions line: expected 'rows cols'.")
    try:
        rows, cols = int(dimensions[0]), int(dimensions[1])
    except ValueError:
        raise LayoutFormatError(f"Invalid dimension numbers: {lines[0].strip()!r}.") from None
    if len(lines) < 3:
        missing = "side A" if len(lines) < 2 else "side B"
        raise LayoutFormatError(f"Layout is malformed: missing {missing} line.")

    base = config or BoardConfig()
    try:
        board_config = replace(base, rows=rows, cols=cols, start_rows=min(base.start_rows, rows // 2))
    except ValueError as exc:
        raise LayoutFormatError(str(exc)) from exc

    engine = BoardEngine(board_config)
    for pos in _parse_squares(lines[1], rows):
        engine.add_piece(Side.A, pos)
    for pos in _parse_squares(lines[2], rows):
        engine.add_piece(Side.B, pos)
    engine.ensure_integrity()
    return engine


def load_layout(path: Union[str, Path], config: Optional[BoardConfig] = None) -> BoardEngine:
    return parse_layout(Path(path).read_text(encoding="utf-8"), config)


def dump_layout(engine: BoardEngine) -> str:
    lines = [f"{engine.rows} {engine.cols}"]
    for side in Side:
        lines.append(",".join(format_square(pos, engine.rows) for pos in engine.pieces(side)))
    return "\n".join(lines) + "\n"
