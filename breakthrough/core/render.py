from __future__ import annotations

from typing import List, Optional

from .board import BoardEngine
from .rules import COLUMN_LETTERS
from .state import Position


def render_board(
    engine: BoardEngine,
    highlight: Optional[Position] = None,
    highlight_symbol: str = "*",
) -> str:
    symbols = engine.config.symbols
    rows, cols = engine.rows, engine.cols
    header = "   " + " ".join(COLUMN_LETTERS[:cols])
    lines: List[str] = [header]
    cells = engine.board_array()
    for row in range(rows):
        rank = rows - row
        chars = []
        for col in range(cols):
            if highlight is not None and highlight == Position(row, col):
                chars.append(highlight_symbol)
            else:
                chars.append(symbols[int(cells[row, col])])
        lines.append(f"{rank:>2} {' '.join(chars)} {rank:<2}".rstrip())
    lines.append(header)
    return "\n".join(lines)
