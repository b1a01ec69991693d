from __future__ import annotations

from typing import Callable, List, Optional

from breakthrough.core import BoardEngine, LayoutFormatError, Move, Side, format_square, parse_square

from .base import Player

QUIT_WORDS = {"q", "quit", "exit"}


class GameAborted(Exception):
    """Raised when the human operator quits at a move prompt."""


def describe_move(move: Move, rows: int) -> str:
    return f"{format_square(move.source, rows)}-{format_square(move.destination, rows)}"


class HumanPlayer(Player):
    """Console player.

    Accepts a move index from the printed list, a move written as ``a2-a3``,
    or a single square to narrow the list down to that piece's moves.
    """

    def __init__(
        self,
        side: Side,
        *,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ) -> None:
        super().__init__(side)
        self.input_fn = input_fn
        self.output_fn = output_fn

    def decide_move(self, engine: BoardEngine) -> Optional[Move]:
        all_moves = engine.all_moves(self.side)
        if not all_moves:
            return None
        choices = all_moves
        self._list_moves(choices, engine.rows)
        while True:
            raw = self.input_fn(f"Move for side {self.side.name} (index, a2-a3, square, q to quit): ").strip()
            if raw.lower() in QUIT_WORDS:
                raise GameAborted(f"Side {self.side.name} quit the game.")
            if raw.isdecimal():
                index = int(raw)
                if 0 <= index < len(choices):
                    return choices[index]
                self.output_fn("Invalid index, try again.")
                continue
            if not raw:
                choices = all_moves
                self._list_moves(choices, engine.rows)
                continue
            try:
                move = self._parse_notation(raw, engine)
            except LayoutFormatError as exc:
                self.output_fn(f"{exc} Try again.")
                continue
            if isinstance(move, Move):
                if move in all_moves:
                    return move
                self.output_fn(f"{describe_move(move, engine.rows)} is not a legal move, try again.")
                continue
            # A bare square selects one of our pieces.
            if not engine.in_bounds(move) or engine.cell(move) != self.side:
                self.output_fn(f"No piece of side {self.side.name} on {raw}, try again.")
                continue
            if not engine.can_move_from(move):
                self.output_fn(f"The piece on {raw} cannot move, pick another one.")
                continue
            choices = engine.moves_from(move, self.side)
            self._list_moves(choices, engine.rows)

    def _parse_notation(self, raw: str, engine: BoardEngine):
        rows = engine.rows
        if "-" in raw:
            source_text, _, destination_text = raw.partition("-")
            source = parse_square(source_text, rows)
            destination = parse_square(destination_text, rows)
            if source == destination:
                raise LayoutFormatError(f"Move {raw!r} does not go anywhere.")
            return Move(source, destination, self.side)
        return parse_square(raw, rows)

    def _list_moves(self, moves: List[Move], rows: int) -> None:
        self.output_fn("Legal moves:")
        for index, move in enumerate(moves):
            self.output_fn(f"  {index}: {describe_move(move, rows)}")
