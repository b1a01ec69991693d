from __future__ import annotations


class BreakthroughError(Exception):
    """Base class for every game-logic error raised by the engine."""


class InvalidPositionError(BreakthroughError, IndexError):
    pass


class OccupiedCellError(BreakthroughError, ValueError):
    pass


class IllegalMoveError(BreakthroughError, ValueError):
    pass


class EmptyHistoryError(BreakthroughError, IndexError):
    pass


class IntegrityError(BreakthroughError, ValueError):
    pass


class LayoutFormatError(BreakthroughError, ValueError):
    pass
