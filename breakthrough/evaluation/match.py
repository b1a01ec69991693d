from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional

from breakthrough.core import BoardEngine, Move, Side, default_engine
from breakthrough.players import Player

LOGGER = logging.getLogger("breakthrough.evaluation")

MoveCallback = Callable[[BoardEngine, Move], None]


@dataclass
class GameRecord:
    winner: Optional[Side]
    moves: List[Move] = field(default_factory=list)
    forfeit: bool = False

    @property
    def plies(self) -> int:
        return len(self.moves)


@dataclass
class EvaluationResult:
    games_played: int
    side_a_wins: int
    side_b_wins: int
    unfinished: int
    forfeits: int
    average_length: float

    def winrate_side_a(self) -> float:
        return self.side_a_wins / max(1, self.games_played)

    def winrate_side_b(self) -> float:
        return self.side_b_wins / max(1, self.games_played)


def play_game(
    engine: BoardEngine,
    players: Mapping[Side, Player],
    *,
    first: Side = Side.A,
    max_plies: Optional[int] = None,
    on_move: Optional[MoveCallback] = None,
) -> GameRecord:
    """Alternate turns on ``engine`` until one side wins.

    A player returning ``None`` has no legal move and loses by forfeit.
    ``max_plies`` stops the game early with no winner.
    """
    record = GameRecord(winner=engine.winner())
    side = first
    while record.winner is None:
        if max_plies is not None and record.plies >= max_plies:
            LOGGER.debug("stopping after %d plies without a winner", record.plies)
            break
        move = players[side].decide_move(engine)
        if move is None:
            LOGGER.debug("side %s has no legal move and forfeits", side.name)
            record.winner = side.other
            record.forfeit = True
            break
        engine.apply(move)
        record.moves.append(move)
        LOGGER.debug("ply %d: %s", record.plies, move)
        if on_move is not None:
            on_move(engine, move)
        record.winner = engine.winner()
        side = side.other
    return record


def evaluate_players(
    player_a: Player,
    player_b: Player,
    *,
    episodes: int,
    engine_factory: Optional[Callable[[], BoardEngine]] = None,
    max_plies: Optional[int] = None,
    progress: Optional[Callable[[range], object]] = None,
) -> EvaluationResult:
    engine_factory = engine_factory or default_engine
    players = {Side.A: player_a, Side.B: player_b}

    side_a_wins = 0
    side_b_wins = 0
    unfinished = 0
    forfeits = 0
    total_plies = 0

    episodes_iter = progress(range(episodes)) if progress is not None else range(episodes)
    for _ in episodes_iter:
        record = play_game(engine_factory(), players, max_plies=max_plies)
        total_plies += record.plies
        forfeits += int(record.forfeit)
        if record.winner == Side.A:
            side_a_wins += 1
        elif record.winner == Side.B:
            side_b_wins += 1
        else:
            unfinished += 1

    return EvaluationResult(
        games_played=episodes,
        side_a_wins=side_a_wins,
        side_b_wins=side_b_wins,
        unfinished=unfinished,
        forfeits=forfeits,
        average_length=total_plies / max(1, episodes),
    )
