"""Player strategies: human, random, greedy and minimax."""

from .base import Player
from .human import GameAborted, HumanPlayer, describe_move
from .policies import PLAYER_KINDS, GreedyPlayer, MinimaxPlayer, RandomPlayer, make_player

__all__ = [
    "GameAborted",
    "GreedyPlayer",
    "HumanPlayer",
    "MinimaxPlayer",
    "PLAYER_KINDS",
    "Player",
    "RandomPlayer",
    "describe_move",
    "make_player",
]
