"""Breakthrough board engine, minimax search and players."""

from . import core, env, evaluation, players, search
from .config import GameConfig, game_config_from_dict, load_game_config, load_yaml_config
from .core import (
    BoardConfig,
    BoardEngine,
    Move,
    Position,
    Side,
    default_engine,
    load_layout,
    parse_layout,
    render_board,
)
from .env import BreakthroughEnv
from .evaluation import EvaluationResult, GameRecord, evaluate_players, play_game
from .players import (
    GameAborted,
    GreedyPlayer,
    HumanPlayer,
    MinimaxPlayer,
    Player,
    RandomPlayer,
    make_player,
)
from .search import SearchConfig, SearchEngine, SearchResult

__all__ = [
    "core",
    "env",
    "evaluation",
    "players",
    "search",
    "BoardConfig",
    "BoardEngine",
    "BreakthroughEnv",
    "EvaluationResult",
    "GameAborted",
    "GameConfig",
    "GameRecord",
    "GreedyPlayer",
    "HumanPlayer",
    "MinimaxPlayer",
    "Move",
    "Player",
    "Position",
    "RandomPlayer",
    "SearchConfig",
    "SearchEngine",
    "SearchResult",
    "Side",
    "default_engine",
    "evaluate_players",
    "game_config_from_dict",
    "load_game_config",
    "load_layout",
    "load_yaml_config",
    "make_player",
    "parse_layout",
    "play_game",
    "render_board",
]
