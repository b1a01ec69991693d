#!/usr/bin/env python3
"""Play a series of AI-vs-AI games and report win rates."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from tqdm.auto import tqdm

from breakthrough import BoardConfig, SearchConfig, Side, default_engine, evaluate_players, make_player, parse_layout
from breakthrough.core import BreakthroughError
from breakthrough.players import PLAYER_KINDS

LOGGER = logging.getLogger("breakthrough.scripts.evaluate")

AI_KINDS = [kind for kind in PLAYER_KINDS if kind != "human"]


def build_engine_factory(board_config: BoardConfig, layout: Optional[str] = None):
    if not layout:
        return lambda: default_engine(board_config)
    text = Path(layout).read_text(encoding="utf-8")
    # Parse once up front so a broken layout fails before the first game.
    parse_layout(text, board_config)
    return lambda: parse_layout(text, board_config)


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--player-a", choices=AI_KINDS, default="minimax")
    parser.add_argument("--player-b", choices=AI_KINDS, default="greedy")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument("--depth", type=int, default=3)
    parser.add_argument("--rows", type=int, default=6)
    parser.add_argument("--cols", type=int, default=6)
    parser.add_argument("--layout", type=str, help="Start every game from this layout file")
    parser.add_argument("--max-plies", type=int)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        board_config = BoardConfig(rows=args.rows, cols=args.cols)
        search_config = SearchConfig(depth=args.depth)
        seed_b = None if args.seed is None else args.seed + 1
        player_a = make_player(args.player_a, Side.A, search_config=search_config, seed=args.seed)
        player_b = make_player(args.player_b, Side.B, search_config=search_config, seed=seed_b)
        engine_factory = build_engine_factory(board_config, args.layout)
    except (BreakthroughError, ValueError, OSError) as exc:
        LOGGER.error("cannot start evaluation: %s", exc)
        sys.exit(1)

    result = evaluate_players(
        player_a,
        player_b,
        episodes=args.episodes,
        engine_factory=engine_factory,
        max_plies=args.max_plies,
        progress=lambda episodes: tqdm(episodes, desc="Games"),
    )

    output = {
        "games": result.games_played,
        "side_a_wins": result.side_a_wins,
        "side_b_wins": result.side_b_wins,
        "unfinished": result.unfinished,
        "forfeits": result.forfeits,
        "average_length": result.average_length,
        "side_a_winrate": result.winrate_side_a(),
        "side_b_winrate": result.winrate_side_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
