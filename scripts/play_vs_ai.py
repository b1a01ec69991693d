#!/usr/bin/env python3
"""Play Breakthrough in the console, human or AI on either side, with optional logging & replay."""

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Dict, List, Optional

from breakthrough import (
    BoardEngine,
    GameAborted,
    GameConfig,
    Move,
    Side,
    default_engine,
    load_game_config,
    load_layout,
    make_player,
    parse_layout,
    play_game,
    render_board,
)
from breakthrough.core import BreakthroughError, dump_layout, format_square, parse_square
from breakthrough.players import PLAYER_KINDS, describe_move

LOGGER = logging.getLogger("breakthrough.scripts.play")


def build_engine(config: GameConfig) -> BoardEngine:
    if config.layout:
        return load_layout(config.layout, config.board)
    return default_engine(config.board)


def apply_overrides(config: GameConfig, args: argparse.Namespace) -> GameConfig:
    players = dict(config.players)
    if args.player_a is not None:
        players[Side.A] = args.player_a
    if args.player_b is not None:
        players[Side.B] = args.player_b
    search = config.search if args.depth is None else replace(config.search, depth=args.depth)
    return replace(
        config,
        players=players,
        search=search,
        seed=args.seed if args.seed is not None else config.seed,
        layout=args.layout if args.layout is not None else config.layout,
        max_plies=args.max_plies if args.max_plies is not None else config.max_plies,
    )


def move_entry(ply: int, move: Move, rows: int, actor: str) -> Dict[str, object]:
    return {
        "ply": ply,
        "actor": actor,
        "side": move.side.name,
        "from": format_square(move.source, rows),
        "to": format_square(move.destination, rows),
    }


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, indent=2))
    print(f"Game log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    engine = parse_layout(data["layout"])
    moves = data.get("moves", [])
    if verbose:
        print("Replaying logged game.")
        print(render_board(engine))
    for entry in moves:
        side = Side[entry["side"]]
        move = Move(parse_square(entry["from"], engine.rows), parse_square(entry["to"], engine.rows), side)
        engine.apply(move)
        if verbose:
            print(f"{entry.get('actor', 'unknown')} (side {side.name}) plays {describe_move(move, engine.rows)}")
            print(render_board(engine, highlight=move.destination))
    winner = engine.winner()
    summary = {
        "winner": winner.name if winner is not None else None,
        "moves": len(moves),
        "board": engine.board_array().tolist(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Winner: {summary['winner'] or 'none'}")
    return summary


def play_interactive(config: GameConfig, engine: BoardEngine, log_file: Optional[str] = None) -> Optional[Side]:
    initial_layout = dump_layout(engine)
    players = {
        side: make_player(
            config.players[side],
            side,
            search_config=config.search,
            seed=None if config.seed is None else config.seed + int(side),
        )
        for side in Side
    }
    log_records: List[Dict[str, object]] = []

    def on_move(board: BoardEngine, move: Move) -> None:
        actor = config.players[move.side]
        log_records.append(move_entry(len(log_records), move, board.rows, actor))
        print(f"\n{actor} (side {move.side.name}) plays {describe_move(move, board.rows)}")
        print(render_board(board, highlight=move.destination))

    print("Initial board:")
    print(render_board(engine))
    try:
        record = play_game(engine, players, max_plies=config.max_plies, on_move=on_move)
    except GameAborted as exc:
        print(str(exc))
        return None

    if record.winner is None:
        print(f"\nNo winner after {record.plies} plies.")
    elif record.forfeit:
        print(f"\nSide {record.winner.other.name} has no legal move: side {record.winner.name} wins by forfeit!")
    else:
        print(f"\nSide {record.winner.name} wins!")

    if log_file:
        metadata = {
            "players": {side.name: kind for side, kind in config.players.items()},
            "depth": config.search.depth,
            "seed": config.seed,
            "winner": record.winner.name if record.winner is not None else None,
            "forfeit": record.forfeit,
        }
        save_log({"metadata": metadata, "layout": initial_layout, "moves": log_records}, Path(log_file))
    return record.winner


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Breakthrough in the console.")
    parser.add_argument("--config", type=str, default="configs/game.yaml")
    parser.add_argument("--layout", type=str, help="Board layout file")
    parser.add_argument("--player-a", choices=PLAYER_KINDS)
    parser.add_argument("--player-b", choices=PLAYER_KINDS)
    parser.add_argument("--depth", type=int, help="Minimax search depth in plies")
    parser.add_argument("--seed", type=int)
    parser.add_argument("--max-plies", type=int)
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    try:
        config = apply_overrides(load_game_config(args.config), args)
        engine = build_engine(config)
    except (BreakthroughError, ValueError, OSError) as exc:
        LOGGER.error("cannot start game: %s", exc)
        sys.exit(1)
    play_interactive(config, engine, args.log_file)


if __name__ == "__main__":
    main()
