"""Game configuration loaded from YAML.

Example::

    board:
      rows: 6
      cols: 6
      start_rows: 2
      symbols: [".", "W", "B"]
    search:
      depth: 3
    players:
      A: human
      B: minimax
    seed: 7
    layout: boards/endgame.txt
    max_plies: 200
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from breakthrough.core import BoardConfig, Position, Side
from breakthrough.players import PLAYER_KINDS
from breakthrough.search import SearchConfig


def default_player_kinds() -> Dict[Side, str]:
    return {Side.A: "human", Side.B: "minimax"}


@dataclass
class GameConfig:
    board: BoardConfig = field(default_factory=BoardConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    players: Dict[Side, str] = field(default_factory=default_player_kinds)
    seed: Optional[int] = None
    layout: Optional[str] = None
    max_plies: Optional[int] = None

    def __post_init__(self) -> None:
        for side, kind in self.players.items():
            if kind not in PLAYER_KINDS:
                raise ValueError(f"Unknown player kind {kind!r} for side {Side(side).name}.")
        if self.max_plies is not None and self.max_plies <= 0:
            raise ValueError(f"max_plies must be positive, got {self.max_plies}.")


def load_yaml_config(path: Union[str, Path]) -> Dict:
    path = Path(path)
    if not path.exists():
        return {}
    return yaml.safe_load(path.read_text(encoding="utf-8")) or {}


def _check_keys(section: str, data: Mapping[str, Any], allowed) -> None:
    unknown = set(data) - set(allowed)
    if unknown:
        raise ValueError(f"Unknown keys in {section}: {', '.join(sorted(map(str, unknown)))}.")


def _parse_side(key: Any) -> Side:
    try:
        return Side[str(key).upper()]
    except KeyError:
        raise ValueError(f"Unknown side {key!r}; expected A or B.") from None


def _board_config(data: Mapping[str, Any]) -> BoardConfig:
    allowed = [f.name for f in fields(BoardConfig)]
    _check_keys("board", data, allowed)
    kwargs = dict(data)
    if "deltas" in kwargs:
        kwargs["deltas"] = {
            _parse_side(side): tuple(Position(int(r), int(c)) for r, c in deltas)
            for side, deltas in kwargs["deltas"].items()
        }
    if "symbols" in kwargs:
        kwargs["symbols"] = tuple(str(symbol) for symbol in kwargs["symbols"])
    return BoardConfig(**kwargs)


def game_config_from_dict(data: Mapping[str, Any]) -> GameConfig:
    _check_keys("game config", data, [f.name for f in fields(GameConfig)])

    search_cfg = data.get("search") or {}
    _check_keys("search", search_cfg, [f.name for f in fields(SearchConfig)])

    players = default_player_kinds()
    for side, kind in (data.get("players") or {}).items():
        players[_parse_side(side)] = str(kind)

    return GameConfig(
        board=_board_config(data.get("board") or {}),
        search=SearchConfig(**search_cfg),
        players=players,
        seed=data.get("seed"),
        layout=data.get("layout"),
        max_plies=data.get("max_plies"),
    )


def load_game_config(path: Union[str, Path]) -> GameConfig:
    return game_config_from_dict(load_yaml_config(path))
