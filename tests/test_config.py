import pytest

from breakthrough.config import GameConfig, game_config_from_dict, load_game_config
from breakthrough.core import Position, Side


def test_missing_file_gives_defaults(tmp_path):
    config = load_game_config(tmp_path / "missing.yaml")
    assert config == GameConfig()
    assert config.players == {Side.A: "human", Side.B: "minimax"}
    assert config.search.depth == 3


def test_load_yaml_config(tmp_path):
    path = tmp_path / "game.yaml"
    path.write_text(
        "board:\n"
        "  rows: 8\n"
        "  cols: 7\n"
        "  symbols: ['-', 'x', 'o']\n"
        "search:\n"
        "  depth: 2\n"
        "players:\n"
        "  a: greedy\n"
        "  B: random\n"
        "seed: 5\n"
        "max_plies: 40\n"
    )

    config = load_game_config(path)

    assert (config.board.rows, config.board.cols) == (8, 7)
    assert config.board.symbols == ("-", "x", "o")
    assert config.search.depth == 2
    assert config.players == {Side.A: "greedy", Side.B: "random"}
    assert config.seed == 5
    assert config.max_plies == 40
    assert config.layout is None


def test_custom_deltas():
    config = game_config_from_dict(
        {
            "board": {
                "deltas": {
                    "A": [[1, -1], [1, 0], [1, 1]],
                    "B": [[-1, -1], [-1, 0], [-1, 1]],
                }
            }
        }
    )
    assert config.board.deltas_for(Side.A)[1] == Position(1, 0)
    assert config.board.target_row(Side.A) == config.board.rows - 1


@pytest.mark.parametrize(
    "data",
    [
        {"colour": "red"},
        {"search": {"depth": 3, "alpha_beta": True}},
        {"board": {"size": 6}},
        {"players": {"C": "random"}},
        {"players": {"A": "oracle"}},
        {"search": {"depth": 0}},
        {"max_plies": 0},
    ],
)
def test_invalid_config_rejected(data):
    with pytest.raises(ValueError):
        game_config_from_dict(data)
