import numpy as np
import pytest

from breakthrough.core import BoardConfig, BoardEngine, Position, Side, encode_move
from breakthrough.env import BreakthroughEnv


def test_reset_returns_valid_observation():
    env = BreakthroughEnv()
    obs, info = env.reset()

    assert obs.shape == (6, 6)
    assert np.count_nonzero(obs == Side.A) == 12
    assert info["legal_action_mask"].shape == (6 * 6 * 3,)
    assert info["side"] == Side.A


def test_legal_mask_matches_enumeration():
    env = BreakthroughEnv()
    env.reset()
    mask = env.legal_action_mask()
    legal = env.engine.all_moves(Side.A)
    assert np.count_nonzero(mask) == len(legal)
    for move in legal:
        assert mask[encode_move(move, env.config)] == 1


def test_step_alternates_sides():
    env = BreakthroughEnv()
    obs, info = env.reset()
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    assert reward == 0.0
    assert not terminated
    assert not truncated
    assert np.any(next_obs != obs)
    assert next_info["side"] == Side.B


def test_illegal_action_rejected():
    env = BreakthroughEnv()
    _, info = env.reset()
    illegal = int(np.flatnonzero(info["legal_action_mask"] == 0)[0])
    with pytest.raises(ValueError):
        env.step(illegal)


def walled_in(config: BoardConfig) -> BoardEngine:
    # Side A still has pieces but none of them can move.
    engine = BoardEngine(config)
    engine.add_piece(Side.A, Position(1, 0))
    engine.add_piece(Side.A, Position(0, 1))
    engine.add_piece(Side.B, Position(0, 0))
    engine.add_piece(Side.B, Position(2, 1))
    return engine


def test_forfeit_terminates_episode():
    env = BreakthroughEnv(BoardConfig(rows=5, cols=2, start_rows=0), engine_factory=walled_in)
    env.reset(options={"first": Side.B})
    action = encode_move(env.engine.moves_from(Position(2, 1), Side.B)[0], env.config)

    _, reward, terminated, _, info = env.step(action)

    assert terminated
    assert info["forfeit"]
    assert info["winner"] == Side.B
    assert reward == -1.0


def test_random_episode_reaches_terminal_reward():
    env = BreakthroughEnv(render_mode="ansi")
    rng = np.random.default_rng(0)
    _, info = env.reset()
    terminated = False
    reward = 0.0
    while not terminated:
        legal = np.flatnonzero(info["legal_action_mask"])
        _, reward, terminated, _, info = env.step(int(rng.choice(legal)))
    assert reward in (1.0, -1.0)
    assert "a b c d e f" in env.render()


def test_reset_detects_side_to_move_is_stuck():
    env = BreakthroughEnv(BoardConfig(rows=5, cols=2, start_rows=0), engine_factory=walled_in)
    _, info = env.reset()

    assert info["winner"] == Side.B
    assert info["forfeit"]
    assert not info["legal_action_mask"].any()
    with pytest.raises(ValueError, match="finished"):
        env.step(0)
