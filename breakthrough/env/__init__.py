"""Gymnasium environment wrapping the board engine."""

from .gym_env import BreakthroughEnv

__all__ = ["BreakthroughEnv"]
