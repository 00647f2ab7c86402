"""Gymnasium environment wrapping the Mancala engine."""

from .gym_env import MancalaEnv

__all__ = ["MancalaEnv"]
