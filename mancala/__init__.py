"""Mancala (Kalah) rules engine and move search."""

from . import core, env, evaluation, features, players, search
from .core import (
    BoardState,
    GameResult,
    Side,
    apply_move,
    check_selection,
    is_terminal,
    is_valid_selection,
    new_game,
    sweep_remaining,
    winner,
)
from .env import MancalaEnv
from .evaluation import EvaluationResult, evaluate_policies
from .features import OBSERVATION_SIZE, build_observation, legal_action_mask
from .players import Policy, RandomPolicy, SearchPolicy, select_action
from .search import LoggingTracer, MoveSearch, SearchResult, choose_move, play_search_turn

__all__ = [
    "core",
    "env",
    "evaluation",
    "features",
    "players",
    "search",
    "BoardState",
    "GameResult",
    "Side",
    "apply_move",
    "check_selection",
    "is_terminal",
    "is_valid_selection",
    "new_game",
    "sweep_remaining",
    "winner",
    "MancalaEnv",
    "EvaluationResult",
    "evaluate_policies",
    "OBSERVATION_SIZE",
    "build_observation",
    "legal_action_mask",
    "Policy",
    "RandomPolicy",
    "SearchPolicy",
    "select_action",
    "LoggingTracer",
    "MoveSearch",
    "SearchResult",
    "choose_move",
    "play_search_turn",
]
