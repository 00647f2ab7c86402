#!/usr/bin/env python3
"""Evaluate the move search against a random baseline."""

import argparse
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import yaml

from mancala.evaluation import evaluate_policies
from mancala.players import RandomPolicy, SearchPolicy


@dataclass
class EvaluationConfig:
    episodes: int = 20
    search_side: str = "A"
    temperature: float = 1.0
    seed: int = 0


def load_evaluation_config(path: Optional[str], overrides: Dict[str, object]) -> EvaluationConfig:
    cfg: Dict[str, object] = {}
    if path:
        cfg_path = Path(path)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text()) or {}
    known = {f.name for f in fields(EvaluationConfig)}
    unknown = set(cfg) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    cfg.update({key: value for key, value in overrides.items() if value is not None})
    config = EvaluationConfig(**cfg)
    if config.search_side not in ("A", "B"):
        raise ValueError(f"search_side must be 'A' or 'B', got {config.search_side!r}")
    if config.episodes < 1:
        raise ValueError(f"episodes must be positive, got {config.episodes!r}")
    return config


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str)
    parser.add_argument("--episodes", type=int)
    parser.add_argument("--search-side", choices=["A", "B"])
    parser.add_argument("--temperature", type=float)
    parser.add_argument("--seed", type=int)
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    overrides = {key: getattr(args, key) for key in ("episodes", "search_side", "temperature", "seed")}
    config = load_evaluation_config(args.config, overrides)

    search_policy = SearchPolicy()
    baseline = RandomPolicy()
    if config.search_side == "A":
        policy_a, policy_b = search_policy, baseline
    else:
        policy_a, policy_b = baseline, search_policy

    result = evaluate_policies(
        policy_a,
        policy_b,
        episodes=config.episodes,
        temperature=config.temperature,
        seed=config.seed,
    )

    output = {
        "games": result.games_played,
        "search_side": config.search_side,
        "side_a_wins": result.side_a_wins,
        "side_b_wins": result.side_b_wins,
        "draws": result.draws,
        "average_length": result.average_length,
        "average_margin": result.average_margin,
        "side_a_winrate": result.winrate_side_a(),
        "side_b_winrate": result.winrate_side_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
