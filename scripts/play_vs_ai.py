#!/usr/bin/env python3
"""Play Mancala in the console against the search AI, or hot-seat between two humans."""

import argparse
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Callable, Dict, Optional, Set, Tuple

import yaml

from mancala.core import (
    GLOBAL_HOLE_COUNT,
    PITS_PER_SIDE,
    BoardState,
    GameResult,
    Side,
    apply_move,
    check_selection,
    is_terminal,
    new_game,
    sweep_remaining,
    to_global_index,
    winner,
)
from mancala.search import LoggingTracer, MoveSearch, play_search_turn

logger = logging.getLogger("mancala.play")

MODES = ("human-vs-ai", "human-vs-human", "ai-vs-ai")

SELECTION_MESSAGES = {
    "out_of_range": f"Holes are numbered 0-{GLOBAL_HOLE_COUNT - 1}.",
    "wrong_side": "That hole belongs to the other player.",
    "empty_pit": "That hole is empty.",
    "game_over": "The game is already over.",
}


@dataclass
class PlayConfig:
    mode: str = "human-vs-ai"
    ai_side: str = "B"
    trace_search: bool = False
    log_level: str = "WARNING"

    def ai_sides(self) -> Set[Side]:
        if self.mode == "ai-vs-ai":
            return {Side.A, Side.B}
        if self.mode == "human-vs-ai":
            return {Side[self.ai_side]}
        return set()


def load_play_config(path: Optional[str], overrides: Dict[str, object]) -> PlayConfig:
    cfg: Dict[str, object] = {}
    if path:
        cfg_path = Path(path)
        if cfg_path.exists():
            cfg = yaml.safe_load(cfg_path.read_text()) or {}
    known = {f.name for f in fields(PlayConfig)}
    unknown = set(cfg) - known
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    cfg.update({key: value for key, value in overrides.items() if value is not None})
    config = PlayConfig(**cfg)
    if config.mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {config.mode!r}")
    if config.ai_side not in ("A", "B"):
        raise ValueError(f"ai_side must be 'A' or 'B', got {config.ai_side!r}")
    return config


def format_board(state: BoardState) -> str:
    """Side B across the top (holes 11..6), side A along the bottom (holes 0..5)."""
    top_holes = [to_global_index(Side.B, i) for i in reversed(range(PITS_PER_SIDE))]
    bottom_holes = [to_global_index(Side.A, i) for i in range(PITS_PER_SIDE)]
    top_labels = " ".join(f"[{h:2d}]" for h in top_holes)
    top_counts = " ".join(f" {int(state.pits[Side.B, h % PITS_PER_SIDE]):2d} " for h in top_holes)
    bottom_counts = " ".join(f" {int(state.pits[Side.A, h]):2d} " for h in bottom_holes)
    bottom_labels = " ".join(f"[{h:2d}]" for h in bottom_holes)
    width = len(top_labels)
    return "\n".join(
        [
            f"     {top_labels}",
            f"     {top_counts}",
            f"B:{state.store_b:2d}{' ' * (width + 2)}{state.store_a:2d}:A",
            f"     {bottom_counts}",
            f"     {bottom_labels}",
        ]
    )


def parse_selection(state: BoardState, raw: str) -> Tuple[Optional[int], Optional[str]]:
    text = raw.strip()
    if not text.lstrip("-").isdigit():
        return None, "Please enter a hole number."
    hole = int(text)
    check = check_selection(state, hole)
    if not check:
        return None, SELECTION_MESSAGES[check.reason]
    return hole, None


def describe_winner(state: BoardState, ai_sides: Set[Side]) -> str:
    result = winner(state)
    if result == GameResult.DRAW:
        return "The game was a tie!"
    side = Side.A if result == GameResult.SIDE_A_WIN else Side.B
    if side in ai_sides and len(ai_sides) == 1:
        return "AI wins!"
    return f"Player {int(side) + 1} wins!"


def play_game(
    config: PlayConfig,
    *,
    input_fn: Callable[[str], str] = input,
    output: Callable[[str], None] = print,
) -> GameResult:
    """Run one game; returns ``GameResult.ONGOING`` if a human quits."""
    state = new_game()
    ai_sides = config.ai_sides()
    search = MoveSearch(LoggingTracer() if config.trace_search else None)

    while not is_terminal(state):
        output("")
        output(format_board(state))
        side = state.turn
        if side in ai_sides:
            played = play_search_turn(state, side, search)
            holes = ", ".join(str(to_global_index(side, h)) for h in played)
            output(f"AI (side {side.name}) plays hole(s) {holes}")
            continue

        player_number = int(side) + 1
        raw = input_fn(f"Player {player_number} (side {side.name}), choose a hole or q: ")
        if raw.strip().lower() in {"q", "quit", "exit"}:
            output("Game abandoned.")
            return GameResult.ONGOING
        hole, error = parse_selection(state, raw)
        if hole is None:
            output(error)
            continue
        apply_move(state, hole)
        if state.turn == side and not is_terminal(state):
            output("Last stone in your store: go again.")

    sweep_remaining(state)
    output("")
    output(format_board(state))
    output(f"Final score: A={state.store_a}  B={state.store_b}")
    output(describe_winner(state, ai_sides))
    logger.info("game finished %d-%d", state.store_a, state.store_b)
    return winner(state)


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Mancala in the console.")
    parser.add_argument("--config", type=str, help="YAML file with PlayConfig fields")
    parser.add_argument("--mode", choices=MODES)
    parser.add_argument("--ai-side", choices=["A", "B"])
    parser.add_argument("--trace-search", action="store_true", default=None)
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args()

    config = load_play_config(
        args.config,
        {
            "mode": args.mode,
            "ai_side": args.ai_side,
            "trace_search": args.trace_search,
            "log_level": args.log_level,
        },
    )
    level = "DEBUG" if config.trace_search else config.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    play_game(config)


if __name__ == "__main__":
    main()
