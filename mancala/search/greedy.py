from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional

from mancala.core import (
    PITS_PER_SIDE,
    BoardState,
    Side,
    apply_move,
    is_terminal,
)

from .trace import SearchTracer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchResult:
    hole: int
    score: int


class MoveSearch:
    """Pick the hole that maximises the searching side's own store.

    Each candidate is played on a clone; while the move earns an extra turn the
    search recurses to choose the follow-up and plays it too, so a candidate is
    scored only after its whole chain of extra turns has settled. Opponent
    replies are never explored.
    """

    def __init__(self, tracer: Optional[SearchTracer] = None) -> None:
        self.tracer = tracer or SearchTracer()

    def choose_move(self, state: BoardState, side: Side) -> int:
        return self._search(state, Side(side), depth=0).hole

    def evaluate(self, state: BoardState, side: Side) -> List[SearchResult]:
        root = self._root(state, Side(side))
        return list(self._candidates(root, Side(side), depth=0))

    # ------------------------------------------------------------------
    def _search(self, state: BoardState, side: Side, depth: int) -> SearchResult:
        root = self._root(state, side)
        best: Optional[SearchResult] = None
        for result in self._candidates(root, side, depth):
            # Strictly greater: ties keep the lowest hole.
            if best is None or result.score > best.score:
                best = result
        if best is None:
            best = SearchResult(hole=0, score=root.store(side))
        self.tracer.on_decision(depth, side, best.hole, best.score)
        return best

    def _candidates(self, root: BoardState, side: Side, depth: int) -> Iterator[SearchResult]:
        for hole in range(PITS_PER_SIDE):
            if root.pits[side, hole] == 0:
                self.tracer.on_empty(depth, side, hole)
                continue
            trial = root.copy()
            apply_move(trial, hole)
            while trial.turn == side and trial.side_total(side) > 0:
                follow_up = self._search(trial, side, depth + 1).hole
                apply_move(trial, follow_up)
            score = trial.store(side)
            self.tracer.on_candidate(depth, side, hole, score)
            yield SearchResult(hole=hole, score=score)

    @staticmethod
    def _root(state: BoardState, side: Side) -> BoardState:
        root = state.copy()
        root.turn = side
        return root


def choose_move(state: BoardState, side: Side, *, tracer: Optional[SearchTracer] = None) -> int:
    return MoveSearch(tracer).choose_move(state, side)


def play_search_turn(
    state: BoardState,
    side: Side,
    search: Optional[MoveSearch] = None,
) -> List[int]:
    """Play every move of ``side``'s turn on the live board, extra turns included."""
    search = search or MoveSearch()
    played: List[int] = []
    while state.turn == side and not is_terminal(state):
        hole = search.choose_move(state, side)
        apply_move(state, hole)
        played.append(hole)
    logger.debug("side %s played holes %s", Side(side).name, played)
    return played
