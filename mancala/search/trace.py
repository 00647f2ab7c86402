"""Optional observers for the move search.

The search calls these hooks while it explores candidates; without a tracer it
produces no output at all.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from mancala.core import Side

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceEvent:
    kind: str  # "candidate", "empty" or "decision"
    depth: int
    side: Side
    hole: int
    score: Optional[int] = None


class SearchTracer:
    """No-op base class; override the hooks of interest."""

    def on_candidate(self, depth: int, side: Side, hole: int, score: int) -> None:
        pass

    def on_empty(self, depth: int, side: Side, hole: int) -> None:
        pass

    def on_decision(self, depth: int, side: Side, hole: int, score: int) -> None:
        pass


class LoggingTracer(SearchTracer):
    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG) -> None:
        self.log = log or logger
        self.level = level

    def on_candidate(self, depth: int, side: Side, hole: int, score: int) -> None:
        self.log.log(self.level, "%shole %d -> resulting store %d", _indent(depth), hole, score)

    def on_empty(self, depth: int, side: Side, hole: int) -> None:
        self.log.log(self.level, "%shole %d is empty", _indent(depth), hole)

    def on_decision(self, depth: int, side: Side, hole: int, score: int) -> None:
        self.log.log(
            self.level,
            "%sside %s best hole %d (store %d)",
            _indent(depth),
            side.name,
            hole,
            score,
        )


class RecordingTracer(SearchTracer):
    def __init__(self) -> None:
        self.events: List[TraceEvent] = []

    def on_candidate(self, depth: int, side: Side, hole: int, score: int) -> None:
        self.events.append(TraceEvent("candidate", depth, side, hole, score))

    def on_empty(self, depth: int, side: Side, hole: int) -> None:
        self.events.append(TraceEvent("empty", depth, side, hole))

    def on_decision(self, depth: int, side: Side, hole: int, score: int) -> None:
        self.events.append(TraceEvent("decision", depth, side, hole, score))

    def decisions(self, depth: Optional[int] = None) -> List[TraceEvent]:
        return [
            event
            for event in self.events
            if event.kind == "decision" and (depth is None or event.depth == depth)
        ]


def _indent(depth: int) -> str:
    return "   " * depth
