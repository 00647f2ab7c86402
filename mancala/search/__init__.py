"""Move search for the automated player."""

from .greedy import MoveSearch, SearchResult, choose_move, play_search_turn
from .trace import LoggingTracer, RecordingTracer, SearchTracer, TraceEvent

__all__ = [
    "MoveSearch",
    "SearchResult",
    "choose_move",
    "play_search_turn",
    "LoggingTracer",
    "RecordingTracer",
    "SearchTracer",
    "TraceEvent",
]
