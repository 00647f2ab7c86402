from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np

from .state import BoardState, GameResult, MoveRecord, Side

PITS_PER_SIDE = 6
STARTING_STONES = 6
TOTAL_STONES = 2 * PITS_PER_SIDE * STARTING_STONES
GLOBAL_HOLE_COUNT = 2 * PITS_PER_SIDE
# Ring order: A pits 0..5, A store, B pits 0..5, B store.
RING_SIZE = 2 * (PITS_PER_SIDE + 1)

SELECTION_OUT_OF_RANGE = "out_of_range"
SELECTION_WRONG_SIDE = "wrong_side"
SELECTION_EMPTY_PIT = "empty_pit"
SELECTION_GAME_OVER = "game_over"


@dataclass(frozen=True)
class SelectionCheck:
    hole: int
    ok: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


class IllegalMoveError(ValueError):
    def __init__(self, check: SelectionCheck) -> None:
        super().__init__(f"Illegal selection {check.hole}: {check.reason}")
        self.check = check


def to_local_index(global_index: int) -> int:
    return global_index % PITS_PER_SIDE


def to_global_index(side: Side, local_index: int) -> int:
    return int(side) * PITS_PER_SIDE + local_index


def side_of_global_index(global_index: int) -> Side:
    if not 0 <= global_index < GLOBAL_HOLE_COUNT:
        raise ValueError(f"Hole index {global_index} out of range.")
    return Side(global_index // PITS_PER_SIDE)


def opposite_pit(local_index: int) -> int:
    # Pits face each other by local index: A pit i sits across from B pit i.
    return local_index


def new_game() -> BoardState:
    return BoardState(
        pits=np.full((2, PITS_PER_SIDE), STARTING_STONES, dtype=np.int16),
        stores=np.zeros(2, dtype=np.int16),
        turn=Side.A,
    )


def reset_game(state: BoardState) -> BoardState:
    state.pits[:, :] = STARTING_STONES
    state.stores[:] = 0
    state.turn = Side.A
    state.last_move = None
    return state


def is_valid_selection(side: Side, global_index: int) -> bool:
    start = int(side) * PITS_PER_SIDE
    return start <= global_index < start + PITS_PER_SIDE


def check_selection(state: BoardState, global_index: int) -> SelectionCheck:
    """Validate a global hole number for the side to move.

    Returns a checked result rather than raising; ``apply_move`` itself does
    not validate and must only be given selections that pass this check.
    """
    if not 0 <= global_index < GLOBAL_HOLE_COUNT:
        return SelectionCheck(global_index, False, SELECTION_OUT_OF_RANGE)
    if is_terminal(state):
        return SelectionCheck(global_index, False, SELECTION_GAME_OVER)
    if not is_valid_selection(state.turn, global_index):
        return SelectionCheck(global_index, False, SELECTION_WRONG_SIDE)
    if state.pits[int(state.turn), to_local_index(global_index)] == 0:
        return SelectionCheck(global_index, False, SELECTION_EMPTY_PIT)
    return SelectionCheck(global_index, True)


def require_valid_selection(state: BoardState, global_index: int) -> None:
    check = check_selection(state, global_index)
    if not check:
        raise IllegalMoveError(check)


def legal_moves(state: BoardState, side: Optional[Side] = None) -> List[int]:
    if side is None:
        side = state.turn
    return [int(i) for i in np.flatnonzero(state.pits[int(side)])]


def apply_move(state: BoardState, hole_index: int) -> BoardState:
    """Sow the stones of ``hole_index`` for the side to move, in place.

    ``hole_index`` may be local (0-5) or global (0-11); only its position
    within the side matters. The selected pit must be non-empty.
    """
    mover = Side(state.turn)
    local = to_local_index(hole_index)
    stones = int(state.pits[mover, local])
    state.pits[mover, local] = 0

    own_store = _store_position(mover)
    skipped_store = _store_position(mover.opponent)
    position = _pit_position(mover, local)
    placed = 0
    while placed < stones:
        position = (position + 1) % RING_SIZE
        if position == skipped_store:
            continue
        _deposit(state, position)
        placed += 1

    landed_in_store = position == own_store
    captured = 0
    if not landed_in_store:
        side, pit = _position_to_pit(position)
        # One stone after the deposit means the pit was empty before it.
        if side == mover and state.pits[side, pit] == 1:
            captured = _capture(state, mover, pit)

    state.last_move = MoveRecord(
        mover=mover,
        hole=local,
        stones=stones,
        landed_in_store=landed_in_store,
        captured=captured,
    )
    if not landed_in_store:
        state.turn = mover.opponent
    return state


def is_terminal(state: BoardState) -> bool:
    return state.side_total(Side.A) == 0 or state.side_total(Side.B) == 0


def sweep_remaining(state: BoardState) -> BoardState:
    state.stores += state.pits.sum(axis=1).astype(state.stores.dtype)
    state.pits[:, :] = 0
    return state


def winner(state: BoardState) -> GameResult:
    if state.store_a > state.store_b:
        return GameResult.SIDE_A_WIN
    if state.store_b > state.store_a:
        return GameResult.SIDE_B_WIN
    return GameResult.DRAW


def game_result(state: BoardState) -> GameResult:
    if not is_terminal(state):
        return GameResult.ONGOING
    return winner(sweep_remaining(state.copy()))


def _capture(state: BoardState, mover: Side, pit: int) -> int:
    across = opposite_pit(pit)
    taken = int(state.pits[mover.opponent, across])
    state.stores[mover] += taken + 1
    state.pits[mover.opponent, across] = 0
    state.pits[mover, pit] = 0
    return taken


def _deposit(state: BoardState, position: int) -> None:
    side, pit = _position_to_pit(position)
    if pit is None:
        state.stores[side] += 1
    else:
        state.pits[side, pit] += 1


def _pit_position(side: Side, local: int) -> int:
    return int(side) * (PITS_PER_SIDE + 1) + local


def _store_position(side: Side) -> int:
    return int(side) * (PITS_PER_SIDE + 1) + PITS_PER_SIDE


def _position_to_pit(position: int) -> Tuple[Side, Optional[int]]:
    side, offset = divmod(position, PITS_PER_SIDE + 1)
    if offset == PITS_PER_SIDE:
        return Side(side), None
    return Side(side), offset
