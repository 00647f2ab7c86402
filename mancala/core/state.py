from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

PitArray = NDArray[np.int16]


class Side(IntEnum):
    A = 0
    B = 1

    @property
    def opponent(self) -> "Side":
        return Side(1 - int(self))


class GameResult(Enum):
    ONGOING = "ongoing"
    SIDE_A_WIN = "side_a_win"
    SIDE_B_WIN = "side_b_win"
    DRAW = "draw"


@dataclass(frozen=True)
class MoveRecord:
    mover: Side
    hole: int  # local index on the mover's side
    stones: int
    landed_in_store: bool
    captured: int = 0  # stones taken from the opposite pit

    @property
    def extra_turn(self) -> bool:
        return self.landed_in_store


@dataclass
class BoardState:
    pits: PitArray  # shape (2, 6), indexed [side, local pit]
    stores: PitArray  # shape (2,)
    turn: Side = Side.A
    last_move: Optional[MoveRecord] = None

    def copy(self) -> "BoardState":
        return BoardState(
            pits=self.pits.copy(),
            stores=self.stores.copy(),
            turn=self.turn,
            last_move=self.last_move,
        )

    @property
    def store_a(self) -> int:
        return int(self.stores[Side.A])

    @property
    def store_b(self) -> int:
        return int(self.stores[Side.B])

    def store(self, side: Side) -> int:
        return int(self.stores[int(side)])

    def side_pits(self, side: Side) -> PitArray:
        return self.pits[int(side)]

    def side_total(self, side: Side) -> int:
        return int(self.pits[int(side)].sum())

    def total_stones(self) -> int:
        return int(self.pits.sum() + self.stores.sum())

    def __repr__(self) -> str:
        top = " ".join(f"{int(n):2d}" for n in self.pits[Side.B][::-1])
        bottom = " ".join(f"{int(n):2d}" for n in self.pits[Side.A])
        return (
            f"BoardState(turn={self.turn.name}, stores=({self.store_a}, {self.store_b}))\n"
            f"   {top}\n"
            f"{self.store_b:2d}{' ' * (3 * self.pits.shape[1] + 1)}{self.store_a:2d}\n"
            f"   {bottom}"
        )
