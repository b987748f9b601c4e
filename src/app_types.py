from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from numbers import Integral
from typing import Iterable, List, Union

from config import AMOUNT_SUFFIX, MOVE_FACE_ORDER, TURN_AMOUNTS
from cube_errors import InvalidMove


class Face(IntEnum):
    U = 0
    L = 1
    F = 2
    R = 3
    B = 4
    D = 5


class Corner(IntEnum):
    URF = 0
    UFL = 1
    ULB = 2
    UBR = 3
    DFR = 4
    DLF = 5
    DBL = 6
    DRB = 7


class Edge(IntEnum):
    UR = 0
    UF = 1
    UL = 2
    UB = 3
    DR = 4
    DF = 5
    DL = 6
    DB = 7
    FR = 8
    FL = 9
    BL = 10
    BR = 11


class Move(IntEnum):
    """
    The 18 legal face turns. Code = 3 * face + (amount - 1), so every face
    owns three consecutive codes: quarter turn, half turn, reverse turn.
    """
    U = 0
    U2 = 1
    U_PRIME = 2
    L = 3
    L2 = 4
    L_PRIME = 5
    F = 6
    F2 = 7
    F_PRIME = 8
    R = 9
    R2 = 10
    R_PRIME = 11
    B = 12
    B2 = 13
    B_PRIME = 14
    D = 15
    D2 = 16
    D_PRIME = 17

    @property
    def face(self) -> Face:
        return Face(self.value // len(TURN_AMOUNTS))

    @property
    def amount(self) -> int:
        """Number of clockwise quarter turns (1, 2 or 3)."""
        return self.value % len(TURN_AMOUNTS) + 1

    @property
    def token(self) -> str:
        return self.face.name + AMOUNT_SUFFIX[self.amount]

    @property
    def inverse(self) -> Move:
        return Move.of(self.face, 4 - self.amount)

    @classmethod
    def of(cls, face: Union[Face, int, str], amount: int) -> Move:
        if isinstance(face, str):
            if face not in MOVE_FACE_ORDER:
                raise InvalidMove(f"Unknown face: {face!r}")
            face = Face[face]
        elif isinstance(face, bool) or not isinstance(face, Integral):
            raise InvalidMove(f"Unknown face: {face!r}")
        else:
            try:
                face = Face(int(face))
            except ValueError:
                raise InvalidMove(f"Unknown face: {face!r}") from None
        if isinstance(amount, bool) or amount not in TURN_AMOUNTS:
            raise InvalidMove(f"Turn amount must be 1, 2 or 3, got {amount!r}")
        return cls(int(face) * len(TURN_AMOUNTS) + amount - 1)

    @classmethod
    def parse(cls, token: str) -> Move:
        """
        Parse a single move token in standard notation ("R", "U'", "F2").
        "2'" is accepted as a half turn.
        """
        tok = token.strip()
        if not tok or tok[0].upper() not in MOVE_FACE_ORDER:
            raise InvalidMove(f"Unknown move token: {token!r}")
        base, suffix = tok[0].upper(), tok[1:]
        if suffix == '':
            amount = 1
        elif suffix in ('2', "2'"):
            amount = 2
        elif suffix == "'":
            amount = 3
        else:
            raise InvalidMove(f"Unknown move token: {token!r}")
        return cls.of(base, amount)

    @classmethod
    def coerce(cls, value: Union[Move, int, str]) -> Move:
        """Turn a Move, an integer code 0..17 (numpy integers included) or a notation token into a Move."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise InvalidMove(f"Not a move: {value!r}")
        if isinstance(value, Integral):
            try:
                return cls(int(value))
            except ValueError:
                raise InvalidMove(f"Move code must be in 0..{len(cls) - 1}, got {value!r}") from None
        if isinstance(value, str):
            return cls.parse(value)
        raise InvalidMove(f"Not a move: {value!r}")


def parse_moves(seq: Union[str, Iterable[Union[Move, int, str]]]) -> List[Move]:
    """
    Parse a whitespace-separated move sequence ("R U R' U'") or coerce an
    iterable of moves/codes/tokens into a list of Move.
    """
    if isinstance(seq, str):
        seq = seq.split()
    return [Move.coerce(mv) for mv in seq]


@dataclass(frozen=True)
class CoordinateSet:
    """Every coordinate of one cube state, as handed to a table builder."""
    corner_orientation: int
    edge_orientation: int
    corner_permutation: int
    ud_sorted: int
    rl_sorted: int
    fb_sorted: int
    edge_permutation: int
    ud_unsorted: int
    ud_permutation: int
