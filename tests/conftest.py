import random
from typing import List

import pytest

from app_types import Move
from config import MOVE_FACE_ORDER
from cubie_cube import Cube

MODS = ['', "'", '2']  # normal, inverse, double

# moves that keep the cube inside the phase-2 subgroup <U, D, L2, R2, F2, B2>
PHASE2_MOVES = [Move.U, Move.U2, Move.U_PRIME, Move.D, Move.D2, Move.D_PRIME,
                Move.L2, Move.R2, Move.F2, Move.B2]


def random_scramble_moves(rng: random.Random, length: int = 25, avoid_cancel: bool = True) -> List[str]:
    """
    Generate a random scramble (list of move tokens) of given length.
    avoid_cancel avoids turning the same face twice in a row.
    """
    moves = []
    prev_face = None
    for _ in range(length):
        face = rng.choice(MOVE_FACE_ORDER)
        if avoid_cancel:
            while face == prev_face:
                face = rng.choice(MOVE_FACE_ORDER)
        moves.append(face + rng.choice(MODS))
        prev_face = face
    return moves


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def scrambles(rng):
    return [random_scramble_moves(rng, length=rng.randint(1, 30)) for _ in range(150)]


@pytest.fixture
def reachable_cubes(scrambles):
    return [Cube().apply_moves(s) for s in scrambles]


@pytest.fixture
def phase2_cubes(rng):
    cubes = []
    for _ in range(100):
        seq = [rng.choice(PHASE2_MOVES) for _ in range(rng.randint(1, 25))]
        cubes.append(Cube().apply_moves(seq))
    return cubes
