"""config.py — project constants for the cubie-level cube core
------------------------------------------------------------

This file centralizes the fixed tables the cube model is built from: the
enumeration of corner/edge slots, the order of faces and moves, the cycles a
quarter turn of each face performs, and the sizes of every coordinate.

Notes
- Slot numbering follows the usual Kociemba convention, so states produced
  here can be handed to the `kociemba` library without any re-indexing.
- Changing any table here changes every coordinate value; table files built
  by a search driver are only valid for the exact tables they were built with.

-------------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from typing import Dict, List, Tuple

# ---------------- Pieces ----------------

# Corner positions. Corner URF e.g., has an U(p), a R(ight) and a F(ront) facelet.
CORNER_NAMES: Tuple[str, ...] = ('URF', 'UFL', 'ULB', 'UBR', 'DFR', 'DLF', 'DBL', 'DRB')

# Edge positions. Edge UR e.g., has an U(p) and R(ight) facelet.
# The UD-slice edges (FR, FL, BL, BR) take the four highest slots.
EDGE_NAMES: Tuple[str, ...] = ('UR', 'UF', 'UL', 'UB', 'DR', 'DF', 'DL', 'DB', 'FR', 'FL', 'BL', 'BR')

N_CORNERS: int = len(CORNER_NAMES)
N_EDGES: int = len(EDGE_NAMES)

# Orientation is additive modulo these values.
CORNER_ORIENTATIONS: int = 3
EDGE_ORIENTATIONS: int = 2

TWIST_NONE: int = 0
TWIST_CW: int = 1
TWIST_CCW: int = -1

FLIP_NONE: int = 0
FLIP_FLIP: int = 1

# ---------------- Faces & moves ----------------

# Move codes are laid out face by face in this order, amount 1, 2, 3 within a face.
MOVE_FACE_ORDER: List[str] = ['U', 'L', 'F', 'R', 'B', 'D']
TURN_AMOUNTS: Tuple[int, ...] = (1, 2, 3)
N_MOVES: int = len(MOVE_FACE_ORDER) * len(TURN_AMOUNTS)

# Suffix used in move notation for each turn amount ('' -> 1, '2' -> 2, "'" -> 3)
AMOUNT_SUFFIX: Dict[int, str] = {1: '', 2: '2', 3: "'"}

# Per-face quarter-turn definition. A clockwise quarter turn carries the piece
# in cycle position i to cycle position i + 1; the twist/flip listed at
# position i is what the piece leaving position i picks up on the way.
FACE_CORNER_CYCLES: Dict[str, Tuple[str, ...]] = {
    'U': ('URF', 'UFL', 'ULB', 'UBR'),
    'L': ('UFL', 'DLF', 'DBL', 'ULB'),
    'F': ('URF', 'DFR', 'DLF', 'UFL'),
    'R': ('URF', 'UBR', 'DRB', 'DFR'),
    'B': ('UBR', 'ULB', 'DBL', 'DRB'),
    'D': ('DFR', 'DRB', 'DBL', 'DLF'),
}

FACE_EDGE_CYCLES: Dict[str, Tuple[str, ...]] = {
    'U': ('UF', 'UL', 'UB', 'UR'),
    'L': ('UL', 'FL', 'DL', 'BL'),
    'F': ('UF', 'FR', 'DF', 'FL'),
    'R': ('UR', 'BR', 'DR', 'FR'),
    'B': ('UB', 'BL', 'DB', 'BR'),
    'D': ('DF', 'DR', 'DB', 'DL'),
}

FACE_CORNER_TWISTS: Dict[str, Tuple[int, ...]] = {
    'U': (TWIST_NONE, TWIST_NONE, TWIST_NONE, TWIST_NONE),
    'L': (TWIST_CCW, TWIST_CW, TWIST_CCW, TWIST_CW),
    'F': (TWIST_CCW, TWIST_CW, TWIST_CCW, TWIST_CW),
    'R': (TWIST_CW, TWIST_CCW, TWIST_CW, TWIST_CCW),
    'B': (TWIST_CW, TWIST_CCW, TWIST_CW, TWIST_CCW),
    'D': (TWIST_NONE, TWIST_NONE, TWIST_NONE, TWIST_NONE),
}

# Only F and B flip edges.
FACE_EDGE_FLIPS: Dict[str, Tuple[int, ...]] = {
    'U': (FLIP_NONE, FLIP_NONE, FLIP_NONE, FLIP_NONE),
    'L': (FLIP_NONE, FLIP_NONE, FLIP_NONE, FLIP_NONE),
    'F': (FLIP_FLIP, FLIP_FLIP, FLIP_FLIP, FLIP_FLIP),
    'R': (FLIP_NONE, FLIP_NONE, FLIP_NONE, FLIP_NONE),
    'B': (FLIP_FLIP, FLIP_FLIP, FLIP_FLIP, FLIP_FLIP),
    'D': (FLIP_NONE, FLIP_NONE, FLIP_NONE, FLIP_NONE),
}

# ---------------- Slices ----------------

# The four edges whose solved homes make up each middle layer.
UD_SLICE_EDGES: Tuple[str, ...] = ('FR', 'FL', 'BL', 'BR')
RL_SLICE_EDGES: Tuple[str, ...] = ('UF', 'UB', 'DB', 'DF')
FB_SLICE_EDGES: Tuple[str, ...] = ('UR', 'UL', 'DL', 'DR')

SLICE_SIZE: int = 4
SLICE_ORDERS: int = 24  # 4!

# ---------------- Coordinate sizes ----------------

N_CORNER_ORIENTATION: int = 3 ** 7      # 0..2186
N_EDGE_ORIENTATION: int = 2 ** 11       # 0..2047
N_CORNER_PERMUTATION: int = 40320       # 8!
N_SLICE_SORTED: int = 11880             # 12 * 11 * 10 * 9
N_EDGE_PERMUTATION: int = 40320         # 8!, phase 2 only
N_UD_UNSORTED: int = 495                # 12 choose 4
N_UD_PERMUTATION: int = SLICE_ORDERS

# ---------------- Facelets ----------------

# Facelet strings follow the kociemba order U1..U9, R1..R9, F1..F9, D1..D9, L1..L9, B1..B9.
FACELET_FACE_ORDER: List[str] = ['U', 'R', 'F', 'D', 'L', 'B']
SOLVED_FACELETS: str = ''.join(face * 9 for face in FACELET_FACE_ORDER)

# CORNER_FACELETS[URF][0] gives the facelet in the URF corner position which
# defines the orientation; the other two follow clockwise.
CORNER_FACELETS: Tuple[Tuple[str, str, str], ...] = (
    ('U9', 'R1', 'F3'), ('U7', 'F1', 'L3'), ('U1', 'L1', 'B3'), ('U3', 'B1', 'R3'),
    ('D3', 'F9', 'R7'), ('D1', 'L9', 'F7'), ('D7', 'B9', 'L7'), ('D9', 'R9', 'B7'),
)

# EDGE_FACELETS[UR][0] gives the facelet in the UR edge position which defines the orientation.
EDGE_FACELETS: Tuple[Tuple[str, str], ...] = (
    ('U6', 'R2'), ('U8', 'F2'), ('U4', 'L2'), ('U2', 'B2'), ('D6', 'R8'), ('D2', 'F8'),
    ('D4', 'L8'), ('D8', 'B8'), ('F6', 'R4'), ('F4', 'L6'), ('B6', 'L4'), ('B4', 'R6'),
)
