"""
facelets.py — cubie cube to facelet string
==========================================

 * The names of the facelet positions of the cube
 *             |************|
 *             |*U1**U2**U3*|
 *             |************|
 *             |*U4**U5**U6*|
 *             |************|
 *             |*U7**U8**U9*|
 *             |************|
 * ************|************|************|************|
 * *L1**L2**L3*|*F1**F2**F3*|*R1**R2**R3*|*B1**B2**B3*|
 * ************|************|************|************|
 * *L4**L5**L6*|*F4**F5**F6*|*R4**R5**R6*|*B4**B5**B6*|
 * ************|************|************|************|
 * *L7**L8**L9*|*F7**F8**F9*|*R7**R8**R9*|*B7**B8**B9*|
 * ************|************|************|************|
 *             |************|
 *             |*D1**D2**D3*|
 *             |************|
 *             |*D4**D5**D6*|
 *             |************|
 *             |*D7**D8**D9*|
 *             |************|

A facelet string lists the face letter seen at U1..U9, R1..R9, F1..F9,
D1..D9, L1..L9, B1..B9, which is the input format of ``kociemba.solve``.
The colors of a piece are the letters of its name: corner DFR shows D, F and
R, clockwise starting from its U/D facelet.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from typing import Dict, List

from config import (
    CORNER_FACELETS,
    CORNER_NAMES,
    EDGE_FACELETS,
    EDGE_NAMES,
    FACELET_FACE_ORDER,
)

# facelet label ('U1'..'B9') -> index 0..53
FACELET_INDEX: Dict[str, int] = {
    f"{face}{i}": fi * 9 + i - 1
    for fi, face in enumerate(FACELET_FACE_ORDER)
    for i in range(1, 10)
}

_CENTERS = {FACELET_INDEX[f"{face}5"]: face for face in FACELET_FACE_ORDER}


def to_facelet_string(cube) -> str:
    """Return the 54-character facelet representation of a cube."""
    f: List[str] = ['?'] * 54
    for index, face in _CENTERS.items():
        f[index] = face

    for i, piece in enumerate(cube.corner_permutation):
        ori = cube.corner_orientation[i]
        for n in range(3):
            f[FACELET_INDEX[CORNER_FACELETS[i][(n + ori) % 3]]] = CORNER_NAMES[piece][n]

    for i, piece in enumerate(cube.edge_permutation):
        ori = cube.edge_orientation[i]
        for n in range(2):
            f[FACELET_INDEX[EDGE_FACELETS[i][(n + ori) % 2]]] = EDGE_NAMES[piece][n]

    return ''.join(f)
