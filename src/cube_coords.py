"""
cube_coords.py — coordinates of a cubie-level cube state
========================================================

Two kinds of coordinate are computed here:

* **Normal coordinates** are extracted directly from the raw state arrays
  (corner/edge orientation, corner permutation and the three sorted slice
  coordinates).
* **Meta coordinates** are plain arithmetic over normal coordinates and never
  look at the cube (edge permutation, unsorted UD slice, UD slice
  permutation). Table builders that already hold the sorted slice values can
  call the ``*_calc`` functions directly.

The functions take the raw tuples so a table builder can use them without
building a ``Cube``; ``Cube`` exposes the same values as ``coord_*`` methods.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Sequence

from config import (
    CORNER_ORIENTATIONS,
    EDGE_NAMES,
    EDGE_ORIENTATIONS,
    FB_SLICE_EDGES,
    RL_SLICE_EDGES,
    SLICE_ORDERS,
    SLICE_SIZE,
    UD_SLICE_EDGES,
)
from ranking import binom, positional_value, rank_higher, rank_lower


def _edge_set(names: Iterable[str]) -> FrozenSet[int]:
    return frozenset(EDGE_NAMES.index(name) for name in names)


UD_SLICE: FrozenSet[int] = _edge_set(UD_SLICE_EDGES)
RL_SLICE: FrozenSet[int] = _edge_set(RL_SLICE_EDGES)
FB_SLICE: FrozenSet[int] = _edge_set(FB_SLICE_EDGES)


# ********************* Normal coordinates ***************************

def corner_orientation_coord(corner_orientation: Sequence[int]) -> int:
    """Twist of the 8 corners, 0 <= twist < 3^7. The last corner is implied by the others."""
    return positional_value(corner_orientation[:-1], CORNER_ORIENTATIONS)


def edge_orientation_coord(edge_orientation: Sequence[int]) -> int:
    """Flip of the 12 edges, 0 <= flip < 2^11. The last edge is implied by the others."""
    return positional_value(edge_orientation[:-1], EDGE_ORIENTATIONS)


def corner_permutation_coord(corner_permutation: Sequence[int]) -> int:
    """Lexicographic rank of the corner permutation, 0 <= rank < 8!."""
    return rank_lower(corner_permutation)


def slice_sorted_coord(edge_permutation: Sequence[int], edges: FrozenSet[int]) -> int:
    """
    Sorted slice coordinate for a set of 4 edges, 0 <= coord < 12*11*10*9.

    Returns 24 * x + y where x ranks the set of slots the edges occupy and y
    ranks the order in which they appear, read from the highest slot down.
    """
    k = SLICE_SIZE
    pos_rank = 0
    order = []
    for n in range(len(edge_permutation) - 1, -1, -1):
        edge = edge_permutation[n]
        if edge in edges:
            # (n choose k) is zero once n < k
            if n >= k:
                pos_rank += binom(n, k)
            k -= 1
            order.append(edge)

    return SLICE_ORDERS * pos_rank + rank_higher(order)


def ud_sorted_coord(edge_permutation: Sequence[int]) -> int:
    return slice_sorted_coord(edge_permutation, UD_SLICE)


def rl_sorted_coord(edge_permutation: Sequence[int]) -> int:
    return slice_sorted_coord(edge_permutation, RL_SLICE)


def fb_sorted_coord(edge_permutation: Sequence[int]) -> int:
    return slice_sorted_coord(edge_permutation, FB_SLICE)


# ********************* Meta coordinates ***************************

def edge_permutation_calc(rl_sorted: int, fb_sorted: int) -> int:
    """
    Permutation of the 8 U/D-layer edges, 0 <= coord < 8!.

    Only meaningful once the 4 UD-slice edges are inside the UD slice.
    """
    return SLICE_ORDERS * rl_sorted + fb_sorted % SLICE_ORDERS


def ud_unsorted_calc(ud_sorted: int) -> int:
    """Slots of the UD-slice edges regardless of their order, 0 <= coord < 495."""
    return ud_sorted // SLICE_ORDERS


def ud_permutation_calc(ud_sorted: int) -> int:
    """Order of the UD-slice edges among themselves, 0 <= coord < 24."""
    return ud_sorted % SLICE_ORDERS
