"""
cubie_cube.py — Rubik's cube on the cubie level
===============================================

The cube is described by four arrays:

* ``corner_permutation[i]``: which corner piece sits in corner slot ``i``.
* ``corner_orientation[i]``: twist of that piece (0..2, additive mod 3).
* ``edge_permutation[i]``: which edge piece sits in edge slot ``i``.
* ``edge_orientation[i]``: flip of that piece (0..1, additive mod 2).

A ``Cube`` is an immutable value: ``perform_move`` never touches the
receiver, it returns a new ``Cube``. Any number of threads may share cubes
and call moves / coordinate queries concurrently without locking, which is
what a move/pruning table builder relies on.

### Moves

The 18 face turns are precomputed once at import into ``MOVE_TABLE``: for
every move and every destination slot, the slot the piece comes from and the
orientation it picks up on the way. For a turn of ``amount`` quarter turns the
piece at cycle position ``i`` lands on ``i + amount`` and collects the
quarter-turn deltas of the ``amount`` positions it passes, so every move is a
single pass over the pieces regardless of the amount.

### Construction

``Cube(cp, co, ep, eo)`` stores the arrays as given without any checks, for
trusted callers (e.g. a table builder reconstructing a known-good state).
``Cube.validated(...)`` runs ``verify()`` first and raises ``InvalidState``
for arrays that are not a reachable cube.

--------------------------------------------------------------------------

Copyright (c) 2025 Facundo Gauna & Ulises Carnevale. Licensed under MIT License.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from numbers import Integral
from typing import Dict, Iterable, NamedTuple, Sequence, Tuple, Union

import numpy as np

import cube_coords
from app_types import CoordinateSet, Face, Move, parse_moves
from config import (
    CORNER_NAMES,
    CORNER_ORIENTATIONS,
    EDGE_NAMES,
    EDGE_ORIENTATIONS,
    FACE_CORNER_CYCLES,
    FACE_CORNER_TWISTS,
    FACE_EDGE_CYCLES,
    FACE_EDGE_FLIPS,
    N_CORNERS,
    N_EDGES,
    TURN_AMOUNTS,
)
from cube_errors import InvalidState
from ranking import permutation_parity

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


# ************************ Moves on the cubie level ****************************

class MoveEffect(NamedTuple):
    """What one move does: per destination slot, the source slot and the orientation delta."""
    corner_source: Tuple[int, ...]
    corner_delta: Tuple[int, ...]
    edge_source: Tuple[int, ...]
    edge_delta: Tuple[int, ...]


def _cycle_effect(size: int, cycle: Sequence[int], quarter_deltas: Sequence[int],
                  amount: int, modulus: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Source slots and orientation deltas for turning one 4-cycle ``amount`` times.
    Slots outside the cycle map to themselves with no delta.
    """
    deltas = np.asarray(quarter_deltas, dtype=np.int64)
    # travelled[i] = sum of deltas at cycle positions i, i+1, ..., i+amount-1
    travelled = np.stack([np.roll(deltas, -j) for j in range(amount)]).sum(axis=0) % modulus

    source = list(range(size))
    delta = [0] * size
    n = len(cycle)
    for i, slot in enumerate(cycle):
        to = cycle[(i + amount) % n]
        source[to] = slot
        delta[to] = int(travelled[i])
    return tuple(source), tuple(delta)


def build_move_table() -> Dict[Move, MoveEffect]:
    """Precompute the effect of all 18 moves from the per-face quarter-turn definitions."""
    table: Dict[Move, MoveEffect] = {}
    for face in Face:
        corners = [CORNER_NAMES.index(c) for c in FACE_CORNER_CYCLES[face.name]]
        edges = [EDGE_NAMES.index(e) for e in FACE_EDGE_CYCLES[face.name]]
        for amount in TURN_AMOUNTS:
            corner_source, corner_delta = _cycle_effect(
                N_CORNERS, corners, FACE_CORNER_TWISTS[face.name], amount, CORNER_ORIENTATIONS)
            edge_source, edge_delta = _cycle_effect(
                N_EDGES, edges, FACE_EDGE_FLIPS[face.name], amount, EDGE_ORIENTATIONS)
            table[Move.of(face, amount)] = MoveEffect(corner_source, corner_delta, edge_source, edge_delta)
    logger.debug("Built move table with %d moves", len(table))
    return table


MOVE_TABLE: Dict[Move, MoveEffect] = build_move_table()


SOLVED_CORNER_PERMUTATION: Tuple[int, ...] = tuple(range(N_CORNERS))
SOLVED_CORNER_ORIENTATION: Tuple[int, ...] = (0,) * N_CORNERS
SOLVED_EDGE_PERMUTATION: Tuple[int, ...] = tuple(range(N_EDGES))
SOLVED_EDGE_ORIENTATION: Tuple[int, ...] = (0,) * N_EDGES


@dataclass(frozen=True)
class Cube:
    """Cube on the cubie level. Defaults to the solved cube."""

    corner_permutation: Tuple[int, ...] = SOLVED_CORNER_PERMUTATION
    corner_orientation: Tuple[int, ...] = SOLVED_CORNER_ORIENTATION
    edge_permutation: Tuple[int, ...] = SOLVED_EDGE_PERMUTATION
    edge_orientation: Tuple[int, ...] = SOLVED_EDGE_ORIENTATION

    def __post_init__(self):
        # store private tuple copies so the value cannot change behind our back
        for f in fields(self):
            object.__setattr__(self, f.name, tuple(getattr(self, f.name)))

    @classmethod
    def validated(cls, corner_permutation: Sequence[int], corner_orientation: Sequence[int],
                  edge_permutation: Sequence[int], edge_orientation: Sequence[int]) -> Cube:
        """Build a cube from untrusted arrays, raising InvalidState unless it is reachable."""
        cube = cls(corner_permutation, corner_orientation, edge_permutation, edge_orientation)
        cube.verify()
        return cube

    # ********************* Moves ***************************

    def perform_move(self, move: Union[Move, int, str]) -> Cube:
        """
        Return the cube obtained by applying ``move`` (a Move, a code 0..17 or
        a token such as "R'"). Raises InvalidMove for anything else.
        """
        effect = MOVE_TABLE[Move.coerce(move)]
        cp, co = self.corner_permutation, self.corner_orientation
        ep, eo = self.edge_permutation, self.edge_orientation

        return Cube(
            tuple(cp[s] for s in effect.corner_source),
            tuple((co[s] + d) % CORNER_ORIENTATIONS for s, d in zip(effect.corner_source, effect.corner_delta)),
            tuple(ep[s] for s in effect.edge_source),
            tuple((eo[s] + d) % EDGE_ORIENTATIONS for s, d in zip(effect.edge_source, effect.edge_delta)),
        )

    def apply_moves(self, moves: Union[str, Iterable[Union[Move, int, str]]]) -> Cube:
        """Apply a move sequence left to right ("R U R' U'" or an iterable of moves)."""
        cube = self
        for mv in parse_moves(moves):
            cube = cube.perform_move(mv)
        return cube

    # ********************* State checks ***************************

    def is_solved(self) -> bool:
        return (self.corner_permutation == SOLVED_CORNER_PERMUTATION
                and self.corner_orientation == SOLVED_CORNER_ORIENTATION
                and self.edge_permutation == SOLVED_EDGE_PERMUTATION
                and self.edge_orientation == SOLVED_EDGE_ORIENTATION)

    def corner_parity(self) -> int:
        """Parity of the corner permutation"""
        return permutation_parity(self.corner_permutation)

    def edge_parity(self) -> int:
        """Parity of the edge permutation. Corner and edge parity agree on every reachable cube."""
        return permutation_parity(self.edge_permutation)

    def verify(self) -> None:
        """
        Check the cube for solvability; raise InvalidState naming the first problem found.
        """
        problem = self._find_problem()
        if problem is not None:
            logger.debug("Rejected cube state: %s", problem)
            raise InvalidState(problem)

    def _find_problem(self):
        for f in fields(self):
            for v in getattr(self, f.name):
                if isinstance(v, bool) or not isinstance(v, Integral):
                    return f"{f.name} must hold integers, got {v!r}"

        if len(self.corner_permutation) != N_CORNERS or len(self.corner_orientation) != N_CORNERS:
            return f"Corner arrays must have {N_CORNERS} entries"
        if len(self.edge_permutation) != N_EDGES or len(self.edge_orientation) != N_EDGES:
            return f"Edge arrays must have {N_EDGES} entries"

        if sorted(self.edge_permutation) != list(SOLVED_EDGE_PERMUTATION):
            return f"Not all {N_EDGES} edges exist exactly once: {self.edge_permutation!r}"
        if any(o not in range(EDGE_ORIENTATIONS) for o in self.edge_orientation):
            return f"Edge orientations must be 0 or 1: {self.edge_orientation!r}"
        if sum(self.edge_orientation) % EDGE_ORIENTATIONS != 0:
            return "Flip error: One edge has to be flipped"

        if sorted(self.corner_permutation) != list(SOLVED_CORNER_PERMUTATION):
            return f"Not all {N_CORNERS} corners exist exactly once: {self.corner_permutation!r}"
        if any(o not in range(CORNER_ORIENTATIONS) for o in self.corner_orientation):
            return f"Corner orientations must be 0, 1 or 2: {self.corner_orientation!r}"
        if sum(self.corner_orientation) % CORNER_ORIENTATIONS != 0:
            return "Twist error: One corner has to be twisted"

        if self.edge_parity() != self.corner_parity():
            return "Parity error: Two corners or two edges have to be exchanged"
        return None

    # ********************* Normal coordinates ***************************

    def coord_corner_orientation(self) -> int:
        return cube_coords.corner_orientation_coord(self.corner_orientation)

    def coord_edge_orientation(self) -> int:
        return cube_coords.edge_orientation_coord(self.edge_orientation)

    def coord_corner_permutation(self) -> int:
        return cube_coords.corner_permutation_coord(self.corner_permutation)

    def coord_ud_sorted(self) -> int:
        return cube_coords.ud_sorted_coord(self.edge_permutation)

    def coord_rl_sorted(self) -> int:
        return cube_coords.rl_sorted_coord(self.edge_permutation)

    def coord_fb_sorted(self) -> int:
        return cube_coords.fb_sorted_coord(self.edge_permutation)

    # ********************* Meta coordinates ***************************

    edge_permutation_calc = staticmethod(cube_coords.edge_permutation_calc)
    ud_unsorted_calc = staticmethod(cube_coords.ud_unsorted_calc)
    ud_permutation_calc = staticmethod(cube_coords.ud_permutation_calc)

    def coord_edge_permutation(self) -> int:
        return self.edge_permutation_calc(self.coord_rl_sorted(), self.coord_fb_sorted())

    def coord_ud_unsorted(self) -> int:
        return self.ud_unsorted_calc(self.coord_ud_sorted())

    def coord_ud_permutation(self) -> int:
        return self.ud_permutation_calc(self.coord_ud_sorted())

    def coordinates(self) -> CoordinateSet:
        """All coordinates at once; each sorted slice value is computed a single time."""
        ud_sorted = self.coord_ud_sorted()
        rl_sorted = self.coord_rl_sorted()
        fb_sorted = self.coord_fb_sorted()
        return CoordinateSet(
            corner_orientation=self.coord_corner_orientation(),
            edge_orientation=self.coord_edge_orientation(),
            corner_permutation=self.coord_corner_permutation(),
            ud_sorted=ud_sorted,
            rl_sorted=rl_sorted,
            fb_sorted=fb_sorted,
            edge_permutation=self.edge_permutation_calc(rl_sorted, fb_sorted),
            ud_unsorted=self.ud_unsorted_calc(ud_sorted),
            ud_permutation=self.ud_permutation_calc(ud_sorted),
        )
