import pytest

from app_types import Move
from config import SOLVED_FACELETS
from conftest import random_scramble_moves
from cubie_cube import Cube
from facelets import FACELET_INDEX, to_facelet_string


def test_solved_cube_facelets():
    assert to_facelet_string(Cube()) == SOLVED_FACELETS
    assert SOLVED_FACELETS == "U" * 9 + "R" * 9 + "F" * 9 + "D" * 9 + "L" * 9 + "B" * 9


def test_facelet_index_layout():
    assert FACELET_INDEX["U1"] == 0
    assert FACELET_INDEX["R5"] == 13
    assert FACELET_INDEX["B9"] == 53
    assert len(FACELET_INDEX) == 54


def test_u_move_facelets():
    expected = ("U" * 9
                + "BBB" + "R" * 6
                + "RRR" + "F" * 6
                + "D" * 9
                + "FFF" + "L" * 6
                + "LLL" + "B" * 6)
    assert to_facelet_string(Cube().perform_move(Move.U)) == expected


def test_every_face_shows_nine_stickers(reachable_cubes):
    for cube in reachable_cubes[:30]:
        s = to_facelet_string(cube)
        assert "?" not in s
        for face in "URFDLB":
            assert s.count(face) == 9


def test_kociemba_solution_solves_our_cube(rng):
    kociemba = pytest.importorskip("kociemba")
    for _ in range(3):
        scramble = random_scramble_moves(rng, length=20)
        cube = Cube().apply_moves(scramble)
        solution = kociemba.solve(to_facelet_string(cube))
        assert cube.apply_moves(solution).is_solved()
