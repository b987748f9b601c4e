import logging

import pytest

from cube_errors import CubeError, InvalidState
from cubie_cube import Cube

CP = list(range(8))
CO = [0] * 8
EP = list(range(12))
EO = [0] * 12


def test_validated_accepts_solved_and_reachable(reachable_cubes):
    assert Cube.validated(CP, CO, EP, EO) == Cube()
    for cube in reachable_cubes[:30]:
        rebuilt = Cube.validated(list(cube.corner_permutation), list(cube.corner_orientation),
                                 list(cube.edge_permutation), list(cube.edge_orientation))
        assert rebuilt == cube


def test_raw_constructor_does_not_validate():
    cube = Cube([0] * 8, [5] * 8, [0] * 12, [3] * 12)
    assert cube.corner_permutation == (0,) * 8
    with pytest.raises(InvalidState):
        cube.verify()


@pytest.mark.parametrize("cp,co,ep,eo,message", [
    (CP[:7], CO, EP, EO, "Corner arrays"),
    (CP, CO + [0], EP, EO, "Corner arrays"),
    (CP, CO, EP[:11], EO, "Edge arrays"),
    (CP, CO, EP, EO[:11], "Edge arrays"),
    (CP, CO, [0] + EP[1:11] + [0], EO, "edges exist exactly once"),
    (CP, CO, EP, [2] + EO[1:11] + [0], "Edge orientations"),
    (CP, CO, EP, [1] + EO[1:], "Flip error"),
    (CP, CO, [0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 12], EO, "edges exist exactly once"),
    ([1, 1, 2, 3, 4, 5, 6, 7], CO, EP, EO, "corners exist exactly once"),
    (CP, [3, 0, 0, 0, 0, 0, 0, 0], EP, EO, "Corner orientations"),
    (CP, [1] + CO[1:], EP, EO, "Twist error"),
    (CP, CO, [1, 0] + EP[2:], EO, "Parity error"),
    ([1, 0] + CP[2:], CO, EP, EO, "Parity error"),
    ([float(c) for c in CP], [1.0, 2.0] + CO[2:], [float(e) for e in EP], [0.0] * 12, "must hold integers"),
    (CP, CO, EP, [True, True] + EO[2:], "edge_orientation must hold integers"),
    ([True, False] + CP[2:], CO, EP, EO, "corner_permutation must hold integers"),
    (CP, [0.0] + CO[1:], EP, EO, "corner_orientation must hold integers"),
    (CP, CO, EP[:11] + [11.0], EO, "edge_permutation must hold integers"),
    (CP, CO, EP, ["0"] + EO[1:], "edge_orientation must hold integers"),
])
def test_validated_rejects_bad_states(cp, co, ep, eo, message):
    with pytest.raises(InvalidState, match=message):
        Cube.validated(cp, co, ep, eo)


def test_matching_odd_parities_are_accepted():
    cube = Cube.validated([1, 0] + CP[2:], CO, [1, 0] + EP[2:], EO)
    assert cube.corner_parity() == 1
    assert cube.edge_parity() == 1


def test_twist_and_flip_that_sum_to_zero_are_accepted():
    Cube.validated(CP, [1, 2] + CO[2:], EP, [1, 1] + EO[2:])


def test_invalid_state_is_a_value_error():
    assert issubclass(InvalidState, CubeError)
    with pytest.raises(ValueError):
        Cube.validated(CP, [1] + CO[1:], EP, EO)


def test_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="cubie_cube"):
        with pytest.raises(InvalidState):
            Cube.validated(CP, CO, EP, [1] + EO[1:])
    assert "Flip error" in caplog.text


def test_numpy_integer_arrays_are_accepted():
    np = pytest.importorskip("numpy")
    cube = Cube.validated(np.arange(8), np.zeros(8, dtype=np.int64),
                          np.arange(12), np.zeros(12, dtype=np.int64))
    assert cube == Cube()
