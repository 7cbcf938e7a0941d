import numpy as np, pytest
from pydtlz import InvalidArgument, distance_function
from pydtlz.DistanceFunctions import g13, g245, g6, g7


@pytest.mark.parametrize("problem_id, expected", [(1, g13), (2, g245), (3, g13), (4, g245), (5, g245), (6, g6), (7, g7)])
def test_dispatch(problem_id, expected):
    assert distance_function(problem_id) is expected


@pytest.mark.parametrize("problem_id", [0, 8])
def test_unknown_problem(problem_id):
    with pytest.raises(InvalidArgument):
        distance_function(problem_id)


@pytest.mark.parametrize("k", [1, 2, 5, 10])
def test_g13_minimum(k):
    assert g13([0.5] * k) == pytest.approx(0.0, abs = 1e-9)


def test_g13_at_bounds():
    # (0.25 - cos(10 pi)) summed k times, plus k
    assert g13([0.0, 0.0]) == pytest.approx(50.0)
    assert g13([1.0, 1.0, 1.0]) == pytest.approx(75.0)


def test_g245():
    assert g245([0.5] * 4) == 0.0
    assert g245([0.0, 1.0, 0.5]) == pytest.approx(0.5)


def test_g6():
    assert g6([0.0] * 3) == 0.0
    assert g6([1.0] * 3) == pytest.approx(3.0)
    assert g6([0.5]) == pytest.approx(0.5 ** 0.1)


def test_g7_has_no_offset():
    assert g7([0.0] * 5) == 0.0
    assert g7([1.0, 1.0]) == pytest.approx(9.0)
    assert g7([0.2, 0.4, 0.6]) == pytest.approx(3.6)


def test_kernels_accept_arrays():
    x_M = np.array([0.1, 0.7, 0.3])
    assert g245(x_M) == pytest.approx(g245(x_M.tolist()))
    assert isinstance(g245(x_M), float)
