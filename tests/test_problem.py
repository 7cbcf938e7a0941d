import pytest
from numpy.testing import assert_allclose
from pydtlz import Problem


class Schaffer(Problem):
    def __init__(self):
        Problem.__init__(self, 1, [-10.0], [10.0], 2)

    def evaluate(self, x):
        return [x[0] ** 2, (x[0] - 2) ** 2]


def test_subclass():
    problem = Schaffer()
    assert problem.name() == "Schaffer"
    assert problem.objective_count() == 2
    assert problem.bounds() == ([-10.0], [10.0])
    assert_allclose(problem.lower_point()["f"], [100.0, 144.0])
    assert_allclose(problem.upper_point()["f"], [100.0, 64.0])
    assert problem.get_objectives({"x": [1.0]})["f"] == [1.0, 1.0]


def test_evaluate_must_be_overridden():
    with pytest.raises(NotImplementedError):
        Problem(1, [0.0], [1.0], 2).evaluate([0.5])


@pytest.mark.parametrize("lower, upper", [([0.0, 0.0], [1.0]), ([0.0], [1.0, 1.0]), ([1.0], [0.0]), ([0], [1.0])])
def test_inconsistent_bounds(lower, upper):
    with pytest.raises(AssertionError):
        Problem(1, lower, upper, 2)
