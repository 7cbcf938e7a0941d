"""
Copyright 2021-2023 Salvatore Barone <salvatore.barone@unina.it>

This is free software; you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free
Software Foundation; either version 3 of the License, or any later version.

This is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for
more details.

You should have received a copy of the GNU General Public License along with
RMEncoder; if not, write to the Free Software Foundation, Inc., 51 Franklin
Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""
import numpy as np
from .Config import Config
from .InvalidArgument import InvalidArgument
from .Problem import Problem
from .Population import Population
from .DistanceFunctions import distance_function
from .ShapeFunctions import shape_function


class DTLZ(Problem):
    """
    DTLZ test suite.

    Box-constrained continuous problems in [0, 1]^dim, scalable in the number of objectives M. The decision space has
    dimension k + M - 1, where the last k variables (the vector x_M) only affect the distance from the Pareto-optimal
    front, through the distance function g, while the first M - 1 variables set the position on the front.

        DTLZ1: the optimal front lies on the linear hyperplane sum(f) = 0.5; g has 11^k - 1 local fronts.
        DTLZ2: spherical front; the search space is continuous, unimodal, and the problem is not deceptive.
        DTLZ3: the front of DTLZ2 with the multi-modal g of DTLZ1, harder to converge to.
        DTLZ4: the front of DTLZ2 with a dense area of solutions next to the f_M / f_1 plane (see shape_exponent).
        DTLZ5: the front degenerates to a curve. A higher number of objectives (5 to 10) is recommended.
        DTLZ6: DTLZ5 with a non-linear g, making convergence to the optimal curve harder.
        DTLZ7: 2^(M-1) disconnected Pareto-optimal regions.

    Instances are immutable: the configuration is the whole state, and evaluating a decision vector neither reads nor
    writes anything else, so the same instance can be shared across threads.
    """

    def __init__(self, problem_id : int = 1, dimension : int = 7, objective_count : int = 3, shape_exponent : int = 100):
        config = Config(problem_id, dimension, objective_count, shape_exponent)
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_g", distance_function(config.problem_id))
        object.__setattr__(self, "_shape", shape_function(config.problem_id))

    def __setattr__(self, name, value):
        raise AttributeError(f"DTLZ problems are immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"DTLZ problems are immutable, cannot delete {name}")

    @staticmethod
    def from_config(config : Config):
        return DTLZ(*config.astuple())

    @staticmethod
    def read_json(json_file : str):
        return DTLZ.from_config(Config.read_json(json_file))

    def write_json(self, json_file : str):
        self._config.write_json(json_file)

    @property
    def config(self):
        return self._config

    @property
    def problem_id(self):
        return self._config.problem_id

    @property
    def dimension(self):
        return self._config.dimension

    @property
    def shape_exponent(self):
        return self._config.shape_exponent

    @property
    def num_of_variables(self):
        return self._config.dimension

    @property
    def num_of_objectives(self):
        return self._config.objective_count

    # bounds are built on demand, the configuration is the only state
    @property
    def lower_bound(self):
        return [0.0] * self._config.dimension

    @property
    def upper_bound(self):
        return [1.0] * self._config.dimension

    def bounds(self):
        return self.lower_bound, self.upper_bound

    def name(self) -> str:
        return f"DTLZ{self.problem_id}"

    def evaluate(self, x : list) -> list:
        """
        Computes the objective vector of x.

        x must have exactly dimension entries: its length is not checked here.
        """
        x = np.asarray(x, dtype = float)
        g = self._g(x[self.num_of_objectives - 1:])
        return self._shape(x, g, self.num_of_objectives, self.shape_exponent)

    def convergence(self, x : list) -> float:
        """
        Convergence metric of a decision vector, i.e., the value of the distance function on x_M (0 = on the optimal front).

        Introduced by Martens and Izzo, this metric measures "a distance" of any point from the Pareto front
        analytically, without the need to precompute the front.

            Märtens, Marcus, and Dario Izzo. "The asynchronous island model and NSGA-II: study of a new migration
            operator and its performance." Proceedings of the 15th annual conference on Genetic and evolutionary
            computation. ACM, 2013.
        """
        if len(x) != self.dimension:
            raise InvalidArgument(f"The size of the decision vector should be {self.dimension} while {len(x)} was detected")
        x = np.asarray(x, dtype = float)
        return self._g(x[self.num_of_objectives - 1:])

    def population_convergence(self, population) -> float:
        """ Average of the convergence metric across the population """
        members = [s["x"] if isinstance(s, dict) else s for s in population]
        if len(members) == 0:
            raise InvalidArgument("The convergence metric of an empty population is undefined")
        return float(np.sum([self.convergence(x) for x in members]) / len(members))

    def p_distance(self, x) -> float:
        if DTLZ.is_population(x):
            return self.population_convergence(x)
        return self.convergence(x)

    @staticmethod
    def is_population(x):
        if isinstance(x, Population):
            return True
        if isinstance(x, np.ndarray):
            return x.ndim == 2
        return len(x) > 0 and (isinstance(x[0], dict) or np.ndim(x[0]) > 0)

    def __eq__(self, other):
        if not isinstance(other, DTLZ):
            return NotImplemented
        return self._config == other._config

    def __hash__(self):
        return hash(self._config)

    def __repr__(self):
        return f"DTLZ(problem_id={self.problem_id}, dimension={self.dimension}, objective_count={self.num_of_objectives}, shape_exponent={self.shape_exponent})"

    def __reduce__(self):
        return (DTLZ, self._config.astuple())
