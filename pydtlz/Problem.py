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


class Problem:

    def __init__(self, num_of_variables : int, lower_bounds : list, upper_bounds : list, num_of_objectives : int):
        assert num_of_variables == len(lower_bounds), "Mismatch in the specified number of variables and their lower bound declaration"
        assert num_of_variables == len(upper_bounds), "Mismatch in the specified number of variables and their upper bound declaration"
        for lb, ub in zip(lower_bounds, upper_bounds):
            assert isinstance(lb, float) and isinstance(ub, float), f"Bounds must be real values, [{lb}, {ub}] was given"
            assert lb <= ub, f"Empty interval [{lb}, {ub}]"
        self.num_of_variables = num_of_variables
        self.num_of_objectives = num_of_objectives
        self.lower_bound = tuple(lower_bounds)
        self.upper_bound = tuple(upper_bounds)

    def evaluate(self, x : list) -> list:
        raise NotImplementedError

    def name(self) -> str:
        return type(self).__name__

    def objective_count(self) -> int:
        return self.num_of_objectives

    def bounds(self):
        return list(self.lower_bound), list(self.upper_bound)

    def get_objectives(self, s : dict):
        assert "x" in s, f"s has wrong format ({s})"
        s["f"] = self.evaluate(s["x"])
        return s

    def lower_point(self):
        return self.get_objectives({"x": list(self.lower_bound), "f": [0] * self.num_of_objectives})

    def upper_point(self):
        return self.get_objectives({"x": list(self.upper_bound), "f": [0] * self.num_of_objectives})
