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
from .InvalidArgument import InvalidArgument

"""
Distance functions g(x_M) of the DTLZ test suite. Each one takes the distance components x_M, i.e., the trailing
dim - fdim + 1 entries of the decision vector, and is zero on the Pareto-optimal front.
"""

def g13(x_M) -> float:
    """ Multi-modal distance function of DTLZ1 and DTLZ3, 11^k - 1 local fronts, minimum at x_i = 0.5 """
    x_M = np.asarray(x_M, dtype = float)
    return float(100. * (np.sum(np.square(x_M - 0.5) - np.cos(20. * np.pi * (x_M - 0.5))) + len(x_M)))


def g245(x_M) -> float:
    x_M = np.asarray(x_M, dtype = float)
    return float(np.sum(np.square(x_M - 0.5)))


def g6(x_M) -> float:
    x_M = np.asarray(x_M, dtype = float)
    return float(np.sum(np.power(x_M, 0.1)))


def g7(x_M) -> float:
    """
    Distance function of DTLZ7.
    The original definition is 1 + 9 / |x_M| * sum(x_i): the 1 is dropped so that the minimum is 0.0, the same as
    all the other problems of the suite. The shape function of DTLZ7 adds it back.
    """
    x_M = np.asarray(x_M, dtype = float)
    return float((9. / len(x_M)) * np.sum(x_M))


distance_functions = {1: g13, 2: g245, 3: g13, 4: g245, 5: g245, 6: g6, 7: g7}


def distance_function(problem_id : int):
    try:
        return distance_functions[problem_id]
    except KeyError:
        raise InvalidArgument(f"No distance function for problem_id={problem_id}") from None
