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
Shape functions of the DTLZ test suite.

The chromosome is laid out as follows

    x[0], x[1], ..., x[M-2], x[M-1], ..., x[dim-1]
    [--- position ---------] [------ x_M --------]

where M is the number of objectives. Every shape function takes the decision vector x, the value g of the distance
function computed on x_M, the number of objectives and the shape exponent (used by DTLZ4 only), and returns a new
list of M objectives. Only the position components of x are read.

For further details, please refer to

    Deb, Kalyanmoy, Lothar Thiele, Marco Laumanns, e Eckart Zitzler. "Scalable Test Problems for Evolutionary Multiobjective
    Optimization". In Evolutionary Multiobjective Optimization, a cura di Ajith Abraham, Lakhmi Jain, e Robert Goldberg, 105-45.
    Advanced Information and Knowledge Processing. London: Springer-Verlag, 2005. https://doi.org/10.1007/1-84628-137-7_6.
"""

def spherical_shape(y, g : float, num_of_objectives : int) -> list:
    """
    f[0]   = (1 + g) * cos(y[0] pi/2) * ... * cos(y[M-2] pi/2)
    f[m]   = (1 + g) * cos(y[0] pi/2) * ... * cos(y[M-m-2] pi/2) * sin(y[M-m-1] pi/2)
    f[M-1] = (1 + g) * sin(y[0] pi/2)
    """
    y = np.asarray(y, dtype = float)
    cosines = np.cos(y[:num_of_objectives - 1] * np.pi / 2)
    f = np.full((num_of_objectives,), 1. + g)
    for m in range(num_of_objectives):
        f[m] *= np.prod(cosines[:num_of_objectives - m - 1])
        if m > 0:
            f[m] *= np.sin(y[num_of_objectives - m - 1] * np.pi / 2)
    return f.tolist()


def linear(x, g : float, num_of_objectives : int, shape_exponent : int = 100) -> list:
    """ DTLZ1: the Pareto-optimal front is the hyperplane sum(f) = 0.5 """
    x = np.asarray(x, dtype = float)
    f = np.full((num_of_objectives,), 0.5 * (1. + g))
    for m in range(num_of_objectives):
        f[m] *= np.prod(x[:num_of_objectives - m - 1])
        if m > 0:
            f[m] *= 1. - x[num_of_objectives - m - 1]
    return f.tolist()


def spherical(x, g : float, num_of_objectives : int, shape_exponent : int = 100) -> list:
    """ DTLZ2 and DTLZ3: the Pareto-optimal front is the unit hypersphere """
    return spherical_shape(x, g, num_of_objectives)


def biased_spherical(x, g : float, num_of_objectives : int, shape_exponent : int = 100) -> list:
    """ DTLZ4: x_i is mapped to x_i^alpha, making solutions denser next to the f_M / f_1 plane """
    x = np.asarray(x, dtype = float)
    return spherical_shape(np.power(x[:num_of_objectives - 1], shape_exponent), g, num_of_objectives)


def degenerate_spherical(x, g : float, num_of_objectives : int, shape_exponent : int = 100) -> list:
    """ DTLZ5 and DTLZ6: all the position components but the first one are squeezed towards 0.5 as g decreases """
    x = np.asarray(x, dtype = float)
    theta = np.empty((num_of_objectives - 1,))
    theta[0] = x[0]
    theta[1:] = 1. / (2. * (1. + g)) + (g * x[1:num_of_objectives - 1]) / (1. + g)
    return spherical_shape(theta, g, num_of_objectives)


def h(f, g : float, num_of_objectives : int) -> float:
    # the last element of f is not part of the sum
    f = np.asarray(f, dtype = float)[:-1]
    return float(num_of_objectives - np.sum((f / (1. + g)) * (1. + np.sin(3. * np.pi * f))))


def disconnected(x, g : float, num_of_objectives : int, shape_exponent : int = 100) -> list:
    """ DTLZ7: 2^(M-1) disconnected Pareto-optimal regions """
    x = np.asarray(x, dtype = float)
    f = np.empty((num_of_objectives,))
    f[:num_of_objectives - 1] = x[:num_of_objectives - 1]
    g = 1. + g
    f[num_of_objectives - 1] = (1. + g) * h(f, g, num_of_objectives)
    return f.tolist()


shape_functions = {1: linear, 2: spherical, 3: spherical, 4: biased_spherical, 5: degenerate_spherical, 6: degenerate_spherical, 7: disconnected}


def shape_function(problem_id : int):
    try:
        return shape_functions[problem_id]
    except KeyError:
        raise InvalidArgument(f"No shape function for problem_id={problem_id}") from None
