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
import sys, numbers, json5
from .InvalidArgument import InvalidArgument


class Config:
    # Both sizes take part in index arithmetic, so they are kept well below the largest index value
    max_size = sys.maxsize // 3
    fields = ("problem_id", "dimension", "objective_count", "shape_exponent")

    __slots__ = ("_problem_id", "_dimension", "_objective_count", "_shape_exponent")

    def __init__(self, problem_id : int = 1, dimension : int = 7, objective_count : int = 3, shape_exponent : int = 100):
        for field, value in zip(Config.fields, (problem_id, dimension, objective_count, shape_exponent)):
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise InvalidArgument(f"{field} must be an integer, {value!r} was detected")
        problem_id, dimension, objective_count, shape_exponent = int(problem_id), int(dimension), int(objective_count), int(shape_exponent)
        if problem_id < 1 or problem_id > 7:
            raise InvalidArgument(f"DTLZ test suite contains seven (problem_id = [1 ... 7]) problems, problem_id={problem_id} was detected")
        if objective_count < 2:
            raise InvalidArgument(f"DTLZ test problems have a minimum of 2 objectives: objective_count={objective_count} was detected")
        if objective_count > Config.max_size:
            raise InvalidArgument(f"The number of objectives is too large: objective_count={objective_count} was detected")
        if dimension > Config.max_size:
            raise InvalidArgument(f"The problem dimension is too large: dimension={dimension} was detected")
        if dimension <= objective_count:
            raise InvalidArgument(f"The problem dimension has to be larger than the number of objectives: dimension={dimension}, objective_count={objective_count} were detected")
        if shape_exponent < 0:
            raise InvalidArgument(f"The shape exponent cannot be negative: shape_exponent={shape_exponent} was detected")
        object.__setattr__(self, "_problem_id", problem_id)
        object.__setattr__(self, "_dimension", dimension)
        object.__setattr__(self, "_objective_count", objective_count)
        object.__setattr__(self, "_shape_exponent", shape_exponent)

    @property
    def problem_id(self):
        return self._problem_id

    @property
    def dimension(self):
        return self._dimension

    @property
    def objective_count(self):
        return self._objective_count

    @property
    def shape_exponent(self):
        return self._shape_exponent

    def __setattr__(self, name, value):
        raise AttributeError(f"Config is immutable, cannot set {name}")

    def __delattr__(self, name):
        raise AttributeError(f"Config is immutable, cannot delete {name}")

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return self.astuple() == other.astuple()

    def __hash__(self):
        return hash(self.astuple())

    def __repr__(self):
        return f"Config(problem_id={self.problem_id}, dimension={self.dimension}, objective_count={self.objective_count}, shape_exponent={self.shape_exponent})"

    def __reduce__(self):
        return (Config, self.astuple())

    def astuple(self):
        return (self.problem_id, self.dimension, self.objective_count, self.shape_exponent)

    def to_dict(self):
        return dict(zip(Config.fields, self.astuple()))

    @staticmethod
    def from_dict(data : dict):
        if not isinstance(data, dict):
            raise InvalidArgument(f"A configuration must be a mapping, {type(data).__name__} was detected")
        missing = [f for f in Config.fields[:3] if f not in data]
        if missing:
            raise InvalidArgument(f"Missing configuration entries: {', '.join(missing)}")
        return Config(data["problem_id"], data["dimension"], data["objective_count"], data.get("shape_exponent", 100))

    def write_json(self, json_file : str):
        with open(json_file, 'w') as outfile:
            json5.dump(self.to_dict(), outfile)

    @staticmethod
    def read_json(json_file : str):
        with open(json_file) as f:
            return Config.from_dict(json5.load(f))

    def info(self):
        print(f"Problem: DTLZ{self.problem_id}")
        print(f"Dimension: {self.dimension}")
        print(f"Objectives: {self.objective_count}")
        print(f"Shape exponent: {self.shape_exponent}{'' if self.problem_id == 4 else ' (unused)'}")
