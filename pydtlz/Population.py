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
import numpy as np, matplotlib.pyplot as plt, json5, sys
from tqdm import tqdm
from .InvalidArgument import InvalidArgument
from .Problem import Problem


class Population:
    def __init__(self, problem : Problem) -> None:
        self.problem = problem
        self.candidate_solutions = []

    def add(self, x : list):
        s = self.problem.get_objectives({"x": [float(i) for i in x]})
        self.candidate_solutions.append(s)
        return s

    def extend(self, X : list, progress : bool = False):
        for x in tqdm(X, desc = f"Evaluating {self.problem.name()}: ", leave = False, disable = not progress, bar_format="{desc:30} {percentage:3.0f}% |{bar:40}{r_bar}{bar:-10b}"):
            self.add(x)

    def size(self):
        return len(self.candidate_solutions)

    def __len__(self):
        return len(self.candidate_solutions)

    def __iter__(self):
        return iter(self.candidate_solutions)

    def get_front(self):
        return np.array([s["f"] for s in self.candidate_solutions])

    def get_set(self):
        return np.array([s["x"] for s in self.candidate_solutions])

    def convergence(self):
        return self.problem.population_convergence(self)

    def write_json(self, json_file : str):
        with open(json_file, 'w') as outfile:
            json5.dump(self.candidate_solutions, outfile)

    def read_json(self, json_file : str):
        with open(json_file) as f:
            population = json5.load(f)
        self.candidate_solutions = [{"x": [float(i) for i in s["x"]], "f": [float(i) for i in s["f"]]} for s in population]

    def export_csv(self, csv_file : str, fitness_labels : list = None):
        original_stdout = sys.stdout
        row_format = "{:};" + "{:};" * self.problem.num_of_objectives + "{:};" * self.problem.num_of_variables
        if fitness_labels is None:
            fitness_labels = [f"f{i}" for i in range(self.problem.num_of_objectives)]
        with open(csv_file, "w") as file:
            sys.stdout = file
            try:
                print(row_format.format("", *fitness_labels, *[f"x{i}" for i in range(self.problem.num_of_variables)]))
                for i, s in enumerate(self.candidate_solutions):
                    print(row_format.format(i, *s["f"], *s["x"]))
            finally:
                sys.stdout = original_stdout

    def plot_front(self, pdf_file : str, fig_title : str = "Objective space", axis_labels : list = None, color = "k", marker = "."):
        if self.problem.num_of_objectives not in (2, 3):
            raise InvalidArgument(f"Only 2 or 3 objectives can be plotted, {self.problem.num_of_objectives} were detected")
        if axis_labels is None:
            axis_labels = [f"f{str(i)}" for i in range(self.problem.num_of_objectives)]
        if self.size() == 0:
            raise InvalidArgument("Nothing to plot, the population is empty")
        F = self.get_front()
        if self.problem.num_of_objectives == 2:
            fig = plt.figure(figsize = (10, 10), dpi = 300)
            plt.plot(F[:, 0], F[:, 1], f'{color}{marker}')
            plt.xlabel(axis_labels[0])
            plt.ylabel(axis_labels[1])
            plt.title(fig_title)
            plt.savefig(pdf_file, bbox_inches = 'tight', pad_inches = 0)
        else:
            fig = plt.figure()
            ax = fig.add_subplot(projection = '3d')
            ax.scatter(F[:, 0], F[:, 1], F[:, 2], marker = marker, color = color, depthshade = False)
            ax.set_xlabel(axis_labels[0])
            ax.set_ylabel(axis_labels[1])
            ax.set_zlabel(axis_labels[2])
            ax.set_proj_type('ortho')
            plt.title(fig_title)
            plt.tight_layout()
            plt.savefig(pdf_file, bbox_inches = 'tight', pad_inches = 0.5)
        plt.close(fig)
