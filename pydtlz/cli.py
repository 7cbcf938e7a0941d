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
import click, json5, functools
from tqdm import tqdm
from .Config import Config
from .DTLZ import DTLZ
from .InvalidArgument import InvalidArgument
from .Population import Population


def problem_options(command):
    @click.option("--problem", "-p", "problem_id", type = int, default = 1, show_default = True, help = "DTLZ problem id, in [1 ... 7]")
    @click.option("--dimension", "-d", type = int, default = 7, show_default = True, help = "Size of the decision vectors")
    @click.option("--objectives", "-m", "objective_count", type = int, default = 3, show_default = True, help = "Number of objectives")
    @click.option("--alpha", "-a", "shape_exponent", type = int, default = 100, show_default = True, help = "Shape exponent (DTLZ4 only)")
    @click.option("--config", "-c", "config_file", type = click.Path(exists = True, dir_okay = False), default = None, help = "Configuration file, overrides the other problem options")
    @functools.wraps(command)
    def wrapper(problem_id, dimension, objective_count, shape_exponent, config_file, **kwargs):
        try:
            config = Config.read_json(config_file) if config_file is not None else Config(problem_id, dimension, objective_count, shape_exponent)
        except ValueError as e:
            raise click.ClickException(f"Invalid configuration: {e}")
        return command(config, **kwargs)
    return wrapper


def read_decision_vectors(problem : DTLZ, input_file : str):
    try:
        with open(input_file) as f:
            X = json5.load(f)
    except ValueError as e:
        raise click.ClickException(f"Cannot parse {input_file}: {e}")
    if not isinstance(X, list):
        raise click.ClickException(f"{input_file} must contain a list of decision vectors")
    for i, x in enumerate(X):
        if not isinstance(x, list) or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in x):
            raise click.ClickException(f"Decision vector #{i} must be a list of numbers, {x!r} was detected")
        if len(x) != problem.dimension:
            raise click.ClickException(f"Decision vector #{i} has {len(x)} entries, {problem.dimension} were expected")
    return X


@click.group()
@click.version_option(package_name = "pyDTLZ")
def cli():
    """ Evaluates problems of the DTLZ test suite """
    pass


@cli.command()
@problem_options
def info(config):
    """ Prints the problem configuration """
    problem = DTLZ.from_config(config)
    config.info()
    lower, upper = problem.bounds()
    print(f"Name: {problem.name()}")
    print(f"Lower bounds: {lower}")
    print(f"Upper bounds: {upper}")


@cli.command()
@problem_options
@click.argument("input_file", type = click.Path(exists = True, dir_okay = False))
@click.option("--output", "-o", type = click.Path(dir_okay = False), default = None, help = "Writes the evaluated population (json5)")
@click.option("--csv", "csv_file", type = click.Path(dir_okay = False), default = None, help = "Writes the evaluated population (csv)")
@click.option("--plot", "plot_file", type = click.Path(dir_okay = False), default = None, help = "Plots the objective vectors (2 or 3 objectives only)")
@click.option("--progress/--no-progress", default = False, help = "Shows a progress bar")
def evaluate(config, input_file, output, csv_file, plot_file, progress):
    """ Evaluates the decision vectors listed in INPUT_FILE, a json5 list of lists """
    problem = DTLZ.from_config(config)
    population = Population(problem)
    population.extend(read_decision_vectors(problem, input_file), progress)
    for s in population:
        print(" ".join(str(f) for f in s["f"]))
    if output is not None:
        population.write_json(output)
        tqdm.write(f"Population written to {output}", file = click.get_text_stream("stderr"))
    if csv_file is not None:
        population.export_csv(csv_file)
    if plot_file is not None:
        try:
            population.plot_front(plot_file, fig_title = problem.name())
        except InvalidArgument as e:
            raise click.ClickException(str(e))


@cli.command()
@problem_options
@click.argument("input_file", type = click.Path(exists = True, dir_okay = False))
def convergence(config, input_file):
    """ Prints the average convergence metric of the decision vectors listed in INPUT_FILE """
    problem = DTLZ.from_config(config)
    try:
        print(problem.population_convergence(read_decision_vectors(problem, input_file)))
    except InvalidArgument as e:
        raise click.ClickException(str(e))


@cli.command("save-config")
@problem_options
@click.argument("output", type = click.Path(dir_okay = False))
def save_config(config, output):
    """ Writes the problem configuration to OUTPUT (json5) """
    config.write_json(output)


if __name__ == "__main__":
    cli()
