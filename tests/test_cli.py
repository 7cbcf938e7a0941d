import matplotlib
matplotlib.use("Agg")
import os, json5, pytest
from click.testing import CliRunner
from pydtlz import Config
from pydtlz.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def input_file(tmp_path):
    path = str(tmp_path / "x.json5")
    with open(path, "w") as f:
        json5.dump([[0.5, 0.5, 0.5], [0.0, 0.0, 0.0]], f)
    return path


def test_info(runner):
    result = runner.invoke(cli, ["info", "-p", "4", "-d", "5", "-m", "2", "-a", "10"])
    assert result.exit_code == 0, result.output
    assert "Name: DTLZ4" in result.output
    assert "Shape exponent: 10" in result.output
    assert "Upper bounds: [1.0, 1.0, 1.0, 1.0, 1.0]" in result.output


def test_info_invalid_configuration(runner):
    result = runner.invoke(cli, ["info", "-p", "9"])
    assert result.exit_code == 1
    assert "problem_id=9" in result.output


def test_evaluate(runner, input_file):
    result = runner.invoke(cli, ["evaluate", "-p", "1", "-d", "3", "-m", "2", input_file])
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert [float(v) for v in lines[0].split()] == pytest.approx([0.25, 0.25])
    assert [float(v) for v in lines[1].split()] == pytest.approx([0.0, 25.5])


def test_evaluate_writes_files(runner, input_file, tmp_path):
    output, csv_file, plot_file = str(tmp_path / "out.json5"), str(tmp_path / "out.csv"), str(tmp_path / "out.pdf")
    result = runner.invoke(cli, ["evaluate", "-p", "2", "-d", "3", "-m", "2", input_file, "-o", output, "--csv", csv_file, "--plot", plot_file])
    assert result.exit_code == 0, result.output
    with open(output) as f:
        population = json5.load(f)
    assert len(population) == 2
    assert population[0]["f"] == pytest.approx([0.70710678, 0.70710678])
    assert os.path.exists(csv_file)
    assert os.path.getsize(plot_file) > 0


def test_evaluate_wrong_length(runner, input_file):
    result = runner.invoke(cli, ["evaluate", "-p", "1", "-d", "4", "-m", "2", input_file])
    assert result.exit_code == 1
    assert "Decision vector #0 has 3 entries, 4 were expected" in result.output


def test_convergence(runner, input_file):
    result = runner.invoke(cli, ["convergence", "-p", "6", "-d", "3", "-m", "2", input_file])
    assert result.exit_code == 0, result.output
    assert float(result.output) == pytest.approx((2 * 0.5 ** 0.1) / 2)


def test_convergence_of_empty_input(runner, tmp_path):
    path = str(tmp_path / "empty.json5")
    with open(path, "w") as f:
        f.write("[]")
    result = runner.invoke(cli, ["convergence", path])
    assert result.exit_code == 1
    assert "empty population" in result.output


def test_save_config_and_reuse(runner, input_file, tmp_path):
    config_file = str(tmp_path / "config.json5")
    result = runner.invoke(cli, ["save-config", "-p", "2", "-d", "3", "-m", "2", config_file])
    assert result.exit_code == 0, result.output
    assert Config.read_json(config_file) == Config(2, 3, 2)
    result = runner.invoke(cli, ["evaluate", "-c", config_file, input_file])
    assert result.exit_code == 0, result.output
    assert [float(v) for v in result.output.splitlines()[0].split()] == pytest.approx([0.70710678, 0.70710678])


@pytest.mark.parametrize("content, message", [
    ("[[0.5, 0.5,", "Cannot parse"),
    ("{\"x\": [0.5, 0.5, 0.5]}", "must contain a list of decision vectors"),
    ("[0.5, 0.5, 0.5]", "Decision vector #0 must be a list of numbers"),
    ("[[0.5, \"a\", 0.5]]", "Decision vector #0 must be a list of numbers"),
])
def test_malformed_input(runner, tmp_path, content, message):
    path = str(tmp_path / "bad.json5")
    with open(path, "w") as f:
        f.write(content)
    for command in ("evaluate", "convergence"):
        result = runner.invoke(cli, [command, "-p", "1", "-d", "3", "-m", "2", path])
        assert result.exit_code == 1
        assert message in result.output
        assert not isinstance(result.exception, (ValueError, TypeError))


@pytest.mark.parametrize("content", ["[1, 7, 3]", "{problem_id: 1,", "{problem_id: 1, dimension: 7}"])
def test_malformed_config(runner, tmp_path, content):
    path = str(tmp_path / "config.json5")
    with open(path, "w") as f:
        f.write(content)
    result = runner.invoke(cli, ["info", "-c", path])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
