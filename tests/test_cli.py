import pytest

from tspgenetic.cli import RunSummary, format_summary, main, process_file
from tspgenetic.tsplib import TspFormatError

INSTANCE = """NAME : tiny
TYPE : TSP
DIMENSION : 6
EDGE_WEIGHT_TYPE : EUC_2D
NODE_COORD_SECTION
1 0 0
2 10 0
3 20 0
4 20 10
5 10 10
6 0 10
EOF
"""

SMALL = dict(iterations=1, generation_size=20, parents_size=10)


@pytest.fixture
def instance(tmp_path):
    path = tmp_path / "tiny.tsp"
    path.write_text(INSTANCE)
    return path


def test_format_summary_row():
    row = format_summary(RunSummary("a.tsp", [10, 12]))
    assert row == "a.tsp & & 10 & 11.000 \\\\\\hline"


def test_summary_best_and_average():
    summary = RunSummary("b.tsp", [7, 3, 5])
    assert summary.best == 3
    assert summary.average == pytest.approx(5.0)


def test_process_file_runs_requested_times(instance):
    summary = process_file(instance, runs=2, seed=3, **SMALL)
    assert summary.name == "tiny.tsp"
    assert len(summary.weights) == 2
    assert summary.best <= summary.average <= max(summary.weights)


def test_process_file_tours_not_shorter_than_hull(instance):
    summary = process_file(instance, runs=2, seed=8, **SMALL)
    assert all(weight >= 60 for weight in summary.weights)


def test_process_file_default_runs_for_small_instance(instance):
    summary = process_file(instance, seed=1, **SMALL)
    assert len(summary.weights) == 5


def test_process_file_is_reproducible(instance):
    first = process_file(instance, runs=1, seed=13, **SMALL)
    second = process_file(instance, runs=1, seed=13, **SMALL)
    assert first.weights == second.weights


def test_process_file_rejects_zero_runs(instance):
    with pytest.raises(ValueError):
        process_file(instance, runs=0, seed=1, **SMALL)


def test_process_file_rejects_too_few_cities(tmp_path):
    path = tmp_path / "few.tsp"
    path.write_text("NODE_COORD_SECTION\n1 0 0\n2 1 1\nEOF\n")
    with pytest.raises(TspFormatError):
        process_file(path, runs=1, seed=1, **SMALL)


def test_main_unknown_option_prints_nothing(tmp_path, capsys):
    assert main(["9", "--dir", str(tmp_path)]) == 0
    assert capsys.readouterr().out == ""


def test_main_missing_file_fails(tmp_path, capsys):
    assert main(["1", "--dir", str(tmp_path)]) == 1
    assert "xit1083.tsp" in capsys.readouterr().err


def test_main_prints_runs_and_summary(tmp_path, capsys):
    (tmp_path / "xit1083.tsp").write_text(INSTANCE)
    code = main(
        [
            "1",
            "--dir",
            str(tmp_path),
            "--runs",
            "2",
            "--iterations",
            "1",
            "--generation-size",
            "20",
            "--parents-size",
            "10",
            "--seed",
            "4",
        ]
    )
    lines = capsys.readouterr().out.splitlines()
    assert code == 0
    assert len(lines) == 3
    assert lines[0].startswith("0 ")
    assert lines[1].startswith("1 ")
    assert lines[2].startswith("xit1083.tsp & & ")
    assert lines[2].endswith("\\\\\\hline")