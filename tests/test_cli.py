import sys

import pytest

from pushswap.cli import ERROR_MESSAGE, main, run
from pushswap.parsing import InputError
from pushswap.stack import Machine, Operation


def _replay(values, names):
    machine = Machine(values)
    for name in names:
        assert getattr(machine, Operation(name).value)()
    return machine


def test_run_returns_sorting_operations():
    operations = run(["3", "1", "2"])
    assert _replay([3, 1, 2], [op.value for op in operations]).a.values() == [1, 2, 3]


def test_run_rejects_duplicates():
    with pytest.raises(InputError):
        run(["1", "1"])


def test_main_prints_operations(capsys):
    assert main(["2", "1"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "sa\n"
    assert captured.err == ""


def test_main_output_sorts(capsys):
    values = [9, -4, 17, 0, 3, 12, -8, 5]
    assert main([str(v) for v in values]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert _replay(values, lines).a.values() == sorted(values)


def test_main_single_string_argument(capsys):
    assert main(["4 3 2 1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert _replay([4, 3, 2, 1], lines).a.values() == [1, 2, 3, 4]


@pytest.mark.parametrize(
    "argv",
    [["1", "1"], ["1", "a"], [""], ["2147483648"], ["1 2 x"], ["1", "2 3"]],
)
def test_main_reports_errors(capsys, argv):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == ERROR_MESSAGE
    assert captured.out == ""


@pytest.mark.parametrize("argv", [[], ["5"], ["   "], ["1", "2", "3"], ["-3 0 8"]])
def test_main_nothing_to_do(capsys, argv):
    assert main(argv) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_reads_sys_argv(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["push_swap", "1", "3", "2"])
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert _replay([1, 3, 2], lines).a.values() == [1, 2, 3]