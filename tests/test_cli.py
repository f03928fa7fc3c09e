import io
import sys

import pytest

from pushswap.cli import main
from pushswap.stacks import Stacks


def _replay(values, output):
    stacks = Stacks(values, stream=io.StringIO())
    for name in output.splitlines():
        getattr(stacks, name)()
    return stacks


def test_sorts_arguments(capsys):
    args = ["3", "-7", "12", "0", "5", "-1"]
    assert main(args) == 0
    captured = capsys.readouterr()
    stacks = _replay([int(arg) for arg in args], captured.out)
    assert list(stacks.a) == sorted(int(arg) for arg in args)
    assert not stacks.b
    assert captured.err == ""


def test_sorted_arguments_print_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize(
    "args",
    [["1", "a"], ["1", "1"], ["2147483648"], ["--1", "2"], ["1 2"]],
)
def test_invalid_arguments_report_error(capsys, args):
    assert main(args) == 0
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_single_argument_prints_nothing(capsys):
    assert main(["42"]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_reads_sys_argv_by_default(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["push_swap", "2", "1"])
    assert main() == 0
    stacks = _replay([2, 1], capsys.readouterr().out)
    assert list(stacks.a) == [1, 2]