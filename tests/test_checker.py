import io
import random

import pytest

from pushswap.checker import check, main, run_instructions
from pushswap.sorting import solve
from pushswap.stacks import PushSwap


def test_check_accepts_a_solution():
    assert check([2, 1], ["sa\n"]) == "OK"


def test_check_rejects_no_instructions_on_unsorted():
    assert check([2, 1], []) == "KO"


def test_check_requires_newline():
    assert check([2, 1], ["sa"]) == "KO"


def test_check_rejects_unknown_instruction():
    assert check([2, 1], ["ss\n"]) == "KO"


def test_check_rejects_nonempty_b():
    assert check([1, 2, 3], ["pb\n"]) == "KO"


def test_check_stops_at_first_invalid_line():
    assert check([2, 1], ["bad\n", "sa\n"]) == "KO"


def test_run_instructions_raises_on_invalid():
    state = PushSwap([1, 2])
    with pytest.raises(ValueError):
        run_instructions(state, ["pb\n", "xx\n", "pa\n"])
    assert state.b.values() == [1]


def test_run_instructions_reverse_rotates_b():
    state = PushSwap([1, 2, 3])
    run_instructions(state, ["pb\n", "pb\n", "rrb\n"])
    assert state.b.values() == [1, 2]
    assert state.a.values() == [3]


def test_main_prints_ok(capsys):
    assert main(["2", "1"], io.StringIO("sa\n")) == 0
    assert capsys.readouterr().out == "OK\n"


def test_main_prints_ko(capsys):
    main(["3", "1", "2"], io.StringIO("sa\n"))
    assert capsys.readouterr().out == "KO\n"


def test_main_sorted_input_is_silent(capsys):
    main(["1", "2"], io.StringIO("sa\n"))
    assert capsys.readouterr().out == ""


def test_main_single_argument_is_silent(capsys):
    main(["2 1"], io.StringIO("sa\n"))
    assert capsys.readouterr().out == ""


def test_main_reports_bad_input(capsys):
    main(["2", "x"], io.StringIO(""))
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""