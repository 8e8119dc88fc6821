import itertools
import random

import pytest

from pushswap.stacks import Node, Op, PushSwap, Stack
from pushswap.sorting import (
    count_r,
    count_rr,
    k_sort,
    main,
    push_n_to_b,
    rounded_sqrt,
    solve,
    sort_three,
    sort_two,
    sort_under_7,
)


def _replay(values, ops):
    state = PushSwap(values)
    for op in ops:
        assert state.apply(op)
    return state


def test_rounded_sqrt_small_numbers_give_one():
    assert [rounded_sqrt(n) for n in range(4)] == [1, 1, 1, 1]


@pytest.mark.parametrize("number", range(4, 600))
def test_rounded_sqrt_bounds(number):
    root = rounded_sqrt(number)
    assert root * root < number <= (root + 1) * (root + 1)


def test_count_r_and_count_rr():
    stack = Stack(Node(v, i) for v, i in [(30, 3), (0, 0), (20, 2), (10, 1)])
    assert count_r(stack, 2) == 2
    assert count_rr(stack, 2) == 2
    for idx in range(4):
        assert count_r(stack, idx) + count_rr(stack, idx) == len(stack)


def test_count_missing_index_is_zero():
    stack = Stack([Node(5, 0), Node(6, 1)])
    assert count_r(stack, 9) == 0
    assert count_rr(stack, 9) == 0


def test_sort_two_swaps_when_needed():
    state = PushSwap([2, 1], [1, 0])
    sort_two(state, "a")
    assert state.log == [Op.SA]
    assert state.a.values() == [1, 2]


def test_sort_two_leaves_ordered_pair():
    state = PushSwap([1, 2], [0, 1])
    sort_two(state, "a")
    assert state.log == []


def test_sort_two_needs_two_elements():
    with pytest.raises(ValueError):
        sort_two(PushSwap([1], [0]), "a")


@pytest.mark.parametrize("perm", list(itertools.permutations(range(3))))
def test_sort_three_every_permutation(perm):
    state = PushSwap(perm, perm)
    sort_three(state, "a")
    assert state.a.indices() == [0, 1, 2]
    assert len(state.log) <= 2


def test_sort_three_on_b():
    state = PushSwap([2, 0, 1], [2, 0, 1])
    state.pb()
    state.pb()
    state.pb()
    sort_three(state, "b")
    assert state.b.indices() == [0, 1, 2]


def test_sort_three_rejects_unknown_stack():
    with pytest.raises(ValueError):
        sort_three(PushSwap([2, 0, 1], [2, 0, 1]), "c")


def test_push_n_to_b_moves_the_largest():
    state = PushSwap([4, 0, 3, 1, 2], [4, 0, 3, 1, 2])
    push_n_to_b(state, 2, 5)
    assert sorted(state.b.indices()) == [3, 4]
    assert sorted(state.a.indices()) == [0, 1, 2]


@pytest.mark.parametrize("size", [2, 3, 4, 5, 6])
def test_sort_under_7_every_permutation(size):
    for perm in itertools.permutations(range(size)):
        state = PushSwap(perm, perm)
        sort_under_7(state)
        assert state.is_solved(), perm


def test_k_sort_sorts():
    rng = random.Random(7)
    values = rng.sample(range(-500, 500), 40)
    ranks = sorted(values)
    state = PushSwap(values, [ranks.index(v) for v in values])
    k_sort(state)
    assert state.is_solved()
    assert state.a.values() == ranks


def test_solve_pair():
    assert solve([2, 1]) == [Op.SA]


def test_solve_sorted_needs_nothing():
    assert solve([1, 2, 3, 4]) == []
    assert solve([]) == []


def test_solve_rejects_duplicates():
    with pytest.raises(ValueError):
        solve([3, 1, 3])


@pytest.mark.parametrize("size", [5, 7, 20, 100])
def test_solve_result_sorts(size):
    rng = random.Random(size)
    values = rng.sample(range(-(2**31), 2**31 - 1), size)
    state = _replay(values, solve(values))
    assert state.is_solved()
    assert state.a.values() == sorted(values)


def test_main_prints_operations(capsys):
    assert main(["2", "1"]) == 0
    assert capsys.readouterr().out == "sa\n"


def test_main_single_argument_does_nothing(capsys):
    main(["3 2 1"])
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_reports_duplicates(capsys):
    main(["1", "1"])
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_sorted_input_prints_nothing(capsys):
    main(["1", "2", "3"])
    assert capsys.readouterr().out == ""