"""Strategies that sort stack a with the puzzle's operations."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from .parsing import InputError, is_sorted, parse_numbers
from .ranking import assign_ranks
from .stacks import Op, PushSwap, Stack


def _stack(state: PushSwap, name: str) -> Stack:
    if name == "a":
        return state.a
    if name == "b":
        return state.b
    raise ValueError(f"unknown stack {name!r}")


def sort_two(state: PushSwap, name: str) -> None:
    """Order the two top values of stack ``name`` so the smaller is on top."""
    stack = _stack(state, name)
    if len(stack) < 2:
        raise ValueError("sort_two needs at least two elements")
    first, second = list(stack)[:2]
    if first.value > second.value:
        state.swap(name)


def sort_three(state: PushSwap, name: str) -> None:
    """Order the three top elements of stack ``name`` by rank, smallest on top."""
    stack = _stack(state, name)
    if len(stack) < 3:
        raise ValueError("sort_three needs at least three elements")
    f, s, t = (node.index for node in list(stack)[:3])
    if f < s < t:
        return
    if f < s and s > t and f < t:
        state.swap(name)
        state.rotate(name)
    elif f < s and s > t and f > t:
        state.reverse_rotate(name)
    elif f > s and s > t:
        state.swap(name)
        state.reverse_rotate(name)
    elif f > s and s < t and f < t:
        state.swap(name)
    elif f > s and s < t and f > t:
        state.rotate(name)


def push_n_to_b(state: PushSwap, n_to_b: int, init_len: int) -> None:
    """Move the ``n_to_b`` highest-ranked elements of a onto b.

    Each one is brought to the top of a by whichever of rotation or
    reverse rotation is shorter.
    """
    threshold = init_len - n_to_b
    while len(state.a) > threshold:
        indices = state.a.indices()
        marked = [pos for pos, idx in enumerate(indices) if idx >= threshold]
        if not marked:
            raise ValueError("no element of a reaches the threshold rank")
        r_count = marked[0]
        rr_count = len(indices) - marked[-1]
        if r_count < rr_count:
            for _ in range(r_count):
                state.ra()
        else:
            for _ in range(rr_count):
                state.rra()
        state.pb()


def sort_under_7(state: PushSwap) -> None:
    """Sort a stack of at most six elements."""
    size = len(state.a)
    if size < 2:
        return
    if size == 2:
        sort_two(state, "a")
        return
    if size == 3:
        sort_three(state, "a")
        return
    n_to_b = (size // 3 - 1) * 3 + size % 3
    push_n_to_b(state, n_to_b, size)
    sort_three(state, "a")
    if n_to_b == 2:
        sort_two(state, "b")
    elif n_to_b == 3:
        sort_three(state, "b")
    while state.b:
        state.pa()
        state.ra()


def rounded_sqrt(number: int) -> int:
    """The chunk-width root used by the k-sort: at least 1."""
    if number < 4:
        return 1
    i = 2
    while i * i < number:
        i += 1
    if i * i > number and (i * i - number) < ((i - 1) * (i - 1) - number):
        return i
    return i - 1


def count_r(stack: Stack, idx: int) -> int:
    """Rotations that bring rank ``idx`` to the top; 0 if it is absent."""
    return next((pos for pos, node in enumerate(stack) if node.index == idx), 0)


def count_rr(stack: Stack, idx: int) -> int:
    """Reverse rotations that bring rank ``idx`` to the top; 0 if it is absent."""
    for pos, node in enumerate(stack):
        if node.index == idx:
            return len(stack) - pos
    return 0


def _spread_to_b(state: PushSwap) -> None:
    pivot = rounded_sqrt(len(state.a)) * 14 // 10
    i = 0
    while state.a:
        top = state.a.top
        if top.index < i:
            state.pb()
            state.rb()
            i += 1
        elif top.index < i + pivot:
            state.pb()
            i += 1
        else:
            state.ra()


def _gather_to_a(state: PushSwap) -> None:
    idx = len(state.b) - 1
    while state.b:
        r_count = count_r(state.b, idx)
        rr_count = count_rr(state.b, idx)
        if r_count <= rr_count:
            for _ in range(r_count):
                state.rb()
        else:
            for _ in range(rr_count):
                state.rrb()
        state.pa()
        idx -= 1


def k_sort(state: PushSwap) -> None:
    """Sort a by spreading it over b in chunks and gathering it back."""
    _spread_to_b(state)
    _gather_to_a(state)


def solve(values: Iterable[int]) -> list[Op]:
    """The operations that sort ``values`` (top of stack first).

    Values already in order need no operations. Raises ValueError when
    a value is repeated.
    """
    values = list(values)
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if is_sorted(values):
        return []
    state = PushSwap(values, assign_ranks(values))
    if len(values) < 7:
        sort_under_7(state)
    else:
        k_sort(state)
    return list(state.log)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the operations that sort the numbers given as arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 0
    sys.stdout.write("".join(f"{op.value}\n" for op in solve(numbers)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())