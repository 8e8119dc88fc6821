"""Checking that a list of instructions sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence, TextIO

from .parsing import InputError, parse_numbers
from .stacks import Op, PushSwap

_INSTRUCTIONS = {f"{op.value}\n": op for op in Op}


def run_instructions(state: PushSwap, lines: Iterable[str]) -> None:
    """Apply each line, which must be an instruction ending in a newline.

    Raises ValueError at the first line that is not one; the lines after
    it are not read.
    """
    for line in lines:
        op = _INSTRUCTIONS.get(line)
        if op is None:
            raise ValueError(f"invalid instruction {line!r}")
        state.apply(op)


def check(values: Iterable[int], lines: Iterable[str]) -> str:
    """'OK' when the instructions leave a sorted and b empty, else 'KO'."""
    state = PushSwap(values)
    try:
        run_instructions(state, lines)
    except ValueError:
        return "KO"
    return "OK" if state.is_solved() else "KO"


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
) -> int:
    """Read instructions from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 2:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 0
    if not numbers:
        return 0
    source = sys.stdin if stdin is None else stdin
    print(check(numbers, source))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())