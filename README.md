# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a fixed
set of instructions, and verify that a sequence of instructions really sorts
a list.

## Instructions

| Name  | Effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the top two elements of `a`                 |
| `sb`  | swap the top two elements of `b`                 |
| `pa`  | move the top of `b` onto `a`                     |
| `pb`  | move the top of `a` onto `b`                     |
| `ra`  | rotate `a` up: the top goes to the bottom        |
| `rb`  | rotate `b` up                                    |
| `rra` | rotate `a` down: the bottom comes to the top     |
| `rrb` | rotate `b` down                                  |

These eight are the whole instruction set; there are no combined
instructions acting on both stacks at once (such as `ss`, `rr` or `rrr`).

## Installation

```
pip install .
```

## Command line

Print instructions that sort the numbers, one per line; the first number
is the top of stack `a`:

```
push-swap 3 1 2
push-swap "5 4" "3 2 1"
```

Numbers may be given as separate arguments or as space-separated lists
inside arguments, but at least two arguments are needed: with fewer, the
command prints nothing. Repeated numbers, values outside the 32-bit signed
range, empty arguments and anything other than digits, spaces and a sign
are reported with `Error` on standard error. Input that is already sorted
produces no output.

Check an instruction sequence read from standard input, one instruction per
line:

```
push-swap 3 1 2 | push-swap-checker 3 1 2
```

The checker prints `OK` when `a` ends up sorted and `b` empty, and `KO`
otherwise; it also prints `KO` at the first line that is not an
instruction. It takes the numbers the same way as `push-swap`, and prints
nothing when they are already sorted.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import check

ops = solve([3, 1, 2])                      # a list of pushswap.stacks.Op
print([str(op) for op in ops])
print(check([3, 1, 2], [f"{op}\n" for op in ops]))   # "OK"
```

- `pushswap.stacks` holds `Op`, `Node`, `Stack` and `PushSwap`, the pair of
  stacks that applies instructions and logs those that took effect.
- `pushswap.parsing.parse_numbers` turns command-line arguments into numbers
  and raises `InputError` on bad input.
- `pushswap.ranking.assign_ranks` gives each value its position in sorted
  order.
- `pushswap.sorting.solve` returns the instructions that sort a list; fewer
  than seven numbers use a dedicated routine, larger inputs are moved to `b`
  in chunks by rank and brought back in order.
- `pushswap.checker.check` runs instruction lines (each ending in a newline)
  and returns `"OK"` or `"KO"`.

## Tests

```
pip install .[test]
pytest
```