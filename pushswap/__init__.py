"""Two-stack sorting puzzle: stacks, input parsing, a solver and an instruction checker."""

__version__ = "1.0.0"