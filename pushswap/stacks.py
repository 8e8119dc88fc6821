"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class Op(str, Enum):
    """An instruction, spelled as it is printed and read."""

    SA = "sa"
    SB = "sb"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RRA = "rra"
    RRB = "rrb"

    def __str__(self) -> str:
        return self.value


@dataclass
class Node:
    """One element: its value and its rank among all the values."""

    value: int
    index: int = 0


class Stack:
    """A stack of nodes; iteration runs from the top to the bottom."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    def push(self, node: Node) -> None:
        """Put a node on top."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Take the top node off; raises IndexError when empty."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    @property
    def top(self) -> Optional[Node]:
        """The top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def swap(self) -> bool:
        """Exchange the two top nodes; False when there are fewer than two."""
        if len(self._nodes) < 2:
            return False
        first = self._nodes.popleft()
        second = self._nodes.popleft()
        self._nodes.appendleft(first)
        self._nodes.appendleft(second)
        return True

    def rotate(self) -> bool:
        """Move the top node to the bottom; False when there is nothing to move."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(-1)
        return True

    def reverse_rotate(self) -> bool:
        """Move the bottom node to the top; False when there is nothing to move."""
        if len(self._nodes) < 2:
            return False
        self._nodes.rotate(1)
        return True

    def values(self) -> list[int]:
        """The values from top to bottom."""
        return [node.value for node in self._nodes]

    def indices(self) -> list[int]:
        """The ranks from top to bottom."""
        return [node.index for node in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"


class PushSwap:
    """Stacks a and b together with the log of operations that took effect."""

    def __init__(
        self,
        values: Iterable[int] = (),
        indices: Optional[Iterable[int]] = None,
    ) -> None:
        values = list(values)
        ranks = [0] * len(values) if indices is None else list(indices)
        if len(ranks) != len(values):
            raise ValueError("values and indices differ in length")
        self.a = Stack(Node(v, i) for v, i in zip(values, ranks))
        self.b = Stack()
        self.log: list[Op] = []

    def _stack(self, name: str) -> Stack:
        if name == "a":
            return self.a
        if name == "b":
            return self.b
        raise ValueError(f"unknown stack {name!r}")

    @staticmethod
    def _move(source: Stack, target: Stack) -> bool:
        if not source:
            return False
        target.push(source.pop())
        return True

    def apply(self, op: Op | str) -> bool:
        """Perform an operation; it is logged only if it changed something.

        Raises ValueError for an unknown instruction.
        """
        op = Op(op)
        actions = {
            Op.SA: self.a.swap,
            Op.SB: self.b.swap,
            Op.PA: lambda: self._move(self.b, self.a),
            Op.PB: lambda: self._move(self.a, self.b),
            Op.RA: self.a.rotate,
            Op.RB: self.b.rotate,
            Op.RRA: self.a.reverse_rotate,
            Op.RRB: self.b.reverse_rotate,
        }
        done = actions[op]()
        if done:
            self.log.append(op)
        return done

    def sa(self) -> bool:
        return self.apply(Op.SA)

    def sb(self) -> bool:
        return self.apply(Op.SB)

    def pa(self) -> bool:
        return self.apply(Op.PA)

    def pb(self) -> bool:
        return self.apply(Op.PB)

    def ra(self) -> bool:
        return self.apply(Op.RA)

    def rb(self) -> bool:
        return self.apply(Op.RB)

    def rra(self) -> bool:
        return self.apply(Op.RRA)

    def rrb(self) -> bool:
        return self.apply(Op.RRB)

    def swap(self, name: str) -> bool:
        """Swap the top of stack ``name`` ('a' or 'b')."""
        self._stack(name)
        return self.apply(Op.SA if name == "a" else Op.SB)

    def rotate(self, name: str) -> bool:
        """Rotate stack ``name`` ('a' or 'b')."""
        self._stack(name)
        return self.apply(Op.RA if name == "a" else Op.RB)

    def reverse_rotate(self, name: str) -> bool:
        """Reverse-rotate stack ``name`` ('a' or 'b')."""
        self._stack(name)
        return self.apply(Op.RRA if name == "a" else Op.RRB)

    def is_solved(self) -> bool:
        """True when b is empty and a is in non-decreasing order from the top."""
        if self.b:
            return False
        values = self.a.values()
        return all(x <= y for x, y in zip(values, values[1:]))