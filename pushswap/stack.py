"""Two-stack machine: the stacks, their nodes and the seven operations."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """An element of a stack: its value and its rank among all values."""

    value: int
    index: int = -1


class Stack:
    """A double-ended stack of nodes; the head is the top."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self._nodes: deque[Node] = deque(nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def head(self) -> Optional[Node]:
        """Return the top node, or None when the stack is empty."""
        return self._nodes[0] if self._nodes else None

    def push(self, node: Node) -> None:
        """Put a node on top."""
        self._nodes.appendleft(node)

    def pop(self) -> Node:
        """Remove and return the top node."""
        if not self._nodes:
            raise IndexError("pop from an empty stack")
        return self._nodes.popleft()

    def push_back(self, node: Node) -> None:
        """Put a node at the bottom."""
        self._nodes.append(node)

    def pop_back(self) -> Node:
        """Remove and return the bottom node."""
        if not self._nodes:
            raise IndexError("pop_back from an empty stack")
        return self._nodes.pop()

    def values(self) -> list[int]:
        """Values from top to bottom."""
        return [node.value for node in self._nodes]

    def indices(self) -> list[int]:
        """Ranks from top to bottom."""
        return [node.index for node in self._nodes]


class Operation(str, Enum):
    """The instructions the machine understands, spelt as they are printed."""

    PA = "pa"
    PB = "pb"
    SA = "sa"
    RA = "ra"
    RB = "rb"
    RRA = "rra"
    RRB = "rrb"

    def __str__(self) -> str:
        return self.value


class Machine:
    """Stacks a and b plus the record of every operation that took effect.

    An operation that cannot apply (too few elements) does nothing and is
    not recorded; each method returns whether it took effect.
    """

    def __init__(self, values: Iterable[int]) -> None:
        values = list(values)
        self.a = Stack(Node(value, index) for value, index in zip(values, rank(values)))
        self.b = Stack()
        self.operations: list[Operation] = []

    def _record(self, operation: Operation) -> bool:
        self.operations.append(operation)
        return True

    def pa(self) -> bool:
        """Move the top of b onto a."""
        if not self.b:
            return False
        self.a.push(self.b.pop())
        return self._record(Operation.PA)

    def pb(self) -> bool:
        """Move the top of a onto b."""
        if not self.a:
            return False
        self.b.push(self.a.pop())
        return self._record(Operation.PB)

    def sa(self) -> bool:
        """Swap the two top elements of a."""
        if len(self.a) < 2:
            return False
        first = self.a.pop()
        second = self.a.pop()
        self.a.push(first)
        self.a.push(second)
        return self._record(Operation.SA)

    @staticmethod
    def _rotate(stack: Stack) -> bool:
        if len(stack) < 2:
            return False
        stack.push_back(stack.pop())
        return True

    @staticmethod
    def _reverse_rotate(stack: Stack) -> bool:
        if len(stack) < 2:
            return False
        stack.push(stack.pop_back())
        return True

    def ra(self) -> bool:
        """Send the top of a to its bottom."""
        return self._rotate(self.a) and self._record(Operation.RA)

    def rb(self) -> bool:
        """Send the top of b to its bottom."""
        return self._rotate(self.b) and self._record(Operation.RB)

    def rra(self) -> bool:
        """Bring the bottom of a to its top."""
        return self._reverse_rotate(self.a) and self._record(Operation.RRA)

    def rrb(self) -> bool:
        """Bring the bottom of b to its top."""
        return self._reverse_rotate(self.b) and self._record(Operation.RRB)


def has_duplicates(values: Iterable[int]) -> bool:
    """True if any value occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Iterable[int]) -> bool:
    """True if the values never decrease from first to last."""
    values = list(values)
    return all(left <= right for left, right in zip(values, values[1:]))


def rank(values: Iterable[int]) -> list[int]:
    """One plus the number of strictly smaller values, for each value."""
    values = list(values)
    ordered = sorted(values)
    return [1 + bisect_left(ordered, value) for value in values]