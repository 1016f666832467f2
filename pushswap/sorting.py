"""Sorting stack a of a machine with the fewest practical operations."""

from __future__ import annotations

from typing import Iterable, Optional

from pushswap.stack import Machine, Node, Operation, Stack, has_duplicates, is_sorted


def find_smallest(stack: Stack) -> int:
    """The smallest rank held in the stack."""
    if not len(stack):
        raise ValueError("empty stack has no smallest element")
    return min(stack.indices())


def get_biggest(stack: Stack) -> Optional[Node]:
    """The node of highest rank (the first one on a tie), or None if empty."""
    biggest: Optional[Node] = None
    for node in stack:
        if biggest is None or node.index > biggest.index:
            biggest = node
    return biggest


def find_position(stack: Stack, index: int) -> Optional[int]:
    """Distance from the top of the first node with this rank, or None."""
    for position, node in enumerate(stack):
        if node.index == index:
            return position
    return None


def push_smallest_to_b(machine: Machine) -> None:
    """Rotate a the shorter way until its smallest is on top, then push it to b."""
    a = machine.a
    position = find_position(a, find_smallest(a))
    assert position is not None
    if position <= len(a) // 2:
        for _ in range(position):
            machine.ra()
    else:
        for _ in range(len(a) - position):
            machine.rra()
    machine.pb()


def sort_three(machine: Machine) -> None:
    """Sort a stack a of exactly three elements."""
    if len(machine.a) != 3:
        raise ValueError("sort_three needs exactly three elements in a")
    top, mid, bottom = machine.a.indices()
    if top > mid and mid < bottom and top < bottom:
        machine.sa()
    elif top > mid and mid > bottom and top > bottom:
        machine.sa()
        machine.rra()
    elif top > mid and mid < bottom and top > bottom:
        machine.ra()
    elif top < mid and mid > bottom and top < bottom:
        machine.sa()
        machine.ra()
    elif top < mid and mid > bottom and top > bottom:
        machine.rra()


def sort_four_or_two(machine: Machine) -> None:
    """Sort a stack a of two or four elements; other sizes are left alone."""
    a = machine.a
    if len(a) == 2:
        first, second = a.indices()
        if first > second:
            machine.sa()
    elif len(a) == 4:
        push_smallest_to_b(machine)
        sort_three(machine)
        machine.pa()


def sort_five(machine: Machine) -> None:
    """Sort a stack a of five elements."""
    push_smallest_to_b(machine)
    push_smallest_to_b(machine)
    sort_three(machine)
    machine.pa()
    machine.pa()


def chunk_delta(size: int) -> int:
    """Width of the rank window used when moving elements to b."""
    if size < 10:
        return 2
    if size <= 25:
        return 3
    if size <= 50:
        return 8
    if size <= 100:
        return 13
    if size <= 250:
        return 20
    if size <= 500:
        return 32
    return 40


def _move_all_to_b(machine: Machine, delta: int) -> None:
    threshold = 0
    while len(machine.a):
        current = machine.a.head()
        assert current is not None
        if current.index <= threshold + delta:
            machine.pb()
            if current.index <= threshold:
                machine.rb()
            threshold += 1
        else:
            machine.ra()


def _return_all_to_a(machine: Machine) -> None:
    b = machine.b
    while len(b):
        biggest = get_biggest(b)
        assert biggest is not None
        position = find_position(b, biggest.index)
        mid = len(b) // 2 - 1
        # The direction is chosen once, from the starting position.
        while position is not None and biggest is not b.head():
            if position < mid:
                machine.rb()
            else:
                machine.rrb()
        machine.pa()


def big_sort(machine: Machine) -> None:
    """Sort a of any size by chunked pushes to b and a return by maximum."""
    _move_all_to_b(machine, chunk_delta(len(machine.a)))
    _return_all_to_a(machine)


def solve(values: Iterable[int]) -> list[Operation]:
    """The operations that sort the given distinct values."""
    values = list(values)
    if has_duplicates(values):
        raise ValueError("values must be distinct")
    if is_sorted(values):
        return []
    machine = Machine(values)
    size = len(values)
    if size == 3:
        sort_three(machine)
    elif size in (2, 4):
        sort_four_or_two(machine)
    elif size == 5:
        sort_five(machine)
    else:
        big_sort(machine)
    return list(machine.operations)