"""The two stacks of the puzzle and the eleven operations on them."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class Node:
    """One element of a stack, with the bookkeeping the sorter fills in."""

    data: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target_node: Node | None = field(default=None, repr=False)


def _print_operation(name: str) -> None:
    sys.stdout.write(name + "\n")


def _swap_top(stack: list[Node]) -> bool:
    """Exchange the values of the two top nodes; the nodes stay in place."""
    if len(stack) < 2:
        return False
    first, second = stack[0], stack[1]
    first.data, second.data = second.data, first.data
    return True


def _rotate(stack: list[Node]) -> bool:
    """Move the top node to the bottom."""
    if len(stack) < 2:
        return False
    stack.append(stack.pop(0))
    return True


def _reverse_rotate(stack: list[Node]) -> bool:
    """Move the bottom node to the top."""
    if len(stack) < 2:
        return False
    stack.insert(0, stack.pop())
    return True


def _push(source: list[Node], target: list[Node]) -> bool:
    """Move the top node of ``source`` onto ``target``."""
    if not source:
        return False
    target.insert(0, source.pop(0))
    return True


class Stacks:
    """Stacks ``a`` and ``b``, top first, with the puzzle's operations.

    Every operation that changes something reports its name through ``emit``;
    one that cannot apply leaves both stacks alone and reports nothing.
    """

    def __init__(
        self,
        values: Iterable[int] = (),
        emit: Callable[[str], None] | None = None,
    ) -> None:
        self.a: list[Node] = [Node(value) for value in values]
        self.b: list[Node] = []
        self._emit = emit if emit is not None else _print_operation

    def __repr__(self) -> str:
        a_values = [node.data for node in self.a]
        b_values = [node.data for node in self.b]
        return f"Stacks(a={a_values}, b={b_values})"

    def _report(self, done: bool, name: str) -> None:
        if done:
            self._emit(name)

    def sa(self) -> None:
        """Swap the two top values of ``a``."""
        self._report(_swap_top(self.a), "sa")

    def sb(self) -> None:
        """Swap the two top values of ``b``."""
        self._report(_swap_top(self.b), "sb")

    def ss(self) -> None:
        """Swap the top values of both stacks; only when both hold two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        _swap_top(self.a)
        _swap_top(self.b)
        self._emit("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._report(_push(self.b, self.a), "pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._report(_push(self.a, self.b), "pb")

    def ra(self) -> None:
        """Rotate ``a`` upwards: the top goes to the bottom."""
        self._report(_rotate(self.a), "ra")

    def rb(self) -> None:
        """Rotate ``b`` upwards: the top goes to the bottom."""
        self._report(_rotate(self.b), "rb")

    def rr(self) -> None:
        """Rotate both stacks upwards; only when both hold two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        _rotate(self.a)
        _rotate(self.b)
        self._emit("rr")

    def rra(self) -> None:
        """Rotate ``a`` downwards: the bottom goes to the top."""
        self._report(_reverse_rotate(self.a), "rra")

    def rrb(self) -> None:
        """Rotate ``b`` downwards: the bottom goes to the top."""
        self._report(_reverse_rotate(self.b), "rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards; only when both hold two."""
        if len(self.a) < 2 or len(self.b) < 2:
            return
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self._emit("rrr")