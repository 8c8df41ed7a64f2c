"""The cost-driven strategy that sorts stack ``a`` using stack ``b``."""

from __future__ import annotations

from collections.abc import Sequence

from pushswap.stack import Node, Stacks


def is_sorted(nodes: Sequence[Node]) -> bool:
    """Tell whether the values rise from top to bottom."""
    return all(upper.data <= lower.data for upper, lower in zip(nodes, nodes[1:]))


def biggest_node(nodes: Sequence[Node]) -> Node | None:
    """Return the first node holding the largest value, or None if empty."""
    best: Node | None = None
    for node in nodes:
        if best is None or node.data > best.data:
            best = node
    return best


def lowest_node(nodes: Sequence[Node]) -> Node | None:
    """Return the first node holding the smallest value, or None if empty."""
    best: Node | None = None
    for node in nodes:
        if best is None or node.data < best.data:
            best = node
    return best


def current_index(nodes: Sequence[Node]) -> None:
    """Record each node's position and whether it lies in the upper half."""
    median = len(nodes) // 2
    for position, node in enumerate(nodes):
        node.index = position
        node.above_median = position <= median


def _set_target_a(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Aim each node of ``a`` at the closest smaller value in ``b``.

    Without a smaller value the target is the largest value in ``b``.
    """
    for node in a:
        smaller = [candidate for candidate in b if candidate.data < node.data]
        node.target_node = biggest_node(smaller) if smaller else biggest_node(b)


def _set_target_b(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Aim each node of ``b`` at the closest larger value in ``a``.

    Without a larger value the target is the smallest value in ``a``.
    """
    for node in b:
        larger = [candidate for candidate in a if candidate.data > node.data]
        node.target_node = lowest_node(larger) if larger else lowest_node(a)


def _cost_analysis_a(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Count the rotations needed to bring each node and its target on top."""
    len_a, len_b = len(a), len(b)
    for node in a:
        cost = node.index if node.above_median else len_a - node.index
        target = node.target_node
        cost += target.index if target.above_median else len_b - target.index
        node.push_cost = cost


def set_cheapest(nodes: Sequence[Node]) -> None:
    """Flag the first node with the lowest push cost."""
    cheapest: Node | None = None
    for node in nodes:
        if cheapest is None or node.push_cost < cheapest.push_cost:
            cheapest = node
    if cheapest is not None:
        cheapest.cheapest = True


def get_cheapest(nodes: Sequence[Node]) -> Node | None:
    """Return the first node flagged as cheapest, or None."""
    return next((node for node in nodes if node.cheapest), None)


def init_nodes_a(stacks: Stacks) -> None:
    """Prepare ``a`` for the next move to ``b``: positions, targets, costs."""
    current_index(stacks.a)
    current_index(stacks.b)
    _set_target_a(stacks.a, stacks.b)
    _cost_analysis_a(stacks.a, stacks.b)
    set_cheapest(stacks.a)


def init_nodes_b(stacks: Stacks) -> None:
    """Prepare ``b`` for the next move back to ``a``: positions and targets."""
    current_index(stacks.a)
    current_index(stacks.b)
    _set_target_b(stacks.a, stacks.b)


def prep_for_push(stacks: Stacks, node: Node, name: str) -> None:
    """Rotate stack ``name`` (``"a"`` or ``"b"``) until ``node`` is on top."""
    if name == "a":
        stack, forward, backward = stacks.a, stacks.ra, stacks.rra
    elif name == "b":
        stack, forward, backward = stacks.b, stacks.rb, stacks.rrb
    else:
        raise ValueError(f"unknown stack name: {name!r}")
    while stack[0] is not node:
        if node.above_median:
            forward()
        else:
            backward()


def min_on_top(stacks: Stacks) -> None:
    """Rotate ``a`` until its smallest value is on top."""
    while stacks.a[0].data != lowest_node(stacks.a).data:
        if lowest_node(stacks.a).above_median:
            stacks.ra()
        else:
            stacks.rra()


def sort_three(stacks: Stacks) -> None:
    """Sort a stack ``a`` of three values with at most two operations."""
    a = stacks.a
    biggest = biggest_node(a)
    if biggest is a[0]:
        stacks.ra()
    elif a[1] is biggest:
        stacks.rra()
    if a[0].data > a[1].data:
        stacks.sa()


def _rotate_both(stacks: Stacks, cheapest: Node) -> None:
    while stacks.b[0] is not cheapest.target_node and stacks.a[0] is not cheapest:
        stacks.rr()
    current_index(stacks.a)
    current_index(stacks.b)


def _rev_rotate_both(stacks: Stacks, cheapest: Node) -> None:
    while stacks.b[0] is not cheapest.target_node and stacks.a[0] is not cheapest:
        stacks.rrr()
    current_index(stacks.a)
    current_index(stacks.b)


def _move_a_to_b(stacks: Stacks) -> None:
    cheapest = get_cheapest(stacks.a)
    target = cheapest.target_node
    if cheapest.above_median and target.above_median:
        _rotate_both(stacks, cheapest)
    elif not cheapest.above_median and not target.above_median:
        _rev_rotate_both(stacks, cheapest)
    prep_for_push(stacks, cheapest, "a")
    prep_for_push(stacks, target, "b")
    stacks.pb()


def _move_b_to_a(stacks: Stacks) -> None:
    prep_for_push(stacks, stacks.b[0].target_node, "a")
    stacks.pa()


def sort_list(stacks: Stacks) -> None:
    """Sort an ``a`` of more than three values, leaving ``b`` empty."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(stacks.a):
            stacks.pb()
        remaining -= 1
    while remaining > 3 and not is_sorted(stacks.a):
        remaining -= 1
        init_nodes_a(stacks)
        _move_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        init_nodes_b(stacks)
        _move_b_to_a(stacks)
    current_index(stacks.a)
    min_on_top(stacks)


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``a`` with the strategy that suits its size."""
    if is_sorted(stacks.a):
        return
    if len(stacks.a) == 2:
        stacks.sa()
    elif len(stacks.a) == 3:
        sort_three(stacks)
    else:
        sort_list(stacks)