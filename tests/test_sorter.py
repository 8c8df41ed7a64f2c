import itertools
import random

import pytest

from pushswap.sorter import (
    biggest_node,
    current_index,
    get_cheapest,
    init_nodes_a,
    init_nodes_b,
    is_sorted,
    lowest_node,
    min_on_top,
    prep_for_push,
    set_cheapest,
    sort_list,
    sort_stacks,
    sort_three,
)
from pushswap.stack import Node, Stacks


def make(values, b_values=()):
    ops = []
    stacks = Stacks(values, emit=ops.append)
    stacks.b = [Node(v) for v in b_values]
    return stacks, ops


def data(nodes):
    return [node.data for node in nodes]


def replay(values, ops):
    stacks = Stacks(values, emit=lambda name: None)
    for op in ops:
        getattr(stacks, op)()
    return stacks


def test_is_sorted():
    assert is_sorted([]) is True
    assert is_sorted([Node(4)]) is True
    assert is_sorted([Node(1), Node(2), Node(9)]) is True
    assert is_sorted([Node(1), Node(9), Node(2)]) is False


def test_biggest_and_lowest():
    nodes = [Node(v) for v in (5, -3, 17, 0)]
    assert biggest_node(nodes) is nodes[2]
    assert lowest_node(nodes) is nodes[1]
    assert biggest_node([]) is None
    assert lowest_node([]) is None


def test_current_index_positions_and_halves():
    nodes = [Node(v) for v in range(5)]
    current_index(nodes)
    assert [n.index for n in nodes] == [0, 1, 2, 3, 4]
    assert [n.above_median for n in nodes] == [True, True, True, False, False]


def test_set_and_get_cheapest():
    nodes = [Node(v) for v in range(4)]
    for node, cost in zip(nodes, (4, 2, 2, 7)):
        node.push_cost = cost
    assert get_cheapest(nodes) is None
    set_cheapest(nodes)
    assert get_cheapest(nodes) is nodes[1]
    assert [n.cheapest for n in nodes] == [False, True, False, False]


def test_init_nodes_a_targets_closest_smaller_or_biggest():
    stacks, _ = make([5, 1, -10], b_values=[3, 0, 8])
    init_nodes_a(stacks)
    a, b = stacks.a, stacks.b
    assert a[0].target_node is b[0]
    assert a[1].target_node is b[1]
    assert a[2].target_node is b[2]
    assert get_cheapest(a) is not None
    assert all(node.push_cost >= 0 for node in a)


def test_init_nodes_b_targets_closest_larger_or_lowest():
    stacks, _ = make([5, 1, 9], b_values=[3, 10, 0])
    init_nodes_b(stacks)
    a, b = stacks.a, stacks.b
    assert b[0].target_node is a[0]
    assert b[1].target_node is a[1]
    assert b[2].target_node is a[1]


def test_prep_for_push_brings_node_to_top():
    stacks, ops = make([1, 2, 3, 4, 5, 6])
    current_index(stacks.a)
    node = stacks.a[4]
    prep_for_push(stacks, node, "a")
    assert stacks.a[0] is node
    assert ops == ["rra", "rra"]


def test_prep_for_push_on_b_uses_b_rotations():
    stacks, ops = make([], b_values=[1, 2, 3, 4, 5])
    current_index(stacks.b)
    node = stacks.b[1]
    prep_for_push(stacks, node, "b")
    assert stacks.b[0] is node
    assert ops == ["rb"]


def test_prep_for_push_rejects_unknown_name():
    stacks, _ = make([1, 2])
    with pytest.raises(ValueError):
        prep_for_push(stacks, stacks.a[1], "c")


def test_min_on_top():
    stacks, ops = make([3, 4, 1, 2])
    current_index(stacks.a)
    min_on_top(stacks)
    assert data(stacks.a) == [1, 2, 3, 4]
    assert set(ops) <= {"ra", "rra"}


def test_sort_three_reverse():
    stacks, ops = make([3, 2, 1])
    sort_three(stacks)
    assert data(stacks.a) == [1, 2, 3]
    assert ops == ["ra", "sa"]


@pytest.mark.parametrize("perm", list(itertools.permutations([7, -2, 40])))
def test_sort_three_all_orders(perm):
    stacks, ops = make(perm)
    sort_three(stacks)
    assert data(stacks.a) == sorted(perm)
    assert len(ops) <= 2


def test_sort_stacks_two_values():
    stacks, ops = make([2, 1])
    sort_stacks(stacks)
    assert data(stacks.a) == [1, 2]
    assert ops == ["sa"]


def test_sort_stacks_sorted_input_emits_nothing():
    stacks, ops = make([1, 2, 3, 4, 5])
    sort_stacks(stacks)
    assert ops == []
    assert data(stacks.a) == [1, 2, 3, 4, 5]


@pytest.mark.parametrize("perm", list(itertools.permutations([4, 1, 3, 2, 5])))
def test_sort_stacks_every_order_of_five(perm):
    stacks, ops = make(perm)
    sort_stacks(stacks)
    assert data(stacks.a) == sorted(perm)
    assert stacks.b == []
    assert data(replay(perm, ops).a) == sorted(perm)


@pytest.mark.parametrize("size", [4, 6, 10, 50, 100])
def test_sort_list_random_inputs(size):
    rng = random.Random(size)
    values = rng.sample(range(-1000, 1000), size)
    if is_sorted([Node(v) for v in values]):
        values.reverse()
    stacks, ops = make(values)
    sort_list(stacks)
    assert data(stacks.a) == sorted(values)
    assert stacks.b == []
    replayed = replay(values, ops)
    assert data(replayed.a) == sorted(values)
    assert replayed.b == []