# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a small fixed set of operations. It prints each operation it performs,
one per line, so the output is a program that turns the input into sorted
order.

## Operations

| Name  | Effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two elements of `a`                    |
| `sb`  | swap the top two elements of `b`                    |
| `ss`  | `sa` and `sb` at once                               |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top element goes to the bottom   |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` at once                               |
| `rra` | rotate `a` down: the bottom element goes to the top |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` at once                             |

An operation that cannot apply (too few elements, or for `ss`, `rr` and
`rrr` too few in either stack) changes nothing and is not reported.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, or as one space-separated argument.
The first number is the top of stack `a`.

```
$ push-swap 2 1 3
sa
$ push-swap "3 2 1"
ra
sa
```

Nothing is printed when the input is already sorted. With no arguments, or
a single empty argument, nothing is printed and the exit status is 1. Every
number must be a whole number, optionally signed, within the 32-bit signed
range, and no number may appear twice; otherwise `Error` is printed on
standard output and the exit status is 1.

## Library

```python
from pushswap.parsing import parse_arguments
from pushswap.stack import Stacks
from pushswap.sorter import sort_stacks

operations = []
stacks = Stacks(parse_arguments(["4", "-1", "7", "0", "3"]), operations.append)
sort_stacks(stacks)
print(operations)
print([node.data for node in stacks.a])
```

`Stacks(values, emit)` holds the two stacks as lists of `Node`, top first,
and calls `emit` with the name of each operation performed; without `emit`
the names are written to standard output, one per line.

`pushswap.parsing` offers `parse_arguments`, which raises
`pushswap.parsing.InputError` for malformed, out-of-range or duplicate
numbers, along with `split_words`, `parse_int` and `has_syntax_error`.

`pushswap.sorter` offers `sort_stacks`, which picks a strategy by size, and
the pieces it is built from: `sort_three`, `sort_list`, `is_sorted`,
`biggest_node`, `lowest_node`, `min_on_top` and the cost bookkeeping
functions.

`pushswap.formatting.render` and `print_formatted` provide a small
`%c %s %p %d %i %u %x %X %%` formatter.

## Tests

```
pip install .[test]
pytest
```