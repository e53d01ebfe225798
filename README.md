# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of operations. It prints the operations it uses, one per
line, in the order they are applied.

## Operations

| Name  | Effect                                            |
|-------|---------------------------------------------------|
| `sa`  | swap the top two elements of `a`                  |
| `sb`  | swap the top two elements of `b`                  |
| `ss`  | `sa` and `sb` together                            |
| `pa`  | move the top of `b` onto `a`                      |
| `pb`  | move the top of `a` onto `b`                      |
| `ra`  | rotate `a` up: the top element becomes the last   |
| `rb`  | rotate `b` up                                     |
| `rr`  | `ra` and `rb` together                            |
| `rra` | rotate `a` down: the last element becomes the top |
| `rrb` | rotate `b` down                                   |
| `rrr` | `rra` and `rrb` together                          |

A single-stack operation on a stack with fewer than two elements (or a
push from an empty stack) does nothing and is not recorded. The combined
operations `ss`, `rr` and `rrr` are always recorded.

## Command line

```
pip install .
pushswap 3 2 1 5 4
```

The same command is available as `python -m pushswap.cli`.

Each argument is one integer. The first argument ends up at the top of
stack `a`. If no arguments are given, nothing is printed. If the input
is already sorted, nothing is printed.

An argument that is not an integer, that does not fit in a 32-bit signed
integer, or that repeats another value makes the command write `Error`
to standard error and exit with status 1. Leading whitespace and one
`+` or `-` sign are accepted; reading stops at the first whitespace
after the digits.

## Strategy used by the command

- 2 values: a single swap.
- 3 values: at most two operations, chosen from the order of the values.
- 4 or 5 values: the two smallest go to `b`, the three left are sorted,
  and the two are pushed back.
- More values: values are pushed to `b` in chunks of their sorted rank
  (5 chunks up to 100 values, 11 up to 500, 15 above), then the largest
  remaining value in `b` is brought to the top and pushed back each time.

`pushswap.sorting.dispatch_sort` offers a different choice: for 6 to 20
values it uses `sort_medium`, which moves minima to `b` until five
remain, sorts those, and inserts the rest back in place. The command
does not use it.

## Library use

```python
from pushswap.cli import solve
from pushswap.stacks import Stacks

operations = solve([3, 2, 1])   # list of operation names
stacks = Stacks.from_values([3, 2, 1])
for name in operations:
    getattr(stacks, name)()
assert stacks.a_values() == [1, 2, 3]
```

Modules:

- `pushswap.stacks`: `Element` (a value and its rank) and `Stacks`, the
  two stacks with the eleven operations and an `operations` log.
- `pushswap.ordering`: `is_sorted`, `assign_index`, `get_min`, `get_max`.
- `pushswap.parsing`: `parse_int` and `parse_args`, which raise
  `InputError` on bad input.
- `pushswap.sorting`: the strategies `sort_two`, `sort_three`,
  `sort_five`, `sort_medium`, `chunk_sort`, `dispatch_sort`, and their
  helpers. They expect indices set by `assign_index`.
- `pushswap.cli`: `solve` and the command's `main`.

## What it does not do

There is no checker: the package does not read a list of operations and
verify that they sort a given input. Replaying operations on a `Stacks`
object, as above, is left to the caller.