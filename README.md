# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`, and a
small fixed set of instructions. It prints each instruction it performs, one per
line; carrying out those instructions on the input leaves stack `a` sorted in
ascending order from top to bottom and stack `b` empty.

## Installation

```
pip install .
```

## Command line

Pass the numbers as separate arguments:

```
pushswap 3 2 1 5 4
```

or as one argument with the numbers separated by spaces:

```
pushswap "3 2 1 5 4"
```

The command prints instructions such as `sa`, `pb`, `ra` and `rra` to standard
output and exits with status 0. If no numbers are given, or if they are already
sorted, it prints nothing.

Each number is an optional `+` or `-` followed by decimal digits. The command
writes `Error` to standard error, prints no instructions and exits with status 1
when:

- an argument is not such a number (only spaces separate numbers inside a single
  argument),
- a number does not fit in a signed 32-bit integer,
- the single argument given is empty,
- a number appears more than once.

## Instructions

| Instruction   | Effect                                              |
|---------------|-----------------------------------------------------|
| `sa`          | swap the top two elements of `a`                    |
| `pa`          | move the top of `b` onto `a`                        |
| `pb`          | move the top of `a` onto `b`                        |
| `ra` / `rb`   | rotate `a` / `b` up: the top moves to the bottom    |
| `rra` / `rrb` | rotate `a` / `b` down: the bottom moves to the top  |

Stacks of two to five numbers are sorted with short fixed strategies; larger
ones are moved to `b` in windows of ranks and brought back largest first.

## Using it from Python

```python
from pushswap.sorting import solve

for instruction in solve([3, 2, 1, 5, 4]):
    print(instruction)
```

- `pushswap.sorting.solve(values)` returns the list of `Operation` values that
  sort distinct integers, and raises `ValueError` on duplicates.
- `pushswap.parsing.parse_args(args)` turns command-line style arguments into a
  list of integers and raises `pushswap.parsing.InputError` (a `ValueError`)
  when the input is invalid; `is_valid_int(text)` checks a single number.
- `pushswap.stack.Machine(values)` holds stacks `a` and `b` and records in
  `operations` every instruction that took effect; each instruction method
  returns whether it did. `Stack`, `Node` and `Operation` live in the same
  module, along with `has_duplicates`, `is_sorted` and `rank`.
- `pushswap.cli.run(args)` runs the whole program on a list of arguments and
  returns the instructions; `pushswap.cli.main(argv)` prints them as the command
  does and returns the exit status.

The package also holds small helpers in `pushswap.libft`: character tests and
case conversion (`chars`), byte-buffer routines (`memory`), NUL-terminated
string routines (`strings`), splitting, joining and trimming (`text`), 32-bit
integer conversions (`numbers`) and writes to file descriptors (`output`).
`pushswap.printf` has a minimal formatter: `render(fmt, *args)` returns the text
and `printf(fmt, *args)` writes it to standard output, supporting the `%c`,
`%s`, `%p`, `%d`, `%i`, `%u`, `%x`, `%X` and `%%` conversions.

## What it does not do

Only the seven instructions above exist: there is no `sb`, `ss`, `rr` or `rrr`.
The package produces instructions but has no command that reads a list of
instructions and checks whether it sorts a given input.

## Running the tests

```
pip install .[test]
pytest
```