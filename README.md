# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small fixed set of
operations. The package also has a checker that replays a sequence of
operations and reports whether it leaves `a` sorted.

## Operations

| op    | effect                                              |
|-------|-----------------------------------------------------|
| `sa`  | swap the top two values of `a`                      |
| `sb`  | swap the top two values of `b`                      |
| `ss`  | `sa` and `sb` at once                               |
| `pa`  | move the top of `b` onto `a`                        |
| `pb`  | move the top of `a` onto `b`                        |
| `ra`  | rotate `a` up: the top value goes to the bottom     |
| `rb`  | rotate `b` up                                       |
| `rr`  | `ra` and `rb` at once                               |
| `rra` | rotate `a` down: the bottom value goes to the top   |
| `rrb` | rotate `b` down                                     |
| `rrr` | `rra` and `rrb` at once                             |

## Installation

```
pip install .
```

## Command line

Print the operations that sort the numbers, one per line:

```
push-swap 3 2 10 7 5 1
push-swap "3 2 10 7 5 1"
```

The numbers can be given as separate arguments or as one space-separated
argument. Input that is not a list of distinct 32-bit integers prints `Error`
on standard error and exits with status 1. With no arguments nothing is
printed.

Check a sequence of operations read from standard input, one per line:

```
push-swap 3 2 1 | push-swap-checker 3 2 1
```

The checker stops reading at the end of input or at an empty line, then prints
`OK` if `a` is sorted and `KO` if it is not. It prints `Error` on standard
error for invalid arguments, for an unknown operation, or when `ss` or `rr`
cannot be carried out on both stacks.

## Library use

```python
from pushswap.sorting import solve
from pushswap.checker import run_checker

values = [3, 2, 10, 7, 5, 1]
ops = solve(values)
print(ops)
print(run_checker(values, (op + "\n" for op in ops)))
```

`run_checker` takes operation lines as they are read from input, newline
included; `rr` and `rrr` are only recognised with their trailing newline.

Modules:

- `pushswap.stacks` – `Stacks`, holding deques `a` and `b` with one method
  per operation (`sa`, `pb`, `rra`, …); with `record=True` the names of the
  operations carried out are collected in `operations`. Also `is_sorted`.
- `pushswap.sorting` – `solve`, `sort_stacks` and the steps they use
  (`small_sort`, `sort_three`, `push_b_to_a`, `last_roll`, `get_count`,
  `find_target_a`, `find_target_b`); `main` is the `push-swap` command.
- `pushswap.checker` – `apply_operation`, `run_checker` and
  `OperationError`; `main` is the `push-swap-checker` command.
- `pushswap.validation` – `validate_arguments` and `parse_arguments`, which
  raise `InputError`, plus the checks they are built from (`is_int`,
  `is_list`, `check_int`, `is_empty`, `is_charset`).
- `pushswap.linereader` – `LineReader`, reading a text or binary stream line
  by line through a fixed-size buffer (42 by default).
- `pushswap.convert` – `atoi` (wrapping like a signed 32-bit integer),
  `itoa` and `split`.
- `pushswap.printf` – `sprintf` and `printf` for `%c %s %p %d %i %u %x %X %%`,
  and the helpers `utoa`, `utoa_hex`, `pointer_hex`.
- `pushswap.strings` – C-style string routines (`strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `substr`, `strtrim`, …).
- `pushswap.charclass` – ASCII classification and case conversion.
- `pushswap.linkedlist` – `LinkedList` and `Node`, a doubly linked list.
- `pushswap.output` – `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  writing to a text stream.

## Tests

```
pip install .[test]
pytest
```