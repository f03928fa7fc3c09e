# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. The `push-swap` command prints each operation it
performs, one per line, so the output is a complete recipe for sorting the
input.

## Operations

Each stack has its top first. An operation that cannot apply (for example a
rotation of an empty stack) does nothing and is not recorded.

| Name  | Effect                                                    |
|-------|-----------------------------------------------------------|
| `sa`  | swap the top two elements of `a`                          |
| `sb`  | swap the top two elements of `b`                          |
| `ss`  | `sa` and `sb` together (only when both stacks hold items) |
| `pa`  | move the top of `b` onto `a`                              |
| `pb`  | move the top of `a` onto `b`                              |
| `ra`  | rotate `a` upwards: the top goes to the bottom            |
| `rb`  | rotate `b` upwards                                        |
| `rr`  | `ra` and `rb` together                                    |
| `rra` | rotate `a` downwards: the bottom comes to the top         |
| `rrb` | rotate `b` downwards                                      |
| `rrr` | rotate `a` downwards and `b` upwards                      |

`pa` and `pb` raise `IndexError` when the stack they take from is empty.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 5 1 4
```

Each argument is one integer in the signed 32-bit range, with an optional
leading `+` or `-`; every other character must be a digit, and an argument
with no digits reads as 0. If an argument is not a valid integer, is out of
range, or repeats an earlier value, `Error` is written to standard error and
nothing is sorted. With fewer than two arguments, or an input that is already
sorted, nothing is printed. The exit status is 0 in every case.

## Library use

```python
from pushswap.parsing import parse_arguments, ParseError
from pushswap.sorting import push_swap, rank, is_sorted
from pushswap.stacks import Stacks

values = parse_arguments(["3", "2", "5", "1", "4"])
moves = push_swap(values)   # list of operation names, e.g. ["pb", "ra", ...]

rank([40, -2, 7])           # [3, 1, 2]
is_sorted([1, 2, 3])        # True
```

`parse_arguments` raises `ParseError` (a `ValueError`) for an invalid or
repeated argument; `parse_int` checks a single argument.

`Stacks` holds the two stacks as deques and exposes each operation as a
method (`sa`, `pb`, `rra`, ...). Every operation that takes effect is written,
with a newline, to the stream given to the constructor (standard output by
default) and appended to `Stacks.history`, so a sequence of operations can be
replayed and checked:

```python
import io
from pushswap.stacks import Stacks

stacks = Stacks([2, 1, 3], stream=io.StringIO())
stacks.sa()
list(stacks.a)        # [1, 2, 3]
stacks.history        # ["sa"]
```

`pushswap.sorting` also exposes the steps of the algorithm: `presort`,
`sort_stacks`, `sort_three`, `search_path`, `search_opti`, `decide_result`,
`best_part_size` and `choose_in_b`.

## Helpers

The package also contains a few small stand-alone helpers:

- `pushswap.chars` – ASCII classification and case conversion (`isalpha`,
  `isdigit`, `isalnum`, `isascii`, `isprint`, `toupper`, `tolower`).
- `pushswap.memory` – byte-buffer routines (`memset`, `bzero`, `memcpy`,
  `memmove`, `memchr`, `memcmp`, `calloc`).
- `pushswap.strings` – NUL-terminated string queries (`strlen`, `strchr`,
  `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat`, `strdup`).
- `pushswap.transform` – `split`, `strtrim`, `substr`, `strjoin`, `strmapi`,
  `striteri`.
- `pushswap.numbers` – `atoi` and `itoa` with 32-bit wrapping.
- `pushswap.printf` – `format_string` and `printf` for `%c %s %p %d %i %u %x %X %%`.
- `pushswap.output` – `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`.
- `pushswap.linked` – `Node` and `LinkedList`, a singly linked list.
- `pushswap.line_reader` – `LineReader`, reading a stream line by line through
  a fixed-size buffer.

## What it does not do

There is no command that reads a list of operations from standard input and
reports whether they sort a given input. To check a sequence, replay it on a
`Stacks` object and test the result with `is_sorted`.

## Running the tests

```
pip install .[test]
pytest
```