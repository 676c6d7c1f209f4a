# pushswap

Building blocks for the push-swap puzzle. In the puzzle a list of distinct
integers is sorted using two stacks, `a` and `b`, and a small set of allowed
moves. This package provides the stacks and their moves, and the parsing and
validation of the integers given as input.

## Stacks and moves

`pushswap.stacks.Stacks` holds stack `a` (filled from the numbers given to it)
and an empty stack `b`. The top of each stack is at index 0. Every move appends
its name to `Stacks.moves`, so that list holds the moves performed so far in
order.

| Move  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up (the top goes to the bottom)      |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down (the bottom comes to the top)   |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

A swap on a stack with fewer than two elements changes nothing. `pa` and `pb`
raise `IndexError` when the stack they take from is empty.

```python
from pushswap.stacks import Stacks

stacks = Stacks([2, 1, 3])
stacks.sa()
stacks.pb()
print(list(stacks.a), list(stacks.b), stacks.moves)
# [2, 3] [1] ['sa', 'pb']
```

## Parsing input

`pushswap.parsing.parse_arguments` turns a list of argument strings into the
numbers for stack `a`:

- a single argument is split on spaces;
- several arguments each hold one number;
- no arguments give an empty list.

A token may hold only digits and signs, each sign followed by a digit. Tokens
that fail this check, values outside the 32-bit signed range and duplicates
raise `InputError` (a subclass of `ValueError`).

```python
from pushswap.parsing import parse_arguments, InputError

parse_arguments(["4 2 3 1"])      # [4, 2, 3, 1]
parse_arguments(["4", "-2", "3"]) # [4, -2, 3]

try:
    parse_arguments(["1 1"])
except InputError as error:
    print(error)                  # duplicate numbers
```

The checks are also available one by one: `is_valid_token`, `parse_long` and
`check_int_range`.

## Helpers

- `pushswap.chars`: ASCII classification (`is_digit`, `is_alpha`, `is_alnum`,
  `is_ascii`, `is_print`), case mapping (`to_lower`, `to_upper`), `atoi` with
  32-bit wrap-around, and `itoa`.
- `pushswap.memory`: byte-buffer routines `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy` and `memmove`.
- `pushswap.strings`: `split`, `strtrim`, `substr`, `strjoin`, `strchr`,
  `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `strmapi` and
  `striteri`.
- `pushswap.linked_list`: a singly linked `LinkedList` of `Node`s with
  `push_front`, `push_back`, `last`, `pop_front`, `clear`, `for_each` and `map`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl` and `put_nbr`, writing
  to a given stream or standard output.
- `pushswap.printf`: `format_string` and `printf` for `%c %s %% %d %i %u %x %X
  %p`, plus `format_signed`, `format_unsigned`, `format_hex` and
  `format_pointer`.
- `pushswap.line_reader`: `LineReader`, which reads a text or binary stream
  through a buffer of a chosen size and yields one line at a time.

## What this package does not do

It has no sorting strategy: nothing here chooses the moves that put stack `a`
in order. It also installs no command; the stacks and the parser are used from
Python code.

## Tests

```
pip install -e ".[test]"
pytest
```