"""Validating and reading the integers given on the command line."""

from __future__ import annotations

from collections.abc import Iterable

from pushswap.strings import split, strtrim

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))


class InputError(ValueError):
    """Raised when the arguments are not a list of distinct 32-bit integers."""


def _is_digit(char: str) -> bool:
    return len(char) == 1 and "0" <= char <= "9"


def is_valid_token(text: str) -> bool:
    """Return True if ``text`` holds only digits and signs, each sign leading digits.

    A sign must be followed by a digit and may only stand at the start or
    after a space. The empty string is accepted.
    """
    for index, char in enumerate(text):
        if not (_is_digit(char) or char in "+-"):
            return False
        if char in "+-":
            if not _is_digit(text[index + 1 : index + 2]):
                return False
            if index > 0 and text[index - 1] != " ":
                return False
    return True


def parse_long(text: str) -> int:
    """Read a leading signed decimal number, skipping leading whitespace.

    Reading stops at the first non-digit; no digits yields 0.
    """
    position = 0
    length = len(text)
    while position < length and text[position] in _WHITESPACE:
        position += 1
    sign = 1
    if position < length and text[position] in "+-":
        if text[position] == "-":
            sign = -1
        position += 1
    number = 0
    while position < length and _is_digit(text[position]):
        number = number * 10 + int(text[position])
        position += 1
    return number * sign


def check_int_range(number: int) -> int:
    """Return ``number`` if it fits a 32-bit signed integer, else raise InputError."""
    if number > INT_MAX or number < INT_MIN:
        raise InputError(f"{number} does not fit a 32-bit integer")
    return number


def _parse_single(text: str) -> list[int]:
    tokens = split(text, " ")
    if not tokens:
        raise InputError("no numbers given")
    for token in tokens:
        if not is_valid_token(token):
            raise InputError(f"invalid number {token!r}")
        check_int_range(parse_long(token))
    return [parse_long(token) for token in tokens]


def _parse_many(args: list[str]) -> list[int]:
    numbers = []
    for arg in args:
        if not is_valid_token(arg):
            raise InputError(f"invalid number {arg!r}")
        numbers.append(check_int_range(parse_long(strtrim(arg, " "))))
    return numbers


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers for stack ``a``.

    A single argument is split on spaces; several arguments each hold one
    number. Invalid tokens, out-of-range values and duplicates raise
    InputError. No arguments yield an empty list.
    """
    arguments = list(args)
    if not arguments:
        return []
    if len(arguments) == 1:
        numbers = _parse_single(arguments[0])
    else:
        numbers = _parse_many(arguments)
    if len(set(numbers)) != len(numbers):
        raise InputError("duplicate numbers")
    return numbers