"""Character classification, case mapping and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_WHITESPACE = frozenset(chr(code) for code in (9, 10, 11, 12, 13, 32))


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, as a C ``int`` would hold it."""
    modulus = 1 << _INT_BITS
    value %= modulus
    if value >= modulus // 2:
        value -= modulus
    return value


def is_digit(code: int) -> bool:
    """Return True if ``code`` is an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def is_alpha(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter."""
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(code: int) -> bool:
    """Return True if ``code`` is an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """Return True if ``code`` lies in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """Return True if ``code`` is a printable ASCII character (space to tilde)."""
    return 31 < code < 127


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; other codes are unchanged."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; other codes are unchanged."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits yields 0. The
    result wraps like a 32-bit signed integer.
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
    while position < length and is_digit(ord(text[position])):
        number = number * 10 + (ord(text[position]) - ord("0"))
        position += 1
    return _wrap_int32(number * sign)


def itoa(number: int) -> str:
    """Return the decimal text of ``number``."""
    return str(int(number))