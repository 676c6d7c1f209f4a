"""A small formatted-output routine supporting %c %s %% %d %i %u %x %X %p."""

from __future__ import annotations

import sys

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _digits(number: int, base: int, alphabet: str) -> str:
    if number < base:
        return alphabet[number]
    return _digits(number // base, base, alphabet) + alphabet[number % base]


def format_hex(number: int, upper: bool = False) -> str:
    """Return ``number`` as a 32-bit unsigned hexadecimal string."""
    return _digits(number & _UINT_MASK, 16, _HEX_UPPER if upper else _HEX_LOWER)


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x``-prefixed hex, or ``(nil)`` for zero."""
    value = (address or 0) & _ULONG_MASK
    if value == 0:
        return "(nil)"
    return "0x" + _digits(value, 16, _HEX_LOWER)


def format_unsigned(number: int) -> str:
    """Return ``number`` as a 32-bit unsigned decimal string."""
    return _digits(number & _UINT_MASK, 10, "0123456789")


def format_signed(number: int) -> str:
    """Return ``number`` as a 32-bit signed decimal string."""
    value = number & _UINT_MASK
    if value >= 1 << 31:
        value -= 1 << 32
    if value < 0:
        return "-" + _digits(-value, 10, "0123456789")
    return _digits(value, 10, "0123456789")


def _format_char(value: int | str) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(value & 0xFF)


def format_string(fmt: str, *args: object) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    Unknown conversion characters are consumed and produce no output.
    """
    remaining = iter(args)
    pieces: list[str] = []

    def take() -> object:
        try:
            return next(remaining)
        except StopIteration:
            raise ValueError("not enough arguments for format string") from None

    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("format string ends with a lone '%'")
        if spec == "%":
            pieces.append("%")
        elif spec == "c":
            pieces.append(_format_char(take()))  # type: ignore[arg-type]
        elif spec == "s":
            text = take()
            pieces.append("(null)" if text is None else str(text))
        elif spec in "di":
            pieces.append(format_signed(int(take())))  # type: ignore[arg-type]
        elif spec == "u":
            pieces.append(format_unsigned(int(take())))  # type: ignore[arg-type]
        elif spec == "x":
            pieces.append(format_hex(int(take())))  # type: ignore[arg-type]
        elif spec == "X":
            pieces.append(format_hex(int(take()), upper=True))  # type: ignore[arg-type]
        elif spec == "p":
            pointer = take()
            pieces.append(format_pointer(None if pointer is None else int(pointer)))  # type: ignore[arg-type]
    return "".join(pieces)


def printf(fmt: str, *args: object) -> int:
    """Write the expansion of ``fmt`` to standard output; return its length."""
    text = format_string(fmt, *args)
    sys.stdout.write(text)
    return len(text)