"""Push-swap stacks and moves, input parsing, and small text and buffer helpers."""

__version__ = "0.1.0"