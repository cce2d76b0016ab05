"""The IO standard library: print values to standard output.

Values are written in their ``repr`` form, the same rendering the
collections use for debugging.
"""

from typing import Any


def writeval(value: Any) -> bool:
    print(repr(value), end="")
    return True


def print_value(value: Any) -> None:
    print(repr(value), end="")


def println(value: Any) -> None:
    print(repr(value))
