"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.text import split_words

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class InputError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""


def is_valid_number(text: str) -> bool:
    """True for an optional sign followed by one or more ASCII digits."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return bool(body) and all("0" <= ch <= "9" for ch in body)


def safe_atoi(text: str) -> int:
    """Convert ``text`` to an integer that fits in 32 signed bits."""
    if not is_valid_number(text):
        raise InputError(f"not an integer: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise InputError(f"integer out of range: {text!r}")
    return value


def parse_arguments(args: Iterable[str]) -> List[int]:
    """Turn the program arguments into a list of distinct integers.

    A single argument is split on spaces; several arguments are each taken
    as one number.
    """
    arguments = list(args)
    words = split_words(arguments[0], " ") if len(arguments) == 1 else arguments
    values: List[int] = []
    seen = set()
    for word in words:
        value = safe_atoi(word)
        if value in seen:
            raise InputError(f"duplicate number: {value}")
        seen.add(value)
        values.append(value)
    return values