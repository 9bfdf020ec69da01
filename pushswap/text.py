"""Text helpers: trimming, splitting, mapping and integer conversion."""

from __future__ import annotations

from typing import Callable, List, MutableSequence

from pushswap.cstrings import strdup

_WHITESPACE = " \t\n\v\f\r"


def _single_char(c: str) -> str:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    return c


def strtrim(s: str, charset: str) -> str:
    """Remove every leading and trailing character of ``s`` found in ``charset``."""
    text = strdup(s)
    trim = strdup(charset)
    if not trim:
        return text
    return text.strip(trim)


def split_words(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    separator = _single_char(sep)
    return [word for word in strdup(text).split(separator) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(strdup(s)))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str]
) -> MutableSequence[str]:
    """Replace each character in place with ``func(index, char)``.

    Stops at the first NUL character, as a terminated string would.
    Returns the same sequence.
    """
    for index, ch in enumerate(chars):
        if ch == "\0":
            break
        chars[index] = func(index, ch)
    return chars


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first character that is not a digit; a string
    with no digits gives 0.
    """
    s = strdup(text)
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    negative = False
    if pos < len(s) and s[pos] in "+-":
        negative = s[pos] == "-"
        pos += 1
    number = 0
    while pos < len(s) and "0" <= s[pos] <= "9":
        number = number * 10 + (ord(s[pos]) - ord("0"))
        pos += 1
    return -number if negative else number


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)