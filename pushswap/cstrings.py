"""String helpers with NUL-terminated string semantics.

A string is read up to its first ``"\\0"`` character, if it has one, just as
a terminated string would be. Searches return offsets into the string, or
``None`` when nothing is found. The bounded copy and concatenation helpers
return the resulting text together with the length they were trying to
produce, so callers can detect truncation.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]


def _terminated(s: str) -> str:
    """Return ``s`` cut at its first NUL character."""
    end = s.find("\0")
    return s if end < 0 else s[:end]


def _as_char(c: CharLike) -> str:
    """Turn a one-character string or an integer (truncated to a byte) into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_size(size: int, name: str = "size") -> None:
    if size < 0:
        raise ValueError(f"{name} must not be negative, got {size}")


def strlen(s: str) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the first ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    offset = text.find(ch)
    return None if offset < 0 else offset


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Offset of the last ``c`` in ``s``; searching for NUL finds the terminator."""
    text = _terminated(s)
    ch = _as_char(c)
    if ch == "\0":
        return len(text)
    offset = text.rfind(ch)
    return None if offset < 0 else offset


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code-point difference at the first mismatch."""
    _check_size(n, "n")
    a = _terminated(s1)[:n]
    b = _terminated(s2)[:n]
    for x, y in zip(a, b):
        if x != y:
            return ord(x) - ord(y)
    if len(a) == len(b):
        return 0
    # One string ended first: its terminator compares against the other's character.
    if len(a) < len(b):
        return -ord(b[len(a)])
    return ord(a[len(b)])


def strnstr(big: str, small: str, size: int) -> Optional[int]:
    """Offset of ``small`` within the first ``size`` characters of ``big``."""
    _check_size(size)
    needle = _terminated(small)
    if not needle:
        return 0
    offset = _terminated(big)[:size].find(needle)
    return None if offset < 0 else offset


def strlcpy(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the destination text and the full length of ``src``. With a size
    of zero the destination is left untouched.
    """
    _check_size(size)
    source = _terminated(src)
    if size == 0:
        return dst, len(source)
    return source[: size - 1], len(source)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots, terminator included.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer, it is returned unchanged together with
    ``size`` plus the length of ``src``.
    """
    _check_size(size)
    destination = _terminated(dst)
    source = _terminated(src)
    dst_len = min(len(destination), size)
    if size <= dst_len:
        return dst, size + len(source)
    room = size - 1 - dst_len
    return destination + source[:room], dst_len + len(source)


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its terminator."""
    return _terminated(s)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` from offset ``start``."""
    _check_size(start, "start")
    _check_size(length, "length")
    text = _terminated(s)
    if len(text) <= start:
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return _terminated(s1) + _terminated(s2)