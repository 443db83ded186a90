"""Small string helpers used throughout the shell."""

from __future__ import annotations

from itertools import islice, zip_longest

_DIGITS = frozenset("0123456789")


def is_number(text: str | None) -> bool:
    """Return True if *text* is an optionally signed run of ASCII digits."""
    if text is None:
        return False
    if text[:1] in ("-", "+"):
        text = text[1:]
    return bool(text) and all(ch in _DIGITS for ch in text)


def split(text: str, sep: str) -> list[str]:
    """Split *text* on the single character *sep*, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def trim(text: str, chars: str) -> str:
    """Remove every character in *chars* from both ends of *text*."""
    return text.strip(chars)


def find_within(haystack: str, needle: str, limit: int) -> int | None:
    """Return the index of *needle* lying wholly within the first *limit*
    characters of *haystack*, or None when it does not occur there."""
    if not needle:
        return 0
    if limit < 0:
        raise ValueError("limit must not be negative")
    index = haystack.find(needle, 0, min(limit, len(haystack)))
    return None if index < 0 else index


def _difference(pairs) -> int:
    for left, right in pairs:
        if left != right:
            return (ord(left) if left else 0) - (ord(right) if right else 0)
    return 0


def compare(a: str, b: str) -> int:
    """Compare two strings; the result is the difference of the first
    characters that differ, with a missing character counting as zero."""
    return _difference(zip_longest(a, b, fillvalue=""))


def compare_n(a: str, b: str, n: int) -> int:
    """Like :func:`compare`, looking at no more than *n* characters."""
    if n < 0:
        raise ValueError("n must not be negative")
    return _difference(islice(zip_longest(a, b, fillvalue=""), n))


def substring(text: str, start: int, length: int) -> str:
    """Return at most *length* characters of *text* beginning at *start*;
    an empty string when *start* lies past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]