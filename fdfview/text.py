"""String helpers used when reading map files and formatting numbers."""

from __future__ import annotations

from itertools import islice, zip_longest

_WHITESPACE = " \t\n\v\f\r"
_LONG_BITS = 64
_INT_BITS = 32
_LONG_MAX = (1 << (_LONG_BITS - 1)) - 1


def _wrap(value: int, bits: int) -> int:
    """Wrap an integer into a signed two's-complement range of ``bits``."""
    mask = (1 << bits) - 1
    value &= mask
    if value >> (bits - 1):
        value -= 1 << bits
    return value


def _single(char: str) -> str:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    return char


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the map reader expects.

    Leading whitespace is skipped, one optional sign is accepted and digits
    are read until the first non-digit.  A positive value too large for a
    64-bit signed integer yields ``-1``.  The result is a 32-bit signed int.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    number = 0
    while pos < length and "0" <= text[pos] <= "9":
        digit = ord(text[pos]) - ord("0")
        if sign == 1 and number > (_LONG_MAX - digit) // 10:
            return -1
        number = number * 10 + digit
        pos += 1
    return _wrap(_wrap(number * sign, _LONG_BITS), _INT_BITS)


def itoa(number: int | float) -> str:
    """Format a number as a decimal integer, truncating toward zero."""
    return str(int(number))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on runs of the single character ``sep``.

    Empty fields are dropped.  An empty separator yields the whole text as
    one word (or nothing for empty text).
    """
    if text is None:
        raise TypeError("text must be a string")
    if sep in ("", "\0"):
        return [text] if text else []
    _single(sep)
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str | None, second: str | None) -> str | None:
    """Concatenate two strings; a missing one is treated as absent."""
    if first is None and second is None:
        return None
    return (first or "") + (second or "")


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` fully inside the first ``length`` characters.

    Returns the rest of ``haystack`` from the match, or ``None``.
    """
    if not needle:
        return haystack
    index = haystack.find(needle, 0, max(length, 0))
    return None if index == -1 else haystack[index:]


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the code difference or 0."""
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, max(n, 0)):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: str) -> str | None:
    """Return ``text`` from the first ``char`` on, or ``None``.

    Searching for the NUL character yields the empty tail of the string.
    """
    _single(char)
    if char == "\0":
        return ""
    index = text.find(char)
    return None if index == -1 else text[index:]


def strrchr(text: str, char: str) -> str:
    """Return ``text`` from the last ``char`` on.

    Searching for NUL yields an empty string; when ``char`` is absent the
    whole text is returned.
    """
    _single(char)
    if char == "\0":
        return ""
    index = text.rfind(char)
    return text if index == -1 else text[index:]


def strchr_index(text: str, char: str) -> int:
    """Return the index of the first ``char`` in ``text``, or -1."""
    _single(char)
    if char == "\0":
        return -1
    return text.find(char)