"""ASCII character classification and case conversion."""

from __future__ import annotations


def _code(ch: str | int) -> int:
    if isinstance(ch, str):
        if len(ch) != 1:
            raise ValueError(f"expected a single character, got {ch!r}")
        return ord(ch)
    return int(ch)


def _like(original: str | int, code: int) -> str | int:
    return chr(code) if isinstance(original, str) else code


def isalpha(ch: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(ch)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(ch: str | int) -> bool:
    """True for ASCII decimal digits."""
    return ord("0") <= _code(ch) <= ord("9")


def isalnum(ch: str | int) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(ch) or isdigit(ch)


def isascii(ch: str | int) -> bool:
    """True for code points 0 through 127."""
    return 0 <= _code(ch) <= 127


def isprint(ch: str | int) -> bool:
    """True for printable ASCII, space through tilde."""
    return 32 <= _code(ch) <= 126


def toupper(ch: str | int) -> str | int:
    """Upper-case an ASCII letter; other values pass through unchanged."""
    code = _code(ch)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _like(ch, code)


def tolower(ch: str | int) -> str | int:
    """Lower-case an ASCII letter; other values pass through unchanged."""
    code = _code(ch)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _like(ch, code)