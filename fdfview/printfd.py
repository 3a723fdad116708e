"""Small printf-style formatting onto text streams."""

from __future__ import annotations

from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_NULL_STR = "(null)"
_NULL_PTR = "(nil)"


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >> 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_PTR
    address = value if isinstance(value, int) else id(value)
    if address == 0:
        return _NULL_PTR
    return "0x" + format(address, "x")


def format_conversion(conversion: str, value: Any = None) -> str:
    """Render one conversion (``c s d i u x X p %``) of ``value``.

    An unknown conversion renders as the empty string.
    """
    if conversion == "%":
        return "%"
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return _NULL_STR if value is None else str(value)
    if conversion in ("d", "i"):
        return str(_to_int32(int(value)))
    if conversion == "u":
        return str(int(value) & _UINT_MASK)
    if conversion == "x":
        return format(int(value) & _UINT_MASK, "x")
    if conversion == "X":
        return format(int(value) & _UINT_MASK, "X")
    if conversion == "p":
        return _pointer(value)
    return ""


def format_text(fmt: str, *args: Any) -> str:
    """Expand every ``%`` conversion in ``fmt`` with successive ``args``."""
    if fmt is None:
        raise TypeError("format must be a string")
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        conversion = next(chars, "")
        if not conversion:
            break
        if conversion == "%":
            pieces.append("%")
            continue
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None
        pieces.append(format_conversion(conversion, value))
    return "".join(pieces)


def _write(stream: TextIO, text: str) -> int:
    if stream is None:
        raise ValueError("no output stream")
    stream.write(text)
    return len(text)


def printfd(stream: TextIO, fmt: str, *args: Any) -> int:
    """Format ``fmt`` with ``args``, write it to ``stream`` and return its length."""
    return _write(stream, format_text(fmt, *args))


def put_char(stream: TextIO, char: Any) -> int:
    """Write a single character; returns 1."""
    return _write(stream, _char(char))


def put_str(stream: TextIO, text: str | None) -> int:
    """Write ``text`` (``None`` as ``(null)``) and return its length."""
    return _write(stream, format_conversion("s", text))


def put_endl(stream: TextIO, text: str) -> int:
    """Write ``text`` followed by a newline."""
    if text is None:
        raise TypeError("text must be a string")
    return _write(stream, text + "\n")


def put_number(stream: TextIO, number: int) -> int:
    """Write a 32-bit signed decimal number and return its length."""
    return _write(stream, format_conversion("d", number))