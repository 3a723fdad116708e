"""Reading height maps from .fdf files."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

from .reader import read_lines
from .text import atoi, split, strtrim

WHITE = 0xFFFFFF
_HEX_DIGITS = "0123456789abcdef"


class MapError(ValueError):
    """Raised when a map file is missing data or malformed."""


@dataclass
class HeightMap:
    """Grid of heights with a colour per point, indexed ``[line][column]``."""

    heights: list[list[int]]
    colors: list[list[int]]

    def __post_init__(self) -> None:
        if len(self.heights) != len(self.colors) or any(
            len(h) != len(c) for h, c in zip(self.heights, self.colors)
        ):
            raise MapError("heights and colours differ in shape")
        for number, row in enumerate(self.heights, 1):
            if len(row) < self.columns:
                raise MapError(
                    f"line {number} has {len(row)} values, expected {self.columns}"
                )

    @property
    def lines(self) -> int:
        """Number of rows in the map."""
        return len(self.heights)

    @property
    def columns(self) -> int:
        """Number of points per row, taken from the last row."""
        return len(self.heights[-1]) if self.heights else 0


def is_fdf_path(path: str | os.PathLike[str]) -> bool:
    """True when the name is at least five characters and ends in ``.fdf``."""
    name = os.fspath(path)
    return len(name) >= 5 and name.endswith(".fdf")


def parse_color(token: str | None) -> int:
    """Colour of a ``height[,0xRRGGBB]`` token; white when none is given.

    Only lower-case hex digits are read; reading stops at the first other
    character.
    """
    if token is None:
        return 0
    _, comma, rest = token.partition(",")
    if not comma or not rest.startswith("0x"):
        return WHITE
    color = 0
    for char in rest[2:]:
        digit = _HEX_DIGITS.find(char)
        if digit == -1:
            break
        color = color * 16 + digit
    return color & 0xFFFFFFFF


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a :class:`HeightMap` from the lines of a map file."""
    lines = list(lines)
    if not lines or not lines[0] or lines[0].startswith("\n"):
        raise MapError("No data found")
    heights: list[list[int]] = []
    colors: list[list[int]] = []
    for line in lines:
        tokens = split(strtrim(line, "\n "), " ")
        heights.append([atoi(token) for token in tokens])
        colors.append([parse_color(token) for token in tokens])
    return HeightMap(heights, colors)


def load_map(path: str | os.PathLike[str]) -> HeightMap:
    """Read and parse the ``.fdf`` file at ``path``."""
    if not is_fdf_path(path):
        raise MapError(f"expected a <filename>.fdf path, got {os.fspath(path)!r}")
    return parse_map(read_lines(path))