"""Reading and writing plain-text (P3) PPM images."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import Iterator, TextIO, Union

MAX_VALUE = 255

PathLike = Union[str, "os.PathLike[str]"]


class PPMError(Exception):
    """Raised when a file cannot be read as a P3 image."""


@dataclass(frozen=True)
class Color:
    """One RGB pixel with 8-bit channels."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= MAX_VALUE:
                raise ValueError(f"channel value out of range: {channel}")


@dataclass(frozen=True)
class Image:
    """A rectangular grid of pixels, stored row by row."""

    pixels: tuple[tuple[Color, ...], ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(row) for row in self.pixels)
        object.__setattr__(self, "pixels", rows)
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("all rows of an image must have the same length")

    @property
    def rows(self) -> int:
        return len(self.pixels)

    @property
    def cols(self) -> int:
        return len(self.pixels[0]) if self.pixels else 0

    def pixel(self, row: int, col: int) -> Color:
        """Return the pixel at the given row and column."""
        return self.pixels[row][col]


def _next_int(tokens: Iterator[str], what: str) -> int:
    token = next(tokens, None)
    if token is None:
        raise PPMError(f"unexpected end of file while reading {what}")
    if not token.isdigit():
        raise PPMError(f"invalid {what}: {token!r}")
    return int(token)


def read_data(path: PathLike) -> Image:
    """Load a P3 PPM file into an Image."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise PPMError(f"cannot read {path}: {exc}") from exc

    tokens = iter(text.split())
    if next(tokens, None) != "P3":
        raise PPMError(f"{path} is not a P3 file")

    cols = _next_int(tokens, "width")
    rows = _next_int(tokens, "height")
    _next_int(tokens, "maximum value")

    try:
        pixels = tuple(
            tuple(
                Color(
                    _next_int(tokens, "red value"),
                    _next_int(tokens, "green value"),
                    _next_int(tokens, "blue value"),
                )
                for _ in range(cols)
            )
            for _ in range(rows)
        )
    except ValueError as exc:
        raise PPMError(str(exc)) from exc
    return Image(pixels)


def format_image(image: Image) -> str:
    """Render an image as the text of a P3 PPM file."""
    lines = ["P3", f"{image.cols} {image.rows}", str(MAX_VALUE)]
    lines.extend(
        "   ".join(f"{p.r:3d} {p.g:3d} {p.b:3d}" for p in row)
        for row in image.pixels
    )
    return "\n".join(lines) + "\n"


def write_data(image: Image, out: TextIO | None = None) -> None:
    """Write an image as P3 PPM text to out, or to standard output."""
    (out if out is not None else sys.stdout).write(format_image(image))