"""Reveal a black-and-white message hidden in the blue channel's low bit."""

from __future__ import annotations

import sys
from typing import Sequence

from .imageloader import MAX_VALUE, Color, Image, PPMError, read_data, write_data

EXIT_FAILURE = 255


def evaluate_one_pixel(image: Image, row: int, col: int) -> Color:
    """White if the blue channel's lowest bit is set, black otherwise."""
    value = MAX_VALUE if image.pixel(row, col).b & 1 else 0
    return Color(value, value, value)


def steganography(image: Image) -> Image:
    """Build the image of hidden bits for every pixel of image."""
    return Image(
        tuple(
            tuple(evaluate_one_pixel(image, row, col) for col in range(image.cols))
            for row in range(image.rows)
        )
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Decode the image named on the command line and write it to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: steganography <filename>", file=sys.stderr)
        return EXIT_FAILURE
    try:
        image = read_data(args[0])
    except PPMError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    write_data(steganography(image))
    return 0


if __name__ == "__main__":
    sys.exit(main())