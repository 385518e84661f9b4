"""One generation of a colour Game of Life on a wrapping grid."""

from __future__ import annotations

import re
import sys
from typing import Sequence

from .imageloader import MAX_VALUE, Color, Image, PPMError, read_data, write_data

EXIT_FAILURE = 255
CONWAY_RULE = 0x1808
_SELF_WEIGHT = 9
_RULE_MASK = 0xFFFFFFFF
_RULE_RE = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def evaluate_one_cell(image: Image, row: int, col: int, rule: int) -> Color:
    """Compute the next colour of one cell under rule.

    Each channel is treated as its own board. A live neighbour adds one to
    the channel's count and a live cell itself adds nine; bit number count
    of rule decides whether the channel lives.
    """
    counts = [0, 0, 0]
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            cell = image.pixel((row + dr) % image.rows, (col + dc) % image.cols)
            weight = _SELF_WEIGHT if dr == dc == 0 else 1
            for index, channel in enumerate((cell.r, cell.g, cell.b)):
                if channel > 0:
                    counts[index] += weight
    return Color(*(MAX_VALUE if (rule >> count) & 1 else 0 for count in counts))


def life(image: Image, rule: int) -> Image:
    """Return the next generation of image under rule."""
    return Image(
        tuple(
            tuple(evaluate_one_cell(image, row, col, rule) for col in range(image.cols))
            for row in range(image.rows)
        )
    )


def parse_rule(text: str) -> int:
    """Parse a rule written in decimal, octal (leading 0) or hex (leading 0x)."""
    match = _RULE_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"invalid rule: {text!r}")
    sign, body = match.groups()
    if body[:2].lower() == "0x":
        value = int(body[2:], 16)
    elif body.startswith("0"):
        value = int(body, 8)
    else:
        value = int(body, 10)
    if sign == "-":
        value = -value
    return value & _RULE_MASK


def main(argv: Sequence[str] | None = None) -> int:
    """Advance the image named on the command line by one generation."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print("usage: gameoflife filename rule", file=sys.stderr)
        print(
            "rule is a number such as 0x1808 giving the cells that live.",
            file=sys.stderr,
        )
        return EXIT_FAILURE
    filename, rule_text = args
    try:
        rule = parse_rule(rule_text)
        image = read_data(filename)
    except (ValueError, PPMError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    write_data(life(image, rule))
    return 0


if __name__ == "__main__":
    sys.exit(main())