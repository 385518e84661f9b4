"""Command that loads a P3 image and prints it back out."""

from __future__ import annotations

import sys
from typing import Sequence

from .imageloader import PPMError, read_data, write_data

EXIT_FAILURE = 255


def main(argv: Sequence[str] | None = None) -> int:
    """Read the image named on the command line and write it to stdout."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: imagecat filename", file=sys.stderr)
        print(
            "filename is an ASCII PPM file (type P3) with maximum value 255.",
            file=sys.stderr,
        )
        return EXIT_FAILURE
    try:
        image = read_data(args[0])
    except PPMError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    write_data(image)
    return 0


if __name__ == "__main__":
    sys.exit(main())