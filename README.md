# ppmlife

Small tools for plain-text PPM images (the `P3` format). They load and
print images, pull a hidden black-and-white picture out of the low bits of
an image, and step a colour Game of Life.

## Installation

```
pip install .
```

There are no dependencies beyond Python 3.10 or later.

## Commands

Each command reads a P3 file and writes a P3 image to standard output. The
header always gives a maximum value of 255. The maximum value in the input
file is read but not used.

Each command exits with status 255 and writes a message to standard error
in these cases:

- the arguments are wrong
- the file cannot be read
- the file is not a valid P3 image, for example a missing token, a
  non-numeric value, or a channel value above 255

### `ppm-cat FILE`

Reads the image and writes it back out in a normalised layout:

- each pixel is three right-aligned values, each three characters wide
- pixels are separated by three spaces
- each row of the image is one line

```
ppm-cat picture.ppm > copy.ppm
```

### `ppm-steganography FILE`

Reveals a hidden message. An output pixel is white (`255 255 255`) if the
least significant bit of the input pixel's blue channel is 1. Otherwise it
is black.

```
ppm-steganography picture.ppm > secret.ppm
```

### `ppm-life FILE RULE`

Computes one generation of the Game of Life. Each colour channel is its own
grid, and the grid wraps at the edges. A channel is alive when its value is
above zero. An output channel is either 255 (alive) or 0 (dead).

`RULE` is an integer written in decimal, in hex (`0x…`) or in octal (a
leading `0`). It may have a sign, and it is reduced to 32 bits. Bit `n` gives
the next state of a dead cell with `n` live neighbours. Bit `9 + n` gives the
next state of a live cell with `n` live neighbours. Conway's rules are
`0x1808`.

```
ppm-life picture.ppm 0x1808 > next.ppm
```

Each command can also be run as a module. For example,
`python -m ppmlife.gameoflife picture.ppm 0x1808`.

## Library use

```python
from ppmlife.imageloader import read_data, format_image, write_data
from ppmlife.gameoflife import life, parse_rule
from ppmlife.steganography import steganography

image = read_data("picture.ppm")
print(image.rows, image.cols, image.pixel(0, 0))

print(format_image(life(image, parse_rule("0x1808"))), end="")

hidden = steganography(image)
print(hidden.pixel(0, 0).b)
```

### `ppmlife.imageloader`

- `Color(r, g, b)` is a frozen dataclass for one pixel. It raises
  `ValueError` if a channel is outside 0–255.
- `Image(pixels)` is a frozen dataclass holding a tuple of rows of `Color`.
  Its properties `rows` and `cols` give its size, and `pixel(row, col)`
  returns one pixel. All rows must have the same length.
- `read_data(path)` loads a P3 file. It raises `PPMError` when the file
  cannot be read or is not a valid P3 image.
- `format_image(image)` returns the P3 text of an image.
- `write_data(image, out=None)` writes that text to `out`, or to standard
  output if `out` is not given.

### `ppmlife.steganography`

- `evaluate_one_pixel(image, row, col)` returns the decoded colour of one
  pixel.
- `steganography(image)` returns the decoded image.

### `ppmlife.gameoflife`

- `evaluate_one_cell(image, row, col, rule)` returns the next colour of one
  cell.
- `life(image, rule)` returns the next generation.
- `parse_rule(text)` parses a rule as described for `ppm-life`. It raises
  `ValueError` on malformed text.

## Limitations

The package reads and writes only the plain-text `P3` variant of PPM. It
does not handle binary `P6` files or comments in the header. `ppm-life`
computes a single generation per run. It does not animate or write a
sequence of frames.