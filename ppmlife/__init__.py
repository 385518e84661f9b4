"""Plain-text PPM image tools: loading and writing, hidden-bit extraction and a colour Game of Life."""

__version__ = "0.1.0"
__all__ = ["imageloader", "imagecat", "steganography", "gameoflife"]