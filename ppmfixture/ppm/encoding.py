from __future__ import annotations

from typing import Iterable, Sequence

from ..raster.types import Raster

MAGIC = b"P6"


def comment_line(values: Sequence[int]) -> str:
    """Format one metadata comment line (without the trailing newline)."""
    return "# " + " ".join(str(value) for value in values)


def build_header(width: int, height: int, max_value: int, comments: Iterable[Sequence[int]]) -> bytes:
    """Build the ASCII P6 header, metadata comments included."""
    if width <= 0 or height <= 0:
        raise ValueError("Width and height must be greater than zero")
    if not 0 < max_value <= 255:
        raise ValueError("Max value must be between 1 and 255")
    lines = [MAGIC.decode("ascii")]
    lines.extend(comment_line(values) for values in comments)
    lines.append(f"{width} {height}")
    lines.append(str(max_value))
    return ("\n".join(lines) + "\n").encode("ascii")


def rgb_bytes(raster: Raster) -> bytes:
    """Expand grayscale samples into interleaved R, G, B bytes."""
    return raster.to_image().convert("RGB").tobytes()


def encode_ppm(raster: Raster, comments: Iterable[Sequence[int]], max_value: int = 255) -> bytes:
    """Encode a raster as a binary PPM byte stream."""
    header = build_header(raster.width, raster.height, max_value, comments)
    return header + rgb_bytes(raster)
