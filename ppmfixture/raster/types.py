from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from PIL import Image


@dataclass(frozen=True)
class Raster:
    """Row-major 8-bit grayscale sample buffer, top row first."""

    samples: Tuple[int, ...]
    width: int

    def validate(self) -> None:
        """Validate dimensions and sample range."""
        if self.width <= 0:
            raise ValueError("Width must be greater than zero")
        if len(self.samples) % self.width != 0:
            raise ValueError("Samples length must be a multiple of width")
        for value in self.samples:
            if not 0 <= value <= 255:
                raise ValueError(f"Sample out of range: {value}")

    @property
    def height(self) -> int:
        """Return raster height computed from width and sample count."""
        self.validate()
        return len(self.samples) // self.width

    def sample(self, col: int, row: int) -> int:
        return self.samples[row * self.width + col]

    def to_image(self) -> Image.Image:
        """Return the raster as a Pillow grayscale ("L") image."""
        return Image.frombytes("L", (self.width, self.height), bytes(self.samples))
