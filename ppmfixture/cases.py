from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

MAX_SAMPLE = 255


@dataclass(frozen=True)
class FixtureCase:
    name: str
    width: int
    height: int
    max_value: int
    comments: Tuple[Tuple[int, ...], ...]
    image_name: str
    answer_name: str
    answer: str

    @property
    def radius(self) -> int:
        return self.width // 2

    @property
    def pixel_count(self) -> int:
        return self.width * self.height


# Comment values are read by the solver harness, not by this package.
SPLIT_CIRCLE = FixtureCase(
    name="01",
    width=32,
    height=32,
    max_value=MAX_SAMPLE,
    comments=((2, 2), (1,), (3, 1)),
    image_name="01_q.ppm",
    answer_name="01_a.txt",
    answer="0000\n1\n10\n1\nD\n",
)
