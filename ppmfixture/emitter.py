from __future__ import annotations

import os
from pathlib import Path
from typing import Union

from .cases import SPLIT_CIRCLE, FixtureCase
from .ppm import encode_ppm
from .raster import render_split_circle

PathLike = Union[str, os.PathLike]


class OutputUnavailable(RuntimeError):
    """Raised when a fixture file cannot be opened for writing."""

    def __init__(self, path: PathLike, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to create {self.path}: {reason}")


def write_fixture(path: PathLike, data: bytes) -> int:
    """Create or truncate ``path`` and write ``data`` to it.

    The payload is expected to be fully built, so a failed open leaves
    nothing on disk.
    """
    try:
        handle = open(path, "wb")
    except OSError as exc:
        raise OutputUnavailable(path, exc.strerror or str(exc)) from exc
    with handle:
        handle.write(data)
    return len(data)


def build_problem(case: FixtureCase = SPLIT_CIRCLE) -> bytes:
    raster = render_split_circle(case)
    return encode_ppm(raster, case.comments, case.max_value)


def emit_problem(directory: PathLike = ".", case: FixtureCase = SPLIT_CIRCLE) -> Path:
    path = Path(directory) / case.image_name
    write_fixture(path, build_problem(case))
    return path


def emit_answer(directory: PathLike = ".", case: FixtureCase = SPLIT_CIRCLE) -> Path:
    path = Path(directory) / case.answer_name
    write_fixture(path, case.answer.encode("ascii"))
    return path
