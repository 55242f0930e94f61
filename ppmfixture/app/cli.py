from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ..cases import SPLIT_CIRCLE
from ..emitter import OutputUnavailable, emit_problem


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="ppmfixture: write the split-circle PPM test fixture."
    )
    parser.epilog = (
        f"Writes {SPLIT_CIRCLE.image_name} into the current working directory."
    )
    return parser.parse_args(argv)


def _report(path: Path) -> None:
    print(f"Wrote {path.name} ({path.stat().st_size} bytes)")


def main(argv: Optional[List[str]] = None) -> int:
    parse_args(argv)
    try:
        _report(emit_problem())
    except OutputUnavailable as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
