from .cases import SPLIT_CIRCLE, FixtureCase
from .emitter import OutputUnavailable, build_problem, emit_answer, emit_problem, write_fixture

__all__ = [
    "FixtureCase",
    "OutputUnavailable",
    "SPLIT_CIRCLE",
    "build_problem",
    "emit_answer",
    "emit_problem",
    "write_fixture",
]
