import pytest

from ppmfixture import SPLIT_CIRCLE, build_problem

HEADER = b"P6\n# 2 2\n# 1\n# 3 1\n32 32\n255\n"


@pytest.fixture
def problem_bytes():
    return build_problem(SPLIT_CIRCLE)


@pytest.fixture
def header():
    return HEADER


@pytest.fixture
def pixel_bytes(problem_bytes):
    return problem_bytes[len(HEADER):]


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
