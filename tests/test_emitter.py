import pytest

from ppmfixture import OutputUnavailable, build_problem, emit_answer, emit_problem, write_fixture


def test_emit_problem_writes_image(tmp_path):
    path = emit_problem(tmp_path)
    assert path == tmp_path / "01_q.ppm"
    assert path.read_bytes() == build_problem()
    assert path.stat().st_size == 3101


def test_emit_problem_truncates_existing_file(tmp_path):
    target = tmp_path / "01_q.ppm"
    target.write_bytes(b"x" * 5000)
    emit_problem(tmp_path)
    assert target.stat().st_size == 3101


def test_emit_twice_is_byte_identical(tmp_path):
    first = emit_problem(tmp_path).read_bytes()
    second = emit_problem(tmp_path).read_bytes()
    assert first == second


def test_emit_answer_writes_expected_text(tmp_path):
    path = emit_answer(tmp_path)
    assert path.name == "01_a.txt"
    assert path.read_bytes() == b"0000\n1\n10\n1\nD\n"


def test_write_fixture_reports_missing_directory(tmp_path):
    target = tmp_path / "missing" / "01_q.ppm"
    with pytest.raises(OutputUnavailable) as info:
        write_fixture(target, b"data")
    assert info.value.path == target
    assert isinstance(info.value.__cause__, OSError)
    assert not target.exists()


def test_emit_problem_into_missing_directory(tmp_path):
    with pytest.raises(OutputUnavailable):
        emit_problem(tmp_path / "nope")
    assert list(tmp_path.iterdir()) == []
