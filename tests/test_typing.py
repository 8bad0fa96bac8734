"""Static row types, checked with mypy against the source tree."""
from pathlib import Path

import pytest

api = pytest.importorskip("mypy.api")

HERE = Path(__file__).parent
SRC = HERE.parent / "src"


def _mypy(tmp_path, monkeypatch, sample: str) -> tuple[str, int]:
    monkeypatch.setenv("MYPYPATH", str(SRC))
    stdout, stderr, status = api.run(
        [
            "--follow-imports=silent",
            "--no-error-summary",
            "--cache-dir",
            str(tmp_path / "mypy_cache"),
            str(HERE / "typecheck" / sample),
        ]
    )
    return stdout + stderr, status


def test_row_type_grows_with_each_call(tmp_path, monkeypatch):
    output, status = _mypy(tmp_path, monkeypatch, "rows.py")
    assert status == 0, output


def test_operation_of_another_kind_is_rejected(tmp_path, monkeypatch):
    output, status = _mypy(tmp_path, monkeypatch, "wrong_kind.py")
    assert status == 1
    assert "arg-type" in output
