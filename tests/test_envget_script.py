from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]


def _load_script():
    spec = importlib.util.spec_from_file_location("envget", ROOT / "scripts" / "envget.py")
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


envget = _load_script()


def test_selected_variables_in_request_order(fixtures: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = envget.main(["-f", str(fixtures / "plain.env"), "OPTION_B", "OPTION_A"])
    out = capsys.readouterr().out
    assert rc == 0
    assert out.splitlines() == ["OPTION_B=2", "OPTION_A=1"]


def test_not_found_sets_exit_code(fixtures: Path, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ENVFILE_TEST_NOPE", raising=False)
    rc = envget.main(["-f", str(fixtures / "plain.env"), "OPTION_A", "ENVFILE_TEST_NOPE"])
    captured = capsys.readouterr()
    assert rc == 1
    assert captured.out.splitlines() == ["OPTION_A=1"]
    assert "ENVFILE_TEST_NOPE" in captured.err


def test_export_format_quotes_values(fixtures: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = envget.main(["--export", "-f", str(fixtures / "quoted.env"), "OPTION_I", "OPTION_C"])
    assert rc == 0
    assert capsys.readouterr().out.splitlines() == [
        "export OPTION_I='echo '\"'\"'asd'\"'\"''",
        "export OPTION_C=''",
    ]


def test_parse_error_exit_code(fixtures: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = envget.main(["-f", str(fixtures / "invalid1.env")])
    assert rc == 2
    assert "can't separate key from value" in capsys.readouterr().err


def test_lenient_ignores_parse_error(fixtures: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = envget.main(["--lenient", "-f", str(fixtures / "invalid1.env"), "-f", str(fixtures / "plain.env"), "OPTION_A"])
    assert rc == 1
    assert "OPTION_A" in capsys.readouterr().err
