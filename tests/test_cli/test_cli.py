"""Tests for the command line entry point."""

import io
import json
import sys

from tests.conftest import TRIANGLE_SVG

from svg2geo.cli import main
from svg2geo.config import Settings


def _fields(values):
    return dict(zip(values[::2], values[1::2]))


def test_file_to_file(tmp_path):
    src = tmp_path / "tri.svg"
    out = tmp_path / "tri.geo"
    src.write_text(TRIANGLE_SVG)

    assert main([str(src), "-o", str(out)]) == 0
    geo = _fields(json.loads(out.read_text()))
    assert geo["primitivecount"] == 1
    assert geo["pointcount"] == 3


def test_stdin_to_stdout(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(TRIANGLE_SVG.encode())))
    assert main([]) == 0
    geo = _fields(json.loads(capsys.readouterr().out))
    assert geo["pointcount"] == 3


def test_malformed_input_fails(tmp_path, capsys):
    src = tmp_path / "bad.svg"
    src.write_text("<svg><path></svg>")
    assert main([str(src)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "svg2geo:" in captured.err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.svg")]) == 1
    assert "svg2geo:" in capsys.readouterr().err


def test_settings_log_level_from_env(monkeypatch):
    monkeypatch.setenv("SVG2GEO_LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.svg2geo_log_level == "debug"
    assert set(Settings.model_fields) == {"svg2geo_log_level"}
