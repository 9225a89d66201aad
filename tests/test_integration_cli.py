"""Integration tests for CLI functionality."""

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from vieta_pkg.cli import main_entry

REPO_ROOT = Path(__file__).resolve().parent.parent

SECOND_EXAMPLE = {
    "keys": {"n": 3, "k": "2"},
    "r1": {"base": "16", "value": "a"},
    "r2": {"base": "8", "value": "10"},
    "r3": {"base": "10", "value": "1"},
}


def _run(args, cwd, stdin=None):
    env = dict(os.environ)
    env["PYTHONPATH"] = str(REPO_ROOT) + os.pathsep + env.get("PYTHONPATH", "")
    env.pop("VIETA_INPUT_FILE", None)
    return subprocess.run(
        [sys.executable, "-m", "vieta_pkg", *args],
        capture_output=True,
        text=True,
        timeout=60,
        cwd=cwd,
        env=env,
        input=stdin,
    )


@pytest.fixture
def example_file(tmp_path):
    path = tmp_path / "input.json"
    path.write_text(json.dumps(SECOND_EXAMPLE), encoding="utf-8")
    return path


def test_cli_version(tmp_path):
    result = _run(["--version"], cwd=tmp_path)
    assert result.returncode == 0
    assert result.stdout.strip() != ""


def test_cli_default_input_file(example_file):
    result = _run([], cwd=example_file.parent)
    assert result.returncode == 0
    assert "## Final Constant Term: -160 ##" in result.stdout


def test_cli_missing_default_file(tmp_path):
    result = _run([], cwd=tmp_path)
    assert result.returncode == 1
    assert result.stdout == ""
    assert "Error:" in result.stderr
    assert "input.json" in result.stderr


def test_cli_stdin(tmp_path):
    result = _run(["--format", "json", "-"], cwd=tmp_path, stdin=json.dumps(SECOND_EXAMPLE))
    assert result.returncode == 0
    data = json.loads(result.stdout)
    assert data["constant"] == "-160"
    assert data["source"] == "<stdin>"


def test_cli_health_check(tmp_path):
    result = _run(["--health-check"], cwd=tmp_path)
    assert result.returncode == 0
    assert "health check" in result.stdout.lower()


def test_human_report(example_file, capsys):
    assert main_entry([str(example_file)]) == 0
    out = capsys.readouterr().out
    assert f"Successfully read data from {example_file}" in out
    assert "Number of roots (n): 3" in out
    assert "Leading coefficient (k): 2" in out
    assert "Root 1: 10" in out
    assert "Root 2: 8" in out
    assert "Root 3: 1" in out
    assert "Product of roots: 80" in out
    assert "Sign factor (-1)^3: -1" in out
    assert "## Final Constant Term: -160 ##" in out


def test_human_report_with_polynomial(example_file, capsys):
    assert main_entry([str(example_file), "--show-polynomial"]) == 0
    out = capsys.readouterr().out
    assert "Polynomial: 2*x**3 - 38*x**2 + 196*x - 160" in out


def test_json_report(example_file, capsys):
    assert main_entry([str(example_file), "--format", "json", "--show-polynomial"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["ok"] is True
    assert data["roots"] == ["10", "8", "1"]
    assert data["coefficients"] == ["2", "-38", "196", "-160"]


def test_invalid_digit_reports_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(
        json.dumps({"keys": {"n": 1, "k": "1"}, "r1": {"base": "10", "value": "g"}}),
        encoding="utf-8",
    )
    assert main_entry([str(path)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid digit 'g' for base 10" in captured.err


def test_malformed_reports_hint(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text("{oops", encoding="utf-8")
    assert main_entry([str(path)]) == 1
    err = capsys.readouterr().err
    assert "not valid JSON" in err
    assert "valid JSON object" in err


def test_huge_values_are_exact(tmp_path, capsys):
    digits = "1" * 64
    path = tmp_path / "big.json"
    path.write_text(
        json.dumps(
            {
                "keys": {"n": 2, "k": digits},
                "r1": {"base": "2", "value": digits},
                "r2": {"base": "10", "value": digits},
            }
        ),
        encoding="utf-8",
    )
    assert main_entry([str(path)]) == 0
    out = capsys.readouterr().out
    expected = int(digits) * int(digits, 2) * int(digits)
    assert f"## Final Constant Term: {expected} ##" in out


def test_log_file(example_file, tmp_path, capsys):
    log_path = tmp_path / "vieta.log"
    assert main_entry([str(example_file), "--log-level", "DEBUG", "--log-file", str(log_path)]) == 0
    capsys.readouterr()
    text = log_path.read_text(encoding="utf-8")
    assert "[DEBUG] vieta.decoder" in text


def test_roots_shown_in_native_base(example_file, capsys):
    assert main_entry([str(example_file)]) == 0
    out = capsys.readouterr().out
    assert "Root 1: 10 (a in base 16)" in out
    assert "Root 2: 8 (10 in base 8)" in out
    assert "Root 3: 1 (1 in base 10)" in out


def test_too_long_hint_names_limit_variable(example_file, monkeypatch, capsys):
    monkeypatch.setattr("vieta_pkg.parser.MAX_INPUT_LENGTH", 10)
    monkeypatch.setattr("vieta_pkg.cli.MAX_INPUT_LENGTH", 10)
    assert main_entry([str(example_file)]) == 1
    err = capsys.readouterr().err
    assert "VIETA_MAX_INPUT_LENGTH" in err
    assert "limited to 10 characters" in err
    assert "valid JSON object" not in err
