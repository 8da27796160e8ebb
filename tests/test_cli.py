from __future__ import annotations

import pytest

from garagemon.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in ("GARAGEMON_ITERATIONS", "GARAGEMON_THREADS", "GARAGEMON_SEED", "GARAGEMON_DEFAULT_VEHICLES"):
        monkeypatch.delenv(key, raising=False)


def _write(tmp_path, text: str):
    path = tmp_path / "diagnostics.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_reports_warnings_summary_and_status(tmp_path, capsys) -> None:
    path = _write(
        tmp_path,
        "# VehicleId, SensorKind, Value\n"
        "A, RPM, 6500\n"
        "A, EngineLoad, 95\n"
        "A, CoolantTemp, 120\n"
        "B, RPM, 1000\n"
        "B, Speed, 10\n",
    )

    assert main([str(path)]) == 0

    captured = capsys.readouterr()
    assert "CSV Warning: Line 6: unknown Type 'Speed'" in captured.err
    assert "Loaded 4 row(s)." in captured.err
    assert captured.out.splitlines() == [
        "Car: A | Score: -72.50 | Alert: Severe Engine Stress",
        "Car: B | Status: Sensor Failure Detected",
    ]


def test_file_without_valid_rows_exits_non_zero(tmp_path, capsys) -> None:
    path = _write(tmp_path, "A, Nope, 1\n")

    assert main([str(path)]) == 1

    captured = capsys.readouterr()
    assert "CSV Warning: Line 1: unknown Type 'Nope'" in captured.err
    assert "CSV Error: Empty CSV: no valid data rows." in captured.err
    assert captured.out == ""


def test_missing_file_exits_non_zero(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "cannot open file" in capsys.readouterr().err


def test_simulation_reports_both_runs(tmp_path, capsys) -> None:
    path = _write(tmp_path, "A, RPM, 1000\n")

    assert main([str(path), "--simulate", "--iterations", "5", "--threads", "2"]) == 0

    out = capsys.readouterr().out
    assert "--- Real-time Simulation (5 iterations, 2 thread(s) in MT mode) ---" in out
    assert "Single-thread elapsed:" in out
    assert "Multi-thread elapsed:" in out
    assert "avg score:" in out


def test_negative_iterations_exit_non_zero(tmp_path, capsys) -> None:
    path = _write(tmp_path, "A, RPM, 1000\n")

    assert main([str(path), "--simulate", "--iterations", "-3"]) == 1
    assert "--iterations" in capsys.readouterr().err


def test_undecodable_comment_does_not_abort_load(tmp_path, capsys) -> None:
    path = tmp_path / "diagnostics.csv"
    path.write_bytes(b"# caf\xe9 comment\nA,RPM,6500\nA,EngineLoad,95\nA,CoolantTemp,120\n")

    assert main([str(path)]) == 0

    captured = capsys.readouterr()
    assert "Loaded 3 row(s)." in captured.err
    assert captured.out.splitlines() == ["Car: A | Score: -72.50 | Alert: Severe Engine Stress"]
