from __future__ import annotations

from datetime import timedelta
from pathlib import Path

import pytest

from ride_factories import HEADER, make_row
from ridestats import cli


def test_main_prints_all_sections(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rows = [make_row(f"r{index}") for index in range(10)]
    (tmp_path / "rides.csv").write_text(
        "\n".join([HEADER] + [",".join(row) for row in rows]), encoding="utf-8"
    )

    exit_code = cli.main(["--data-dir", str(tmp_path)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Found 1 CSV files" in output
    assert "Loaded 10 rides, 2 stations (0 rows skipped)" in output
    assert "=== SEASONAL IMPACT ON RIDES ===" in output
    assert "Lato:" in output
    assert "Central Park (ID: S1):" in output
    assert "Departures: 10, Arrivals: 0, Balance: -10" in output
    assert "member:" in output
    assert "00:00:30:00 - Central Park → Union Square" in output
    assert "Longest routes by distance:" in output


def test_main_stops_when_no_files_found(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    (tmp_path / "readme.txt").write_text("no rides here", encoding="utf-8")

    exit_code = cli.main(["--data-dir", str(tmp_path)])

    output = capsys.readouterr().out
    assert exit_code == 0
    assert "Found 0 CSV files" in output
    assert "No CSV files found." in output
    assert "=== SEASONAL IMPACT ON RIDES ===" not in output


def test_main_returns_error_for_missing_directory(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    exit_code = cli.main(["--data-dir", str(tmp_path / "nowhere")])

    assert exit_code == 1
    assert "Error:" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("value", "with_days", "expected"),
    [
        (timedelta(minutes=95, seconds=7), False, "01:35:07"),
        (timedelta(days=1, hours=2, minutes=3, seconds=4), True, "01:02:03:04"),
        (timedelta(days=1, hours=2), False, "02:00:00"),
        (timedelta(minutes=-5), False, "-00:05:00"),
    ],
)
def test_format_duration(value: timedelta, with_days: bool, expected: str) -> None:
    assert cli.format_duration(value, with_days=with_days) == expected
