"""Tests for the command line interface."""

import json

import pytest

from shift_pay.cli import ShiftPayCli, format_nok, load_shifts


@pytest.fixture
def shifts_file(tmp_path):
    path = tmp_path / "shifts.json"
    path.write_text(
        json.dumps(
            [
                {"id": "1", "date": "2025-03-03", "start_time": "17:00", "end_time": "22:00"},
                {"id": "2", "date": "2025-03-01", "start_time": "12:00", "end_time": "19:00"},
            ]
        ),
        encoding="utf-8",
    )
    return path


class TestLoadShifts:
    """Test reading shifts from JSON."""

    def test_load_shifts(self, shifts_file):
        shifts = load_shifts(shifts_file)
        assert [s.id for s in shifts] == ["1", "2"]
        assert shifts[0].date.isoformat() == "2025-03-03"
        assert shifts[1].start_time == "12:00"


class TestCalculateCommand:
    """Test the calculate command."""

    def test_json_output(self, shifts_file, capsys):
        code = ShiftPayCli().run(
            ["calculate", "--file", str(shifts_file), "--tax", "30", "--json"]
        )
        assert code == 0

        data = json.loads(capsys.readouterr().out)
        assert data["hours_worked"] == 12
        assert data["allowances"] == 111 + 365
        assert len(data["details"]) == 2

    def test_text_output(self, shifts_file, capsys):
        code = ShiftPayCli().run(["calculate", "--file", str(shifts_file), "--tax", "30"])
        assert code == 0

        out = capsys.readouterr().out
        assert "mandag 3. mars 2025" in out
        assert "Weekday (after 21:00): 1.00 hours × 45 NOK = 45.00 NOK" in out
        assert "Net pay:" in out

    def test_missing_file(self, tmp_path, capsys):
        code = ShiftPayCli().run(["calculate", "--file", str(tmp_path / "nope.json")])
        assert code == 1
        assert "ERROR" in capsys.readouterr().err

    def test_strict_rejects_overnight_shift(self, tmp_path, capsys):
        path = tmp_path / "night.json"
        path.write_text(
            json.dumps(
                [{"id": "n", "date": "2025-03-03", "start_time": "22:00", "end_time": "02:00"}]
            ),
            encoding="utf-8",
        )
        code = ShiftPayCli().run(["calculate", "--file", str(path), "--strict"])
        assert code == 1
        assert "Shift n" in capsys.readouterr().err


class TestOtherCommands:
    """Test rates and usage output."""

    def test_rates(self, capsys):
        assert ShiftPayCli().run(["rates"]) == 0
        out = capsys.readouterr().out
        assert "177.53" in out
        assert "sunday: 115 NOK/h" in out

    def test_no_command_prints_help(self, capsys):
        assert ShiftPayCli().run([]) == 1


def test_format_nok():
    assert format_nok(1234.5) == "1 234.50 kr"
