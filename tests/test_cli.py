import io
import json

import pytest

from clinicdesk.cli import check_password, main

FUTURE = "01/01/2999"
LATER = "02/01/2999"


def run(monkeypatch, tmp_path, lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n"))
    data_path = tmp_path / "data.json"
    status = main(["--data", str(data_path)])
    return status, data_path


def stored(data_path):
    return json.loads(data_path.read_text(encoding="utf-8"))


def test_check_password():
    password = "password"
    assert check_password(password) is True
    assert check_password("wrong") is False
    assert check_password("") is False


def test_wrong_password_then_eof(monkeypatch, tmp_path, capsys):
    status, data_path = run(monkeypatch, tmp_path, ["nope"])
    out = capsys.readouterr().out
    assert status == 1
    assert "Please Enter a Valid Password" in out
    assert not data_path.exists()


def test_login_retry_then_exit(monkeypatch, tmp_path, capsys):
    status, _ = run(monkeypatch, tmp_path, ["nope", "password", "0", "y"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Please Enter a Valid Password" in out
    assert "Welcome, Doctor!" in out


def test_add_patient_and_book(monkeypatch, tmp_path, capsys):
    status, data_path = run(
        monkeypatch,
        tmp_path,
        ["password", "1", "Alice Smith", "Asthma", "2", "1", FUTURE, "09:30", "0", "y"],
    )
    out = capsys.readouterr().out
    assert status == 0
    assert "Patient added with ID: 1" in out
    assert "Appointment booked successfully." in out
    document = stored(data_path)
    assert document["patients"] == [
        {"name": "Alice Smith", "id": "1", "history": "Asthma"}
    ]
    assert document["appointments"] == [
        {"patientId": "1", "date": FUTURE, "time": "09:30"}
    ]


def test_invalid_name_rejected(monkeypatch, tmp_path, capsys):
    run(monkeypatch, tmp_path, ["password", "1", "R2D2", "0", "y"])
    out = capsys.readouterr().out
    assert "Name must contain only letters and spaces." in out


def test_book_unknown_patient(monkeypatch, tmp_path, capsys):
    run(monkeypatch, tmp_path, ["password", "2", "42", "0", "y"])
    assert "Patient ID not found." in capsys.readouterr().out


def test_book_past_date(monkeypatch, tmp_path, capsys):
    run(
        monkeypatch,
        tmp_path,
        ["password", "1", "Bob", "Flu", "2", "1", "01/01/2000", "0", "y"],
    )
    assert "Invalid date format or past date!" in capsys.readouterr().out


def test_double_booking_rejected(monkeypatch, tmp_path, capsys):
    _, data_path = run(
        monkeypatch,
        tmp_path,
        [
            "password",
            "1", "Bob", "Flu",
            "2", "1", FUTURE, "10:00",
            "2", "1", FUTURE, "10:00",
            "0", "y",
        ],
    )
    assert "This time slot is already booked." in capsys.readouterr().out
    assert len(stored(data_path)["appointments"]) == 1


def test_view_patient_appointments(monkeypatch, tmp_path, capsys):
    run(
        monkeypatch,
        tmp_path,
        ["password", "1", "Bob", "Flu", "2", "1", FUTURE, "10:00", "3", "1", "3", "9", "0", "y"],
    )
    out = capsys.readouterr().out
    assert f"Appointments for Patient ID 1:\nDate: {FUTURE}, Time: 10:00" in out
    assert "Appointments for Patient ID 9:\nNo appointments found." in out


def test_cancel_and_update(monkeypatch, tmp_path, capsys):
    _, data_path = run(
        monkeypatch,
        tmp_path,
        [
            "password",
            "1", "Bob", "Flu",
            "2", "1", FUTURE, "10:00",
            "5", "1", FUTURE, LATER, "11:00",
            "4", "1", FUTURE,
            "4", "1", LATER,
            "0", "y",
        ],
    )
    out = capsys.readouterr().out
    assert "Appointment updated." in out
    assert "Appointment not found." in out
    assert "Appointment cancelled." in out
    assert stored(data_path)["appointments"] == []


def test_view_by_date_and_report(monkeypatch, tmp_path, capsys):
    run(
        monkeypatch,
        tmp_path,
        [
            "password",
            "1", "Bob", "Flu",
            "2", "1", FUTURE, "10:00",
            "6", FUTURE,
            "6", LATER,
            "7",
            "0", "y",
        ],
    )
    out = capsys.readouterr().out
    assert "Patient ID: 1, Time: 10:00" in out
    assert "No appointments found for this date." in out
    assert "===== PATIENT REPORT =====" in out
    assert f"   - {FUTURE} at 10:00" in out


def test_report_without_data_file(monkeypatch, tmp_path, capsys):
    run(monkeypatch, tmp_path, ["password", "7"])
    assert "No patient data found." in capsys.readouterr().out


def test_unknown_option_and_declined_exit(monkeypatch, tmp_path, capsys):
    status, _ = run(monkeypatch, tmp_path, ["password", "x", "0", "n", "0", "y"])
    out = capsys.readouterr().out
    assert status == 0
    assert "Unknown option: x" in out
    assert out.count("Are you sure to close the application?") == 2


@pytest.mark.parametrize("flag", ["--help"])
def test_help_exits(flag, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main([flag])
    assert excinfo.value.code == 0
    assert "--data" in capsys.readouterr().out