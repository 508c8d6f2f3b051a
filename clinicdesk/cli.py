"""Interactive console front end for the clinic."""

from __future__ import annotations

import argparse
import getpass
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from .clinic import Clinic, ClinicError, is_only_letters, is_valid_date
from .reports import ReportError, appointments_on, patient_report, read_document

PASSWORD = "password"

MENU = """
1) Add patient
2) Book appointment
3) View patient appointments
4) Cancel appointment
5) Update appointment
6) View appointments by date
7) Patient report
0) Exit"""


def check_password(password: str) -> bool:
    """Return True if ``password`` opens the application."""
    return password == PASSWORD


def _ask(prompt: str) -> str | None:
    try:
        return input(prompt)
    except EOFError:
        return None


def _ask_secret(prompt: str) -> str | None:
    if not sys.stdin.isatty():
        return _ask(prompt)
    try:
        return getpass.getpass(prompt)
    except EOFError:
        return None


def _login() -> bool:
    while True:
        entered = _ask_secret("Password: ")
        if entered is None:
            return False
        if check_password(entered):
            print("Welcome, Doctor!")
            return True
        print("Please Enter a Valid Password")


def _add_patient(clinic: Clinic, data_path: Path) -> None:
    name = _ask("Enter Patient Name: ")
    if name is None or not name.strip():
        return
    if not is_only_letters(name):
        print("Name must contain only letters and spaces.")
        return
    history = _ask("Enter Medical History: ")
    if history is None or not history.strip():
        return
    try:
        patient_id = clinic.add_patient(name, history)
    except ClinicError as exc:
        print(exc)
        return
    print(f"Patient added with ID: {patient_id}")


def _book_appointment(clinic: Clinic, data_path: Path) -> None:
    patient_id = _ask("Enter Patient ID: ")
    if not patient_id:
        return
    if not clinic.patient_exists(patient_id):
        print("Patient ID not found.")
        return
    date = _ask("Enter Date (DD/MM/YYYY): ")
    if not date or not is_valid_date(date):
        print("Invalid date format or past date!")
        return
    time = _ask("Enter Time (HH:MM): ")
    try:
        clinic.book_appointment(patient_id, date, time or "")
    except ClinicError as exc:
        print(exc)
        return
    print("Appointment booked successfully.")


def _view_patient_appointments(clinic: Clinic, data_path: Path) -> None:
    patient_id = _ask("Enter Patient ID: ")
    if not patient_id:
        return
    lines = [f"Appointments for Patient ID {patient_id}:"]
    found = clinic.appointments_for(patient_id)
    lines.extend(f"Date: {a.date}, Time: {a.time}" for a in found)
    if not found:
        lines.append("No appointments found.")
    print("\n".join(lines))


def _cancel_appointment(clinic: Clinic, data_path: Path) -> None:
    patient_id = _ask("Enter Patient ID: ")
    date = _ask("Enter Date (DD/MM/YYYY): ")
    if not patient_id or not date:
        return
    try:
        clinic.cancel_appointments(patient_id, date)
    except ClinicError as exc:
        print(exc)
        return
    print("Appointment cancelled.")


def _update_appointment(clinic: Clinic, data_path: Path) -> None:
    answers = [
        _ask("Enter Patient ID: "),
        _ask("Enter Old Date (DD/MM/YYYY): "),
        _ask("Enter New Date (DD/MM/YYYY): "),
        _ask("Enter New Time (HH:MM): "),
    ]
    if not all(answers):
        return
    patient_id, old_date, new_date, new_time = answers
    try:
        clinic.update_appointment(patient_id, old_date, new_date, new_time)
    except ClinicError as exc:
        print(exc)
        return
    print("Appointment updated.")


def _view_by_date(clinic: Clinic, data_path: Path) -> None:
    date = _ask("Enter date (DD/MM/YYYY): ")
    if not date:
        return
    try:
        document = read_document(data_path)
    except ReportError as exc:
        print(exc)
        return
    matches = appointments_on(document, date)
    print("\n".join(matches) if matches else "No appointments found for this date.")


def _report(clinic: Clinic, data_path: Path) -> None:
    if not data_path.exists():
        print("No patient data found.")
        return
    try:
        print(patient_report(read_document(data_path)), end="")
    except ReportError as exc:
        print(exc)


_ACTIONS: dict[str, Callable[[Clinic, Path], None]] = {
    "1": _add_patient,
    "2": _book_appointment,
    "3": _view_patient_appointments,
    "4": _cancel_appointment,
    "5": _update_appointment,
    "6": _view_by_date,
    "7": _report,
}


def _confirm_exit() -> bool:
    reply = _ask("Are you sure to close the application? [y/N] ")
    return reply is None or reply.strip().lower() in {"y", "yes"}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the clinic console; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="clinicdesk", description="Manage patients and appointments."
    )
    parser.add_argument(
        "--data", default="data.json", help="path of the JSON data file"
    )
    args = parser.parse_args(argv)
    data_path = Path(args.data)

    if not _login():
        return 1

    with Clinic(data_path) as clinic:
        while True:
            print(MENU)
            choice = _ask("Choice: ")
            if choice is None:
                break
            choice = choice.strip()
            if choice == "0":
                if _confirm_exit():
                    break
                continue
            action = _ACTIONS.get(choice)
            if action is None:
                print(f"Unknown option: {choice}")
                continue
            action(clinic, data_path)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())