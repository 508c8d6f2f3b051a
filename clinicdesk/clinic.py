"""Patient registry and appointment book stored in a JSON file."""

from __future__ import annotations

import datetime as _dt
import json
import logging
import re
from pathlib import Path
from typing import Any

from .models import Appointment, Patient

log = logging.getLogger(__name__)

_LETTERS = re.compile(r"[A-Za-z ]+")
_DATE = re.compile(r"(\d{2})/(\d{2})/(\d{4})")
_TIME = re.compile(r"(\d{2}):(\d{2})")
_INTEGER = re.compile(r"\s*[+-]?\d+\s*")


class ClinicError(Exception):
    """Raised when a clinic operation is rejected."""


def is_only_letters(text: str) -> bool:
    """Return True if ``text`` is non-empty and holds only ASCII letters and spaces."""
    return _LETTERS.fullmatch(text) is not None


def _parse_date(text: str) -> _dt.date | None:
    match = _DATE.fullmatch(text)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return _dt.date(year, month, day)
    except ValueError:
        return None


def is_valid_date(text: str, today: _dt.date | None = None) -> bool:
    """Return True if ``text`` is a real DD/MM/YYYY date not before ``today``."""
    parsed = _parse_date(text)
    if parsed is None:
        return False
    return parsed >= (today or _dt.date.today())


def is_valid_time(text: str) -> bool:
    """Return True if ``text`` is a 24-hour HH:MM time."""
    match = _TIME.fullmatch(text)
    if match is None:
        return False
    hours, minutes = (int(part) for part in match.groups())
    return hours < 24 and minutes < 60


def _id_number(text: str) -> int:
    return int(text) if _INTEGER.fullmatch(text) else 0


def _array(document: Any, key: str) -> list[Any]:
    if not isinstance(document, dict):
        return []
    value = document.get(key)
    return value if isinstance(value, list) else []


class Clinic:
    """Patients and appointments kept in memory and persisted to ``path``."""

    def __init__(self, path: str | Path = "data.json") -> None:
        self.path = Path(path)
        self.patients: list[Patient] = []
        self.appointments: list[Appointment] = []
        self.last_patient_id = 0
        self.load()

    def __enter__(self) -> Clinic:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.save()

    def load(self) -> None:
        """Append the records stored in the data file; a missing file is only logged."""
        try:
            raw = self.path.read_bytes()
        except OSError:
            log.warning("Couldn't open data file.")
            return
        try:
            document = json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError):
            document = {}

        for entry in _array(document, "patients"):
            patient = Patient.from_json(entry)
            self.patients.append(patient)
            self.last_patient_id = max(self.last_patient_id, _id_number(patient.id))

        self.appointments.extend(
            Appointment.from_json(entry) for entry in _array(document, "appointments")
        )

    def save(self) -> None:
        """Write all records to the data file; a write failure is only logged."""
        document = {
            "patients": [patient.to_json() for patient in self.patients],
            "appointments": [appointment.to_json() for appointment in self.appointments],
        }
        try:
            self.path.write_text(json.dumps(document, indent=4) + "\n", encoding="utf-8")
        except OSError:
            log.warning("Couldn't open data file for writing.")

    def patient_exists(self, patient_id: str) -> bool:
        """Return True if a patient with this id is registered."""
        return any(patient.id == patient_id for patient in self.patients)

    def appointment_exists(self, date: str, time: str) -> bool:
        """Return True if the slot at ``date`` and ``time`` is taken."""
        return any(a.date == date and a.time == time for a in self.appointments)

    def add_patient(self, name: str, history: str) -> str:
        """Register a patient and return the new id."""
        if not name.strip():
            raise ClinicError("Patient name is required.")
        if not is_only_letters(name):
            raise ClinicError("Name must contain only letters and spaces.")
        if not history.strip():
            raise ClinicError("Medical history is required.")

        self.last_patient_id += 1
        patient_id = str(self.last_patient_id)
        self.patients.append(Patient(name, patient_id, history))
        self.save()
        return patient_id

    def book_appointment(
        self,
        patient_id: str,
        date: str,
        time: str,
        today: _dt.date | None = None,
    ) -> Appointment:
        """Book a slot for an existing patient and return the appointment."""
        if not patient_id:
            raise ClinicError("Patient ID is required.")
        if not self.patient_exists(patient_id):
            raise ClinicError("Patient ID not found.")
        if not date or not is_valid_date(date, today):
            raise ClinicError("Invalid date format or past date!")
        if not time or not is_valid_time(time):
            raise ClinicError("Invalid time format!")
        if self.appointment_exists(date, time):
            raise ClinicError("This time slot is already booked.")

        appointment = Appointment(patient_id, date, time)
        self.appointments.append(appointment)
        self.save()
        return appointment

    def appointments_for(self, patient_id: str) -> list[Appointment]:
        """Return the patient's appointments in booking order."""
        return [a for a in self.appointments if a.patient_id == patient_id]

    def cancel_appointments(self, patient_id: str, date: str) -> int:
        """Remove every appointment of the patient on ``date`` and return how many."""
        if not patient_id or not date:
            raise ClinicError("Patient ID and date are required.")
        kept = [
            a for a in self.appointments
            if not (a.patient_id == patient_id and a.date == date)
        ]
        removed = len(self.appointments) - len(kept)
        if not removed:
            raise ClinicError("Appointment not found.")
        self.appointments = kept
        self.save()
        return removed

    def update_appointment(
        self,
        patient_id: str,
        old_date: str,
        new_date: str,
        new_time: str,
        today: _dt.date | None = None,
    ) -> Appointment:
        """Move the patient's first appointment on ``old_date`` to a new slot."""
        if not (patient_id and old_date and new_date and new_time):
            raise ClinicError("All fields are required.")
        if not is_valid_date(new_date, today) or not is_valid_time(new_time):
            raise ClinicError("Invalid date or time format!")
        if self.appointment_exists(new_date, new_time):
            raise ClinicError("This time slot is already booked.")

        appointment = next(
            (a for a in self.appointments
             if a.patient_id == patient_id and a.date == old_date),
            None,
        )
        if appointment is None:
            raise ClinicError("Original appointment not found.")
        appointment.date = new_date
        appointment.time = new_time
        self.save()
        return appointment