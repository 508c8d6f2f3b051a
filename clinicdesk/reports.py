"""Read-only views over the clinic data file for the doctor."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .models import Appointment, Patient

REPORT_HEADER = "===== PATIENT REPORT ====="


class ReportError(Exception):
    """Raised when a report cannot be produced."""


def _array(document: Any, key: str) -> list[Any]:
    if not isinstance(document, dict):
        return []
    value = document.get(key)
    return value if isinstance(value, list) else []


def read_document(path: str | Path) -> dict[str, Any]:
    """Load the data file as a JSON object; unparsable content gives an empty one."""
    try:
        raw = Path(path).read_bytes()
    except OSError as exc:
        raise ReportError("Could not open data file") from exc
    try:
        document = json.loads(raw)
    except ValueError:
        return {}
    return document if isinstance(document, dict) else {}


def appointments_on(document: Any, date: str) -> list[str]:
    """Describe every appointment booked on ``date``, in stored order."""
    matches = (
        Appointment.from_json(entry) for entry in _array(document, "appointments")
    )
    return [
        f"Patient ID: {appointment.patient_id}, Time: {appointment.time}"
        for appointment in matches
        if appointment.date == date
    ]


def patient_report(document: Any) -> str:
    """Build the report listing each patient followed by their appointments."""
    patients = [Patient.from_json(entry) for entry in _array(document, "patients")]
    if not patients:
        raise ReportError("No patient data found.")
    appointments = [
        Appointment.from_json(entry) for entry in _array(document, "appointments")
    ]

    lines = [REPORT_HEADER]
    for patient in patients:
        lines.append(
            f"Name: {patient.name}, ID: {patient.id}, History: {patient.history}"
        )
        lines.extend(
            f"   - {appointment.date} at {appointment.time}"
            for appointment in appointments
            if appointment.patient_id == patient.id
        )
    return "\n".join(lines) + "\n"