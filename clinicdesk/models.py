"""Patient and appointment records and their JSON form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


def _text(data: Any, key: str) -> str:
    """Return ``data[key]`` if it is a string, otherwise an empty string."""
    if not isinstance(data, Mapping):
        return ""
    value = data.get(key)
    return value if isinstance(value, str) else ""


@dataclass
class Patient:
    """A registered patient."""

    name: str = ""
    id: str = ""
    history: str = ""

    def to_json(self) -> dict[str, str]:
        """Return the patient as a JSON-ready mapping."""
        return {"name": self.name, "id": self.id, "history": self.history}

    @classmethod
    def from_json(cls, data: Any) -> Patient:
        """Build a patient from a JSON object; missing or non-text fields become empty."""
        return cls(
            name=_text(data, "name"),
            id=_text(data, "id"),
            history=_text(data, "history"),
        )


@dataclass
class Appointment:
    """A booked time slot for a patient."""

    patient_id: str = ""
    date: str = ""
    time: str = ""

    def to_json(self) -> dict[str, str]:
        """Return the appointment as a JSON-ready mapping."""
        return {"patientId": self.patient_id, "date": self.date, "time": self.time}

    @classmethod
    def from_json(cls, data: Any) -> Appointment:
        """Build an appointment from a JSON object; missing or non-text fields become empty."""
        return cls(
            patient_id=_text(data, "patientId"),
            date=_text(data, "date"),
            time=_text(data, "time"),
        )