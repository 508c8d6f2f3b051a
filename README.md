# clinicdesk

A small front desk for a doctor's practice. It keeps patients and their
appointments in one JSON file (`data.json` in the working directory by
default). With it you can:

- register patients, each of whom gets the next numeric ID
- book an appointment for a patient on a date (`DD/MM/YYYY`) at a time (`HH:MM`)
- have a slot that is already taken, a past date or a malformed time refused
- list a patient's appointments
- cancel all of a patient's appointments on a given date
- move a patient's appointment to a new date and time
- list every appointment on one date, and print a report of all patients
  with their appointments

## Installing

```
pip install .
```

## Command line

```
clinicdesk [--data PATH]
```

`--data` names the JSON data file (default `data.json`). The command first
asks for the password, the value of `PASSWORD` in `clinicdesk.cli`, and asks
again until it is given or input ends. It then shows a numbered menu:

```
1) Add patient
2) Book appointment
3) View patient appointments
4) Cancel appointment
5) Update appointment
6) View appointments by date
7) Patient report
0) Exit
```

Choosing `0` asks for confirmation. The data file is written after every
change and once more on exit.

## Library use

```python
from datetime import date

from clinicdesk.clinic import Clinic, ClinicError
from clinicdesk.reports import ReportError, appointments_on, patient_report, read_document

clinic = Clinic("data.json")          # loads the file if it exists

patient_id = clinic.add_patient("Jane Doe", "Asthma")
try:
    clinic.book_appointment(patient_id, "01/01/2030", "09:30", today=date.today())
except ClinicError as error:
    print(error)

for appointment in clinic.appointments_for(patient_id):
    print(appointment.date, appointment.time)

document = read_document("data.json")
print(appointments_on(document, "01/01/2030"))
try:
    print(patient_report(document))
except ReportError as error:
    print(error)
```

`clinicdesk.clinic.Clinic` holds `patients` (a list of
`clinicdesk.models.Patient`) and `appointments` (a list of
`clinicdesk.models.Appointment`). Its methods:

- `add_patient(name, history)` returns the new ID; the name may hold only
  letters and spaces.
- `book_appointment(patient_id, date, time, today=None)` returns the new
  `Appointment`.
- `appointments_for(patient_id)` returns the patient's appointments in booking
  order.
- `cancel_appointments(patient_id, date)` returns how many were removed.
- `update_appointment(patient_id, old_date, new_date, new_time, today=None)`
  moves the first matching appointment and returns it.
- `patient_exists(patient_id)`, `appointment_exists(date, time)`, `load()` and
  `save()`.

Every method that changes the data writes the file back at once. When a
request cannot be carried out, `ClinicError` is raised with the reason, for
example an unknown patient ID, an invalid or past date, an invalid time, a
slot that is already booked, or no matching appointment. `Clinic` can also be
used in a `with` block, which saves on leaving it.

The checks are available on their own as `is_only_letters(text)`,
`is_valid_date(text, today=None)` and `is_valid_time(text)`.

`clinicdesk.reports` reads the file without changing it: `read_document`
raises `ReportError` if the file cannot be opened, and `patient_report` raises
it when there are no patients.

## Data file

```json
{
    "patients": [{"name": "Jane Doe", "id": "1", "history": "Asthma"}],
    "appointments": [{"patientId": "1", "date": "01/01/2030", "time": "09:30"}]
}
```

## What it does not do

There are no windows or dialogs; the only front end is the text menu. There is
a single fixed password and no user accounts. Patients cannot be edited or
removed once registered.

## Running the tests

```
pip install ".[test]"
pytest
```