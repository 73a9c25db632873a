"""CSV export and import for patients, doctors and appointments.

Imports go through the domain services, so every row is validated and gets
a freshly allocated ID; rows that fail validation are logged and skipped.
"""

import csv
import logging
import os

from core.exceptions import InvalidDataError
from core.time_utils import format_date, format_datetime, parse_date
from models.enums import Specialization
from services.appointment_service import AppointmentService
from services.doctor_service import DoctorService
from services.patient_service import PatientService

logger = logging.getLogger(__name__)

PATIENT_FIELDS = [
    "id",
    "name",
    "date_of_birth",
    "email",
    "phone_number",
    "medical_history",
    "allergies",
    "insurance_provider",
    "insurance_policy_number",
]

DOCTOR_FIELDS = [
    "id",
    "name",
    "date_of_birth",
    "email",
    "phone_number",
    "specialization",
    "consultation_fee",
    "experience_years",
    "license_number",
]

APPOINTMENT_FIELDS = [
    "id",
    "patient_id",
    "doctor_id",
    "appointment_datetime",
    "status",
    "reason",
    "notes",
]


def _write_rows(path: str, fieldnames: list[str], rows: list[dict]) -> int:
    folder = os.path.dirname(path)
    if folder and not os.path.exists(folder):
        os.makedirs(folder)

    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)

    logger.info("Exported %d rows to %s", len(rows), path)
    return len(rows)


def _read_rows(path: str) -> list[dict]:
    if not os.path.exists(path):
        logger.warning("CSV file %s does not exist", path)
        return []
    with open(path, newline="", encoding="utf-8") as handle:
        return [row for row in csv.DictReader(handle) if any((v or "").strip() for v in row.values())]


def _text(row: dict, key: str) -> str | None:
    value = (row.get(key) or "").strip()
    return value or None


class CsvService:
    def __init__(
        self,
        patient_service: PatientService,
        doctor_service: DoctorService,
        appointment_service: AppointmentService,
    ):
        self.patient_service = patient_service
        self.doctor_service = doctor_service
        self.appointment_service = appointment_service

    # -----------------------------
    # Export
    # -----------------------------
    def export_patients(self, path: str) -> int:
        rows = [
            {
                "id": p.id,
                "name": p.name,
                "date_of_birth": format_date(p.date_of_birth),
                "email": p.email,
                "phone_number": p.phone_number,
                "medical_history": p.medical_history or "",
                "allergies": p.allergies or "",
                "insurance_provider": p.insurance_provider or "",
                "insurance_policy_number": p.insurance_policy_number or "",
            }
            for p in self.patient_service.get_all_patients()
        ]
        return _write_rows(path, PATIENT_FIELDS, rows)

    def export_doctors(self, path: str) -> int:
        rows = [
            {
                "id": d.id,
                "name": d.name,
                "date_of_birth": format_date(d.date_of_birth),
                "email": d.email,
                "phone_number": d.phone_number,
                "specialization": d.specialization.name,
                "consultation_fee": f"{d.consultation_fee:.2f}",
                "experience_years": d.experience_years,
                "license_number": d.license_number,
            }
            for d in self.doctor_service.get_all_doctors()
        ]
        return _write_rows(path, DOCTOR_FIELDS, rows)

    def export_appointments(self, path: str) -> int:
        rows = [
            {
                "id": a.id,
                "patient_id": a.patient_id,
                "doctor_id": a.doctor_id,
                "appointment_datetime": format_datetime(a.appointment_datetime),
                "status": a.status.name,
                "reason": a.reason or "",
                "notes": a.notes or "",
            }
            for a in self.appointment_service.get_all_appointments()
        ]
        return _write_rows(path, APPOINTMENT_FIELDS, rows)

    # -----------------------------
    # Import
    # -----------------------------
    def import_patients(self, path: str) -> int:
        created = 0
        for line_no, row in enumerate(_read_rows(path), start=2):
            try:
                self.patient_service.create_patient(
                    name=_text(row, "name"),
                    date_of_birth=parse_date(row.get("date_of_birth")),
                    email=_text(row, "email"),
                    phone_number=_text(row, "phone_number"),
                    medical_history=_text(row, "medical_history"),
                    allergies=_text(row, "allergies"),
                    insurance_provider=_text(row, "insurance_provider"),
                    insurance_policy_number=_text(row, "insurance_policy_number"),
                )
            except (InvalidDataError, ValueError) as exc:
                logger.warning("Skipping patient row %d in %s: %s", line_no, path, exc)
                continue
            created += 1
        return created

    def import_doctors(self, path: str) -> int:
        created = 0
        for line_no, row in enumerate(_read_rows(path), start=2):
            try:
                self.doctor_service.create_doctor(
                    name=_text(row, "name"),
                    date_of_birth=parse_date(row.get("date_of_birth")),
                    email=_text(row, "email"),
                    phone_number=_text(row, "phone_number"),
                    specialization=Specialization.from_text(row.get("specialization")),
                    consultation_fee=float(row.get("consultation_fee") or 0),
                    experience_years=int(row.get("experience_years") or 0),
                    license_number=_text(row, "license_number"),
                )
            except (InvalidDataError, ValueError) as exc:
                logger.warning("Skipping doctor row %d in %s: %s", line_no, path, exc)
                continue
            created += 1
        return created
