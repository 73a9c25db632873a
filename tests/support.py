import unittest
from datetime import date, datetime, timedelta

from core.database import make_session_factory
from core.id_allocator import IdAllocator
from models.enums import Specialization
from services import build_clinic
from services.notifications import AppointmentNotifier


def tomorrow_at(hour: int, minute: int = 0) -> datetime:
    day = date.today() + timedelta(days=1)
    return datetime(day.year, day.month, day.day, hour, minute)


class ClinicTestCase(unittest.TestCase):
    """Fresh in-memory database, allocator and services for every test."""

    def setUp(self) -> None:
        self.session_factory = make_session_factory("sqlite:///:memory:")
        self.allocator = IdAllocator()
        self.notifier = AppointmentNotifier()
        self.clinic = build_clinic(self.session_factory, self.allocator, self.notifier)

    def tearDown(self) -> None:
        self.session_factory.kw["bind"].dispose()

    # -----------------------------
    # Fixture builders
    # -----------------------------
    def add_patient(self, name="Jane Roe", **overrides):
        fields = dict(
            name=name,
            date_of_birth=date(1990, 5, 17),
            email="jane.roe@example.com",
            phone_number="5551234567",
            medical_history="Asthma",
            allergies="Penicillin",
            insurance_provider="Acme Health",
            insurance_policy_number="POL-001",
        )
        fields.update(overrides)
        return self.clinic.patients.create_patient(**fields)

    def add_doctor(self, name="Dr. Gregory House", specialization=Specialization.GENERAL,
                   fee=100.0, license_number=None, **overrides):
        fields = dict(
            name=name,
            date_of_birth=date(1970, 6, 11),
            email="doctor@example.com",
            phone_number="5559876543",
            specialization=specialization,
            consultation_fee=fee,
            experience_years=12,
            license_number=license_number or f"LIC-{self.allocator.current('doctor') + 1}",
        )
        fields.update(overrides)
        return self.clinic.doctors.create_doctor(**fields)

    def add_appointment(self, patient_id, doctor_id, when=None, reason="Checkup"):
        return self.clinic.appointments.create_appointment(
            patient_id, doctor_id, when or tomorrow_at(10), reason, None
        )
