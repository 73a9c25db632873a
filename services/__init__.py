from dataclasses import dataclass

from core.database import SessionLocal
from core.id_allocator import EntityKind, IdAllocator
from core.record_store import AppointmentStore, BillStore, DoctorStore, PatientStore

from .analytics_service import AnalyticsService
from .appointment_service import AppointmentService
from .csv_service import CsvService
from .doctor_service import DoctorService
from .notifications import AppointmentNotifier, default_notifier
from .patient_service import PatientService
from .recommendation_service import RecommendationService


@dataclass
class Clinic:
    """Every service, wired to one set of stores and one allocator."""

    allocator: IdAllocator
    patients: PatientService
    doctors: DoctorService
    appointments: AppointmentService
    analytics: AnalyticsService
    recommendations: RecommendationService
    csv: CsvService

    def sync_allocator(self) -> None:
        """Move each counter past the highest ID already stored."""
        self.allocator.advance_past(EntityKind.PATIENT, self.patients.store.max_id())
        self.allocator.advance_past(EntityKind.DOCTOR, self.doctors.store.max_id())
        self.allocator.advance_past(EntityKind.APPOINTMENT, self.appointments.appointment_store.max_id())
        self.allocator.advance_past(EntityKind.BILL, self.appointments.bill_store.max_id())


def build_clinic(
    session_factory=None,
    allocator: IdAllocator | None = None,
    notifier: AppointmentNotifier | None = None,
) -> Clinic:
    session_factory = session_factory or SessionLocal
    allocator = allocator or IdAllocator()

    patient_store = PatientStore(session_factory)
    doctor_store = DoctorStore(session_factory)
    appointment_store = AppointmentStore(session_factory)
    bill_store = BillStore(session_factory)

    patients = PatientService(patient_store, allocator)
    doctors = DoctorService(doctor_store, allocator)
    appointments = AppointmentService(
        appointment_store,
        doctor_store,
        bill_store,
        allocator,
        notifier=notifier if notifier is not None else default_notifier(),
    )

    return Clinic(
        allocator=allocator,
        patients=patients,
        doctors=doctors,
        appointments=appointments,
        analytics=AnalyticsService(appointment_store, bill_store, doctor_store),
        recommendations=RecommendationService(doctor_store, appointment_store),
        csv=CsvService(patients, doctors, appointments),
    )


__all__ = [
    "Clinic",
    "build_clinic",
    "AnalyticsService",
    "AppointmentService",
    "CsvService",
    "DoctorService",
    "PatientService",
    "RecommendationService",
    "AppointmentNotifier",
    "default_notifier",
]
