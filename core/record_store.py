"""SQLAlchemy-backed CRUD for each entity kind.

Every call opens its own session through ``get_db_context`` and commits
before returning, so each operation is atomic for the row it touches and
nothing spans more than one call. Returned objects are detached but fully
loaded.
"""

import logging
from contextlib import contextmanager

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError

from core.database import SessionLocal, get_db_context
from core.exceptions import StorageError
from models.appointment import Appointment
from models.bill import Bill
from models.doctor import Doctor
from models.enums import Specialization
from models.patient import Patient

logger = logging.getLogger(__name__)


class RecordStore:
    model = None

    def __init__(self, session_factory=None):
        self._session_factory = session_factory or SessionLocal

    @contextmanager
    def _session(self):
        try:
            with get_db_context(self._session_factory) as db:
                yield db
        except SQLAlchemyError as exc:
            logger.error("%s store operation failed: %s", self.model.__tablename__, exc)
            raise StorageError(f"Database error on {self.model.__tablename__}: {exc}") from exc

    # -----------------------------
    # CRUD
    # -----------------------------
    def create(self, entity):
        with self._session() as db:
            db.add(entity)
            db.commit()
        return entity

    def find_by_id(self, record_id: int):
        with self._session() as db:
            return db.get(self.model, record_id)

    def find_all(self) -> list:
        with self._session() as db:
            return db.query(self.model).order_by(self.model.id).all()

    def update(self, entity):
        """Persist changes to an existing row; None if no row has that ID."""
        with self._session() as db:
            if db.get(self.model, entity.id) is None:
                return None
            db.merge(entity)
            db.commit()
        return entity

    def delete(self, record_id: int) -> bool:
        with self._session() as db:
            removed = db.query(self.model).filter(self.model.id == record_id).delete()
            db.commit()
        return removed > 0

    # -----------------------------
    # Queries
    # -----------------------------
    def find_by(self, **filters) -> list:
        with self._session() as db:
            return (
                db.query(self.model)
                .filter_by(**filters)
                .order_by(self.model.id)
                .all()
            )

    def max_id(self):
        with self._session() as db:
            return db.query(func.max(self.model.id)).scalar()

    def count(self) -> int:
        with self._session() as db:
            return db.query(self.model).count()


class PatientStore(RecordStore):
    model = Patient

    def search_by_name(self, name: str) -> list:
        with self._session() as db:
            return (
                db.query(Patient)
                .filter(Patient.name.ilike(f"%{name}%"))
                .order_by(Patient.id)
                .all()
            )


class DoctorStore(RecordStore):
    model = Doctor

    def search_by_name(self, name: str) -> list:
        with self._session() as db:
            return (
                db.query(Doctor)
                .filter(Doctor.name.ilike(f"%{name}%"))
                .order_by(Doctor.id)
                .all()
            )

    def find_by_specialization(self, specialization: Specialization) -> list:
        return self.find_by(specialization=specialization)

    def find_by_license(self, license_number: str):
        with self._session() as db:
            return db.query(Doctor).filter(Doctor.license_number == license_number).first()


class AppointmentStore(RecordStore):
    model = Appointment

    def find_by_patient_id(self, patient_id: int) -> list:
        return self.find_by(patient_id=patient_id)

    def find_by_doctor_id(self, doctor_id: int) -> list:
        return self.find_by(doctor_id=doctor_id)


class BillStore(RecordStore):
    model = Bill

    def find_by_appointment_id(self, appointment_id: int):
        """First bill recorded for the appointment, or None."""
        with self._session() as db:
            return (
                db.query(Bill)
                .filter(Bill.appointment_id == appointment_id)
                .order_by(Bill.id)
                .first()
            )
