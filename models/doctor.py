# models/doctor.py

from sqlalchemy import Column, Enum, Float, Integer, String

from core.database import Base
from models.enums import Specialization
from models.person import PersonMixin


class Doctor(PersonMixin, Base):
    __tablename__ = "doctors"

    specialization = Column(Enum(Specialization), nullable=False, index=True)
    consultation_fee = Column(Float, nullable=False, default=0.0)
    experience_years = Column(Integer, nullable=False, default=0)
    license_number = Column(String, unique=True, nullable=False)

    def __repr__(self):
        return f"<Doctor {self.id} - {self.name} ({self.specialization})>"


def doctor_matches(doctor: Doctor, query: str) -> bool:
    """Free-text match against name, specialization, ID or license number."""
    if not query:
        return False
    lowered = query.lower()
    return (
        lowered in (doctor.name or "").lower()
        or lowered in str(doctor.specialization or "").lower()
        or str(doctor.id) == query
        or lowered in (doctor.license_number or "").lower()
    )
