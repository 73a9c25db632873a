# models/patient.py

from sqlalchemy import Column, Text, String

from core.database import Base
from models.person import PersonMixin, age_of, same_person


class Patient(PersonMixin, Base):
    __tablename__ = "patients"

    # Optional clinical and insurance info
    medical_history = Column(Text, nullable=True)
    allergies = Column(Text, nullable=True)
    insurance_provider = Column(String, nullable=True)
    insurance_policy_number = Column(String, nullable=True)

    def __repr__(self):
        return f"<Patient {self.id} - {self.name}>"


def same_patient_record(a: Patient, b: Patient) -> bool:
    """Identity plus matching insurance policy number."""
    return same_person(a, b) and a.insurance_policy_number == b.insurance_policy_number


def patient_matches(patient: Patient, query: str) -> bool:
    """Free-text match against name, email, ID or age."""
    if not query:
        return False
    lowered = query.lower()
    return (
        lowered in (patient.name or "").lower()
        or str(patient.id) == query
        or str(age_of(patient)) == query
        or (patient.email is not None and lowered in patient.email.lower())
    )
