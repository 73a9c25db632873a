import logging
from datetime import date

from core.id_allocator import IdAllocator
from core.record_store import PatientStore
from core.validation import (
    validate_age,
    validate_date_of_birth,
    validate_email,
    validate_id,
    validate_name,
    validate_not_null,
    validate_phone,
)
from models.patient import Patient, patient_matches
from models.person import age_of

logger = logging.getLogger(__name__)


class PatientService:
    def __init__(self, store: PatientStore, allocator: IdAllocator):
        self.store = store
        self.allocator = allocator

    # ------------------------------------------
    # Create a new patient
    # ------------------------------------------
    def create_patient(
        self,
        name: str,
        date_of_birth: date,
        email: str,
        phone_number: str,
        medical_history: str | None = None,
        allergies: str | None = None,
        insurance_provider: str | None = None,
        insurance_policy_number: str | None = None,
    ) -> Patient:
        validate_name(name)
        validate_date_of_birth(date_of_birth)
        validate_email(email)
        validate_phone(phone_number)

        patient = Patient(
            id=self.allocator.next_patient_id(),
            name=name,
            date_of_birth=date_of_birth,
            email=email,
            phone_number=phone_number,
            medical_history=medical_history,
            allergies=allergies,
            insurance_provider=insurance_provider,
            insurance_policy_number=insurance_policy_number,
        )

        self.store.create(patient)
        logger.info("Created patient %s (%s)", patient.id, patient.name)
        return patient

    # ------------------------------------------
    # Lookups
    # ------------------------------------------
    def find_patient_by_id(self, patient_id: int) -> Patient | None:
        validate_id(patient_id)
        patient = self.store.find_by_id(patient_id)
        if patient is None:
            logger.debug("Patient %s not found", patient_id)
        return patient

    def get_all_patients(self) -> list[Patient]:
        return self.store.find_all()

    # ------------------------------------------
    # Update / delete
    # ------------------------------------------
    def update_patient(self, patient: Patient) -> Patient | None:
        """Persist edits; returns None when no stored patient has that ID."""
        validate_not_null(patient, "Patient")
        validate_id(patient.id)
        validate_name(patient.name)
        validate_email(patient.email)
        validate_phone(patient.phone_number)

        updated = self.store.update(patient)
        if updated is not None:
            logger.info("Updated patient %s", patient.id)
        return updated

    def delete_patient(self, patient_id: int) -> bool:
        validate_id(patient_id)
        removed = self.store.delete(patient_id)
        if removed:
            logger.info("Deleted patient %s", patient_id)
        return removed

    # ------------------------------------------
    # Search
    # ------------------------------------------
    def search_patients_by_name(self, name: str) -> list[Patient]:
        validate_name(name)
        return self.store.search_by_name(name)

    def search_patients_by_age(self, age: int) -> list[Patient]:
        validate_age(age)
        return [p for p in self.store.find_all() if age_of(p) == age]

    def search_patients(self, query: str) -> list[Patient]:
        """Match against name, email, ID or age."""
        return [p for p in self.store.find_all() if patient_matches(p, query)]
