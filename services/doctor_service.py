import logging
from datetime import date

from core.exceptions import InvalidDataError
from core.id_allocator import IdAllocator
from core.record_store import DoctorStore
from core.validation import (
    validate_amount,
    validate_date_of_birth,
    validate_email,
    validate_id,
    validate_name,
    validate_not_null,
    validate_phone,
)
from models.doctor import Doctor, doctor_matches
from models.enums import Specialization

logger = logging.getLogger(__name__)


def _validate_license(license_number: str) -> None:
    if license_number is None or not str(license_number).strip():
        raise InvalidDataError("License number cannot be null or empty")


def _validate_experience(experience_years: int) -> None:
    validate_not_null(experience_years, "Experience years")
    if experience_years < 0:
        raise InvalidDataError("Experience years cannot be negative")


class DoctorService:
    def __init__(self, store: DoctorStore, allocator: IdAllocator):
        self.store = store
        self.allocator = allocator

    # ------------------------------------------
    # Create a new doctor
    # ------------------------------------------
    def create_doctor(
        self,
        name: str,
        date_of_birth: date,
        email: str,
        phone_number: str,
        specialization: Specialization,
        consultation_fee: float,
        experience_years: int,
        license_number: str,
    ) -> Doctor:
        validate_name(name)
        validate_date_of_birth(date_of_birth)
        validate_email(email)
        validate_phone(phone_number)
        validate_amount(consultation_fee)
        validate_not_null(specialization, "Specialization")
        _validate_experience(experience_years)
        _validate_license(license_number)

        if self.store.find_by_license(license_number) is not None:
            raise InvalidDataError(f"License number {license_number} is already registered")

        doctor = Doctor(
            id=self.allocator.next_doctor_id(),
            name=name,
            date_of_birth=date_of_birth,
            email=email,
            phone_number=phone_number,
            specialization=specialization,
            consultation_fee=consultation_fee,
            experience_years=experience_years,
            license_number=license_number,
        )

        self.store.create(doctor)
        logger.info("Created doctor %s (%s, %s)", doctor.id, doctor.name, doctor.specialization)
        return doctor

    # ------------------------------------------
    # Lookups
    # ------------------------------------------
    def find_doctor_by_id(self, doctor_id: int) -> Doctor | None:
        validate_id(doctor_id)
        doctor = self.store.find_by_id(doctor_id)
        if doctor is None:
            logger.debug("Doctor %s not found", doctor_id)
        return doctor

    def get_all_doctors(self) -> list[Doctor]:
        return self.store.find_all()

    # ------------------------------------------
    # Update / delete
    # ------------------------------------------
    def update_doctor(self, doctor: Doctor) -> Doctor | None:
        """Persist edits; returns None when no stored doctor has that ID."""
        validate_not_null(doctor, "Doctor")
        validate_id(doctor.id)
        validate_name(doctor.name)
        validate_email(doctor.email)
        validate_phone(doctor.phone_number)
        validate_amount(doctor.consultation_fee)
        validate_not_null(doctor.specialization, "Specialization")
        _validate_license(doctor.license_number)

        holder = self.store.find_by_license(doctor.license_number)
        if holder is not None and holder.id != doctor.id:
            raise InvalidDataError(f"License number {doctor.license_number} is already registered")

        updated = self.store.update(doctor)
        if updated is not None:
            logger.info("Updated doctor %s", doctor.id)
        return updated

    def delete_doctor(self, doctor_id: int) -> bool:
        validate_id(doctor_id)
        removed = self.store.delete(doctor_id)
        if removed:
            logger.info("Deleted doctor %s", doctor_id)
        return removed

    # ------------------------------------------
    # Search
    # ------------------------------------------
    def search_doctors_by_specialization(self, specialization: Specialization) -> list[Doctor]:
        validate_not_null(specialization, "Specialization")
        return self.store.find_by_specialization(specialization)

    def search_doctors_by_name(self, name: str) -> list[Doctor]:
        validate_name(name)
        return self.store.search_by_name(name)

    def search_doctors(self, query: str) -> list[Doctor]:
        """Match against name, specialization, ID or license number."""
        return [d for d in self.store.find_all() if doctor_matches(d, query)]
