import unittest

from core.exceptions import InvalidDataError
from core.setup_db import DEMO_DOCTORS, ensure_demo_doctors
from models.doctor import doctor_matches
from models.enums import Specialization
from tests.support import ClinicTestCase


class DoctorServiceTests(ClinicTestCase):
    def test_create_assigns_doctor_range_ids(self) -> None:
        first = self.add_doctor()
        second = self.add_doctor(name="Dr. Lisa Cuddy")
        self.assertEqual((first.id, second.id), (2001, 2002))

    def test_negative_fee_rejected(self) -> None:
        with self.assertRaises(InvalidDataError):
            self.add_doctor(fee=-10.0)

    def test_specialization_required(self) -> None:
        with self.assertRaises(InvalidDataError):
            self.add_doctor(specialization=None)

    def test_duplicate_license_rejected(self) -> None:
        self.add_doctor(license_number="LIC-42")
        with self.assertRaises(InvalidDataError):
            self.add_doctor(name="Dr. Other", license_number="LIC-42")

    def test_missing_doctor_returns_none(self) -> None:
        self.assertIsNone(self.clinic.doctors.find_doctor_by_id(2999))

    def test_update_fee_and_license_conflict(self) -> None:
        first = self.add_doctor(license_number="LIC-A")
        second = self.add_doctor(name="Dr. Second", license_number="LIC-B")

        first.consultation_fee = 175.0
        self.clinic.doctors.update_doctor(first)
        self.assertEqual(self.clinic.doctors.find_doctor_by_id(first.id).consultation_fee, 175.0)

        second.license_number = "LIC-A"
        with self.assertRaises(InvalidDataError):
            self.clinic.doctors.update_doctor(second)

    def test_delete_doctor(self) -> None:
        doctor = self.add_doctor()
        self.assertTrue(self.clinic.doctors.delete_doctor(doctor.id))
        self.assertFalse(self.clinic.doctors.delete_doctor(doctor.id))

    def test_searches(self) -> None:
        heart = self.add_doctor(name="Dr. Heart", specialization=Specialization.CARDIOLOGY, license_number="CARD-1")
        self.add_doctor(name="Dr. Skin", specialization=Specialization.DERMATOLOGY)

        found = self.clinic.doctors.search_doctors_by_specialization(Specialization.CARDIOLOGY)
        self.assertEqual([d.id for d in found], [heart.id])
        self.assertEqual([d.id for d in self.clinic.doctors.search_doctors_by_name("heart")], [heart.id])
        self.assertEqual([d.id for d in self.clinic.doctors.search_doctors("card-1")], [heart.id])
        self.assertTrue(doctor_matches(heart, "cardiology"))
        self.assertFalse(doctor_matches(heart, None))

    def test_specialization_text_lookup(self) -> None:
        self.assertIs(Specialization.from_text("general medicine"), Specialization.GENERAL)
        self.assertIs(Specialization.from_text("UROLOGY"), Specialization.UROLOGY)
        with self.assertRaises(ValueError):
            Specialization.from_text("astrology")


class DemoSeedTests(ClinicTestCase):
    def test_seed_only_on_empty_table(self) -> None:
        self.assertEqual(ensure_demo_doctors(self.clinic), len(DEMO_DOCTORS))
        self.assertEqual(ensure_demo_doctors(self.clinic), 0)
        self.assertEqual(len(self.clinic.doctors.get_all_doctors()), len(DEMO_DOCTORS))


if __name__ == "__main__":
    unittest.main()
