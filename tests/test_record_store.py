import unittest
from datetime import date

from sqlalchemy import text

from core.exceptions import StorageError
from core.record_store import AppointmentStore, BillStore, DoctorStore, PatientStore
from models.appointment import Appointment
from models.bill import Bill
from models.doctor import Doctor
from models.enums import AppointmentStatus, Specialization
from models.patient import Patient
from tests.support import ClinicTestCase, tomorrow_at


def _doctor(doctor_id, license_number, specialization=Specialization.GENERAL, name="Dr. Who"):
    return Doctor(
        id=doctor_id,
        name=name,
        date_of_birth=date(1980, 1, 1),
        email="who@example.com",
        phone_number="5550000000",
        specialization=specialization,
        consultation_fee=90.0,
        experience_years=5,
        license_number=license_number,
    )


class RecordStoreTests(ClinicTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.patients = PatientStore(self.session_factory)
        self.doctors = DoctorStore(self.session_factory)
        self.appointments = AppointmentStore(self.session_factory)
        self.bills = BillStore(self.session_factory)

    def test_find_all_on_empty_store_returns_empty_list(self) -> None:
        for store in (self.patients, self.doctors, self.appointments, self.bills):
            self.assertEqual(store.find_all(), [])
            self.assertIsNone(store.max_id())
            self.assertEqual(store.count(), 0)

    def test_find_by_id_missing_returns_none(self) -> None:
        self.assertIsNone(self.patients.find_by_id(1234))

    def test_update_without_row_returns_none(self) -> None:
        ghost = _doctor(2999, "LIC-GHOST")
        self.assertIsNone(self.doctors.update(ghost))
        self.assertEqual(self.doctors.find_all(), [])

    def test_update_and_delete(self) -> None:
        doctor = self.doctors.create(_doctor(2001, "LIC-1"))
        doctor.consultation_fee = 120.0
        self.assertIs(self.doctors.update(doctor), doctor)
        self.assertEqual(self.doctors.find_by_id(2001).consultation_fee, 120.0)

        self.assertTrue(self.doctors.delete(2001))
        self.assertFalse(self.doctors.delete(2001))

    def test_find_all_orders_by_id(self) -> None:
        self.doctors.create(_doctor(2005, "LIC-5"))
        self.doctors.create(_doctor(2002, "LIC-2"))
        self.assertEqual([d.id for d in self.doctors.find_all()], [2002, 2005])
        self.assertEqual(self.doctors.max_id(), 2005)

    def test_duplicate_license_raises_storage_error(self) -> None:
        self.doctors.create(_doctor(2001, "LIC-DUP"))
        with self.assertRaises(StorageError):
            self.doctors.create(_doctor(2002, "LIC-DUP"))
        self.assertEqual(len(self.doctors.find_all()), 1)

    def test_doctor_queries(self) -> None:
        self.doctors.create(_doctor(2001, "LIC-1", Specialization.CARDIOLOGY, "Dr. Heart"))
        self.doctors.create(_doctor(2002, "LIC-2", Specialization.GENERAL, "Dr. General"))

        cardio = self.doctors.find_by_specialization(Specialization.CARDIOLOGY)
        self.assertEqual([d.id for d in cardio], [2001])
        self.assertEqual([d.id for d in self.doctors.search_by_name("heart")], [2001])
        self.assertEqual(self.doctors.find_by_license("LIC-2").id, 2002)
        self.assertIsNone(self.doctors.find_by_license("LIC-404"))

    def test_appointment_and_bill_queries(self) -> None:
        self.appointments.create(Appointment(id=3001, patient_id=1001, doctor_id=2001,
                                             appointment_datetime=tomorrow_at(9)))
        self.appointments.create(Appointment(id=3002, patient_id=1002, doctor_id=2001,
                                             appointment_datetime=tomorrow_at(10)))
        self.bills.create(Bill(id=4001, appointment_id=3002, base_amount=50.0))

        self.assertEqual([a.id for a in self.appointments.find_by_doctor_id(2001)], [3001, 3002])
        self.assertEqual([a.id for a in self.appointments.find_by_patient_id(1002)], [3002])
        self.assertEqual(self.appointments.find_by_id(3001).status, AppointmentStatus.PENDING)
        self.assertEqual(self.bills.find_by_appointment_id(3002).id, 4001)
        self.assertIsNone(self.bills.find_by_appointment_id(3001))

    def test_dates_are_stored_as_text(self) -> None:
        self.patients.create(Patient(id=1001, name="Ann Lee", date_of_birth=date(1991, 2, 3),
                                     email="ann@example.com", phone_number="5551112222"))
        self.appointments.create(Appointment(id=3001, patient_id=1001, doctor_id=2001,
                                             appointment_datetime=tomorrow_at(14, 30)))

        with self.session_factory() as db:
            dob = db.execute(text("SELECT date_of_birth FROM patients")).scalar()
            when = db.execute(text("SELECT appointment_datetime FROM appointments")).scalar()
            status = db.execute(text("SELECT status FROM appointments")).scalar()

        self.assertEqual(dob, "1991-02-03")
        self.assertEqual(when, tomorrow_at(14, 30).strftime("%Y-%m-%d %H:%M"))
        self.assertEqual(status, "PENDING")

    def test_t_separated_datetimes_are_read_back(self) -> None:
        with self.session_factory() as db:
            db.execute(text(
                "INSERT INTO appointments (id, patient_id, doctor_id, appointment_datetime, status) "
                "VALUES (3009, 1001, 2001, '2031-07-04T15:45', 'CONFIRMED')"
            ))
            db.commit()

        appointment = self.appointments.find_by_id(3009)
        self.assertEqual(appointment.appointment_datetime.hour, 15)
        self.assertEqual(appointment.appointment_datetime.minute, 45)
        self.assertEqual(appointment.status, AppointmentStatus.CONFIRMED)


if __name__ == "__main__":
    unittest.main()
