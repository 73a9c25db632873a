import logging
import unittest
from datetime import datetime, timedelta

from models.appointment import Appointment
from models.enums import AppointmentStatus
from services.notifications import (
    AppointmentNotifier,
    default_notifier,
    log_status_change,
    log_upcoming_reminder,
)
from tests.support import ClinicTestCase, tomorrow_at


def _appointment(status, when=None):
    return Appointment(
        id=3001,
        patient_id=1001,
        doctor_id=2001,
        appointment_datetime=when or tomorrow_at(10),
        status=status,
    )


class NotifierTests(unittest.TestCase):
    def test_subscribe_is_idempotent_and_unsubscribe_stops_delivery(self) -> None:
        seen = []
        notifier = AppointmentNotifier()
        notifier.subscribe(seen.append)
        notifier.subscribe(seen.append)
        appointment = _appointment(AppointmentStatus.CONFIRMED)

        notifier.notify(appointment)
        self.assertEqual(seen, [appointment])

        notifier.unsubscribe(seen.append)
        notifier.notify(appointment)
        self.assertEqual(len(seen), 1)

    def test_status_change_messages(self) -> None:
        with self.assertLogs("services.notifications", level="INFO") as logs:
            log_status_change(_appointment(AppointmentStatus.CONFIRMED))
            log_status_change(_appointment(AppointmentStatus.CANCELLED))
        self.assertIn("Appointment #3001 has been confirmed", logs.output[0])
        self.assertIn("Appointment #3001 has been cancelled", logs.output[1])

    def test_reminder_only_for_confirmed_within_a_day(self) -> None:
        soon = datetime.now() + timedelta(hours=3, minutes=30)
        with self.assertLogs("services.notifications", level="INFO") as logs:
            log_upcoming_reminder(_appointment(AppointmentStatus.CONFIRMED, soon))
            log_upcoming_reminder(_appointment(AppointmentStatus.PENDING, soon))
            log_upcoming_reminder(_appointment(AppointmentStatus.CONFIRMED, soon + timedelta(days=2)))
            logging.getLogger("services.notifications").info("done")
        self.assertEqual(len(logs.output), 2)
        self.assertIn("is in 3 hours", logs.output[0])


class DefaultNotifierTests(ClinicTestCase):
    def test_confirming_logs_through_default_observers(self) -> None:
        patient = self.add_patient()
        doctor = self.add_doctor()
        appointment = self.add_appointment(patient.id, doctor.id)
        self.clinic.appointments.notifier = default_notifier()

        with self.assertLogs("services.notifications", level="INFO") as logs:
            self.clinic.appointments.confirm_appointment(appointment.id)
        self.assertTrue(any("has been confirmed" in line for line in logs.output))


class AllocatorSyncTests(ClinicTestCase):
    def test_sync_moves_counters_past_stored_ids(self) -> None:
        self.add_patient()
        self.add_patient(name="John Doe")
        self.add_doctor()

        self.allocator.reset()
        self.clinic.sync_allocator()

        self.assertEqual(self.add_patient(name="Third Patient").id, 1003)
        self.assertEqual(self.add_doctor(name="Dr. Second").id, 2002)
        self.assertEqual(self.allocator.next_bill_id(), 4001)


if __name__ == "__main__":
    unittest.main()
