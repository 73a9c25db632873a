import unittest

from models.enums import Specialization
from tests.support import ClinicTestCase, tomorrow_at


class AnalyticsTests(ClinicTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.patient = self.add_patient()
        self.cardio = self.add_doctor(name="Dr. Heart", specialization=Specialization.CARDIOLOGY, fee=200.0)
        self.derm = self.add_doctor(name="Dr. Skin", specialization=Specialization.DERMATOLOGY, fee=100.0)
        self.gp = self.add_doctor(name="Dr. General", fee=60.0)

    def test_empty_clinic(self) -> None:
        empty = self.clinic.analytics
        self.clinic.doctors.delete_doctor(self.cardio.id)
        self.clinic.doctors.delete_doctor(self.derm.id)
        self.clinic.doctors.delete_doctor(self.gp.id)

        self.assertEqual(empty.average_consultation_fee(), 0.0)
        self.assertEqual(empty.total_revenue(), 0.0)
        self.assertEqual(empty.most_booked_doctors(), [])
        self.assertEqual(empty.appointments_per_doctor(), {})

    def test_average_fee_and_above_average(self) -> None:
        self.assertAlmostEqual(self.clinic.analytics.average_consultation_fee(), 120.0)
        above = self.clinic.analytics.doctors_above_average_fee()
        self.assertEqual([d.id for d in above], [self.cardio.id])

    def test_filter_by_specialization_text(self) -> None:
        found = self.clinic.analytics.filter_doctors_by_specialization("dermatology")
        self.assertEqual([d.id for d in found], [self.derm.id])
        found = self.clinic.analytics.filter_doctors_by_specialization("General Medicine")
        self.assertEqual([d.id for d in found], [self.gp.id])

    def test_revenue_counts_paid_bills_only(self) -> None:
        first = self.add_appointment(self.patient.id, self.cardio.id)
        second = self.add_appointment(self.patient.id, self.derm.id)
        self.clinic.appointments.create_bill(first.id)
        self.clinic.appointments.create_bill(second.id)
        self.clinic.appointments.record_payment(first.id)

        self.assertAlmostEqual(self.clinic.analytics.total_revenue(), 220.0)

    def test_booking_counts_skip_cancelled(self) -> None:
        for hour in (9, 10, 11):
            self.add_appointment(self.patient.id, self.derm.id, when=tomorrow_at(hour))
        cancelled = self.add_appointment(self.patient.id, self.cardio.id, when=tomorrow_at(12))
        self.add_appointment(self.patient.id, self.gp.id, when=tomorrow_at(13))
        self.clinic.appointments.cancel_appointment(cancelled.id)

        counts = self.clinic.analytics.appointments_per_doctor()
        self.assertEqual(counts, {self.derm.id: 3, self.gp.id: 1})

        ranked = self.clinic.analytics.most_booked_doctors(3)
        self.assertEqual([d.id for d in ranked], [self.derm.id, self.gp.id])

    def test_ranking_drops_deleted_doctors(self) -> None:
        self.add_appointment(self.patient.id, self.cardio.id, when=tomorrow_at(9))
        self.add_appointment(self.patient.id, self.cardio.id, when=tomorrow_at(10))
        self.add_appointment(self.patient.id, self.derm.id, when=tomorrow_at(11))
        self.clinic.doctors.delete_doctor(self.cardio.id)

        ranked = self.clinic.analytics.most_booked_doctors(3)
        self.assertEqual([d.id for d in ranked], [self.derm.id])

    def test_pending_and_confirmed(self) -> None:
        late = self.add_appointment(self.patient.id, self.gp.id, when=tomorrow_at(15))
        early = self.add_appointment(self.patient.id, self.gp.id, when=tomorrow_at(9))
        confirmed = self.add_appointment(self.patient.id, self.gp.id, when=tomorrow_at(12))
        self.clinic.appointments.confirm_appointment(confirmed.id)

        pending = self.clinic.analytics.pending_appointments()
        self.assertEqual([a.id for a in pending], [early.id, late.id])
        self.assertEqual(self.clinic.analytics.confirmed_appointments_count(), 1)

    def test_report_layout(self) -> None:
        appointment = self.add_appointment(self.patient.id, self.cardio.id)
        self.clinic.appointments.create_bill(appointment.id)
        self.clinic.appointments.record_payment(appointment.id)

        report = self.clinic.analytics.generate_report()
        self.assertTrue(report.startswith("=== CLINIC ANALYTICS REPORT ==="))
        self.assertIn("Average Consultation Fee: $120.00", report)
        self.assertIn("Total Revenue: $220.00", report)
        self.assertIn("1. Dr. Heart - Cardiology", report)


if __name__ == "__main__":
    unittest.main()
