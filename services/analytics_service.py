"""Read-only aggregations over the stored records.

Nothing is cached; every call reads the current rows.
"""

from collections import Counter

from core.constants import PAID_STATUS
from core.record_store import AppointmentStore, BillStore, DoctorStore
from models.appointment import Appointment
from models.doctor import Doctor
from models.enums import AppointmentStatus


class AnalyticsService:
    def __init__(self, appointment_store: AppointmentStore, bill_store: BillStore, doctor_store: DoctorStore):
        self.appointment_store = appointment_store
        self.bill_store = bill_store
        self.doctor_store = doctor_store

    def filter_doctors_by_specialization(self, specialization: str) -> list[Doctor]:
        wanted = (specialization or "").strip().lower()
        return [
            d for d in self.doctor_store.find_all()
            if wanted in (str(d.specialization).lower(), d.specialization.name.lower())
        ]

    def average_consultation_fee(self) -> float:
        fees = [d.consultation_fee for d in self.doctor_store.find_all()]
        if not fees:
            return 0.0
        return sum(fees) / len(fees)

    def total_revenue(self) -> float:
        return sum(
            bill.total_amount
            for bill in self.bill_store.find_all()
            if (bill.payment_status or "").upper() == PAID_STATUS
        )

    def appointments_per_doctor(self) -> dict[int, int]:
        """Non-cancelled appointment counts keyed by doctor ID."""
        return dict(
            Counter(
                a.doctor_id
                for a in self.appointment_store.find_all()
                if a.status != AppointmentStatus.CANCELLED
            )
        )

    def most_booked_doctors(self, limit: int = 3) -> list[Doctor]:
        counts = self.appointments_per_doctor()
        # sorted() is stable, so equal counts keep first-booked order
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:max(limit, 0)]

        doctors = []
        for doctor_id, _ in ranked:
            doctor = self.doctor_store.find_by_id(doctor_id)
            if doctor is not None:
                doctors.append(doctor)
        return doctors

    def pending_appointments(self) -> list[Appointment]:
        pending = [
            a for a in self.appointment_store.find_all()
            if a.status == AppointmentStatus.PENDING
        ]
        return sorted(pending, key=lambda a: a.appointment_datetime)

    def confirmed_appointments_count(self) -> int:
        return sum(
            1 for a in self.appointment_store.find_all()
            if a.status == AppointmentStatus.CONFIRMED
        )

    def doctors_above_average_fee(self) -> list[Doctor]:
        average = self.average_consultation_fee()
        above = [d for d in self.doctor_store.find_all() if d.consultation_fee > average]
        return sorted(above, key=lambda d: d.consultation_fee, reverse=True)

    def generate_report(self) -> str:
        lines = [
            "=== CLINIC ANALYTICS REPORT ===",
            "",
            f"Average Consultation Fee: ${self.average_consultation_fee():.2f}",
            f"Total Revenue: ${self.total_revenue():.2f}",
            f"Confirmed Appointments: {self.confirmed_appointments_count()}",
            "",
            "Top 3 Most Booked Doctors:",
        ]
        for rank, doctor in enumerate(self.most_booked_doctors(3), start=1):
            lines.append(f"{rank}. {doctor.name} - {doctor.specialization}")
        return "\n".join(lines) + "\n"
