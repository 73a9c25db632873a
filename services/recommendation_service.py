"""
Doctor recommendation and slot suggestion
---------------------------------
Symptoms are matched against SYMPTOM_KEYWORDS in list order; the first
keyword found in the text decides the specialization, and unmatched text
goes to General Medicine.

Among the doctors of that specialization the least busy one is chosen,
measured as the number of Pending or Confirmed appointments. Ties keep the
store order, so with no bookings the first doctor by ID wins.
"""

import logging
from datetime import date, datetime, timedelta

from core.constants import CLINIC_CLOSE_HOUR, CLINIC_OPEN_HOUR, MAX_SUGGESTED_SLOTS
from core.record_store import AppointmentStore, DoctorStore
from core.time_utils import tomorrow
from models.doctor import Doctor
from models.enums import AppointmentStatus, Specialization

logger = logging.getLogger(__name__)


SYMPTOM_KEYWORDS = [
    ("chest pain", Specialization.CARDIOLOGY),
    ("heart", Specialization.CARDIOLOGY),
    ("cardiac", Specialization.CARDIOLOGY),
    ("rash", Specialization.DERMATOLOGY),
    ("skin", Specialization.DERMATOLOGY),
    ("acne", Specialization.DERMATOLOGY),
    ("child", Specialization.PEDIATRICS),
    ("pediatric", Specialization.PEDIATRICS),
    ("baby", Specialization.PEDIATRICS),
    ("fracture", Specialization.ORTHOPEDICS),
    ("bone", Specialization.ORTHOPEDICS),
    ("joint", Specialization.ORTHOPEDICS),
    ("headache", Specialization.NEUROLOGY),
    ("neurological", Specialization.NEUROLOGY),
    ("seizure", Specialization.NEUROLOGY),
    ("mental", Specialization.PSYCHIATRY),
    ("depression", Specialization.PSYCHIATRY),
    ("anxiety", Specialization.PSYCHIATRY),
    ("cancer", Specialization.ONCOLOGY),
    ("tumor", Specialization.ONCOLOGY),
    ("women", Specialization.GYNECOLOGY),
    ("gynecological", Specialization.GYNECOLOGY),
    ("urinary", Specialization.UROLOGY),
    ("kidney", Specialization.UROLOGY),
]


def match_specialization(symptoms: str) -> Specialization:
    lowered = (symptoms or "").lower()
    for keyword, specialization in SYMPTOM_KEYWORDS:
        if keyword in lowered:
            return specialization
    return Specialization.GENERAL


class RecommendationService:
    def __init__(self, doctor_store: DoctorStore, appointment_store: AppointmentStore):
        self.doctor_store = doctor_store
        self.appointment_store = appointment_store

    # -----------------------------
    # Doctor recommendation
    # -----------------------------
    def recommend_doctor(self, symptoms: str) -> Doctor | None:
        if symptoms is None or not symptoms.strip():
            return None

        specialization = match_specialization(symptoms)
        doctors = self.doctor_store.find_by_specialization(specialization)

        if not doctors and specialization != Specialization.GENERAL:
            logger.debug("No %s doctors on file, falling back to General Medicine", specialization)
            doctors = self.doctor_store.find_by_specialization(Specialization.GENERAL)

        if not doctors:
            return None
        return self.least_busy_doctor(doctors)

    def active_appointment_count(self, doctor_id: int) -> int:
        return sum(
            1 for a in self.appointment_store.find_by_doctor_id(doctor_id)
            if a.is_active
        )

    def least_busy_doctor(self, doctors: list[Doctor]) -> Doctor | None:
        if not doctors:
            return None
        # min() returns the first of equally loaded doctors
        return min(doctors, key=lambda d: self.active_appointment_count(d.id))

    # -----------------------------
    # Slot suggestion
    # -----------------------------
    def suggest_appointment_slots(self, doctor_id: int, preferred_date: date | None = None) -> list[datetime]:
        """Up to five free hourly start times between 09:00 and 16:00."""
        day = preferred_date or tomorrow()
        current = datetime.combine(day, datetime.min.time()).replace(hour=CLINIC_OPEN_HOUR)

        booked = {
            a.appointment_datetime
            for a in self.appointment_store.find_by_doctor_id(doctor_id)
            if a.status != AppointmentStatus.CANCELLED
        }

        now = datetime.now()
        suggestions = []
        while len(suggestions) < MAX_SUGGESTED_SLOTS and current.hour < CLINIC_CLOSE_HOUR:
            if current > now and current not in booked:
                suggestions.append(current)
            current += timedelta(hours=1)
        return suggestions
