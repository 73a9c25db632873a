from .enums import AppointmentStatus, Specialization
from .person import age_of, same_person
from .patient import Patient, patient_matches, same_patient_record
from .doctor import Doctor, doctor_matches
from .appointment import Appointment
from .bill import Bill, BillSummary, derive_amounts

__all__ = [
    "AppointmentStatus",
    "Specialization",
    "age_of",
    "same_person",
    "Patient",
    "patient_matches",
    "same_patient_record",
    "Doctor",
    "doctor_matches",
    "Appointment",
    "Bill",
    "BillSummary",
    "derive_amounts",
]
