# models/appointment.py

from sqlalchemy import Column, Enum, ForeignKey, Integer, Text

from core.database import Base
from core.types import TextDateTime
from models.enums import AppointmentStatus


class Appointment(Base):
    __tablename__ = "appointments"

    id = Column(Integer, primary_key=True, autoincrement=False)

    # Not enforced beyond being positive; SQLite leaves FK checks off by default
    patient_id = Column(Integer, ForeignKey("patients.id"), nullable=False, index=True)
    doctor_id = Column(Integer, ForeignKey("doctors.id"), nullable=False, index=True)

    appointment_datetime = Column(TextDateTime, nullable=False)
    status = Column(Enum(AppointmentStatus), nullable=False, default=AppointmentStatus.PENDING)

    reason = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    def __init__(self, **kwargs):
        kwargs.setdefault("status", AppointmentStatus.PENDING)
        super().__init__(**kwargs)

    def cancel(self):
        self.status = AppointmentStatus.CANCELLED

    def confirm(self):
        self.status = AppointmentStatus.CONFIRMED

    def complete(self):
        self.status = AppointmentStatus.COMPLETED

    @property
    def is_active(self) -> bool:
        return self.status in (AppointmentStatus.PENDING, AppointmentStatus.CONFIRMED)

    def __repr__(self):
        return f"<Appointment {self.id} patient={self.patient_id} doctor={self.doctor_id} {self.status}>"
