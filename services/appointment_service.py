import logging
from datetime import datetime

from core.constants import PAID_STATUS
from core.exceptions import AppointmentNotFoundError, InvalidDataError
from core.id_allocator import IdAllocator
from core.record_store import AppointmentStore, BillStore, DoctorStore
from core.time_utils import is_past
from core.validation import validate_id, validate_not_null
from models.appointment import Appointment
from models.bill import Bill, BillSummary
from models.enums import AppointmentStatus
from services.billing import BillType, build_bill, summarize_bill
from services.notifications import AppointmentNotifier

logger = logging.getLogger(__name__)


class AppointmentService:
    """Appointment lifecycle plus the bills derived from it.

    Status changes are deliberately permissive: confirm, cancel and complete
    overwrite whatever status the appointment had, so a cancelled
    appointment can be confirmed again.
    """

    def __init__(
        self,
        appointment_store: AppointmentStore,
        doctor_store: DoctorStore,
        bill_store: BillStore,
        allocator: IdAllocator,
        notifier: AppointmentNotifier | None = None,
    ):
        self.appointment_store = appointment_store
        self.doctor_store = doctor_store
        self.bill_store = bill_store
        self.allocator = allocator
        self.notifier = notifier

    # ------------------------------------------
    # Create a new appointment
    # ------------------------------------------
    def create_appointment(
        self,
        patient_id: int,
        doctor_id: int,
        appointment_datetime: datetime,
        reason: str | None = None,
        notes: str | None = None,
    ) -> Appointment:
        validate_id(patient_id)
        validate_id(doctor_id)
        validate_not_null(appointment_datetime, "Appointment date/time")
        # Stored to the minute
        appointment_datetime = appointment_datetime.replace(second=0, microsecond=0)

        if is_past(appointment_datetime):
            raise InvalidDataError("Appointment date/time cannot be in the past")

        appointment = Appointment(
            id=self.allocator.next_appointment_id(),
            patient_id=patient_id,
            doctor_id=doctor_id,
            appointment_datetime=appointment_datetime,
            status=AppointmentStatus.PENDING,
            reason=reason,
            notes=notes,
        )

        self.appointment_store.create(appointment)
        logger.info(
            "Created appointment %s for patient %s with doctor %s",
            appointment.id,
            patient_id,
            doctor_id,
        )
        return appointment

    # ------------------------------------------
    # Lookups
    # ------------------------------------------
    def find_appointment_by_id(self, appointment_id: int) -> Appointment:
        validate_id(appointment_id)
        appointment = self.appointment_store.find_by_id(appointment_id)
        if appointment is None:
            raise AppointmentNotFoundError(appointment_id)
        return appointment

    def get_all_appointments(self) -> list[Appointment]:
        return self.appointment_store.find_all()

    def get_appointments_by_patient_id(self, patient_id: int) -> list[Appointment]:
        validate_id(patient_id)
        return self.appointment_store.find_by_patient_id(patient_id)

    def get_appointments_by_doctor_id(self, doctor_id: int) -> list[Appointment]:
        validate_id(doctor_id)
        return self.appointment_store.find_by_doctor_id(doctor_id)

    # ------------------------------------------
    # Status transitions
    # ------------------------------------------
    def cancel_appointment(self, appointment_id: int) -> Appointment:
        return self._set_status(appointment_id, AppointmentStatus.CANCELLED)

    def confirm_appointment(self, appointment_id: int) -> Appointment:
        return self._set_status(appointment_id, AppointmentStatus.CONFIRMED)

    def complete_appointment(self, appointment_id: int) -> Appointment:
        return self._set_status(appointment_id, AppointmentStatus.COMPLETED)

    def _set_status(self, appointment_id: int, status: AppointmentStatus) -> Appointment:
        appointment = self.find_appointment_by_id(appointment_id)
        previous = appointment.status
        appointment.status = status
        self.appointment_store.update(appointment)
        logger.info("Appointment %s: %s -> %s", appointment_id, previous, status)

        if self.notifier is not None:
            self.notifier.notify(appointment)
        return appointment

    # ------------------------------------------
    # Update / delete
    # ------------------------------------------
    def update_appointment(self, appointment: Appointment) -> Appointment | None:
        validate_not_null(appointment, "Appointment")
        validate_id(appointment.id)
        validate_id(appointment.patient_id)
        validate_id(appointment.doctor_id)
        return self.appointment_store.update(appointment)

    def delete_appointment(self, appointment_id: int) -> bool:
        validate_id(appointment_id)
        removed = self.appointment_store.delete(appointment_id)
        if removed:
            logger.info("Deleted appointment %s", appointment_id)
        return removed

    # ------------------------------------------
    # Billing
    # ------------------------------------------
    def create_bill(
        self,
        appointment_id: int,
        bill_type: BillType = BillType.STANDARD,
        adjustment: float = 0.0,
    ) -> Bill:
        """Bill an appointment at its doctor's consultation fee.

        Discounted bills take ``adjustment`` as a percentage off; premium
        bills add it as an extra charge.
        """
        appointment = self.find_appointment_by_id(appointment_id)
        doctor = self.doctor_store.find_by_id(appointment.doctor_id)
        if doctor is None:
            raise InvalidDataError("Doctor not found for appointment")

        bill = build_bill(
            self.allocator.next_bill_id(),
            appointment_id,
            doctor.consultation_fee,
            bill_type,
            adjustment,
        )
        self.bill_store.create(bill)
        logger.info(
            "Created %s bill %s for appointment %s: total %.2f",
            bill_type.value,
            bill.id,
            appointment_id,
            bill.total_amount,
        )
        return bill

    def generate_bill_summary(self, appointment_id: int) -> BillSummary:
        bill = self._bill_for(appointment_id)
        return summarize_bill(bill)

    def record_payment(self, appointment_id: int, payment_status: str = PAID_STATUS) -> BillSummary:
        """Overwrite the payment status of the appointment's bill."""
        if payment_status is None or not str(payment_status).strip():
            raise InvalidDataError("Payment status cannot be null or empty")

        bill = self._bill_for(appointment_id)
        bill.payment_status = payment_status.strip().upper()
        self.bill_store.update(bill)
        logger.info("Bill %s marked %s", bill.id, bill.payment_status)
        return summarize_bill(bill)

    def _bill_for(self, appointment_id: int) -> Bill:
        bill = self.bill_store.find_by_appointment_id(appointment_id)
        if bill is None:
            raise InvalidDataError(f"Bill not found for appointment ID: {appointment_id}")
        return bill
