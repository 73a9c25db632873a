"""Appointment status observers. Side effects are log lines only."""

import logging
from datetime import datetime
from typing import Callable, List

from core.time_utils import format_datetime
from models.appointment import Appointment
from models.enums import AppointmentStatus

logger = logging.getLogger(__name__)

Observer = Callable[[Appointment], None]


class AppointmentNotifier:
    def __init__(self) -> None:
        self._observers: List[Observer] = []

    def subscribe(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, appointment: Appointment) -> None:
        for observer in list(self._observers):
            observer(appointment)


def log_status_change(appointment: Appointment) -> None:
    if appointment.status == AppointmentStatus.CONFIRMED:
        logger.info(
            "Appointment #%s has been confirmed for %s",
            appointment.id,
            format_datetime(appointment.appointment_datetime),
        )
    elif appointment.status == AppointmentStatus.CANCELLED:
        logger.info("Appointment #%s has been cancelled", appointment.id)


def log_upcoming_reminder(appointment: Appointment) -> None:
    """Remind about confirmed appointments due within the next 24 hours."""
    if appointment.status != AppointmentStatus.CONFIRMED:
        return
    hours = (appointment.appointment_datetime - datetime.now()).total_seconds() / 3600
    if 0 < hours <= 24:
        logger.info("Reminder: appointment #%s is in %d hours", appointment.id, int(hours))


def default_notifier() -> AppointmentNotifier:
    notifier = AppointmentNotifier()
    notifier.subscribe(log_status_change)
    notifier.subscribe(log_upcoming_reminder)
    return notifier
