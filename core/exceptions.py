"""Exceptions raised by validation, the record store and the services."""


class ClinicError(Exception):
    """Base class for every error the console reports to the operator."""


class InvalidDataError(ClinicError):
    """Raised when input fails validation or a referenced record can't be used."""


class NotFoundError(ClinicError):
    """Raised when a required record does not exist."""


class AppointmentNotFoundError(NotFoundError):
    """Raised when an appointment lookup finds no row."""

    def __init__(self, appointment_id):
        self.appointment_id = appointment_id
        super().__init__(f"Appointment with ID {appointment_id} not found")


class StorageError(ClinicError):
    """Raised when the database layer fails underneath a store operation."""
