"""Per-kind integer identifiers for patients, doctors, appointments and bills."""

import threading
from enum import Enum


class EntityKind(str, Enum):
    PATIENT = "patient"
    DOCTOR = "doctor"
    APPOINTMENT = "appointment"
    BILL = "bill"


# Distinct bases keep the ranges apart while each kind stays under 1000 records.
ID_BASES = {
    EntityKind.PATIENT: 1000,
    EntityKind.DOCTOR: 2000,
    EntityKind.APPOINTMENT: 3000,
    EntityKind.BILL: 4000,
}


class IdAllocator:
    """Monotonic counters, one per entity kind.

    One instance is built at startup and passed to every service that
    creates records. Allocation is increment-then-read under a lock, so
    concurrent callers never receive the same value.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counters = dict(ID_BASES)

    def next_id(self, kind: EntityKind) -> int:
        kind = EntityKind(kind)
        with self._lock:
            self._counters[kind] += 1
            return self._counters[kind]

    def next_patient_id(self) -> int:
        return self.next_id(EntityKind.PATIENT)

    def next_doctor_id(self) -> int:
        return self.next_id(EntityKind.DOCTOR)

    def next_appointment_id(self) -> int:
        return self.next_id(EntityKind.APPOINTMENT)

    def next_bill_id(self) -> int:
        return self.next_id(EntityKind.BILL)

    def current(self, kind: EntityKind) -> int:
        """Last value handed out for ``kind`` (the seed if none yet)."""
        with self._lock:
            return self._counters[EntityKind(kind)]

    def advance_past(self, kind: EntityKind, highest_id: int | None) -> None:
        """Make sure the next ``kind`` ID is greater than ``highest_id``.

        Never moves a counter backwards.
        """
        if highest_id is None:
            return
        kind = EntityKind(kind)
        with self._lock:
            if highest_id > self._counters[kind]:
                self._counters[kind] = highest_id

    def reset(self) -> None:
        with self._lock:
            self._counters = dict(ID_BASES)
