from enum import Enum


class Specialization(Enum):
    CARDIOLOGY = "Cardiology"
    DERMATOLOGY = "Dermatology"
    PEDIATRICS = "Pediatrics"
    ORTHOPEDICS = "Orthopedics"
    NEUROLOGY = "Neurology"
    GENERAL = "General Medicine"
    PSYCHIATRY = "Psychiatry"
    ONCOLOGY = "Oncology"
    GYNECOLOGY = "Gynecology"
    UROLOGY = "Urology"

    @property
    def description(self) -> str:
        return SPECIALIZATION_DESCRIPTIONS[self]

    @classmethod
    def from_text(cls, text: str) -> "Specialization":
        """Look up by member name or display name, ignoring case.

        Raises ValueError for unknown text.
        """
        wanted = (text or "").strip().lower()
        for member in cls:
            if wanted in (member.name.lower(), member.value.lower()):
                return member
        raise ValueError(f"Unknown specialization: {text!r}")

    def __str__(self) -> str:
        return self.value


SPECIALIZATION_DESCRIPTIONS = {
    Specialization.CARDIOLOGY: "Heart and cardiovascular system",
    Specialization.DERMATOLOGY: "Skin, hair, and nails",
    Specialization.PEDIATRICS: "Child healthcare",
    Specialization.ORTHOPEDICS: "Bones, joints, and muscles",
    Specialization.NEUROLOGY: "Brain and nervous system",
    Specialization.GENERAL: "General health and wellness",
    Specialization.PSYCHIATRY: "Mental health",
    Specialization.ONCOLOGY: "Cancer treatment",
    Specialization.GYNECOLOGY: "Women's reproductive health",
    Specialization.UROLOGY: "Urinary tract and male reproductive system",
}


class AppointmentStatus(Enum):
    PENDING = "Pending"
    CONFIRMED = "Confirmed"
    CANCELLED = "Cancelled"
    COMPLETED = "Completed"

    def __str__(self) -> str:
        return self.value
