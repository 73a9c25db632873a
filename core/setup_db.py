# core/setup_db.py

import sys
from datetime import date

from core.database import SessionLocal, init_db
from core.logging_config import configure_logging
from models.enums import Specialization
from services import build_clinic

DEMO_DOCTORS = [
    ("Dr. Alice Heart", date(1975, 4, 12), "alice.heart@clinic.test", "5550100001",
     Specialization.CARDIOLOGY, 150.0, 18, "LIC-CARD-001"),
    ("Dr. Ben Derm", date(1982, 9, 3), "ben.derm@clinic.test", "5550100002",
     Specialization.DERMATOLOGY, 120.0, 10, "LIC-DERM-001"),
    ("Dr. Carla General", date(1979, 1, 22), "carla.general@clinic.test", "5550100003",
     Specialization.GENERAL, 80.0, 14, "LIC-GEN-001"),
    ("Dr. Dev Neuro", date(1970, 11, 30), "dev.neuro@clinic.test", "5550100004",
     Specialization.NEUROLOGY, 200.0, 25, "LIC-NEUR-001"),
]


def ensure_demo_doctors(clinic) -> int:
    """
    Creates demo doctors on a fresh database.
    """
    if clinic.doctors.get_all_doctors():
        return 0

    for (name, dob, email, phone, spec, fee, years, license_number) in DEMO_DOCTORS:
        clinic.doctors.create_doctor(name, dob, email, phone, spec, fee, years, license_number)
    return len(DEMO_DOCTORS)


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    print("Creating database tables...")
    init_db()

    if "--seed" in argv:
        clinic = build_clinic(SessionLocal)
        clinic.sync_allocator()
        created = ensure_demo_doctors(clinic)
        print(f"Demo doctors created: {created}")

    print("Database initialized successfully.")


if __name__ == "__main__":
    main()
