import logging
import os

from core import config
from core.constants import EXIT_MSG, WELCOME_MSG
from core.database import SessionLocal, init_db
from core.exceptions import ClinicError, InvalidDataError
from core.logging_config import configure_logging
from core.time_utils import format_datetime, parse_date, parse_datetime
from models.enums import Specialization
from models.person import age_of
from services import Clinic, build_clinic
from services.billing import BillType, format_bill_summary

logger = logging.getLogger(__name__)


# -----------------------------
# Row formatting
# -----------------------------
def describe_patient(p) -> str:
    insurance = " ".join(filter(None, [p.insurance_provider, p.insurance_policy_number])) or "-"
    return (
        f"[{p.id}] {p.name} | age {age_of(p)} | {p.email} | {p.phone_number}"
        f" | allergies: {p.allergies or '-'} | insurance: {insurance}"
    )


def describe_doctor(d) -> str:
    return (
        f"[{d.id}] {d.name} | {d.specialization} | fee ${d.consultation_fee:.2f}"
        f" | {d.experience_years} yrs | license {d.license_number}"
    )


def describe_appointment(a) -> str:
    return (
        f"[{a.id}] {format_datetime(a.appointment_datetime)} | patient {a.patient_id}"
        f" | doctor {a.doctor_id} | {a.status} | {a.reason or '-'}"
    )


class ClinicConsole:
    """Menu-driven text front end over the clinic services.

    ``read`` and ``write`` default to input/print and can be swapped for
    scripted I/O.
    """

    def __init__(self, clinic: Clinic, read=input, write=print):
        self.clinic = clinic
        self.read = read
        self.write = write

    # -----------------------------
    # Input helpers
    # -----------------------------
    def ask(self, prompt: str) -> str:
        return self.read(f"{prompt}: ").strip()

    def ask_optional(self, prompt: str) -> str | None:
        return self.ask(prompt) or None

    def ask_int(self, prompt: str) -> int:
        text = self.ask(prompt)
        try:
            return int(text)
        except ValueError:
            raise InvalidDataError(f"'{text}' is not a whole number") from None

    def ask_float(self, prompt: str) -> float:
        text = self.ask(prompt)
        try:
            return float(text)
        except ValueError:
            raise InvalidDataError(f"'{text}' is not a number") from None

    def ask_date(self, prompt: str, optional: bool = False):
        text = self.ask(f"{prompt} (YYYY-MM-DD)")
        if not text and optional:
            return None
        try:
            return parse_date(text)
        except ValueError:
            raise InvalidDataError(f"'{text}' is not a valid date") from None

    def ask_datetime(self, prompt: str):
        text = self.ask(f"{prompt} (YYYY-MM-DD HH:MM)")
        try:
            return parse_datetime(text)
        except ValueError:
            raise InvalidDataError(f"'{text}' is not a valid date/time") from None

    def ask_specialization(self) -> Specialization:
        for index, spec in enumerate(Specialization, start=1):
            self.write(f"  {index}. {spec.value}")
        choice = self.ask_int("Specialization")
        members = list(Specialization)
        if not 1 <= choice <= len(members):
            raise InvalidDataError("Invalid specialization choice")
        return members[choice - 1]

    def show(self, rows, describe, empty: str = "No records found.") -> None:
        if not rows:
            self.write(empty)
            return
        for row in rows:
            self.write(describe(row))

    # -----------------------------
    # Menu loop
    # -----------------------------
    def run_menu(self, title: str, actions: list, back_label: str = "Back") -> None:
        """Show ``actions`` until the operator picks Back (or input ends)."""
        while True:
            self.write(f"\n=== {title} ===")
            for index, (label, _) in enumerate(actions, start=1):
                self.write(f"{index}. {label}")
            self.write(f"{len(actions) + 1}. {back_label}")

            try:
                choice = self.ask("Choose an option")
            except EOFError:
                return

            if choice == str(len(actions) + 1):
                return
            if not choice.isdigit() or not 1 <= int(choice) <= len(actions):
                self.write("Invalid choice. Please try again.")
                continue

            label, action = actions[int(choice) - 1]
            try:
                action()
            except ClinicError as exc:
                logger.warning("%s failed: %s", label, exc)
                self.write(f"Error: {exc}")
            except EOFError:
                return

    def run(self) -> None:
        self.write(WELCOME_MSG)
        self.run_menu(
            "Main Menu",
            [
                ("Patient Management", self.patient_menu),
                ("Doctor Management", self.doctor_menu),
                ("Appointment Management", self.appointment_menu),
                ("Billing", self.billing_menu),
                ("Search", self.search_menu),
                ("Analytics & Recommendations", self.analytics_menu),
                ("Data Export / Import", self.data_menu),
            ],
            back_label="Exit",
        )
        self.write(EXIT_MSG)

    # -----------------------------
    # Patients
    # -----------------------------
    def patient_menu(self) -> None:
        self.run_menu(
            "Patient Management",
            [
                ("Add Patient", self.add_patient),
                ("View All Patients", self.list_patients),
                ("View Patient by ID", self.view_patient),
                ("Update Patient", self.update_patient),
                ("Delete Patient", self.delete_patient),
            ],
        )

    def add_patient(self) -> None:
        patient = self.clinic.patients.create_patient(
            name=self.ask("Name"),
            date_of_birth=self.ask_date("Date of birth"),
            email=self.ask("Email"),
            phone_number=self.ask("Phone"),
            medical_history=self.ask_optional("Medical history"),
            allergies=self.ask_optional("Allergies"),
            insurance_provider=self.ask_optional("Insurance provider"),
            insurance_policy_number=self.ask_optional("Insurance policy number"),
        )
        self.write(f"Patient created with ID {patient.id}")

    def list_patients(self) -> None:
        self.show(self.clinic.patients.get_all_patients(), describe_patient)

    def view_patient(self) -> None:
        patient = self.clinic.patients.find_patient_by_id(self.ask_int("Patient ID"))
        self.write(describe_patient(patient) if patient else "Patient not found.")

    def update_patient(self) -> None:
        patient = self.clinic.patients.find_patient_by_id(self.ask_int("Patient ID"))
        if patient is None:
            self.write("Patient not found.")
            return
        self.write("Leave a field blank to keep its current value.")
        patient.name = self.ask_optional(f"Name [{patient.name}]") or patient.name
        patient.email = self.ask_optional(f"Email [{patient.email}]") or patient.email
        patient.phone_number = self.ask_optional(f"Phone [{patient.phone_number}]") or patient.phone_number
        patient.medical_history = self.ask_optional("Medical history") or patient.medical_history
        patient.allergies = self.ask_optional("Allergies") or patient.allergies
        self.clinic.patients.update_patient(patient)
        self.write("Patient updated.")

    def delete_patient(self) -> None:
        removed = self.clinic.patients.delete_patient(self.ask_int("Patient ID"))
        self.write("Patient deleted." if removed else "Patient not found.")

    # -----------------------------
    # Doctors
    # -----------------------------
    def doctor_menu(self) -> None:
        self.run_menu(
            "Doctor Management",
            [
                ("Add Doctor", self.add_doctor),
                ("View All Doctors", self.list_doctors),
                ("View Doctor by ID", self.view_doctor),
                ("Update Doctor Fee", self.update_doctor_fee),
                ("Delete Doctor", self.delete_doctor),
            ],
        )

    def add_doctor(self) -> None:
        doctor = self.clinic.doctors.create_doctor(
            name=self.ask("Name"),
            date_of_birth=self.ask_date("Date of birth"),
            email=self.ask("Email"),
            phone_number=self.ask("Phone"),
            specialization=self.ask_specialization(),
            consultation_fee=self.ask_float("Consultation fee"),
            experience_years=self.ask_int("Years of experience"),
            license_number=self.ask("License number"),
        )
        self.write(f"Doctor created with ID {doctor.id}")

    def list_doctors(self) -> None:
        self.show(self.clinic.doctors.get_all_doctors(), describe_doctor)

    def view_doctor(self) -> None:
        doctor = self.clinic.doctors.find_doctor_by_id(self.ask_int("Doctor ID"))
        self.write(describe_doctor(doctor) if doctor else "Doctor not found.")

    def update_doctor_fee(self) -> None:
        doctor = self.clinic.doctors.find_doctor_by_id(self.ask_int("Doctor ID"))
        if doctor is None:
            self.write("Doctor not found.")
            return
        doctor.consultation_fee = self.ask_float(f"New fee [{doctor.consultation_fee:.2f}]")
        self.clinic.doctors.update_doctor(doctor)
        self.write("Doctor updated.")

    def delete_doctor(self) -> None:
        removed = self.clinic.doctors.delete_doctor(self.ask_int("Doctor ID"))
        self.write("Doctor deleted." if removed else "Doctor not found.")

    # -----------------------------
    # Appointments
    # -----------------------------
    def appointment_menu(self) -> None:
        self.run_menu(
            "Appointment Management",
            [
                ("Create Appointment", self.create_appointment),
                ("View All Appointments", self.list_appointments),
                ("View Appointment by ID", self.view_appointment),
                ("View Appointments by Patient", self.appointments_by_patient),
                ("View Appointments by Doctor", self.appointments_by_doctor),
                ("Cancel Appointment", self.cancel_appointment),
                ("Confirm Appointment", self.confirm_appointment),
                ("Complete Appointment", self.complete_appointment),
            ],
        )

    def create_appointment(self) -> None:
        appointment = self.clinic.appointments.create_appointment(
            patient_id=self.ask_int("Patient ID"),
            doctor_id=self.ask_int("Doctor ID"),
            appointment_datetime=self.ask_datetime("Date and time"),
            reason=self.ask_optional("Reason"),
            notes=self.ask_optional("Notes"),
        )
        self.write(f"Appointment created with ID {appointment.id}")

    def list_appointments(self) -> None:
        self.show(self.clinic.appointments.get_all_appointments(), describe_appointment)

    def view_appointment(self) -> None:
        appointment = self.clinic.appointments.find_appointment_by_id(self.ask_int("Appointment ID"))
        self.write(describe_appointment(appointment))

    def appointments_by_patient(self) -> None:
        rows = self.clinic.appointments.get_appointments_by_patient_id(self.ask_int("Patient ID"))
        self.show(rows, describe_appointment)

    def appointments_by_doctor(self) -> None:
        rows = self.clinic.appointments.get_appointments_by_doctor_id(self.ask_int("Doctor ID"))
        self.show(rows, describe_appointment)

    def cancel_appointment(self) -> None:
        appointment = self.clinic.appointments.cancel_appointment(self.ask_int("Appointment ID"))
        self.write(f"Appointment {appointment.id} cancelled.")

    def confirm_appointment(self) -> None:
        appointment = self.clinic.appointments.confirm_appointment(self.ask_int("Appointment ID"))
        self.write(f"Appointment {appointment.id} confirmed.")

    def complete_appointment(self) -> None:
        appointment = self.clinic.appointments.complete_appointment(self.ask_int("Appointment ID"))
        self.write(f"Appointment {appointment.id} completed.")

    # -----------------------------
    # Billing
    # -----------------------------
    def billing_menu(self) -> None:
        self.run_menu(
            "Billing",
            [
                ("Create Bill for Appointment", self.create_bill),
                ("View Bill Summary", self.view_bill),
                ("Record Payment", self.record_payment),
            ],
        )

    def create_bill(self) -> None:
        appointment_id = self.ask_int("Appointment ID")
        bill_type = BillType.from_text(self.ask_optional("Bill type (standard/discounted/premium)"))
        adjustment = 0.0
        if bill_type is BillType.DISCOUNTED:
            adjustment = self.ask_float("Discount percent")
        elif bill_type is BillType.PREMIUM:
            adjustment = self.ask_float("Additional charges")
        bill = self.clinic.appointments.create_bill(appointment_id, bill_type, adjustment)
        self.write(f"Bill {bill.id} created. Total: ${bill.total_amount:.2f}")

    def view_bill(self) -> None:
        summary = self.clinic.appointments.generate_bill_summary(self.ask_int("Appointment ID"))
        self.write(format_bill_summary(summary))

    def record_payment(self) -> None:
        appointment_id = self.ask_int("Appointment ID")
        status = self.ask_optional("Payment status [PAID]") or "PAID"
        summary = self.clinic.appointments.record_payment(appointment_id, status)
        self.write(f"Bill {summary.bill_id} is now {summary.payment_status}.")

    # -----------------------------
    # Search
    # -----------------------------
    def search_menu(self) -> None:
        patients = self.clinic.patients
        doctors = self.clinic.doctors
        self.run_menu(
            "Search",
            [
                ("Search Patient by Name", lambda: self.show(
                    patients.search_patients_by_name(self.ask("Name")), describe_patient)),
                ("Search Patient by Age", lambda: self.show(
                    patients.search_patients_by_age(self.ask_int("Age")), describe_patient)),
                ("Search Patients (any field)", lambda: self.show(
                    patients.search_patients(self.ask("Query")), describe_patient)),
                ("Search Doctor by Name", lambda: self.show(
                    doctors.search_doctors_by_name(self.ask("Name")), describe_doctor)),
                ("Search Doctor by Specialization", lambda: self.show(
                    doctors.search_doctors_by_specialization(self.ask_specialization()), describe_doctor)),
                ("Search Doctors (any field)", lambda: self.show(
                    doctors.search_doctors(self.ask("Query")), describe_doctor)),
            ],
        )

    # -----------------------------
    # Analytics & recommendations
    # -----------------------------
    def analytics_menu(self) -> None:
        self.run_menu(
            "Analytics & Recommendations",
            [
                ("Analytics Report", lambda: self.write(self.clinic.analytics.generate_report())),
                ("Pending Appointments", lambda: self.show(
                    self.clinic.analytics.pending_appointments(), describe_appointment)),
                ("Doctors Above Average Fee", lambda: self.show(
                    self.clinic.analytics.doctors_above_average_fee(), describe_doctor)),
                ("Recommend Doctor for Symptoms", self.recommend_doctor),
                ("Suggest Appointment Slots", self.suggest_slots),
            ],
        )

    def recommend_doctor(self) -> None:
        doctor = self.clinic.recommendations.recommend_doctor(self.ask("Describe the symptoms"))
        self.write(f"Recommended: {describe_doctor(doctor)}" if doctor else "No suitable doctor found.")

    def suggest_slots(self) -> None:
        doctor_id = self.ask_int("Doctor ID")
        preferred = self.ask_date("Preferred date, blank for tomorrow", optional=True)
        slots = self.clinic.recommendations.suggest_appointment_slots(doctor_id, preferred)
        self.show(slots, format_datetime, empty="No free slots on that day.")

    # -----------------------------
    # CSV
    # -----------------------------
    def data_menu(self) -> None:
        self.run_menu(
            "Data Export / Import",
            [
                ("Export All to CSV", self.export_all),
                ("Import Patients from CSV", lambda: self.write(
                    f"Imported {self.clinic.csv.import_patients(self.ask('CSV path'))} patients.")),
                ("Import Doctors from CSV", lambda: self.write(
                    f"Imported {self.clinic.csv.import_doctors(self.ask('CSV path'))} doctors.")),
            ],
        )

    def export_all(self) -> None:
        folder = self.ask_optional(f"Export folder [{config.EXPORT_DIR}]") or config.EXPORT_DIR
        counts = {
            "patients": self.clinic.csv.export_patients(os.path.join(folder, "patients.csv")),
            "doctors": self.clinic.csv.export_doctors(os.path.join(folder, "doctors.csv")),
            "appointments": self.clinic.csv.export_appointments(os.path.join(folder, "appointments.csv")),
        }
        for name, count in counts.items():
            self.write(f"Exported {count} {name}.")
        self.write(f"Files written to {folder}.")


def main():
    configure_logging()
    init_db()

    clinic = build_clinic(SessionLocal)
    clinic.sync_allocator()
    logger.info("Clinic console started (database: %s)", config.DATABASE_URL)

    ClinicConsole(clinic).run()


if __name__ == "__main__":
    main()
