"""
Bill derivation
---------------------------------
The tax and total of a bill always follow from its base amount:

    tax   = base * TAX_RATE
    total = base + tax

models.bill.derive_amounts holds the formula and Bill.base_amount applies it
on every assignment. The helpers here build bills of the supported kinds
and project them into BillSummary views.
"""

from enum import Enum

from core.constants import TAX_RATE
from core.exceptions import InvalidDataError
from core.time_utils import format_datetime
from core.validation import validate_amount
from models.bill import Bill, BillSummary


class BillType(Enum):
    STANDARD = "standard"
    DISCOUNTED = "discounted"
    PREMIUM = "premium"

    @classmethod
    def from_text(cls, text: str | None) -> "BillType":
        """Unknown or blank text falls back to STANDARD."""
        wanted = (text or "").strip().lower()
        for member in cls:
            if member.value == wanted:
                return member
        return cls.STANDARD


def bill_total(bill) -> float:
    return bill.total_amount


def adjusted_base(base_amount: float, bill_type: BillType = BillType.STANDARD, adjustment: float = 0.0) -> float:
    """Apply a discount percentage or premium surcharge to a base fee."""
    validate_amount(base_amount)
    if bill_type is BillType.DISCOUNTED:
        if adjustment is None or not 0 <= adjustment <= 100:
            raise InvalidDataError("Discount percent must be between 0 and 100")
        return base_amount * (1 - adjustment / 100)
    if bill_type is BillType.PREMIUM:
        validate_amount(adjustment)
        return base_amount + adjustment
    return base_amount


def build_bill(
    bill_id: int,
    appointment_id: int,
    base_amount: float,
    bill_type: BillType = BillType.STANDARD,
    adjustment: float = 0.0,
) -> Bill:
    return Bill(
        id=bill_id,
        appointment_id=appointment_id,
        base_amount=adjusted_base(base_amount, bill_type, adjustment),
    )


def summarize_bill(bill: Bill) -> BillSummary:
    return BillSummary(
        bill_id=bill.id,
        appointment_id=bill.appointment_id,
        base_amount=bill.base_amount,
        tax_amount=bill.tax_amount,
        total_amount=bill.total_amount,
        bill_date=bill.bill_date,
        payment_status=bill.payment_status,
    )


def format_bill_summary(summary: BillSummary) -> str:
    return "\n".join(
        [
            f"Bill ID: {summary.bill_id}",
            f"Appointment ID: {summary.appointment_id}",
            f"Base Amount: ${summary.base_amount:.2f}",
            f"Tax ({TAX_RATE * 100:.0f}%): ${summary.tax_amount:.2f}",
            f"Total: ${summary.total_amount:.2f}",
            f"Date: {format_datetime(summary.bill_date)}",
            f"Status: {summary.payment_status}",
        ]
    )
