# models/bill.py

from dataclasses import dataclass
from datetime import datetime

from sqlalchemy import Column, Float, ForeignKey, Integer, String

from core.constants import DEFAULT_PAYMENT_STATUS, TAX_RATE
from core.database import Base
from core.time_utils import now_local
from core.types import TextDateTime


def derive_amounts(base_amount: float) -> tuple[float, float]:
    """Return (tax, total) for a base amount."""
    tax = base_amount * TAX_RATE
    return tax, base_amount + tax


class Bill(Base):
    __tablename__ = "bills"

    id = Column(Integer, primary_key=True, autoincrement=False)

    # One bill per appointment by convention only
    appointment_id = Column(Integer, ForeignKey("appointments.id"), nullable=False, index=True)

    # Tax and total are derived from the base amount; only base_amount is writable
    _base_amount = Column("base_amount", Float, nullable=False, default=0.0)
    _tax_amount = Column("tax_amount", Float, nullable=False, default=0.0)
    _total_amount = Column("total_amount", Float, nullable=False, default=0.0)

    bill_date = Column(TextDateTime, nullable=False)
    payment_status = Column(String, nullable=False, default=DEFAULT_PAYMENT_STATUS)

    def __init__(self, **kwargs):
        kwargs.setdefault("base_amount", 0.0)
        kwargs.setdefault("bill_date", now_local())
        kwargs.setdefault("payment_status", DEFAULT_PAYMENT_STATUS)
        super().__init__(**kwargs)

    @property
    def base_amount(self) -> float:
        return self._base_amount

    @base_amount.setter
    def base_amount(self, value: float) -> None:
        self._base_amount = value
        self._tax_amount, self._total_amount = derive_amounts(value)

    @property
    def tax_amount(self) -> float:
        return self._tax_amount

    @property
    def total_amount(self) -> float:
        return self._total_amount

    def __repr__(self):
        return f"<Bill {self.id} appointment={self.appointment_id} total={self.total_amount:.2f} {self.payment_status}>"


@dataclass(frozen=True)
class BillSummary:
    """Read-only copy of a bill, safe to hand to display code."""

    bill_id: int
    appointment_id: int
    base_amount: float
    tax_amount: float
    total_amount: float
    bill_date: datetime
    payment_status: str
