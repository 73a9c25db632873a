# models/person.py

from sqlalchemy import Column, Integer, String

from core.time_utils import today
from core.types import TextDate


class PersonMixin:
    """Columns shared by patients and doctors.

    IDs come from the IdAllocator, never from the database.
    """

    id = Column(Integer, primary_key=True, autoincrement=False)

    name = Column(String(100), nullable=False)
    date_of_birth = Column(TextDate, nullable=False)
    email = Column(String, nullable=False)
    phone_number = Column(String, nullable=False)


def age_of(person) -> int:
    """Current year minus birth year; not accurate to the day."""
    if person.date_of_birth is None:
        return 0
    return today().year - person.date_of_birth.year


def same_person(a, b) -> bool:
    """Identity equality: same record kind and same ID."""
    if a is b:
        return True
    if a is None or b is None:
        return False
    return type(a) is type(b) and a.id == b.id

