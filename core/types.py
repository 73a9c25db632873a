"""Column types that keep dates as formatted text in the database."""

from datetime import date, datetime

from sqlalchemy import String
from sqlalchemy.types import TypeDecorator

from core.time_utils import format_date, format_datetime, parse_date, parse_datetime


class TextDate(TypeDecorator):
    """``date`` in Python, ``YYYY-MM-DD`` text in the table."""

    impl = String(10)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, datetime):
            value = value.date()
        if isinstance(value, date):
            return format_date(value)
        return format_date(parse_date(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        # Tolerate rows written with a time component
        return parse_datetime(value).date() if len(value) > 10 else parse_date(value)


class TextDateTime(TypeDecorator):
    """``datetime`` in Python, ``YYYY-MM-DD HH:MM`` text in the table."""

    impl = String(16)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, datetime):
            return format_datetime(value)
        return format_datetime(parse_datetime(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return parse_datetime(value)
