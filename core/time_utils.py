from datetime import date, datetime, timedelta

from core.constants import DATE_FORMAT, DATETIME_FORMAT


def now_local() -> datetime:
    """Return the current local wall-clock time, truncated to the minute."""
    return datetime.now().replace(second=0, microsecond=0)


def today() -> date:
    return date.today()


def tomorrow() -> date:
    return today() + timedelta(days=1)


def is_past(moment: datetime) -> bool:
    return moment is not None and moment < datetime.now()


def format_date(value: date | None) -> str:
    if value is None:
        return ""
    return value.strftime(DATE_FORMAT)


def format_datetime(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime(DATETIME_FORMAT)


def parse_date(text: str | None) -> date | None:
    """Parse a ``YYYY-MM-DD`` string. Blank input returns None."""
    if text is None or not str(text).strip():
        return None
    return datetime.strptime(str(text).strip(), DATE_FORMAT).date()


def parse_datetime(text: str | None) -> datetime | None:
    """Parse ``YYYY-MM-DD HH:MM``, falling back to the ISO ``T`` variant.

    Seconds are accepted by the fallback. Blank input returns None; anything
    else that doesn't parse raises ValueError.
    """
    if text is None or not str(text).strip():
        return None
    trimmed = str(text).strip()
    try:
        return datetime.strptime(trimmed, DATETIME_FORMAT)
    except ValueError:
        return datetime.fromisoformat(trimmed.replace(" ", "T"))
