# rein_planner/scheduling/dates.py
"""Calendar date helpers shared by the scheduling modules."""

from datetime import date, datetime, timedelta

ISO_FORMAT = "%Y-%m-%d"

DateLike = date | datetime | str


def to_date(value: DateLike | None) -> date:
    """
    Coerce a date-like value to a plain ``date``.

    ``None`` means today. Datetimes keep only their date part and strings
    must be ISO ``YYYY-MM-DD``, optionally followed by ``T`` and a time
    (``ValueError`` otherwise).
    """
    if value is None:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected a date or ISO date string, got {type(value).__name__}")
    # Stored timestamps ("2026-01-05T00:00:00.000Z") keep only their date part
    date_part = value.strip().partition("T")[0]
    return datetime.strptime(date_part, ISO_FORMAT).date()


def to_iso(value: date) -> str:
    return value.strftime(ISO_FORMAT)


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Signed whole days from start to end."""
    return (end - start).days


def inclusive_days(start: DateLike, end: DateLike) -> int:
    """Number of calendar days covered by an inclusive range."""
    return days_between(to_date(start), to_date(end)) + 1
