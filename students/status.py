"""
Derived enrollment status for a student record.

A student is "Completed" once their graduation date (recorded, or implied by
enrollment date plus course duration) is strictly before the reference date,
and "Ongoing" otherwise. Inputs that cannot be read as dates or a usable
duration yield "Unknown". ``resolve_status`` never raises and never reads the
clock: callers pass the reference date in.
"""
import datetime

from dateutil.relativedelta import relativedelta

COMPLETED = "Completed"
ONGOING = "Ongoing"
UNKNOWN = "Unknown"

STATUS_CHOICES = [
    (COMPLETED, COMPLETED),
    (ONGOING, ONGOING),
    (UNKNOWN, UNKNOWN),
]


def _as_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    if isinstance(value, str):
        return datetime.date.fromisoformat(value.strip())
    raise TypeError(f"not a date: {value!r}")


def _as_months(value) -> int:
    # bool is an int subclass; True months is not a duration
    if isinstance(value, bool):
        raise TypeError(f"not a month count: {value!r}")
    if isinstance(value, int):
        months = value
    elif isinstance(value, str) and value.strip().isdigit():
        months = int(value.strip())
    else:
        raise TypeError(f"not a month count: {value!r}")
    if months <= 0:
        raise ValueError(f"course duration must be positive, got {months}")
    return months


def implied_graduation_date(enrollment_date, course_duration_months) -> datetime.date:
    """
    Enrollment date advanced by whole calendar months. The day of month is
    kept where it exists and clamped to the month's last day otherwise
    (2024-01-31 + 1 month is 2024-02-29).

    Raises TypeError/ValueError on malformed input.
    """
    return _as_date(enrollment_date) + relativedelta(
        months=_as_months(course_duration_months)
    )


def resolve_status(enrollment_date, course_duration_months, graduation_date, current_date) -> str:
    try:
        enrolled = _as_date(enrollment_date)
        today = _as_date(current_date)
        if graduation_date is None or (
            isinstance(graduation_date, str) and not graduation_date.strip()
        ):
            graduated = implied_graduation_date(enrolled, course_duration_months)
        else:
            graduated = _as_date(graduation_date)
    except (TypeError, ValueError, OverflowError):
        return UNKNOWN
    # graduating "today" is still ongoing
    if graduated < today:
        return COMPLETED
    return ONGOING
