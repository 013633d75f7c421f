"""
Date helpers shared by the registration form and the dashboard.

Calendar arithmetic goes through dateutil so month ends and leap days
behave the same way the mobile date picker reports them.
"""

from datetime import date, datetime

from dateutil.relativedelta import relativedelta


def calculate_age(date_of_birth: date, today: date | None = None) -> int:
    """
    Completed years between a birth date and today.

    Args:
        date_of_birth: The birth date
        today: Reference date, defaults to the current date

    Returns:
        Age in whole years; zero or negative when the birth date is in the future

    Example:
        >>> calculate_age(date(2000, 6, 15), today=date(2018, 6, 14))
        17
        >>> calculate_age(date(2000, 6, 15), today=date(2018, 6, 15))
        18
    """
    if today is None:
        today = date.today()
    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()

    return relativedelta(today, date_of_birth).years


def add_months(value: date, months: int) -> date:
    """
    Shift a date by whole calendar months.

    Example:
        >>> add_months(date(2025, 5, 15), 1)
        datetime.date(2025, 6, 15)
        >>> add_months(date(2025, 1, 31), 1)
        datetime.date(2025, 2, 28)
    """
    return value + relativedelta(months=months)


def format_display_date(value: date | None) -> str | None:
    """
    Format a date the way the dashboard shows it, e.g. '15-May-2025'.
    """
    if value is None:
        return None
    return value.strftime("%d-%b-%Y")


def format_iso_timestamp(value: date | datetime | None) -> str | None:
    """
    Wire format for dates sent to the clients API.

    The mobile client serialises dates as UTC ISO timestamps with
    millisecond precision, so a plain date goes out as midnight UTC.

    Examples:
        >>> format_iso_timestamp(date(1990, 4, 2))
        '1990-04-02T00:00:00.000Z'
        >>> format_iso_timestamp(None)
        None
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
    return f"{value.isoformat()}T00:00:00.000Z"


def extract_date_from_datetime(dt: date | datetime | str | None) -> date | None:
    """
    Extract date portion from datetime.

    Args:
        dt: date, datetime object or ISO format date/datetime string

    Returns:
        date object, or None if input is None or cannot be parsed
    """
    if dt is None:
        return None

    if isinstance(dt, datetime):
        return dt.date()
    if isinstance(dt, date):
        return dt

    if isinstance(dt, str):
        value = dt.strip()
        try:
            # Try parsing as datetime
            return datetime.fromisoformat(value.replace('Z', '+00:00')).date()
        except ValueError:
            try:
                # Already a date string, parse directly
                return date.fromisoformat(value)
            except ValueError:
                return None

    return None
