"""
Formatting helpers for request parameters
"""
from datetime import date, datetime, timezone
from typing import Union

HISTORY_DATE_FORMAT = "%d-%m-%Y"


def format_history_date(value: Union[str, date, datetime]) -> str:
    """
    Format a date for the coin history endpoint (dd-mm-yyyy)

    Strings are returned unchanged. Timezone-aware datetimes
    are converted to UTC first, naive ones are taken as UTC already.
    """
    if isinstance(value, str):
        return value

    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()

    if isinstance(value, date):
        return value.strftime(HISTORY_DATE_FORMAT)

    raise TypeError(f"Unsupported date value: {value!r}")
