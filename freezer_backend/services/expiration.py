"""Expiration date of a storage entry from its storage date and the product's shelf life."""
import calendar
from dataclasses import dataclass
from datetime import date

from ..exceptions import ExpirationError


@dataclass(frozen=True)
class ExpirationData:
    expiration_date: date
    expires_in_days: int  # negative once expired


def add_months(start: date, months: int) -> date:
    """Calendar month addition, clamping the day to the end of a shorter target month.

    >>> add_months(date(2023, 1, 31), 1)
    datetime.date(2023, 2, 28)
    """
    if months < 0:
        raise ValueError("months must be non-negative")
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def compute_expiration(date_in: date, expiration_months: int, today: date) -> ExpirationData:
    """Expiration date and signed days left, relative to the caller's local `today`.

    Raises ExpirationError when the shelf life is negative or runs past year 9999.
    """
    try:
        expiration_date = add_months(date_in, expiration_months)
    except (ValueError, OverflowError) as exc:
        raise ExpirationError(
            f"Cannot compute expiration date from {date_in} plus {expiration_months} months: {exc}"
        ) from exc
    return ExpirationData(
        expiration_date=expiration_date,
        expires_in_days=(expiration_date - today).days,
    )
