"""
Date utilities for the Kalamela system.
"""

from datetime import date, datetime
from typing import Any, Optional


class DateUtils:
    """Utilities for parsing and formatting dates of birth and rule dates."""

    # Formats seen in member exports besides ISO dates
    DAY_FIRST_FORMATS = ('%d-%m-%Y', '%d/%m/%Y', '%d.%m.%Y')

    @staticmethod
    def parse_date(value: Any) -> Optional[date]:
        """Parse a date, datetime or date string. Returns None if it cannot be parsed."""
        if value is None:
            return None
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            return None

        text = value.strip()
        if not text:
            return None

        try:
            return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
        except ValueError:
            pass

        for fmt in DateUtils.DAY_FIRST_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
        return None

    @staticmethod
    def calculate_age(dob: Any, today: Optional[date] = None) -> Optional[int]:
        """Age in completed years on `today` (defaults to the current date)."""
        birth_date = DateUtils.parse_date(dob)
        if birth_date is None:
            return None
        today = today or date.today()

        age = today.year - birth_date.year
        if (today.month, today.day) < (birth_date.month, birth_date.day):
            age -= 1
        return age

    @staticmethod
    def format_date(value: Any) -> str:
        """Format a date as '05 Mar 2010', or '-' when absent."""
        parsed = DateUtils.parse_date(value)
        if parsed is None:
            return '-'
        return parsed.strftime('%d %b %Y')
