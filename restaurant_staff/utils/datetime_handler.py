"""
DateTime Handler module for consistent date and time handling throughout the application.
"""
from datetime import date, datetime
from typing import Optional, Union


class DateTimeHandler:
    """
    Centralized helpers for producing and formatting timestamps.
    All stored timestamps are naive UTC, matching what MongoDB hands back.
    """

    DATE_FORMAT = "%Y-%m-%d"

    @classmethod
    def get_current_datetime(cls) -> datetime:
        """
        Get the current UTC datetime.

        Returns:
            Current UTC datetime
        """
        return datetime.utcnow()

    @classmethod
    def to_iso(cls, value: Optional[datetime]) -> Optional[str]:
        """ISO-8601 string for a datetime, or None."""
        if value is None:
            return None
        return value.isoformat()

    @classmethod
    def format_date(cls, value: Union[date, datetime, str, None]) -> Optional[str]:
        """
        Format a date, datetime or ISO-8601 string as YYYY-MM-DD.

        Args:
            value: Date-like value

        Returns:
            Formatted date string, or None if the value cannot be parsed
        """
        if value is None or value == "":
            return None

        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.replace("Z", "+00:00"))
            except ValueError:
                return None

        if isinstance(value, datetime):
            value = value.date()

        return value.strftime(cls.DATE_FORMAT)
