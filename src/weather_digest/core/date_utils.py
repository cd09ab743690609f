"""
Date and timezone utilities.

Centralizes day-key and minute-of-day extraction so that hourly and daily
series follow one timezone policy: timestamps carrying an offset (or 'Z')
are converted to the configured timezone, naive timestamps are already local.
"""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Optional, Tuple
import pytz
from pytz.tzinfo import BaseTzInfo

from . import constants

_DAY_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_OFFSET_RE = re.compile(r"(Z|[+-]\d{2}:?\d{2})$")


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Europe/Riga', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def is_day_key(value: object) -> bool:
        """Check that value is a valid YYYY-MM-DD calendar day."""
        if not isinstance(value, str) or not _DAY_KEY_RE.match(value):
            return False
        try:
            date.fromisoformat(value)
        except ValueError:
            return False
        return True

    @staticmethod
    def has_offset(timestamp: str) -> bool:
        """Check whether an ISO timestamp carries a UTC offset or 'Z'."""
        return len(timestamp) > constants.DAY_KEY_LENGTH and bool(
            _OFFSET_RE.search(timestamp[constants.DAY_KEY_LENGTH:])
        )

    @classmethod
    def split_timestamp(
        cls,
        timestamp: object,
        timezone_str: Optional[str] = None
    ) -> Optional[Tuple[str, Optional[int]]]:
        """
        Split an ISO timestamp into its local day key and minute of day.

        Args:
            timestamp: ISO-8601 string ('2024-06-15', '2024-06-15T13:00',
                       '2024-06-15T11:00:00Z', ...)
            timezone_str: Local timezone used for offset-carrying timestamps

        Returns:
            (day_key, minute_of_day) where minute_of_day is None for date-only
            strings, or None if the timestamp is malformed
        """
        if not isinstance(timestamp, str) or len(timestamp) < constants.DAY_KEY_LENGTH:
            return None

        if timezone_str and cls.has_offset(timestamp):
            try:
                aware = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
            except ValueError:
                return None
            local = aware.astimezone(cls.parse_timezone(timezone_str))
            return local.strftime("%Y-%m-%d"), local.hour * 60 + local.minute

        day_key = timestamp[:constants.DAY_KEY_LENGTH]
        if not cls.is_day_key(day_key):
            return None
        return day_key, cls.parse_minute_of_day(timestamp)

    @staticmethod
    def parse_minute_of_day(timestamp: object) -> Optional[int]:
        """
        Read the literal HH:MM of an ISO timestamp as minutes after midnight.

        Returns:
            Minute of day in [0, 1440), or None if absent or malformed
        """
        if not isinstance(timestamp, str) or len(timestamp) < 16:
            return None
        hour_text, minute_text = timestamp[11:13], timestamp[14:16]
        if not (hour_text.isdigit() and minute_text.isdigit()):
            return None
        hour, minute = int(hour_text), int(minute_text)
        if hour > 23 or minute > 59:
            return None
        return hour * 60 + minute

    @classmethod
    def day_key(cls, timestamp: object, timezone_str: Optional[str] = None) -> Optional[str]:
        """Get the local calendar day key of a timestamp (None if malformed)."""
        parts = cls.split_timestamp(timestamp, timezone_str)
        return parts[0] if parts else None

    @classmethod
    def minute_of_day(cls, timestamp: object, timezone_str: Optional[str] = None) -> Optional[int]:
        """Get the local minute of day of a timestamp (None if unavailable)."""
        parts = cls.split_timestamp(timestamp, timezone_str)
        return parts[1] if parts else None

    @staticmethod
    def next_day_key(day_key: str) -> str:
        """Get the calendar day following day_key."""
        return (date.fromisoformat(day_key) + timedelta(days=1)).isoformat()

    def today(self, timezone_str: str, reference_time: Optional[datetime] = None) -> date:
        """
        Get the current calendar date in the specified timezone.

        Args:
            timezone_str: Timezone string
            reference_time: Reference time (defaults to now in UTC)

        Returns:
            Local calendar date
        """
        tz = self.parse_timezone(timezone_str)

        if reference_time is None:
            reference_time = datetime.now(pytz.UTC)
        elif reference_time.tzinfo is None:
            # Assume UTC if no timezone
            reference_time = pytz.UTC.localize(reference_time)

        local_time = reference_time.astimezone(tz)
        self.logger.debug(
            f"Reference time: {reference_time.isoformat()} -> "
            f"Local time: {local_time.isoformat()}"
        )
        return local_time.date()

    @staticmethod
    def day_range(start: date, days: int) -> Tuple[str, ...]:
        """Get `days` consecutive day keys starting at `start`."""
        return tuple((start + timedelta(days=offset)).isoformat() for offset in range(days))

    @staticmethod
    def utc_to_local(dt: datetime, timezone_str: str) -> datetime:
        """
        Convert a UTC datetime to the specified timezone.

        Args:
            dt: Datetime in UTC (naive values are assumed UTC)
            timezone_str: Target timezone string

        Returns:
            Timezone-aware local datetime
        """
        if dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)
        return dt.astimezone(pytz.timezone(timezone_str))
