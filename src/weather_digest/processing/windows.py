"""
Time-of-day window extraction.

Computes golden-hour and night-sky windows and reduces the samples that
fall inside them. The night window stitches two adjacent day buckets
(22:00–24:00 of day N, 00:00–02:00 of day N+1) without merging them.
"""

import logging
from typing import Optional, Tuple

from ..core import constants
from ..models import DayBucket, TimeWindow
from .reducers import average

LAST_MINUTE = constants.MINUTES_PER_DAY - 1


class WindowExtractor:
    """Build minute-of-day windows and window statistics."""

    def __init__(
        self,
        golden_hour_minutes: int = constants.GOLDEN_HOUR_MINUTES,
        logger: Optional[logging.Logger] = None
    ):
        self.golden_hour_minutes = golden_hour_minutes
        self.logger = logger or logging.getLogger(__name__)

    def morning_window(self, sunrise_minute: Optional[int]) -> TimeWindow:
        """Golden hour after sunrise: [sunrise, sunrise + 60]."""
        if sunrise_minute is None:
            return TimeWindow(None, None)
        return TimeWindow(sunrise_minute, min(sunrise_minute + self.golden_hour_minutes, LAST_MINUTE))

    def evening_window(self, sunset_minute: Optional[int]) -> TimeWindow:
        """Golden hour before sunset: [max(sunset - 60, 0), sunset]."""
        if sunset_minute is None:
            return TimeWindow(None, None)
        return TimeWindow(max(sunset_minute - self.golden_hour_minutes, 0), sunset_minute)

    @staticmethod
    def night_windows() -> Tuple[TimeWindow, TimeWindow]:
        """Night sky span: (22:00–24:00 of the day, 00:00–02:00 of the next day)."""
        return (
            TimeWindow(constants.NIGHT_START_MINUTE, constants.NIGHT_END_MINUTE),
            TimeWindow(constants.AFTER_MIDNIGHT_START_MINUTE, constants.AFTER_MIDNIGHT_END_MINUTE),
        )

    @staticmethod
    def window_average(
        bucket: Optional[DayBucket],
        variable: str,
        window: TimeWindow
    ) -> Optional[float]:
        """
        Mean of a variable over the samples inside an inclusive window.

        Returns:
            None when the window is unbounded, the bucket is missing, or no
            sample falls inside
        """
        if bucket is None or not window.is_bounded:
            return None
        return average(bucket.values_between(variable, window.start, window.end))

    def night_average(
        self,
        bucket: Optional[DayBucket],
        next_bucket: Optional[DayBucket],
        variable: str
    ) -> Optional[float]:
        """
        Mean of a variable over the stitched night span.

        Args:
            bucket: Bucket of day N (its 22:00–24:00 samples are used)
            next_bucket: Bucket of day N+1 (its 00:00–02:00 samples are used);
                         None uses day N's portion only

        Returns:
            Mean value or None if no sample falls inside either portion
        """
        evening, after_midnight = self.night_windows()
        values = []
        if bucket is not None:
            values.extend(bucket.values_between(variable, evening.start, evening.end))
        if next_bucket is not None:
            values.extend(next_bucket.values_between(variable, after_midnight.start, after_midnight.end))
        return average(values)
