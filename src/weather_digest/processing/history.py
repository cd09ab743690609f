"""
Historical record filter.

Reduces one bulk multi-decade daily archive to the temperature records of a
single calendar day. Filtering happens client-side over one payload; the
archive is never requested per year.
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional

from ..core import DateUtils
from ..models import HistoricalArchiveEntry, RecordResult
from .normalizer import value_at
from .reducers import first_finite

NO_DATA = "no_data"
INSUFFICIENT_DATA = "insufficient_data"
OK = "ok"


class HistoricalRecordFilter:
    """Find record high/low temperatures for a calendar day."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize historical record filter.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def flatten(self, daily: Optional[Mapping[str, Any]]) -> List[HistoricalArchiveEntry]:
        """
        Flatten an archive 'daily' block into entries.

        Malformed dates are skipped; missing temperatures are kept as None
        so the archive stays contiguous.

        Args:
            daily: Block with 'time', 'temperature_2m_max', 'temperature_2m_min'

        Returns:
            Entries in archive order (chronological ascending)
        """
        if not isinstance(daily, Mapping):
            return []
        times = daily.get("time")
        if not isinstance(times, (list, tuple)):
            return []

        tmax = daily.get("temperature_2m_max")
        tmin = daily.get("temperature_2m_min")
        entries = []
        for index, iso in enumerate(times):
            if not DateUtils.is_day_key(iso):
                continue
            entries.append(HistoricalArchiveEntry(
                year=int(iso[0:4]),
                month=int(iso[5:7]),
                day=int(iso[8:10]),
                temp_max=first_finite(value_at(tmax, index)),
                temp_min=first_finite(value_at(tmin, index)),
            ))
        return entries

    @staticmethod
    def filter_calendar_day(
        entries: Iterable[HistoricalArchiveEntry],
        month: int,
        day: int
    ) -> List[HistoricalArchiveEntry]:
        """Single scan keeping entries on month/day with both temperatures present."""
        return [
            entry for entry in entries
            if entry.month == month
            and entry.day == day
            and entry.temp_max is not None
            and entry.temp_min is not None
        ]

    def find_records(
        self,
        entries: Iterable[HistoricalArchiveEntry],
        month: int,
        day: int
    ) -> RecordResult:
        """
        Find the warmest and coldest occurrence of a calendar day.

        Ties keep the first entry encountered, i.e. the earliest year.

        Args:
            entries: Archive entries (chronological ascending)
            month: Target month (1-12)
            day: Target day of month

        Returns:
            RecordResult with status ok, no_data or insufficient_data
        """
        entries = list(entries)
        if not entries:
            self.logger.warning("Historical archive is empty")
            return RecordResult(status=NO_DATA, month=month, day=day)

        matching = self.filter_calendar_day(entries, month, day)
        if not matching:
            self.logger.warning(f"No archive entries with temperatures for {month:02d}-{day:02d}")
            return RecordResult(status=INSUFFICIENT_DATA, month=month, day=day)

        record_max = matching[0]
        record_min = matching[0]
        for entry in matching[1:]:
            if entry.temp_max > record_max.temp_max:
                record_max = entry
            if entry.temp_min < record_min.temp_min:
                record_min = entry

        self.logger.debug(
            f"Records for {month:02d}-{day:02d} over {len(matching)} years: "
            f"max {record_max.temp_max:.1f} ({record_max.year}), "
            f"min {record_min.temp_min:.1f} ({record_min.year})"
        )
        return RecordResult(
            status=OK,
            month=month,
            day=day,
            record_max=record_max,
            record_min=record_min,
            sample_count=len(matching),
        )
