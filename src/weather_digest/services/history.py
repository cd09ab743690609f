"""
Historical context service.
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional

from ..models import RecordResult
from ..processing import HistoricalRecordFilter
from ..processing.normalizer import dig


class HistoricalService:
    """Temperature records of today's calendar day in past years."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        self.records = HistoricalRecordFilter(logger)

    def build_record(self, payload: Optional[Mapping[str, Any]], target_date: date) -> RecordResult:
        """
        Find the record high and low for target_date's month and day.

        Args:
            payload: Decoded archive payload with a 'daily' block, or None
            target_date: Date whose calendar day is looked up

        Returns:
            RecordResult with status ok, no_data or insufficient_data
        """
        entries = self.records.flatten(dig(payload, "daily"))
        return self.records.find_records(entries, target_date.month, target_date.day)
