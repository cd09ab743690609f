"""
Day bucketing module.

Groups timestamped samples into local calendar-day buckets.
"""

import logging
from collections import OrderedDict
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple

from ..core import DateUtils
from ..models import DayBucket, HourlyRecord
from .reducers import is_finite_number


class DayBucketer:
    """Group samples into per-day buckets keyed by YYYY-MM-DD."""

    def __init__(self, timezone: Optional[str] = None, logger: Optional[logging.Logger] = None):
        """
        Initialize day bucketer.

        Args:
            timezone: Local timezone for timestamps that carry an offset.
                      Naive timestamps are taken as already local.
            logger: Logger instance
        """
        self.timezone = timezone
        self.logger = logger or logging.getLogger(__name__)

    def bucket_samples(
        self,
        samples: Iterable[Tuple[Any, str, Any]],
        horizon: Optional[int] = None
    ) -> Dict[str, DayBucket]:
        """
        Bucket (timestamp, variable, value) triples by local day.

        Malformed timestamps are dropped; non-finite values are excluded
        (a bucket may exist with no values for a variable).

        Args:
            samples: Iterable of (timestamp, variable, value)
            horizon: Keep only the first `horizon` day keys

        Returns:
            Ordered mapping day_key -> DayBucket, sorted by day key
        """
        buckets = {}
        dropped = 0

        for timestamp, variable, value in samples:
            parts = DateUtils.split_timestamp(timestamp, self.timezone)
            if parts is None:
                dropped += 1
                continue
            day_key, minute = parts
            bucket = buckets.get(day_key)
            if bucket is None:
                bucket = buckets[day_key] = DayBucket(day_key)
            if is_finite_number(value):
                bucket.add(variable, minute, float(value))

        if dropped:
            self.logger.debug(f"Dropped {dropped} samples with malformed timestamps")

        keys = sorted(buckets)
        if horizon is not None:
            keys = keys[:horizon]
        return OrderedDict((key, buckets[key]) for key in keys)

    def bucket(
        self,
        records: Iterable[HourlyRecord],
        variables: Optional[Sequence[str]] = None,
        horizon: Optional[int] = None
    ) -> Dict[str, DayBucket]:
        """
        Bucket normalized records by local day.

        Args:
            records: Records from SeriesNormalizer
            variables: Variables to keep (default: all present in the records)
            horizon: Keep only the first `horizon` day keys

        Returns:
            Ordered mapping day_key -> DayBucket
        """
        def triples():
            for record in records:
                names = variables if variables is not None else record.values.keys()
                if not names:
                    # Keep the day alive even when a record carries no variables
                    yield record.timestamp, "", None
                for name in names:
                    yield record.timestamp, name, record.values.get(name)

        buckets = self.bucket_samples(triples(), horizon=horizon)
        self.logger.debug(f"Bucketed records into {len(buckets)} days")
        return buckets

    @staticmethod
    def empty_bucket(day_key: str) -> DayBucket:
        return DayBucket(day_key)
