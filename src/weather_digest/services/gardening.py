"""
Gardening outlook service.

Aggregates hourly soil temperature and moisture into daily statistics and
attaches planting, watering and frost cover verdicts.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional

from ..algorithms import cover_alert, evaluate_planting, evaluate_watering
from ..core import constants
from ..models import (
    DayBucket,
    GardeningDay,
    GardeningDaySummary,
    GardeningOutlook,
    PlantingStatus,
    WateringStatus,
)
from ..processing import (
    DayBucketer,
    SeriesNormalizer,
    average,
    daily_keys,
    first_finite,
    forecast_blocks,
    maximum,
    minimum,
    total,
)
from ..processing.normalizer import OPEN_METEO_HOURLY_FIELDS

HOURLY_VARIABLES = ("soil_temp", "soil_moisture", "air_temp", "precipitation", "precip_probability")


class GardeningService:
    """Build the weekly gardening outlook from an Open-Meteo forecast payload."""

    def __init__(
        self,
        timezone: str,
        horizon: int = constants.GARDENING_FORECAST_DAYS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize gardening service.

        Args:
            timezone: Local timezone of the forecast
            horizon: Number of days in the outlook
            logger: Logger instance
        """
        self.timezone = timezone
        self.horizon = horizon
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = SeriesNormalizer(logger)
        self.bucketer = DayBucketer(timezone, logger)

    def summarize_day(
        self,
        day_key: str,
        bucket: DayBucket,
        daily: Mapping[str, Any],
        index: int
    ) -> GardeningDaySummary:
        """
        Reduce one day bucket, preferring the daily series where present.

        Air min/max and precipitation probability fall back to the hourly
        bucket; precipitation sum falls back to the sum of hourly amounts.
        """
        daily_value = self.normalizer.daily_value
        soil_temps = bucket.values("soil_temp")
        soil_moisture = bucket.values("soil_moisture")
        air_temps = bucket.values("air_temp")

        precip_sum = daily_value(daily, ("precipitation_sum",), index)
        if precip_sum is None:
            precip_sum = total(bucket.values("precipitation"))

        return GardeningDaySummary(
            date=day_key,
            soil_temp_min=minimum(soil_temps),
            soil_temp_max=maximum(soil_temps),
            soil_temp_avg=average(soil_temps),
            soil_moist_min=minimum(soil_moisture),
            soil_moist_max=maximum(soil_moisture),
            soil_moist_avg=average(soil_moisture),
            air_temp_min=first_finite(daily_value(daily, ("temperature_2m_min",), index), minimum(air_temps)),
            air_temp_max=first_finite(daily_value(daily, ("temperature_2m_max",), index), maximum(air_temps)),
            precip_sum=precip_sum,
            precip_probability=first_finite(
                daily_value(daily, ("precipitation_probability_max",), index),
                maximum(bucket.values("precip_probability")),
            ),
        )

    def build_outlook(self, payload: Optional[Mapping[str, Any]]) -> GardeningOutlook:
        """
        Build the gardening outlook.

        Args:
            payload: Decoded Open-Meteo forecast, or None if the fetch failed

        Returns:
            GardeningOutlook; available is False when the payload lacks
            hourly or daily data
        """
        blocks = forecast_blocks(payload)
        if blocks is None:
            self.logger.warning("Gardening forecast unavailable")
            return GardeningOutlook(available=False, timezone=self.timezone)
        hourly, daily = blocks

        records = self.normalizer.zip_block(hourly, OPEN_METEO_HOURLY_FIELDS)
        buckets = self.bucketer.bucket(records, HOURLY_VARIABLES)

        days = []
        for index, day_key in daily_keys(daily, self.horizon):
            bucket = buckets.get(day_key) or DayBucketer.empty_bucket(day_key)
            summary = self.summarize_day(day_key, bucket, daily, index)
            days.append(GardeningDay(
                summary=summary,
                planting=evaluate_planting(summary),
                watering=evaluate_watering(summary),
                cover_alert=cover_alert(summary),
            ))

        self.logger.info(f"Built gardening outlook for {len(days)} days")
        return GardeningOutlook(
            available=True,
            timezone=self.timezone,
            days=tuple(days),
            ideal_days=self._dates(days, lambda d: d.planting.status == PlantingStatus.IDEAL),
            ok_days=self._dates(days, lambda d: d.planting.status == PlantingStatus.OK),
            watering_days=self._dates(
                days, lambda d: d.watering.status in (WateringStatus.NEEDS, WateringStatus.LIGHT)
            ),
            cover_days=self._dates(days, lambda d: d.cover_alert),
            warmest_soil_day=self._argmax(days, lambda d: d.summary.soil_temp_avg),
            wettest_day=self._argmax(days, lambda d: d.summary.precip_sum, above=0.0),
        )

    @staticmethod
    def _dates(days: List[GardeningDay], predicate: Callable[[GardeningDay], bool]):
        return tuple(day.summary.date for day in days if predicate(day))

    @staticmethod
    def _argmax(
        days: List[GardeningDay],
        key: Callable[[GardeningDay], Optional[float]],
        above: Optional[float] = None
    ) -> Optional[str]:
        """
        Date of the day with the largest value; first wins on ties.

        Values at or below `above` never qualify, so a dry week has no
        wettest day.
        """
        best = None
        best_value = None
        for day in days:
            value = key(day)
            if value is None or (above is not None and value <= above):
                continue
            if best_value is None or value > best_value:
                best, best_value = day.summary.date, value
        return best
