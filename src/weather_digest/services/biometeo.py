"""
Biometeorological outlook service.

Combines daily UV and apparent temperature with hourly pressure, humidity
and apparent temperature statistics into an energy forecast.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional

from ..algorithms import (
    EnergyScorer,
    classify_pollen,
    classify_pressure_trend,
    classify_uv,
)
from ..core import constants
from ..models import BioDay, BioDaySummary, BioOutlook, DayBucket, PollenLevel
from ..processing import (
    DayBucketer,
    SeriesNormalizer,
    average,
    daily_keys,
    forecast_blocks,
    maximum,
    minimum,
)
from ..processing.normalizer import OPEN_METEO_HOURLY_FIELDS, dig, pick_first

HOURLY_VARIABLES = ("pressure", "humidity", "apparent_temp")
POLLEN_FIELDS = ("birch_pollen", "grass_pollen", "ragweed_pollen")


def pressure_trends(pressure_averages: List[Optional[float]]) -> List[Optional[float]]:
    """
    Day-over-day change of mean pressure.

    The first day, and any day whose own or previous mean is missing,
    has no trend.
    """
    trends: List[Optional[float]] = []
    for index, current in enumerate(pressure_averages):
        previous = pressure_averages[index - 1] if index > 0 else None
        if current is None or previous is None:
            trends.append(None)
        else:
            trends.append(current - previous)
    return trends


class BioWeatherService:
    """Build the biometeorological outlook."""

    def __init__(
        self,
        timezone: str,
        scorer: Optional[EnergyScorer] = None,
        horizon: int = constants.BIO_FORECAST_DAYS,
        logger: Optional[logging.Logger] = None
    ):
        self.timezone = timezone
        self.horizon = horizon
        self.logger = logger or logging.getLogger(__name__)
        self.scorer = scorer or EnergyScorer(logger=logger)
        self.normalizer = SeriesNormalizer(logger)
        self.bucketer = DayBucketer(timezone, logger)

    def summarize_day(
        self,
        day_key: str,
        bucket: DayBucket,
        daily: Mapping[str, Any],
        index: int
    ) -> BioDaySummary:
        """Reduce one day; pressure trend is filled in afterwards."""
        daily_value = self.normalizer.daily_value
        pressure = bucket.values("pressure")
        humidity = bucket.values("humidity")
        return BioDaySummary(
            date=day_key,
            uv_index=daily_value(daily, ("uv_index_max",), index),
            uv_index_clear_sky=daily_value(daily, ("uv_index_clear_sky_max",), index),
            apparent_max=daily_value(daily, ("apparent_temperature_max", "temperature_2m_max"), index),
            apparent_min=daily_value(daily, ("apparent_temperature_min", "temperature_2m_min"), index),
            temp_max=daily_value(daily, ("temperature_2m_max",), index),
            temp_min=daily_value(daily, ("temperature_2m_min",), index),
            pressure_avg=average(pressure),
            pressure_min=minimum(pressure),
            pressure_max=maximum(pressure),
            humidity_avg=average(humidity),
            humidity_min=minimum(humidity),
            humidity_max=maximum(humidity),
            apparent_avg=average(bucket.values("apparent_temp")),
        )

    def pollen_levels(self, air_quality: Optional[Mapping[str, Any]]) -> Dict[str, PollenLevel]:
        """
        Classify pollen from an air-quality payload's 'current' block.

        Returns:
            Mapping pollen type -> level; empty when no block is available
        """
        current = dig(air_quality, "current")
        if not isinstance(current, Mapping):
            return {}
        return {
            name: classify_pollen(pick_first(current, (name,)))
            for name in POLLEN_FIELDS
        }

    def build_outlook(
        self,
        payload: Optional[Mapping[str, Any]],
        air_quality: Optional[Mapping[str, Any]] = None
    ) -> BioOutlook:
        """
        Build the biometeorological outlook.

        Args:
            payload: Decoded Open-Meteo forecast, or None
            air_quality: Decoded air-quality payload with a 'current' block, or None

        Returns:
            BioOutlook; available is False when the forecast is unusable
        """
        pollen = self.pollen_levels(air_quality)
        blocks = forecast_blocks(payload)
        if blocks is None:
            self.logger.warning("Biometeorological forecast unavailable")
            return BioOutlook(available=False, timezone=self.timezone, pollen=pollen)
        hourly, daily = blocks

        records = self.normalizer.zip_block(hourly, OPEN_METEO_HOURLY_FIELDS)
        buckets = self.bucketer.bucket(records, HOURLY_VARIABLES)

        summaries = [
            self.summarize_day(day_key, buckets.get(day_key) or DayBucketer.empty_bucket(day_key), daily, index)
            for index, day_key in daily_keys(daily, self.horizon)
        ]
        trends = pressure_trends([s.pressure_avg for s in summaries])

        days = []
        for summary, trend in zip(summaries, trends):
            summary = replace(summary, pressure_trend=trend)
            days.append(BioDay(
                summary=summary,
                energy=self.scorer.evaluate(
                    summary.apparent_avg,
                    summary.humidity_avg,
                    summary.pressure_avg,
                    summary.pressure_trend,
                    summary.uv_index,
                ),
                uv_level=classify_uv(summary.uv_index),
                pressure_tendency=classify_pressure_trend(summary.pressure_trend),
            ))

        self.logger.info(f"Built biometeorological outlook for {len(days)} days")
        return BioOutlook(available=True, timezone=self.timezone, days=tuple(days), pollen=pollen)
