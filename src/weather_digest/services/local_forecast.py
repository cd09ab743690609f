"""
Local forecast service built on the MET Norway timeseries.
"""

import logging
import math
from typing import Any, Mapping, Optional

from ..core import constants
from ..models import LocalForecast, LocalForecastDay
from ..processing import (
    DayBucketer,
    SeriesNormalizer,
    circular_mean,
    circular_spread,
    degree_to_compass,
    maximum,
    minimum,
)


def _rounded(value: Optional[float]) -> Optional[int]:
    # Halves round towards +inf: 2.5 -> 3, -2.5 -> -2
    if value is None:
        return None
    return int(math.floor(value + 0.5))


class LocalForecastService:
    """Daily temperature extremes and dominant wind direction."""

    def __init__(
        self,
        timezone: str,
        horizon: int = constants.LOCAL_FORECAST_DAYS,
        logger: Optional[logging.Logger] = None
    ):
        self.timezone = timezone
        self.horizon = horizon
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = SeriesNormalizer(logger)
        self.bucketer = DayBucketer(timezone, logger)

    def build_forecast(self, payload: Optional[Mapping[str, Any]]) -> LocalForecast:
        """
        Build the local forecast.

        MET Norway timestamps are UTC; they are bucketed by local day and the
        first `horizon` days are kept.

        Args:
            payload: Decoded locationforecast payload, or None

        Returns:
            LocalForecast; available is False when no timeseries is usable
        """
        records = self.normalizer.zip_met_no(payload)
        buckets = self.bucketer.bucket(records, ("air_temp", "wind_direction"), horizon=self.horizon)
        if not buckets:
            self.logger.warning("Local forecast unavailable")
            return LocalForecast(available=False)

        days = []
        for day_key, bucket in buckets.items():
            temps = bucket.values("air_temp")
            temp_max = maximum(temps)
            temp_min = minimum(temps)
            directions = bucket.values("wind_direction")
            direction = circular_mean(directions)
            spread = circular_spread(directions)
            if spread is not None:
                mean_text = "none" if direction is None else f"{direction:.0f}°"
                self.logger.debug(
                    f"Wind {day_key}: mean {mean_text}, spread {spread:.0f}° over {len(directions)} samples"
                )
            days.append(LocalForecastDay(
                date=day_key,
                temp_max=temp_max,
                temp_min=temp_min,
                temp_max_int=_rounded(temp_max),
                temp_min_int=_rounded(temp_min),
                wind_direction_deg=direction,
                wind_direction=degree_to_compass(direction),
            ))

        self.logger.info(f"Built local forecast for {len(days)} days")
        return LocalForecast(available=True, days=tuple(days))
