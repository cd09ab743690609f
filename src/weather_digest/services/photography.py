"""
Photography outlook service.

Golden-hour and night sky statistics for the next days. When the weather
forecast is unavailable, sun and moon data are computed astronomically and
every sky statistic is left unknown.
"""

import logging
from datetime import date
from typing import Any, Mapping, Optional

from ..algorithms import (
    AstronomyCalculator,
    classify_cloud,
    classify_transparency,
    milky_way_chance,
    moon_phase_name,
)
from ..core import constants, DateUtils
from ..models import (
    DayBucket,
    NightStats,
    PhotographyDay,
    PhotographyOutlook,
    WindowStats,
)
from ..processing import (
    DayBucketer,
    SeriesNormalizer,
    WindowExtractor,
    daily_keys,
    forecast_blocks,
)
from ..processing.normalizer import OPEN_METEO_HOURLY_FIELDS, dig

SKY_VARIABLES = ("cloud", "cloud_low", "cloud_mid", "cloud_high", "visibility")
SOURCE_FORECAST = "forecast"
SOURCE_ASTRONOMY = "astronomy"


class PhotographyService:
    """Build the photography outlook."""

    def __init__(
        self,
        timezone: str,
        latitude: float,
        longitude: float,
        horizon: int = constants.PHOTOGRAPHY_FORECAST_DAYS,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize photography service.

        Args:
            timezone: Local timezone
            latitude: Latitude for the astronomical fallback
            longitude: Longitude for the astronomical fallback
            horizon: Number of days in the outlook
            logger: Logger instance
        """
        self.timezone = timezone
        self.latitude = latitude
        self.longitude = longitude
        self.horizon = horizon
        self.logger = logger or logging.getLogger(__name__)
        self.normalizer = SeriesNormalizer(logger)
        self.bucketer = DayBucketer(timezone, logger)
        self.windows = WindowExtractor(logger=logger)
        self.astronomy = AstronomyCalculator(logger)
        self.date_utils = DateUtils(logger)

    def _minute(self, timestamp: Optional[str]) -> Optional[int]:
        return DateUtils.minute_of_day(timestamp, self.timezone) if timestamp else None

    def _window_stats(self, bucket: Optional[DayBucket], window) -> WindowStats:
        cloud = self.windows.window_average(bucket, "cloud", window)
        return WindowStats(
            window=window,
            cloud=cloud,
            visibility=self.windows.window_average(bucket, "visibility", window),
            condition=classify_cloud(cloud),
        )

    def _night_stats(
        self,
        day_key: str,
        sky_buckets,
        aerosol_buckets
    ) -> NightStats:
        next_key = DateUtils.next_day_key(day_key)
        bucket = sky_buckets.get(day_key)
        next_bucket = sky_buckets.get(next_key)
        cloud = self.windows.night_average(bucket, next_bucket, "cloud")
        transparency = self.windows.night_average(
            aerosol_buckets.get(day_key), aerosol_buckets.get(next_key), "aod"
        )
        return NightStats(
            cloud=cloud,
            visibility=self.windows.night_average(bucket, next_bucket, "visibility"),
            transparency=transparency,
            condition=classify_cloud(cloud),
            transparency_class=classify_transparency(transparency),
        )

    def _moon(self, phase: Optional[float], night: NightStats):
        illumination = self.astronomy.moon_illumination(phase)
        return (
            moon_phase_name(phase),
            illumination,
            milky_way_chance(illumination, night.cloud, night.transparency),
        )

    def build_outlook(
        self,
        payload: Optional[Mapping[str, Any]],
        aerosol_payload: Optional[Mapping[str, Any]] = None,
        today: Optional[date] = None
    ) -> PhotographyOutlook:
        """
        Build the photography outlook.

        Args:
            payload: Decoded Open-Meteo forecast with cloud/visibility and sun/moon series
            aerosol_payload: Decoded air-quality payload with hourly aerosol optical depth
            today: First day of the astronomical fallback (defaults to local today)

        Returns:
            PhotographyOutlook
        """
        blocks = forecast_blocks(payload)
        if blocks is None:
            self.logger.warning("Photography forecast unavailable, using astronomical fallback")
            return self.build_astronomical_outlook(today)
        hourly, daily = blocks

        sky_buckets = self.bucketer.bucket(
            self.normalizer.zip_block(hourly, OPEN_METEO_HOURLY_FIELDS), SKY_VARIABLES
        )
        aerosol_buckets = self.bucketer.bucket(
            self.normalizer.zip_block(dig(aerosol_payload, "hourly"), OPEN_METEO_HOURLY_FIELDS), ("aod",)
        )
        if not aerosol_buckets:
            self.logger.info("No aerosol data, night transparency unknown")

        days = []
        for index, day_key in daily_keys(daily, self.horizon):
            text = self.normalizer.daily_text
            sunrise = text(daily, "sunrise", index)
            sunset = text(daily, "sunset", index)
            phase = self.normalizer.daily_value(daily, ("moon_phase",), index)
            bucket = sky_buckets.get(day_key)

            night = self._night_stats(day_key, sky_buckets, aerosol_buckets)
            phase_name, illumination, milky_way = self._moon(phase, night)
            days.append(PhotographyDay(
                date=day_key,
                source=SOURCE_FORECAST,
                sunrise=sunrise,
                sunset=sunset,
                moonrise=text(daily, "moonrise", index),
                moonset=text(daily, "moonset", index),
                moon_phase=phase,
                morning=self._window_stats(bucket, self.windows.morning_window(self._minute(sunrise))),
                evening=self._window_stats(bucket, self.windows.evening_window(self._minute(sunset))),
                night=night,
                moon_phase_name=phase_name,
                moon_illumination=illumination,
                milky_way=milky_way,
            ))

        self.logger.info(f"Built photography outlook for {len(days)} days")
        return PhotographyOutlook(available=True, timezone=self.timezone, days=tuple(days))

    def build_astronomical_outlook(self, today: Optional[date] = None) -> PhotographyOutlook:
        """
        Sun and moon only, computed from date and coordinates.

        Window bounds are known but every cloud, visibility and transparency
        statistic is None. The Milky Way verdict then reflects moonlight
        only: missing cloud counts as overcast, so it is never excellent.
        """
        if today is None:
            today = self.date_utils.today(self.timezone)

        days = []
        for day_key in DateUtils.day_range(today, self.horizon):
            day = date.fromisoformat(day_key)
            sun = self.astronomy.sun_times(day, self.latitude, self.longitude, self.timezone)
            phase = self.astronomy.moon_phase(day)
            night = NightStats()
            phase_name, illumination, milky_way = self._moon(phase, night)
            days.append(PhotographyDay(
                date=day_key,
                source=SOURCE_ASTRONOMY,
                sunrise=sun.sunrise,
                sunset=sun.sunset,
                moonrise=None,
                moonset=None,
                moon_phase=phase,
                morning=WindowStats(window=self.windows.morning_window(self._minute(sun.sunrise))),
                evening=WindowStats(window=self.windows.evening_window(self._minute(sun.sunset))),
                night=night,
                moon_phase_name=phase_name,
                moon_illumination=illumination,
                milky_way=milky_way,
            ))

        self.logger.info(f"Built astronomical photography outlook for {len(days)} days")
        return PhotographyOutlook(available=True, timezone=self.timezone, days=tuple(days))
