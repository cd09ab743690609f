"""
Open-Meteo operations: forecast, air quality, marine and historical archive.

Each method builds the query for one feature and returns the decoded JSON
payload unchanged.
"""

import logging
from datetime import date
from typing import Any, Callable, Dict, Optional, Sequence

from ..core import constants

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
AIR_QUALITY_URL = "https://air-quality-api.open-meteo.com/v1/air-quality"
MARINE_URL = "https://marine-api.open-meteo.com/v1/marine"
ARCHIVE_URL = "https://archive-api.open-meteo.com/v1/archive"

GARDENING_HOURLY = (
    "soil_temperature_0cm",
    "soil_moisture_0_1cm",
    "temperature_2m",
    "precipitation_probability",
    "precipitation",
)
GARDENING_DAILY = (
    "temperature_2m_min",
    "temperature_2m_max",
    "precipitation_sum",
    "precipitation_probability_max",
)
BIO_HOURLY = ("pressure_msl", "relative_humidity_2m", "apparent_temperature")
BIO_DAILY = (
    "uv_index_max",
    "uv_index_clear_sky_max",
    "apparent_temperature_max",
    "apparent_temperature_min",
    "temperature_2m_max",
    "temperature_2m_min",
)
PHOTOGRAPHY_HOURLY = (
    "cloud_cover",
    "cloud_cover_low",
    "cloud_cover_mid",
    "cloud_cover_high",
    "visibility",
)
PHOTOGRAPHY_DAILY = ("sunrise", "sunset", "moonrise", "moonset", "moon_phase")
AIR_QUALITY_CURRENT = ("european_aqi", "pm2_5", "birch_pollen", "grass_pollen", "ragweed_pollen")
MARINE_CURRENT = ("wave_height", "wave_direction", "sea_surface_temperature")
ARCHIVE_DAILY = ("temperature_2m_max", "temperature_2m_min")


class OpenMeteoAPI:
    """Open-Meteo API operations."""

    # Provided by APIClient
    logger: logging.Logger
    get: Callable[..., Any]

    @staticmethod
    def _location_params(latitude: float, longitude: float, timezone: str) -> Dict[str, Any]:
        return {
            "latitude": latitude,
            "longitude": longitude,
            "timezone": timezone or "auto",
        }

    def _forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str,
        days: int,
        hourly: Sequence[str],
        daily: Optional[Sequence[str]] = None,
        url: str = FORECAST_URL
    ) -> Dict[str, Any]:
        params = self._location_params(latitude, longitude, timezone)
        params["forecast_days"] = str(days)
        params["hourly"] = ",".join(hourly)
        if daily:
            params["daily"] = ",".join(daily)
        return self.get(url, params=params)

    def get_gardening_forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str,
        days: int = constants.GARDENING_FORECAST_DAYS
    ) -> Dict[str, Any]:
        """
        Get hourly soil and daily precipitation forecast.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            timezone: Timezone the timestamps are expressed in
            days: Forecast horizon

        Returns:
            Decoded forecast payload
        """
        self.logger.info(f"Fetching gardening forecast for ({latitude}, {longitude})")
        return self._forecast(latitude, longitude, timezone, days, GARDENING_HOURLY, GARDENING_DAILY)

    def get_bio_forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str,
        days: int = constants.BIO_FORECAST_DAYS
    ) -> Dict[str, Any]:
        """Get hourly pressure/humidity/apparent temperature and daily UV forecast."""
        self.logger.info(f"Fetching biometeorological forecast for ({latitude}, {longitude})")
        return self._forecast(latitude, longitude, timezone, days, BIO_HOURLY, BIO_DAILY)

    def get_photography_forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str,
        days: int = constants.PHOTOGRAPHY_FORECAST_DAYS
    ) -> Dict[str, Any]:
        """Get hourly cloud/visibility and daily sun/moon forecast."""
        self.logger.info(f"Fetching photography forecast for ({latitude}, {longitude})")
        return self._forecast(latitude, longitude, timezone, days, PHOTOGRAPHY_HOURLY, PHOTOGRAPHY_DAILY)

    def get_aerosol_forecast(
        self,
        latitude: float,
        longitude: float,
        timezone: str,
        days: int = constants.PHOTOGRAPHY_FORECAST_DAYS
    ) -> Dict[str, Any]:
        """Get hourly aerosol optical depth from the air-quality API."""
        self.logger.info(f"Fetching aerosol forecast for ({latitude}, {longitude})")
        return self._forecast(
            latitude, longitude, timezone, days, ("aerosol_optical_depth",), url=AIR_QUALITY_URL
        )

    def get_air_quality_current(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Get current air quality and pollen conditions."""
        self.logger.info(f"Fetching current air quality for ({latitude}, {longitude})")
        params = self._location_params(latitude, longitude, "auto")
        params["current"] = ",".join(AIR_QUALITY_CURRENT)
        return self.get(AIR_QUALITY_URL, params=params)

    def get_marine_current(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Get current wave and sea surface conditions."""
        self.logger.info(f"Fetching current marine conditions for ({latitude}, {longitude})")
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(MARINE_CURRENT),
        }
        return self.get(MARINE_URL, params=params)

    def get_archive(
        self,
        latitude: float,
        longitude: float,
        timezone: str,
        target_date: date,
        first_year: int = constants.ARCHIVE_FIRST_YEAR
    ) -> Dict[str, Any]:
        """
        Get the daily temperature archive in one bulk request.

        The range runs from first_year to the previous year, both ending on the
        target month/day; the calendar-day filter is applied client-side.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            timezone: Timezone for the daily aggregation
            target_date: Date whose calendar day is looked up
            first_year: First archive year

        Returns:
            Decoded archive payload
        """
        month_day = target_date.strftime("%m-%d")
        if month_day == "02-29":
            # Range bounds must exist in non-leap years; leap days stay inside the range
            month_day = "02-28"
        params = self._location_params(latitude, longitude, timezone)
        params.update({
            "start_date": f"{first_year:04d}-{month_day}",
            "end_date": f"{target_date.year - 1:04d}-{month_day}",
            "daily": ",".join(ARCHIVE_DAILY),
        })
        self.logger.info(
            f"Fetching archive {params['start_date']} .. {params['end_date']} "
            f"for ({latitude}, {longitude})"
        )
        return self.get(ARCHIVE_URL, params=params)
