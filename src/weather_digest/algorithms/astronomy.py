"""
Astronomical geometry module.

Sunrise, sunset and moon phase derived purely from date and coordinates.
Used when the weather source does not deliver its own daily sun/moon series.
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

import pytz

from ..core import constants, DateUtils


@dataclass(frozen=True)
class SunTimes:
    """Local sun times for one day ('YYYY-MM-DDTHH:MM' strings)."""

    date: str
    sunrise: Optional[str]
    sunset: Optional[str]
    solar_noon: Optional[str]
    daylight_hours: float
    polar: Optional[str] = None  # "polar_day" or "polar_night"


class AstronomyCalculator:

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize calculator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def solar_declination(day_number: int) -> float:
        """
        Solar declination in radians (FAO-56 equation 24).

        Args:
            day_number: Day of year (1-365/366)
        """
        return constants.SOLAR_DECLINATION_AMPLITUDE * math.sin(
            2 * math.pi * day_number / 365 - constants.SOLAR_DECLINATION_PHASE
        )

    @staticmethod
    def equation_of_time(day_number: int) -> float:
        """
        Equation of time in minutes (apparent minus mean solar time).

        Args:
            day_number: Day of year (1-365/366)
        """
        b = 2 * math.pi * (day_number - 81) / 364
        return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)

    def sunrise_hour_angle(self, latitude: float, day_number: int) -> Optional[float]:
        """
        Hour angle of sunrise/sunset in radians, corrected for refraction.

        Returns:
            Hour angle, 0 for polar night, pi for polar day
        """
        lat_rad = math.radians(latitude)
        delta = self.solar_declination(day_number)
        altitude = math.radians(constants.SUNRISE_ALTITUDE_DEGREES)

        denominator = math.cos(lat_rad) * math.cos(delta)
        if abs(denominator) < 1e-12:
            # Geographic pole: sun stays on one side of the horizon all day
            return math.pi if lat_rad * delta > 0 else 0.0

        cos_ws = (math.sin(altitude) - math.sin(lat_rad) * math.sin(delta)) / denominator
        if cos_ws >= 1:
            return 0.0
        if cos_ws <= -1:
            return math.pi
        return math.acos(cos_ws)

    def daylight_hours(self, latitude: float, day_number: int) -> float:
        """
        Day length in hours.

        Args:
            latitude: Latitude in decimal degrees
            day_number: Day of year (1-365/366)
        """
        ws = self.sunrise_hour_angle(latitude, day_number)
        return 24 * ws / math.pi

    def sun_times(
        self,
        day: date,
        latitude: float,
        longitude: float,
        timezone_str: str
    ) -> SunTimes:
        """
        Compute local sunrise, sunset and solar noon.

        Args:
            day: Calendar date
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees (east positive)
            timezone_str: Local timezone for the returned times

        Returns:
            SunTimes; sunrise/sunset are None during polar day or night
        """
        day_number = day.timetuple().tm_yday
        ws = self.sunrise_hour_angle(latitude, day_number)
        half_day_minutes = math.degrees(ws) * 4

        noon_utc_minutes = 720 - 4 * longitude - self.equation_of_time(day_number)
        midnight_utc = pytz.UTC.localize(datetime(day.year, day.month, day.day))

        def to_local(minutes: float) -> str:
            moment = midnight_utc + timedelta(minutes=minutes)
            return DateUtils.utc_to_local(moment, timezone_str).strftime("%Y-%m-%dT%H:%M")

        polar = None
        if ws <= 0:
            polar = "polar_night"
        elif ws >= math.pi:
            polar = "polar_day"

        sunrise = sunset = None
        if polar is None:
            sunrise = to_local(noon_utc_minutes - half_day_minutes)
            sunset = to_local(noon_utc_minutes + half_day_minutes)

        times = SunTimes(
            date=day.isoformat(),
            sunrise=sunrise,
            sunset=sunset,
            solar_noon=to_local(noon_utc_minutes),
            daylight_hours=self.daylight_hours(latitude, day_number),
            polar=polar,
        )
        self.logger.debug(
            f"Sun times {times.date}: sunrise={sunrise}, sunset={sunset}, "
            f"daylight={times.daylight_hours:.2f}h"
        )
        return times

    @staticmethod
    def julian_day(year: int, month: int, day: int) -> float:
        """Julian Day for a Gregorian calendar date at 0h UT."""
        y, m = year, month
        if m <= 2:
            y -= 1
            m += 12
        a = y // 100
        b = 2 - a + (a // 4)
        return int(365.25 * (y + 4716)) + int(30.6001 * (m + 1)) + day + b - 1524.5

    def moon_phase(self, day: date) -> float:
        """
        Moon phase as a fraction of the synodic month at 12:00 UT.

        Returns:
            0 = new moon, 0.25 first quarter, 0.5 full moon, 0.75 last quarter
        """
        jd = self.julian_day(day.year, day.month, day.day) + 0.5
        age = (jd - constants.REFERENCE_NEW_MOON_JD) % constants.SYNODIC_MONTH_DAYS
        return age / constants.SYNODIC_MONTH_DAYS

    @staticmethod
    def moon_illumination(phase: Optional[float]) -> Optional[float]:
        """Approximate illuminated fraction (0..1) from the phase fraction."""
        if phase is None:
            return None
        phase = phase % 1.0
        return phase * 2 if phase <= 0.5 else (1 - phase) * 2
