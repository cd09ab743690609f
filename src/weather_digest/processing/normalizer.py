"""
Source normalization module.

Joins the positional parallel arrays of a source block into one sequence of
records, and resolves renamed fields through declared priority lists.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..core import constants, DateUtils
from ..models import HourlyRecord
from .reducers import is_finite_number


# Canonical variable -> source field names, highest priority first
OPEN_METEO_HOURLY_FIELDS: Dict[str, Sequence[str]] = {
    "soil_temp": ("soil_temperature_0cm",),
    "soil_moisture": ("soil_moisture_0_1cm", "soil_moisture_0_to_1cm"),
    "air_temp": ("temperature_2m",),
    "precipitation": ("precipitation",),
    "precip_probability": ("precipitation_probability",),
    "pressure": ("pressure_msl", "surface_pressure"),
    "humidity": ("relative_humidity_2m", "relativehumidity_2m"),
    "apparent_temp": ("apparent_temperature",),
    "cloud": ("cloud_cover", "cloudcover"),
    "cloud_low": ("cloud_cover_low", "cloudcover_low"),
    "cloud_mid": ("cloud_cover_mid", "cloudcover_mid"),
    "cloud_high": ("cloud_cover_high", "cloudcover_high"),
    "visibility": ("visibility",),
    "aod": ("aerosol_optical_depth",),
    "wind_direction": ("wind_direction_10m", "winddirection_10m"),
}

MET_NO_DETAIL_FIELDS: Dict[str, Sequence[str]] = {
    "air_temp": ("air_temperature",),
    "wind_direction": ("wind_from_direction",),
}

MARINE_FIELDS: Dict[str, Sequence[str]] = {
    "wave_height": ("wave_height", "swell_wave_height", "wind_wave_height"),
    "wave_direction": ("wave_direction", "swell_wave_direction", "wind_wave_direction"),
    "sea_surface_temperature": ("sea_surface_temperature", "sea_temperature", "water_temperature"),
}


def pick_first(source: Mapping[str, Any], names: Sequence[str]) -> Optional[float]:
    """
    Resolve a value through a priority list of field names.

    Args:
        source: Mapping with possibly renamed fields
        names: Field names, highest priority first

    Returns:
        First finite value found, or None
    """
    for name in names:
        value = source.get(name)
        if is_finite_number(value):
            return float(value)
    return None


def dig(source: Any, *keys: str) -> Any:
    """Nested mapping lookup that returns None on any missing level."""
    for key in keys:
        if not isinstance(source, Mapping):
            return None
        source = source.get(key)
    return source


def value_at(series: Any, index: int) -> Any:
    """Positional access that tolerates missing or short arrays."""
    if not isinstance(series, (list, tuple)) or index >= len(series):
        return None
    return series[index]


class SeriesNormalizer:
    """Normalize raw source payloads into structured records."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize series normalizer.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def zip_block(
        self,
        block: Optional[Mapping[str, Any]],
        fields: Mapping[str, Sequence[str]],
        time_key: str = "time"
    ) -> List[HourlyRecord]:
        """
        Join a `{time: [...], field: [...]}` block into per-timestamp records.

        Arrays shorter than `time` yield None for the missing positions;
        unknown fields are ignored.

        Args:
            block: Decoded source block (e.g. Open-Meteo 'hourly')
            fields: Canonical variable -> priority list of source field names
            time_key: Name of the timestamp array

        Returns:
            List of records in source order
        """
        if not isinstance(block, Mapping):
            return []
        times = block.get(time_key)
        if not isinstance(times, (list, tuple)) or not times:
            return []

        resolved = {
            variable: [name for name in names if isinstance(block.get(name), (list, tuple))]
            for variable, names in fields.items()
        }

        for variable, names in resolved.items():
            lengths = [len(block[name]) for name in names]
            if lengths and min(lengths) < len(times):
                self.logger.debug(
                    f"Series for {variable} shorter than time axis "
                    f"({min(lengths)} < {len(times)}); missing positions treated as gaps"
                )

        records = []
        for index, timestamp in enumerate(times):
            values = {}
            for variable, names in resolved.items():
                row = {name: value_at(block[name], index) for name in names}
                values[variable] = pick_first(row, names)
            records.append(HourlyRecord(timestamp=timestamp, values=values))

        return records

    def zip_met_no(self, payload: Optional[Mapping[str, Any]]) -> List[HourlyRecord]:
        """
        Flatten a MET Norway locationforecast payload into records.

        Args:
            payload: Decoded locationforecast/2.0 response

        Returns:
            List of records built from properties.timeseries[].data.instant.details
        """
        timeseries = dig(payload, "properties", "timeseries")
        if not isinstance(timeseries, list):
            return []

        records = []
        for entry in timeseries:
            if not isinstance(entry, Mapping):
                continue
            details = dig(entry, "data", "instant", "details")
            if not isinstance(details, Mapping):
                details = {}
            values = {
                variable: pick_first(details, names)
                for variable, names in MET_NO_DETAIL_FIELDS.items()
            }
            records.append(HourlyRecord(timestamp=entry.get("time"), values=values))
        return records

    @staticmethod
    def daily_value(
        daily: Optional[Mapping[str, Any]],
        names: Sequence[str],
        index: int
    ) -> Optional[float]:
        """Resolve a daily-series value at `index` through a priority list."""
        if not isinstance(daily, Mapping):
            return None
        row = {name: value_at(daily.get(name), index) for name in names}
        return pick_first(row, names)

    @staticmethod
    def daily_text(daily: Optional[Mapping[str, Any]], name: str, index: int) -> Optional[str]:
        """Read a string-valued daily series entry (e.g. sunrise) at `index`."""
        if not isinstance(daily, Mapping):
            return None
        value = value_at(daily.get(name), index)
        return value if isinstance(value, str) and value else None


def forecast_blocks(
    payload: Optional[Mapping[str, Any]]
) -> Optional[Tuple[Mapping[str, Any], Mapping[str, Any]]]:
    """
    Get the (hourly, daily) blocks of a forecast payload.

    Returns:
        None unless both blocks carry a non-empty 'time' array
    """
    hourly = dig(payload, "hourly")
    daily = dig(payload, "daily")
    for block in (hourly, daily):
        times = dig(block, "time")
        if not isinstance(times, (list, tuple)) or not times:
            return None
    return hourly, daily


def daily_keys(daily: Mapping[str, Any], horizon: Optional[int] = None) -> List[Tuple[int, str]]:
    """
    List (index, day_key) pairs of a daily block, first `horizon` entries.

    Entries whose date is malformed are skipped but keep their index, so the
    parallel daily arrays stay aligned.
    """
    times = daily.get("time") or []
    if horizon is not None:
        times = times[:horizon]
    keys = []
    for index, iso in enumerate(times):
        key = iso[:constants.DAY_KEY_LENGTH] if isinstance(iso, str) else None
        if DateUtils.is_day_key(key):
            keys.append((index, key))
    return keys
