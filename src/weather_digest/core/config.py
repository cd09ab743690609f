"""
Configuration module for the weather digest engine.

Loads configuration from a JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils

DEFAULT_USER_AGENT = "WeatherDigest/1.0 (+https://github.com/meteomonster/weather-blogger)"


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
            data: Pre-loaded configuration dictionary (skips the file)
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        if data is not None:
            self.config = json.loads(json.dumps(data))
            self.config_file = "<dict>"
        else:
            self._load_config()
        self._override_from_env()
        self._validate_config()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Build a configuration from an in-memory dictionary."""
        return cls(data=data)

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        location_env = {
            "DIGEST_LATITUDE": ("latitude", float),
            "DIGEST_LONGITUDE": ("longitude", float),
            "DIGEST_TIMEZONE": ("timezone", str),
        }
        for env_name, (key, cast) in location_env.items():
            raw = os.getenv(env_name)
            if raw:
                try:
                    self.config.setdefault("location", {})[key] = cast(raw)
                except ValueError:
                    raise ValueError(f"Invalid value for {env_name}: {raw!r}")

        api_env = {
            "API_TIMEOUT": ("timeout", int),
            "API_MAX_RETRIES": ("max_retries", int),
            "API_USER_AGENT": ("user_agent", str),
        }
        for env_name, (key, cast) in api_env.items():
            raw = os.getenv(env_name)
            if raw:
                try:
                    self.config.setdefault("api", {})[key] = cast(raw)
                except ValueError:
                    raise ValueError(f"Invalid value for {env_name}: {raw!r}")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present and sane."""
        location = self.config.get("location")
        if not isinstance(location, dict):
            raise ValueError("Missing required configuration section: location")

        missing_keys = [
            f"location.{key}"
            for key in ("latitude", "longitude", "timezone")
            if location.get(key) is None
        ]
        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        latitude = location["latitude"]
        longitude = location["longitude"]
        if not isinstance(latitude, (int, float)) or not -90 <= latitude <= 90:
            raise ValueError(f"Invalid location.latitude: {latitude} (must be -90..90)")
        if not isinstance(longitude, (int, float)) or not -180 <= longitude <= 180:
            raise ValueError(f"Invalid location.longitude: {longitude} (must be -180..180)")
        if not isinstance(location["timezone"], str):
            raise ValueError(f"Invalid location.timezone: {location['timezone']!r}")
        DateUtils.parse_timezone(location["timezone"])

        energy = self.get("biometeo.energy", {})
        if not isinstance(energy, dict):
            raise ValueError("biometeo.energy must be a dictionary")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'location.timezone')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def latitude(self) -> float:
        """Get location latitude in decimal degrees."""
        return float(self.get("location.latitude"))

    @property
    def longitude(self) -> float:
        """Get location longitude in decimal degrees."""
        return float(self.get("location.longitude"))

    @property
    def timezone(self) -> str:
        """Get location timezone name."""
        return self.get("location.timezone", "UTC")

    @property
    def location_name(self) -> str:
        return self.get("location.name", "")

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", 20)

    @property
    def api_max_retries(self) -> int:
        """Get maximum API retry attempts."""
        return self.get("api.max_retries", 3)

    @property
    def api_backoff_factor(self) -> float:
        """Get exponential backoff factor between retries (seconds)."""
        return self.get("api.backoff_factor", 1.0)

    @property
    def api_user_agent(self) -> str:
        return self.get("api.user_agent", DEFAULT_USER_AGENT)

    @property
    def acquisition_max_workers(self) -> int:
        return self.get("acquisition.max_workers", 8)

    @property
    def acquisition_timeout(self) -> float:
        """Get overall wall-clock budget for the concurrent fetches (seconds)."""
        return self.get("acquisition.timeout", 60.0)

    @property
    def energy_overrides(self) -> Dict[str, float]:
        """Get energy score coefficient overrides."""
        return self.get("biometeo.energy", {})

    @property
    def archive_first_year(self) -> int:
        return self.get("history.first_year", constants.ARCHIVE_FIRST_YEAR)

    def __repr__(self) -> str:
        """String representation of config."""
        return (
            f"Config(file={self.config_file}, "
            f"location=({self.get('location.latitude')}, {self.get('location.longitude')}), "
            f"tz={self.timezone})"
        )
