"""
API layer for the public weather services.

Provides a low-level HTTP client and endpoint operations for Open-Meteo,
MET Norway and NOAA SWPC.
"""

import logging
from typing import Optional

from .client import APIClient
from .open_meteo import OpenMeteoAPI
from .met_no import MetNoAPI
from .space_weather import SpaceWeatherAPI
from ..core.config import DEFAULT_USER_AGENT


class WeatherAPI(OpenMeteoAPI, MetNoAPI, SpaceWeatherAPI, APIClient):
    """
    Unified client for every weather source.

    Combines Open-Meteo, MET Norway and space weather operations on one
    retrying session.
    """

    def __init__(
        self,
        timeout: float = 20,
        max_retries: int = 3,
        backoff_factor: float = 1.0,
        user_agent: str = DEFAULT_USER_AGENT,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            timeout: Request timeout in seconds
            max_retries: Maximum number of retry attempts
            backoff_factor: Exponential backoff factor between retries
            user_agent: User-Agent header
            logger: Logger instance
        """
        super().__init__(
            timeout=timeout,
            max_retries=max_retries,
            backoff_factor=backoff_factor,
            user_agent=user_agent,
            logger=logger
        )

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "WeatherAPI":
        """Create client from a Config instance."""
        return cls(
            timeout=config.api_timeout,
            max_retries=config.api_max_retries,
            backoff_factor=config.api_backoff_factor,
            user_agent=config.api_user_agent,
            logger=logger
        )


__all__ = [
    "APIClient",
    "OpenMeteoAPI",
    "MetNoAPI",
    "SpaceWeatherAPI",
    "WeatherAPI",
]
