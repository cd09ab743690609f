"""
MET Norway locationforecast operations.
"""

import logging
from typing import Any, Callable, Dict

LOCATIONFORECAST_URL = "https://api.met.no/weatherapi/locationforecast/2.0/compact"


class MetNoAPI:
    """MET Norway API operations. Requests must carry an identifying User-Agent."""

    # Provided by APIClient
    logger: logging.Logger
    get: Callable[..., Any]

    def get_locationforecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Get the compact location forecast.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            Decoded GeoJSON payload with properties.timeseries
        """
        self.logger.info(f"Fetching MET Norway forecast for ({latitude}, {longitude})")
        # MET Norway asks clients to truncate coordinates to 4 decimals
        params = {"lat": round(latitude, 4), "lon": round(longitude, 4)}
        return self.get(LOCATIONFORECAST_URL, params=params)
