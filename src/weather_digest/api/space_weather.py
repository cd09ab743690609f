"""
NOAA Space Weather Prediction Center operations.
"""

import logging
from typing import Any, Callable, List

PLANETARY_K_INDEX_URL = "https://services.swpc.noaa.gov/products/noaa-planetary-k-index.json"


class SpaceWeatherAPI:
    """NOAA SWPC API operations."""

    # Provided by APIClient
    logger: logging.Logger
    get: Callable[..., Any]

    def get_planetary_k_index(self) -> List[List[Any]]:
        """
        Get the planetary K-index table.

        Returns:
            Rows of [time_tag, Kp, ...]; the first row is the header
        """
        self.logger.info("Fetching planetary K-index")
        return self.get(PLANETARY_K_INDEX_URL)
