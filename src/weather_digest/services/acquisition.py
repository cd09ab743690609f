"""
Data acquisition service.

Issues independent source fetches concurrently and joins them. A source
that fails or times out yields None; the others are kept.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, wait
from datetime import date
from typing import Any, Callable, Dict, Mapping, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..api import WeatherAPI
    from ..core.config import Config

Fetch = Callable[[], Any]


class DataAcquisition:
    """Fan out source fetches on a thread pool and fan the results back in."""

    def __init__(
        self,
        max_workers: int = 8,
        timeout: Optional[float] = 60.0,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize data acquisition.

        Args:
            max_workers: Maximum concurrent fetches
            timeout: Wall-clock budget for the whole batch (seconds), None to wait forever
            logger: Logger instance
        """
        self.max_workers = max_workers
        self.timeout = timeout
        self.logger = logger or logging.getLogger(__name__)

    def gather(self, tasks: Mapping[str, Fetch]) -> Dict[str, Any]:
        """
        Run zero-argument fetch callables concurrently.

        Args:
            tasks: Source name -> fetch callable

        Returns:
            Source name -> fetched payload, or None for failed or timed-out sources
        """
        results: Dict[str, Any] = {name: None for name in tasks}
        if not tasks:
            return results

        start = time.monotonic()
        executor = ThreadPoolExecutor(max_workers=max(1, min(self.max_workers, len(tasks))))
        try:
            futures = {executor.submit(fetch): name for name, fetch in tasks.items()}
            done, pending = wait(futures, timeout=self.timeout)

            for future in pending:
                future.cancel()
                self.logger.warning(f"Source '{futures[future]}' timed out after {self.timeout}s")

            for future in done:
                name = futures[future]
                try:
                    results[name] = future.result()
                except Exception as e:
                    self.logger.warning(f"Source '{name}' failed: {type(e).__name__}: {e}")
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        succeeded = sum(1 for value in results.values() if value is not None)
        self.logger.info(
            f"Fetched {succeeded}/{len(tasks)} sources in {time.monotonic() - start:.2f}s"
        )
        return results

    @staticmethod
    def digest_tasks(api: "WeatherAPI", config: "Config", today: date) -> Dict[str, Fetch]:
        """
        Fetch callables for every source of the daily digest.

        Args:
            api: Unified weather API client
            config: Configuration with location
            today: Local date of the digest (drives the archive range)
        """
        lat, lon, tz = config.latitude, config.longitude, config.timezone
        return {
            "gardening": lambda: api.get_gardening_forecast(lat, lon, tz),
            "bio": lambda: api.get_bio_forecast(lat, lon, tz),
            "air_quality": lambda: api.get_air_quality_current(lat, lon),
            "photography": lambda: api.get_photography_forecast(lat, lon, tz),
            "aerosol": lambda: api.get_aerosol_forecast(lat, lon, tz),
            "local": lambda: api.get_locationforecast(lat, lon),
            "archive": lambda: api.get_archive(lat, lon, tz, today, config.archive_first_year),
            "marine": lambda: api.get_marine_current(lat, lon),
            "space_weather": api.get_planetary_k_index,
        }
