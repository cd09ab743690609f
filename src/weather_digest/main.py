"""
Main entry point for the weather digest engine.
Fetches every source concurrently and aggregates them into one digest.
"""

import json
import sys
from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Optional

from .core import Config, DateUtils, LoggerContext, setup_logger
from .api import WeatherAPI
from .algorithms import EnergyCoefficients, EnergyScorer
from .services import (
    BioWeatherService,
    DataAcquisition,
    GardeningService,
    HistoricalService,
    LocalForecastService,
    MarineService,
    PhotographyService,
    SpaceWeatherService,
)


def to_jsonable(value: Any) -> Any:
    """Convert digest models (dataclasses, enums, tuples) into JSON-ready values."""
    if isinstance(value, Enum):
        return value.value
    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, dict):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


class WeatherDigestApp:
    """Main application for the daily weather digest."""

    def __init__(self, config_file: Optional[str] = None, config: Optional[Config] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
            config: Ready configuration (takes precedence over config_file)
        """
        self.config = config or Config(config_file)

        self.logger = setup_logger()
        self.logger.info("=" * 60)
        self.logger.info("Weather Digest")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.api_client: Optional[WeatherAPI] = None
        self.acquisition: Optional[DataAcquisition] = None
        self.gardening: Optional[GardeningService] = None
        self.bio: Optional[BioWeatherService] = None
        self.photography: Optional[PhotographyService] = None
        self.local_forecast: Optional[LocalForecastService] = None
        self.history: Optional[HistoricalService] = None
        self.marine: Optional[MarineService] = None
        self.space_weather: Optional[SpaceWeatherService] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")
        tz = self.config.timezone

        self.api_client = WeatherAPI.from_config(self.config, logger=self.logger)
        self.acquisition = DataAcquisition(
            max_workers=self.config.acquisition_max_workers,
            timeout=self.config.acquisition_timeout,
            logger=self.logger
        )

        coefficients = EnergyCoefficients.from_overrides(self.config.energy_overrides)
        self.gardening = GardeningService(tz, logger=self.logger)
        self.bio = BioWeatherService(tz, scorer=EnergyScorer(coefficients, self.logger), logger=self.logger)
        self.photography = PhotographyService(
            tz, self.config.latitude, self.config.longitude, logger=self.logger
        )
        self.local_forecast = LocalForecastService(tz, logger=self.logger)
        self.history = HistoricalService(logger=self.logger)
        self.marine = MarineService(logger=self.logger)
        self.space_weather = SpaceWeatherService(logger=self.logger)

        self.logger.info("All components initialized successfully")

    def build_digest(self, payloads: Dict[str, Any], today: date) -> Dict[str, Any]:
        """
        Aggregate fetched payloads into the digest.

        Args:
            payloads: Source name -> decoded payload (None for failed sources)
            today: Local date of the digest

        Returns:
            Digest of model objects keyed by section
        """
        return {
            "date": today.isoformat(),
            "location": {
                "name": self.config.location_name,
                "latitude": self.config.latitude,
                "longitude": self.config.longitude,
                "timezone": self.config.timezone,
            },
            "gardening": self.gardening.build_outlook(payloads.get("gardening")),
            "bio": self.bio.build_outlook(payloads.get("bio"), payloads.get("air_quality")),
            "photography": self.photography.build_outlook(
                payloads.get("photography"), payloads.get("aerosol"), today
            ),
            "local_forecast": self.local_forecast.build_forecast(payloads.get("local")),
            "history": self.history.build_record(payloads.get("archive"), today),
            "marine": self.marine.normalize(payloads.get("marine")),
            "space_weather": self.space_weather.normalize(payloads.get("space_weather")),
        }

    def run(self, today: Optional[date] = None) -> Dict[str, Any]:
        """
        Fetch all sources and build the digest.

        Args:
            today: Local date of the digest. If None, uses today in the configured timezone.

        Returns:
            JSON-ready digest
        """
        try:
            self.initialize_components()
            if today is None:
                today = DateUtils(self.logger).today(self.config.timezone)
            self.logger.info(f"Building digest for: {today}")

            with LoggerContext(self.logger, "data acquisition"):
                tasks = DataAcquisition.digest_tasks(self.api_client, self.config, today)
                payloads = self.acquisition.gather(tasks)

            with LoggerContext(self.logger, "aggregation"):
                digest = self.build_digest(payloads, today)

            self.logger.info("Processing complete")
            return to_jsonable(digest)

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise
        finally:
            if self.api_client:
                self.api_client.close()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Weather digest: daily gardening, wellbeing and photography outlooks"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Digest date (YYYY-MM-DD). Default: today in the configured timezone"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the JSON digest to this file instead of stdout"
    )

    args = parser.parse_args()

    today = None
    if args.date:
        try:
            today = datetime.strptime(args.date, "%Y-%m-%d").date()
        except ValueError:
            print(f"Invalid date format: {args.date}. Use YYYY-MM-DD", file=sys.stderr)
            sys.exit(1)

    try:
        app = WeatherDigestApp(config_file=args.config)
        digest = app.run(today=today)
    except Exception as e:
        print(f"Application failed: {e}", file=sys.stderr)
        sys.exit(1)

    text = json.dumps(digest, ensure_ascii=False, indent=2)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(text + "\n")
    else:
        print(text)


if __name__ == "__main__":
    main()
