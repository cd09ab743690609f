"""
Tests for concurrent data acquisition.
"""

import threading
import unittest
from datetime import date
from unittest.mock import Mock

import pytest  # type: ignore

from src.weather_digest.core import Config
from src.weather_digest.services import DataAcquisition


@pytest.mark.unit
class TestDataAcquisition(unittest.TestCase):
    """Test fan-out/fan-in of source fetches."""

    def setUp(self):
        self.logger = Mock()
        self.acquisition = DataAcquisition(max_workers=4, timeout=5.0, logger=self.logger)

    def test_all_sources_succeed(self):
        results = self.acquisition.gather({
            "a": lambda: {"value": 1},
            "b": lambda: [1, 2, 3],
        })

        self.assertEqual(results, {"a": {"value": 1}, "b": [1, 2, 3]})
        self.logger.warning.assert_not_called()

    def test_failed_source_becomes_none(self):
        def broken():
            raise ConnectionError("connection reset")

        results = self.acquisition.gather({"ok": lambda: {"value": 1}, "broken": broken})

        self.assertEqual(results["ok"], {"value": 1})
        self.assertIsNone(results["broken"])
        message = self.logger.warning.call_args[0][0]
        self.assertIn("broken", message)
        self.assertIn("ConnectionError", message)

    def test_slow_source_times_out(self):
        release = threading.Event()
        acquisition = DataAcquisition(timeout=0.2, logger=self.logger)
        try:
            results = acquisition.gather({
                "fast": lambda: "done",
                "slow": lambda: release.wait(5) and "late",
            })
        finally:
            release.set()

        self.assertEqual(results["fast"], "done")
        self.assertIsNone(results["slow"])
        self.assertIn("timed out", self.logger.warning.call_args[0][0])

    def test_empty_batch(self):
        self.assertEqual(self.acquisition.gather({}), {})

    def test_fetches_run_concurrently(self):
        barrier = threading.Barrier(3, timeout=2)

        def fetch():
            barrier.wait()
            return True

        results = self.acquisition.gather({"a": fetch, "b": fetch, "c": fetch})
        self.assertEqual(results, {"a": True, "b": True, "c": True})


@pytest.mark.unit
class TestDigestTasks(unittest.TestCase):
    """Test the source map of the daily digest."""

    def setUp(self):
        self.api = Mock()
        self.config = Config.from_dict({
            "location": {"latitude": 56.95, "longitude": 24.1, "timezone": "Europe/Riga"},
            "history": {"first_year": 1990},
        })
        self.tasks = DataAcquisition.digest_tasks(self.api, self.config, date(2024, 6, 15))

    def test_source_names(self):
        self.assertEqual(set(self.tasks), {
            "gardening", "bio", "air_quality", "photography", "aerosol",
            "local", "archive", "marine", "space_weather",
        })

    def test_tasks_are_lazy(self):
        self.api.get_gardening_forecast.assert_not_called()
        self.tasks["gardening"]()
        self.api.get_gardening_forecast.assert_called_once_with(56.95, 24.1, "Europe/Riga")

    def test_task_arguments(self):
        for fetch in self.tasks.values():
            fetch()

        self.api.get_air_quality_current.assert_called_once_with(56.95, 24.1)
        self.api.get_locationforecast.assert_called_once_with(56.95, 24.1)
        self.api.get_archive.assert_called_once_with(56.95, 24.1, "Europe/Riga", date(2024, 6, 15), 1990)
        self.api.get_planetary_k_index.assert_called_once_with()
