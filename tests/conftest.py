"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from pathlib import Path

import pytest
import json

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session")
def fixtures_dir():
    """Get the fixtures directory path."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture(scope="session")
def load_fixture(fixtures_dir):
    """Return a loader for JSON payload fixtures."""
    def _load(name):
        with open(fixtures_dir / name, encoding="utf-8") as f:
            return json.load(f)
    return _load


@pytest.fixture
def gardening_payload(load_fixture):
    return load_fixture("open_meteo_gardening.json")


@pytest.fixture
def bio_payload(load_fixture):
    return load_fixture("open_meteo_bio.json")


@pytest.fixture
def air_quality_payload(load_fixture):
    return load_fixture("air_quality_current.json")


@pytest.fixture
def met_no_payload(load_fixture):
    return load_fixture("met_no_compact.json")


@pytest.fixture
def archive_payload(load_fixture):
    return load_fixture("open_meteo_archive.json")


@pytest.fixture
def marine_payload(load_fixture):
    return load_fixture("marine_current.json")


@pytest.fixture
def k_index_table(load_fixture):
    return load_fixture("noaa_planetary_k_index.json")


@pytest.fixture
def base_config_data():
    """Minimal valid configuration dictionary."""
    return {
        "location": {
            "name": "Riga",
            "latitude": 56.95,
            "longitude": 24.1,
            "timezone": "Europe/Riga",
        }
    }


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
