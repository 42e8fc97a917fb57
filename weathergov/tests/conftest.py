"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from weathergov.config.schema import ClientConfig
from weathergov.ingest.noaa_client import NoaaClient

BASE_URL = "https://test-noaa.example.com"

FIXTURE_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name) as f:
        return json.load(f)


@pytest.fixture
def load_json():
    """Return a loader for JSON payload fixtures."""
    return load_fixture


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(base_url=BASE_URL, user_agent="weathergov-tests/1.0")


@pytest.fixture
def client(client_config: ClientConfig):
    c = NoaaClient(client_config)
    yield c
    c.close()


@pytest.fixture
def point_payload() -> dict:
    return load_fixture("points_chicago.json")


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "base_url": BASE_URL,
        "user_agent": "yaml-agent/2.0",
        "units": "si",
    }
    path = tmp_path / "client.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
