"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from apimsample.config.schema import ApiSettings, AppConfig

TEST_BASE_URL = "https://test-api.example.com"
TEST_API_KEY = "test-subscription-key"


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings(base_url=TEST_BASE_URL, api_key=TEST_API_KEY)


@pytest.fixture
def app_config(api_settings: ApiSettings) -> AppConfig:
    return AppConfig(api=api_settings)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {"api": {"base_url": TEST_BASE_URL, "api_key": TEST_API_KEY}}
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def forecast_payload(fixtures_dir: Path) -> list[dict]:
    with open(fixtures_dir / "forecast_response.json") as f:
        return json.load(f)
