"""
Shared test fixtures for the configuration test suite.

Provides: registered configs, a factory for altered configs, a project root path
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path

import pytest

from infra.configs.base import AppConfig
from infra.configs.environment import EnvironmentName
from infra.configs.registry import CONFIG_REGISTRY
from infra.configs.settings import get_settings


@pytest.fixture
def project_root() -> Path:
    """Return the repository root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def dev_config() -> AppConfig:
    """Registered dev configuration."""
    return CONFIG_REGISTRY[EnvironmentName.DEV]


@pytest.fixture
def prod_config() -> AppConfig:
    """Registered prod configuration."""
    return CONFIG_REGISTRY[EnvironmentName.PROD]


@pytest.fixture
def make_config(dev_config: AppConfig) -> Callable[..., AppConfig]:
    """
    Factory building a copy of the dev config with selected sections changed.

    Usage:
        make_config(aws={"account": "12345"}, vpc={"max_azs": 1})
    """

    def _make(**sections: dict) -> AppConfig:
        changes = {
            section: replace(getattr(dev_config, section), **values)
            for section, values in sections.items()
        }
        return replace(dev_config, **changes)

    return _make


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop cached settings so each test sees its own environment variables."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
