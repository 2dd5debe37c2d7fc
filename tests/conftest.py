"""
Test Configuration
==================

Pytest configuration with a testing settings override and shared fixtures.
"""

import pytest

from footlights.config import settings as settings_module
from footlights.config.settings import Settings
from footlights.core.registry import StyleRegistry

from tests.utils.data_generators import StyleDataGenerator


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    __test__ = False

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"
    log_to_file: bool = False
    reference_policy: str = "strict"
    class_prefix: str = "fl"
    default_gradient_angle: float = 180.0


@pytest.fixture
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(autouse=True)
def override_settings(monkeypatch: pytest.MonkeyPatch, test_settings: TestSettings):
    """Install testing settings as the global settings instance."""
    monkeypatch.setattr(settings_module, "settings", test_settings)
    yield test_settings


@pytest.fixture
def registry() -> StyleRegistry:
    """Empty style registry."""
    return StyleRegistry()


@pytest.fixture
def demo_registry() -> StyleRegistry:
    """Registry holding the gradient background and the rounded image."""
    return StyleDataGenerator.generate_demo_registry()
