"""
Test configuration for the catering capacity engine.
"""
import os

import django
import pytest


def pytest_configure():
    """Configure Django settings for testing."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'catering_server.settings.test')
    django.setup()


@pytest.fixture
def today():
    """Fixed reference date; the engine never reads the clock in these tests."""
    return '2025-03-01'


@pytest.fixture
def capacity_settings():
    from tests.factories import CapacitySettingsFactory
    return CapacitySettingsFactory()


@pytest.fixture
def packaging_settings():
    from tests.factories import PackagingSettingsFactory
    return PackagingSettingsFactory()
