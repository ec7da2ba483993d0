"""Root pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from property_access import AccessorSettings, PropertyAccessor, reset_default_accessor
from property_access.config.settings import CACHE_MAX_ENTRIES_ENV, DYNAMIC_FAST_PATH_ENV
from tests.helpers.sample_objects import InstrumentedMetadata


@pytest.fixture(autouse=True)
def clean_accessor_environment(monkeypatch):
    """Keep environment settings and the process-wide accessor isolated per test."""
    monkeypatch.delenv(CACHE_MAX_ENTRIES_ENV, raising=False)
    monkeypatch.delenv(DYNAMIC_FAST_PATH_ENV, raising=False)
    reset_default_accessor()
    yield
    reset_default_accessor()


@pytest.fixture
def instrumented_metadata() -> InstrumentedMetadata:
    """Provide a metadata provider that counts scans."""
    return InstrumentedMetadata()


@pytest.fixture
def accessor(instrumented_metadata) -> PropertyAccessor:
    """Provide an accessor with default settings over instrumented metadata."""
    return PropertyAccessor(metadata=instrumented_metadata, settings=AccessorSettings())


@pytest.fixture
def accessor_factory():
    """Provide a factory for accessors with custom metadata or settings."""

    def factory(metadata=None, **settings) -> PropertyAccessor:
        return PropertyAccessor(metadata=metadata, settings=AccessorSettings(**settings))

    return factory
