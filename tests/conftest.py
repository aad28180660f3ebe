"""Pytest configuration and fixtures."""

import pytest

from termfields import FieldConfig, FieldManager, MemoryDriver


@pytest.fixture
def driver():
    """Initialized 80x24 in-memory driver."""
    d = MemoryDriver(width=80, height=24)
    d.init()
    yield d
    d.close()


@pytest.fixture
def closed_driver():
    """In-memory driver that was never initialized."""
    return MemoryDriver(width=80, height=24)


@pytest.fixture
def manager(driver):
    return FieldManager(driver)


@pytest.fixture
def strict_manager(driver):
    return FieldManager(driver, FieldConfig(strict_move=True))
