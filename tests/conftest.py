"""Pytest configuration for smart-home tests."""

import logging

import pytest

from smart_home.home import SmartHome
from smart_home.iot.things.door_lock import DoorLock
from smart_home.iot.things.light import Light
from smart_home.iot.things.thermostat import Thermostat
from smart_home.utils.config_manager import ConfigManager


@pytest.fixture
def light():
    return Light()


@pytest.fixture
def thermostat():
    return Thermostat()


@pytest.fixture
def door_lock():
    return DoorLock()


@pytest.fixture
def home():
    return SmartHome()


@pytest.fixture
def reset_config_manager():
    """Drop the shared ConfigManager so each test loads its own file."""
    ConfigManager._instance = None
    yield
    ConfigManager._instance = None


@pytest.fixture
def restore_root_logger():
    """Remove the handlers installed by setup_logging and restore the root level."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
