# tests/conftest.py

"""Pytest configuration and fixtures for test suite"""

# Standard library imports
from logging import getLogger

# Third party imports
import pytest

# Local imports
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import DetectedPort
from boardlab_picker.core.domain.identity import PlatformRef
from boardlab_picker.core.domain.identity import Port
from boardlab_picker.infrastructure.config import AppConfig
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.config import reset_config


# Custom markers
def pytest_configure(config):
    """Register custom markers"""
    config.addinivalue_line("markers", "slow: mark test as slow running")


@pytest.fixture(autouse=True, scope="function")
def basic_isolation():
    """Minimal isolation for most tests - reset logging and cached configuration"""
    # Reset logging to avoid handler conflicts
    root_logger = getLogger()
    # Remove all handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    # Reset logging level
    root_logger.setLevel(30)  # WARNING level

    reset_config()

    yield

    reset_config()


@pytest.fixture
def default_config() -> ConfigLoader:
    """Configuration with built-in defaults, independent of the working directory"""
    return ConfigLoader.from_app_config(AppConfig())


@pytest.fixture
def uno() -> BoardIdentifier:
    return BoardIdentifier(
        name="Arduino Uno",
        fqbn="arduino:avr:uno",
        platform=PlatformRef(id="arduino:avr", name="Arduino AVR Boards"),
    )


@pytest.fixture
def giga() -> BoardIdentifier:
    return BoardIdentifier(
        name="Arduino Giga R1 WiFi",
        fqbn="arduino:mbed_giga:giga",
        platform=PlatformRef(id="arduino:mbed_giga", name="Arduino Mbed OS Giga Boards"),
    )


@pytest.fixture
def serial_port() -> Port:
    return Port(protocol="serial", address="/dev/ttyACM0", label="/dev/ttyACM0")


@pytest.fixture
def detected_uno(serial_port: Port, uno: BoardIdentifier) -> DetectedPort:
    return DetectedPort(port=serial_port, boards=[uno])
