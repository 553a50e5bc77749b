# boardlab_picker/infrastructure/config/__init__.py

"""Configuration infrastructure for the board picker.

This module manages configuration loading, validation, and models.
"""

# Local imports
from boardlab_picker.infrastructure.config._loader import ConfigLoader
from boardlab_picker.infrastructure.config._loader import get_config
from boardlab_picker.infrastructure.config._loader import reset_config
from boardlab_picker.infrastructure.config._models import AppConfig
from boardlab_picker.infrastructure.config._models import HistoryConfig
from boardlab_picker.infrastructure.config._models import LoggingConfig
from boardlab_picker.infrastructure.config._models import MatchingConfig
from boardlab_picker.infrastructure.config._models import PresentationConfig

__all__ = [
    "AppConfig",
    "ConfigLoader",
    "get_config",
    "reset_config",
    "HistoryConfig",
    "LoggingConfig",
    "MatchingConfig",
    "PresentationConfig",
]
