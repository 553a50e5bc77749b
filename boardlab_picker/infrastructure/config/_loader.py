# boardlab_picker/infrastructure/config/_loader.py

"""Main configuration loader using Pydantic models"""

# Standard library imports
from logging import getLogger

# Local imports
from boardlab_picker.core.types.json import JSONDict
from boardlab_picker.infrastructure.config._models import AppConfig
from boardlab_picker.infrastructure.config._models import HistoryConfig
from boardlab_picker.infrastructure.config._models import LoggingConfig
from boardlab_picker.infrastructure.config._models import MatchingConfig
from boardlab_picker.infrastructure.config._models import PresentationConfig

logger = getLogger(__name__)


class ConfigLoader:
    """Configuration loader exposing the validated configuration sections"""

    def __init__(self, config_path: str | None = None):
        """Initialize configuration loader

        Args:
            config_path: Path to JSON configuration file, None for auto-detection
        """
        self.config_path = config_path
        self._app_config = AppConfig.load(config_path)

    @classmethod
    def from_app_config(cls, app_config: AppConfig) -> "ConfigLoader":
        """Wrap an already built configuration (used by tests and embedding hosts)"""
        loader = cls.__new__(cls)
        loader.config_path = None
        loader._app_config = app_config
        return loader

    @property
    def config(self) -> JSONDict:
        """Full config as dict"""
        return self._app_config.model_dump()

    @property
    def matching(self) -> MatchingConfig:
        """Matching configuration"""
        return self._app_config.matching

    @property
    def history(self) -> HistoryConfig:
        """History configuration"""
        return self._app_config.history

    @property
    def presentation(self) -> PresentationConfig:
        """Presentation configuration"""
        return self._app_config.presentation

    @property
    def logging(self) -> LoggingConfig:
        """Logging configuration"""
        return self._app_config.logging


# Global default instance
_default_config: ConfigLoader | None = None


def get_config(config_path: str | None = None) -> ConfigLoader:
    """Get configuration loader instance

    Args:
        config_path: Path to configuration file, None for default

    Returns:
        ConfigLoader instance
    """
    global _default_config

    if config_path:
        return ConfigLoader(config_path)

    if _default_config is None:
        _default_config = ConfigLoader()
        logger.debug("Loaded default configuration")

    return _default_config


def reset_config() -> None:
    """Forget the cached default configuration"""
    global _default_config
    _default_config = None
