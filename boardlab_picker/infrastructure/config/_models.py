# boardlab_picker/infrastructure/config/_models.py

"""Pydantic models for configuration with validation"""

# Standard library imports
from logging import getLogger
from pathlib import Path

# Third party imports
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationError
from pydantic import model_validator

# Local imports
from boardlab_picker.core.types.json import JSONDict

logger = getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "boardlab_picker.json"


class MatchingConfig(BaseModel):
    """Board name matching configuration"""

    min_fuzzy_score: float = Field(
        0.45, ge=0.0, le=1.0, description="Minimum similarity accepted for a fuzzy match"
    )
    search_threshold: float = Field(
        0.6, ge=0.0, le=1.0, description="Maximum distance reported by the approximate search"
    )
    normalized_score: float = Field(
        0.95, ge=0.0, le=1.0, description="Score given to compact-name matches"
    )


class HistoryConfig(BaseModel):
    """Pinned/recent history configuration"""

    max_recent: int = Field(10, ge=1, description="Recent entries retained per domain")
    max_pinned: int | None = Field(None, ge=1, description="Pinned entries retained, None = all")
    history_file: str = Field(
        ".boardlab_history.json", description="JSON file holding persisted history"
    )


class PresentationConfig(BaseModel):
    """Reconciled list configuration"""

    recent_display_limit: int = Field(
        3, ge=0, description="Recent entries shown, independent of retention"
    )


class LoggingConfig(BaseModel):
    """Logging configuration"""

    debug: bool = Field(False, description="Enable debug logging")
    log_file: str | None = Field(None, description="Log file path")


class AppConfig(BaseModel):
    """Root application configuration model"""

    matching: MatchingConfig = Field(default_factory=MatchingConfig)
    history: HistoryConfig = Field(default_factory=HistoryConfig)
    presentation: PresentationConfig = Field(default_factory=PresentationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @model_validator(mode="after")
    def validate_display_within_retention(self) -> "AppConfig":
        """Showing more recent entries than are retained is a misconfiguration"""
        if self.presentation.recent_display_limit > self.history.max_recent:
            raise ValueError(
                f"presentation.recent_display_limit ({self.presentation.recent_display_limit}) "
                f"exceeds history.max_recent ({self.history.max_recent})"
            )
        return self

    @classmethod
    def load(cls, config_path: Path | str | None = None) -> "AppConfig":
        """Load configuration from JSON file with defaults

        Args:
            config_path: Path to configuration JSON file

        Returns:
            Validated AppConfig instance
        """
        # Standard library imports
        import json

        if isinstance(config_path, str):
            config_path = Path(config_path)

        # If no path provided, try the default file in the current directory
        if config_path is None:
            config_path = Path(DEFAULT_CONFIG_FILENAME)
            if not config_path.exists():
                return cls()

        if not config_path.exists():
            logger.warning(f"Config file {config_path} not found. Using defaults.")
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (OSError, ValueError, ValidationError) as e:
            logger.warning(f"Failed to load config from {config_path}: {e}. Using defaults.")
            return cls()

    def to_dict(self) -> JSONDict:
        """Convert to dictionary"""
        return self.model_dump()
