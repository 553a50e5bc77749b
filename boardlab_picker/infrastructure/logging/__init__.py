# boardlab_picker/infrastructure/logging/__init__.py

"""Logging infrastructure for the board picker.

This module provides centralized logging configuration and setup.
"""

# Local imports
from boardlab_picker.infrastructure.logging._setup import get_default_log_path
from boardlab_picker.infrastructure.logging._setup import set_up_logging as setup_logging

__all__ = ["setup_logging", "get_default_log_path"]
