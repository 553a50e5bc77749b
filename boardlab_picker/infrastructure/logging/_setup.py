# boardlab_picker/infrastructure/logging/_setup.py

"""Logging configuration and setup for CLI"""

# Standard library imports
from datetime import datetime
from logging import DEBUG
from logging import FileHandler
from logging import Formatter
from logging import INFO
from logging import StreamHandler
from logging import getLevelName
from logging import getLogger
from os import makedirs


def get_default_log_path(log_dir: str = "logs") -> str:
    """Generate default log file path with timestamp"""
    makedirs(log_dir, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{log_dir}/boardlab_picker_{timestamp}.log"


def set_up_logging(
    log_file: str | None = None,
    log_level: str = "INFO",
    silent: bool = False,
    disable_file_logging: bool = True,
) -> str | None:
    """Configure logging for the application

    Args:
        log_file: Path to log file (auto-generated if None and file logging enabled)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        silent: If True, suppress console output
        disable_file_logging: If True, disable file logging unless log_file is given

    Returns:
        Path to log file if file logging is enabled, None otherwise
    """
    level = getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = INFO

    root_logger = getLogger()
    root_logger.setLevel(level)

    # Clear any existing handlers
    root_logger.handlers = []

    console_formatter = Formatter("%(asctime)s - %(levelname)s - %(message)s")
    file_formatter = Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not silent:
        console_handler = StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

    if log_file is not None or not disable_file_logging:
        if log_file is None:
            log_file = get_default_log_path()

        file_handler = FileHandler(log_file)
        file_handler.setLevel(DEBUG)  # Always log debug to file
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)
        # The file handler needs debug records to reach it
        root_logger.setLevel(min(level, DEBUG))

        getLogger(__name__).info(f"Logging to file: {log_file}")
        return log_file

    return None
