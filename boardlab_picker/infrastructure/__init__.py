# boardlab_picker/infrastructure/__init__.py

"""System infrastructure components for configuration, logging and persistence."""

# Local imports
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.persistence import HistoryStore
from boardlab_picker.infrastructure.persistence import InMemoryMemento
from boardlab_picker.infrastructure.persistence import JsonFileMemento

__all__ = ["ConfigLoader", "HistoryStore", "InMemoryMemento", "JsonFileMemento"]
