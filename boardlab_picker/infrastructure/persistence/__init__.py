# boardlab_picker/infrastructure/persistence/__init__.py

"""History persistence: stores and their mementos"""

# Local imports
from boardlab_picker.infrastructure.persistence._history_store import HistoryStore
from boardlab_picker.infrastructure.persistence._history_store import NoopHistory
from boardlab_picker.infrastructure.persistence._history_store import history_storage_key
from boardlab_picker.infrastructure.persistence._history_store import open_histories
from boardlab_picker.infrastructure.persistence._memento import InMemoryMemento
from boardlab_picker.infrastructure.persistence._memento import JsonFileMemento

__all__ = [
    "HistoryStore",
    "NoopHistory",
    "InMemoryMemento",
    "JsonFileMemento",
    "history_storage_key",
    "open_histories",
]
