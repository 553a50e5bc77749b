# boardlab_picker/__init__.py

"""Board Picker Package

Identity matching and history reconciliation for board and port pickers:
resolves free-form board names against a catalog and merges detected ports
and boards with pinned and recent history into one ranked list.
"""

# Local imports
# High-level API
from boardlab_picker.application.processing import BoardNameMatcher
from boardlab_picker.application.processing import BoardReconciler
from boardlab_picker.application.processing import HistoryResolver
from boardlab_picker.application.processing import PickConstraints
from boardlab_picker.application.processing import PortReconciler
from boardlab_picker.application.processing import create_board_key
from boardlab_picker.application.processing import create_port_key
from boardlab_picker.application.processing import match_board_by_name
from boardlab_picker.application.processing import matches_constraints
from boardlab_picker.application.processing import revive_board
from boardlab_picker.application.processing import revive_port
from boardlab_picker.application.services import LatestWinsRefresher
from boardlab_picker.application.services import PickerService

# Data models
from boardlab_picker.core.domain import BoardIdentifier
from boardlab_picker.core.domain import BoardNameMatch
from boardlab_picker.core.domain import DetectedPort
from boardlab_picker.core.domain import HistoryOnlyItem
from boardlab_picker.core.domain import HistoryPersistenceError
from boardlab_picker.core.domain import ItemAction
from boardlab_picker.core.domain import LiveItem
from boardlab_picker.core.domain import MatchKind
from boardlab_picker.core.domain import PlaceholderItem
from boardlab_picker.core.domain import Port

# Infrastructure
from boardlab_picker.infrastructure.catalog import StaticCatalog
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.persistence import HistoryStore
from boardlab_picker.infrastructure.persistence import InMemoryMemento
from boardlab_picker.infrastructure.persistence import JsonFileMemento

# Version info
__version__ = "0.1.0"

__all__: list[str] = [
    # Matching and reconciliation
    "BoardNameMatcher",
    "BoardReconciler",
    "HistoryResolver",
    "LatestWinsRefresher",
    "PickConstraints",
    "PickerService",
    "PortReconciler",
    "create_board_key",
    "create_port_key",
    "match_board_by_name",
    "matches_constraints",
    "revive_board",
    "revive_port",
    # Data models
    "BoardIdentifier",
    "BoardNameMatch",
    "DetectedPort",
    "HistoryOnlyItem",
    "HistoryPersistenceError",
    "ItemAction",
    "LiveItem",
    "MatchKind",
    "PlaceholderItem",
    "Port",
    # Infrastructure
    "ConfigLoader",
    "HistoryStore",
    "InMemoryMemento",
    "JsonFileMemento",
    "StaticCatalog",
    # Version
    "__version__",
]
