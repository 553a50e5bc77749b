# boardlab_picker/core/domain/__init__.py

"""Domain models for board and port identities"""

# Local imports
from boardlab_picker.core.domain.enums import ItemAction
from boardlab_picker.core.domain.enums import MatchKind
from boardlab_picker.core.domain.enums import Section
from boardlab_picker.core.domain.errors import HistoryPersistenceError
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import BoardPickCandidate
from boardlab_picker.core.domain.identity import DetectedPort
from boardlab_picker.core.domain.identity import PlatformRef
from boardlab_picker.core.domain.identity import Port
from boardlab_picker.core.domain.identity import PortPickCandidate
from boardlab_picker.core.domain.match_result import BoardNameMatch
from boardlab_picker.core.domain.presentation import HistoryOnlyItem
from boardlab_picker.core.domain.presentation import LiveItem
from boardlab_picker.core.domain.presentation import PlaceholderItem

__all__ = [
    "BoardIdentifier",
    "BoardNameMatch",
    "BoardPickCandidate",
    "DetectedPort",
    "HistoryOnlyItem",
    "HistoryPersistenceError",
    "ItemAction",
    "LiveItem",
    "MatchKind",
    "PlaceholderItem",
    "PlatformRef",
    "Port",
    "PortPickCandidate",
    "Section",
]
