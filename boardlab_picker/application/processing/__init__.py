# boardlab_picker/application/processing/__init__.py

"""Matching, identity keys, constraints and reconciliation"""

# Local imports
from boardlab_picker.application.processing.constraints import PickConstraints
from boardlab_picker.application.processing.constraints import filter_candidates
from boardlab_picker.application.processing.constraints import matches_constraints
from boardlab_picker.application.processing.history_updates import HistoryResolver
from boardlab_picker.application.processing.history_updates import HistoryUpdates
from boardlab_picker.application.processing.history_updates import collect_history_updates
from boardlab_picker.application.processing.history_updates import to_unresolved_board
from boardlab_picker.application.processing.identity_keys import board_identity_equals
from boardlab_picker.application.processing.identity_keys import create_board_key
from boardlab_picker.application.processing.identity_keys import create_port_key
from boardlab_picker.application.processing.identity_keys import port_identity_equals
from boardlab_picker.application.processing.identity_keys import revive_board
from boardlab_picker.application.processing.identity_keys import revive_port
from boardlab_picker.application.processing.name_matcher import BoardNameMatcher
from boardlab_picker.application.processing.name_matcher import find_board_history_matches
from boardlab_picker.application.processing.name_matcher import match_board_by_name
from boardlab_picker.application.processing.reconciler import BoardReconciler
from boardlab_picker.application.processing.reconciler import PortReconciler
from boardlab_picker.application.processing.reconciler import Reconciler

__all__ = [
    "BoardNameMatcher",
    "BoardReconciler",
    "HistoryResolver",
    "HistoryUpdates",
    "PickConstraints",
    "PortReconciler",
    "Reconciler",
    "board_identity_equals",
    "collect_history_updates",
    "create_board_key",
    "create_port_key",
    "filter_candidates",
    "find_board_history_matches",
    "match_board_by_name",
    "matches_constraints",
    "port_identity_equals",
    "revive_board",
    "revive_port",
    "to_unresolved_board",
]
