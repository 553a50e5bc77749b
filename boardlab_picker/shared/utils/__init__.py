# boardlab_picker/shared/utils/__init__.py

"""Shared utility functions for name normalization and FQBN handling"""

# Local imports
from boardlab_picker.shared.utils.fqbn_utils import is_valid_fqbn
from boardlab_picker.shared.utils.fqbn_utils import matches_platform_id
from boardlab_picker.shared.utils.fqbn_utils import platform_id_from_fqbn
from boardlab_picker.shared.utils.fqbn_utils import sanitize_fqbn
from boardlab_picker.shared.utils.text_utils import ascii_fold
from boardlab_picker.shared.utils.text_utils import compact_board_name
from boardlab_picker.shared.utils.text_utils import normalize_board_name

__all__ = [
    # Text utilities
    "ascii_fold",
    "compact_board_name",
    "normalize_board_name",
    # FQBN utilities
    "is_valid_fqbn",
    "matches_platform_id",
    "platform_id_from_fqbn",
    "sanitize_fqbn",
]
