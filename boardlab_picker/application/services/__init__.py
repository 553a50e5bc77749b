# boardlab_picker/application/services/__init__.py

"""Application services for picker orchestration.

This module provides the service layer that keeps reconciled picker items
current as the catalog and history change.
"""

# Local imports
from boardlab_picker.application.services._picker_service import PickerService
from boardlab_picker.application.services._refresher import LatestWinsRefresher

__all__ = ["LatestWinsRefresher", "PickerService"]
