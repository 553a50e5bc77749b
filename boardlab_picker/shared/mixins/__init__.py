# boardlab_picker/shared/mixins/__init__.py

"""Reusable mixins"""

# Local imports
from boardlab_picker.shared.mixins.mixins import ConfigurableMixin

__all__ = ["ConfigurableMixin"]
