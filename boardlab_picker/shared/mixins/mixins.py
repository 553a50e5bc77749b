# boardlab_picker/shared/mixins/mixins.py

"""Common mixins for reducing code duplication across classes

When to use mixins vs utility functions:
- Mixins: For shared behavior across multiple classes that need instance state
  (e.g., ConfigurableMixin)
- Utils: For standalone functions that transform data without needing instance
  state (e.g., board name normalization, FQBN parsing)
"""

# Local imports
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.config import get_config


class ConfigurableMixin:
    """Mixin for classes that need configuration access

    Provides the standardized config initialization pattern used by:
    - BoardNameMatcher
    - PortReconciler / BoardReconciler
    """

    def _init_config(self, config: ConfigLoader | None = None) -> ConfigLoader:
        """Initialize configuration, using default if not provided

        Args:
            config: Optional ConfigLoader instance

        Returns:
            ConfigLoader instance (provided or default)
        """
        if config is None:
            config = get_config()
        return config
