# tests/unit/shared/mixins/test_mixins.py

"""Tests for the mixins module"""

# Standard library imports
from unittest.mock import MagicMock
from unittest.mock import patch

# Local imports
from boardlab_picker.application.processing.reconciler import PortReconciler
from boardlab_picker.infrastructure.config import AppConfig
from boardlab_picker.infrastructure.config import ConfigLoader
from boardlab_picker.infrastructure.config import PresentationConfig
from boardlab_picker.shared.mixins.mixins import ConfigurableMixin


class TestConfigurableMixin:
    """Test ConfigurableMixin functionality"""

    class DummyConfigurable(ConfigurableMixin):
        """Test class that uses ConfigurableMixin"""

        def __init__(self, config: ConfigLoader | None = None):
            self.config = self._init_config(config)

    def test_init_config_with_provided_config(self):
        """Test initialization with a provided config"""
        mock_config = MagicMock(spec=ConfigLoader)
        instance = self.DummyConfigurable(config=mock_config)
        assert instance.config is mock_config

    @patch("boardlab_picker.shared.mixins.mixins.get_config")
    def test_init_config_with_default(self, mock_get_config):
        """Test initialization with default config"""
        mock_default_config = MagicMock(spec=ConfigLoader)
        mock_get_config.return_value = mock_default_config

        instance = self.DummyConfigurable(config=None)
        assert instance.config is mock_default_config
        mock_get_config.assert_called_once()

    def test_components_read_their_section(self):
        """Test that configurable components pick up their settings"""
        config = ConfigLoader.from_app_config(
            AppConfig(presentation=PresentationConfig(recent_display_limit=7))
        )

        assert PortReconciler(config).recent_display_limit == 7
