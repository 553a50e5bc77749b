# boardlab_picker/infrastructure/catalog/__init__.py

"""Catalog providers and catalog file readers"""

# Local imports
from boardlab_picker.infrastructure.catalog._static_catalog import StaticCatalog
from boardlab_picker.infrastructure.catalog._static_catalog import index_detected_ports
from boardlab_picker.infrastructure.catalog._static_catalog import load_boards
from boardlab_picker.infrastructure.catalog._static_catalog import load_detected_ports

__all__ = ["StaticCatalog", "index_detected_ports", "load_boards", "load_detected_ports"]
