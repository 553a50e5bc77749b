# boardlab_picker/adapters/cli/__init__.py

"""CLI adapter for the board picker"""

# Local imports
from boardlab_picker.adapters.cli.main import main
from boardlab_picker.adapters.cli.main import render_items
from boardlab_picker.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main", "render_items"]
