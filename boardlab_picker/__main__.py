#!/usr/bin/env python3
"""
Board Picker - Main Entry Point

This module allows the package to be run as a script:
    python -m boardlab_picker
"""

# Local imports
from boardlab_picker.adapters.cli.main import main

if __name__ == "__main__":
    raise SystemExit(main())
