# boardlab_picker/adapters/__init__.py

"""External adapters for the board picker"""
