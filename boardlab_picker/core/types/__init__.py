# boardlab_picker/core/types/__init__.py

"""Type aliases and protocols shared across layers"""
