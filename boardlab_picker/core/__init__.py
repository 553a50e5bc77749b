# boardlab_picker/core/__init__.py

"""Core domain models and type definitions"""
