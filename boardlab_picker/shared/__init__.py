# boardlab_picker/shared/__init__.py

"""Shared utilities and mixins"""
