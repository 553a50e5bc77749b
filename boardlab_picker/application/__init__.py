# boardlab_picker/application/__init__.py

"""Application layer: matching, reconciliation and picker services"""
