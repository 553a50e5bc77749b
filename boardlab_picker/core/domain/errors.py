# boardlab_picker/core/domain/errors.py

"""Errors surfaced to callers of history mutations"""


class HistoryPersistenceError(Exception):
    """Raised when a pin/unpin/remove could not be persisted

    The in-memory history is left unchanged so the caller can retry or tell
    the user that the edit did not stick.
    """

    def __init__(self, storage_key: str, reason: str) -> None:
        self.storage_key = storage_key
        self.reason = reason
        super().__init__(f"Failed to persist history '{storage_key}': {reason}")
