# boardlab_picker/infrastructure/persistence/_memento.py

"""Persistence collaborators for history key lists"""

# Standard library imports
from asyncio import to_thread
from fcntl import LOCK_EX
from fcntl import LOCK_UN
from fcntl import flock
from json import JSONDecodeError
from json import dump
from json import load
from logging import getLogger
from os import makedirs
from os import replace
from os import unlink
from os.path import dirname
from os.path import exists

# Local imports
from boardlab_picker.core.domain.errors import HistoryPersistenceError
from boardlab_picker.core.types.json import JSONDict
from boardlab_picker.core.types.json import JSONType

logger = getLogger(__name__)


def _as_key_list(value: JSONType) -> list[str]:
    """Keep only string entries of a persisted list"""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


class InMemoryMemento:
    """Memento that keeps everything in process memory"""

    def __init__(self, initial: dict[str, list[str]] | None = None) -> None:
        self._data: dict[str, list[str]] = {
            key: list(items) for key, items in (initial or {}).items()
        }

    def get(self, storage_key: str) -> list[str]:
        return list(self._data.get(storage_key, []))

    async def update(self, storage_key: str, items: list[str]) -> None:
        self._data[storage_key] = list(items)


class JsonFileMemento:
    """Memento backed by a single JSON document

    The document maps storage keys to key lists. Writes hold an exclusive
    ``flock`` on a sibling lock file, re-read the document so that concurrent
    writers of other storage keys are preserved, and replace the file
    atomically.
    """

    __slots__ = ("path", "lock_path")

    def __init__(self, path: str) -> None:
        """Initialize the memento

        Args:
            path: Location of the JSON document; created on first write
        """
        self.path = path
        self.lock_path = f"{path}.lock"

    def _read_document(self) -> JSONDict:
        """Read the document, treating a missing or corrupt file as empty"""
        if not exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                document = load(f)
        except (OSError, JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Ignoring unreadable history file {self.path}: {e}")
            return {}
        if not isinstance(document, dict):
            logger.warning(f"Ignoring history file {self.path}: expected a JSON object")
            return {}
        return document

    def get(self, storage_key: str) -> list[str]:
        """Return the persisted keys for a storage key (empty when unknown)"""
        return _as_key_list(self._read_document().get(storage_key))

    def _write(self, storage_key: str, items: list[str]) -> None:
        directory = dirname(self.path)
        if directory:
            makedirs(directory, exist_ok=True)

        with open(self.lock_path, "a") as lock_file:
            try:
                flock(lock_file.fileno(), LOCK_EX)

                document = self._read_document()
                document[storage_key] = list(items)

                temp_path = f"{self.path}.tmp"
                try:
                    with open(temp_path, "w", encoding="utf-8") as f:
                        dump(document, f, indent=2)
                    replace(temp_path, self.path)
                finally:
                    if exists(temp_path):
                        unlink(temp_path)
            finally:
                flock(lock_file.fileno(), LOCK_UN)

    async def update(self, storage_key: str, items: list[str]) -> None:
        """Durably store the keys for a storage key

        Raises:
            HistoryPersistenceError: If the document could not be written
        """
        try:
            await to_thread(self._write, storage_key, items)
        except OSError as e:
            raise HistoryPersistenceError(storage_key, str(e)) from e
        logger.debug(f"Persisted {len(items)} history entries under '{storage_key}'")
