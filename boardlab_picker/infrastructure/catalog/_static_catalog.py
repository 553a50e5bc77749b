# boardlab_picker/infrastructure/catalog/_static_catalog.py

"""Catalog providers backed by fixed snapshots"""

# Standard library imports
from collections.abc import Iterable
from json import load
from logging import getLogger

# Third party imports
from pydantic import TypeAdapter

# Local imports
from boardlab_picker.application.processing.identity_keys import create_port_key
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import DetectedPort
from boardlab_picker.core.types.aliases import DetectedPorts
from boardlab_picker.core.types.aliases import Listener
from boardlab_picker.core.types.aliases import Unsubscribe

logger = getLogger(__name__)

_DETECTED_PORTS_ADAPTER = TypeAdapter(list[DetectedPort])
_BOARDS_ADAPTER = TypeAdapter(list[BoardIdentifier])


def index_detected_ports(detected_ports: Iterable[DetectedPort]) -> DetectedPorts:
    """Key detected ports by port key; a later duplicate replaces the earlier entry"""
    return {create_port_key(detected_port.port): detected_port for detected_port in detected_ports}


class StaticCatalog:
    """Catalog provider whose snapshot is replaced explicitly"""

    def __init__(self, detected_ports: Iterable[DetectedPort] = ()) -> None:
        self._detected_ports = index_detected_ports(detected_ports)
        self._listeners: list[Listener] = []

    def detected_ports(self) -> DetectedPorts:
        """Current snapshot, in discovery order"""
        return dict(self._detected_ports)

    def set_detected_ports(self, detected_ports: Iterable[DetectedPort]) -> None:
        """Replace the snapshot and notify listeners"""
        self._detected_ports = index_detected_ports(detected_ports)
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Catalog listener failed")

    def on_did_change(self, listener: Listener) -> Unsubscribe:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe


def load_detected_ports(path: str) -> list[DetectedPort]:
    """Read a JSON list of detected ports

    Each entry has the shape ``{"port": {"protocol": ..., "address": ...},
    "boards": [{"name": ..., "fqbn": ...}]}``.

    Raises:
        OSError: If the file cannot be read
        ValueError: If the document is not valid JSON or does not validate
    """
    with open(path, "r", encoding="utf-8") as f:
        document = load(f)
    return _DETECTED_PORTS_ADAPTER.validate_python(document)


def load_boards(path: str) -> list[BoardIdentifier]:
    """Read a JSON list of boards

    Raises:
        OSError: If the file cannot be read
        ValueError: If the document is not valid JSON or does not validate
    """
    with open(path, "r", encoding="utf-8") as f:
        document = load(f)
    return _BOARDS_ADAPTER.validate_python(document)
