# boardlab_picker/application/processing/identity_keys.py

"""Identity key codec for ports and boards

Keys are opaque strings used for persistence and equality. Encoding looks at
identifying fields only (port protocol and address, board FQBN), never at
display labels, so the same device always encodes to the same key. Decoding
revives a minimal stand-in that is good enough to re-display an entry that
is no longer detected.
"""

# Standard library imports
from logging import getLogger
from urllib.parse import quote
from urllib.parse import unquote

# Local imports
from boardlab_picker.core.domain.identity import BoardIdentifier
from boardlab_picker.core.domain.identity import Port
from boardlab_picker.core.types.aliases import BoardKey
from boardlab_picker.core.types.aliases import PortKey
from boardlab_picker.shared.utils.fqbn_utils import sanitize_fqbn

logger = getLogger(__name__)

PORT_KEY_PREFIX = "arduino+"
PORT_KEY_SEPARATOR = "://"
BOARD_FQBN_PREFIX = "fqbn:"
BOARD_NAME_PREFIX = "name:"


# ============================================================================
# Ports
# ============================================================================


def create_port_key(port: Port) -> PortKey:
    """Encode a port as ``arduino+<protocol>://<address>``

    The protocol is percent-quoted so that it can never contain the separator;
    the address is kept verbatim because everything after the first separator
    belongs to it.

    Examples:
        >>> create_port_key(Port(protocol="serial", address="/dev/ttyACM0"))
        'arduino+serial:///dev/ttyACM0'
    """
    return f"{PORT_KEY_PREFIX}{quote(port.protocol, safe='')}{PORT_KEY_SEPARATOR}{port.address}"


def revive_port(port_key: str) -> Port | None:
    """Decode a port key into a minimal port

    Accepts keys produced by ``create_port_key`` and the legacy
    ``protocol:address`` form (``serial:COM1``).

    Args:
        port_key: Key to decode

    Returns:
        Port with protocol and address set, or None for malformed keys
    """
    if not isinstance(port_key, str) or not port_key:
        return None

    if port_key.startswith(PORT_KEY_PREFIX):
        remainder = port_key[len(PORT_KEY_PREFIX) :]
        protocol, separator, address = remainder.partition(PORT_KEY_SEPARATOR)
        if not separator:
            return None
        protocol = unquote(protocol)
    else:
        protocol, separator, address = port_key.partition(":")
        if not separator:
            return None

    if not protocol or not address:
        return None
    return Port(protocol=protocol, address=address)


def port_identity_equals(left: Port, right: Port) -> bool:
    """Two ports are the same device when their keys are equal"""
    return create_port_key(left) == create_port_key(right)


# ============================================================================
# Boards
# ============================================================================


def create_board_key(board: BoardIdentifier) -> BoardKey:
    """Encode a board

    Resolved boards encode their FQBN without configuration options, so the
    same board with different options is one identity. Name-only placeholders
    have nothing but their name and encode that.

    Examples:
        >>> create_board_key(BoardIdentifier(name="Uno", fqbn="arduino:avr:uno:cpu=x"))
        'fqbn:arduino:avr:uno'
        >>> create_board_key(BoardIdentifier(name="Arduino Giga"))
        'name:Arduino Giga'
    """
    raw_fqbn = (board.fqbn or "").strip()
    if raw_fqbn:
        # Unparseable FQBNs still identify the board by their raw text
        return f"{BOARD_FQBN_PREFIX}{sanitize_fqbn(raw_fqbn) or raw_fqbn}"
    return f"{BOARD_NAME_PREFIX}{board.name}"


def revive_board(board_key: str) -> BoardIdentifier | None:
    """Decode a board key into a minimal board

    Every key ``create_board_key`` produces revives, including keys of
    boards whose FQBN does not parse.

    Args:
        board_key: Key to decode

    Returns:
        Board with its FQBN (or name for placeholders), None for malformed keys
    """
    if not isinstance(board_key, str):
        return None

    if board_key.startswith(BOARD_FQBN_PREFIX):
        raw_fqbn = board_key[len(BOARD_FQBN_PREFIX) :].strip()
        if not raw_fqbn:
            return None
        return BoardIdentifier(fqbn=sanitize_fqbn(raw_fqbn) or raw_fqbn)

    if board_key.startswith(BOARD_NAME_PREFIX):
        name = board_key[len(BOARD_NAME_PREFIX) :]
        return BoardIdentifier(name=name) if name.strip() else None

    return None


def board_identity_equals(left: BoardIdentifier, right: BoardIdentifier) -> bool:
    """Two boards are the same when their keys are equal"""
    return create_board_key(left) == create_board_key(right)
