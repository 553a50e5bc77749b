# boardlab_picker/core/types/aliases.py

"""Type aliases for identity keys, catalogs and constraint predicates."""

# Standard library imports
from collections.abc import Awaitable
from collections.abc import Callable

# Local imports
from boardlab_picker.core.domain.identity import DetectedPort

# Opaque identity keys
type PortKey = str  # arduino+serial:///dev/ttyACM0
type BoardKey = str  # fqbn:arduino:avr:uno or name:Arduino Uno

# Live catalog snapshot, keyed by port key in discovery order
type DetectedPorts = dict[PortKey, DetectedPort]

# Constraint predicate; may be synchronous or asynchronous
type Filter[T] = Callable[[T], bool | Awaitable[bool]]

# History listener
type Listener = Callable[[], None]

# Cancels a listener subscription
type Unsubscribe = Callable[[], None]

__all__ = [
    "PortKey",
    "BoardKey",
    "DetectedPorts",
    "Filter",
    "Listener",
    "Unsubscribe",
]
