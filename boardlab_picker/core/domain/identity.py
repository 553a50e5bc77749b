# boardlab_picker/core/domain/identity.py

"""Identity models for boards and communication ports

Only ``Port.protocol``/``Port.address`` and ``BoardIdentifier.fqbn`` identify
a device. Labels, names and properties are display or matching data and may
change between catalog refreshes.
"""

# Standard library imports
from re import IGNORECASE
from re import compile

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

# Local imports
from boardlab_picker.shared.utils.fqbn_utils import platform_id_from_fqbn

_DEPRECATED_RE = compile(r"^\s*\[deprecated", IGNORECASE)


class Port(BaseModel):
    """A communication port reported by a discovery"""

    model_config = ConfigDict(frozen=True)

    protocol: str = Field(min_length=1)
    address: str = Field(min_length=1)
    label: str = Field(default="", description="Human readable label, e.g. 'COM3'")
    protocol_label: str = Field(default="", description="e.g. 'Serial Port (USB)'")
    hardware_id: str = Field(default="", description="Serial number or similar, if any")
    properties: dict[str, str] = Field(
        default_factory=dict, description="Discovery properties (vid, pid, ...)"
    )

    @property
    def display_label(self) -> str:
        """Label to show, falling back to the address"""
        return self.label or self.address


class PlatformRef(BaseModel):
    """Platform summary attached to a board"""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    version: str | None = None

    @property
    def is_deprecated(self) -> bool:
        """Deprecated platforms advertise it as a ``[DEPRECATED`` name prefix"""
        return bool(self.name and _DEPRECATED_RE.match(self.name))


class BoardIdentifier(BaseModel):
    """A board, either resolved (has an FQBN) or a name-only placeholder"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    fqbn: str | None = None
    platform: PlatformRef | None = None

    @model_validator(mode="after")
    def validate_has_identity(self) -> "BoardIdentifier":
        """A board without an FQBN is identified by its name alone"""
        if not (self.fqbn or "").strip() and not self.name.strip():
            raise ValueError("board needs a non-blank name or fqbn")
        return self

    @property
    def is_resolved(self) -> bool:
        """Whether the board carries a structured identifier"""
        return bool((self.fqbn or "").strip())

    @property
    def platform_id(self) -> str | None:
        """Platform id from the platform summary or derived from the FQBN"""
        if self.platform is not None and self.platform.id:
            return self.platform.id
        return platform_id_from_fqbn(self.fqbn)

    @property
    def display_label(self) -> str:
        """Label to show, falling back to the FQBN"""
        return self.name or self.fqbn or ""


class DetectedPort(BaseModel):
    """A live port together with the boards recognised on it"""

    model_config = ConfigDict(frozen=True)

    port: Port
    boards: list[BoardIdentifier] = Field(default_factory=list)


class PortPickCandidate(BaseModel):
    """Value handed to port constraints"""

    model_config = ConfigDict(frozen=True)

    port: Port
    detected_port: DetectedPort | None = Field(
        default=None, description="None for history entries that are not detected"
    )


class BoardPickCandidate(BaseModel):
    """Value handed to board constraints"""

    model_config = ConfigDict(frozen=True)

    board: BoardIdentifier
    port: Port | None = Field(default=None, description="Port the board was detected on")
