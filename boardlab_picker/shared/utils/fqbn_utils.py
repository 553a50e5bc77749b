# boardlab_picker/shared/utils/fqbn_utils.py

"""Fully qualified board name (FQBN) helpers

An FQBN has the form ``vendor:arch:board[:option=value,...]``. The first three
segments identify the board; the optional fourth segment carries board
configuration and is not part of the board's identity.
"""

# Standard library imports
from re import compile

_SEGMENT_RE = compile(r"^[A-Za-z0-9_.\-]+$")
_OPTION_RE = compile(r"^[A-Za-z0-9_.\-]+=[^,=]*$")


def _split_fqbn(fqbn: str | None) -> tuple[str, str, str, str | None] | None:
    """Split an FQBN into vendor, arch, board and raw options

    Args:
        fqbn: Candidate FQBN string

    Returns:
        Tuple of segments, or None when the string is not a valid FQBN
    """
    if not fqbn:
        return None

    segments = fqbn.strip().split(":", 3)
    if len(segments) < 3:
        return None

    vendor, arch, board = segments[0], segments[1], segments[2]
    if not all(_SEGMENT_RE.match(segment) for segment in (vendor, arch, board)):
        return None

    options = segments[3] if len(segments) == 4 else None
    if options:
        if not all(_OPTION_RE.match(option) for option in options.split(",")):
            return None

    return vendor, arch, board, options


def is_valid_fqbn(fqbn: str | None) -> bool:
    """Check whether a string parses as an FQBN"""
    return _split_fqbn(fqbn) is not None


def sanitize_fqbn(fqbn: str | None) -> str | None:
    """Strip configuration options from an FQBN

    Args:
        fqbn: FQBN that may carry options (``arduino:avr:uno:cpu=atmega328``)

    Returns:
        ``vendor:arch:board`` or None if the input is not a valid FQBN
    """
    parts = _split_fqbn(fqbn)
    if parts is None:
        return None
    vendor, arch, board, _ = parts
    return f"{vendor}:{arch}:{board}"


def platform_id_from_fqbn(fqbn: str | None) -> str | None:
    """Extract the ``vendor:arch`` platform id from an FQBN

    Examples:
        >>> platform_id_from_fqbn("arduino:mbed_giga:giga:foo=bar")
        'arduino:mbed_giga'
    """
    parts = _split_fqbn(fqbn)
    if parts is None:
        return None
    vendor, arch, _, _ = parts
    return f"{vendor}:{arch}"


def matches_platform_id(fqbn: str | None, platform_id: str) -> bool:
    """Check whether an FQBN belongs to the given platform"""
    return platform_id_from_fqbn(fqbn) == platform_id
