# boardlab_picker/shared/utils/text_utils.py

"""Text normalization for board name comparison"""

# Standard library imports
from re import compile

# Third party imports
from unidecode import unidecode

_NON_ALNUM_RUN = compile(r"[^a-z0-9]+")


def ascii_fold(text: str) -> str:
    """Convert accented characters to their ASCII equivalents

    Args:
        text: Input text with potential accented characters

    Returns:
        Text with all accented characters converted to ASCII
    """
    if not text:
        return ""
    return unidecode(text)


def _fold_alphanumerics(text: str) -> str:
    """ASCII-fold letters and digits; every other character becomes a space

    Symbols such as ``™`` or ``®`` transliterate to letters ("tm", "r"), so
    they are turned into separators before folding.
    """
    return "".join(ascii_fold(char) if char.isalnum() else " " for char in text)


def normalize_board_name(name: str) -> str:
    """Normalize a board name for punctuation, case and spacing tolerant equality

    Pipeline:
    1. Letters and digits Unicode → ASCII (é → e), symbols → space (™ → " ")
    2. Lowercase
    3. Every run of characters outside [a-z0-9] becomes one space
    4. Trim

    Examples:
        >>> normalize_board_name("Arduino  Uno!")
        'arduino uno'

    Args:
        name: Free-form board name

    Returns:
        Normalized name; empty when the name has no alphanumeric characters
    """
    if not name:
        return ""
    return _NON_ALNUM_RUN.sub(" ", _fold_alphanumerics(name).lower()).strip()


def compact_board_name(name: str) -> str:
    """Lowercase a board name and drop every non-alphanumeric character

    Catches variants the normalized form still keeps apart, such as
    "ArduinoUno" vs "Arduino-Uno".

    Args:
        name: Free-form board name

    Returns:
        Compact name without any separators
    """
    if not name:
        return ""
    return _NON_ALNUM_RUN.sub("", _fold_alphanumerics(name).lower())
