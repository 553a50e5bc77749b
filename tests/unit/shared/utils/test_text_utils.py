# tests/unit/shared/utils/test_text_utils.py

"""Tests for board name normalization"""

# Third party imports
from hypothesis import given
from hypothesis import strategies as st

# Local imports
from boardlab_picker.shared.utils.text_utils import ascii_fold
from boardlab_picker.shared.utils.text_utils import compact_board_name
from boardlab_picker.shared.utils.text_utils import normalize_board_name


class TestAsciiFold:
    """Test Unicode to ASCII folding"""

    def test_accented_characters(self):
        """Test that accents are removed"""
        assert ascii_fold("Café") == "Cafe"
        assert ascii_fold("Nano Ésp") == "Nano Esp"

    def test_empty(self):
        """Test empty input"""
        assert ascii_fold("") == ""


class TestNormalizeBoardName:
    """Test normalized board names"""

    def test_case_and_punctuation(self):
        """Test that case and punctuation runs collapse to single spaces"""
        assert normalize_board_name("Arduino  Uno!") == "arduino uno"
        assert normalize_board_name("Arduino-Nano_33 BLE") == "arduino nano 33 ble"
        assert normalize_board_name("  ESP32 (Dev Module)  ") == "esp32 dev module"

    def test_trailing_whitespace(self):
        """Test that trailing whitespace is ignored"""
        assert normalize_board_name("arduino mega ") == normalize_board_name("Arduino Mega")

    def test_accents(self):
        """Test that accented names compare equal to their ASCII form"""
        assert normalize_board_name("Placa Señal") == "placa senal"

    def test_symbols_become_separators(self):
        """Test that symbols are not transliterated into letters"""
        assert normalize_board_name("Arduino™ Uno") == "arduino uno"
        assert normalize_board_name("Board® Pro") == "board pro"
        assert normalize_board_name("®") == ""

    def test_no_alphanumerics(self):
        """Test names without letters or digits normalize to empty"""
        assert normalize_board_name("") == ""
        assert normalize_board_name("   ") == ""
        assert normalize_board_name("--!!--") == ""

    @given(st.text())
    def test_idempotent(self, name):
        """Normalizing twice is the same as normalizing once"""
        once = normalize_board_name(name)
        assert normalize_board_name(once) == once

    @given(st.text())
    def test_output_alphabet(self, name):
        """Output only contains lowercase letters, digits and single spaces"""
        result = normalize_board_name(name)
        assert result == result.strip()
        assert "  " not in result
        assert all(c.isascii() and (c.islower() or c.isdigit() or c == " ") for c in result)


class TestCompactBoardName:
    """Test compact board names"""

    def test_separators_removed(self):
        """Test that separators are dropped entirely"""
        assert compact_board_name("Arduino-Uno") == "arduinouno"
        assert compact_board_name("ArduinoUno") == "arduinouno"
        assert compact_board_name("Arduino Foo Bar") == "arduinofoobar"

    def test_empty(self):
        """Test empty input"""
        assert compact_board_name("") == ""

    def test_symbols_dropped(self):
        """Test that symbols do not add letters to the compact form"""
        assert compact_board_name("Arduino™Uno") == "arduinouno"

    @given(st.text())
    def test_idempotent(self, name):
        """Compacting twice is the same as compacting once"""
        once = compact_board_name(name)
        assert compact_board_name(once) == once

    @given(st.text())
    def test_equals_normalized_without_spaces(self, name):
        """Compact name is the normalized name with its spaces removed"""
        assert compact_board_name(name) == normalize_board_name(name).replace(" ", "")
