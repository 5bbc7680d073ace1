"""
Тесты для модуля Base Conversion

Проверяет:
1. Base-36 кодирование/декодирование (алфавит, регистр, ноль)
2. Base-16 кодирование/декодирование (префикс, padding, width)
3. InvalidDigit для символов вне алфавита
4. Ширину payload для 160 бит
"""

import pytest

from icap.core.math.base_conversion import (
    BASE36_ALPHABET,
    InvalidDigit,
    base36_digit_value,
    base36_to_int,
    base36_width,
    bytes_to_base36,
    hex_to_int,
    int_to_base36,
    int_to_hex,
)

VECTOR_HEX = "730aea2b39aa2cf6b24829b3d39dc9a1f9297b88"
VECTOR_BASE36 = "DFRZLRUTFTFY4EVINAHYF7TQ6MACYH4"


# =============================================================================
# BASE-36
# =============================================================================


class TestIntToBase36:
    """Тесты для int_to_base36 / bytes_to_base36"""

    def test_zero(self) -> None:
        assert int_to_base36(0) == "0"

    def test_single_digits(self) -> None:
        assert int_to_base36(9) == "9"
        assert int_to_base36(10) == "A"
        assert int_to_base36(35) == "Z"

    def test_multi_digit(self) -> None:
        assert int_to_base36(36) == "10"
        assert int_to_base36(36**2) == "100"
        assert int_to_base36(1295) == "ZZ"

    def test_output_is_upper_case(self) -> None:
        encoded = int_to_base36(int(VECTOR_HEX, 16))
        assert encoded == encoded.upper()
        assert encoded == VECTOR_BASE36

    def test_no_padding(self) -> None:
        """Ведущие нулевые байты не представлены"""
        assert bytes_to_base36(b"\x00\x00\x01") == "1"
        assert bytes_to_base36(bytes(20)) == "0"

    def test_bytes_and_int_agree(self) -> None:
        raw = bytes.fromhex(VECTOR_HEX)
        assert bytes_to_base36(raw) == bytes_to_base36(int(VECTOR_HEX, 16))

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            int_to_base36(-1)

    def test_non_int_rejected(self) -> None:
        with pytest.raises(TypeError):
            int_to_base36("10")  # type: ignore[arg-type]
        with pytest.raises(TypeError):
            int_to_base36(True)


class TestBase36ToInt:
    """Тесты для base36_to_int"""

    def test_basic(self) -> None:
        assert base36_to_int("0") == 0
        assert base36_to_int("Z") == 35
        assert base36_to_int("10") == 36

    def test_case_insensitive(self) -> None:
        assert base36_to_int("zz") == base36_to_int("ZZ") == 1295

    def test_leading_zeros_ignored(self) -> None:
        assert base36_to_int("0001") == 1

    def test_vector(self) -> None:
        assert base36_to_int(VECTOR_BASE36) == int(VECTOR_HEX, 16)

    def test_invalid_character(self) -> None:
        with pytest.raises(InvalidDigit) as exc_info:
            base36_to_int("A-B")
        assert exc_info.value.char == "-"
        assert exc_info.value.position == 1
        assert exc_info.value.alphabet == "base36"

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidDigit, match="Empty string"):
            base36_to_int("")

    def test_invalid_digit_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            base36_to_int("!")

    def test_roundtrip_alphabet(self) -> None:
        for value in range(36**2):
            assert base36_to_int(int_to_base36(value)) == value


class TestBase36DigitValue:
    """Тесты для base36_digit_value"""

    def test_full_alphabet(self) -> None:
        for expected, char in enumerate(BASE36_ALPHABET):
            assert base36_digit_value(char) == expected

    def test_lower_case_rejected(self) -> None:
        with pytest.raises(InvalidDigit):
            base36_digit_value("a")


class TestBase36Width:
    """Тесты для base36_width"""

    def test_160_bits(self) -> None:
        assert base36_width(160) == 31

    def test_small_widths(self) -> None:
        assert base36_width(8) == 2  # 255 = "73"
        assert base36_width(1) == 1

    def test_non_positive_rejected(self) -> None:
        with pytest.raises(ValueError, match="bits must be positive"):
            base36_width(0)


# =============================================================================
# BASE-16
# =============================================================================


class TestHexToInt:
    """Тесты для hex_to_int"""

    def test_with_and_without_prefix(self) -> None:
        assert hex_to_int("0xff") == 255
        assert hex_to_int("ff") == 255

    def test_case_insensitive(self) -> None:
        assert hex_to_int("0xFF") == hex_to_int("0xff")

    def test_invalid_character_position(self) -> None:
        with pytest.raises(InvalidDigit) as exc_info:
            hex_to_int("0x1g")
        assert exc_info.value.char == "g"
        assert exc_info.value.position == 3
        assert exc_info.value.alphabet == "base16"

    def test_empty_digits_rejected(self) -> None:
        with pytest.raises(InvalidDigit):
            hex_to_int("0x")
        with pytest.raises(InvalidDigit):
            hex_to_int("")


class TestIntToHex:
    """Тесты для int_to_hex"""

    def test_lower_case_no_prefix(self) -> None:
        assert int_to_hex(0xABC) == "abc"

    def test_width_padding(self) -> None:
        assert int_to_hex(255, width=4) == "00ff"
        assert int_to_hex(0, width=40) == "0" * 40

    def test_exact_width(self) -> None:
        assert int_to_hex(0xFFFF, width=4) == "ffff"

    def test_overflow_not_truncated(self) -> None:
        with pytest.raises(ValueError, match="exceeds width"):
            int_to_hex(0x10000, width=4)

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            int_to_hex(-1)

    def test_roundtrip_vector(self) -> None:
        assert int_to_hex(hex_to_int("0x" + VECTOR_HEX), width=40) == VECTOR_HEX
