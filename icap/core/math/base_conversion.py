"""
Base Conversion: целочисленные base-16 / base-36 преобразования

Arbitrary-precision конверсии между int и строковыми представлениями:
- base-36 (алфавит 0-9A-Z, upper case) для ICAP payload
- base-16 (алфавит 0-9a-f, lower case) для raw identifier

ИНВАРИАНТЫ:
1. Конвертер никогда не добавляет padding сам (кроме явного width в int_to_hex)
2. Никакого усечения: значение, не помещающееся в width, отвергается
3. Любой символ вне алфавита → InvalidDigit (никаких частичных результатов)
"""

import string
from typing import Final, Optional, Union

# =============================================================================
# АЛФАВИТЫ
# =============================================================================

BASE36_ALPHABET: Final[str] = string.digits + string.ascii_uppercase
BASE16_ALPHABET: Final[str] = string.digits + "abcdef"

BASE36: Final[int] = len(BASE36_ALPHABET)
BASE16: Final[int] = len(BASE16_ALPHABET)

HEX_PREFIX: Final[str] = "0x"

_BASE36_VALUES: Final[dict] = {ch: i for i, ch in enumerate(BASE36_ALPHABET)}
_BASE16_VALUES: Final[dict] = {ch: i for i, ch in enumerate(BASE16_ALPHABET)}


class InvalidDigit(ValueError):
    """
    Символ вне ожидаемого алфавита при конверсии.

    Attributes:
        char: Невалидный символ (None для пустой строки)
        position: Позиция символа во входной строке
        alphabet: Имя алфавита ('base36' или 'base16')
    """

    def __init__(self, char: Optional[str], position: int, alphabet: str):
        self.char = char
        self.position = position
        self.alphabet = alphabet
        if char is None:
            message = f"Empty string is not a valid {alphabet} number"
        else:
            message = f"Invalid {alphabet} digit {char!r} at position {position}"
        super().__init__(message)


# =============================================================================
# BASE-36
# =============================================================================


def base36_digit_value(char: str, position: int = 0) -> int:
    """
    Числовое значение одного base-36 символа.

    '0'..'9' → 0..9, 'A'..'Z' → 10..35. Регистр важен: lower case отвергается.

    Raises:
        InvalidDigit: Если символ вне 0-9A-Z
    """
    try:
        return _BASE36_VALUES[char]
    except KeyError:
        raise InvalidDigit(char, position, "base36") from None


def _check_non_negative_int(value: int) -> None:
    # bool is an int subclass but never a meaningful identifier
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Value must be non-negative, got {value}")


def int_to_base36(value: int) -> str:
    """
    Кодирование неотрицательного int в base-36.

    Args:
        value: Неотрицательное целое произвольной длины

    Returns:
        Upper case строка без padding и знака; 0 → "0"

    Examples:
        >>> int_to_base36(0)
        '0'
        >>> int_to_base36(35)
        'Z'
        >>> int_to_base36(36)
        '10'
    """
    _check_non_negative_int(value)
    if value == 0:
        return BASE36_ALPHABET[0]

    digits = []
    while value > 0:
        value, remainder = divmod(value, BASE36)
        digits.append(BASE36_ALPHABET[remainder])
    return "".join(reversed(digits))


def bytes_to_base36(value: Union[int, bytes]) -> str:
    """
    Base-36 рендеринг 160-bit значения (int или big-endian bytes).

    Leading zero bytes не сохраняются: позиционная система их не представляет.
    """
    if isinstance(value, (bytes, bytearray)):
        value = int.from_bytes(value, "big")
    return int_to_base36(value)


def base36_to_int(encoded: str) -> int:
    """
    Декодирование base-36 строки в int.

    Вход case-insensitive (нормализуется в upper case).

    Raises:
        InvalidDigit: Пустая строка или символ вне 0-9A-Z
    """
    if not encoded:
        raise InvalidDigit(None, 0, "base36")

    value = 0
    for position, char in enumerate(encoded.upper()):
        value = value * BASE36 + base36_digit_value(char, position)
    return value


def base36_width(bits: int) -> int:
    """Количество base-36 цифр для максимального `bits`-битного значения."""
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return len(int_to_base36((1 << bits) - 1))


# =============================================================================
# BASE-16
# =============================================================================


def hex_to_int(encoded: str) -> int:
    """
    Декодирование hex строки (опциональный префикс 0x, любой регистр).

    Raises:
        InvalidDigit: Пустая строка или символ вне 0-9a-f
    """
    digits = encoded[len(HEX_PREFIX):] if encoded.startswith(HEX_PREFIX) else encoded
    if not digits:
        raise InvalidDigit(None, 0, "base16")

    offset = len(encoded) - len(digits)
    value = 0
    for position, char in enumerate(digits.lower()):
        try:
            digit = _BASE16_VALUES[char]
        except KeyError:
            raise InvalidDigit(encoded[offset + position], offset + position, "base16") from None
        value = value * BASE16 + digit
    return value


def int_to_hex(value: int, width: Optional[int] = None) -> str:
    """
    Кодирование неотрицательного int в lower case hex без префикса.

    Args:
        value: Неотрицательное целое
        width: Если задан, результат дополняется '0' слева до этой длины

    Raises:
        ValueError: Если значение не помещается в width цифр

    Examples:
        >>> int_to_hex(255)
        'ff'
        >>> int_to_hex(255, width=4)
        '00ff'
    """
    _check_non_negative_int(value)
    rendered = format(value, "x")

    if width is None:
        return rendered
    if len(rendered) > width:
        raise ValueError(
            f"Value needs {len(rendered)} hex digits, exceeds width {width}"
        )
    return rendered.rjust(width, "0")
