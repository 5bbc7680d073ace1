"""
MOD 97-10: ISO 7064 checksum engine

Алгоритм контрольных цифр IBAN:
- Numeric expansion: каждый символ 0-9A-Z заменяется десятичными цифрами
  своего base-36 значения ('7' → "7", 'A' → "10", 'Z' → "35")
- Полученная строка цифр читается как одно большое целое
- Остаток по модулю 97

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидная строка (в rotated форме) имеет остаток ровно 1
2. При вычислении check digits placeholder "00" участвует своей expansion
3. Check digits всегда 2 ASCII цифры (zero-padded)
"""

from typing import Final, Iterable

from icap.core.math.base_conversion import base36_digit_value

# =============================================================================
# КОНСТАНТЫ ISO 7064 MOD 97-10
# =============================================================================

MOD97_MODULUS: Final[int] = 97

# 98 - r даёт check digits, при которых итоговый остаток равен 1
MOD97_CHECK_BASE: Final[int] = 98

MOD97_VALID_REMAINDER: Final[int] = 1

PLACEHOLDER_CHECK_DIGITS: Final[str] = "00"

CHECK_DIGITS_LENGTH: Final[int] = 2


# =============================================================================
# NUMERIC EXPANSION
# =============================================================================


def expand(chars: Iterable[str]) -> str:
    """
    Numeric expansion по ISO 7064 MOD 97-10.

    Args:
        chars: Строка (или последовательность символов) из алфавита 0-9A-Z

    Returns:
        Строка десятичных цифр

    Raises:
        InvalidDigit: Символ вне 0-9A-Z

    Examples:
        >>> expand("XE00")
        '331400'
        >>> expand("A1")
        '101'
    """
    return "".join(
        str(base36_digit_value(char, position)) for position, char in enumerate(chars)
    )


def checksum97(chars: Iterable[str]) -> int:
    """
    Остаток numeric expansion по модулю 97.

    Returns:
        Целое в диапазоне [0, 96]

    Raises:
        InvalidDigit: Символ вне 0-9A-Z
        ValueError: Пустой вход
    """
    digits = expand(chars)
    if not digits:
        raise ValueError("Cannot compute MOD 97-10 checksum of an empty string")
    return int(digits) % MOD97_MODULUS


# =============================================================================
# CHECK DIGITS
# =============================================================================


def zero_pad2(value: int) -> str:
    """Рендеринг check digits: ровно 2 цифры с ведущим нулём."""
    if not 0 <= value < 10 ** CHECK_DIGITS_LENGTH:
        raise ValueError(f"Check digits out of range: {value}")
    return str(value).zfill(CHECK_DIGITS_LENGTH)


def compute_check_digits(body: str, country_code: str) -> str:
    """
    Вычисление check digits для body с кодом страны.

    check_input = body + country_code + "00"
    check_digits = 98 - checksum97(check_input)

    Args:
        body: Payload (часть после check segment)
        country_code: Двухбуквенный код страны (для ICAP: "XE")

    Returns:
        Две десятичные цифры в диапазоне "02".."98"
    """
    remainder = checksum97(body + country_code + PLACEHOLDER_CHECK_DIGITS)
    return zero_pad2(MOD97_CHECK_BASE - remainder)


def verify_rotated(check_segment: str, body: str) -> bool:
    """
    Проверка в rotated форме: первые 4 символа переносятся в конец.

    Args:
        check_segment: country_code + check_digits (например, "XE42")
        body: Payload

    Returns:
        True если checksum97(body + check_segment) == 1

    Raises:
        InvalidDigit: Символ вне 0-9A-Z
    """
    return checksum97(body + check_segment) == MOD97_VALID_REMAINDER
