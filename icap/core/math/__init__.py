"""
Core math modules для ICAP

Целочисленные base-конверсии и ISO 7064 MOD 97-10 checksum.
"""

# Base Conversion
from icap.core.math.base_conversion import (
    # Alphabets
    BASE16_ALPHABET,
    BASE36_ALPHABET,
    HEX_PREFIX,
    # Errors
    InvalidDigit,
    # Base-36
    base36_digit_value,
    base36_to_int,
    base36_width,
    bytes_to_base36,
    int_to_base36,
    # Base-16
    hex_to_int,
    int_to_hex,
)

# MOD 97-10
from icap.core.math.mod97 import (
    CHECK_DIGITS_LENGTH,
    MOD97_CHECK_BASE,
    MOD97_MODULUS,
    MOD97_VALID_REMAINDER,
    PLACEHOLDER_CHECK_DIGITS,
    checksum97,
    compute_check_digits,
    expand,
    verify_rotated,
    zero_pad2,
)

__all__ = [
    # Base Conversion: Alphabets
    "BASE16_ALPHABET",
    "BASE36_ALPHABET",
    "HEX_PREFIX",
    # Base Conversion: Errors
    "InvalidDigit",
    # Base Conversion: Base-36
    "base36_digit_value",
    "base36_to_int",
    "base36_width",
    "bytes_to_base36",
    "int_to_base36",
    # Base Conversion: Base-16
    "hex_to_int",
    "int_to_hex",
    # MOD 97-10: Constants
    "CHECK_DIGITS_LENGTH",
    "MOD97_CHECK_BASE",
    "MOD97_MODULUS",
    "MOD97_VALID_REMAINDER",
    "PLACEHOLDER_CHECK_DIGITS",
    # MOD 97-10: Functions
    "checksum97",
    "compute_check_digits",
    "expand",
    "verify_rotated",
    "zero_pad2",
]
