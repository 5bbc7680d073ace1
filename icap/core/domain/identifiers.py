"""
Identifiers: value objects raw identifier и ICAP адреса

Immutable Pydantic модели (frozen=True). Сериализованная форма
(model_dump) соответствует JSON Schema из icap/core/contracts/schema/.
"""

from typing import Any, Final, Union

from pydantic import BaseModel, Field, field_validator

from icap.core.math.base_conversion import HEX_PREFIX, base36_width, hex_to_int, int_to_hex

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

IDENTIFIER_BITS: Final[int] = 160

IDENTIFIER_BYTES: Final[int] = IDENTIFIER_BITS // 8

IDENTIFIER_HEX_DIGITS: Final[int] = IDENTIFIER_BITS // 4

# Совпадает с maxLength payload в encoded_address.json
PAYLOAD_MAX_LENGTH: Final[int] = base36_width(IDENTIFIER_BITS)


# =============================================================================
# RAW IDENTIFIER
# =============================================================================


class RawIdentifier(BaseModel):
    """
    160-битный идентификатор аккаунта.

    Каноническая форма: "0x" + 40 hex цифр в lower case. Leading zero bytes
    сохраняются, знак и усечение недопустимы. На входе принимаются hex
    цифры любого регистра (префикс строго "0x").
    """

    hex: str = Field(
        ...,
        pattern=r"^0x[0-9a-f]{40}$",
        description="0x + 40 lower case hex цифр",
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("hex", mode="before")
    @classmethod
    def canonicalize_case(cls, v: Any) -> Any:
        """Hex цифры после префикса приводятся к lower case."""
        if isinstance(v, str) and v.startswith(HEX_PREFIX):
            return HEX_PREFIX + v[len(HEX_PREFIX):].lower()
        return v

    @classmethod
    def from_int(cls, value: int) -> "RawIdentifier":
        """
        Построение из целого в диапазоне [0, 2**160).

        Raises:
            ValueError: Отрицательное значение или больше 160 бит
        """
        return cls(hex=HEX_PREFIX + int_to_hex(value, width=IDENTIFIER_HEX_DIGITS))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray]) -> "RawIdentifier":
        """Построение из ровно 20 байт (big-endian)."""
        if len(data) != IDENTIFIER_BYTES:
            raise ValueError(
                f"Identifier must be {IDENTIFIER_BYTES} bytes, got {len(data)}"
            )
        return cls.from_int(int.from_bytes(bytes(data), "big"))

    @property
    def value(self) -> int:
        """Значение идентификатора как целое."""
        return hex_to_int(self.hex)

    def to_bytes(self) -> bytes:
        return self.value.to_bytes(IDENTIFIER_BYTES, "big")

    def __str__(self) -> str:
        return self.hex


# =============================================================================
# ENCODED ADDRESS
# =============================================================================


class EncodedAddress(BaseModel):
    """
    Структурированное представление ICAP адреса.

    Формат: scheme_prefix + country_code + check_digits + payload

    Модель проверяет только синтаксис полей. Корректность checksum
    гарантирует IcapCodec, который единственный создаёт валидированные
    экземпляры (encode_identifier / parse).
    """

    scheme_prefix: str = Field(..., description="URI-префикс схемы (например, 'iban:')")
    country_code: str = Field(
        "XE", pattern=r"^[A-Z]{2}$", description="Код страны ICAP"
    )
    check_digits: str = Field(
        ..., pattern=r"^[0-9]{2}$", description="Две контрольные цифры MOD 97-10"
    )
    payload: str = Field(
        ...,
        min_length=1,
        max_length=PAYLOAD_MAX_LENGTH,
        pattern=r"^[0-9A-Z]+$",
        description="Base-36 рендеринг идентификатора (upper case)",
    )

    model_config = {"frozen": True}  # Immutable

    @property
    def check_segment(self) -> str:
        """Country code + check digits (например, 'XE42')."""
        return self.country_code + self.check_digits

    def verification_string(self) -> str:
        """Rotated форма для MOD 97-10: payload, затем check segment."""
        return self.payload + self.check_segment

    def __str__(self) -> str:
        return self.scheme_prefix + self.check_segment + self.payload
