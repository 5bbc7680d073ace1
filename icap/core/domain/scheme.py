"""
IcapScheme: конфигурация формата ICAP адреса

Construction-time константы: scheme prefix и country code. Все смещения и
длины адреса выводятся из них, никаких захардкоженных offset.

Формат адреса:
    <scheme_prefix><country_code><check_digits:2><payload:payload_width>
"""

import re
from dataclasses import dataclass
from typing import Final

from icap.core.domain.identifiers import IDENTIFIER_BITS
from icap.core.math.base_conversion import base36_width
from icap.core.math.mod97 import CHECK_DIGITS_LENGTH

ICAP_COUNTRY_CODE: Final[str] = "XE"

_COUNTRY_CODE_RE: Final = re.compile(r"^[A-Z]{2}$")


@dataclass(frozen=True)
class IcapScheme:
    """Конфигурация ICAP схемы.

    Attributes:
        scheme_prefix: URI-префикс адреса (например, "iban:" или "iban://")
        country_code: Код страны в check segment (для ICAP всегда "XE")
        identifier_bits: Размер идентификатора в битах (кратен 4)
    """

    scheme_prefix: str = "iban:"
    country_code: str = ICAP_COUNTRY_CODE
    identifier_bits: int = IDENTIFIER_BITS

    def __post_init__(self) -> None:
        if (
            not isinstance(self.identifier_bits, int)
            or isinstance(self.identifier_bits, bool)
            or self.identifier_bits <= 0
            or self.identifier_bits % 4 != 0
        ):
            raise ValueError(
                f"identifier_bits must be a positive multiple of 4, got {self.identifier_bits!r}"
            )
        if not isinstance(self.scheme_prefix, str):
            raise TypeError(
                f"scheme_prefix must be str, got {type(self.scheme_prefix).__name__}"
            )
        if not _COUNTRY_CODE_RE.match(self.country_code):
            raise ValueError(
                f"country_code must be two upper-case letters, got {self.country_code!r}"
            )

    @property
    def check_segment_length(self) -> int:
        """Длина country_code + check digits (4 для "XE42")."""
        return len(self.country_code) + CHECK_DIGITS_LENGTH

    @property
    def address_marker(self) -> str:
        """Обязательное начало любого адреса схемы."""
        return self.scheme_prefix + self.country_code

    @property
    def header_length(self) -> int:
        """Длина всего, что предшествует payload."""
        return len(self.scheme_prefix) + self.check_segment_length

    @property
    def payload_width(self) -> int:
        """Фиксированная ширина base-36 payload (31 для 160 бит)."""
        return base36_width(self.identifier_bits)

    @property
    def hex_digits(self) -> int:
        """Количество hex цифр идентификатора (40 для 160 бит)."""
        return self.identifier_bits // 4

    @property
    def address_length(self) -> int:
        return self.header_length + self.payload_width


IBAN_SCHEME: Final[IcapScheme] = IcapScheme(scheme_prefix="iban:")

IBAN_URL_SCHEME: Final[IcapScheme] = IcapScheme(scheme_prefix="iban://")
