"""ICAP Codec: encode / decode / validate для ICAP адресов.

Преобразование 160-битного идентификатора в формат
    <scheme_prefix>XE<check_digits><base36 payload>
и обратно, с защитой ISO 7064 MOD 97-10.

Три независимые чистые операции, без состояния. Все длины и смещения
выводятся из IcapScheme.
"""

import logging
from typing import Any, Optional

from pydantic import ValidationError

from icap.core.domain.identifiers import IDENTIFIER_BITS, EncodedAddress, RawIdentifier
from icap.core.domain.scheme import IBAN_SCHEME, IcapScheme
from icap.core.math.base_conversion import InvalidDigit, base36_to_int, bytes_to_base36
from icap.core.math.mod97 import compute_check_digits, verify_rotated

logger = logging.getLogger(__name__)


class InvalidIdentifier(ValueError):
    """Вход encode не является "0x" + ровно 40 hex цифр."""

    def __init__(self, identifier: Any):
        self.identifier = identifier
        super().__init__(
            f"Invalid identifier {identifier!r}: expected 0x followed by 40 hex digits"
        )


class InvalidAddress(ValueError):
    """Вход decode не проходит валидацию ICAP адреса."""

    def __init__(self, address: Any, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid ICAP address {address!r}: {reason}")


class IcapCodec:
    """ICAP codec для одной схемы.

    Порядок проверок адреса:
    1. Тип и префикс scheme_prefix + "XE"
    2. Точная длина адреса для схемы
    3. Check digits: две десятичные цифры
    4. MOD 97-10 в rotated форме: остаток == 1

    Payload всегда рендерится в фиксированной ширине (31 символ для 160 бит),
    ведущие '0' не меняют checksum.
    """

    def __init__(self, scheme: Optional[IcapScheme] = None):
        """
        Args:
            scheme: конфигурация схемы (default: "iban:")
        """
        self.scheme = scheme or IBAN_SCHEME
        if self.scheme.identifier_bits != IDENTIFIER_BITS:
            raise ValueError(
                f"IcapCodec encodes {IDENTIFIER_BITS}-bit identifiers, "
                f"scheme has identifier_bits={self.scheme.identifier_bits}"
            )

    # -------------------------------------------------------------------------
    # ENCODE
    # -------------------------------------------------------------------------

    def encode_identifier(self, identifier: RawIdentifier) -> EncodedAddress:
        """Кодирование провалидированного идентификатора в EncodedAddress."""
        payload = bytes_to_base36(identifier.value).rjust(self.scheme.payload_width, "0")
        check_digits = compute_check_digits(payload, self.scheme.country_code)

        return EncodedAddress(
            scheme_prefix=self.scheme.scheme_prefix,
            country_code=self.scheme.country_code,
            check_digits=check_digits,
            payload=payload,
        )

    def encode(self, identifier: str) -> str:
        """Кодирование "0x" + 40 hex цифр в ICAP адрес.

        Raises:
            InvalidIdentifier: если вход не является валидным идентификатором
        """
        if not isinstance(identifier, str):
            raise InvalidIdentifier(identifier)
        try:
            raw = RawIdentifier(hex=identifier)
        except ValidationError as e:
            raise InvalidIdentifier(identifier) from e

        address = str(self.encode_identifier(raw))
        logger.debug("Encoded %s -> %s", raw.hex, address)
        return address

    # -------------------------------------------------------------------------
    # VALIDATE
    # -------------------------------------------------------------------------

    def _rejection_reason(self, address: Any) -> Optional[str]:
        """Причина невалидности адреса или None для валидного."""
        scheme = self.scheme

        if not isinstance(address, str):
            return f"expected str, got {type(address).__name__}"
        if not address.startswith(scheme.address_marker):
            return f"missing {scheme.address_marker!r} prefix"
        if len(address) != scheme.address_length:
            return f"length {len(address)} != {scheme.address_length}"

        check_segment = address[len(scheme.scheme_prefix):scheme.header_length]
        check_digits = check_segment[len(scheme.country_code):]
        payload = address[scheme.header_length:]

        # str.isdigit() also accepts non-ASCII digits
        if not (check_digits.isascii() and check_digits.isdigit()):
            return f"check digits {check_digits!r} are not decimal"

        try:
            if not verify_rotated(check_segment, payload):
                return "MOD 97-10 checksum mismatch"
        except InvalidDigit as e:
            return str(e)

        return None

    def is_valid(self, address: str) -> bool:
        """Проверка ICAP адреса. Никогда не выбрасывает исключений."""
        reason = self._rejection_reason(address)
        if reason is not None:
            logger.debug("Rejected ICAP address %r: %s", address, reason)
            return False
        return True

    # -------------------------------------------------------------------------
    # DECODE
    # -------------------------------------------------------------------------

    def parse(self, address: str) -> EncodedAddress:
        """Разбор валидного адреса на структурированные поля.

        Raises:
            InvalidAddress: если адрес не проходит is_valid
        """
        reason = self._rejection_reason(address)
        if reason is not None:
            raise InvalidAddress(address, reason)

        scheme = self.scheme
        return EncodedAddress(
            scheme_prefix=scheme.scheme_prefix,
            country_code=scheme.country_code,
            check_digits=address[len(scheme.address_marker):scheme.header_length],
            payload=address[scheme.header_length:],
        )

    def decode_address(self, address: str) -> RawIdentifier:
        """Декодирование ICAP адреса в RawIdentifier.

        Raises:
            InvalidAddress: невалидный адрес или payload шире 160 бит
        """
        parsed = self.parse(address)
        value = base36_to_int(parsed.payload)
        bits = self.scheme.identifier_bits
        if value.bit_length() > bits:
            raise InvalidAddress(address, f"payload exceeds {bits} bits")

        identifier = RawIdentifier.from_int(value)
        logger.debug("Decoded %s -> %s", address, identifier.hex)
        return identifier

    def decode(self, address: str) -> str:
        """Декодирование ICAP адреса в "0x" + 40 hex цифр (lower case)."""
        return str(self.decode_address(address))


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

_DEFAULT_CODEC = IcapCodec()


def encode(identifier: str) -> str:
    """Кодирование идентификатора в "iban:" ICAP адрес."""
    return _DEFAULT_CODEC.encode(identifier)


def decode(address: str) -> str:
    """Декодирование "iban:" ICAP адреса в идентификатор."""
    return _DEFAULT_CODEC.decode(address)


def is_valid(address: str) -> bool:
    """Проверка "iban:" ICAP адреса."""
    return _DEFAULT_CODEC.is_valid(address)
