"""
Domain models and value objects.

Contains the immutable ICAP value types and the scheme configuration.
"""

from icap.core.domain.identifiers import (
    IDENTIFIER_BITS,
    IDENTIFIER_BYTES,
    IDENTIFIER_HEX_DIGITS,
    PAYLOAD_MAX_LENGTH,
    EncodedAddress,
    RawIdentifier,
)
from icap.core.domain.scheme import (
    IBAN_SCHEME,
    IBAN_URL_SCHEME,
    ICAP_COUNTRY_CODE,
    IcapScheme,
)

__all__ = [
    # Identifiers
    "IDENTIFIER_BITS",
    "IDENTIFIER_BYTES",
    "IDENTIFIER_HEX_DIGITS",
    "PAYLOAD_MAX_LENGTH",
    "RawIdentifier",
    "EncodedAddress",
    # Scheme configuration
    "ICAP_COUNTRY_CODE",
    "IcapScheme",
    "IBAN_SCHEME",
    "IBAN_URL_SCHEME",
]
