"""
ICAP codec: 160-bit account identifiers <-> IBAN-style addresses.

    >>> from icap import encode, decode, is_valid
    >>> encode("0x730aea2b39aa2cf6b24829b3d39dc9a1f9297b88")
    'iban:XE42DFRZLRUTFTFY4EVINAHYF7TQ6MACYH4'
"""

import logging

from icap.codec import (
    IcapCodec,
    InvalidAddress,
    InvalidIdentifier,
    decode,
    encode,
    is_valid,
)
from icap.core.domain import (
    IBAN_SCHEME,
    IBAN_URL_SCHEME,
    EncodedAddress,
    IcapScheme,
    RawIdentifier,
)
from icap.core.math import InvalidDigit

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "encode",
    "decode",
    "is_valid",
    "IcapCodec",
    "IcapScheme",
    "IBAN_SCHEME",
    "IBAN_URL_SCHEME",
    "RawIdentifier",
    "EncodedAddress",
    "InvalidIdentifier",
    "InvalidAddress",
    "InvalidDigit",
]
