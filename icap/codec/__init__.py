"""Codec: encode / decode / validate ICAP адресов."""

from .icap_codec import (
    IcapCodec,
    InvalidAddress,
    InvalidIdentifier,
    decode,
    encode,
    is_valid,
)

__all__ = [
    "IcapCodec",
    "InvalidAddress",
    "InvalidIdentifier",
    "encode",
    "decode",
    "is_valid",
]
