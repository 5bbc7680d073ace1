"""
Contract Validation Module

Модуль для валидации JSON контрактов ICAP value types.
"""

from .validators import (
    ContractValidator,
    EncodedAddressValidator,
    RawIdentifierValidator,
    SchemaLoader,
    validate_encoded_address,
    validate_raw_identifier,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "RawIdentifierValidator",
    "EncodedAddressValidator",
    # Functions
    "validate_raw_identifier",
    "validate_encoded_address",
]
