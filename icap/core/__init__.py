"""
Core domain models, mathematical primitives, and contracts.

This module contains the foundational building blocks of the ICAP codec:
base conversion, the MOD 97-10 checksum and the immutable value types.
"""
