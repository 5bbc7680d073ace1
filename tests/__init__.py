"""
Test suite for the ICAP codec

Contains:
- tests/unit/          : Unit tests for individual modules
"""
