"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
