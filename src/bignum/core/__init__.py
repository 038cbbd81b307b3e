"""
Core value type, arithmetic algorithms and text codec.

This module contains the building blocks of the arbitrary-precision integer:
the domain model, the digit-sequence algorithms and the decimal codec.
"""
