"""
Test suite for digit_sequence

Contains:
- tests/unit/          : Unit tests for individual modules
"""
