"""
Domain models and value objects.

Contains the DigitSequence value type.
"""

from digit_sequence.domain.digit_sequence import DigitSequence

__all__ = [
    "DigitSequence",
]
