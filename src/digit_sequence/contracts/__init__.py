"""
Contract Validation Module

JSON Schema контракт сохранённого формата DigitSequence.
"""

from .validators import (
    ContractValidator,
    DigitSequenceValidator,
    SchemaLoader,
    StrictIntegerValidator,
    validate_digit_sequence,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DigitSequenceValidator",
    "StrictIntegerValidator",
    # Functions
    "validate_digit_sequence",
]
