"""Domain value types for tagkit."""

from tagkit.domain.value.types import (
    NAME_VALUE_SEPARATOR,
    VALUES_SEPARATOR,
    LessFunc,
    MatchFunc,
    is_blank,
    unique_values,
    validate_name,
)

__all__ = [
    # Callbacks
    "MatchFunc",
    "LessFunc",
    # Encoding
    "NAME_VALUE_SEPARATOR",
    "VALUES_SEPARATOR",
    # Validation
    "is_blank",
    "unique_values",
    "validate_name",
]
