"""Domain value types for tags.

Matching and ordering callbacks are plain callables so that lambdas and
bound methods can be passed directly to the group query methods.
"""

from typing import TYPE_CHECKING, Callable, TypeAlias

from tagkit.domain.error import ValidationError

if TYPE_CHECKING:
    from tagkit.domain.model.tag import Tag

# Used to match tags by the *_func methods
MatchFunc: TypeAlias = Callable[["Tag"], bool]

# Used to sort tags by the sort_func method
LessFunc: TypeAlias = Callable[["Tag", "Tag"], bool]

NAME_VALUE_SEPARATOR = ":"
VALUES_SEPARATOR = ","


def is_blank(v: str) -> bool:
    """Return True if the string is empty or whitespace only."""
    return v.strip() == ""


def validate_name(v: str) -> str:
    """Validate a tag or group name.

    Args:
        v: Name to validate

    Returns:
        The name, unchanged

    Raises:
        ValidationError: If the name is empty or whitespace only
    """
    if is_blank(v):
        raise ValidationError("name required")
    return v


def unique_values(values: tuple[str, ...]) -> tuple[str, ...]:
    """Drop blank and repeated values, keeping first occurrence order."""
    return tuple(dict.fromkeys(v for v in values if not is_blank(v)))
