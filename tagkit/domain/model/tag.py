"""Tag value object.

A tag can be a label (a tag without a value), a single value tag (a name and
one value) or a multiple value tag (a name and more than one value).

Tags are written as text in the name[:value,...] format:

    label
    single:value
    multi:value1,value2
"""

from pydantic import Field, field_validator

from tagkit.domain.error import FormatError, ValidationError
from tagkit.domain.model.common import DomainModel
from tagkit.domain.value import (
    NAME_VALUE_SEPARATOR,
    VALUES_SEPARATOR,
    MatchFunc,
    is_blank,
    unique_values,
    validate_name,
)


class Tag(DomainModel):
    """Immutable tag.

    Prefer the module level constructors (new, new_label, new_single_value,
    new_multi_value), which raise the domain ValidationError. Instantiating
    the model directly applies the same rules but raises pydantic's
    ValidationError. Only parse builds tags without validation.
    """

    name: str
    values: tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("name")
    @classmethod
    def validate_name_not_blank(cls, v: str) -> str:
        """Validate the name is not blank."""
        if is_blank(v):
            raise ValueError("name required")
        return v

    @field_validator("values")
    @classmethod
    def normalize_values(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Drop blank and repeated values."""
        return unique_values(v)

    @property
    def value(self) -> str:
        """Return the first value, or an empty string for labels.

        Use values to get all values of a multiple value tag.
        """
        if self.is_label:
            return ""
        return self.values[0]

    @property
    def is_label(self) -> bool:
        """True if the tag has no values."""
        return len(self.values) == 0

    @property
    def is_single_value(self) -> bool:
        """True if the tag has exactly one value."""
        return len(self.values) == 1

    @property
    def is_multi_value(self) -> bool:
        """True if the tag has more than one value."""
        return len(self.values) > 1

    def has_name(self, name: str) -> bool:
        return self.name == name

    def has_values(self, *values: str) -> bool:
        """Return True if any of the tag values is one of the given values."""
        wanted = set(values)
        return any(v in wanted for v in self.values)

    def has_func(self, fn: MatchFunc) -> bool:
        return fn(self)

    def matches(self, other: "Tag") -> bool:
        """Return True if both tags have the same name and the same set of values.

        Value order is ignored.
        """
        return self.name == other.name and set(self.values) == set(other.values)

    def __str__(self) -> str:
        """Return the tag in the name[:value,...] format.

        This is the reverse of parse.
        """
        if self.is_label:
            return self.name
        return self.name + NAME_VALUE_SEPARATOR + VALUES_SEPARATOR.join(self.values)


def new(name: str, *values: str) -> Tag:
    """Create a tag with the name and values.

    Empty and whitespace-only values are removed, and so are repeated values.
    The remaining values keep the order of their first occurrence.

    Args:
        name: Tag name, must not be blank
        *values: Tag values

    Returns:
        New tag

    Raises:
        ValidationError: If the name is blank
    """
    return Tag(name=validate_name(name), values=values)


def new_label(name: str) -> Tag:
    """Create a label (a tag without a value)."""
    return new(name)


def new_single_value(name: str, value: str) -> Tag:
    """Create a single value tag.

    Raises:
        ValidationError: If the name or the value is blank
    """
    tag = new(name, value)
    if tag.is_label:
        raise ValidationError("value required")
    return tag


def new_multi_value(name: str, *values: str) -> Tag:
    """Create a multiple value tag.

    Values are made unique before counting, so at least two distinct
    non-blank values are required.

    Raises:
        ValidationError: If the name is blank or fewer than two unique values remain
    """
    tag = new(name, *values)
    if not tag.is_multi_value:
        raise ValidationError("at least two unique values required")
    return tag


def parse(text: str) -> Tag:
    """Parse a tag from the name[:value,...] format.

    Parsing does not validate: values are split on commas as they are, without
    removing blanks or repeats. Only strings with more than one name/value
    separator are rejected.

    Examples:
        parse("label") -> Tag(name="label", values=())
        parse("single:value") -> Tag(name="single", values=("value",))
        parse("multi:value1,value2") -> Tag(name="multi", values=("value1", "value2"))

    Raises:
        FormatError: If the text contains more than one ':'
    """
    parts = text.split(NAME_VALUE_SEPARATOR)
    if len(parts) == 1:
        return Tag.model_construct(name=parts[0], values=())
    if len(parts) == 2:
        name, raw_values = parts
        return Tag.model_construct(
            name=name, values=tuple(raw_values.split(VALUES_SEPARATOR))
        )
    raise FormatError(text)
