"""Domain model for tagkit."""

from tagkit.domain.model.common import DomainModel, must
from tagkit.domain.model.tag import (
    Tag,
    new,
    new_label,
    new_multi_value,
    new_single_value,
    parse,
)
from tagkit.domain.model.tag_group import (
    TagGroup,
    new_group,
    new_group_with_generated_name,
)

__all__ = [
    "DomainModel",
    "must",
    # Tags
    "Tag",
    "new",
    "new_label",
    "new_single_value",
    "new_multi_value",
    "parse",
    # Groups
    "TagGroup",
    "new_group",
    "new_group_with_generated_name",
]
