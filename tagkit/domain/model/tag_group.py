"""Tag group aggregate.

A tag group is a named collection of related tags with at most one tag per
tag name. Groups keep their members in order: new names are appended,
replaced tags keep their position and the sort methods reorder the group in
place, so later reads see the sorted order.
"""

from collections.abc import Callable, Iterator
from functools import cmp_to_key

from tagkit.domain.model.tag import Tag
from tagkit.domain.value import LessFunc, MatchFunc, validate_name
from tagkit.util.error import InvariantViolationError
from tagkit.util.identifiers import generate_short_id
from tagkit.util.logging import get_logger

logger = get_logger(__name__)


class TagGroup:
    """Named, mutable group of tags keyed by tag name.

    Not safe for concurrent mutation; callers sharing a group between threads
    must serialize access themselves.
    """

    def __init__(self, name: str) -> None:
        """Initialize an empty group.

        Args:
            name: Group name

        Raises:
            ValidationError: If the name is blank
        """
        self._name = validate_name(name)
        self._tags: dict[str, Tag] = {}

    @property
    def name(self) -> str:
        return self._name

    def rename(self, new_name: str) -> None:
        """Rename the group.

        Raises:
            ValidationError: If the new name is blank; the old name is kept
        """
        old_name = self._name
        self._name = validate_name(new_name)
        logger.debug(f"Group renamed: {old_name} -> {self._name}")

    @property
    def tags(self) -> list[Tag]:
        """Snapshot of the group tags in group order."""
        return list(self._tags.values())

    def add(self, *tags: Tag) -> None:
        """Add tags to the group.

        Tag names are unique within a group: a tag replaces any member with
        the same name, so among repeated names the last one wins.
        """
        for tag in tags:
            self._tags[tag.name] = tag

    def contains(self, *tags: Tag) -> bool:
        """Return True if every tag matches a member by name and values."""
        return all(
            tag.name in self._tags and self._tags[tag.name].matches(tag)
            for tag in tags
        )

    def contains_names(self, *names: str) -> bool:
        return all(name in self._tags for name in names)

    def contains_values(self, *values: str) -> bool:
        """Return True if any member has any of the values."""
        return self.contains_func(lambda tag: tag.has_values(*values))

    def contains_func(self, fn: MatchFunc) -> bool:
        return any(fn(tag) for tag in self._tags.values())

    def find_names(self, *names: str) -> list[Tag]:
        wanted = set(names)
        return self.find_func(lambda tag: tag.name in wanted)

    def find_values(self, *values: str) -> list[Tag]:
        """Return members having any of the values."""
        return self.find_func(lambda tag: tag.has_values(*values))

    def find_func(self, fn: MatchFunc) -> list[Tag]:
        return [tag for tag in self.tags if fn(tag)]

    def remove(self, *tags: Tag) -> None:
        """Remove members matching any of the tags by name and values."""
        self.remove_func(lambda member: any(member.matches(tag) for tag in tags))

    def remove_names(self, *names: str) -> None:
        wanted = set(names)
        self.remove_func(lambda tag: tag.name in wanted)

    def remove_values(self, *values: str) -> None:
        """Remove members having any of the values."""
        self.remove_func(lambda tag: tag.has_values(*values))

    def remove_func(self, fn: MatchFunc) -> None:
        """Remove members matching fn."""
        # Collect first, the dict cannot change size while iterating
        doomed = [tag.name for tag in self._tags.values() if fn(tag)]
        for name in doomed:
            del self._tags[name]

        if doomed:
            logger.debug(f"Tags removed from group {self._name}: {doomed}")

    def sort_names(self, desc: bool = False) -> None:
        """Sort the group by tag name, ascending or descending."""
        self._reorder(sorted(self._tags.values(), key=lambda t: t.name, reverse=desc))

    def sort_func(self, less: LessFunc) -> None:
        """Sort the group by the less predicate.

        The sort is stable: members that are not less than each other keep
        their relative order.
        """

        def compare(a: Tag, b: Tag) -> int:
            if less(a, b):
                return -1
            if less(b, a):
                return 1
            return 0

        self._reorder(sorted(self._tags.values(), key=cmp_to_key(compare)))

    def _reorder(self, ordered: list[Tag]) -> None:
        self._tags = {tag.name: tag for tag in ordered}
        logger.debug(f"Group {self._name} reordered: {[t.name for t in ordered]}")

    def __len__(self) -> int:
        return len(self._tags)

    def __iter__(self) -> Iterator[Tag]:
        return iter(self.tags)

    def __contains__(self, item: object) -> bool:
        """Check membership by tag name, or by name and values for a Tag."""
        if isinstance(item, Tag):
            return self.contains(item)
        return item in self._tags

    def __repr__(self) -> str:
        members = ", ".join(str(tag) for tag in self._tags.values())
        return f"TagGroup(name={self._name!r}, tags=[{members}])"


def new_group(name: str, *tags: Tag) -> TagGroup:
    """Create a group and add the tags to it.

    Tag names must be unique, see TagGroup.add.

    Raises:
        ValidationError: If the group name is blank
    """
    group = TagGroup(name)
    group.add(*tags)
    return group


def new_group_with_generated_name(
    *tags: Tag, generate: Callable[[], str] | None = None
) -> TagGroup:
    """Create a group named with a generated short id and add the tags to it.

    Name collisions between generated groups are not detected.

    Args:
        *tags: Tags to add
        generate: Zero-argument id generator, defaults to generate_short_id

    Returns:
        New group

    Raises:
        InvariantViolationError: If the id could not be generated or was
            rejected as a group name
    """
    generate = generate or generate_short_id
    try:
        name = generate()
        group = new_group(name, *tags)
    except Exception as e:
        raise InvariantViolationError(f"cannot create group: {e}") from e

    logger.info(f"Group created with generated name: {name} ({len(group)} tags)")
    return group
