"""Base model for all domain entities."""

from collections.abc import Callable
from typing import ParamSpec, TypeVar

from pydantic import BaseModel, ConfigDict

from tagkit.domain.error import DomainError
from tagkit.util.error import InvariantViolationError


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
    )


P = ParamSpec("P")
T = TypeVar("T")


def must(factory: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> T:
    """Call a factory that is not expected to fail and return its result.

    Meant for input known to be valid, e.g. literals in application code:

        must(new_multi_value, "env", "prod", "staging")

    Args:
        factory: Constructor such as new_label or new_group
        *args: Positional arguments for the factory
        **kwargs: Keyword arguments for the factory

    Returns:
        Whatever the factory returns

    Raises:
        InvariantViolationError: If the factory raised a DomainError
    """
    try:
        return factory(*args, **kwargs)
    except DomainError as e:
        raise InvariantViolationError(str(e)) from e
