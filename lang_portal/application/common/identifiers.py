"""Conversion of caller-supplied ids into typed domain ids."""

from collections.abc import Callable
from typing import TypeVar

from lang_portal.domain.common.entity import EntityId
from lang_portal.exceptions import NotFoundError

IdT = TypeVar("IdT", bound=EntityId)


def to_entity_id(
    id_type: type[IdT], value: int, not_found: Callable[[int], NotFoundError]
) -> IdT:
    """
    Build a typed id for a lookup.

    The store only assigns ids from 1 upwards, so anything lower refers to
    an entity that cannot exist and is reported as not found.

    Raises:
        NotFoundError: The `not_found` error for ids below 1
    """
    if value < 1:
        raise not_found(value)
    return id_type(value)
