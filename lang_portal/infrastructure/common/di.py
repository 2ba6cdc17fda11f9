from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider
from sqlalchemy.orm import Session

from lang_portal.core import container

T = TypeVar("T")


def inject_use_case(provider: Provider[T]) -> Callable[[Session], T]:
    """
    Create a resolver for a container provider.

    Automatically handles container.db override with the caller's session.
    """

    def dependency(db: Session) -> T:
        try:
            container.db.override(db)
            return provider()
        finally:
            container.db.reset_override()

    return dependency
