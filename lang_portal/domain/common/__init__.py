"""
Domain common module.

Base classes shared by the vocabulary and study contexts: strongly-typed
ids, identity-based entities and domain exceptions.
"""

from .entity import Entity, EntityId
from .exceptions import DomainError, ValidationError

__all__ = [
    "DomainError",
    "Entity",
    "EntityId",
    "ValidationError",
]
