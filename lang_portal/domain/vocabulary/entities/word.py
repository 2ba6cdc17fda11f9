"""
Word entity.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from lang_portal.domain.common.entity import Entity
from lang_portal.domain.common.exceptions import ValidationError
from lang_portal.domain.common.value_objects import WordId


@dataclass(frozen=True, eq=False)
class Word(Entity[WordId]):
    """
    A vocabulary word.

    Business Rules:
    - Native text cannot be empty
    - Metadata is an opaque structured payload, stored but never interpreted
    - Correct/wrong counts are not part of the entity; they are always derived
      from the review history
    """

    id: WordId
    native_text: str
    translated_text: str
    metadata: Any = field(default=None, repr=False)
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.native_text or not self.native_text.strip():
            raise ValidationError("Native text cannot be empty", field="native_text")

    @classmethod
    def create(cls, native_text: str, translated_text: str, metadata: Any = None) -> "Word":  # noqa: ANN401
        """Create a new word (ID will be 0 until persisted)."""
        return cls(
            id=WordId.generate(),
            native_text=native_text.strip(),
            translated_text=translated_text.strip(),
            metadata=metadata,
        )
