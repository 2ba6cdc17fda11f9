"""Mapper for Word ORM ↔ Domain conversion."""

from lang_portal.domain.common.value_objects import WordId
from lang_portal.domain.vocabulary.entities import Word
from lang_portal.models import Word as WordORM
from lang_portal.utils import ensure_utc


class WordMapper:
    """Mapper for Word ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: WordORM) -> Word:
        """Convert ORM model to domain entity."""
        return Word(
            id=WordId(orm_model.id),
            native_text=orm_model.native_text,
            translated_text=orm_model.translated_text,
            metadata=orm_model.metadata_json,
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Word) -> WordORM:
        """Convert a new domain entity to an ORM model. Words are never updated."""
        return WordORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            native_text=domain_entity.native_text,
            translated_text=domain_entity.translated_text,
            metadata_json=domain_entity.metadata,
        )
