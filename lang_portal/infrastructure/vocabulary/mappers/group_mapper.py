"""Mapper for Group ORM ↔ Domain conversion."""

from lang_portal.domain.common.value_objects import GroupId
from lang_portal.domain.vocabulary.entities import Group
from lang_portal.models import Group as GroupORM
from lang_portal.utils import ensure_utc


class GroupMapper:
    """Mapper for Group ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GroupORM) -> Group:
        """Convert ORM model to domain entity."""
        return Group(
            id=GroupId(orm_model.id),
            name=orm_model.name,
            created_at=ensure_utc(orm_model.created_at),
        )

    def to_orm(self, domain_entity: Group) -> GroupORM:
        """Convert a new domain entity to an ORM model."""
        return GroupORM(
            id=domain_entity.id.value if domain_entity.id.is_persisted else None,
            name=domain_entity.name,
        )
