from .group_repository import GroupRepository
from .word_repository import WordRepository

__all__ = ["GroupRepository", "WordRepository"]
