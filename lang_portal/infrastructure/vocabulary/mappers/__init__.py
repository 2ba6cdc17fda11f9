from .group_mapper import GroupMapper
from .word_mapper import WordMapper

__all__ = ["GroupMapper", "WordMapper"]
