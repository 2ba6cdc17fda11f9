from .group import Group
from .word import Word

__all__ = ["Group", "Word"]
