"""
Vocabulary bounded context - Domain layer.

Words and the thematic groups they are organized into. Both are created by
administrative or seed operations and are not edited by the core.
"""

from .entities import Group, Word

__all__ = ["Group", "Word"]
