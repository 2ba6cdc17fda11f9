"""
Study bounded context - Domain layer.

Tracks study history and derives statistics from it:
- StudySession: one study run against a group with a catalog activity
- WordReview: one correctness outcome for one word within a session
- StudyActivity: read-only catalog entry describing an activity

Sessions and reviews are create-once facts; the only state is the
accumulated history.
"""

from .entities import StudyActivity, StudySession, WordReview

__all__ = ["StudyActivity", "StudySession", "WordReview"]
