from .study_activity import StudyActivity
from .study_session import StudySession
from .word_review import WordReview

__all__ = ["StudyActivity", "StudySession", "WordReview"]
