from .study_activity_mapper import StudyActivityMapper
from .study_session_mapper import StudySessionMapper
from .word_review_mapper import WordReviewMapper

__all__ = ["StudyActivityMapper", "StudySessionMapper", "WordReviewMapper"]
