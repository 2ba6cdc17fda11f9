from .study_analytics_repository import StudyAnalyticsRepository
from .study_session_repository import StudySessionRepository
from .word_review_repository import WordReviewRepository

__all__ = ["StudyAnalyticsRepository", "StudySessionRepository", "WordReviewRepository"]
