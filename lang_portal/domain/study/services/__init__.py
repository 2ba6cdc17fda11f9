from .study_streak_calculator import StudyStreakCalculator

__all__ = ["StudyStreakCalculator"]
