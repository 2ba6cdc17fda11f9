from .study_activity_schemas import DEFAULT_STUDY_ACTIVITIES, StudyActivitySchema

__all__ = ["DEFAULT_STUDY_ACTIVITIES", "StudyActivitySchema"]
