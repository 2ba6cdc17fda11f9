"""Pydantic schemas for the study activity catalog."""

from pydantic import BaseModel, ConfigDict, Field


class StudyActivitySchema(BaseModel):
    """Schema for one catalog entry, as loaded from configuration."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., gt=0, description="Activity identifier referenced by study sessions")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    description: str = Field(default="", description="Short description of the activity")
    thumbnail_url: str | None = Field(None, description="Thumbnail image URL")


DEFAULT_STUDY_ACTIVITIES: list[StudyActivitySchema] = [
    StudyActivitySchema(
        id=1,
        name="Vocabulary Quiz",
        description="Practice your vocabulary with flashcards",
        thumbnail_url="https://example.com/thumbnail.jpg",
    ),
]
