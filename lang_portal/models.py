"""Database models."""

from datetime import datetime
from typing import Any

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from lang_portal.database import Base

# Many-to-many membership between words and groups
words_groups = Table(
    "words_groups",
    Base.metadata,
    Column("word_id", Integer, ForeignKey("words.id"), primary_key=True),
    Column("group_id", Integer, ForeignKey("groups.id"), primary_key=True),
    Index("ix_words_groups_group_id", "group_id"),
)


class Word(Base):
    """A vocabulary entry."""

    __tablename__ = "words"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    native_text: Mapped[str] = mapped_column(String(255), nullable=False)
    translated_text: Mapped[str] = mapped_column(Text, nullable=False)
    # Opaque structured payload; stored as-is, never read by the core
    metadata_json: Mapped[Any | None] = mapped_column("metadata", JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Word."""
        return f"<Word(id={self.id}, native_text='{self.native_text}')>"


class Group(Base):
    """A named collection of words."""

    __tablename__ = "groups"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of Group."""
        return f"<Group(id={self.id}, name='{self.name}')>"


class StudySession(Base):
    """One study run against a group using a catalog activity."""

    __tablename__ = "study_sessions"
    __table_args__ = (
        Index("ix_study_sessions_created_at", "created_at"),
        {"sqlite_autoincrement": True},
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    group_id: Mapped[int] = mapped_column(ForeignKey("groups.id"), nullable=False, index=True)
    # Resolved against the static activity catalog, not a stored table
    study_activity_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of StudySession."""
        return f"<StudySession(id={self.id}, group_id={self.group_id})>"


class WordReview(Base):
    """One correctness outcome for one word within one session. Append-only."""

    __tablename__ = "word_review_items"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    word_id: Mapped[int] = mapped_column(ForeignKey("words.id"), nullable=False, index=True)
    study_session_id: Mapped[int] = mapped_column(
        ForeignKey("study_sessions.id"), nullable=False, index=True
    )
    correct: Mapped[bool] = mapped_column(Boolean, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of WordReview."""
        return (
            f"<WordReview(id={self.id}, word_id={self.word_id}, "
            f"study_session_id={self.study_session_id}, correct={self.correct})>"
        )
