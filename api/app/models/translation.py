"""
Translation model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from sqlalchemy import Column, Index, Text, UniqueConstraint


class Translation(SQLModel, table=True):
    """Translation table - the value of a translation group in one language."""
    __tablename__ = "translations"
    __table_args__ = (
        UniqueConstraint("translation_group_id", "language_id", name="uq_translation_group_language"),
        Index("ix_translations_language_group", "language_id", "translation_group_id"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    translation_group_id: int = Field(foreign_key="translation_groups.id", ondelete="CASCADE")
    language_id: int = Field(foreign_key="languages.id", ondelete="CASCADE")
    value: str = Field(sa_column=Column(Text, nullable=False))
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
