"""
TranslationGroupTag model - junction table for the many-to-many relationship between groups and tags.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from sqlalchemy import UniqueConstraint


class TranslationGroupTag(SQLModel, table=True):
    """TranslationGroupTag junction table - attaches tags to translation groups."""
    __tablename__ = "translation_group_tag"
    __table_args__ = (
        UniqueConstraint("translation_group_id", "translation_tag_id", name="trans_grp_tag"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)
    translation_group_id: int = Field(foreign_key="translation_groups.id", ondelete="CASCADE", index=True)
    translation_tag_id: int = Field(foreign_key="translation_tags.id", ondelete="CASCADE", index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
