"""
TranslationTag model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime
from app.utils.text_utils import TAG_NAME_MAX_LENGTH


class TranslationTag(SQLModel, table=True):
    """TranslationTag table - slug-normalized labels such as 'web' or 'mobile'."""
    __tablename__ = "translation_tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=TAG_NAME_MAX_LENGTH)
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
