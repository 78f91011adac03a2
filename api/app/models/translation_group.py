"""
TranslationGroup model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class TranslationGroup(SQLModel, table=True):
    """TranslationGroup table - one row per translation key (e.g. 'auth.login.header')."""
    __tablename__ = "translation_groups"

    id: Optional[int] = Field(default=None, primary_key=True)
    key: str = Field(unique=True, index=True, max_length=255)
    description: Optional[str] = Field(default=None, max_length=500)
    created_at: datetime = Field(default_factory=datetime.utcnow, index=True)
    updated_at: datetime = Field(default_factory=datetime.utcnow, index=True)
