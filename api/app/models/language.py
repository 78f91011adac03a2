"""
Language model.
"""
from sqlmodel import SQLModel, Field
from typing import Optional
from datetime import datetime


class Language(SQLModel, table=True):
    """Language table - reference list of languages translations can be written in."""
    __tablename__ = "languages"

    id: Optional[int] = Field(default=None, primary_key=True)
    code: str = Field(unique=True, index=True, max_length=10)  # e.g., 'en', 'fr', 'es'
    name: str  # English, French, Spanish, etc.
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
