"""
Translation group schemas.
"""
from pydantic import BaseModel, Field, field_validator
from typing import Dict, List, Optional
from datetime import datetime
from app.utils.text_utils import TAG_NAME_MAX_LENGTH, slugify


class TranslationValueInput(BaseModel):
    """One language value inside a create/update request."""
    language_code: str = Field(..., min_length=1, max_length=10, description="Language code (e.g., 'en')")
    value: str = Field(..., min_length=1, description="Translated text")


class TranslationGroupRequest(BaseModel):
    """Request schema for creating or updating a translation group."""
    key: str = Field(..., min_length=1, max_length=255, description="Unique key, e.g. 'auth.login.header'")
    description: Optional[str] = Field(None, max_length=500)
    translations: List[TranslationValueInput] = Field(..., min_length=1, description="At least one translation is required")
    tags: Optional[List[str]] = None

    @field_validator('key')
    @classmethod
    def strip_key(cls, v: str) -> str:
        """Trim whitespace and reject blank keys."""
        v = v.strip()
        if not v:
            raise ValueError("Translation key is required")
        return v

    @field_validator('tags')
    @classmethod
    def validate_tags(cls, v):
        """Each tag name, and the slug stored for it, is limited to 50 characters."""
        if v is None:
            return v
        for tag in v:
            if len(tag) > TAG_NAME_MAX_LENGTH or len(slugify(tag)) > TAG_NAME_MAX_LENGTH:
                raise ValueError(f"Tag '{tag[:20]}...' exceeds {TAG_NAME_MAX_LENGTH} characters")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "key": "auth.login.header",
                "description": "Login page header title",
                "translations": [
                    {"language_code": "en", "value": "Welcome Back"},
                    {"language_code": "fr", "value": "Bon retour"},
                ],
                "tags": ["web", "auth"],
            }
        }


class TranslationRead(BaseModel):
    """A single language value of a translation group."""
    id: int
    language_code: str
    language_name: str
    value: str
    updated_at: Optional[datetime] = None


class TranslationGroupRead(BaseModel):
    """Translation group with its translations and tag names."""
    id: int
    key: str
    description: Optional[str] = None
    translations: List[TranslationRead] = []
    tags: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TranslationPage(BaseModel):
    """One page of translation groups plus offset pagination metadata."""
    items: List[TranslationGroupRead]
    total: int
    page: int
    per_page: int
    last_page: int
    has_next: bool
    has_previous: bool


class TranslationStats(BaseModel):
    """Aggregate counters over the translation store."""
    total_groups: int
    total_translations: int
    total_languages: int
    total_tags: int
    translations_per_language: Dict[str, int]


class TranslationGroupResponse(BaseModel):
    """Envelope for a single translation group."""
    success: bool = True
    data: TranslationGroupRead
    response_time_ms: Optional[float] = None


class TranslationListResponse(BaseModel):
    """Envelope for a page of translation groups."""
    success: bool = True
    data: TranslationPage
    response_time_ms: Optional[float] = None
    filters: Optional[dict] = None


class TranslationStatsResponse(BaseModel):
    """Envelope for translation statistics."""
    success: bool = True
    data: TranslationStats
    response_time_ms: Optional[float] = None
