"""
Filter configuration schema for translation listings.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from app.models.enums import SortField, SortOrder


class TranslationFilter(BaseModel):
    """Filter, sort and pagination parameters for listing translation groups."""
    search: Optional[str] = None  # Case-insensitive match on key, description or any value
    tags: Optional[List[str]] = None  # Groups carrying at least one of these tags
    language: Optional[str] = None  # Only groups translated into this language code
    sort_by: SortField = SortField.KEY
    sort_order: SortOrder = SortOrder.ASC
    per_page: int = Field(15, ge=1)
    page: int = Field(1, ge=1)

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "search": "login",
                "tags": ["web", "auth"],
                "language": "en",
                "sort_by": "key",
                "sort_order": "asc",
                "per_page": 15,
                "page": 1
            }
        }
