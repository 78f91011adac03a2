"""
Models package - imports all table models so they register with SQLModel metadata.
"""
from app.models.enums import SortField, SortOrder, ExportFormat

from app.models.language import Language
from app.models.translation_group import TranslationGroup
from app.models.translation import Translation
from app.models.translation_tag import TranslationTag
from app.models.translation_group_tag import TranslationGroupTag
from app.models.user import User

__all__ = [
    'SortField',
    'SortOrder',
    'ExportFormat',
    'Language',
    'TranslationGroup',
    'Translation',
    'TranslationTag',
    'TranslationGroupTag',
    'User',
]
