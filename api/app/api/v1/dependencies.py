"""Common dependencies for API routes."""
from fastapi import Depends
from sqlmodel import Session

from app.core.cache import CacheBackend, get_cache
from app.core.config import settings
from app.core.database import get_session
from app.core.security import get_current_user
from app.services.export_service import TranslationExportService
from app.services.translation_service import TranslationService


def get_export_service(
    session: Session = Depends(get_session),
    cache: CacheBackend = Depends(get_cache),
) -> TranslationExportService:
    return TranslationExportService(session, cache, ttl=settings.export_cache_ttl)


def get_translation_service(
    session: Session = Depends(get_session),
    export_service: TranslationExportService = Depends(get_export_service),
) -> TranslationService:
    return TranslationService(session, export_service)


# Re-export auth dependency for convenience
require_user = get_current_user
