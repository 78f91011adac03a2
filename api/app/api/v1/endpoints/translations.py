"""
Translation group endpoints: list, fetch, create, update and statistics.
"""
import logging
import time
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.api.v1.dependencies import get_translation_service, require_user
from app.core.config import settings
from app.core.exceptions import NotFoundError, ValidationError
from app.models import SortField, SortOrder
from app.schemas.filter import TranslationFilter
from app.schemas.translation import (
    TranslationGroupRequest,
    TranslationGroupResponse,
    TranslationListResponse,
    TranslationStatsResponse,
)
from app.services.translation_service import TranslationService
from .utils import elapsed_ms, merge_tag_params

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/translations", tags=["translations"], dependencies=[Depends(require_user)])


def ensure_languages_exist(service: TranslationService, request: TranslationGroupRequest) -> None:
    """Reject the payload if any translation names a language that does not exist."""
    unknown = service.find_unknown_language_codes(t.language_code for t in request.translations)
    if unknown:
        raise ValidationError(f"The specified language does not exist: {', '.join(unknown)}")


@router.get("", response_model=TranslationListResponse)
async def list_translations(
    search: Optional[str] = Query(None, description="Search in key, description, or translation value"),
    tags: Optional[List[str]] = Query(None, description="Filter by tags"),
    bracket_tags: Optional[List[str]] = Query(None, alias="tags[]", description="Filter by tags, bracket form"),
    language_code: Optional[str] = Query(None, max_length=10, description="Filter by language code"),
    per_page: int = Query(settings.default_per_page, ge=1, le=settings.max_per_page),
    page: int = Query(1, ge=1),
    sort_by: SortField = Query(SortField.KEY),
    sort_order: SortOrder = Query(SortOrder.ASC),
    service: TranslationService = Depends(get_translation_service),
):
    """Get a paginated list of translation groups with filtering and search."""
    start_time = time.perf_counter()

    filters = TranslationFilter(
        search=search,
        tags=merge_tag_params(tags, bracket_tags),
        language=language_code,
        sort_by=sort_by,
        sort_order=sort_order,
        per_page=per_page,
        page=page,
    )
    result = service.get_translations(filters)

    return TranslationListResponse(
        data=result,
        response_time_ms=elapsed_ms(start_time),
        filters=filters.model_dump(mode="json", exclude_none=True),
    )


@router.get("/stats", response_model=TranslationStatsResponse)
async def translation_stats(
    service: TranslationService = Depends(get_translation_service),
):
    """Get aggregate counters over groups, translations, languages and tags."""
    start_time = time.perf_counter()
    stats = service.get_translations_stats()
    return TranslationStatsResponse(data=stats, response_time_ms=elapsed_ms(start_time))


@router.get("/key/{key}", response_model=TranslationGroupResponse)
async def get_translation_by_key(
    key: str,
    service: TranslationService = Depends(get_translation_service),
):
    """Get a translation group by its unique key."""
    start_time = time.perf_counter()
    group = service.get_translation_by_key(key)
    if group is None:
        raise NotFoundError("Translation not found")
    return TranslationGroupResponse(data=group, response_time_ms=elapsed_ms(start_time))


@router.get("/{group_id}", response_model=TranslationGroupResponse)
async def get_translation(
    group_id: int,
    service: TranslationService = Depends(get_translation_service),
):
    """Get a translation group by its ID."""
    start_time = time.perf_counter()
    group = service.get_translation_by_id(group_id)
    if group is None:
        raise NotFoundError("Translation not found")
    return TranslationGroupResponse(data=group, response_time_ms=elapsed_ms(start_time))


@router.post("", response_model=TranslationGroupResponse, status_code=status.HTTP_201_CREATED)
async def create_translation(
    request: TranslationGroupRequest,
    service: TranslationService = Depends(get_translation_service),
):
    """Create a translation group with one value per language."""
    start_time = time.perf_counter()
    ensure_languages_exist(service, request)
    group = service.create_translation_group(request)
    return TranslationGroupResponse(data=group, response_time_ms=elapsed_ms(start_time))


@router.put("/{group_id}", response_model=TranslationGroupResponse)
async def update_translation(
    group_id: int,
    request: TranslationGroupRequest,
    service: TranslationService = Depends(get_translation_service),
):
    """Update a translation group's key, description, values and tags."""
    start_time = time.perf_counter()
    ensure_languages_exist(service, request)
    group = service.update_translation_group(group_id, request)
    return TranslationGroupResponse(data=group, response_time_ms=elapsed_ms(start_time))
