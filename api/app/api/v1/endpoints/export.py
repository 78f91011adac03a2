"""
Export endpoints returning flat key/value maps for one language.
"""
import json
import logging
import time
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.api.v1.dependencies import get_export_service, require_user
from app.core.exceptions import ValidationError
from app.schemas.export import ExportMeta, ExportResponse
from app.services.export_service import TranslationExportService, resolve_format
from .utils import elapsed_ms, merge_tag_params

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"], dependencies=[Depends(require_user)])


def ensure_language_exists(service: TranslationExportService, language_code: str) -> None:
    if service.find_language(language_code) is None:
        raise ValidationError("The selected language code is invalid")


@router.get("/translations", response_model=ExportResponse)
async def export_translations(
    language_code: str = Query(..., min_length=1, max_length=10, description="Language code for translations"),
    tags: Optional[List[str]] = Query(None, description="Filter by tags"),
    bracket_tags: Optional[List[str]] = Query(None, alias="tags[]", description="Filter by tags, bracket form"),
    export_format: str = Query("flat", alias="format", description="Export format"),
    include_empty: bool = Query(False, description="Include keys without a value"),
    service: TranslationExportService = Depends(get_export_service),
):
    """Export translations of one language for frontend applications."""
    start_time = time.perf_counter()
    ensure_language_exists(service, language_code)

    export_data = service.export_translations(
        language_code, merge_tag_params(tags, bracket_tags), export_format, include_empty
    )

    return ExportResponse(
        data=export_data,
        meta=ExportMeta(
            language_code=language_code,
            total_keys=len(export_data),
            format=resolve_format(export_format).value,
            response_time_ms=elapsed_ms(start_time),
        ),
    )


@router.get("/translations/download")
async def download_translations(
    language_code: str = Query(..., min_length=1, max_length=10, description="Language code for translations"),
    tags: Optional[List[str]] = Query(None, description="Filter by tags"),
    bracket_tags: Optional[List[str]] = Query(None, alias="tags[]", description="Filter by tags, bracket form"),
    export_format: str = Query("flat", alias="format", description="Export format"),
    include_empty: bool = Query(False, description="Include keys without a value"),
    service: TranslationExportService = Depends(get_export_service),
):
    """Download translations of one language as a JSON file."""
    start_time = time.perf_counter()
    ensure_language_exists(service, language_code)

    export_data = service.export_translations_optimized(
        language_code, merge_tag_params(tags, bracket_tags), export_format, include_empty
    )

    file_name = f"translations_{language_code}_{date.today().isoformat()}.json"
    logger.info(f"Prepared {file_name} with {len(export_data)} keys")

    return Response(
        content=json.dumps(export_data, ensure_ascii=False),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{file_name}"',
            "X-Response-Time": f"{elapsed_ms(start_time)}ms",
        },
    )
