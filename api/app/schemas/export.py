"""
Export schemas.
"""
from pydantic import BaseModel
from typing import Dict, Optional


class ExportMeta(BaseModel):
    """Metadata returned alongside an export."""
    language_code: str
    total_keys: int
    format: str = "flat"
    response_time_ms: Optional[float] = None


class ExportResponse(BaseModel):
    """Flat key/value export for one language."""
    success: bool = True
    data: Dict[str, str]
    meta: ExportMeta
