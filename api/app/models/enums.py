"""
Model enums.
"""
from enum import Enum


class SortField(str, Enum):
    """Columns translation listings can be sorted by."""
    KEY = "key"
    CREATED_AT = "created_at"
    UPDATED_AT = "updated_at"


class SortOrder(str, Enum):
    """Sort direction."""
    ASC = "asc"
    DESC = "desc"


class ExportFormat(str, Enum):
    """Export layouts. Requests for any other layout are served flat."""
    FLAT = "flat"
