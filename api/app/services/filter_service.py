"""
Filter service for building translation group listing queries.
"""
from sqlmodel import select, func, or_
from typing import Optional, List
from app.models import (
    Language,
    SortField,
    SortOrder,
    Translation,
    TranslationGroup,
    TranslationGroupTag,
    TranslationTag,
)
from app.schemas.filter import TranslationFilter
from app.utils.text_utils import normalize_tag_names


# ============================================================================
# Subquery Builders
# ============================================================================

def build_tagged_group_subquery(tag_names: List[str]):
    """Build subquery of group ids carrying at least one of the given tag names."""
    return (
        select(TranslationGroupTag.translation_group_id)
        .join(TranslationTag, TranslationTag.id == TranslationGroupTag.translation_tag_id)
        .where(TranslationTag.name.in_(tag_names))
        .distinct()
    )


def build_value_search_subquery(search_term: str):
    """Build subquery of group ids with a translation value matching the search term."""
    return (
        select(Translation.translation_group_id)
        .where(func.lower(Translation.value).like(search_term))
        .distinct()
    )


def build_language_group_subquery(language_code: str):
    """Build subquery of group ids that have a translation in the given language."""
    return (
        select(Translation.translation_group_id)
        .join(Language, Language.id == Translation.language_id)
        .where(Language.code == language_code)
        .distinct()
    )


# ============================================================================
# Query Filter Helpers
# ============================================================================

def apply_search_filter(query, search: Optional[str]):
    """Apply search filter: key OR description OR any translation value, case-insensitive."""
    if not search or not search.strip():
        return query

    search_term = f"%{search.strip().lower()}%"
    return query.where(
        or_(
            func.lower(TranslationGroup.key).like(search_term),
            func.lower(TranslationGroup.description).like(search_term),
            TranslationGroup.id.in_(build_value_search_subquery(search_term)),
        )
    )


def apply_tag_filter(query, tags: Optional[List[str]]):
    """Apply tag filter: groups with at least one of the tags."""
    tag_names = normalize_tag_names(tags)
    if not tag_names:
        return query
    return query.where(TranslationGroup.id.in_(build_tagged_group_subquery(tag_names)))


def apply_language_filter(query, language: Optional[str]):
    """Apply language filter: only groups translated into the language."""
    if not language:
        return query
    return query.where(TranslationGroup.id.in_(build_language_group_subquery(language)))


def apply_sorting(query, sort_by: SortField, sort_order: SortOrder):
    """Order by the requested column, with id as a stable tie-breaker."""
    column = getattr(TranslationGroup, SortField(sort_by).value)
    if SortOrder(sort_order) == SortOrder.DESC:
        return query.order_by(column.desc(), TranslationGroup.id.desc())
    return query.order_by(column.asc(), TranslationGroup.id.asc())


def build_filtered_query(filters: TranslationFilter):
    """Build the filtered (unsorted, unpaginated) translation group query.

    Args:
        filters: TranslationFilter with search, tags and language

    Returns:
        SQLModel select over TranslationGroup with all filters applied
    """
    query = select(TranslationGroup)
    query = apply_search_filter(query, filters.search)
    query = apply_tag_filter(query, filters.tags)
    query = apply_language_filter(query, filters.language)
    return query
