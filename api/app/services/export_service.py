"""
Export service producing flat key/value translation maps for frontend bundles.

Two read paths:
- export_translations: ORM-backed, read through the export cache.
- export_translations_optimized: one set-based query, never touches the cache.
  Used for file downloads over large datasets.
"""
import hashlib
import json
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy import and_
from sqlmodel import Session, select

from app.core.cache import CacheBackend
from app.models import (
    ExportFormat,
    Language,
    Translation,
    TranslationGroup,
    TranslationGroupTag,
    TranslationTag,
)
from app.services.filter_service import build_tagged_group_subquery
from app.utils.text_utils import normalize_tag_names

CACHE_PREFIX = "translations_export"
DEFAULT_EXPORT_TTL = 3600


def resolve_format(export_format: Optional[str]) -> ExportFormat:
    """Map a requested format name onto a supported layout; unknown names become flat."""
    try:
        return ExportFormat((export_format or ExportFormat.FLAT.value).lower())
    except ValueError:
        return ExportFormat.FLAT


def language_prefix(language_code: str) -> str:
    return f"{CACHE_PREFIX}:{language_code}:"


def generate_cache_key(
    language_code: str,
    tags: Optional[Iterable[str]] = None,
    export_format: str = "flat",
    include_empty: bool = False,
) -> str:
    """Cache key covering every parameter that changes the export result.

    The language code stays readable in the key so all entries of one language
    can be dropped by prefix.
    """
    params = {
        "tags": sorted(normalize_tag_names(tags)),
        "format": resolve_format(export_format).value,
        "include_empty": bool(include_empty),
    }
    digest = hashlib.sha1(json.dumps(params, sort_keys=True).encode("utf-8")).hexdigest()[:16]
    return f"{language_prefix(language_code)}{digest}"


class TranslationExportService:
    """Builds and caches per-language exports."""

    def __init__(
        self,
        session: Session,
        cache: CacheBackend,
        ttl: int = DEFAULT_EXPORT_TTL,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session
        self.cache = cache
        self.ttl = ttl
        self.logger = logger or logging.getLogger(__name__)

    def export_translations(
        self,
        language_code: str,
        tags: Optional[List[str]] = None,
        export_format: str = "flat",
        include_empty: bool = False,
    ) -> Dict[str, str]:
        """
        Export one language as {key: value}, reading through the cache.

        Args:
            language_code: Language to export; unknown codes yield an empty map
            tags: Only groups carrying at least one of these tags
            export_format: Output layout; unsupported values fall back to flat
            include_empty: Also include groups without a value ("" for them)

        Returns:
            Flat mapping of translation key to value
        """
        language = self.find_language(language_code)
        if language is None:
            self.logger.info(f"Export requested for unknown language '{language_code}'")
            return {}

        cache_key = generate_cache_key(language_code, tags, export_format, include_empty)
        self.logger.info(f"cache key: [{cache_key}]")

        return self.cache.remember(
            cache_key,
            self.ttl,
            lambda: self._generate_export_data(language, tags, export_format, include_empty),
        )

    def export_translations_optimized(
        self,
        language_code: str,
        tags: Optional[List[str]] = None,
        export_format: str = "flat",
        include_empty: bool = False,
    ) -> Dict[str, str]:
        """
        Export one language with a single set-based query, bypassing the cache.

        Groups are left-joined to their translation in the language; a tag
        filter adds an inner join through the association table.
        """
        language = self.find_language(language_code)
        if language is None:
            return {}

        query = (
            select(TranslationGroup.key, Translation.value)
            .outerjoin(
                Translation,
                and_(
                    Translation.translation_group_id == TranslationGroup.id,
                    Translation.language_id == language.id,
                ),
            )
        )

        if not include_empty:
            query = query.where(Translation.value.isnot(None), Translation.value != "")

        tag_names = normalize_tag_names(tags)
        if tag_names:
            query = (
                query.join(TranslationGroupTag, TranslationGroupTag.translation_group_id == TranslationGroup.id)
                .join(TranslationTag, TranslationTag.id == TranslationGroupTag.translation_tag_id)
                .where(TranslationTag.name.in_(tag_names))
                .distinct()
            )

        rows = self.session.exec(query.order_by(TranslationGroup.key)).all()
        return self._format_export_data(rows, export_format)

    def clear_export_cache(self, language_code: Optional[str] = None) -> int:
        """Drop cached exports for one language, or for every language when None."""
        prefix = language_prefix(language_code) if language_code else f"{CACHE_PREFIX}:"
        removed = self.cache.delete_prefix(prefix)
        self.logger.debug(f"Cleared {removed} export cache entries under '{prefix}'")
        return removed

    def find_language(self, language_code: str) -> Optional[Language]:
        return self.session.exec(select(Language).where(Language.code == language_code)).first()

    def _generate_export_data(
        self,
        language: Language,
        tags: Optional[List[str]],
        export_format: str,
        include_empty: bool,
    ) -> Dict[str, str]:
        query = select(TranslationGroup)

        tag_names = normalize_tag_names(tags)
        if tag_names:
            query = query.where(TranslationGroup.id.in_(build_tagged_group_subquery(tag_names)))

        if not include_empty:
            non_empty = select(Translation.translation_group_id).where(
                Translation.language_id == language.id,
                Translation.value.isnot(None),
                Translation.value != "",
            )
            query = query.where(TranslationGroup.id.in_(non_empty))

        groups = self.session.exec(query.order_by(TranslationGroup.key)).all()
        if not groups:
            return {}

        group_ids = query.with_only_columns(TranslationGroup.id)
        translations = self.session.exec(
            select(Translation).where(
                Translation.language_id == language.id,
                Translation.translation_group_id.in_(group_ids),
            )
        ).all()
        values_by_group = {t.translation_group_id: t.value for t in translations}

        rows = [(group.key, values_by_group.get(group.id)) for group in groups]
        return self._format_export_data(rows, export_format)

    def _format_export_data(self, rows: Iterable[Tuple[str, Optional[str]]], export_format: str) -> Dict[str, str]:
        layout = resolve_format(export_format)
        if layout == ExportFormat.FLAT:
            return self._format_flat(rows)
        raise ValueError(f"Unsupported export format: {layout}")

    @staticmethod
    def _format_flat(rows: Iterable[Tuple[str, Optional[str]]]) -> Dict[str, str]:
        export_data = {}
        for key, value in rows:
            export_data[key] = value if value is not None else ""
        return export_data
