"""
Translation service for creating, updating, listing and counting translation groups.
"""
import logging
import math
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from sqlmodel import Session, select, func

from app.core.database import transaction
from app.core.exceptions import NotFoundError, ValidationError
from app.models import (
    Language,
    Translation,
    TranslationGroup,
    TranslationGroupTag,
    TranslationTag,
)
from app.schemas.filter import TranslationFilter
from app.schemas.translation import (
    TranslationGroupRead,
    TranslationGroupRequest,
    TranslationPage,
    TranslationRead,
    TranslationStats,
    TranslationValueInput,
)
from app.services.export_service import TranslationExportService
from app.services.filter_service import apply_sorting, build_filtered_query
from app.utils.text_utils import normalize_tag_names


class TranslationService:
    """Writes and queries translation groups; keeps the export cache in step with writes."""

    def __init__(
        self,
        session: Session,
        export_service: TranslationExportService,
        logger: Optional[logging.Logger] = None,
    ):
        self.session = session
        self.export_service = export_service
        self.logger = logger or logging.getLogger(__name__)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create_translation_group(self, data: TranslationGroupRequest) -> TranslationGroupRead:
        """
        Create a translation group, or extend the existing one with the same key.

        The description is only applied when the group is new. Translations are
        upserted per language and, when tags are given, the tag set is replaced.

        Args:
            data: Validated request payload

        Returns:
            The persisted group with translations and tags
        """
        with transaction(self.session):
            group = self.session.exec(
                select(TranslationGroup).where(TranslationGroup.key == data.key)
            ).first()

            if group is None:
                group = TranslationGroup(key=data.key, description=data.description)
                self.session.add(group)
                self.session.flush()
                self.logger.info(f"Created translation group '{group.key}' (id={group.id})")

            self._upsert_translations(group, data.translations)
            if data.tags is not None:
                self._sync_tags(group, data.tags)

            group_id = group.id

        self._clear_cache_for(data.translations)
        return self._load_group(group_id)

    def update_translation_group(self, group_id: int, data: TranslationGroupRequest) -> TranslationGroupRead:
        """
        Update a translation group in place.

        Raises:
            NotFoundError: If no group has this id
            ValidationError: If the new key is already used by another group
        """
        with transaction(self.session):
            group = self.session.get(TranslationGroup, group_id)
            if group is None:
                raise NotFoundError(f"No translation found with ID: {group_id}")

            if data.key and data.key != group.key:
                clash = self.session.exec(
                    select(TranslationGroup.id).where(
                        TranslationGroup.key == data.key,
                        TranslationGroup.id != group_id,
                    )
                ).first()
                if clash is not None:
                    raise ValidationError(f"The key '{data.key}' has already been taken")
                group.key = data.key

            if data.description is not None:
                group.description = data.description

            group.updated_at = datetime.utcnow()
            self.session.add(group)

            self._upsert_translations(group, data.translations)
            if data.tags is not None:
                self._sync_tags(group, data.tags)

        self.logger.info(f"Updated translation group {group_id}")
        self._clear_cache_for(data.translations)
        return self._load_group(group_id)

    def _upsert_translations(self, group: TranslationGroup, translations: List[TranslationValueInput]) -> None:
        """Insert or overwrite one row per (group, language). Unknown codes are skipped."""
        languages = self._languages_by_code(t.language_code for t in translations)
        now = datetime.utcnow()

        for item in translations:
            language = languages.get(item.language_code)
            if language is None:
                self.logger.warning(
                    f"Skipping translation for unknown language '{item.language_code}' on '{group.key}'"
                )
                continue

            existing = self.session.exec(
                select(Translation).where(
                    Translation.translation_group_id == group.id,
                    Translation.language_id == language.id,
                )
            ).first()

            if existing:
                existing.value = item.value
                existing.updated_at = now
                self.session.add(existing)
            else:
                self.session.add(
                    Translation(
                        translation_group_id=group.id,
                        language_id=language.id,
                        value=item.value,
                    )
                )
            # Flush so a repeated language code in the same payload updates this row
            self.session.flush()

    def _sync_tags(self, group: TranslationGroup, tags: List[str]) -> None:
        """Replace the group's tags with exactly this set, creating tags on demand."""
        tag_names = normalize_tag_names(tags)

        existing_tags = {}
        if tag_names:
            existing_tags = {
                tag.name: tag
                for tag in self.session.exec(
                    select(TranslationTag).where(TranslationTag.name.in_(tag_names))
                ).all()
            }

        for name in tag_names:
            if name not in existing_tags:
                tag = TranslationTag(name=name)
                self.session.add(tag)
                existing_tags[name] = tag
        self.session.flush()

        wanted_ids = {existing_tags[name].id for name in tag_names}
        links = self.session.exec(
            select(TranslationGroupTag).where(TranslationGroupTag.translation_group_id == group.id)
        ).all()
        linked_ids = set()

        for link in links:
            if link.translation_tag_id in wanted_ids:
                linked_ids.add(link.translation_tag_id)
            else:
                self.session.delete(link)

        for tag_id in wanted_ids - linked_ids:
            self.session.add(TranslationGroupTag(translation_group_id=group.id, translation_tag_id=tag_id))
        self.session.flush()

    def _clear_cache_for(self, translations: Iterable[TranslationValueInput]) -> None:
        for language_code in sorted({t.language_code for t in translations}):
            self.export_service.clear_export_cache(language_code)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_translations(self, filters: TranslationFilter) -> TranslationPage:
        """
        Get a page of translation groups matching the filters.

        When a language is given, only groups translated into it are returned
        and only that language's translation is attached to each group.
        """
        query = build_filtered_query(filters)

        total = self.session.exec(select(func.count()).select_from(query.subquery())).one()

        query = apply_sorting(query, filters.sort_by, filters.sort_order)
        offset = (filters.page - 1) * filters.per_page
        groups = self.session.exec(query.offset(offset).limit(filters.per_page)).all()

        items = self._serialize_groups(groups, language_code=filters.language)
        last_page = max(1, math.ceil(total / filters.per_page))

        return TranslationPage(
            items=items,
            total=total,
            page=filters.page,
            per_page=filters.per_page,
            last_page=last_page,
            has_next=offset + filters.per_page < total,
            has_previous=filters.page > 1,
        )

    def get_translation_by_id(self, group_id: int) -> Optional[TranslationGroupRead]:
        group = self.session.get(TranslationGroup, group_id)
        if group is None:
            return None
        return self._serialize_groups([group])[0]

    def get_translation_by_key(self, key: str) -> Optional[TranslationGroupRead]:
        group = self.session.exec(select(TranslationGroup).where(TranslationGroup.key == key)).first()
        if group is None:
            return None
        return self._serialize_groups([group])[0]

    def get_translations_stats(self) -> TranslationStats:
        """Count groups, translations, languages and tags, plus translations per language."""
        per_language_rows = self.session.exec(
            select(Language.code, func.count(Translation.id))
            .join(Translation, Translation.language_id == Language.id)
            .group_by(Language.id, Language.code)
        ).all()

        return TranslationStats(
            total_groups=self._count(TranslationGroup),
            total_translations=self._count(Translation),
            total_languages=self._count(Language),
            total_tags=self._count(TranslationTag),
            translations_per_language={code: count for code, count in per_language_rows},
        )

    def find_unknown_language_codes(self, codes: Iterable[str]) -> List[str]:
        """Return the codes (in input order, deduplicated) that match no language."""
        codes = list(dict.fromkeys(codes))
        known = self._languages_by_code(codes)
        return [code for code in codes if code not in known]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _count(self, model) -> int:
        return self.session.exec(select(func.count()).select_from(model)).one()

    def _languages_by_code(self, codes: Iterable[str]) -> Dict[str, Language]:
        codes = list(set(codes))
        if not codes:
            return {}
        languages = self.session.exec(select(Language).where(Language.code.in_(codes))).all()
        return {language.code: language for language in languages}

    def _load_group(self, group_id: int) -> TranslationGroupRead:
        group = self.session.get(TranslationGroup, group_id)
        if group is None:
            raise NotFoundError(f"No translation found with ID: {group_id}")
        self.session.refresh(group)
        return self._serialize_groups([group])[0]

    def _serialize_groups(
        self,
        groups: List[TranslationGroup],
        language_code: Optional[str] = None,
    ) -> List[TranslationGroupRead]:
        """Attach translations (optionally one language only) and tag names to groups."""
        if not groups:
            return []

        group_ids = [group.id for group in groups]

        translation_query = (
            select(Translation, Language)
            .join(Language, Language.id == Translation.language_id)
            .where(Translation.translation_group_id.in_(group_ids))
            .order_by(Language.code)
        )
        if language_code:
            translation_query = translation_query.where(Language.code == language_code)

        translations_by_group: Dict[int, List[TranslationRead]] = {gid: [] for gid in group_ids}
        for translation, language in self.session.exec(translation_query).all():
            translations_by_group[translation.translation_group_id].append(
                TranslationRead(
                    id=translation.id,
                    language_code=language.code,
                    language_name=language.name,
                    value=translation.value,
                    updated_at=translation.updated_at,
                )
            )

        tag_rows = self.session.exec(
            select(TranslationGroupTag.translation_group_id, TranslationTag.name)
            .join(TranslationTag, TranslationTag.id == TranslationGroupTag.translation_tag_id)
            .where(TranslationGroupTag.translation_group_id.in_(group_ids))
            .order_by(TranslationTag.name)
        ).all()
        tags_by_group: Dict[int, List[str]] = {gid: [] for gid in group_ids}
        for group_id, name in tag_rows:
            tags_by_group[group_id].append(name)

        return [
            TranslationGroupRead(
                id=group.id,
                key=group.key,
                description=group.description,
                translations=translations_by_group[group.id],
                tags=tags_by_group[group.id],
                created_at=group.created_at,
                updated_at=group.updated_at,
            )
            for group in groups
        ]
