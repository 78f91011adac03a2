import pytest
from sqlmodel import func, select

from app.core.exceptions import NotFoundError, ValidationError
from app.models import SortField, SortOrder, Translation, TranslationTag
from app.schemas.filter import TranslationFilter
from conftest import make_request


def count_rows(session, model):
    return session.exec(select(func.count()).select_from(model)).one()


def test_create_group_with_translations_and_tags(translation_service, languages, session):
    group = translation_service.create_translation_group(
        make_request(
            "auth.login.header",
            {"en": "Welcome Back", "fr": "Bon retour"},
            tags=["web", "auth"],
            description="Login header",
        )
    )

    assert group.key == "auth.login.header"
    assert group.description == "Login header"
    assert {t.language_code: t.value for t in group.translations} == {"en": "Welcome Back", "fr": "Bon retour"}
    assert group.tags == ["auth", "web"]
    assert count_rows(session, Translation) == 2


def test_create_same_key_upserts_without_duplicates(translation_service, languages, session):
    first = translation_service.create_translation_group(make_request("common.save", {"en": "Save"}))
    second = translation_service.create_translation_group(
        make_request("common.save", {"en": "Save changes", "es": "Guardar"}, description="ignored")
    )

    assert second.id == first.id
    assert second.description is None
    assert {t.language_code: t.value for t in second.translations} == {"en": "Save changes", "es": "Guardar"}
    assert count_rows(session, Translation) == 2


def test_tag_names_are_normalized_to_one_tag(translation_service, languages, session):
    group = translation_service.create_translation_group(
        make_request("common.ok", {"en": "OK"}, tags=["Web", "web"])
    )

    assert group.tags == ["web"]
    assert count_rows(session, TranslationTag) == 1


def test_unknown_language_is_skipped(translation_service, languages, session):
    group = translation_service.create_translation_group(
        make_request("common.cancel", {"en": "Cancel", "zz": "???"})
    )

    assert [t.language_code for t in group.translations] == ["en"]


def test_find_unknown_language_codes(translation_service, languages):
    assert translation_service.find_unknown_language_codes(["en", "zz", "xx", "zz"]) == ["zz", "xx"]
    assert translation_service.find_unknown_language_codes(["en", "fr"]) == []


def test_update_replaces_values_and_tags(translation_service, languages):
    group = translation_service.create_translation_group(
        make_request("nav.home", {"en": "Home"}, tags=["web", "mobile"])
    )

    updated = translation_service.update_translation_group(
        group.id,
        make_request("nav.home", {"en": "Start"}, tags=["desktop"], description="Home link"),
    )

    assert updated.description == "Home link"
    assert updated.translations[0].value == "Start"
    assert updated.tags == ["desktop"]


def test_update_without_tags_leaves_tags_untouched(translation_service, languages):
    group = translation_service.create_translation_group(
        make_request("nav.back", {"en": "Back"}, tags=["web"])
    )

    updated = translation_service.update_translation_group(group.id, make_request("nav.back", {"fr": "Retour"}))

    assert updated.tags == ["web"]
    assert {t.language_code for t in updated.translations} == {"en", "fr"}


def test_update_with_empty_tags_clears_them(translation_service, languages):
    group = translation_service.create_translation_group(
        make_request("nav.next", {"en": "Next"}, tags=["web"])
    )

    updated = translation_service.update_translation_group(group.id, make_request("nav.next", {"en": "Next"}, tags=[]))

    assert updated.tags == []


def test_update_can_rename_key(translation_service, languages):
    group = translation_service.create_translation_group(make_request("old.key", {"en": "Value"}))

    updated = translation_service.update_translation_group(group.id, make_request("new.key", {"en": "Value"}))

    assert updated.key == "new.key"
    assert translation_service.get_translation_by_key("old.key") is None


def test_update_key_clash_is_rejected(translation_service, languages):
    translation_service.create_translation_group(make_request("a.key", {"en": "A"}))
    other = translation_service.create_translation_group(make_request("b.key", {"en": "B"}))

    with pytest.raises(ValidationError):
        translation_service.update_translation_group(other.id, make_request("a.key", {"en": "B"}))

    assert translation_service.get_translation_by_id(other.id).key == "b.key"


def test_update_missing_group(translation_service, languages):
    with pytest.raises(NotFoundError):
        translation_service.update_translation_group(999, make_request("x.y", {"en": "X"}))


def test_get_by_id_and_key(translation_service, languages):
    group = translation_service.create_translation_group(make_request("common.yes", {"en": "Yes"}))

    assert translation_service.get_translation_by_id(group.id).key == "common.yes"
    assert translation_service.get_translation_by_key("common.yes").id == group.id
    assert translation_service.get_translation_by_id(12345) is None
    assert translation_service.get_translation_by_key("missing.key") is None


def test_pagination(translation_service, languages):
    for i in range(25):
        translation_service.create_translation_group(make_request(f"key.{i:02d}", {"en": f"Value {i}"}))

    first = translation_service.get_translations(TranslationFilter(per_page=10, page=1))
    last = translation_service.get_translations(TranslationFilter(per_page=10, page=3))

    assert first.total == 25
    assert first.last_page == 3
    assert len(first.items) == 10
    assert first.has_next is True
    assert first.has_previous is False
    assert [g.key for g in first.items][:2] == ["key.00", "key.01"]

    assert len(last.items) == 5
    assert last.has_next is False
    assert last.has_previous is True


def test_empty_listing_has_one_page(translation_service, languages):
    page = translation_service.get_translations(TranslationFilter())

    assert page.total == 0
    assert page.items == []
    assert page.last_page == 1


def test_search_matches_key_description_and_value(translation_service, languages):
    translation_service.create_translation_group(make_request("auth.login.title", {"en": "Sign in"}))
    translation_service.create_translation_group(
        make_request("auth.header", {"en": "Welcome"}, description="Shown on the LOGIN page")
    )
    translation_service.create_translation_group(make_request("auth.button", {"fr": "Login rapide"}))
    translation_service.create_translation_group(make_request("common.save", {"en": "Save"}))

    page = translation_service.get_translations(TranslationFilter(search="login"))

    assert sorted(g.key for g in page.items) == ["auth.button", "auth.header", "auth.login.title"]


def test_tag_filter_matches_any_tag(translation_service, languages):
    translation_service.create_translation_group(make_request("a", {"en": "A"}, tags=["web"]))
    translation_service.create_translation_group(make_request("b", {"en": "B"}, tags=["mobile"]))
    translation_service.create_translation_group(make_request("c", {"en": "C"}, tags=["desktop"]))

    page = translation_service.get_translations(TranslationFilter(tags=["Web", "mobile"]))

    assert [g.key for g in page.items] == ["a", "b"]


def test_language_filter_limits_groups_and_translations(translation_service, languages):
    translation_service.create_translation_group(make_request("a", {"en": "A", "fr": "A-fr"}))
    translation_service.create_translation_group(make_request("b", {"en": "B"}))

    page = translation_service.get_translations(TranslationFilter(language="fr"))

    assert [g.key for g in page.items] == ["a"]
    assert [t.language_code for t in page.items[0].translations] == ["fr"]


def test_sort_descending_by_key(translation_service, languages):
    for key in ["b", "a", "c"]:
        translation_service.create_translation_group(make_request(key, {"en": key}))

    page = translation_service.get_translations(
        TranslationFilter(sort_by=SortField.KEY, sort_order=SortOrder.DESC)
    )

    assert [g.key for g in page.items] == ["c", "b", "a"]


def test_stats(translation_service, languages):
    translation_service.create_translation_group(make_request("a", {"en": "A", "fr": "A"}, tags=["web"]))
    translation_service.create_translation_group(make_request("b", {"en": "B"}, tags=["web", "mobile"]))

    stats = translation_service.get_translations_stats()

    assert stats.total_groups == 2
    assert stats.total_translations == 3
    assert stats.total_languages == 3
    assert stats.total_tags == 2
    assert stats.translations_per_language == {"en": 2, "fr": 1}
