from app.services.export_service import generate_cache_key, resolve_format
from app.models import ExportFormat
from conftest import make_request


def test_cache_key_depends_on_every_parameter():
    base = generate_cache_key("en")

    assert base.startswith("translations_export:en:")
    assert generate_cache_key("en", ["web"]) != base
    assert generate_cache_key("en", ["web"]) != generate_cache_key("en", ["mobile"])
    assert generate_cache_key("en", include_empty=True) != base
    assert generate_cache_key("fr") != base


def test_cache_key_ignores_tag_order_and_case():
    assert generate_cache_key("en", ["Web", "mobile"]) == generate_cache_key("en", ["mobile", "web"])


def test_resolve_format_falls_back_to_flat():
    assert resolve_format("flat") == ExportFormat.FLAT
    assert resolve_format("FLAT") == ExportFormat.FLAT
    assert resolve_format("nested") == ExportFormat.FLAT
    assert resolve_format(None) == ExportFormat.FLAT


def test_export_flat_map(translation_service, export_service, languages):
    translation_service.create_translation_group(make_request("b.title", {"en": "Title", "fr": "Titre"}))
    translation_service.create_translation_group(make_request("a.label", {"en": "Label"}))

    assert export_service.export_translations("en") == {"a.label": "Label", "b.title": "Title"}
    assert export_service.export_translations("fr") == {"b.title": "Titre"}


def test_export_unknown_language_is_empty_and_not_cached(export_service, languages, cache):
    assert export_service.export_translations("zz") == {}
    assert cache.delete_prefix("translations_export:") == 0


def test_export_include_empty(translation_service, export_service, languages):
    translation_service.create_translation_group(make_request("a.one", {"en": "One", "fr": "Un"}))
    translation_service.create_translation_group(make_request("a.two", {"en": "Two"}))

    assert export_service.export_translations("fr") == {"a.one": "Un"}
    assert export_service.export_translations("fr", include_empty=True) == {"a.one": "Un", "a.two": ""}


def test_export_tag_filter(translation_service, export_service, languages):
    translation_service.create_translation_group(make_request("a", {"en": "A"}, tags=["web"]))
    translation_service.create_translation_group(make_request("b", {"en": "B"}, tags=["mobile"]))
    translation_service.create_translation_group(make_request("c", {"en": "C"}))

    assert export_service.export_translations("en", tags=["web"]) == {"a": "A"}
    assert export_service.export_translations("en", tags=["mobile"]) == {"b": "B"}
    assert export_service.export_translations("en") == {"a": "A", "b": "B", "c": "C"}


def test_export_is_served_from_cache(translation_service, export_service, languages, cache):
    translation_service.create_translation_group(make_request("a.b", {"en": "X"}))
    assert export_service.export_translations("en") == {"a.b": "X"}

    cache_key = generate_cache_key("en")
    cache.set(cache_key, {"a.b": "cached"}, ttl=60)

    assert export_service.export_translations("en") == {"a.b": "cached"}


def test_write_invalidates_cached_export(translation_service, export_service, languages):
    group = translation_service.create_translation_group(make_request("a.b", {"en": "X"}))
    assert export_service.export_translations("en") == {"a.b": "X"}

    translation_service.update_translation_group(group.id, make_request("a.b", {"en": "Y"}))

    assert export_service.export_translations("en") == {"a.b": "Y"}


def test_write_only_invalidates_written_languages(translation_service, export_service, languages, cache):
    translation_service.create_translation_group(make_request("a.b", {"en": "X", "fr": "X-fr"}))
    export_service.export_translations("en")
    export_service.export_translations("fr")

    translation_service.create_translation_group(make_request("a.b", {"fr": "Y-fr"}))

    assert cache.get(generate_cache_key("en")) == {"a.b": "X"}
    assert cache.get(generate_cache_key("fr")) is None


def test_clear_export_cache(export_service, translation_service, languages, cache):
    translation_service.create_translation_group(make_request("a.b", {"en": "X", "fr": "Y"}))
    export_service.export_translations("en")
    export_service.export_translations("en", tags=["web"])
    export_service.export_translations("fr")

    assert export_service.clear_export_cache("en") == 2
    assert export_service.clear_export_cache() == 1


def test_optimized_export_matches_cached_export(translation_service, export_service, languages):
    translation_service.create_translation_group(make_request("a", {"en": "A", "fr": "A-fr"}, tags=["web", "mobile"]))
    translation_service.create_translation_group(make_request("b", {"en": "B"}, tags=["mobile"]))
    translation_service.create_translation_group(make_request("c", {"fr": "C-fr"}))

    for kwargs in [
        {},
        {"tags": ["mobile"]},
        {"tags": ["web", "mobile"]},
        {"include_empty": True},
        {"tags": ["mobile"], "include_empty": True},
    ]:
        assert export_service.export_translations_optimized("en", **kwargs) == export_service.export_translations(
            "en", **kwargs
        )


def test_optimized_export_unknown_language(export_service, languages):
    assert export_service.export_translations_optimized("zz") == {}
