from app.utils.text_utils import TAG_NAME_MAX_LENGTH, normalize_tag_names, slugify


def test_slugify_lowercases_and_joins_words():
    assert slugify("Mobile App") == "mobile-app"


def test_slugify_transliterates_accents():
    assert slugify("Écran d'accueil") == "ecran-d-accueil"


def test_slugify_collapses_symbols_and_trims():
    assert slugify("  --Web!!  ") == "web"
    assert slugify("a@b") == "a-at-b"
    assert slugify("") == ""


def test_slugify_custom_separator():
    assert slugify("Mobile App", separator="_") == "mobile_app"


def test_normalize_tag_names_deduplicates_case_variants():
    assert normalize_tag_names(["Web", "web", " WEB "]) == ["web"]


def test_normalize_tag_names_keeps_order_and_drops_empty():
    assert normalize_tag_names(["mobile", "!!!", "Desktop", "mobile"]) == ["mobile", "desktop"]


def test_normalize_tag_names_none():
    assert normalize_tag_names(None) == []
    assert normalize_tag_names([]) == []


def test_normalize_tag_names_caps_slug_length():
    slug = normalize_tag_names(["@" * 50])[0]

    assert len(slug) <= TAG_NAME_MAX_LENGTH
    assert slug.startswith("at-at")
    assert not slug.endswith("-")
