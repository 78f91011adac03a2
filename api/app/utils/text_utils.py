"""
Text utility functions.
"""
import re
import unicodedata
from typing import Iterable, List, Optional

TAG_NAME_MAX_LENGTH = 50


def slugify(text: str, separator: str = "-") -> str:
    """
    Convert text into a URL-friendly slug.
    Accents are transliterated to ASCII, case is folded, and any run of
    characters other than letters and digits becomes a single separator.

    Args:
        text: The text to slugify
        separator: Character placed between words

    Returns:
        Slug such as 'mobile-app' for 'Mobile App'
    """
    if not text:
        return ""

    ascii_text = unicodedata.normalize("NFKD", text).encode("ascii", "ignore").decode("ascii")
    ascii_text = ascii_text.replace("@", f"{separator}at{separator}")
    slug = re.sub(r"[^a-z0-9]+", separator, ascii_text.lower())
    return slug.strip(separator)


def normalize_tag_names(tags: Optional[Iterable[str]]) -> List[str]:
    """
    Slugify tag names and drop empties and duplicates, keeping first-seen order.

    Args:
        tags: Raw tag names as submitted by a client

    Returns:
        List of unique slugs, e.g. ['web'] for ['Web', 'web'],
        each cut to TAG_NAME_MAX_LENGTH characters
    """
    if not tags:
        return []

    seen = set()
    normalized = []
    for tag in tags:
        slug = slugify(tag)[:TAG_NAME_MAX_LENGTH].rstrip("-")
        if slug and slug not in seen:
            seen.add(slug)
            normalized.append(slug)
    return normalized
