"""
Seed service for reference data, API users and bulk demo translations.
"""
import logging
import random
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import insert
from sqlmodel import Session, func, select

from app.models import Language, Translation, TranslationGroup, TranslationGroupTag, TranslationTag, User

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGES: List[Tuple[str, str]] = [
    ("en", "English"),
    ("fr", "French"),
    ("es", "Spanish"),
    ("de", "German"),
]

DEFAULT_TAGS: List[str] = ["mobile", "desktop", "web"]

KEY_CATEGORIES = ["auth", "common", "dashboard", "errors", "forms", "navigation", "settings"]
KEY_SECTIONS = ["button", "header", "label", "message", "placeholder", "title", "tooltip"]

SAMPLE_VALUES: Dict[str, List[str]] = {
    "en": ["Save changes", "Cancel", "Loading...", "Welcome back", "Please sign in", "This field is required"],
    "fr": ["Enregistrer", "Annuler", "Chargement...", "Bon retour", "Veuillez vous connecter", "Ce champ est obligatoire"],
    "es": ["Guardar cambios", "Cancelar", "Cargando...", "Bienvenido de nuevo", "Inicie sesión", "Este campo es obligatorio"],
    "de": ["Änderungen speichern", "Abbrechen", "Wird geladen...", "Willkommen zurück", "Bitte anmelden", "Dieses Feld ist erforderlich"],
}


def seed_languages(session: Session, languages: Sequence[Tuple[str, str]] = DEFAULT_LANGUAGES) -> int:
    """
    Insert languages that are not present yet.

    Args:
        session: Database session
        languages: (code, name) pairs

    Returns:
        Number of languages created
    """
    existing = set(session.exec(select(Language.code)).all())
    created = 0
    for code, name in languages:
        if code in existing:
            continue
        session.add(Language(code=code, name=name))
        created += 1
    session.commit()
    logger.info(f"Seeded {created} languages ({len(existing)} already present)")
    return created


def seed_tags(session: Session, names: Sequence[str] = DEFAULT_TAGS) -> int:
    """Insert tags that are not present yet and return how many were created."""
    existing = set(session.exec(select(TranslationTag.name)).all())
    created = 0
    for name in names:
        if name in existing:
            continue
        session.add(TranslationTag(name=name))
        existing.add(name)
        created += 1
    session.commit()
    logger.info(f"Seeded {created} tags")
    return created


def create_user(session: Session, name: str, email: str, password: str) -> User:
    """
    Create an API user, or reset the password of the user with this email.

    Returns:
        The created or updated user
    """
    user = session.exec(select(User).where(User.email == email)).first()
    if user:
        user.name = name
        user.password = User.hash_password(password)
        logger.info(f"Updated existing user {email}")
    else:
        user = User(name=name, email=email, password=User.hash_password(password))
        logger.info(f"Created user {email}")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def generate_key(index: int, rng: random.Random) -> str:
    """Build a dotted key like 'auth.header.00042'; the index keeps keys unique."""
    return f"{rng.choice(KEY_CATEGORIES)}.{rng.choice(KEY_SECTIONS)}.{index:05d}"


def generate_value(language_code: str, rng: random.Random) -> str:
    values = SAMPLE_VALUES.get(language_code, SAMPLE_VALUES["en"])
    return rng.choice(values)


def seed_translation_groups(
    session: Session,
    count: int,
    batch_size: int = 1000,
    seed: Optional[int] = None,
) -> int:
    """
    Bulk-create demo translation groups with a value in every language.

    When tags exist, each group is linked to one or two of them at random.

    Groups are inserted in batches; translations for each batch are written
    with a single multi-row insert.

    Args:
        session: Database session
        count: Number of groups to create
        batch_size: Groups per batch
        seed: Optional random seed for repeatable data

    Returns:
        Number of groups created
    """
    languages = session.exec(select(Language)).all()
    if not languages:
        raise ValueError("No languages found. Seed languages first.")

    tags = session.exec(select(TranslationTag)).all()
    rng = random.Random(seed)
    start_index = session.exec(select(func.count()).select_from(TranslationGroup)).one()
    created = 0

    while created < count:
        current_batch = min(batch_size, count - created)
        now = datetime.utcnow()

        groups = [
            TranslationGroup(
                key=generate_key(start_index + created + i, rng),
                description=f"Seeded translation {start_index + created + i}",
                created_at=now,
                updated_at=now,
            )
            for i in range(current_batch)
        ]
        session.add_all(groups)
        session.flush()

        rows = [
            {
                "translation_group_id": group.id,
                "language_id": language.id,
                "value": generate_value(language.code, rng),
                "created_at": now,
                "updated_at": now,
            }
            for group in groups
            for language in languages
        ]
        session.execute(insert(Translation), rows)

        if tags:
            tag_rows = [
                {
                    "translation_group_id": group.id,
                    "translation_tag_id": tag.id,
                    "created_at": now,
                    "updated_at": now,
                }
                for group in groups
                for tag in rng.sample(tags, min(len(tags), rng.randint(1, 2)))
            ]
            session.execute(insert(TranslationGroupTag), tag_rows)

        session.commit()

        created += current_batch
        logger.info(f"Created {created}/{count} groups")

    return created
