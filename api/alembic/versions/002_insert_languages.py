"""Insert initial languages into languages table

Revision ID: 002_insert_languages
Revises: 001_create_translation_tables
Create Date: 2025-11-01 06:20:00.000000

"""
from datetime import datetime

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '002_insert_languages'
down_revision = '001_create_translation_tables'
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Insert languages into the languages table
    languages_table = sa.table(
        'languages',
        sa.column('code', sa.String),
        sa.column('name', sa.String),
        sa.column('created_at', sa.DateTime),
        sa.column('updated_at', sa.DateTime),
    )

    now = datetime.utcnow()
    op.bulk_insert(
        languages_table,
        [
            {'code': 'en', 'name': 'English', 'created_at': now, 'updated_at': now},
            {'code': 'fr', 'name': 'French', 'created_at': now, 'updated_at': now},
            {'code': 'es', 'name': 'Spanish', 'created_at': now, 'updated_at': now},
            {'code': 'de', 'name': 'German', 'created_at': now, 'updated_at': now},
        ]
    )


def downgrade() -> None:
    # Remove the inserted languages
    op.execute("DELETE FROM languages WHERE code IN ('en', 'fr', 'es', 'de')")
