"""Create languages, translation groups, translations, tags and users tables

Revision ID: 001_create_translation_tables
Revises: 
Create Date: 2025-11-01 06:08:35.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_create_translation_tables'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # Create languages table
    op.create_table(
        'languages',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('code', sa.String(length=10), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_languages_code'), 'languages', ['code'], unique=True)

    # Create translation_groups table
    op.create_table(
        'translation_groups',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('key', sa.String(length=255), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_translation_groups_key'), 'translation_groups', ['key'], unique=True)
    op.create_index(op.f('ix_translation_groups_created_at'), 'translation_groups', ['created_at'], unique=False)
    op.create_index(op.f('ix_translation_groups_updated_at'), 'translation_groups', ['updated_at'], unique=False)

    # Create translations table (one value per group and language)
    op.create_table(
        'translations',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('translation_group_id', sa.Integer(), nullable=False),
        sa.Column('language_id', sa.Integer(), nullable=False),
        sa.Column('value', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['translation_group_id'], ['translation_groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['language_id'], ['languages.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('translation_group_id', 'language_id', name='uq_translation_group_language')
    )
    op.create_index('ix_translations_language_group', 'translations', ['language_id', 'translation_group_id'], unique=False)

    # Create translation_tags table
    op.create_table(
        'translation_tags',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_translation_tags_name'), 'translation_tags', ['name'], unique=True)

    # Create translation_group_tag junction table
    op.create_table(
        'translation_group_tag',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('translation_group_id', sa.Integer(), nullable=False),
        sa.Column('translation_tag_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['translation_group_id'], ['translation_groups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['translation_tag_id'], ['translation_tags.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('translation_group_id', 'translation_tag_id', name='trans_grp_tag')
    )
    op.create_index(op.f('ix_translation_group_tag_translation_group_id'), 'translation_group_tag', ['translation_group_id'], unique=False)
    op.create_index(op.f('ix_translation_group_tag_translation_tag_id'), 'translation_group_tag', ['translation_tag_id'], unique=False)

    # Create users table
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)


def downgrade() -> None:
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    op.drop_index(op.f('ix_translation_group_tag_translation_tag_id'), table_name='translation_group_tag')
    op.drop_index(op.f('ix_translation_group_tag_translation_group_id'), table_name='translation_group_tag')
    op.drop_table('translation_group_tag')
    op.drop_index(op.f('ix_translation_tags_name'), table_name='translation_tags')
    op.drop_table('translation_tags')
    op.drop_index('ix_translations_language_group', table_name='translations')
    op.drop_table('translations')
    op.drop_index(op.f('ix_translation_groups_updated_at'), table_name='translation_groups')
    op.drop_index(op.f('ix_translation_groups_created_at'), table_name='translation_groups')
    op.drop_index(op.f('ix_translation_groups_key'), table_name='translation_groups')
    op.drop_table('translation_groups')
    op.drop_index(op.f('ix_languages_code'), table_name='languages')
    op.drop_table('languages')
