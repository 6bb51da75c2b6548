"""create_catalog_tables

Revision ID: 3f1c2a9d7b41
Revises:
Create Date: 2026-10-19 10:12:31.402118

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c2a9d7b41'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create categories, docs and codes tables."""
    op.create_table(
        'categories',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('category_name', sa.String(length=255), nullable=False),
        sa.Column('slug', sa.String(length=255), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_categories_slug', 'categories', ['slug'], unique=True)

    op.create_table(
        'docs',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('ui_name', sa.String(length=255), nullable=False),
        sa.Column('ui_subtitle', sa.String(length=255), nullable=True),
        sa.Column('docs', sa.Text(), nullable=True, comment='Long-form markup body'),
        sa.Column('unique_slug', sa.String(length=255), nullable=False),
        sa.Column(
            'category_id',
            sa.Integer(),
            sa.ForeignKey('categories.id', ondelete='SET NULL'),
            nullable=True,
        ),
        sa.Column(
            'parent_id',
            sa.Integer(),
            sa.ForeignKey('docs.id', ondelete='CASCADE'),
            nullable=True,
        ),
        *_timestamps(),
    )
    op.create_index('ix_docs_ui_name', 'docs', ['ui_name'])
    op.create_index('ix_docs_unique_slug', 'docs', ['unique_slug'], unique=True)
    op.create_index('ix_docs_category_id', 'docs', ['category_id'])
    op.create_index('ix_docs_parent_id', 'docs', ['parent_id'])

    op.create_table(
        'codes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('language', sa.String(length=64), nullable=False, comment='e.g. jsx, css, tailwind'),
        sa.Column('code', sa.Text(), nullable=False),
        sa.Column(
            'doc_id',
            sa.Integer(),
            sa.ForeignKey('docs.id', ondelete='CASCADE'),
            nullable=False,
        ),
        *_timestamps(),
    )
    op.create_index('ix_codes_language', 'codes', ['language'])
    op.create_index('ix_codes_doc_id', 'codes', ['doc_id'])


def downgrade() -> None:
    """Drop catalog tables."""
    op.drop_table('codes')
    op.drop_table('docs')
    op.drop_table('categories')
