"""create_products

Revision ID: 3f1a9c2b7d10
Revises:
Create Date: 2026-10-19 09:12:41.301552

"""
from alembic import op
import sqlalchemy as sa


revision = '3f1a9c2b7d10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'products',
        sa.Column('id', sa.String(length=32), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('price', sa.Numeric(10, 2), nullable=False),
        sa.Column('image_url', sa.String(length=512), nullable=False),
        sa.Column('category', sa.String(length=100), nullable=False),
        sa.Column('origin', sa.String(length=100), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False),
        sa.Column('is_featured', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_products_name', 'products', ['name'])
    op.create_index('ix_products_category', 'products', ['category'])
    op.create_index('ix_products_is_featured', 'products', ['is_featured'])


def downgrade() -> None:
    op.drop_index('ix_products_is_featured', table_name='products')
    op.drop_index('ix_products_category', table_name='products')
    op.drop_index('ix_products_name', table_name='products')
    op.drop_table('products')
