"""initial schema with reference data

Revision ID: 0001_initial
Revises: 
Create Date: 2026-02-13

"""
from datetime import datetime, timezone
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


ALLERGENS = [
    ("CELERY", "Celery"),
    ("CEREALS_GLUTEN", "Cereals containing gluten"),
    ("CRUSTACEANS", "Crustaceans"),
    ("EGGS", "Eggs"),
    ("FISH", "Fish"),
    ("LUPIN", "Lupin"),
    ("MILK", "Milk"),
    ("MOLLUSCS", "Molluscs"),
    ("MUSTARD", "Mustard"),
    ("NUTS", "Tree nuts"),
    ("PEANUTS", "Peanuts"),
    ("SESAME", "Sesame"),
    ("SOYA", "Soya"),
    ("SULPHITES", "Sulphites"),
]

DIETARY_TAGS = [
    ("VEGAN", "Vegan"),
    ("VEGETARIAN", "Vegetarian"),
    ("GLUTEN_FREE", "Gluten Free"),
    ("DAIRY_FREE", "Dairy Free"),
    ("NUT_FREE", "Nut Free"),
    ("HALAL", "Halal"),
    ("KOSHER", "Kosher"),
]

QUOTE_STATUS = sa.Enum(
    'DRAFT', 'SENT', 'ACCEPTED', 'REJECTED', 'COMPLETED',
    name='quote_status',
)

MARGIN_STATUS = sa.Enum('GREEN', 'AMBER', 'RED', name='margin_status')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _reference_table(name: str) -> sa.Table:
    return op.create_table(
        name,
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('code', sa.String(50), nullable=False, unique=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.String(500), nullable=False, server_default=''),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
    )


def upgrade() -> None:
    op.create_table(
        'customers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('company', sa.String(200), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_customers_email', 'customers', ['email'], unique=True)

    op.create_table(
        'food_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('description', sa.String(500), nullable=False, server_default=''),
        sa.Column('cost_price', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('allergens', sa.Integer(), nullable=True),
        sa.Column('dietary_tags', sa.Integer(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_food_items_name', 'food_items', ['name'])

    op.create_table(
        'quotes',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('customer_id', sa.Integer(), sa.ForeignKey('customers.id', ondelete='CASCADE'), nullable=False),
        sa.Column('quote_number', sa.String(50), nullable=False),
        sa.Column('status', QUOTE_STATUS, nullable=False),
        sa.Column('quote_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('event_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('sent_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('vat_rate', sa.Numeric(precision=7, scale=4), nullable=False),
        sa.Column('markup_percentage', sa.Numeric(precision=7, scale=4), nullable=False),
        sa.Column('total_cost', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('total_price', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('margin', sa.Numeric(precision=9, scale=6), nullable=False),
        sa.Column('margin_status', MARGIN_STATUS, nullable=False),
        sa.Column('notes', sa.String(1000), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_quotes_customer_id', 'quotes', ['customer_id'])
    op.create_index('ix_quotes_quote_number', 'quotes', ['quote_number'], unique=True)
    op.create_index('ix_quotes_status', 'quotes', ['status'])

    op.create_table(
        'quote_line_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('quote_id', sa.Integer(), sa.ForeignKey('quotes.id', ondelete='CASCADE'), nullable=False),
        sa.Column('food_item_id', sa.Integer(), sa.ForeignKey('food_items.id', ondelete='RESTRICT'), nullable=False),
        sa.Column('description', sa.String(500), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('unit_cost', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('unit_price', sa.Numeric(precision=12, scale=4), nullable=False),
        sa.Column('line_total', sa.Numeric(precision=14, scale=4), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_quote_line_items_quote_id', 'quote_line_items', ['quote_id'])
    op.create_index('ix_quote_line_items_food_item_id', 'quote_line_items', ['food_item_id'])

    allergens = _reference_table('allergens')
    dietary_tags = _reference_table('dietary_tags')

    app_settings = op.create_table(
        'app_settings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('default_vat_rate', sa.Numeric(precision=7, scale=4), nullable=False),
        sa.Column('default_markup_percentage', sa.Numeric(precision=7, scale=4), nullable=False),
        sa.Column('margin_green_threshold_pct', sa.Numeric(precision=7, scale=4), nullable=False),
        sa.Column('margin_amber_threshold_pct', sa.Numeric(precision=7, scale=4), nullable=False),
        *_timestamps(),
    )

    op.bulk_insert(
        allergens,
        [{'code': code, 'name': name, 'description': '', 'is_active': True} for code, name in ALLERGENS],
    )
    op.bulk_insert(
        dietary_tags,
        [{'code': code, 'name': name, 'description': '', 'is_active': True} for code, name in DIETARY_TAGS],
    )

    now = datetime.now(timezone.utc)
    op.bulk_insert(
        app_settings,
        [{
            'id': 1,
            'default_vat_rate': 0.20,
            'default_markup_percentage': 0.70,
            'margin_green_threshold_pct': 0.70,
            'margin_amber_threshold_pct': 0.60,
            'created_at': now,
            'updated_at': now,
        }],
    )


def downgrade() -> None:
    op.drop_table('app_settings')
    op.drop_table('dietary_tags')
    op.drop_table('allergens')
    op.drop_index('ix_quote_line_items_food_item_id', table_name='quote_line_items')
    op.drop_index('ix_quote_line_items_quote_id', table_name='quote_line_items')
    op.drop_table('quote_line_items')
    op.drop_index('ix_quotes_status', table_name='quotes')
    op.drop_index('ix_quotes_quote_number', table_name='quotes')
    op.drop_index('ix_quotes_customer_id', table_name='quotes')
    op.drop_table('quotes')
    QUOTE_STATUS.drop(op.get_bind(), checkfirst=True)
    MARGIN_STATUS.drop(op.get_bind(), checkfirst=True)
    op.drop_index('ix_food_items_name', table_name='food_items')
    op.drop_table('food_items')
    op.drop_index('ix_customers_email', table_name='customers')
    op.drop_table('customers')
