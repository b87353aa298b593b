"""Create initial schema

Revision ID: 20261017_0001
Revises: 
Create Date: 2026-10-17 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect


# revision identifiers, used by Alembic.
revision: str = '20261017_0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

def _has_table(bind, name: str) -> bool:
    try:
        insp = inspect(bind)
        return insp.has_table(name)
    except Exception:
        return False

def upgrade() -> None:
    bind = op.get_bind()

    bookingstatus_enum = sa.Enum('PENDING', 'CONFIRMED', 'CANCELLED', name='bookingstatus')

    # Create users table
    if not _has_table(bind, 'users'):
        op.create_table('users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('login', sa.String(length=100), nullable=False),
            sa.Column('hashed_password', sa.String(length=255), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('first_name', sa.String(length=100), nullable=False),
            sa.Column('last_name', sa.String(length=100), nullable=False),
            sa.Column('phone_number', sa.String(length=50), nullable=False),
            sa.Column('is_host', sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
        op.create_index(op.f('ix_users_login'), 'users', ['login'], unique=True)
        op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    # Create properties table
    if not _has_table(bind, 'properties'):
        op.create_table('properties',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('host_id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('description', sa.Text(), nullable=False),
            sa.Column('city', sa.String(length=200), nullable=False),
            sa.Column('price', sa.Integer(), nullable=False),
            sa.Column('rooms', sa.Integer(), server_default='1', nullable=False),
            sa.Column('bathrooms', sa.Integer(), server_default='1', nullable=False),
            sa.Column('area', sa.Integer(), server_default='0', nullable=False),
            sa.Column('has_wifi', sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.Column('has_parking', sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.Column('has_pool', sa.Boolean(), server_default=sa.false(), nullable=False),
            sa.Column('rating', sa.Integer(), nullable=True),
            sa.Column('image_url', sa.String(length=500), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(['host_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_properties_id'), 'properties', ['id'], unique=False)
        op.create_index(op.f('ix_properties_host_id'), 'properties', ['host_id'], unique=False)
        op.create_index(op.f('ix_properties_city'), 'properties', ['city'], unique=False)

    # Create photos table
    if not _has_table(bind, 'photos'):
        op.create_table('photos',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('property_id', sa.Integer(), nullable=False),
            sa.Column('image_url', sa.String(length=500), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_photos_id'), 'photos', ['id'], unique=False)
        op.create_index(op.f('ix_photos_property_id'), 'photos', ['property_id'], unique=False)

    # Create bookings table
    if not _has_table(bind, 'bookings'):
        op.create_table('bookings',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('property_id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('check_in_date', sa.Date(), nullable=False),
            sa.Column('check_out_date', sa.Date(), nullable=False),
            sa.Column('guests', sa.Integer(), server_default='1', nullable=False),
            sa.Column('total_price', sa.Integer(), nullable=False),
            sa.Column('status', bookingstatus_enum, server_default='PENDING', nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_bookings_id'), 'bookings', ['id'], unique=False)
        op.create_index(op.f('ix_bookings_property_id'), 'bookings', ['property_id'], unique=False)
        op.create_index(op.f('ix_bookings_user_id'), 'bookings', ['user_id'], unique=False)
        op.create_index(op.f('ix_bookings_check_in_date'), 'bookings', ['check_in_date'], unique=False)
        op.create_index(op.f('ix_bookings_check_out_date'), 'bookings', ['check_out_date'], unique=False)

    # Create reviews table
    if not _has_table(bind, 'reviews'):
        op.create_table('reviews',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('property_id', sa.Integer(), nullable=False),
            sa.Column('user_id', sa.Integer(), nullable=False),
            sa.Column('rating', sa.Integer(), nullable=False),
            sa.Column('comment', sa.Text(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.ForeignKeyConstraint(['property_id'], ['properties.id'], ),
            sa.ForeignKeyConstraint(['user_id'], ['users.id'], ),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('property_id', 'user_id', name='uq_review_property_user'),
            sa.CheckConstraint('rating BETWEEN 1 AND 5', name='ck_review_rating_range')
        )
        op.create_index(op.f('ix_reviews_id'), 'reviews', ['id'], unique=False)
        op.create_index(op.f('ix_reviews_property_id'), 'reviews', ['property_id'], unique=False)
        op.create_index(op.f('ix_reviews_user_id'), 'reviews', ['user_id'], unique=False)

    # Create waitlist table
    if not _has_table(bind, 'waitlist'):
        op.create_table('waitlist',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.String(length=255), nullable=False),
            sa.Column('name', sa.String(length=200), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_waitlist_id'), 'waitlist', ['id'], unique=False)
        op.create_index(op.f('ix_waitlist_email'), 'waitlist', ['email'], unique=True)


def downgrade() -> None:
    bind = op.get_bind()
    dialect_name = bind.dialect.name
    op.drop_table('waitlist')
    op.drop_table('reviews')
    op.drop_table('bookings')
    op.drop_table('photos')
    op.drop_table('properties')
    op.drop_table('users')

    # Drop ENUM types for PostgreSQL
    if dialect_name == 'postgresql':
        sa.Enum(name='bookingstatus').drop(bind, checkfirst=True)
