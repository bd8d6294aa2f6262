"""initial schema: users, pets, favorites, adoption_interest

Revision ID: 0001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(100), nullable=False, unique=True),
        sa.Column('password_digest', sa.String(255), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('phone', sa.String(20), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'pets',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('species', sa.String(50), nullable=False),
        sa.Column('breed', sa.String(100)),
        sa.Column('age', sa.Integer()),
        sa.Column('age_unit', sa.String(10), nullable=False, server_default='months'),
        sa.Column('gender', sa.String(1), nullable=False),
        sa.Column('size', sa.String(10), nullable=False),
        sa.Column('weight', sa.Float()),
        sa.Column('description', sa.Text()),
        sa.Column('health_info', sa.Text()),
        sa.Column('temperament', sa.String(100)),
        sa.Column('location', sa.String(200)),
        sa.Column('status', sa.String(20), nullable=False, server_default='available'),
        sa.Column('is_vaccinated', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_dewormed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_neutered', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('image_url', sa.String(500)),
        sa.Column('additional_images', sa.JSON(), nullable=True),
        sa.Column('created_by', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_pets_species', 'pets', ['species'])
    op.create_index('ix_pets_status', 'pets', ['status'])

    op.create_table(
        'favorites',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('pet_id', sa.Integer(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'pet_id', name='uq_favorites_user_pet'),
    )
    op.create_index('ix_favorites_user_id', 'favorites', ['user_id'])
    op.create_index('ix_favorites_pet_id', 'favorites', ['pet_id'])

    op.create_table(
        'adoption_interest',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('pet_id', sa.Integer(), sa.ForeignKey('pets.id', ondelete='CASCADE'), nullable=False),
        sa.Column('user_id', sa.Integer(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('user_name', sa.String(100), nullable=False),
        sa.Column('user_email', sa.String(100), nullable=False),
        sa.Column('user_phone', sa.String(20)),
        sa.Column('message', sa.Text()),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('notes', sa.Text()),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_adoption_interest_pet_id', 'adoption_interest', ['pet_id'])
    op.create_index('ix_adoption_interest_status', 'adoption_interest', ['status'])


def downgrade() -> None:
    op.drop_index('ix_adoption_interest_status', table_name='adoption_interest')
    op.drop_index('ix_adoption_interest_pet_id', table_name='adoption_interest')
    op.drop_table('adoption_interest')
    op.drop_index('ix_favorites_pet_id', table_name='favorites')
    op.drop_index('ix_favorites_user_id', table_name='favorites')
    op.drop_table('favorites')
    op.drop_index('ix_pets_status', table_name='pets')
    op.drop_index('ix_pets_species', table_name='pets')
    op.drop_table('pets')
    op.drop_table('users')
