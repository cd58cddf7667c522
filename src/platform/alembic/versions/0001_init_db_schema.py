"""init_db_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Schema:
- users: accounts with role (user/admin)
- movies: catalog entries, unique title
- showtimes: screenings with capacity and the reserved counter
- reservations: committed bookings, seats stored as a list of labels
- reservation_seats: one row per booked seat, primary key (showtime_id, seat_label)
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('username', sa.String(length=150), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_username'), 'users', ['username'], unique=True)

    op.create_table(
        'movies',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('genre', sa.String(length=100), nullable=False),
        sa.Column('poster_image', sa.String(length=500), nullable=False),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            'updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('title'),
    )
    op.create_index(op.f('ix_movies_genre'), 'movies', ['genre'], unique=False)

    op.create_table(
        'showtimes',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('movie_id', sa.Integer(), nullable=False),
        sa.Column('start_time', sa.DateTime(timezone=True), nullable=False),
        sa.Column('capacity', sa.Integer(), nullable=False),
        sa.Column('reserved', sa.Integer(), nullable=False),
        sa.CheckConstraint('capacity >= 0', name='ck_showtime_capacity_non_negative'),
        sa.CheckConstraint(
            'reserved >= 0 AND reserved <= capacity', name='ck_showtime_reserved_within_capacity'
        ),
        sa.ForeignKeyConstraint(['movie_id'], ['movies.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_showtimes_movie_id'), 'showtimes', ['movie_id'], unique=False)

    op.create_table(
        'reservations',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('movie_id', sa.Integer(), nullable=False),
        sa.Column('showtime_id', sa.Integer(), nullable=False),
        sa.Column(
            'seats', sa.JSON().with_variant(ARRAY(sa.String(length=16)), 'postgresql'), nullable=False
        ),
        sa.Column(
            'created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.ForeignKeyConstraint(['user_id'], ['users.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['movie_id'], ['movies.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['showtime_id'], ['showtimes.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_reservations_user_id'), 'reservations', ['user_id'], unique=False)
    op.create_index(op.f('ix_reservations_movie_id'), 'reservations', ['movie_id'], unique=False)
    op.create_index(
        op.f('ix_reservations_showtime_id'), 'reservations', ['showtime_id'], unique=False
    )

    op.create_table(
        'reservation_seats',
        sa.Column('showtime_id', sa.Integer(), nullable=False),
        sa.Column('seat_label', sa.String(length=16), nullable=False),
        sa.Column('reservation_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['showtime_id'], ['showtimes.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['reservation_id'], ['reservations.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('showtime_id', 'seat_label'),
    )
    op.create_index(
        op.f('ix_reservation_seats_reservation_id'),
        'reservation_seats',
        ['reservation_id'],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index(op.f('ix_reservation_seats_reservation_id'), table_name='reservation_seats')
    op.drop_table('reservation_seats')
    op.drop_index(op.f('ix_reservations_showtime_id'), table_name='reservations')
    op.drop_index(op.f('ix_reservations_movie_id'), table_name='reservations')
    op.drop_index(op.f('ix_reservations_user_id'), table_name='reservations')
    op.drop_table('reservations')
    op.drop_index(op.f('ix_showtimes_movie_id'), table_name='showtimes')
    op.drop_table('showtimes')
    op.drop_index(op.f('ix_movies_genre'), table_name='movies')
    op.drop_table('movies')
    op.drop_index(op.f('ix_users_username'), table_name='users')
    op.drop_table('users')
